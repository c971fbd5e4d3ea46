import io

import pytest

from puzzlebox.cli import main


def run(monkeypatch, capsys, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_hello_greets_each_name(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["hello"], "2\nWorld\nAlice\n")
    assert status == 0
    assert out == "Hello, World!\nHello, Alice!\n"


def test_hello_reads_only_count_names(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["hello"], "1 Bob Carol")
    assert status == 0
    assert out.splitlines() == ["Hello, Bob!"]


def test_hello_zero_cases_prints_nothing(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["hello"], "0\n")
    assert status == 0
    assert out == ""


def test_hello_missing_name_fails(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, ["hello"], "3\nA\nB\n")
    assert status == 1
    assert out == ""
    assert "missing name" in err


def test_hello_bad_count_fails(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["hello"], "many\n")
    assert status == 1
    assert "case count" in err


def test_convert_kilograms(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["convert"], "1\n1 kg\n")
    assert status == 0
    assert out == "1 2.2046 lb\n"


def test_convert_numbers_cases_and_units(monkeypatch, capsys):
    stdin = "4\n1 kg\n1 l\n1 lb\n1 g\n"
    status, out, _ = run(monkeypatch, capsys, ["convert"], stdin)
    assert status == 0
    assert out.splitlines() == [
        "1 2.2046 lb",
        "2 0.2642 g",
        "3 0.4536 kg",
        "4 3.7854 l",
    ]


def test_convert_unknown_unit_reports_error(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["convert"], "2\n5 oz\n1 kg\n")
    assert status == 0
    assert out.splitlines() == ["1 error", "2 2.2046 lb"]


def test_convert_output_has_four_decimals(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["convert"], "1\n2.5 lb\n")
    assert status == 0
    case, value, unit = out.split()
    assert case == "1"
    assert unit == "kg"
    assert len(value.split(".")[1]) == 4
    assert float(value) == pytest.approx(2.5 * 0.4536, abs=1e-4)


def test_convert_bad_value_fails(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["convert"], "1\nheavy kg\n")
    assert status == 1
    assert "value" in err


def test_convert_missing_unit_fails(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["convert"], "1\n3\n")
    assert status == 1
    assert "missing unit" in err


def test_unknown_command_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["nothing"])
    assert excinfo.value.code == 2


def test_command_is_required(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2