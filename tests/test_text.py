import pytest

from puzzlebox.text import (
    NUMBER_WORDS,
    ZeroOneQuery,
    brackets_balanced,
    check_equation,
    convert_unit,
    decode_uri,
    decual_equal,
    drop_char,
    encrypt,
    expand_decual,
    greet,
    is_anagram,
    sort_lecture,
    word_value,
)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("listen", "silent", True),
        ("same", "same", False),
        ("abc", "abcd", False),
        ("abc", "abd", False),
    ],
)
def test_is_anagram(first, second, expected):
    assert is_anagram(first, second) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()()", True),
        ("({[]})", True),
        ("a(b)c", True),
        ("({[}])", False),
        (")(", False),
        ("(((", False),
        ("", True),
    ],
)
def test_brackets_balanced(text, expected):
    assert brackets_balanced(text) is expected


def test_encrypt_pinned():
    assert encrypt("abcdef") == "acebdf"


@pytest.mark.parametrize("text", ["", "a", "hello", "abcdefg"])
def test_encrypt_is_permutation(text):
    result = encrypt(text)
    assert sorted(result) == sorted(text)
    assert result.startswith(text[::2])


def test_greet():
    assert greet("World") == "Hello, World!"


def test_drop_char_pinned():
    assert drop_char("MISSPELL", 2) == "MSSPELL"


@pytest.mark.parametrize("position", [0, 9, -1])
def test_drop_char_out_of_range(position):
    assert drop_char("MISSPELL", position) == "MISSPELL"


def test_drop_char_shortens_by_one():
    for position in range(1, 6):
        assert len(drop_char("abcde", position)) == 4


def test_decode_uri_escapes():
    assert decode_uri("a%20b") == "a b"
    assert decode_uri("%21%24%25%28%29%2a") == "!$%()*"


def test_decode_uri_plain_text_unchanged():
    assert decode_uri("plain") == "plain"


def test_decode_uri_decoded_percent_is_not_reread():
    assert decode_uri("%2520") == "%20"


@pytest.mark.parametrize("text", ["%2z", "%2", "abc%"])
def test_decode_uri_rejects_bad_escape(text):
    with pytest.raises(ValueError):
        decode_uri(text)


def test_sort_lecture_pairs_sorted():
    result = sort_lecture("DCBAAZ")
    pairs = [result[i : i + 2] for i in range(0, len(result), 2)]
    assert pairs == sorted(pairs)
    assert sorted(pairs) == sorted(["DC", "BA", "AZ"])


def test_sort_lecture_keeps_odd_tail():
    result = sort_lecture("DCBAx")
    assert result.endswith("x")
    assert len(result) == 5


def test_sort_lecture_idempotent():
    once = sort_lecture("ZZAAMMBB")
    assert sort_lecture(once) == once


def test_expand_decual_pinned():
    assert expand_decual("AB(CD)^2E") == "ABCDCDE"


def test_expand_decual_group_repeat_length():
    assert len(expand_decual("(XYZ)^10")) == 30
    assert expand_decual("(XYZ)^0") == ""


def test_expand_decual_letters_only():
    assert expand_decual("HELLO") == "HELLO"


def test_expand_decual_rejects_lowercase():
    with pytest.raises(ValueError):
        expand_decual("ab")


def test_decual_equal():
    assert decual_equal("(AB)^2", "ABAB") is True
    assert decual_equal("AB", "BA") is False


def test_word_value():
    assert word_value("seven") == 7
    assert [word_value(word) for word in NUMBER_WORDS] == list(range(11))


def test_word_value_unknown():
    with pytest.raises(ValueError):
        word_value("eleven")


@pytest.mark.parametrize(
    "left, op, right, result, expected",
    [
        ("two", "+", "three", "five", True),
        ("two", "+", "three", "efvi", True),
        ("two", "+", "three", "four", False),
        ("two", "-", "three", "one", False),
        ("five", "*", "five", "ten", False),
        ("two", "*", "five", "ten", True),
    ],
)
def test_check_equation(left, op, right, result, expected):
    assert check_equation(left, op, right, result) is expected


def test_check_equation_bad_operator():
    with pytest.raises(ValueError):
        check_equation("one", "/", "one", "one")


def test_check_equation_bad_operand():
    with pytest.raises(ValueError):
        check_equation("one", "+", "eleven", "one")


def test_convert_unit_factors():
    assert convert_unit(1, "kg") == (pytest.approx(2.2046), "lb")
    assert convert_unit(1, "l") == (pytest.approx(0.2642), "g")
    assert convert_unit(1, "lb") == (pytest.approx(0.4536), "kg")
    assert convert_unit(1, "g") == (pytest.approx(3.7854), "l")


@pytest.mark.parametrize("unit", ["kg", "l", "lb", "g"])
def test_convert_unit_round_trip(unit):
    value, other = convert_unit(5.0, unit)
    back, original = convert_unit(value, other)
    assert original == unit
    assert back == pytest.approx(5.0, rel=1e-3)


def test_convert_unit_unknown():
    with pytest.raises(ValueError):
        convert_unit(1, "oz")


def test_zero_one_query():
    query = ZeroOneQuery("0000111")
    assert query.same(0, 3) is True
    assert query.same(3, 4) is False
    assert query.same(6, 4) is True
    assert query.same(2, 2) is True


def test_zero_one_query_out_of_range():
    query = ZeroOneQuery("01")
    with pytest.raises(IndexError):
        query.same(0, 2)
    with pytest.raises(IndexError):
        query.same(-1, 0)