# puzzlebox

Small, self-contained solvers for well-known programming-contest puzzles.
Each solver is a plain Python function. You pass it the puzzle's input as
ordinary Python values and it returns the answer. When the input does not
describe a valid puzzle, most solvers raise `ValueError`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlebox.text`

String puzzles.

- `is_anagram(first, second)`: true when the two words are different
  rearrangements of the same letters.
- `brackets_balanced(text)`: checks that `()`, `{}` and `[]` are properly
  nested and closed.
- `encrypt(text)`: returns the characters at even positions followed by the
  characters at odd positions.
- `greet(name)`: returns `"Hello, <name>!"`.
- `drop_char(word, position)`: removes the character at a 1-based position.
  A position out of range leaves the word unchanged.
- `decode_uri(text)`: decodes the escapes `%20 %21 %24 %25 %28 %29 %2a`. Any
  other escape raises `ValueError`.
- `sort_lecture(text)`: sorts the two-character codes of a string. A
  trailing odd character stays last.
- `expand_decual(text)`: expands a compressed string. Capital-letter runs
  are copied as they are. A group such as `(XY)^3` is repeated. Digits that
  follow no group expand to nothing.
- `decual_equal(first, second)`: compares the two expansions.
- `word_value(word)`: returns the value of an English number word from
  "zero" to "ten".
- `check_equation(left, operator, right, result)`: evaluates `+`, `-` or
  `*` on number words. It returns true when the result, which must lie from
  0 to 10, is named by an anagram of `result`.
- `convert_unit(value, unit)`: converts between kg/lb and between l/g
  (gallons). It returns `(value, new_unit)`.
- `ZeroOneQuery(text).same(first, second)`: tells whether two 0-based
  positions lie in the same run of equal characters.

### `puzzlebox.combinatorics`

Search and dynamic programming.

- `count_board_covers(board)`: counts the coverings of a board's `.` cells
  with L-shaped triominoes. `#` marks a filled cell.
- `count_pairings(count, pairs)`: counts the ways to split students into
  pairs of friends.
- `count_queens(size)`: counts N-queens solutions.
- `tilings(width)`: counts domino tilings of a 2 × width strip, modulo
  1000000007.
- `asymmetric_tilings(width)`: counts the tilings that are not
  mirror-symmetric, modulo 1000000007.
- `pi_difficulty(digits)`: returns the least difficulty of splitting a digit
  string into pieces of 3 to 5 digits.
- `triangle_max_path(rows)`: returns the best path sum from the apex of a
  number triangle to its base.
- `lis_length(values)`: returns the length of the longest strictly
  increasing subsequence.

### `puzzlebox.arithmetic`

Numeric puzzles.

- `baseball_wins_needed(ours, theirs)`: returns the wins still needed.
- `fourth_vertex(points)`: returns the missing corner of an axis-aligned
  rectangle, given its other three corners.
- `swap_endian(number)`: reverses the byte order of a 32-bit integer.
- `count_fixed(values)`: counts the values that equal their 1-based
  position.
- `within_budget(limit, usages)`: checks whether the total of `usages` stays
  within `limit`.
- `monthly_payment(amount, months, rate)`: finds the smallest fixed payment
  by bisection. `rate` is the yearly rate in percent.
- `moon_area(first, second, distance)`: returns the area of the first circle
  that the second circle leaves uncovered.
- `count_with_divisors(divisors, low, high)`: counts the integers in
  `low..high` that have exactly `divisors` divisors.
- `repeatless(index)`: returns the index-th positive integer with no
  repeated digit.
- `max_subarray_sum(values)`: returns the largest sum of a contiguous run,
  or 0 when no run is positive.
- `min_average(costs, min_length)`: returns the least average over
  contiguous runs of at least `min_length` costs.
- `max_pair_average(values)`: pairs the smallest value with the largest and
  returns the largest pair average.
- `bookstore_min_cost(offers)`: returns the cheapest single-store purchase
  when earned points pay toward later books.

### `puzzlebox.structures`

Heaps, queues and simulations.

- `min_baking_time(times)`: returns the optimal three-oven baking time.
- `greedy_baking_time(times)`: returns the baking time of the greedy
  schedule.
- `insertion_order(shifts)`: recovers the original ranks from the shifts
  that insertion sort made.
- `ites_signals(count)`: returns the first values of the pseudo-random
  signal sequence.
- `count_ites(target, count)`: counts the contiguous runs of signals that
  sum to `target`.
- `josephus_survivors(count, step)`: returns the last two people standing.
- `magic_power(powers, uses)`: returns the total gathered by repeatedly
  drawing from the strongest source.
- `nerd_count_sum(people)`: after each arrival, counts the people who are
  not outclassed, and returns the sum of those counts.
- `quicksort(values)`: returns a sorted copy.
- `quicksort_steps(values)`: returns a generator that yields a copy of the
  list after each partition.
- `running_median_sum(count, multiplier, increment)`: returns the sum of the
  running medians of the generated sequence, modulo 20090711.

## Examples

```python
from puzzlebox.text import is_anagram, brackets_balanced
from puzzlebox.combinatorics import count_queens, tilings
from puzzlebox.structures import quicksort

is_anagram("listen", "silent")      # True
brackets_balanced("({[]})")         # True
count_queens(8)                     # 92
tilings(5)                          # number of 2 x 5 domino tilings, mod 1000000007
quicksort([74, 52, 62, 15, 7])      # [7, 15, 52, 62, 74]
```

## Command line

The package installs a `puzzlebox` command. Its subcommands read whitespace-
separated input from standard input. The first token is the number of cases.

```
puzzlebox --help
```

`puzzlebox hello` reads names and prints one greeting per name:

```
$ printf '2 Alice Bob' | puzzlebox hello
Hello, Alice!
Hello, Bob!
```

`puzzlebox convert` reads value/unit pairs (`kg`, `lb`, `l`, `g`). Each
output line holds the case number, the converted value to four decimals and
the new unit. An unknown unit prints `<case> error`:

```
$ printf '2 1 kg 3 m' | puzzlebox convert
1 2.2046 lb
2 error
```

If the input is missing or malformed, the command prints a message to
standard error and exits with status 1.

## What it does not do

Only `hello` and `convert` are available on the command line. Every other
solver can be used only as a library function called from Python. None of
them has a command that reads puzzle input from standard input.