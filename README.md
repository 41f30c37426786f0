# contestkit

A collection of small puzzle solvers from programming contests. Each puzzle
is a plain Python function that takes already parsed values and returns the
answer. A command-line tool reads the input of a few of the puzzles in the
usual contest format.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Using the functions

The solvers are in four modules, grouped by the shape of their input:

- `contestkit.simple`: one or two numbers in, one answer out: `chess_win`,
  `exercise_and_rest`, `ipl_verdict`, `max_sixers`, `maximum_slams`,
  `missing_shoes`, `nearest_multiple_of_three`, `pizzas_needed`,
  `pizza_split`, `best_gems`, `water_park`.
- `contestkit.arithmetic`: small numeric puzzles: `gcd_additions`,
  `extra_aircraft`, `lucky_difference`, `is_hattrick`,
  `incremental_game_winner`, `can_jump`, `max_triangle`, `nearest_square`,
  `reduce_number`, `max_binary_string_coins`, `chococut`.
- `contestkit.arrays`: puzzles over a list of numbers: `review_verdicts`,
  `approval_cost`, `balanced_lighting`, `bar_queue_entries`, `best_movie`,
  `total_breaks`, `shortest_two_distinct`, `people_ahead`,
  `min_max_deletion`, `no_odd_sum_operations`, `minimum_security_time`,
  `subset_sum_divisible_by_three`, `sum_to_zero`, `max_alternate_sum`,
  `can_unlock`, `min_monster_time`.
- `contestkit.strings`: puzzles over binary strings: `can_light_all` and
  `one_down`.

```python
from contestkit.simple import max_sixers
from contestkit.arithmetic import reduce_number
from contestkit.arrays import total_breaks

max_sixers(20)          # 3
reduce_number(8)        # 1
total_breaks([3, 1, 2]) # 3
```

Where a puzzle has no answer for its input, the function returns `None`
rather than a sentinel number: `max_triangle`, `best_movie`,
`shortest_two_distinct` and `sum_to_zero` behave this way. Input that cannot
be answered at all, such as an empty list where one value is needed, the
wrong number of scores or balls, or `reduce_number(0)`, raises `ValueError`;
`min_max_deletion` raises `IndexError` for an update position outside the
list.

Yes/no puzzles return `bool`. `ipl_verdict` returns `"THALA"` or `"BOOM"`,
and `incremental_game_winner` returns `"Alice"` or `"Bob"`.

## Command line

`contestkit` takes the name of a puzzle and reads its input from standard
input, writing one answer per line to standard output:

```
echo 7 | contestkit ipl
```

It accepts three puzzle names:

- `ipl`: a single number; prints `THALA` or `BOOM`.
- `bar-queue`: a count of test cases, then for each case a length `n` and `n`
  characters (`B` or `G`); prints how many people enter.
- `min-max-deletion`: a count of test cases, then for each case `n` and `q`,
  `n` values and `q` pairs of position and new value; prints one answer per
  update.

Malformed or truncated input makes it print an error to standard error and
exit with status 1. Run `contestkit --help` to see the usage.

The same work is available from Python through
`contestkit.cli.solve_text(problem, text)`, which returns the output as a
string and raises `ValueError` for an unknown puzzle name or bad input.

## What it does not do

Only the three puzzles above can be run from the command line. Every other
solver is available only as a Python function, and its contest-format input
has to be parsed by the caller.