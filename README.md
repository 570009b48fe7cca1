# advent

Solvers for a selection of Advent of Code puzzles, together with the small
toolkit they are built on: a de-duplicating dictionary, integer and
floating-point coordinate types, sparse and dense 2-D grids with a plain-text
renderer, and a harness that finds a day's solver and runs it.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a puzzle

The `advent` command takes a year and a day:

```
advent 2022 5
advent 2015 3 --data input --step two
```

Options:

- `-d`, `--data sample|input`: which puzzle file to read (default `sample`).
- `-s`, `--step one|two|all`: which part(s) to run (default `all`).
- `-f`, `--format compact|plain|pretty|json`: how log messages are shown
  (default `plain`).

Puzzle files are read relative to the current directory, from
`src/y{year}/d{day:02}/{sample,input}.txt`. For example, the real input for
2022 day 5 goes in `src/y2022/d05/input.txt`. Answers are written as log
messages at the INFO level. The `ADVENT_LOG` environment variable sets the
log level by name (for example `DEBUG`); it defaults to `INFO`.

`advent --help` prints the options and then the list of puzzles that have
solvers. If you leave out the year and day, or give one that has no solver,
the command stops with an error that includes the same list. The command
exits with status 0 on success, 1 when a puzzle fails and 2 on bad arguments.

## Puzzles with solvers

- 2015: days 1, 2, 3, 4, 5, 6, 19
- 2022: days 1 through 8
- 2023: days 1, 2

## Using the library

Each day's puzzle is a subclass of `advent.puzzle.Puzzle`. Its `parse`
class method reads the puzzle text and returns the unconsumed rest of the
text together with the puzzle. The puzzle then runs `after_parse`,
`prepare_1` / `part_1` and `prepare_2` / `part_2`:

```python
from advent.y2022.d06 import Message

rest, puzzle = Message.parse("mjqjpqmgbljsphdztnvjfqwrcgsmlb")
print(puzzle.part_1())  # 7
```

Parsing failures raise `advent.puzzle.ParseError`; failures while solving
raise `advent.puzzle.PuzzleError`. `advent.puzzle.Solver` ties a year and day
to a parser, loads the input file and runs the requested parts;
`advent.cli.solutions()` returns every registered parser, keyed by year and
then day.

The shared building blocks are:

- `advent.dictionary.Dictionary`: stores each value once and hands back a
  stable `Identifier` for it.
- `advent.points`: `Cartesian2D` and `Cartesian3D` integer points,
  `Direction2D` and `DirectionSet2D`.
- `advent.sparse.SparseGrid2D` / `SparseGrid3D` and
  `advent.dense.DenseGrid2D`: grids. The 2-D grids can be drawn with
  `advent.display.DisplayGrid.render`, which adds hexadecimal row and column
  rulers and uses box-drawing characters when called with `fancy=True`.
- `advent.arithmetic`: floating-point points, vectors and particles.
- `advent.puzzle`: `unify_ranges_inclusive`, `parse_number` and
  `written_number`.

## Limitations

- 2015 day 19 solves part 1 only; asking for part 2 fails with
  "have not yet solved part 2".
- 2022 day 5 answers with text, not a number: the top crates are logged and
  left in `Dockyard.answer`, while `part_1` and `part_2` return 0.
- `DisplayGrid.render` raises `ValueError` for grids that do not span more
  than two cells along either axis, as it has no room for a ruler.
- The command does not fetch puzzle input; the files must already be in place.