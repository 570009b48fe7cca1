"""Command-line harness that runs a registered puzzle solution."""

from __future__ import annotations

import argparse
import enum
import json
import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache

from advent.puzzle import PuzzleError, Solver
from advent.y2015 import d01 as y2015_d01
from advent.y2015 import d02 as y2015_d02
from advent.y2015 import d03 as y2015_d03
from advent.y2015 import d04 as y2015_d04
from advent.y2015 import d05 as y2015_d05
from advent.y2015 import d06 as y2015_d06
from advent.y2015 import d19 as y2015_d19
from advent.y2022 import d01 as y2022_d01
from advent.y2022 import d02 as y2022_d02
from advent.y2022 import d03 as y2022_d03
from advent.y2022 import d04 as y2022_d04
from advent.y2022 import d05 as y2022_d05
from advent.y2022 import d06 as y2022_d06
from advent.y2022 import d07 as y2022_d07
from advent.y2022 import d08 as y2022_d08
from advent.y2023 import d01 as y2023_d01
from advent.y2023 import d02 as y2023_d02

logger = logging.getLogger(__name__)

LOG_ENV = "ADVENT_LOG"

_REGISTERED = (
    (2015, 1, y2015_d01.Elevator),
    (2015, 2, y2015_d02.Dimensions),
    (2015, 3, y2015_d03.Map),
    (2015, 4, y2015_d04.Miner),
    (2015, 5, y2015_d05.NaughtyList),
    (2015, 6, y2015_d06.LightGrid),
    (2015, 19, y2015_d19.Synth),
    (2022, 1, y2022_d01.Commissary),
    (2022, 2, y2022_d02.RockPaperScissors),
    (2022, 3, y2022_d03.Rucksacks),
    (2022, 4, y2022_d04.Camp),
    (2022, 5, y2022_d05.Dockyard),
    (2022, 6, y2022_d06.Message),
    (2022, 7, y2022_d07.Navigator),
    (2022, 8, y2022_d08.Forest),
    (2023, 1, y2023_d01.Calibration),
    (2023, 2, y2023_d02.GameSet),
)


@lru_cache(maxsize=None)
def solutions() -> dict:
    """Registered puzzle parsers, keyed by year and then day, both in order."""
    registry: dict = {}
    for year, day, puzzle in sorted(_REGISTERED, key=lambda entry: entry[:2]):
        registry.setdefault(year, {})[day] = puzzle.parse
    return registry


def render_known_puzzles() -> str:
    """A listing of every registered year and day."""
    lines = ["Known solutions are:"]
    for year, days in solutions().items():
        lines.append(f"- y{year}: " + ", ".join(f"d{day:02}" for day in days))
    lines.append("Do not use the `y` or `d` prefixes when providing arguments.")
    return "\n".join(lines)


class Data(enum.Enum):
    """Which input file to read."""

    Sample = "sample"
    Input = "input"

    def __str__(self) -> str:
        return self.name


class Step(enum.Enum):
    """Which part, or parts, to run."""

    One = "one"
    Two = "two"
    All = "all"

    def __str__(self) -> str:
        return self.name


class TraceFormat(enum.Enum):
    """How log messages are rendered."""

    Compact = "compact"
    Plain = "plain"
    Pretty = "pretty"
    Json = "json"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Args:
    """The requested puzzle and how to run it."""

    year: int
    day: int
    data: Data = Data.Sample
    step: Step = Step.All
    format: TraceFormat = TraceFormat.Plain

    def execute_program(self) -> tuple[int | None, int | None]:
        """Run the requested parts, returning their answers (None when not run)."""
        year, day = self.year, self.day
        label = f"{year}-{day:02}"
        func = solutions().get(year, {}).get(day)
        if func is None:
            raise PuzzleError(f"{label} has no registered solution\n{render_known_puzzles()}")
        solver = Solver(year, day, func)
        logger.debug("found solver for %s", label)

        text = solver.load_input(self.data.value)
        logger.info("%s: parsing", label)
        rest, puzzle = solver.parse(text)
        if rest.strip():
            logger.warning("%s: unparsed input remaining: %r", label, rest)

        logger.info("%s: processing", label)
        try:
            puzzle.after_parse()
        except Exception as err:
            raise PuzzleError(
                "input was successfully parsed, but was not valid for the rules of the puzzle"
            ) from err

        one = two = None
        if self.step is not Step.Two:
            one = _run_part(label, 1, puzzle.prepare_1, puzzle.part_1)
        if self.step is not Step.One:
            two = _run_part(label, 2, puzzle.prepare_2, puzzle.part_2)
        return one, two


def _run_part(label: str, part: int, prepare, run) -> int:
    logger.info("%s#%d: preparing", label, part)
    try:
        prepare()
    except Exception as err:
        raise PuzzleError(f"error preparing {label}#{part}") from err
    logger.info("%s#%d: running", label, part)
    try:
        answer = run()
    except Exception as err:
        raise PuzzleError(f"failure running {label}#{part}") from err
    logger.info("%s#%d: solved! answer=%r", label, part, answer)
    return answer


def _unsigned(bits: int):
    def convert(text: str) -> int:
        value = int(text)
        if not 0 <= value < 2**bits:
            raise argparse.ArgumentTypeError(f"{value} is out of range")
        return value

    convert.__name__ = f"u{bits}"
    return convert


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(2, f"{self.prog}: error: {message}\n\n{render_known_puzzles()}\n")


def parse_args(argv=None) -> Args:
    """Read the command line. Exits via SystemExit on help or bad input."""
    parser = _ArgumentParser(
        prog="advent",
        description="Runs an Advent of Code solution, reading puzzle data from "
        "src/y<year>/d<day>/ under the current directory.",
    )
    parser.add_argument("year", type=_unsigned(16), help="The desired puzzle year.")
    parser.add_argument("day", type=_unsigned(8), help="The desired puzzle day.")
    parser.add_argument(
        "-d", "--data", choices=[d.value for d in Data], default=Data.Sample.value,
        help="Whether to use the sample or real input data.",
    )
    parser.add_argument(
        "-s", "--step", choices=[s.value for s in Step], default=Step.All.value,
        help="Which step(s) to run.",
    )
    parser.add_argument(
        "-f", "--format", choices=[f.value for f in TraceFormat],
        default=TraceFormat.Plain.value, help="How to render log messages.",
    )
    ns = parser.parse_args(argv)
    return Args(ns.year, ns.day, Data(ns.data), Step(ns.step), TraceFormat(ns.format))


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "timestamp": self.formatTime(record),
                "level": record.levelname,
                "target": record.name,
                "message": record.getMessage(),
            }
        )


_FORMATS = {
    TraceFormat.Compact: "%(asctime)s %(levelname).1s %(message)s",
    TraceFormat.Plain: "%(asctime)s %(levelname)s %(name)s: %(message)s",
    TraceFormat.Pretty: "%(asctime)s %(levelname)s %(name)s\n    %(message)s",
}


def _configure_logging(trace_format: TraceFormat) -> None:
    level_name = os.environ.get(LOG_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_ENV} envvar cannot be parsed as a log level: {level_name!r}")
    handler = logging.StreamHandler()
    if trace_format is TraceFormat.Json:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_FORMATS[trace_format]))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def main(argv=None) -> int:
    """Entry point: returns the process exit status."""
    try:
        args = parse_args(argv)
    except SystemExit as exit_:
        code = exit_.code if isinstance(exit_.code, int) else (0 if exit_.code is None else 1)
        if code == 0:
            print("\n" + render_known_puzzles())
        return code
    try:
        _configure_logging(args.format)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    try:
        args.execute_program()
    except Exception as err:
        logger.error("%s", err, exc_info=err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())