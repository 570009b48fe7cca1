"""Reconstructing a filesystem from a terminal session."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from advent.puzzle import ParseError, Puzzle, PuzzleError

logger = logging.getLogger(__name__)

_REST_OF_LINE = re.compile(r"[^\r\n]*")
_FILE = re.compile(r"([+-]?[0-9]+) ([^\r\n]*)")
_I64 = range(-(2**63), 2**63)
_ROOT = "$ cd /"


@dataclass
class FsNode:
    """A directory, holding named children, or a file, holding a size."""

    contents: dict[str, FsNode] | None = field(default_factory=dict)
    size: int | None = None

    @classmethod
    def mkdir(cls) -> FsNode:
        """An empty directory."""
        return cls()

    @classmethod
    def touch(cls, size: int) -> FsNode:
        """A file of the given size."""
        return cls(contents=None, size=size)

    @property
    def is_dir(self) -> bool:
        return self.contents is not None

    def dig(self, path: str | PurePosixPath, name: str, node: FsNode) -> None:
        """Place node as name inside the directory at path, creating directories."""
        if self.contents is None:
            raise PuzzleError("cannot dig through a file")
        cursor = self.contents
        for part in PurePosixPath(path).parts:
            if part == "/":
                cursor = self.contents
            elif part in (".", ".."):
                continue
            else:
                child = cursor.setdefault(part, FsNode.mkdir())
                if child.contents is None:
                    raise PuzzleError("cannot make a directory tree through a file")
                cursor = child.contents
        cursor[str(name)] = node

    def render(self, name: str, level: int = 0) -> str:
        """An indented listing of this node and everything below it."""
        head = "  " * level + str(name)
        if self.contents is None:
            return f"{head}: {self.size}\n"
        lines = [f"{head}/\n"]
        lines.extend(self.contents[child].render(child, level + 1) for child in sorted(self.contents))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render("<root>", 0)


@dataclass(frozen=True)
class Command:
    """One line of the session: a command or a line of listing output."""

    class Kind(enum.Enum):
        List = "list"
        Root = "root"
        GoUp = "up"
        GoDown = "down"
        Dir = "dir"
        File = "file"

    kind: Command.Kind = Kind.List
    name: str = ""
    size: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, Command]:
        """Parse one session line."""
        if text.startswith("$ ls"):
            return text[4:], cls(cls.Kind.List)
        if text.startswith(_ROOT):
            return text[len(_ROOT):], cls(cls.Kind.Root)
        if text.startswith("$ cd .."):
            return text[7:], cls(cls.Kind.GoUp)
        for prefix, kind in (("$ cd ", cls.Kind.GoDown), ("dir ", cls.Kind.Dir)):
            if text.startswith(prefix):
                match = _REST_OF_LINE.match(text, len(prefix))
                return text[match.end():], cls(kind, match.group())
        match = _FILE.match(text)
        if match is None or int(match.group(1)) not in _I64:
            raise ParseError(f"expected a session line at {text[:16]!r}")
        return text[match.end():], cls(cls.Kind.File, match.group(2), int(match.group(1)))

    def __str__(self) -> str:
        kind = self.kind
        if kind is Command.Kind.List:
            return "$ ls"
        if kind is Command.Kind.Root:
            return "$ cd /"
        if kind is Command.Kind.GoUp:
            return "$ cd .."
        if kind is Command.Kind.GoDown:
            return f"$ cd {self.name}"
        if kind is Command.Kind.Dir:
            return f"- [dir] {self.name}"
        return f"- [txt] {self.name}: {self.size}"


@dataclass
class Navigator(Puzzle):
    """A session script and the filesystem it describes."""

    script: list[Command] = field(default_factory=list)
    fs: FsNode = field(default_factory=FsNode)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Navigator]:
        """Parse "$ cd /" on its own line, then one session line per line."""
        if not text.startswith(_ROOT + "\n"):
            raise ParseError(f"expected {_ROOT!r} at {text[:16]!r}")
        rest, first = Command.parse(text[len(_ROOT) + 1:])
        script = [first]
        while rest.startswith("\n"):
            try:
                after, command = Command.parse(rest[1:])
            except ParseError:
                break
            script.append(command)
            rest = after
        return rest, cls(script)

    def after_parse(self) -> None:
        """Replay the script to build the filesystem."""
        cwd = PurePosixPath("/")
        for command in self.script:
            kind = command.kind
            if kind is Command.Kind.List:
                continue
            if kind is Command.Kind.Root:
                cwd = PurePosixPath("/")
            elif kind is Command.Kind.GoUp:
                cwd = cwd.parent
            elif kind is Command.Kind.GoDown:
                cwd = cwd / command.name
            elif kind is Command.Kind.Dir:
                self.fs.dig(cwd, command.name, FsNode.mkdir())
            else:
                self.fs.dig(cwd, command.name, FsNode.touch(command.size))
        logger.debug("structured:\n%s", self)

    def __str__(self) -> str:
        return str(self.fs)