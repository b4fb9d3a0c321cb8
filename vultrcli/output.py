"""Console rendering of API resources as aligned text, JSON or YAML."""

from __future__ import annotations

import abc
import io
import json
import sys
from dataclasses import dataclass
from typing import IO, Any, Iterable, NoReturn

import yaml

EMPTY_PLACEHOLDER = "---"
JSON_INDENT = "    "
SEPARATOR = "======================================"

_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)

Rows = list[list[str]]


@dataclass
class Links:
    """Paging cursors returned with a list response."""

    next: str = ""
    prev: str = ""


@dataclass
class Meta:
    """List metadata: the total count and the paging links."""

    total: int = 0
    links: Links | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Meta:
        links = data.get("links")
        return cls(
            total=int(data.get("total", 0)),
            links=None
            if links is None
            else Links(next=links.get("next") or "", prev=links.get("prev") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        links = None
        if self.links is not None:
            links = {"next": self.links.next, "prev": self.links.prev}
        return {"total": self.total, "links": links}


@dataclass
class Paging:
    """Paging values shown beneath list output."""

    total: int
    cursor_next: str = EMPTY_PLACEHOLDER
    cursor_prev: str = EMPTY_PLACEHOLDER

    def compose(self) -> Rows:
        return [
            [SEPARATOR],
            ["TOTAL", "NEXT PAGE", "PREV PAGE"],
            [str(self.total), self.cursor_next, self.cursor_prev],
        ]


@dataclass
class Total:
    """A total count shown beneath output that has no paging cursors."""

    total: int

    def compose(self) -> Rows:
        return [[SEPARATOR], ["TOTAL"], [str(self.total)]]


def new_paging(total: int, next_cursor: str, prev_cursor: str) -> Paging:
    """Build paging values, using placeholders for empty cursors."""
    return Paging(
        total=total,
        cursor_next=next_cursor or EMPTY_PLACEHOLDER,
        cursor_prev=prev_cursor or EMPTY_PLACEHOLDER,
    )


def new_paging_from_meta(meta: Meta | None) -> Paging | None:
    """Build paging values from list metadata; None when there is none."""
    if meta is None:
        return None
    if meta.links is None:
        return new_paging(meta.total, "", "")
    return new_paging(meta.total, meta.links.next, meta.links.prev)


def compose_paging(paging: Paging | None) -> Rows | None:
    """Rows for the paging section, or None when there is no paging."""
    return None if paging is None else paging.compose()


def _cell_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class TabWriter:
    """Aligns tab-separated cells into columns, padding with tabs."""

    def __init__(
        self,
        stream: IO[str] | None = None,
        *,
        min_width: int = 0,
        tab_width: int = 8,
        padding: int = 2,
    ) -> None:
        self._stream = stream
        self._min_width = min_width
        self._tab_width = tab_width
        self._padding = padding
        self._lines: list[list[str]] = [[]]
        self._cell: list[str] = []

    def write(self, text: str) -> None:
        for ch in text:
            if ch in "\t\v\n\f":
                self._lines[-1].append("".join(self._cell))
                self._cell = []
                if ch in "\n\f":
                    self._lines.append([])
            else:
                self._cell.append(ch)

    def write_row(self, cells: Iterable[Any]) -> None:
        self.write("\t".join(_cell_text(cell) for cell in cells) + "\n")

    def write_line(self, text: str) -> None:
        self.write(f"{text}\n")

    def flush(self) -> None:
        if self._cell:
            self._lines[-1].append("".join(self._cell))
            self._cell = []
        out: list[str] = []
        self._format(out, [], 0, len(self._lines))
        (self._stream or sys.stdout).write("".join(out))
        self._lines = [[]]

    def _format(self, out: list[str], widths: list[int], line0: int, line1: int) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(self._lines[this]) - 1:
                this += 1
                continue
            self._write_lines(out, widths, line0, this)
            line0 = this
            width = self._min_width
            while this < line1:
                line = self._lines[this]
                if column >= len(line) - 1:
                    break
                width = max(width, len(line[column]) + self._padding)
                this += 1
            self._format(out, [*widths, width], line0, this)
            line0 = this
        self._write_lines(out, widths, line0, line1)

    def _write_lines(self, out: list[str], widths: list[int], line0: int, line1: int) -> None:
        for i in range(line0, line1):
            for j, cell in enumerate(self._lines[i]):
                out.append(cell)
                if j < len(widths):
                    out.append(self._pad(len(cell), widths[j]))
            if i + 1 != len(self._lines):
                out.append("\n")

    def _pad(self, text_width: int, cell_width: int) -> str:
        if self._tab_width == 0:
            return ""
        tab = self._tab_width
        cell_width = -(-cell_width // tab) * tab
        return "\t" * -(-(cell_width - text_width) // tab)


class ResourceOutput(abc.ABC):
    """A resource that can be shown as text, JSON or YAML."""

    @abc.abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """The structure serialised for JSON and YAML output."""

    def json(self) -> bytes:
        return marshal_object(self, "json")

    def yaml(self) -> bytes:
        return marshal_object(self, "yaml")

    def columns(self) -> Rows | None:
        return None

    @abc.abstractmethod
    def data(self) -> Rows:
        """The rows shown in text output."""

    def paging(self) -> Rows | None:
        return None


@dataclass
class Message(ResourceOutput):
    """A plain informational message."""

    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}

    def columns(self) -> Rows:
        return [["MESSAGE"]]

    def data(self) -> Rows:
        return [[self.message]]


def info(message: str) -> Message:
    """Wrap a string as a displayable message."""
    return Message(message=message)


@dataclass
class Output:
    """Renders resources in the chosen output format."""

    output: str = "text"
    stream: IO[str] | None = None

    def render(self, resource: ResourceOutput) -> str:
        kind = self.output.lower()
        if kind == "json":
            return resource.json().decode() + "\n"
        if kind == "yaml":
            return resource.yaml().decode() + "\n"
        buffer = io.StringIO()
        writer = TabWriter(buffer)
        for rows in (resource.columns(), resource.data(), resource.paging()):
            for row in rows or ():
                writer.write_row(row)
        writer.flush()
        return buffer.getvalue()

    def display(self, resource: ResourceOutput, err: BaseException | None = None) -> None:
        stream = self.stream or sys.stdout
        if err is not None:
            print_error(err, stream)
        stream.write(self.render(resource))


def print_error(err: BaseException | str, stream: IO[str] | None = None) -> NoReturn:
    """Print an error with its header and exit with status 1."""
    stream = stream or sys.stdout
    writer = TabWriter(stream)
    writer.write_row(["ERROR MESSAGE", "STATUS CODE"])
    stream.write(str(err))
    writer.flush()
    raise SystemExit(1)


def marshal_object(obj: Any, fmt: str) -> bytes:
    """Serialise a resource (or plain data) as indented JSON or YAML."""
    data = obj.to_dict() if hasattr(obj, "to_dict") else obj
    if fmt == "json":
        text = json.dumps(data, indent=len(JSON_INDENT), ensure_ascii=False)
        for raw, escaped in _JSON_ESCAPES:
            text = text.replace(raw, escaped)
        return text.encode()
    if fmt == "yaml":
        text = yaml.safe_dump(
            data, sort_keys=False, allow_unicode=True, default_flow_style=False, indent=4
        )
        return text.encode()
    return b""


def array_of_strings_to_string(values: Iterable[str]) -> str:
    """Join strings as a bracketed, comma-delimited list."""
    return "[" + ", ".join(values) + "]"


def array_of_ints_to_string(values: Iterable[int]) -> str:
    """Render integers as a bracketed list, each followed by a delimiter."""
    return "[" + "".join(f"{value}, " for value in values) + "]"