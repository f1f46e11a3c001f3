from __future__ import annotations

import re
from collections.abc import Iterable

from wexample_filestate_csharp.enum.structure_marker import StructureMarker

# Directives that open, branch or close a structural block. C# allows blanks
# between "#" and the directive name.
STRUCTURE_DIRECTIVE_RE = re.compile(
    rb"^[ \t]*#[ \t]*(if|elif|else|endif|region|endregion)\b"
)

_INLINE_BLANKS = (b" ", b"\t", b"\f", b"\v")
_LINE_BREAK_RE = re.compile(rb"\r\n|\r|\n")


def scan_trailing_trivia(source: bytes, start: int, limit: int) -> int:
    """Return the end offset of the same-line trivia following ``start``.

    Consumes blanks and comments that stay on the current line, then the
    line break itself when one is reached. A block comment running onto
    another line is left to whatever follows.
    """
    pos = start
    while pos < limit:
        char = source[pos : pos + 1]
        if char in _INLINE_BLANKS:
            pos += 1
            continue
        if source.startswith(b"//", pos):
            pos = _line_end(source, pos, limit)
            continue
        if source.startswith(b"/*", pos):
            close = source.find(b"*/", pos + 2, limit)
            if close == -1 or _has_line_break(source[pos:close]):
                return pos
            pos = close + 2
            continue
        if source.startswith(b"\r\n", pos) and pos + 1 < limit:
            return pos + 2
        if char in (b"\n", b"\r"):
            return pos + 1
        return pos
    return pos


def split_gap(gap: bytes) -> tuple[bytes, bytes, tuple[StructureMarker, ...]]:
    """Split the trivia before a member into positional and personal parts.

    Everything up to and including the last structural directive line stays
    where it is; the rest belongs to the member and moves with it.
    """
    lines = gap.splitlines(keepends=True)
    markers: list[StructureMarker] = []
    last_directive = -1
    in_block_comment = False

    for number, line in enumerate(lines):
        if not in_block_comment:
            marker = directive_marker(line)
            if marker is not None:
                markers.append(marker)
                last_directive = number
                continue
        in_block_comment = _block_comment_state(line, in_block_comment)

    positional = b"".join(lines[: last_directive + 1])
    return positional, gap[len(positional) :], tuple(markers)


def collect_markers(trivia: bytes) -> tuple[StructureMarker, ...]:
    return split_gap(trivia)[2]


def directive_marker(line: bytes) -> StructureMarker | None:
    match = STRUCTURE_DIRECTIVE_RE.match(line)
    if match is None:
        return None
    return StructureMarker.from_directive(match.group(1).decode("ascii"))


def detect_newline(chunks: Iterable[bytes]) -> bytes | None:
    """Return the first line break found in ``chunks``, as written."""
    for chunk in chunks:
        index = chunk.find(b"\n")
        if index == -1:
            if b"\r" in chunk:
                return b"\r"
            continue
        if index > 0 and chunk[index - 1 : index] == b"\r":
            return b"\r\n"
        return b"\n"
    return None


def ends_with_line_break(text: bytes | bytearray) -> bool:
    return text.endswith(b"\n") or text.endswith(b"\r")


def ends_in_line_comment(trailing: bytes) -> bool:
    """Whether same-line trailing trivia stops inside a ``//`` comment."""
    if ends_with_line_break(trailing):
        return False
    return _line_comment_start(trailing) != -1


def normalize_leading_blank_lines(
    leading: bytes, newline: bytes, after_line_break: bool
) -> bytes:
    """Drop blank lines from ``leading`` and put exactly one blank line first.

    Comment and directive lines are kept, as is the indentation in front of
    the declaration itself (the unterminated last line).
    """
    kept: list[bytes] = []
    in_block_comment = False
    for line in leading.splitlines(keepends=True):
        blank = ends_with_line_break(line) and line.strip() == b""
        if in_block_comment or not blank:
            kept.append(line)
        in_block_comment = _block_comment_state(line, in_block_comment)

    prefix = newline if after_line_break else newline * 2
    return prefix + b"".join(kept)


def line_and_column(source: bytes, offset: int) -> tuple[int, int]:
    """1-based line and character column of a byte offset."""
    line = 1
    line_start = 0
    for match in _LINE_BREAK_RE.finditer(source, 0, offset):
        line += 1
        line_start = match.end()
    column = len(source[line_start:offset].decode("utf-8", "replace")) + 1
    return line, column


def _line_end(source: bytes, pos: int, limit: int) -> int:
    end = pos
    while end < limit and source[end : end + 1] not in (b"\n", b"\r"):
        end += 1
    return end


def _has_line_break(text: bytes) -> bool:
    return b"\n" in text or b"\r" in text


def _block_comment_state(line: bytes, in_comment: bool) -> bool:
    pos = 0
    while pos < len(line):
        if in_comment:
            close = line.find(b"*/", pos)
            if close == -1:
                return True
            in_comment = False
            pos = close + 2
            continue

        line_comment = line.find(b"//", pos)
        block_comment = line.find(b"/*", pos)
        if block_comment == -1 or -1 < line_comment < block_comment:
            return False
        in_comment = True
        pos = block_comment + 2
    return in_comment


def _line_comment_start(text: bytes) -> int:
    pos = 0
    while True:
        line_comment = text.find(b"//", pos)
        block_comment = text.find(b"/*", pos)
        if block_comment == -1 or -1 < line_comment < block_comment:
            return line_comment
        close = text.find(b"*/", block_comment + 2)
        if close == -1:
            return -1
        pos = close + 2
