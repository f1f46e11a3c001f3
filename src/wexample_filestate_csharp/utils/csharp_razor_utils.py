from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass

from wexample_filestate_csharp.common.formatting_result import FormattingResult
from wexample_filestate_csharp.common.member_order_policy import MemberOrderPolicy
from wexample_filestate_csharp.common.violation import Violation
from wexample_filestate_csharp.utils.csharp_member_order_utils import (
    check_members_order,
    format_members_order,
)

logger = logging.getLogger(__name__)

CODE_BLOCK_RE = re.compile(r"@code\s*\{", re.IGNORECASE)
WRAPPER_CLASS_NAME = "__RazorCodeBlock"
# The block's first line shares the line of the wrapper's opening brace.
_WRAPPER_HEADER_LINES = 1


@dataclass(frozen=True)
class RazorCodeBlock:
    """One ``@code { ... }`` block; ``body_start``/``body_end`` frame its code."""

    start: int
    end: int
    body_start: int
    body_end: int
    code: str


def is_razor_file(path: str) -> bool:
    return path.lower().endswith(".razor")


def extract_code_blocks(text: str) -> list[RazorCodeBlock]:
    blocks: list[RazorCodeBlock] = []
    search_from = 0

    for match in CODE_BLOCK_RE.finditer(text):
        if match.start() < search_from:
            continue

        close = find_closing_brace(text, match.end())
        if close is None:
            logger.debug("Unterminated @code block at offset %d", match.start())
            continue

        blocks.append(
            RazorCodeBlock(
                start=match.start(),
                end=close + 1,
                body_start=match.end(),
                body_end=close,
                code=text[match.end() : close],
            )
        )
        search_from = close + 1

    return blocks


def find_closing_brace(text: str, start: int) -> int | None:
    """Index of the brace closing the block opened just before ``start``.

    Braces inside string or character literals and comments do not count.
    """
    depth = 1
    position = start
    length = len(text)
    in_string = in_char = in_line_comment = in_block_comment = False

    while position < length:
        char = text[position]
        following = text[position + 1] if position + 1 < length else ""

        if in_line_comment:
            if char in "\r\n":
                in_line_comment = False
        elif in_block_comment:
            if char == "*" and following == "/":
                in_block_comment = False
                position += 1
        elif in_string or in_char:
            if char == "\\":
                position += 1
            elif char == '"' and in_string:
                in_string = False
            elif char == "'" and in_char:
                in_char = False
        elif char == "/" and following == "/":
            in_line_comment = True
            position += 1
        elif char == "/" and following == "*":
            in_block_comment = True
            position += 1
        elif char == '"':
            in_string = True
        elif char == "'":
            in_char = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return position

        position += 1

    return None


def wrap_code(code: str, newline: str = "\n") -> str:
    return f"public class {WRAPPER_CLASS_NAME}{newline}{{{code}}}"


def unwrap_code(wrapped: str, newline: str = "\n") -> str | None:
    prefix = f"public class {WRAPPER_CLASS_NAME}{newline}{{"
    suffix = "}"
    if not wrapped.startswith(prefix) or not wrapped.endswith(suffix):
        return None
    return wrapped[len(prefix) : len(wrapped) - len(suffix)]


def check_razor_members_order(
    text: str, policy: MemberOrderPolicy | None = None
) -> FormattingResult:
    return _process_razor(text, policy, reorder=False)


def format_razor_members_order(
    text: str, policy: MemberOrderPolicy | None = None
) -> FormattingResult:
    """Reorder members inside every ``@code`` block of a Razor component.

    Markup is never touched and unchanged blocks keep their exact bytes. A
    block that does not parse is left alone and flags the result as
    ``parse_failed`` while the other blocks are still processed.
    """
    return _process_razor(text, policy, reorder=True)


def _process_razor(
    text: str, policy: MemberOrderPolicy | None, reorder: bool
) -> FormattingResult:
    newline = _detect_newline(text)
    parts: list[str] = []
    violations: list[Violation] = []
    parse_failed = False
    position = 0

    for block in extract_code_blocks(text):
        wrapped = wrap_code(block.code, newline)
        if reorder:
            result = format_members_order(wrapped, policy)
        else:
            result = check_members_order(wrapped, policy)

        if result.parse_failed:
            logger.debug("@code block at offset %d could not be parsed", block.start)
            parse_failed = True
            continue

        violations.extend(
            _relocate_violation(violation, text, block) for violation in result.violations
        )

        if result.formatted_text is None:
            continue

        code = unwrap_code(result.formatted_text, newline)
        if code is None:
            logger.warning(
                "Could not unwrap reordered @code block at offset %d", block.start
            )
            continue

        parts.append(text[position : block.body_start])
        parts.append(code)
        position = block.body_end

    parts.append(text[position:])
    formatted = "".join(parts)

    return FormattingResult(
        original_text=text,
        formatted_text=formatted if reorder and formatted != text else None,
        violations=tuple(violations),
        parse_failed=parse_failed,
    )


def _relocate_violation(
    violation: Violation, text: str, block: RazorCodeBlock
) -> Violation:
    body_line = text.count("\n", 0, block.body_start) + 1
    code_line = violation.line - _WRAPPER_HEADER_LINES
    column = violation.column
    if code_line == 1:
        # Drop the wrapper's brace, add the text before the block on its line.
        line_start = text.rfind("\n", 0, block.body_start) + 1
        column += block.body_start - line_start - 1

    return dataclasses.replace(
        violation, line=body_line + code_line - 1, column=column
    )


def _detect_newline(text: str) -> str:
    index = text.find("\n")
    if index > 0 and text[index - 1] == "\r":
        return "\r\n"
    return "\n"
