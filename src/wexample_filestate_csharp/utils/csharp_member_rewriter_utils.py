from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Union

from wexample_filestate_csharp.utils.csharp_member_grouping_utils import MemberGroup
from wexample_filestate_csharp.utils.csharp_scope_layout_utils import (
    AnchorSegment,
    MemberSegment,
    ScopeLayout,
    TriviaSegment,
)
from wexample_filestate_csharp.utils.csharp_trivia_utils import (
    detect_newline,
    ends_in_line_comment,
    ends_with_line_break,
    normalize_leading_blank_lines,
)

RenderItem = Callable[[Union[AnchorSegment, MemberSegment]], bytes]


def placement_map(
    groups: Sequence[MemberGroup], orders: Sequence[tuple[int, ...]]
) -> dict[int, int]:
    """Map each member slot to the member that now occupies it."""
    placement: dict[int, int] = {}
    for group, order in zip(groups, orders):
        for slot, member_index in zip(group.indices, order):
            placement[slot] = member_index
    return placement


def scope_newline(layout: ScopeLayout) -> bytes | None:
    """Line break used around the scope's members, None on a single line."""
    newline = detect_newline(member.leading for member in layout.members)
    if newline is None:
        newline = detect_newline(member.trailing for member in layout.members)
    return newline


def render_scope(
    layout: ScopeLayout,
    placement: dict[int, int],
    render_item: RenderItem,
    normalize_blank_lines: bool = False,
    newline: bytes = b"\n",
) -> bytes:
    """Rebuild a scope's text with members placed in their new slots.

    Positional trivia and anchors are written where they were. A moved
    member carries its own leading and trailing trivia. With
    ``normalize_blank_lines`` every member after the first gets exactly one
    blank line before it.
    """
    output = bytearray()
    first_member = True
    last_item = max(
        (
            position
            for position, segment in enumerate(layout.segments)
            if not isinstance(segment, TriviaSegment)
        ),
        default=-1,
    )

    for position, segment in enumerate(layout.segments):
        if isinstance(segment, TriviaSegment):
            output += segment.text
            continue

        if isinstance(segment, AnchorSegment):
            output += render_item(segment)
            output += segment.trailing
            continue

        member = layout.members[placement.get(segment.index, segment.index)]
        leading = member.leading
        if normalize_blank_lines and not first_member:
            leading = normalize_leading_blank_lines(
                leading,
                newline=newline,
                after_line_break=ends_with_line_break(output),
            )
        first_member = False

        output += leading
        output += render_item(member)
        output += member.trailing
        if position != last_item and ends_in_line_comment(member.trailing):
            # The comment ran to the end of the scope; close it before moving on.
            output += newline

    return bytes(output)
