from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

from tree_sitter import Node

from wexample_filestate_csharp.enum.structure_marker import StructureMarker
from wexample_filestate_csharp.utils.csharp_trivia_utils import (
    collect_markers,
    scan_trailing_trivia,
    split_gap,
)


@dataclass(frozen=True)
class ScopeItem:
    start: int
    end: int
    node: Node | None
    orderable: bool


@dataclass(frozen=True)
class TriviaSegment:
    """Scope text that keeps its position whatever moves around it."""

    text: bytes
    markers: tuple[StructureMarker, ...] = ()


@dataclass(frozen=True)
class AnchorSegment:
    start: int
    end: int
    node: Node | None
    trailing: bytes


@dataclass(frozen=True)
class MemberSegment:
    """An orderable declaration with the trivia that travels with it."""

    index: int
    start: int
    end: int
    node: Node | None
    leading: bytes
    trailing: bytes
    markers_before: tuple[StructureMarker, ...] = field(default=())


Segment = Union[TriviaSegment, AnchorSegment, MemberSegment]


@dataclass(frozen=True)
class ScopeLayout:
    segments: tuple[Segment, ...]
    members: tuple[MemberSegment, ...]
    trailing_markers: tuple[StructureMarker, ...] = ()

    def markers_before_members(self) -> list[tuple[StructureMarker, ...]]:
        return [member.markers_before for member in self.members]


def build_scope_layout(
    source: bytes,
    start: int,
    end: int,
    items: Sequence[ScopeItem],
    braced: bool = True,
) -> ScopeLayout:
    """Cut ``source[start:end]`` into positional trivia, anchors and members.

    Joining the text of every segment, with each member rendered as its
    leading trivia, its own bytes and its trailing trivia, gives back the
    original range exactly.
    """
    segments: list[Segment] = []
    members: list[MemberSegment] = []
    pending_markers: list[StructureMarker] = []
    position = start

    if braced:
        head_end = scan_trailing_trivia(source, position, end)
        if head_end > position:
            segments.append(TriviaSegment(text=source[position:head_end]))
        position = head_end

    for item in items:
        gap = source[position : item.start]
        trailing_end = scan_trailing_trivia(source, item.end, end)
        trailing = source[item.end : trailing_end]

        if item.orderable:
            positional, leading, markers = split_gap(gap)
            if positional:
                segments.append(TriviaSegment(text=positional, markers=markers))
            pending_markers.extend(markers)

            member = MemberSegment(
                index=len(members),
                start=item.start,
                end=item.end,
                node=item.node,
                leading=leading,
                trailing=trailing,
                markers_before=tuple(pending_markers),
            )
            pending_markers = []
            members.append(member)
            segments.append(member)
        else:
            if gap:
                markers = collect_markers(gap)
                segments.append(TriviaSegment(text=gap, markers=markers))
                pending_markers.extend(markers)
            pending_markers.append(StructureMarker.ANCHOR)
            segments.append(
                AnchorSegment(
                    start=item.start,
                    end=item.end,
                    node=item.node,
                    trailing=trailing,
                )
            )

        position = trailing_end

    tail = source[position:end]
    if tail:
        markers = collect_markers(tail)
        segments.append(TriviaSegment(text=tail, markers=markers))
        pending_markers.extend(markers)

    return ScopeLayout(
        segments=tuple(segments),
        members=tuple(members),
        trailing_markers=tuple(pending_markers),
    )
