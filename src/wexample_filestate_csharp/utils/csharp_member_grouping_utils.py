from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from wexample_filestate_csharp.enum.structure_marker import StructureMarker


@dataclass(frozen=True)
class MemberGroup:
    """Contiguous member indices sharing one structural nesting context."""

    indices: tuple[int, ...]
    conditional_depth: int = 0
    region_depth: int = 0


@dataclass
class _NestingState:
    conditional_depth: int = 0
    region_depth: int = 0

    def apply(self, marker: StructureMarker) -> None:
        if marker is StructureMarker.OPEN_CONDITIONAL:
            self.conditional_depth += 1
        elif marker is StructureMarker.CLOSE_CONDITIONAL:
            self.conditional_depth = max(0, self.conditional_depth - 1)
        elif marker is StructureMarker.OPEN_REGION:
            self.region_depth += 1
        elif marker is StructureMarker.CLOSE_REGION:
            self.region_depth = max(0, self.region_depth - 1)


def group_members(
    markers_before: Sequence[Sequence[StructureMarker]],
) -> list[MemberGroup]:
    """Partition members into groups that never straddle a structural block.

    ``markers_before[i]`` lists the directive markers met between member
    ``i - 1`` and member ``i``. Any marker ends the group being built: an
    opening one starts the block's own group, a closing one ends it (and
    sends depth back toward zero), a branch separates alternate bodies and an
    anchor pins its position. Depths never go below zero, so stray closing
    markers are harmless and a block left open runs to the end of the list.
    """
    groups: list[MemberGroup] = []
    state = _NestingState()
    current: list[int] = []
    context = (0, 0)

    for index, markers in enumerate(markers_before):
        for marker in markers:
            if current:
                groups.append(MemberGroup(tuple(current), *context))
                current = []
            state.apply(marker)

        if not current:
            context = (state.conditional_depth, state.region_depth)
        current.append(index)

    if current:
        groups.append(MemberGroup(tuple(current), *context))

    return groups
