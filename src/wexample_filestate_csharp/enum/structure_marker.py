from __future__ import annotations

from enum import Enum


class StructureMarker(Enum):
    """Directive lines (and anchors) that bound reorderable member groups."""

    OPEN_CONDITIONAL = "#if"
    BRANCH_CONDITIONAL = "#else"
    CLOSE_CONDITIONAL = "#endif"
    OPEN_REGION = "#region"
    CLOSE_REGION = "#endregion"
    ANCHOR = "anchor"

    @classmethod
    def from_directive(cls, directive: str) -> StructureMarker | None:
        return {
            "if": cls.OPEN_CONDITIONAL,
            "elif": cls.BRANCH_CONDITIONAL,
            "else": cls.BRANCH_CONDITIONAL,
            "endif": cls.CLOSE_CONDITIONAL,
            "region": cls.OPEN_REGION,
            "endregion": cls.CLOSE_REGION,
        }.get(directive)
