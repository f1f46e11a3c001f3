from __future__ import annotations

from dataclasses import dataclass

from wexample_filestate_csharp.enum.access_level import AccessLevel
from wexample_filestate_csharp.enum.member_kind import MemberKind


@dataclass(frozen=True)
class MemberDescriptor:
    """Uniform view of one orderable declaration, built fresh on every pass.

    ``index`` points into the member arena of the scope the declaration
    belongs to; offsets are byte offsets into the UTF-8 encoded source.
    """

    index: int
    kind: MemberKind
    access_level: AccessLevel
    is_static: bool
    is_const: bool
    name: str
    start_offset: int
    end_offset: int
    line: int
    column: int

    @property
    def label(self) -> str:
        if self.is_const:
            return f"Const {self.kind.label}"
        if self.is_static:
            return f"Static {self.kind.label}"
        return self.kind.label

    def describe(self) -> str:
        return f"{self.access_level.keyword} {self.label}"
