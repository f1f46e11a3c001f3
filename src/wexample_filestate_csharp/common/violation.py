from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    line: int
    column: int
    description: str
    member_name: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column} {self.description}"
