from __future__ import annotations

from dataclasses import dataclass, field

from wexample_filestate_csharp.common.violation import Violation


@dataclass(frozen=True)
class FormattingResult:
    """Outcome of a check or format pass over one source text.

    ``parse_failed`` separates unparsable input from a clean file; both carry
    no violations and no formatted text.
    """

    original_text: str
    formatted_text: str | None = None
    violations: tuple[Violation, ...] = field(default_factory=tuple)
    parse_failed: bool = False

    @property
    def has_changes(self) -> bool:
        return (
            self.formatted_text is not None
            and self.formatted_text != self.original_text
        )

    @property
    def output_text(self) -> str:
        return self.original_text if self.formatted_text is None else self.formatted_text
