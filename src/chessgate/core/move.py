"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgate.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single proposed move."""

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"

    @property
    def is_null(self) -> bool:
        return self.from_sq == self.to_sq
