"""Move record: a single step or a single jump."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from checkie.core.piece import Piece
from checkie.core.player import Player
from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one legal transition.

    A jump always carries ``captured`` and ``captured_sq``; a step never
    does.  ``captured`` is a detached copy of the jumped piece as it stood
    when the move was generated.

    ``legal_moves`` holds the legal-move set that was active when the move
    was played, so that undo can restore it without regenerating.  Moves
    fresh from the generator carry an empty snapshot.
    """

    from_sq: Square
    to_sq: Square
    mover: Player
    opponent: Player
    was_king: bool = False
    captured: Piece | None = field(default=None, hash=False)
    captured_sq: Square | None = None
    legal_moves: tuple[Move, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        if (self.captured is None) != (self.captured_sq is None):
            raise ValueError("A jump needs both a captured piece and its square")

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def step(
        cls,
        from_sq: Square,
        to_sq: Square,
        mover: Player,
        opponent: Player,
        was_king: bool = False,
    ) -> Move:
        return cls(from_sq, to_sq, mover, opponent, was_king)

    @classmethod
    def jump(
        cls,
        from_sq: Square,
        to_sq: Square,
        mover: Player,
        opponent: Player,
        was_king: bool,
        captured: Piece,
        captured_sq: Square,
    ) -> Move:
        return cls(
            from_sq,
            to_sq,
            mover,
            opponent,
            was_king,
            captured=captured.copy(),
            captured_sq=captured_sq,
        )

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def is_jump(self) -> bool:
        return self.captured_sq is not None

    def with_snapshot(self, legal_moves: tuple[Move, ...]) -> Move:
        """Copy of this move carrying *legal_moves* as its undo snapshot."""
        return replace(self, legal_moves=legal_moves)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)} to {square_name(self.to_sq)}"
        if self.captured_sq is None:
            return f"{self.mover.name} {base}"
        return f"{self.mover.name} jump {base} (captures {square_name(self.captured_sq)})"
