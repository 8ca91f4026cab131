from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Seat:
    seat_id: str
    x: float
    y: float
    is_premium: bool = False
    is_disabled: bool = False
    row: Optional[int] = None
    col: Optional[int] = None
    block_id: Optional[str] = None

    @property
    def has_grid_position(self) -> bool:
        return self.row is not None and self.col is not None

    @property
    def grid_key(self) -> Tuple:
        """Grouping key for contiguity: one key per (block, row).

        Seats without a row/col get a pseudo-block of their own so they
        never merge with neighbours.
        """
        if not self.has_grid_position:
            return ("seat", self.seat_id)
        return ("block", self.block_id, self.row)

    @property
    def label(self) -> str:
        """Human-readable seat label, e.g. 'A-1-5' (1-based row/col)."""
        if not self.has_grid_position:
            return self.seat_id
        return f"{self.block_id or '-'}-{self.row + 1}-{self.col + 1}"


@dataclass(frozen=True)
class ScoredSeat:
    seat: Seat
    score: float
    distance_from_stage: float

    @property
    def seat_id(self) -> str:
        return self.seat.seat_id

    @property
    def row(self) -> int:
        return self.seat.row if self.seat.row is not None else 0

    @property
    def col(self) -> int:
        return self.seat.col if self.seat.col is not None else 0


@dataclass
class SeatChunk:
    """Column-contiguous run of seats in one block row."""
    seats: List[ScoredSeat] = field(default_factory=list)
    avg_score: float = 0.0
    grid_key: Tuple = ()
    start_col: int = 0

    @property
    def seat_ids(self) -> List[str]:
        return [s.seat_id for s in self.seats]

    def __len__(self) -> int:
        return len(self.seats)
