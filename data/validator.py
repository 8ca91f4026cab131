"""Schema validation for uploaded data files and lottery settings."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
import pandas as pd

from models.seat import Seat
from models.customer import Customer
from models.lottery import LockedSeat
from config.defaults import (
    MIN_SKILL_WEIGHT, MAX_SKILL_WEIGHT, MIN_SCORE, MAX_SCORE,
    MIN_GROUP_SIZE, MAX_GROUP_SIZE,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        self.is_valid = False
        self.errors.append(message)


SEAT_REQUIRED_COLUMNS = [
    "Seat ID",
    "X",
    "Y",
]

CUSTOMER_REQUIRED_COLUMNS = [
    "Member ID",
    "Name",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.add_error(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.add_error(f"{file_label}: File contains no data rows.")
    return result


def validate_seats(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, SEAT_REQUIRED_COLUMNS, "Seat Map")
    if not result.is_valid:
        return result

    dupes = df.duplicated(subset=["Seat ID"], keep=False)
    if dupes.any():
        result.add_error(f"Seat Map: Duplicate seat IDs: {df[dupes]['Seat ID'].unique().tolist()}")

    coords = df[["X", "Y"]].apply(pd.to_numeric, errors="coerce")
    if coords.isna().any().any():
        result.add_error("Seat Map: X and Y must be numeric for every seat.")

    has_grid = "Row" in df.columns and "Col" in df.columns
    if not has_grid:
        result.warnings.append(
            "Seat Map: No Row/Col columns. Every seat is treated as isolated, "
            "so only single-seat applications can be placed."
        )
    else:
        grid_cols = [c for c in ["Block", "Row", "Col"] if c in df.columns]
        grid = df.dropna(subset=["Row", "Col"])
        grid_dupes = grid.duplicated(subset=grid_cols, keep=False)
        if grid_dupes.any():
            result.add_error(
                f"Seat Map: Several seats share the same {'/'.join(grid_cols)} position."
            )
        missing = int(df["Row"].isna().sum() + df["Col"].isna().sum())
        if missing:
            result.warnings.append(
                f"Seat Map: {missing} missing Row/Col values. Those seats are treated as isolated."
            )

    return result


def validate_customers(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, CUSTOMER_REQUIRED_COLUMNS, "Customers")
    if not result.is_valid:
        return result

    dupes = df.duplicated(subset=["Member ID"], keep=False)
    if dupes.any():
        result.add_error(f"Customers: Duplicate member IDs: {df[dupes]['Member ID'].unique().tolist()}")

    if "Customer ID" in df.columns:
        given = df["Customer ID"].astype(str).str.strip()
        resolved = given.where(df["Customer ID"].notna() & (given != ""), df["Member ID"].astype(str).str.strip())
        id_dupes = resolved.duplicated(keep=False)
        if id_dupes.any():
            result.add_error(f"Customers: Duplicate customer IDs: {resolved[id_dupes].unique().tolist()}")

    if "Group Size" in df.columns:
        sizes = pd.to_numeric(df["Group Size"], errors="coerce").dropna()
        if ((sizes < MIN_GROUP_SIZE) | (sizes > MAX_GROUP_SIZE)).any():
            result.add_error(
                f"Customers: Group Size must be between {MIN_GROUP_SIZE} and {MAX_GROUP_SIZE}."
            )

    if "Score" in df.columns:
        scores = pd.to_numeric(df["Score"], errors="coerce").dropna()
        if ((scores < MIN_SCORE) | (scores > MAX_SCORE)).any():
            result.warnings.append(
                f"Customers: Some scores fall outside [{MIN_SCORE:.0f}, {MAX_SCORE:.0f}]. "
                "They are used as-is and clamped after the next lottery."
            )
    else:
        result.warnings.append("Customers: No Score column. Every customer starts at the default score.")

    if "Last Result" in df.columns:
        values = df["Last Result"].dropna().astype(str).str.strip().str.lower()
        unknown = sorted(set(values) - {"win", "lose", ""})
        if unknown:
            result.warnings.append(
                f"Customers: Unrecognised Last Result values {unknown} are ignored."
            )

    return result


def validate_lottery_config(rule_config: dict) -> ValidationResult:
    """Check operator-entered lottery settings before a run."""
    result = ValidationResult()
    weight = rule_config.get("skill_weight")
    if weight is not None and not (MIN_SKILL_WEIGHT <= weight <= MAX_SKILL_WEIGHT):
        result.warnings.append(
            f"Skill weight {weight} is outside [0, 1] and will be clamped."
        )
    for key in ("stage_x", "stage_y"):
        value = rule_config.get(key)
        if value is not None and not isinstance(value, (int, float)):
            result.add_error(f"Stage position '{key}' must be numeric.")
    return result


def validate_lock(
    customer: Customer,
    seat_ids: List[str],
    seats: Iterable[Seat],
    existing_locks: Optional[List[LockedSeat]] = None,
) -> ValidationResult:
    """Check a relation seat lock before it is stored."""
    result = ValidationResult()
    seat_map = {s.seat_id: s for s in seats}
    locks = existing_locks or []

    if len(seat_ids) != customer.group_size:
        result.add_error(
            f"{customer.name}: {len(seat_ids)} seat(s) selected for a party of {customer.group_size}."
        )
    if len(set(seat_ids)) != len(seat_ids):
        result.add_error(f"{customer.name}: The same seat was selected twice.")

    unknown = [sid for sid in seat_ids if sid not in seat_map]
    if unknown:
        result.add_error(f"{customer.name}: Unknown seats: {', '.join(unknown)}")

    disabled = [sid for sid in seat_ids if sid in seat_map and seat_map[sid].is_disabled]
    if disabled:
        result.add_error(f"{customer.name}: Disabled seats cannot be locked: {', '.join(disabled)}")

    taken = {sid for lock in locks for sid in lock.seat_ids}
    clash = [sid for sid in seat_ids if sid in taken]
    if clash:
        result.add_error(f"{customer.name}: Seats already locked: {', '.join(clash)}")

    if any(lock.customer_id == customer.customer_id for lock in locks):
        result.add_error(f"{customer.name}: Customer already has locked seats.")

    if not customer.is_relation:
        result.warnings.append(f"{customer.name}: Customer is not tagged as a relation.")

    return result
