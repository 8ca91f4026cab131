"""File upload parsing — CSV/XLSX into typed model lists."""

import pandas as pd
from typing import Dict, Iterable, List, Optional, Set, Tuple
from models.seat import Seat
from models.customer import Customer
from models.application import Application
from config.defaults import CUSTOMER_TAGS, TAG_ALIASES, DEFAULT_CUSTOMER_TAG, DEFAULT_PAST_SCORE

TRUE_VALUES = {"1", "true", "yes", "y", "x", "on"}


def _is_true(value) -> bool:
    if pd.isna(value):
        return False
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    try:
        return float(text) != 0
    except ValueError:
        return False


def _optional_int(row, column: str, df: pd.DataFrame) -> Optional[int]:
    if column not in df.columns or pd.isna(row.get(column)):
        return None
    return int(row[column])


def _optional_str(row, column: str, df: pd.DataFrame) -> str:
    if column not in df.columns or pd.isna(row.get(column)):
        return ""
    return str(row[column]).strip()


def normalize_tag(tag: str) -> str:
    """Map legacy or localized tag names onto invitation / relation / fanclub."""
    lower = str(tag).strip().lower()
    if lower in CUSTOMER_TAGS:
        return lower
    for canonical, aliases in TAG_ALIASES.items():
        if lower in aliases:
            return canonical
    return DEFAULT_CUSTOMER_TAG


def parse_tags(raw: str) -> List[str]:
    """Split a ';' or ','-separated tag cell, normalizing and de-duplicating."""
    tags: List[str] = []
    for part in str(raw).replace(",", ";").split(";"):
        if not part.strip():
            continue
        tag = normalize_tag(part)
        if tag not in tags:
            tags.append(tag)
    return tags


def parse_last_result(value) -> Optional[str]:
    if pd.isna(value):
        return None
    text = str(value).strip().lower()
    return text if text in ("win", "lose") else None


def parse_seats(df: pd.DataFrame) -> List[Seat]:
    """Convert a seats DataFrame into Seat objects."""
    seats = []
    for _, row in df.iterrows():
        block = _optional_str(row, "Block", df)
        seats.append(Seat(
            seat_id=str(row["Seat ID"]).strip(),
            x=float(row["X"]),
            y=float(row["Y"]),
            is_premium=_is_true(row.get("Premium")),
            is_disabled=_is_true(row.get("Disabled")),
            row=_optional_int(row, "Row", df),
            col=_optional_int(row, "Col", df),
            block_id=block or None,
        ))
    return seats


def parse_customers(df: pd.DataFrame) -> List[Customer]:
    """Convert a customers DataFrame into Customer objects."""
    customers = []
    for _, row in df.iterrows():
        member_id = str(row["Member ID"]).strip()
        customer_id = _optional_str(row, "Customer ID", df) or member_id
        tags = parse_tags(row["Tags"]) if "Tags" in df.columns and pd.notna(row.get("Tags")) else []
        score = row.get("Score") if "Score" in df.columns else None
        group_size = row.get("Group Size") if "Group Size" in df.columns else None
        customers.append(Customer(
            customer_id=customer_id,
            member_id=member_id,
            name=str(row["Name"]).strip(),
            email=_optional_str(row, "Email", df),
            address=_optional_str(row, "Address", df),
            tags=tags or [DEFAULT_CUSTOMER_TAG],
            total_score=float(score) if score is not None and pd.notna(score) else DEFAULT_PAST_SCORE,
            group_size=int(group_size) if group_size is not None and pd.notna(group_size) else 1,
            last_result=parse_last_result(row.get("Last Result")),
        ))
    return customers


def customer_to_application(customer: Customer, group_size: Optional[int] = None) -> Application:
    tags = [normalize_tag(t) for t in customer.tags]
    return Application(
        application_id=customer.customer_id,
        group_size=group_size if group_size is not None else customer.group_size,
        is_invitation="invitation" in tags,
        is_relation="relation" in tags,
        past_score=customer.total_score,
        last_result=customer.last_result,
        member_id=customer.member_id,
        name=customer.name,
        address=customer.address,
        tags=tags,
    )


def customers_to_applications(
    customers: Iterable[Customer],
    group_sizes: Optional[Dict[str, int]] = None,
    locked_customer_ids: Optional[Set[str]] = None,
) -> List[Application]:
    """Build lottery applications, skipping customers whose seats are already locked."""
    sizes = group_sizes or {}
    locked = locked_customer_ids or set()
    return [
        customer_to_application(c, sizes.get(c.customer_id))
        for c in customers
        if c.customer_id not in locked
    ]


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, encoding="utf-8-sig")
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for a two-tab Excel workbook (case-insensitive matching)
SHEET_ALIASES = {
    "seats": ["seats", "seat", "seat map", "venue", "seating"],
    "customers": ["customers", "customer", "members", "applicants", "applications", "fanclub"],
}


def _match_sheet(sheet_names: List[str], category: str) -> str:
    """Find a sheet name matching the given category. Returns the matched name or raises."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    raise ValueError(
        f"Could not find a sheet for '{category}'. "
        f"Expected one of: {aliases}. "
        f"Found sheets: {sheet_names}"
    )


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Load a single Excel file with 2 tabs: Seats, Customers.

    Sheet names are matched case-insensitively ('Seat Map', 'Members', etc.).

    Returns (seats_df, customers_df).
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    seats_sheet = _match_sheet(sheet_names, "seats")
    customers_sheet = _match_sheet(sheet_names, "customers")

    seats_df = pd.read_excel(xl, sheet_name=seats_sheet)
    customers_df = pd.read_excel(xl, sheet_name=customers_sheet)

    return seats_df, customers_df
