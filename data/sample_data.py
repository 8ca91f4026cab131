"""Generate synthetic test datasets for the Seat Lottery Platform."""

import pandas as pd
import random
import os

from config.defaults import (
    SAMPLE_BLOCKS, SAMPLE_SEAT_SPACING, SAMPLE_PREMIUM_ROWS,
    SAMPLE_INVITATION_RANGE, SAMPLE_FANCLUB_RANGE,
)

SURNAMES = [
    "Yamada", "Tanaka", "Sato", "Suzuki", "Takahashi", "Watanabe", "Ito", "Nakamura",
    "Kobayashi", "Kato", "Yoshida", "Yamamoto", "Matsumoto", "Inoue", "Kimura", "Hayashi",
]
FIRST_NAMES = [
    "Taro", "Hanako", "Ichiro", "Misaki", "Kenta", "Ai", "Shota", "Yui",
    "Daisuke", "Yoko", "Takuya", "Mayumi", "Naoki", "Mai", "Kazuya", "Yumi",
]
CITIES = [
    "Shibuya, Tokyo", "Shinjuku, Tokyo", "Naka-ku, Yokohama", "Kita-ku, Osaka",
    "Naka-ku, Nagoya", "Omiya-ku, Saitama", "Hakata-ku, Fukuoka", "Chuo-ku, Sapporo",
]


def generate_seats_df(seed: int = 42) -> pd.DataFrame:
    """Generate a seat map: a few rectangular blocks, front rows premium, a few seats disabled."""
    rng = random.Random(seed)
    rows = []
    for block_id, origin_x, origin_y, n_rows, n_cols in SAMPLE_BLOCKS:
        for r in range(n_rows):
            for c in range(n_cols):
                rows.append({
                    "Seat ID": f"{block_id}-{r + 1}-{c + 1}",
                    "X": origin_x + c * SAMPLE_SEAT_SPACING,
                    "Y": origin_y + r * SAMPLE_SEAT_SPACING,
                    "Premium": r < SAMPLE_PREMIUM_ROWS,
                    "Disabled": rng.random() < 0.02,
                    "Block": block_id,
                    "Row": r,
                    "Col": c,
                })
    return pd.DataFrame(rows)


def _name(rng: random.Random) -> str:
    return f"{rng.choice(SURNAMES)} {rng.choice(FIRST_NAMES)}"


def _address(rng: random.Random) -> str:
    return f"{rng.randint(1, 5)}-{rng.randint(1, 30)}-{rng.randint(1, 20)} {rng.choice(CITIES)}"


def generate_customers_df(seed: int = 42) -> pd.DataFrame:
    """Generate invitation holders plus an oversubscribed fan-club list."""
    rng = random.Random(seed)
    rows = []

    for i in range(rng.randint(*SAMPLE_INVITATION_RANGE)):
        rows.append({
            "Member ID": f"V{i + 1:06d}",
            "Name": _name(rng),
            "Email": "",
            "Address": _address(rng),
            "Tags": "invitation",
            "Score": 5.0,
            "Group Size": 2 if rng.random() > 0.7 else 1,
            "Last Result": "",
        })

    for i in range(3):
        rows.append({
            "Member ID": f"R{i + 1:06d}",
            "Name": _name(rng),
            "Email": "",
            "Address": _address(rng),
            "Tags": "relation",
            "Score": 5.0,
            "Group Size": rng.choice([1, 2, 3]),
            "Last Result": "",
        })

    for i in range(rng.randint(*SAMPLE_FANCLUB_RANGE)):
        roll = rng.random()
        if roll > 0.95:
            group_size = 4
        elif roll > 0.85:
            group_size = 3
        elif roll > 0.6:
            group_size = 2
        else:
            group_size = 1

        if rng.random() < 0.1:
            last_result = "lose"
        elif rng.random() < 0.5:
            last_result = "win"
        else:
            last_result = ""

        rows.append({
            "Member ID": f"M{i + 1:06d}",
            "Name": _name(rng),
            "Email": "",
            "Address": _address(rng),
            "Tags": "fanclub",
            "Score": round(rng.uniform(1, 10), 1),
            "Group Size": group_size,
            "Last Result": last_result,
        })

    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_seats_df().to_csv(os.path.join(output_dir, "seats.csv"), index=False)
    generate_customers_df().to_csv(os.path.join(output_dir, "customers.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single two-tab Excel file with seats and customers."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_data.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_seats_df().to_excel(writer, sheet_name="Seats", index=False)
        generate_customers_df().to_excel(writer, sheet_name="Customers", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
