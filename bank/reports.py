from typing import Iterable

import pandas as pd

from bank.domain import NO_DEPOSIT, ClientRecord

CLIENT_COLUMNS = ["id", "name", "amount", "category", "interest"]


def clients_frame(records: Iterable[ClientRecord]) -> pd.DataFrame:
    """One row per client in listing order; clients without a deposit get NaN amount."""
    rows = [
        {
            "id": r.id,
            "name": r.name,
            "amount": r.amount if r.has_deposit else float("nan"),
            "category": r.category.value if r.category is not None else NO_DEPOSIT,
            "interest": r.interest,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=CLIENT_COLUMNS)


def interest_by_category(records: Iterable[ClientRecord]) -> pd.DataFrame:
    df = clients_frame(records)
    df = df[df["category"] != NO_DEPOSIT]
    if df.empty:
        return pd.DataFrame(columns=["category", "amount", "interest"])
    return (
        df.groupby("category", as_index=False)[["amount", "interest"]]
        .sum()
        .sort_values("interest", ascending=False)
        .reset_index(drop=True)
    )
