from __future__ import annotations

"""
Seed file I/O (YAML loading and saving).

Functions for reading and writing config/seed.yml, the optional replacement
for the built-in seed collections.

Privacy
- All operations are local file I/O only
- No network access
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from outlay.errors import SeedError
from outlay.model.ledger import Category, Expense, ExpenseDraft, Partner
from outlay.model.seed import SEED_TIMESTAMP, SeedData, default_seed


class SeedExpense(ExpenseDraft):
    """Expense as written in a seed file: a draft plus its fixed id."""

    id: str


class SeedFile(BaseModel):
    """Root structure of config/seed.yml."""

    partners: list[Partner] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    expenses: list[SeedExpense] = Field(default_factory=list)

    def to_seed_data(self) -> SeedData:
        expenses = [
            Expense.from_draft(
                ExpenseDraft(**entry.model_dump(exclude={"id"})),
                id=entry.id,
                entry_timestamp=SEED_TIMESTAMP,
            )
            for entry in self.expenses
        ]
        return SeedData(
            expenses=expenses,
            partners=list(self.partners),
            categories=list(self.categories),
        )

    @classmethod
    def from_seed_data(cls, seed: SeedData) -> SeedFile:
        return cls(
            partners=list(seed.partners),
            categories=list(seed.categories),
            expenses=[
                SeedExpense(**expense.model_dump(exclude={"month", "year", "entry_timestamp"}))
                for expense in seed.expenses
            ],
        )


def load_seed(path: Path) -> SeedData:
    """Load seed collections from YAML (safe loader).

    A missing file falls back to the built-in seed.

    Args:
        path: Path to seed.yml

    Returns:
        SeedData with expenses, partners, and categories

    Raises:
        SeedError: If the file exists but is not valid YAML or fails validation
    """
    if not path.exists():
        return default_seed()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SeedError(f"Could not parse seed file {path}: {e}") from e

    if not isinstance(data, dict):
        raise SeedError(f"Seed file {path} must contain a mapping at the top level")

    try:
        return SeedFile.model_validate(data).to_seed_data()
    except ValidationError as e:
        raise SeedError(f"Invalid seed file {path}: {e}") from e


def save_seed(path: Path, seed: SeedData, header: str = "") -> None:
    """Save seed collections to a YAML file.

    Creates parent directories if needed. Amounts are written as strings so
    they load back as exact decimals.

    Args:
        path: Path to seed.yml
        seed: Collections to write
        header: Optional comment block written above the YAML body
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # mode="json" turns Decimal and date into plain strings for YAML
    data = SeedFile.from_seed_data(seed).model_dump(exclude_none=True, mode="json")

    with path.open("w", encoding="utf-8") as f:
        if header:
            f.write(header)
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = [
    "SeedExpense",
    "SeedFile",
    "load_seed",
    "save_seed",
]
