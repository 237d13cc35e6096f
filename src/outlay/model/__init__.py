from .ledger import (
    Category,
    CategoryDraft,
    Expense,
    ExpenseDraft,
    Partner,
    PartnerDraft,
)
from .seed import (
    MISC_CATEGORY_NAME,
    NOT_AVAILABLE,
    UNASSIGNED_PARTNER_NAME,
    UNKNOWN_PARTNER,
    SeedData,
    default_seed,
)

__all__ = [
    # models
    "Category",
    "CategoryDraft",
    "Expense",
    "ExpenseDraft",
    "Partner",
    "PartnerDraft",
    # seed
    "SeedData",
    "default_seed",
    "MISC_CATEGORY_NAME",
    "NOT_AVAILABLE",
    "UNASSIGNED_PARTNER_NAME",
    "UNKNOWN_PARTNER",
]
