"""Data access for accounts, roles and the paginated resources."""

from boardsctrl.repositories.accounts import (
    AccountRepository,
    DuplicateUsernameError,
    SqlAccountRepository,
)
from boardsctrl.repositories.pagination import Page, paginate

__all__ = [
    "AccountRepository",
    "DuplicateUsernameError",
    "Page",
    "SqlAccountRepository",
    "paginate",
]
