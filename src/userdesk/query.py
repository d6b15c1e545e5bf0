"""Filtering and pagination over the local user collection.

All functions are pure: they read their arguments and return new values.
Pages are 1-based.
"""
from __future__ import annotations

from typing import Sequence

from .models import UserRecord


def _require_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")


def apply_filter(users: Sequence[UserRecord], query: str) -> list[UserRecord]:
    """Users whose name contains ``query``, case-insensitive, in original order."""
    if not query:
        return list(users)
    needle = query.lower()
    return [user for user in users if needle in user.name.lower()]


def page_count(filtered_users: Sequence[UserRecord], page_size: int) -> int:
    """Number of pages, never less than 1 so an empty listing still reads "1 of 1"."""
    _require_page_size(page_size)
    return max(1, (len(filtered_users) + page_size - 1) // page_size)


def page(filtered_users: Sequence[UserRecord], current_page: int, page_size: int) -> list[UserRecord]:
    _require_page_size(page_size)
    if current_page < 1:
        return []
    start = (current_page - 1) * page_size
    return list(filtered_users[start : start + page_size])


def clamp_page(current_page: int, filtered_users: Sequence[UserRecord], page_size: int) -> int:
    return min(max(current_page, 1), page_count(filtered_users, page_size))
