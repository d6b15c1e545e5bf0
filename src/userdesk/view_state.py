from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .models import UserRecord
from .query import page, page_count
from .state import CollectionState


class ViewStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"
    FATAL = "fatal"


@dataclass(frozen=True)
class UsersViewModel:
    page_slice: tuple[UserRecord, ...]
    current_page: int
    page_count: int
    is_empty: bool
    status: ViewStatus
    message: str

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.page_count

    @property
    def page_label(self) -> str:
        return f"Page {self.current_page} of {self.page_count}"

    def render(self) -> dict[str, Any]:
        return {
            "rows": [user.model_dump() for user in self.page_slice],
            "current_page": self.current_page,
            "page_count": self.page_count,
            "is_empty": self.is_empty,
            "has_prev": self.has_prev,
            "has_next": self.has_next,
            "status": self.status.value,
            "message": self.message,
        }


def resolve_view_status(*, loading: bool, has_data: bool, error: str | None) -> tuple[ViewStatus, str]:
    if loading:
        return ViewStatus.LOADING, "Loading"
    if error and not has_data:
        return ViewStatus.FATAL, error
    if not has_data:
        return ViewStatus.EMPTY, "No users found"
    return ViewStatus.READY, "Ready"


def build_view_model(state: CollectionState) -> UsersViewModel:
    rows = () if state.is_loading else tuple(page(state.filtered_users, state.current_page, state.page_size))
    status, message = resolve_view_status(
        loading=state.is_loading,
        has_data=bool(rows),
        error=state.load_error,
    )
    return UsersViewModel(
        page_slice=rows,
        current_page=state.current_page,
        page_count=page_count(state.filtered_users, state.page_size),
        is_empty=not rows,
        status=status,
        message=message,
    )
