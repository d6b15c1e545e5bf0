from __future__ import annotations

from dataclasses import dataclass

from .models import UserFields, UserRecord


@dataclass(frozen=True)
class CollectionState:
    users: tuple[UserRecord, ...] = ()
    filtered_users: tuple[UserRecord, ...] = ()
    current_page: int = 1
    page_size: int = 5
    search_query: str = ""
    is_loading: bool = False
    load_error: str | None = None

    def find_user(self, user_id: int) -> UserRecord | None:
        return next((user for user in self.users if user.id == user_id), None)


@dataclass
class EditSession:
    editing_user_id: int | None = None
    form: UserFields | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_user_id is not None

    def begin_create(self) -> None:
        self.editing_user_id = None
        self.form = None

    def begin_edit(self, user: UserRecord) -> None:
        self.editing_user_id = user.id
        self.form = user.fields()

    def close(self) -> None:
        self.begin_create()

