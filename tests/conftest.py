from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR / "src"))

from userdesk.models import UserFields, UserRecord  # noqa: E402
from userdesk.remote_store import StoreFailure, StoreResult  # noqa: E402

API_BASE_URL = "https://api.example.com"
USERS_URL = f"{API_BASE_URL}/users"


def make_user(user_id: int, name: str | None = None, **extra) -> UserRecord:
    return UserRecord(
        id=user_id,
        name=name or f"User {user_id}",
        email=f"user{user_id}@example.com",
        phone=f"555-000{user_id}",
        **extra,
    )


def make_users(count: int, name: str = "User") -> list[UserRecord]:
    return [make_user(idx, f"{name} {idx}") for idx in range(1, count + 1)]


class FakeStore:
    """Scriptable stand-in for RemoteStore; records every call it receives."""

    def __init__(self, users: Iterable[UserRecord] = (), *, fail: set[str] | None = None) -> None:
        self.users = list(users)
        self.fail = set(fail or ())
        self.calls: list[tuple] = []
        self.created_id = 11

    def _failure(self, status_code: int = 500) -> StoreResult:
        return StoreResult.failure(StoreFailure(code="HTTP_ERROR", message="Request failed", status_code=status_code))

    def list(self) -> StoreResult:
        self.calls.append(("list",))
        if "list" in self.fail:
            return self._failure()
        return StoreResult.success(list(self.users))

    def create(self, fields: UserFields) -> StoreResult:
        self.calls.append(("create", fields))
        if "create" in self.fail:
            return self._failure()
        return StoreResult.success(UserRecord(id=self.created_id, **fields.model_dump()))

    def update(self, user_id: int, fields: UserFields) -> StoreResult:
        self.calls.append(("update", user_id, fields))
        if "update" in self.fail:
            return self._failure(404)
        return StoreResult.success(True)

    def delete(self, user_id: int) -> StoreResult:
        self.calls.append(("delete", user_id))
        if "delete" in self.fail:
            return self._failure()
        return StoreResult.success(True)


@pytest.fixture
def api_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USERDESK_API_BASE_URL", API_BASE_URL)
    for key in (
        "USERDESK_USERS_PATH",
        "USERDESK_TIMEOUT_SECONDS",
        "USERDESK_PAGE_SIZE",
        "USERDESK_VERIFY_SSL",
    ):
        monkeypatch.delenv(key, raising=False)
