from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pydantic import ValidationError as SchemaError

from .clients.users import UsersClient
from .exceptions import ApiError
from .logger import get_logger, log_action
from .models import UserFields, UserRecord

T = TypeVar("T")


@dataclass(frozen=True)
class StoreFailure:
    code: str
    message: str
    status_code: int = 0

    @property
    def summary(self) -> str:
        if self.status_code:
            return f"{self.code} (HTTP {self.status_code})"
        return self.code


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: T | None = None
    error: StoreFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreFailure) -> "StoreResult[T]":
        return cls(error=error)


class RemoteStore:
    """Remote users collection; every outcome comes back as a StoreResult."""

    def __init__(self, client: UsersClient, *, logger: logging.Logger | None = None) -> None:
        self.client = client
        self.logger = logger or get_logger("userdesk.remote_store")

    def list(self) -> StoreResult[list[UserRecord]]:
        return self._call("list", self.client.list_users)

    def create(self, fields: UserFields) -> StoreResult[UserRecord]:
        return self._call("create", lambda: self.client.create_user(fields))

    def update(self, user_id: int, fields: UserFields) -> StoreResult[bool]:
        return self._call("update", lambda: self.client.update_user(user_id, fields), user_id=user_id)

    def delete(self, user_id: int) -> StoreResult[bool]:
        return self._call("delete", lambda: self.client.delete_user(user_id), user_id=user_id)

    def _call(self, action: str, call: Callable[[], T], *, user_id: int | None = None) -> StoreResult[T]:
        try:
            value = call()
        except ApiError as error:
            failure = StoreFailure(code=error.code, message=error.message, status_code=error.status_code)
        except SchemaError as error:
            failure = StoreFailure(
                code="INVALID_RESPONSE",
                message=f"Unexpected users payload ({error.error_count()} errors)",
            )
        else:
            return StoreResult.success(value)
        log_action(
            self.logger,
            "remote_store",
            action,
            "error",
            user_id=user_id,
            code=failure.code,
            status_code=failure.status_code,
            level=logging.WARNING,
        )
        return StoreResult.failure(failure)
