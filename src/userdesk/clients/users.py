from __future__ import annotations

from dataclasses import dataclass

from .base import BaseClient
from ..models import UserFields, UserRecord

# id given to a created record until the caller assigns the local one
UNASSIGNED_ID = 0


@dataclass
class UsersClient(BaseClient):
    """One call per HTTP verb on the users collection.

    Non-2xx statuses and transport errors propagate as ApiError. Mutation
    responses are only read for extra keys on create, so any 2xx body is
    accepted there.
    """

    def _collection_path(self) -> str:
        return self.http.config.users_path

    def _item_path(self, user_id: int) -> str:
        return f"{self._collection_path()}/{user_id}"

    def list_users(self) -> list[UserRecord]:
        data = self._request("GET", self._collection_path(), operation="users.list")
        return [UserRecord.model_validate(item) for item in data or []]

    def create_user(self, fields: UserFields) -> UserRecord:
        data = self._request(
            "POST",
            self._collection_path(),
            json_body=fields.model_dump(),
            operation="users.create",
            require_json=False,
        )
        echoed = {key: value for key, value in data.items() if key != "id"} if isinstance(data, dict) else {}
        return UserRecord.model_validate({**echoed, **fields.model_dump(), "id": UNASSIGNED_ID})

    def update_user(self, user_id: int, fields: UserFields) -> bool:
        self._request(
            "PUT",
            self._item_path(user_id),
            json_body=fields.model_dump(),
            operation="users.update",
            require_json=False,
        )
        return True

    def delete_user(self, user_id: int) -> bool:
        self._request("DELETE", self._item_path(user_id), operation="users.delete", require_json=False)
        return True
