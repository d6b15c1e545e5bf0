from __future__ import annotations

from pydantic import BaseModel, ConfigDict

MANAGED_FIELDS = ("name", "email", "phone")


class UserFields(BaseModel):
    name: str
    email: str
    phone: str


class UserRecord(BaseModel):
    """A user as held locally; unmanaged keys from the store are kept as extras."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    email: str
    phone: str

    def fields(self) -> UserFields:
        return UserFields(name=self.name, email=self.email, phone=self.phone)

    def with_fields(self, fields: UserFields) -> UserRecord:
        return self.model_copy(update=fields.model_dump(include=set(MANAGED_FIELDS)))
