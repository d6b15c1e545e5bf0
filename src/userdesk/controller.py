from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from . import commands
from .logger import get_logger, log_action
from .models import UserFields, UserRecord
from .notifications import Notification, NotificationCenter
from .remote_store import RemoteStore, StoreFailure
from .state import CollectionState, EditSession
from .view_state import UsersViewModel, build_view_model

ConfirmHook = Callable[[str], bool]

DELETE_CONFIRMATION = "Are you sure you want to delete this user?"

MSG_LOAD_FAILED = "Failed to load users"
MSG_CREATED = "User created successfully"
MSG_UPDATED = "User updated successfully"
MSG_SUBMIT_FAILED = "Operation failed"
MSG_DELETED = "User deleted successfully"
MSG_DELETE_FAILED = "Failed to delete user"


def _deny(_: str) -> bool:
    return False


class UsersController:
    """Owns the users listing state and reconciles it with the remote store.

    Remote calls always happen first; the local collection changes only after
    a call succeeds. Failures are reported through ``notifications`` and never
    raised to the caller.
    """

    def __init__(
        self,
        store: RemoteStore,
        *,
        page_size: int = 5,
        notifications: NotificationCenter | None = None,
        confirm: ConfirmHook | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.state = commands.set_page_size(CollectionState(), page_size)
        self.session = EditSession()
        self.notifications = notifications or NotificationCenter()
        self.confirm = confirm or _deny
        self.logger = logger or get_logger("userdesk.controller")

    def view(self) -> UsersViewModel:
        return build_view_model(self.state)

    def load(self) -> Notification | None:
        # a reload keeps the current users until the new listing arrives
        self.state = replace(self.state, is_loading=True)
        result = self.store.list()
        if not result.ok:
            self.state = replace(self.state, is_loading=False, load_error=MSG_LOAD_FAILED)
            return self._fail("load", MSG_LOAD_FAILED, result.error)
        self.state = commands.replace_users(
            replace(self.state, is_loading=False, load_error=None, current_page=1),
            result.value or [],
        )
        log_action(self.logger, "controller", "load", "success")
        return None

    def on_search(self, query: str) -> None:
        self.state = commands.search(self.state, query)

    def on_page_change(self, delta: int) -> None:
        self.state = commands.change_page(self.state, delta)

    def on_page_size(self, page_size: int) -> None:
        self.state = commands.set_page_size(self.state, page_size)

    def on_add_new(self) -> None:
        self.session.begin_create()

    def on_edit(self, user_id: int) -> UserRecord | None:
        user = self.state.find_user(user_id)
        if user is not None:
            self.session.begin_edit(user)
        return user

    def on_cancel(self) -> None:
        self.session.close()

    def on_submit(self, fields: UserFields) -> Notification:
        # the target id is fixed when the edit session opened
        editing_user_id = self.session.editing_user_id
        if editing_user_id is None:
            return self._create(fields)
        return self._update(editing_user_id, fields)

    def on_delete(self, user_id: int) -> Notification | None:
        if not self.confirm(DELETE_CONFIRMATION):
            return None
        result = self.store.delete(user_id)
        if not result.ok:
            return self._fail("delete", MSG_DELETE_FAILED, result.error, user_id=user_id)
        self.state = self._synced(commands.remove_user(self.state, user_id))
        log_action(self.logger, "controller", "delete", "success", user_id=user_id)
        return self.notifications.success(MSG_DELETED)

    def _create(self, fields: UserFields) -> Notification:
        result = self.store.create(fields)
        if not result.ok or result.value is None:
            return self._fail("create", MSG_SUBMIT_FAILED, result.error)
        self.state = self._synced(commands.insert_created(self.state, result.value))
        self.session.close()
        log_action(self.logger, "controller", "create", "success", user_id=self.state.users[0].id)
        return self.notifications.success(MSG_CREATED)

    def _update(self, user_id: int, fields: UserFields) -> Notification:
        result = self.store.update(user_id, fields)
        if not result.ok:
            return self._fail("update", MSG_SUBMIT_FAILED, result.error, user_id=user_id)
        self.state = self._synced(commands.apply_update(self.state, user_id, fields))
        self.session.close()
        log_action(self.logger, "controller", "update", "success", user_id=user_id)
        return self.notifications.success(MSG_UPDATED)

    def _synced(self, state: CollectionState) -> CollectionState:
        # a store call just succeeded, so an earlier load failure no longer applies
        return replace(state, load_error=None)

    def _fail(
        self,
        action: str,
        message: str,
        error: StoreFailure | None,
        *,
        user_id: int | None = None,
    ) -> Notification:
        log_action(
            self.logger,
            "controller",
            action,
            "error",
            user_id=user_id,
            code=error.code if error else None,
            status_code=error.status_code if error else None,
            level=logging.WARNING,
        )
        return self.notifications.error(message, details=error.summary if error else None)
