from __future__ import annotations

from typing import Any

from .controller import UsersController
from .models import UserFields
from .notifications import Notification, NotificationKind
from .view_state import UsersViewModel, ViewStatus

EMPTY_VALUE = "—"
COLUMNS: list[tuple[str, str]] = [("id", "#"), ("name", "Name"), ("email", "Email"), ("phone", "Phone")]

HELP = (
    "Commands: s <text>=search, n=next, p=prev, a=add, e <id>=edit, d <id>=delete, "
    "z <size>=page size, r=reload, h=help, q=quit"
)


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    text = str(value).strip()
    return text or EMPTY_VALUE


def render_view(view: UsersViewModel) -> None:
    print("\nUsers")
    if view.status is ViewStatus.LOADING:
        print("(loading...)")
        return
    if view.is_empty:
        print(f"({view.message})")
    else:
        rows = [[normalize_value(getattr(user, key)) for key, _ in COLUMNS] for user in view.page_slice]
        widths = [max([len(header), *(len(row[idx]) for row in rows)]) for idx, (_, header) in enumerate(COLUMNS)]
        print(" | ".join(header.ljust(width) for (_, header), width in zip(COLUMNS, widths)))
        print("-+-".join("-" * width for width in widths))
        for row in rows:
            print(" | ".join(cell.ljust(width) for cell, width in zip(row, widths)))
    prev_label = "<prev" if view.has_prev else "     "
    next_label = "next>" if view.has_next else "     "
    print(f"{prev_label} {view.page_label} {next_label}")


def print_notification(notification: Notification) -> None:
    tag = "ok" if notification.kind is NotificationKind.SUCCESS else "error"
    suffix = f" ({notification.details})" if notification.details else ""
    print(f"[{tag}] {notification.message}{suffix}")


def confirm_prompt(message: str) -> bool:
    return input(f"{message} [y/N]: ").strip().lower() in {"y", "yes"}


def _prompt_fields(current: UserFields | None) -> UserFields:
    values: dict[str, str] = {}
    for key in ("name", "email", "phone"):
        default = getattr(current, key) if current else ""
        label = f"{key} [{default}]: " if default else f"{key}: "
        values[key] = input(label).strip() or default
    return UserFields(**values)


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


class UsersConsole:
    def __init__(self, controller: UsersController) -> None:
        self.controller = controller

    def run(self) -> None:
        self.controller.load()
        render_view(self.controller.view())
        print(HELP)
        while True:
            raw = input("cmd: ").strip()
            if not raw:
                continue
            if not self.handle(raw):
                return
            render_view(self.controller.view())

    def handle(self, raw: str) -> bool:
        """Apply one console command; returns False when the user quits."""
        command, _, argument = raw.partition(" ")
        command = command.lower()
        argument = argument.strip()
        if command == "q":
            return False
        if command == "s":
            self.controller.on_search(argument)
        elif command == "n":
            self.controller.on_page_change(1)
        elif command == "p":
            self.controller.on_page_change(-1)
        elif command == "r":
            self.controller.load()
        elif command == "a":
            self.controller.on_add_new()
            self._submit_form()
        elif command == "e":
            user_id = _parse_int(argument)
            if user_id is None or self.controller.on_edit(user_id) is None:
                print(f"No user with id {argument or EMPTY_VALUE}.")
            else:
                self._submit_form()
        elif command == "d":
            user_id = _parse_int(argument)
            if user_id is None:
                print("Usage: d <id>")
            else:
                self.controller.on_delete(user_id)
        elif command == "z":
            size = _parse_int(argument)
            if size is None or size < 1:
                print("Usage: z <size>, size >= 1")
            else:
                self.controller.on_page_size(size)
        elif command == "h":
            print(HELP)
        else:
            print("Unknown command.")
        return True

    def _submit_form(self) -> None:
        session = self.controller.session
        print("Edit User" if session.is_editing else "Add New User")
        fields = _prompt_fields(session.form)
        if input("save? [Y/n]: ").strip().lower() in {"n", "no"}:
            self.controller.on_cancel()
            return
        self.controller.on_submit(fields)
