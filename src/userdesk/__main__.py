from __future__ import annotations

import sys

from .clients.users import UsersClient
from .config import ConfigError, load_config
from .console import UsersConsole, confirm_prompt, print_notification
from .controller import UsersController
from .http_client import HttpClient
from .notifications import NotificationCenter
from .remote_store import RemoteStore


def build_controller(env_file: str | None = None) -> UsersController:
    config = load_config(env_file)
    store = RemoteStore(UsersClient(http=HttpClient(config=config)))
    notifications = NotificationCenter()
    notifications.subscribe(print_notification)
    return UsersController(
        store,
        page_size=config.page_size,
        notifications=notifications,
        confirm=confirm_prompt,
    )


def main() -> int:
    try:
        controller = build_controller()
    except ConfigError as error:
        print(f"[config] {error}", file=sys.stderr)
        return 2
    try:
        UsersConsole(controller).run()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
