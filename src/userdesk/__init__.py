from .clients.users import UsersClient
from .config import ClientConfig, ConfigError, load_config
from .controller import UsersController
from .exceptions import ApiError, NotFoundError, ServerError, TransportError, ValidationError
from .http_client import HttpClient
from .models import UserFields, UserRecord
from .notifications import Notification, NotificationCenter, NotificationKind
from .query import apply_filter, clamp_page, page, page_count
from .remote_store import RemoteStore, StoreFailure, StoreResult
from .state import CollectionState, EditSession
from .view_state import UsersViewModel, ViewStatus, build_view_model

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ClientConfig",
    "CollectionState",
    "ConfigError",
    "EditSession",
    "HttpClient",
    "NotFoundError",
    "Notification",
    "NotificationCenter",
    "NotificationKind",
    "RemoteStore",
    "ServerError",
    "StoreFailure",
    "StoreResult",
    "TransportError",
    "UserFields",
    "UserRecord",
    "UsersClient",
    "UsersController",
    "UsersViewModel",
    "ValidationError",
    "ViewStatus",
    "apply_filter",
    "build_view_model",
    "clamp_page",
    "load_config",
    "page",
    "page_count",
]
