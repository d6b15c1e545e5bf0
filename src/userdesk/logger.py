import json
import logging
from datetime import datetime, timezone

JSON_LINE_FORMAT = "%(message)s"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger that prints each record as-is; log_action builds the JSON line."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(JSON_LINE_FORMAT))
        logger.addHandler(stream)
        logger.setLevel(level)
    return logger


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    outcome: str,
    *,
    user_id: int | None = None,
    code: str | None = None,
    status_code: int | None = None,
    level: int = logging.INFO,
) -> None:
    logger.log(
        level,
        json.dumps(
            {
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "module": module,
                "action": action,
                "outcome": outcome,
                "user_id": user_id,
                "code": code,
                "status_code": status_code,
            }
        ),
    )
