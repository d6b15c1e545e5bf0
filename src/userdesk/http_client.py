from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import InvalidResponseError, TransportError

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


@dataclass
class LastOperation:
    operation: str
    duration_ms: int
    result: str
    status_code: int


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        operation: str = "unknown",
        require_json: bool = True,
    ) -> dict[str, Any] | list[Any] | None:
        """Send one request; any 2xx is success.

        With ``require_json`` off, a 2xx body that is not JSON decodes to None
        instead of raising InvalidResponseError.
        """
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if json_body is not None:
            request_headers["Content-type"] = JSON_CONTENT_TYPE
        if headers:
            request_headers.update(headers)

        started = time.monotonic()
        try:
            response = self.session.request(
                method=method.upper(),
                url=self._build_url(path),
                headers=request_headers,
                data=json.dumps(json_body) if json_body is not None else None,
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(operation, started, "error", 0)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc),
                details={"type": type(exc).__name__},
                status_code=0,
                raw_payload=None,
            ) from exc

        if response.ok:
            self._record_operation(operation, started, "success", response.status_code)
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                if not require_json:
                    return None
                raise InvalidResponseError(
                    code="INVALID_RESPONSE",
                    message="Response body is not valid JSON",
                    details=None,
                    status_code=response.status_code,
                    raw_payload=response.text,
                ) from exc

        payload: Any
        try:
            payload = response.json()
        except ValueError:
            payload = {"message": response.text or response.reason}
        self._record_operation(operation, started, "error", response.status_code)
        raise map_error(response.status_code, payload if isinstance(payload, dict) else None)

    def _record_operation(self, operation: str, started: float, result: str, status_code: int) -> None:
        self.last_operation = LastOperation(
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            status_code=status_code,
        )
