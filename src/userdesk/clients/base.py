from __future__ import annotations

from dataclasses import dataclass, field

from ..http_client import HttpClient


@dataclass
class BaseClient:
    http: HttpClient
    default_headers: dict[str, str] = field(default_factory=dict)

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        merged = {**self.default_headers, **headers}
        return self.http.request(method, path, headers=merged, **kwargs)
