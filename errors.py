from __future__ import annotations
from typing import Optional


class ApiError(Exception):
    """
    Base error for every failure surfaced by the startuppong client.

    Subclasses set `kind` so callers can branch on it without isinstance checks.
    The underlying exception (if any) is kept on `cause` and also chained via
    `raise ... from`.
    """

    kind = "Api"

    def __init__(self, detail: str, cause: Optional[BaseException] = None):
        super().__init__(detail)
        self.detail = detail
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.kind}: {self.detail}"


class PlayerNotFoundError(ApiError):
    kind = "PlayerNotFound"

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class HttpError(ApiError):
    kind = "Http"


class IoError(ApiError):
    kind = "Io"


class JsonDecodingError(ApiError):
    kind = "JsonDecoding"


class StatusError(ApiError):
    kind = "Status"

    def __init__(self, status_code: int, url: str, body: str = ""):
        # keep the message short, some error pages are huge
        snippet = body[:200]
        super().__init__(f"{status_code} for {url} -> {snippet}")
        self.status_code = status_code
        self.url = url
        self.body = body


class EnvVarError(ApiError):
    kind = "EnvVar"

    def __init__(self, variable: str, reason: str = "not found"):
        super().__init__(f"{variable} {reason}")
        self.variable = variable


class ConfigError(ApiError):
    kind = "Config"
