from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar
import json
import logging
import re

import requests

from errors import HttpError, IoError, JsonDecodingError, StatusError


logger = logging.getLogger(__name__)

T = TypeVar("T")

_KEY_RE = re.compile(r"(api_access_key=)[^&]*")


class Response(Protocol):
    status_code: int

    @property
    def ok(self) -> bool: ...

    @property
    def text(self) -> str: ...


class Transport(Protocol):
    def get(self, url: str) -> Response: ...

    def post(self, url: str, data: str, headers: Dict[str, str]) -> Response: ...


def redact(s: str) -> str:
    return _KEY_RE.sub(r"\1***", s)


class RequestsTransport:
    """
    Default transport backed by `requests`. No session is kept, every call
    opens its own connection.
    """

    def __init__(self, timeout: Optional[float] = 10):
        self.timeout = timeout

    def get(self, url: str) -> requests.Response:
        logger.debug("GET %s", redact(url))
        try:
            return requests.get(url, timeout=self.timeout)
        except (requests.exceptions.ChunkedEncodingError, requests.exceptions.ContentDecodingError) as e:
            raise IoError(redact(str(e)), e) from e
        except requests.exceptions.RequestException as e:
            raise HttpError(redact(str(e)), e) from e

    def post(self, url: str, data: str, headers: Dict[str, str]) -> requests.Response:
        logger.debug("POST %s body=%s", url, redact(data))
        try:
            return requests.post(url, data=data, headers=headers, timeout=self.timeout)
        except (requests.exceptions.ChunkedEncodingError, requests.exceptions.ContentDecodingError) as e:
            raise IoError(redact(str(e)), e) from e
        except requests.exceptions.RequestException as e:
            raise HttpError(redact(str(e)), e) from e


def read_body(r: Response) -> str:
    try:
        return r.text
    except (requests.exceptions.ChunkedEncodingError,
            requests.exceptions.ContentDecodingError,
            OSError) as e:
        raise IoError(redact(str(e)), e) from e


def check_status(r: Response, url: str) -> None:
    if not r.ok:
        raise StatusError(r.status_code, redact(url), read_body(r))


def fetch_json(url: str, decode: Callable[[Any], T], transport: Optional[Transport] = None) -> T:
    """
    GET `url`, buffer the whole body and decode it.

    `decode` turns the parsed JSON value into the record type, e.g.
    GetPlayersResponse.from_dict. Transport, read and decode failures come
    back as HttpError / IoError / JsonDecodingError; a non-2xx status as
    StatusError.
    """
    transport = transport or RequestsTransport()
    r = transport.get(url)
    check_status(r, url)
    body = read_body(r)

    try:
        data = json.loads(body)
    except ValueError as e:
        raise JsonDecodingError(str(e), e) from e

    try:
        return decode(data)
    except JsonDecodingError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise JsonDecodingError(str(e), e) from e
