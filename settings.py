from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union
import math
import os

from dotenv import dotenv_values

from errors import ConfigError
from model import Account
from transport import RequestsTransport


DEFAULT_BASE_URL = "http://www.startuppong.com"
DEFAULT_TIMEOUT = 10.0


@dataclass
class ClientSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def transport(self) -> RequestsTransport:
        return RequestsTransport(timeout=self.timeout)


def _merged_env(env_path: Optional[Union[str, Path]], environ: Optional[Mapping[str, Any]]) -> dict:
    """
    Values from the .env file first, then the real environment on top so an
    exported variable always wins over the file.
    """
    path = Path(env_path) if env_path is not None else Path(".env")
    merged: dict = {}
    if path.exists():
        merged.update({k: v for k, v in dotenv_values(path).items() if v is not None})
    merged.update(os.environ if environ is None else environ)
    return merged


def load_account(env_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Mapping[str, Any]] = None) -> Account:
    return Account.from_env(_merged_env(env_path, environ))


def load_settings(env_path: Optional[Union[str, Path]] = None,
                  environ: Optional[Mapping[str, Any]] = None) -> ClientSettings:
    env = _merged_env(env_path, environ)

    base_url = (env.get("STARTUPPONG_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/")
    raw_timeout = (env.get("STARTUPPONG_TIMEOUT") or "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"STARTUPPONG_TIMEOUT must be a number, got {raw_timeout!r}", e) from e
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"STARTUPPONG_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}")
    else:
        timeout = DEFAULT_TIMEOUT

    return ClientSettings(base_url=base_url, timeout=timeout)
