from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
import os

from errors import EnvVarError, JsonDecodingError


ACCOUNT_ID_VAR = "STARTUPPONG_ACCOUNT_ID"
ACCESS_KEY_VAR = "STARTUPPONG_ACCESS_KEY"


def _field(data: Dict[str, Any], key: str) -> Any:
    if not isinstance(data, dict):
        raise JsonDecodingError(f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise JsonDecodingError(f"missing field '{key}'")
    return data[key]


def _uint(data: Dict[str, Any], key: str) -> int:
    v = _field(data, key)
    # bool is an int subclass, json true/false must not pass as ids
    if isinstance(v, bool) or not isinstance(v, int):
        raise JsonDecodingError(f"field '{key}' expected an integer, got {v!r}")
    if v < 0:
        raise JsonDecodingError(f"field '{key}' expected a non-negative integer, got {v}")
    return v


def _float(data: Dict[str, Any], key: str) -> float:
    v = _field(data, key)
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise JsonDecodingError(f"field '{key}' expected a number, got {v!r}")
    return float(v)


def _str(data: Dict[str, Any], key: str) -> str:
    v = _field(data, key)
    if not isinstance(v, str):
        raise JsonDecodingError(f"field '{key}' expected a string, got {v!r}")
    return v


def _list(data: Dict[str, Any], key: str) -> List[Any]:
    v = _field(data, key)
    if not isinstance(v, list):
        raise JsonDecodingError(f"field '{key}' expected an array, got {type(v).__name__}")
    return v


@dataclass(frozen=True)
class Account:
    """
    Credentials for every API call: the account id and access key shown on
    the startuppong.com account page.
    """
    account_id: str
    access_key: str = field(repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, Any]] = None) -> "Account":
        """
        Build an Account from STARTUPPONG_ACCOUNT_ID / STARTUPPONG_ACCESS_KEY.
        `environ` defaults to the process environment; pass a dict in tests.
        """
        env = os.environ if environ is None else environ
        values = []
        for name in (ACCOUNT_ID_VAR, ACCESS_KEY_VAR):
            if name not in env:
                raise EnvVarError(name, "not found")
            v = env[name]
            if not isinstance(v, str):
                raise EnvVarError(name, "is not valid text")
            try:
                # undecodable environ bytes arrive as lone surrogates
                v.encode("utf-8")
            except UnicodeEncodeError as e:
                raise EnvVarError(name, "is not valid text") from e
            values.append(v)
        return cls(account_id=values[0], access_key=values[1])

    def id(self) -> str:
        return self.account_id

    def key(self) -> str:
        return self.access_key


@dataclass(frozen=True)
class Player:
    id: int
    rating: float
    rank: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        return cls(
            id=_uint(data, "id"),
            rating=_float(data, "rating"),
            rank=_uint(data, "rank"),
            name=_str(data, "name"),
        )


@dataclass(frozen=True)
class Match:
    # stats before and after a set
    id: int
    played_time: int  # unix seconds
    winner_id: int
    winner_name: str
    winner_rating_before: float
    winner_rating_after: float
    winner_rank_before: int
    winner_rank_after: int
    loser_id: int
    loser_name: str
    loser_rating_before: float
    loser_rating_after: float
    loser_rank_before: int
    loser_rank_after: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        return cls(
            id=_uint(data, "id"),
            played_time=_uint(data, "played_time"),
            winner_id=_uint(data, "winner_id"),
            winner_name=_str(data, "winner_name"),
            winner_rating_before=_float(data, "winner_rating_before"),
            winner_rating_after=_float(data, "winner_rating_after"),
            winner_rank_before=_uint(data, "winner_rank_before"),
            winner_rank_after=_uint(data, "winner_rank_after"),
            loser_id=_uint(data, "loser_id"),
            loser_name=_str(data, "loser_name"),
            loser_rating_before=_float(data, "loser_rating_before"),
            loser_rating_after=_float(data, "loser_rating_after"),
            loser_rank_before=_uint(data, "loser_rank_before"),
            loser_rank_after=_uint(data, "loser_rank_after"),
        )


@dataclass
class GetPlayersResponse:
    """Body of /api/v1/get_players. Leaderboard order is whatever the server sends."""
    players: List[Player]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GetPlayersResponse":
        return cls(players=[Player.from_dict(p) for p in _list(data, "players")])


@dataclass
class GetMatchesResponse:
    """Body of /api/v1/get_recent_matches_for_company."""
    matches: List[Match]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GetMatchesResponse":
        return cls(matches=[Match.from_dict(m) for m in _list(data, "matches")])
