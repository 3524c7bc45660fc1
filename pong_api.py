"""
API wrapper for startuppong.com.

A handful of module level functions, one per endpoint. JSON responses are
decoded into the dataclasses in model.py.

    account = Account("account_id", "access_key")
    for p in get_players(account).players:
        print(f"{p.rank} ({p.rating}) - {p.name}")
"""
from __future__ import annotations
from typing import Iterable, List, Optional
from urllib.parse import urlencode
import logging

from errors import PlayerNotFoundError
from model import Account, GetMatchesResponse, GetPlayersResponse
from settings import DEFAULT_BASE_URL
from transport import RequestsTransport, Transport, check_status, fetch_json


logger = logging.getLogger(__name__)

BASE_URL = DEFAULT_BASE_URL
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _auth_params(account: Account) -> dict:
    return {"api_account_id": account.id(), "api_access_key": account.key()}


def _url(base_url: Optional[str], path: str) -> str:
    return (base_url or BASE_URL).rstrip("/") + path


def get_players(account: Account, *, transport: Optional[Transport] = None,
                base_url: Optional[str] = None) -> GetPlayersResponse:
    """All players on the account's ladder. Wraps /api/v1/get_players."""
    url = _url(base_url, "/api/v1/get_players") + "?" + urlencode(_auth_params(account))
    return fetch_json(url, GetPlayersResponse.from_dict, transport)


def get_recent_matches(account: Account, *, transport: Optional[Transport] = None,
                       base_url: Optional[str] = None) -> GetMatchesResponse:
    """Most recent matches. Wraps /api/v1/get_recent_matches_for_company."""
    url = _url(base_url, "/api/v1/get_recent_matches_for_company") + "?" + urlencode(_auth_params(account))
    return fetch_json(url, GetMatchesResponse.from_dict, transport)


get_recent_matches_for_company = get_recent_matches


def add_match(account: Account, winner_id: int, loser_id: int, *,
              transport: Optional[Transport] = None, base_url: Optional[str] = None) -> None:
    """
    Record a match between two player ids. Wraps /api/v1/add_match.

    The response body is not decoded; a non-2xx status raises StatusError.
    See record_match_by_name to do the same with names.
    """
    transport = transport or RequestsTransport()
    url = _url(base_url, "/api/v1/add_match")
    params = _auth_params(account)
    params["winner_id"] = winner_id
    params["loser_id"] = loser_id

    r = transport.post(url, urlencode(params), {"Content-Type": FORM_CONTENT_TYPE})
    check_status(r, url)


def resolve_ids(account: Account, names: Iterable[str], *,
                transport: Optional[Transport] = None, base_url: Optional[str] = None) -> List[int]:
    """
    Map name fragments to player ids.

    The API has no search endpoint, so the player list is fetched once and
    each fragment is matched against it in order. The first player whose
    name contains the fragment (case-sensitive) wins. Raises
    PlayerNotFoundError for the first fragment nothing matches.
    """
    players = get_players(account, transport=transport, base_url=base_url).players
    ids: List[int] = []

    for name in names:
        match = next((p for p in players if name in p.name), None)
        if match is None:
            raise PlayerNotFoundError(name)
        logger.debug("resolved %r -> %s (%d)", name, match.name, match.id)
        ids.append(match.id)

    return ids


get_players_ids = resolve_ids


def record_match_by_name(account: Account, winner: str, loser: str, *,
                         transport: Optional[Transport] = None, base_url: Optional[str] = None) -> None:
    """
    Add a match using name fragments instead of ids.

    Both names are resolved from a single get_players call. Lookup failures
    raise PlayerNotFoundError carrying the first name that didn't resolve.
    """
    winner_id, loser_id = resolve_ids(account, [winner, loser], transport=transport, base_url=base_url)
    add_match(account, winner_id, loser_id, transport=transport, base_url=base_url)


add_match_with_names = record_match_by_name
