"""Share-link helpers.

A game is shared as a query string carrying three fields: ``board`` (the board
token), ``size`` (a board size symbol) and ``set`` (the team on move for the
recipient). Transporting the link is someone else's job.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit

from .errors import InvalidToken
from .game import GameSession, GameToken
from .pieces import BoardSize, Team

logger = logging.getLogger(__name__)

LINK_FIELDS = ("board", "size", "set")


def buildQuery(session: GameSession) -> str:
    return urlencode(dict(zip(LINK_FIELDS, session.toToken())))


def parseQuery(link: str) -> GameToken:
    """Extract the three token fields from a query string or a full URL."""
    link, _, _ = link.partition("#")
    query = urlsplit(link).query if "?" in link or "://" in link else link
    items = parse_qs(query, keep_blank_values=True)
    missing = [name for name in LINK_FIELDS if name not in items]
    if missing:
        raise InvalidToken(f"Link is missing field(s): {', '.join(missing)}.")
    board, size, team = (items[name][-1] for name in LINK_FIELDS)
    return (board, size, team)


def sessionFromLink(
    link: Optional[str],
    default_size: BoardSize = BoardSize.SMALL,
    default_team: Team = Team.FIRST,
) -> GameSession:
    """Open the shared game, or a fresh default one when there is nothing usable."""
    session = GameSession(default_size, default_team)
    if not link:
        return session
    try:
        session.loadFromToken(*parseQuery(link))
    except InvalidToken as exc:
        logger.warning("Ignoring shared link, starting a new game instead: %s", exc)
        session.newGame(default_size, default_team)
    return session
