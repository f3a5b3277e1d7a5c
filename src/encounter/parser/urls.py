"""
Resolve entity references embedded in link query strings.

Links on the site carry the entity type as a one-letter prefix of the id parameter:
`GameDetails.aspx?gid=123`, `TeamDetails.aspx?tid=5`, `UserDetails.aspx?uid=39999`.
"""
import re

from src.encounter.errors import FormatError, UnsupportedLinkTypeError
from src.encounter.models.stubs import EntityKind, PlayerStub, ReferenceStub, TeamStub
from src.encounter.parser.convertors import digits_to_int
from src.encounter.parser.document import Node

URL_ID = re.compile(r"[gtu]id=(\d+)")
URL_OBJECT = re.compile(r"([gtu])id=(\d+)")
URL_ANY_OBJECT = re.compile(r"([a-z])id=(\d+)")


def parse_url_id(url: str) -> int:
    """Return the game, team or player id found in `url`."""
    match = URL_ID.search(url)
    if match is None:
        raise FormatError(url)
    return digits_to_int(match.group(1))


def parse_url_object(anchor: Node) -> ReferenceStub:
    """
    Build a team or player stub from an anchor.

    The id comes from the anchor's href, the name from its text.
    Game links and unknown type codes raise UnsupportedLinkTypeError.
    """
    href = anchor.get("href")
    if not href:
        raise FormatError(href, "Anchor has no href")
    match = URL_OBJECT.search(href) or URL_ANY_OBJECT.search(href)
    if match is None:
        raise FormatError(href)
    code, entity_id = match.group(1), digits_to_int(match.group(2))
    name = anchor.get_text()

    try:
        kind = EntityKind(code)
    except ValueError:
        raise UnsupportedLinkTypeError(code, href) from None
    if kind is EntityKind.TEAM:
        return TeamStub(id=entity_id, name=name)
    if kind is EntityKind.PLAYER:
        return PlayerStub(id=entity_id, name=name)
    raise UnsupportedLinkTypeError(code, href)
