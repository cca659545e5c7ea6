# src/api/players.py
from typing import Optional
from urllib.parse import quote

from .coc_client import CocClient
from .outcomes import Failure, FailureKind, UpstreamResult

TAG_MARKER = "#"

# Same set encodeURIComponent leaves unescaped (quote already keeps -_.~)
_PATH_SAFE = "!*'()"


def normalize_player_tag(tag: Optional[str]) -> str:
    """
    Normalize a Clash of Clans player tag for use in a URL path:

    - Ensure it starts with '#'
    - Percent-encode it, so '#' becomes '%23'

    No stripping or case changes; the API decides what a valid tag is.

    Raises:
        ValueError if the tag is empty or missing.
    """
    if not tag:
        raise ValueError("Player tag is required")
    if not tag.startswith(TAG_MARKER):
        tag = TAG_MARKER + tag
    return quote(tag, safe=_PATH_SAFE)


def lookup_player(tag: Optional[str], client: CocClient) -> UpstreamResult:
    """
    Look up one player by tag.

    Args:
        tag: Player tag, with or without leading '#'.
        client: CocClient used for the single upstream request.

    Returns:
        Success with the raw player document, or a Failure.
    """
    try:
        encoded_tag = normalize_player_tag(tag)
    except ValueError as exc:
        return Failure(FailureKind.MISSING_INPUT, str(exc))

    return client.get_player(encoded_tag)
