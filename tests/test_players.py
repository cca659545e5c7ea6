from urllib.parse import quote

import pytest

from src.api.outcomes import Failure, FailureKind, Success
from src.api.players import lookup_player, normalize_player_tag



@pytest.mark.parametrize("raw", ["ABC", "2PP", "lower", "a b/c", "é?"])
def test_normalize_prepends_marker(raw):
    assert normalize_player_tag(raw) == quote("#" + raw, safe="!*'()")


@pytest.mark.parametrize("raw", ["#ABC", "#2PP", "#a b"])
def test_normalize_keeps_existing_marker(raw):
    assert normalize_player_tag(raw) == quote(raw, safe="!*'()")


def test_normalize_encodes_marker_and_path_chars():
    assert normalize_player_tag("ABC") == "%23ABC"
    assert normalize_player_tag("#ABC") == "%23ABC"
    assert normalize_player_tag("A/B") == "%23A%2FB"
    assert normalize_player_tag("A#B") == "%23A%23B"


def test_normalize_does_not_strip_or_uppercase():
    assert normalize_player_tag(" abc") == "%23%20abc"


@pytest.mark.parametrize("raw", ["", None])
def test_normalize_rejects_empty(raw):
    with pytest.raises(ValueError):
        normalize_player_tag(raw)


@pytest.mark.parametrize("raw", ["", None])
def test_lookup_missing_tag_makes_no_request(stub_client, make_response, raw):
    client, session = stub_client(response=make_response(200, {}))

    result = lookup_player(raw, client)

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.MISSING_INPUT
    assert result.http_status == 400
    assert session.calls == []


def test_lookup_uses_normalized_tag(stub_client, make_response, settings):
    client, session = stub_client(response=make_response(200, {"tag": "#ABC"}))

    result = lookup_player("ABC", client)

    assert result == Success({"tag": "#ABC"})
    assert session.calls[0][0] == f"{settings.base_url}/players/%23ABC"
