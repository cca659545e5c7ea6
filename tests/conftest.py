import json

import pytest
import requests

from src.api.coc_client import CocClient
from src.api.config import Settings


def _build_response(status, body):
    """Build a real requests.Response; `body` may be raw bytes or a JSON-able value."""
    response = requests.Response()
    response.status_code = status
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


class StubSession:
    """Stands in for requests.Session and records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings(bearer_token="test-token", base_url="https://coc.example/v1")


@pytest.fixture
def stub_client(settings):
    def build(response=None, error=None):
        session = StubSession(response=response, error=error)
        return CocClient(settings, session=session), session

    return build


@pytest.fixture
def make_response():
    return _build_response
