"""
Shared fixtures: a real `requests.Session` whose transport is replaced by a mock,
so requests are fully prepared (body, headers) but never leave the process.
"""

import json
from unittest import mock

import pytest
import requests

from keiran.cli import KeiranClient


BASE = "https://example.test/api"


def makeResponse(status=200, body=None, reason="OK"):
    """Build a `requests.Response` the way the transport adapter would."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.encoding = "utf-8"
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body or b""
    return response


@pytest.fixture
def session():
    session = requests.Session()
    session.send = mock.MagicMock(name="send")
    return session


@pytest.fixture
def client(session):
    return KeiranClient(baseUrl=BASE + "/", session=session)


@pytest.fixture
def clipboard():
    with mock.patch("keiran.cli.__main__.copyToClipboard") as copy:
        yield copy


def sentRequest(session):
    """The single `PreparedRequest` handed to the transport."""
    assert session.send.call_count == 1
    return session.send.call_args.args[0]
