import os
import tempfile
from unittest.mock import MagicMock, patch

# Keep test runs from writing a log file into the working directory
os.environ.setdefault("LOG_PATH", tempfile.NamedTemporaryFile().name)

import pytest

from transmission_api.client import TransmissionClient


@pytest.fixture
def make_response():
    def _make_response(status_code=200, payload=None, headers=None, body=None):
        response = MagicMock()
        response.status_code = status_code
        response.headers = headers or {}
        if payload is None:
            response.text = body or "<h1>409: Conflict</h1>"
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.text = str(payload)
            response.json.return_value = payload
        return response
    return _make_response


@pytest.fixture
def http():
    with patch("transmission_api.client.requests.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session
        yield mock_session


@pytest.fixture
def client(http):
    return TransmissionClient("localhost:9091")


@pytest.fixture
def success(make_response):
    return make_response(payload={"result": "success", "tag": 1, "arguments": {}})
