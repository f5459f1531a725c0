from __future__ import annotations

from urllib.parse import urlsplit

import pytest
import requests

from uniattend.main import create_app
from uniattend.sync.client import AttendanceApiClient


class FlaskResponse:
    def __init__(self, response):
        self.status_code = response.status_code
        self._response = response

    def json(self):
        return self._response.get_json()

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


class FlaskSession:
    """Routes requests.Session-style calls into a Flask test client."""

    def __init__(self, test_client):
        self._client = test_client
        self.posts = []

    def get(self, url, timeout=None):
        return FlaskResponse(self._client.get(urlsplit(url).path))

    def post(self, url, json=None, timeout=None):
        path = urlsplit(url).path
        self.posts.append((path, json))
        return FlaskResponse(self._client.post(path, json=json))

    def close(self):
        pass


class UnreachableSession:
    """A requests.Session stand-in for a server that is down."""

    def get(self, url, timeout=None):
        raise requests.exceptions.ConnectionError(f"cannot reach {url}")

    def post(self, url, json=None, timeout=None):
        raise requests.exceptions.ConnectionError(f"cannot reach {url}")

    def close(self):
        pass


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "attendance.json"


@pytest.fixture
def app(data_file, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DATA_FILE": str(data_file)})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(client):
    return FlaskSession(client)


@pytest.fixture
def api(session):
    return AttendanceApiClient("http://testserver/", session=session)


@pytest.fixture
def offline_api():
    return AttendanceApiClient("http://127.0.0.1:9/", session=UnreachableSession())
