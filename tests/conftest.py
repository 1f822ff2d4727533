import json

import pytest

from license_checker import HttpResponse, LicenseChecker


class FakeHttpClient:
    """Records requests and replays a queued response."""

    def __init__(self):
        self.requests = []
        self.response = HttpResponse(status=200, body=json.dumps({"success": True}))
        self.closed = False

    def respond(self, payload, status=200):
        body = payload if isinstance(payload, str) else json.dumps(payload)
        self.response = HttpResponse(status=status, body=body)

    def get(self, path):
        self.requests.append(("GET", path, None))
        return self.response

    def post(self, path, data):
        self.requests.append(("POST", path, data))
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def http_client():
    return FakeHttpClient()


@pytest.fixture
def checker(http_client):
    return LicenseChecker("https://licenses.example.com/", http_client=http_client)
