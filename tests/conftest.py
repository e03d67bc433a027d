"""Global pytest configuration and fixtures for all tests."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add parent directory to path to import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from kanvas_snapshot.config import Settings

OPTIONAL_SETTINGS = (
    "WORKFLOW_REPOSITORY",
    "WORKFLOW_FILE",
    "WORKFLOW_REF",
    "ASSETS_REPOSITORY",
    "HTTP_TIMEOUT_SECONDS",
)


class FakeAPIs:
    """
    Stand-in for the Meshery import endpoint and the GitHub dispatch endpoint.

    Each request is recorded; responses are configured per host through
    `import_response` and `dispatch_response`. Either may be an exception,
    which is raised from the transport instead of returning a response.
    """

    def __init__(self):
        self.requests = []
        self.import_response = httpx.Response(200, json=[{"id": "abc123"}])
        self.dispatch_response = httpx.Response(204)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "api.github.com":
            outcome = self.dispatch_response
        else:
            outcome = self.import_response
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def requests_to(self, host: str) -> list:
        return [r for r in self.requests if r.url.host == host]

    @property
    def import_requests(self) -> list:
        return self.requests_to("meshery.test")

    @property
    def dispatch_requests(self) -> list:
        return self.requests_to("api.github.com")

    def import_payload(self) -> dict:
        return json.loads(self.import_requests[0].content)

    def dispatch_payload(self) -> dict:
        return json.loads(self.dispatch_requests[0].content)


@pytest.fixture
def settings(monkeypatch):
    """Fully configured settings, independent of the environment and any .env file."""
    for name in OPTIONAL_SETTINGS:
        monkeypatch.delenv(name, raising=False)
    return Settings(
        _env_file=None,
        provider_token="provider-token",
        meshery_api_base_url="https://meshery.test",
        meshery_cloud_api_base_url="https://cloud.meshery.test",
        workflow_access_token="workflow-token",
    )


@pytest.fixture
def fake_apis():
    return FakeAPIs()


@pytest.fixture
def client(fake_apis):
    """httpx client routed to the fake APIs."""
    with httpx.Client(transport=httpx.MockTransport(fake_apis.handler)) as c:
        yield c
