"""Trigger the GitHub Actions workflow that renders a Kanvas snapshot."""

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .config import GITHUB_API_VERSION, Settings
from .errors import UnexpectedResponseCode, WorkflowAuthFailed
from .http_client import client_or_new, post
from .utils import log

AUTH_FAILURE_CODES = (401, 403)


class DispatchInputs(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_id: str = Field(alias="contentID")
    asset_location: str = Field(alias="assetLocation")
    email: str = ""


class DispatchRequest(BaseModel):
    """Body of a workflow_dispatch event."""

    model_config = ConfigDict(frozen=True)

    ref: str
    inputs: DispatchInputs

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


def build_dispatch_request(design_id: str, asset_location: str, notify_email: str = "",
                           ref: str = "master") -> DispatchRequest:
    return DispatchRequest(
        ref=ref,
        inputs=DispatchInputs(
            content_id=design_id,
            asset_location=asset_location,
            email=notify_email or "",
        ),
    )


def dispatch_headers(workflow_token: str) -> dict:
    return {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {workflow_token}",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


def check_dispatch_response(response: httpx.Response):
    """
    Interpret the workflow dispatch status code.

    Raises:
        WorkflowAuthFailed: On 401 or 403
        UnexpectedResponseCode: On any other status outside 2xx
    """
    if response.status_code in AUTH_FAILURE_CODES:
        raise WorkflowAuthFailed(response.status_code, response.text)
    if not 200 <= response.status_code < 300:
        raise UnexpectedResponseCode(response.status_code, response.text)


def dispatch_snapshot(design_id: str, asset_location: str, notify_email: str, workflow_token: str,
                      settings: Settings, client: httpx.Client = None, verbose: bool = False):
    """
    Start the snapshot rendering workflow for a design.

    The workflow runs asynchronously; this returns as soon as GitHub accepts
    the dispatch and does not wait for the rendering to finish.

    Args:
        design_id: Meshery design ID (must be non-empty)
        asset_location: URL the rendered image will be published to
        notify_email: Optional address the workflow notifies when done
        workflow_token: GitHub token allowed to dispatch the workflow
        settings: Plugin settings (workflow repository, file and ref)
        client: Optional httpx client; a new one is created and closed otherwise
        verbose: Enable verbose logging

    Raises:
        HTTPRequestFailed: On request construction or transport failure
        WorkflowAuthFailed: If GitHub rejects the token
        UnexpectedResponseCode: On any other non-2xx response
    """
    request = build_dispatch_request(design_id, asset_location, notify_email, settings.workflow_ref)
    url = settings.dispatch_url

    log(f"Dispatching snapshot workflow for design {design_id}", verbose)
    log(f"POST {url}", verbose)

    with client_or_new(settings, client) as http:
        response = post(http, url, request.to_json(), dispatch_headers(workflow_token))

    log(f"Dispatch response status: {response.status_code}", verbose)
    check_dispatch_response(response)
