"""Meshery design import: submit a Helm chart URI and obtain a design ID."""

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .config import MESHERY_PROVIDER, Settings
from .errors import DecodingFailed, InvalidEmailFormat, UnexpectedResponseCode
from .http_client import client_or_new, post
from .utils import derive_name_from_uri, is_valid_email, log


class DesignRequest(BaseModel):
    """Payload of a Meshery pattern import."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    save: bool = True
    source_uri: str = Field(alias="url")
    name: str
    notify_email: str = Field(default="", alias="email")

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


def build_design_request(source_uri: str, name: str = "", notify_email: str = "") -> DesignRequest:
    """
    Validate import inputs and build the request payload.

    Args:
        source_uri: URI of the Helm chart package
        name: Design name, derived from the chart file name when empty
        notify_email: Optional address to notify when the snapshot is ready

    Raises:
        ValueError: If source_uri is empty
        InvalidEmailFormat: If notify_email is set but not a valid mailbox
    """
    if not source_uri:
        raise ValueError("chart URI must not be empty")
    if notify_email and not is_valid_email(notify_email):
        raise InvalidEmailFormat(notify_email)

    return DesignRequest(
        source_uri=source_uri,
        name=name or derive_name_from_uri(source_uri),
        notify_email=notify_email,
    )


def import_headers(settings: Settings) -> dict:
    """Headers for the import endpoint; the provider token travels as a session cookie."""
    return {
        "Cookie": f"token={settings.provider_token};meshery-provider={MESHERY_PROVIDER}",
        "Origin": settings.meshery_api_base_url,
        "Content-Type": "application/json",
        "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
    }


def parse_design_id(response: httpx.Response) -> str:
    """
    Extract the design ID from an import response.

    The body must be a JSON array whose first object carries a string 'id'.

    Raises:
        UnexpectedResponseCode: If the status is not 200
        DecodingFailed: If the body is not JSON or has no usable 'id'
    """
    body = response.text
    if response.status_code != 200:
        raise UnexpectedResponseCode(response.status_code, body)

    try:
        result = response.json()
    except ValueError as e:
        raise DecodingFailed(f"invalid JSON ({e})", body) from e

    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        raise DecodingFailed("expected a non-empty list of designs", body)

    design_id = result[0].get("id")
    if not isinstance(design_id, str) or not design_id:
        raise DecodingFailed("failed to extract design ID from response", body)

    return design_id


def import_design(source_uri: str, name: str, notify_email: str, settings: Settings,
                  client: httpx.Client = None, verbose: bool = False) -> str:
    """
    Create a Meshery design from a Helm chart.

    Sends exactly one POST to {meshery_api_base_url}/api/pattern/import.

    Args:
        source_uri: URI of the Helm chart package
        name: Design name (derived from source_uri when empty)
        notify_email: Optional notification address
        settings: Plugin settings holding the provider token and base URL
        client: Optional httpx client; a new one is created and closed otherwise
        verbose: Enable verbose logging

    Returns:
        str: The design ID returned by Meshery

    Raises:
        ValueError, InvalidEmailFormat: On invalid input (nothing is sent)
        HTTPRequestFailed: On request construction or transport failure
        UnexpectedResponseCode: On a non-200 response
        DecodingFailed: On a malformed response body
    """
    request = build_design_request(source_uri, name, notify_email)
    url = settings.import_url

    log(f"Importing design '{request.name}' from {request.source_uri}", verbose)
    log(f"POST {url}", verbose)

    with client_or_new(settings, client) as http:
        response = post(http, url, request.to_json(), import_headers(settings))

    log(f"Import response status: {response.status_code}", verbose)
    design_id = parse_design_id(response)
    log(f"Successfully created Meshery design. ID: {design_id}", verbose)
    return design_id
