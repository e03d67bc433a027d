"""
Plugin configuration.

Credentials and endpoints are read from environment variables (or a .env
file) once per invocation and passed explicitly into the import and dispatch
steps.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
RAW_CONTENT_BASE_URL = "https://raw.githubusercontent.com"
MESHERY_PROVIDER = "Layer5"
IMPORT_PATH = "/api/pattern/import"
ASSET_PATH_TEMPLATE = "master/action-assets/helm-plugin-assets/{design_id}.png"

REQUIRED_FIELDS = {
    "provider_token": "providerToken",
    "meshery_cloud_api_base_url": "mesheryCloudAPIBaseURL",
    "meshery_api_base_url": "mesheryAPIBaseURL",
    "workflow_access_token": "workflowAccessToken",
}


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables / .env file."""

    # --- Meshery ---
    provider_token: str = ""
    meshery_api_base_url: str = ""
    # Not used by the import/dispatch steps, only checked for presence
    meshery_cloud_api_base_url: str = ""

    # --- GitHub workflow ---
    workflow_access_token: str = ""
    workflow_repository: str = "meshery-extensions/helm-kanvas-snapshot"
    workflow_file: str = "kanvas.yaml"
    workflow_ref: str = "master"
    assets_repository: str = "layer5labs/meshery-extensions-packages"

    # --- HTTP ---
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def missing_required(self) -> list[str]:
        """Return the names of required parameters that are empty."""
        return [label for field, label in REQUIRED_FIELDS.items() if not getattr(self, field)]

    @property
    def import_url(self) -> str:
        return self.meshery_api_base_url.rstrip("/") + IMPORT_PATH

    @property
    def dispatch_url(self) -> str:
        return (
            f"{GITHUB_API_BASE_URL}/repos/{self.workflow_repository}"
            f"/actions/workflows/{self.workflow_file}/dispatches"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
