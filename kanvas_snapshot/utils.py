"""Common utility functions for Helm Kanvas Snapshot."""

import re
import sys
from pathlib import PurePosixPath

from .config import ASSET_PATH_TEMPLATE, RAW_CONTENT_BASE_URL, Settings

EMAIL_PATTERN = re.compile(r"[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}")


def log(message: str, verbose: bool = False):
    """Print message only if verbose mode is enabled."""
    if verbose:
        print(message, file=sys.stderr)


def warn(message: str):
    """Print a warning to stderr regardless of verbosity."""
    print(f"Warning: {message}", file=sys.stderr)


def derive_name_from_uri(uri: str) -> str:
    """
    Derive a design name from a chart URI.

    For https://meshery.github.io/meshery.io/charts/meshery-v0.7.109.tgz, return 'meshery-v0.7.109'
    """
    return PurePosixPath(uri).stem


def is_valid_email(email: str) -> bool:
    """Check mailbox syntax only, no deliverability checks."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def build_asset_location(design_id: str, settings: Settings) -> str:
    """Return the raw GitHub URL the rendered snapshot for design_id is published to."""
    path = ASSET_PATH_TEMPLATE.format(design_id=design_id)
    return f"{RAW_CONTENT_BASE_URL}/{settings.assets_repository}/{path}"
