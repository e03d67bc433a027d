"""
Helm Kanvas Snapshot - Generate a Kanvas snapshot of a Helm chart.
Imports the chart into Meshery as a design and triggers the workflow that renders it.
"""

from typing import NamedTuple

import click
import httpx
from pydantic import ValidationError

from .config import Settings, get_settings
from .design_importer import import_design
from .errors import DesignCreationFailed, InvalidEmailFormat, KanvasSnapshotError, SnapshotGenerationFailed
from .http_client import client_or_new
from .snapshot_dispatcher import dispatch_snapshot
from .utils import build_asset_location, derive_name_from_uri, is_valid_email, log, warn

__version__ = "0.1.0"


class SnapshotResult(NamedTuple):
    design_id: str
    asset_location: str


def create_snapshot(chart_uri: str, email: str, name: str, settings: Settings,
                    client: httpx.Client = None, verbose: bool = False) -> SnapshotResult:
    """
    Import a Helm chart as a Meshery design and dispatch its snapshot workflow.

    Steps run strictly in order; the dispatch only happens once the import
    returned a design ID. A design created by a successful import is left in
    place if the dispatch fails.

    Args:
        chart_uri: URI of the Helm chart package
        email: Optional address to notify when the snapshot is ready
        name: Design name (derived from chart_uri when empty)
        settings: Plugin settings
        client: Optional httpx client shared by both requests
        verbose: Enable verbose logging

    Returns:
        SnapshotResult: design ID and the URL the snapshot will appear at

    Raises:
        ValueError: If chart_uri is empty
        InvalidEmailFormat: If email is set but not a valid mailbox
        DesignCreationFailed: If the import fails
        SnapshotGenerationFailed: If the workflow dispatch fails
    """
    if not chart_uri:
        raise ValueError("chart URI must not be empty")
    if email and not is_valid_email(email):
        raise InvalidEmailFormat(email)

    with client_or_new(settings, client) as http:
        try:
            design_id = import_design(chart_uri, name, email, settings, http, verbose)
        except KanvasSnapshotError as e:
            raise DesignCreationFailed(e) from e

        asset_location = build_asset_location(design_id, settings)
        log(f"Asset location: {asset_location}", verbose)

        try:
            dispatch_snapshot(design_id, asset_location, email, settings.workflow_access_token,
                              settings, http, verbose)
        except KanvasSnapshotError as e:
            raise SnapshotGenerationFailed(e) from e

    return SnapshotResult(design_id, asset_location)


@click.group()
@click.version_option(version=__version__, prog_name='helm-kanvas-snapshot')
@click.pass_context
def cli(ctx):
    """Helm Kanvas Snapshot - Visualize Helm charts with Meshery Kanvas.

    Import a Helm chart into Meshery as a design and receive a rendered
    snapshot of it.
    """
    ctx.ensure_object(dict)


@cli.command()
@click.option(
    '--file', '-f', 'chart_uri',
    required=True,
    help='URI to Helm chart (required)'
)
@click.option(
    '--email', '-e',
    default='',
    help='Optional email address to notify when the snapshot is ready'
)
@click.option(
    '--name',
    default='',
    help='Optional name for the Meshery design (default: chart file name)'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose output'
)
@click.pass_context
def generate(ctx, chart_uri, email, name, verbose):
    """Generate a Kanvas snapshot using a Helm chart.

    Examples:

      helm kanvas-snapshot generate -f https://meshery.github.io/meshery.io/charts/meshery-v0.7.109.tgz

      helm kanvas-snapshot generate -f ./nginx-15.0.0.tgz -e you@example.com --name nginx-helm
    """
    settings = ctx.obj.get("settings")
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            raise click.ClickException(f"Invalid configuration: {e}")

    missing = settings.missing_required()
    if missing:
        raise click.ClickException(f"Missing required parameter(s): {', '.join(missing)}")

    if not chart_uri:
        raise click.ClickException("Chart URI must not be empty")

    if not name:
        name = derive_name_from_uri(chart_uri)
        warn(f"No design name provided. Using extracted name: {name}")

    try:
        result = create_snapshot(chart_uri, email, name, settings, ctx.obj.get("client"), verbose)
    except KanvasSnapshotError as e:
        raise click.ClickException(str(e))

    print(f"Successfully created Meshery design. ID: {result.design_id}")
    if email:
        print(f"You will be notified via email at {email} when your Kanvas snapshot is ready.")
    else:
        print(f"Snapshot generated. Snapshot URL: {result.asset_location}")
        print("It may take 3-5 minutes for the Kanvas snapshot to display at the above URL.")
        print("To receive the snapshot via email, use the --email option like this:\n")
        print("  helm kanvas-snapshot generate -f <chart-URI> [--name <snapshot-name>] [-e <email>]")


__all__ = ["cli", "create_snapshot", "SnapshotResult"]
