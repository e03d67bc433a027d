#!/usr/bin/env -S uv run --quiet --script
# /// script
# dependencies = [
#   "click>=8.0",
#   "httpx",
#   "pydantic>=2",
#   "pydantic-settings",
# ]
# ///
"""
Helm Kanvas Snapshot - Generate a Kanvas snapshot of a Helm chart.
Entry point used by the Helm plugin manifest.
"""

from kanvas_snapshot import cli

if __name__ == "__main__":
    cli()
