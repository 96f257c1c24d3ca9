"""Flask CLI commands for refresh-token housekeeping."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import click
from flask.cli import with_appcontext

from account_service.api.deps import refresh_token_store
from account_service.infra.system.clock import SystemClock

LOGGER = logging.getLogger(__name__)


@click.group("tokens")
def tokens_cli() -> None:
    """Refresh-token maintenance commands."""


@tokens_cli.command("purge-expired")
@click.option(
    "--before",
    type=click.DateTime(formats=["%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"]),
    default=None,
    help="Cut-off instant in UTC (defaults to now).",
)
@with_appcontext
def purge_expired(before: datetime | None) -> None:
    """Delete refresh tokens whose expiry is strictly before the cut-off."""
    cutoff = before.replace(tzinfo=UTC) if before else SystemClock().now()
    purged = refresh_token_store().delete_expired(cutoff)
    LOGGER.info("tokens.purged", extra={"event": "tokens.purged", "purged": purged})
    click.echo(f"Purged {purged} expired refresh token(s) (cut-off {cutoff.isoformat()}).")
