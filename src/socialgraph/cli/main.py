"""Command-line interface for socialgraph.

Provides a demo over the bundled sample network and query commands over
JSON network files.
"""

import json
import sys
import time
from pathlib import Path
from typing import Any, NoReturn

import click

from socialgraph.audit.helpers import generate_run_id, get_package_version
from socialgraph.audit.logger import AuditLogger
from socialgraph.cli.formatting import (
    format_communities,
    format_path,
    format_recommendations,
    format_users,
    sorted_communities,
)
from socialgraph.config import DEFAULT_RECOMMENDATION_LIMIT, NetworkConfig
from socialgraph.errors import SocialGraphError
from socialgraph.loader import load_network
from socialgraph.models import UserId
from socialgraph.network import SocialNetwork
from socialgraph.sample import build_sample_network

__all__ = ["cli"]

__version__ = get_package_version()


def _to_user_id(ctx: click.Context, param: click.Parameter, value: str) -> UserId:
    """Convert integer-looking identifiers to int, keep the rest as str."""
    try:
        return int(value)
    except ValueError:
        return value


def _close_run(state: dict[str, Any]) -> None:
    """Write run_finished and close the audit logger."""
    audit_logger: AuditLogger = state["audit_logger"]
    network: SocialNetwork | None = state.get("network")

    counters = None
    if network is not None:
        counters = {
            "users": len(network),
            "friendships": network.friendship_count(),
            "communities": network.community_count(),
        }

    audit_logger.run_finished(
        status=state["status"],
        duration_seconds=time.perf_counter() - state["started"],
        counters=counters,
    )
    audit_logger.close()


def _fail(ctx: click.Context, error: Exception) -> NoReturn:
    """Report error in red, log it, and exit with status 1."""
    state = ctx.obj
    if state["audit_logger"] is not None:
        state["audit_logger"].error(type(error).__name__, str(error))
    state["status"] = "failed"

    click.secho(f"Error: {error}", fg="red", err=True)
    sys.exit(1)


def _load(ctx: click.Context, network_file: str) -> SocialNetwork:
    """Load network_file with the run's config and audit logger attached."""
    state = ctx.obj
    try:
        network = load_network(
            Path(network_file),
            config=NetworkConfig(reject_self_friendship=state["strict"]),
            audit_logger=state["audit_logger"],
        )
    except (FileNotFoundError, SocialGraphError) as e:
        _fail(ctx, e)

    state["network"] = network
    return network


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, default=str))


@click.group()
@click.version_option(version=__version__, prog_name="socialgraph")
@click.option(
    "--events",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append structured audit events (JSONL) to this file",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Reject self-friendships in network files instead of ignoring them",
)
@click.pass_context
def cli(ctx: click.Context, events: str | None, strict: bool) -> None:
    """Social graph analyses: paths, friend recommendations, communities.

    Use 'socialgraph COMMAND --help' for command-specific help.
    """
    state: dict[str, Any] = {
        "audit_logger": None,
        "network": None,
        "status": "success",
        "strict": strict,
        "started": time.perf_counter(),
    }
    ctx.obj = state

    if events is not None:
        audit_logger = AuditLogger(run_id=generate_run_id(), log_path=Path(events))
        audit_logger.run_started(
            command=sys.argv,
            parameters={"command": ctx.invoked_subcommand},
        )
        state["audit_logger"] = audit_logger
        ctx.call_on_close(lambda: _close_run(state))


@cli.command()
@click.option(
    "--limit",
    "-k",
    type=int,
    default=DEFAULT_RECOMMENDATION_LIMIT,
    show_default=True,
    help="Maximum number of recommendations per user",
)
@click.pass_context
def demo(ctx: click.Context, limit: int) -> None:
    """Run every analysis on the built-in eight-user sample network.

    Examples
    --------
        socialgraph demo
        socialgraph --events events.jsonl demo
    """
    network = build_sample_network(audit_logger=ctx.obj["audit_logger"])
    ctx.obj["network"] = network

    click.echo(format_users(network.list_users()))
    click.echo()

    click.echo("[Shortest Path] From 1 to 5:")
    click.echo(format_path(network.shortest_path(1, 5)))
    click.echo()

    for user in (4, 6):
        click.echo(f"[Recommendations] For user {user} (top-{limit}):")
        click.echo(format_recommendations(network.recommend_friends(user, limit)))
        click.echo()

    click.echo(format_communities(network.communities()))


@cli.command()
@click.argument("network_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def users(ctx: click.Context, network_file: str, as_json: bool) -> None:
    """List every user in NETWORK_FILE."""
    network = _load(ctx, network_file)
    user_list = network.list_users()

    if as_json:
        _echo_json(user_list)
    else:
        click.echo(format_users(user_list))


@cli.command()
@click.argument("network_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("src", callback=_to_user_id)
@click.argument("dst", callback=_to_user_id)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def path(
    ctx: click.Context,
    network_file: str,
    src: UserId,
    dst: UserId,
    as_json: bool,
) -> None:
    """Find the shortest friendship path from SRC to DST.

    An unreachable or unknown user prints "No path found." and still exits 0.
    Put negative identifiers after "--" so they are not read as options.

    Examples
    --------
        socialgraph path network.json 1 5
        socialgraph path network.json alice bob --json
        socialgraph path network.json -- -1 2
    """
    network = _load(ctx, network_file)
    found = network.shortest_path(src, dst)

    if as_json:
        _echo_json({"src": src, "dst": dst, "path": found, "length": max(len(found) - 1, 0)})
    else:
        click.echo(format_path(found))


@cli.command()
@click.argument("network_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("user", callback=_to_user_id)
@click.option(
    "--limit",
    "-k",
    type=int,
    default=DEFAULT_RECOMMENDATION_LIMIT,
    show_default=True,
    help="Maximum number of recommendations",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def recommend(
    ctx: click.Context,
    network_file: str,
    user: UserId,
    limit: int,
    as_json: bool,
) -> None:
    """Recommend friends for USER ranked by mutual friends.

    Put a negative USER after "--" so it is not read as an option.

    Examples
    --------
        socialgraph recommend network.json 4
        socialgraph recommend network.json 4 -k 3 --json
        socialgraph recommend network.json --json -- -1
    """
    network = _load(ctx, network_file)
    recommendations = network.recommend_friends(user, limit)

    if as_json:
        _echo_json([rec.to_dict() for rec in recommendations])
    else:
        click.echo(format_recommendations(recommendations))


@cli.command()
@click.argument("network_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def communities(ctx: click.Context, network_file: str, as_json: bool) -> None:
    """Group users of NETWORK_FILE into connected communities."""
    network = _load(ctx, network_file)
    groups = network.communities()

    if as_json:
        _echo_json(
            [{"root": root, "members": members} for root, members in sorted_communities(groups)]
        )
    else:
        click.echo(format_communities(groups))


if __name__ == "__main__":
    cli()
