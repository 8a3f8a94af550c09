"""Click CLI with commands: match, referrer, track.

Results are printed to stdout as JSON; messages and logs go to stderr.
"""

from __future__ import annotations

import json

import click
import structlog

from deferred_link.config import DEFAULT_CONFIG_PATH, load_config
from deferred_link.models import DeepLinkResult
from deferred_link.sources import get_clipboard_deep_link, get_install_referrer
from deferred_link.tracking import TrackingClient
from deferred_link.utils.logging import setup_logging


def _read_candidate(candidate: str | None) -> str | None:
    if candidate is not None:
        return candidate
    # stdin stands in for the clipboard
    return click.get_text_stream("stdin").read()


def _resolve(
    ctx: click.Context, candidate: str | None, patterns: tuple[str, ...], log: structlog.stdlib.BoundLogger
) -> DeepLinkResult:
    cfg = ctx.obj["config"]
    deep_links = list(patterns) or cfg.deep_links
    if not deep_links:
        click.echo("No deep link patterns given. Use --pattern or set deep_links in the config file.", err=True)
        raise SystemExit(2)

    result = get_clipboard_deep_link(lambda: _read_candidate(candidate), deep_links, log)
    if result is None:
        click.echo("No matching deep link found.", err=True)
        raise SystemExit(1)
    return result


def _result_payload(result: DeepLinkResult) -> dict:
    path_params = result.extract_short_code_and_dlt_header()
    return {
        "full_deep_link": result.full_deep_link,
        "query_parameters": result.query_parameters,
        "short_code": path_params.short_code,
        "dlt_header": path_params.dlt_header,
    }


@click.group()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, help="Path to config YAML file.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs on stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """Deferred deep link helper."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg
    ctx.obj["log"] = setup_logging(cfg.settings.log_dir, "deferred-link", verbose=verbose)


@cli.command()
@click.argument("candidate", required=False)
@click.option("-p", "--pattern", "patterns", multiple=True, help="Accepted deep link pattern (repeatable).")
@click.pass_context
def match(ctx: click.Context, candidate: str | None, patterns: tuple[str, ...]) -> None:
    """Match CANDIDATE (or stdin) against the accepted patterns."""
    result = _resolve(ctx, candidate, patterns, ctx.obj["log"])
    click.echo(json.dumps(_result_payload(result), indent=2))


@cli.command()
@click.argument("raw")
@click.pass_context
def referrer(ctx: click.Context, raw: str) -> None:
    """Parse a RAW install referrer string into its parameters."""
    info = get_install_referrer(lambda: raw, ctx.obj["log"])
    click.echo(json.dumps(info.as_query_parameters, indent=2))


@cli.command()
@click.argument("candidate", required=False)
@click.option("-p", "--pattern", "patterns", multiple=True, help="Accepted deep link pattern (repeatable).")
@click.pass_context
def track(ctx: click.Context, candidate: str | None, patterns: tuple[str, ...]) -> None:
    """Match CANDIDATE (or stdin) and report its clickId."""
    cfg = ctx.obj["config"]
    log = ctx.obj["log"]
    result = _resolve(ctx, candidate, patterns, log)

    client = TrackingClient(
        cfg.settings.tracking_base_url,
        proxy_url=cfg.settings.proxy_url or None,
        timeout=cfg.settings.http_timeout,
        log=log,
    )
    response = result.track_click(client)
    if response is None:
        click.echo("No clickId in deep link; nothing to track.", err=True)
        return
    click.echo(json.dumps(response, indent=2))
