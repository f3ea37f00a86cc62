"""Main CLI entry point for depcheck."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from depcheck.analysis.aggregator import ReportAggregator
from depcheck.analysis.registry import NpmRegistryClient
from depcheck.cli.display import (
    show_error,
    show_hint,
    show_outdated,
    show_report_summary,
    show_scan_results,
    show_scan_start,
    show_unused,
)
from depcheck.core.config.settings import get_settings
from depcheck.core.exceptions.errors import DepCheckError

T = TypeVar("T")


def run_with_aggregator(action: Callable[[ReportAggregator], Awaitable[T]]) -> T:
    """Run an aggregator action for the project in the working directory.

    Handled errors are printed and terminate the process with status 1.

    Args:
        action: Coroutine function receiving the aggregator.

    Returns:
        The action's result.
    """

    async def _run() -> T:
        settings = get_settings()
        async with NpmRegistryClient(
            base_url=settings.registry.url,
            timeout=settings.registry.timeout,
        ) as registry:
            aggregator = ReportAggregator.from_settings(settings, registry)
            return await action(aggregator)

    try:
        return asyncio.run(_run())
    except DepCheckError as e:
        show_error(e.message)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """depcheck - audit npm project dependencies.

    Reports outdated, potentially unused and known-vulnerable dependencies
    declared in package.json.
    """
    if version:
        from depcheck import __version__

        click.echo(f"depcheck version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        show_hint('Use the "scan" command to analyze your project dependencies!')


@main.command()
def scan() -> None:
    """Scan project dependencies for issues."""
    show_scan_start()

    async def _scan(aggregator: ReportAggregator):
        return await aggregator.scan()

    results = run_with_aggregator(_scan)
    show_scan_results(results)


@main.command()
def outdated() -> None:
    """List outdated packages."""

    async def _outdated(aggregator: ReportAggregator):
        return await aggregator.check_outdated()

    show_outdated(run_with_aggregator(_outdated))


@main.command()
def unused() -> None:
    """List potentially unused packages."""

    async def _unused(aggregator: ReportAggregator):
        return await aggregator.check_unused()

    show_unused(run_with_aggregator(_unused))


@main.command()
def report() -> None:
    """Generate and save a dependency report."""

    async def _report(aggregator: ReportAggregator):
        return await aggregator.save_report(), aggregator.report_path

    saved, report_path = run_with_aggregator(_report)
    show_report_summary(saved, report_path)


if __name__ == "__main__":
    main()
