"""Click CLI entry point.

Usage:
    game-sync normalize "Mario Kart™ 8 Deluxe" "Super Mario Bros."
    game-sync compare alice.yaml bob.yaml
    game-sync compare alice.yaml bob.yaml --tab unique-right --search zelda --sort title_desc
    game-sync compare alice.yaml bob.yaml --output result.json
    game-sync stats alice.yaml
"""

from __future__ import annotations

import click

from game_sync.collection_io import CollectionError, load_collection, save_result
from game_sync.config import settings
from game_sync.models import CollectionStats, GameRecord, StatsComparison
from game_sync.reconcile import compare_stats, compute_stats, reconcile
from game_sync.text.normalize import normalize_title
from game_sync.utils.logging import GREEN, YELLOW, BOLD, DIM, RESET, get_logger
from game_sync.views import COMPARE_TABS, SORT_OPTIONS, filter_games, select_tab, sort_games

log = get_logger()

_TAB_TITLES = {
    "common": "In both libraries",
    "unique-left": "Only in {left}",
    "unique-right": "Only in {right}",
}


@click.group()
def cli() -> None:
    """Game collection matching and comparison CLI."""
    pass


@cli.command()
@click.argument("titles", nargs=-1, required=True)
def normalize(titles: tuple[str, ...]) -> None:
    """Print the comparison form of each TITLE."""
    for title in titles:
        click.echo(normalize_title(title))


def _echo(message: str = "") -> None:
    # Strips ANSI styling when colors are turned off in settings
    click.echo(message, color=None if settings.color else False)


def _load(path: str) -> tuple[str, list[GameRecord]]:
    try:
        return load_collection(path)
    except CollectionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _echo_games(heading: str, games: list[GameRecord]) -> None:
    _echo(f"\n{BOLD}{heading}{RESET} {DIM}({len(games)}){RESET}")
    if not games:
        _echo(f"  {DIM}No games in this category{RESET}")
        return
    for game in games:
        done = f" {GREEN}✓{RESET}" if game.completed else ""
        details = " · ".join(v for v in (game.platform, game.format) if v)
        details = f"  {DIM}{details}{RESET}" if details else ""
        _echo(f"  {game.title}{done}{details}")


def _echo_stats_table(left: str, right: str, comparison: StatsComparison) -> None:
    _echo(f"\n{BOLD}Stats{RESET}\n")
    _echo(f"  {'Metric':<28} {left[:12]:>12} {right[:12]:>12}")
    _echo(f"  {'─' * 28} {'─' * 12} {'─' * 12}")
    for m in comparison.metrics:
        lval = f"{m.left}{'*' if m.left_leads else ' '}"
        rval = f"{m.right}{'*' if m.right_leads else ' '}"
        _echo(f"  {_metric_label(m.metric):<28} {lval:>12} {rval:>12}")
    _echo(f"\n  {DIM}* leads or ties{RESET}")


def _metric_label(metric: str) -> str:
    if metric == "total":
        return "Total Games"
    if metric == "completed":
        return "Completed"
    kind, _, value = metric.partition(":")
    return f"{value} ({kind})"


@cli.command()
@click.argument("left_file", type=click.Path(dir_okay=False))
@click.argument("right_file", type=click.Path(dir_okay=False))
@click.option(
    "--tab",
    type=click.Choice(["all", *COMPARE_TABS, "stats"]),
    default="all",
    help="Which partition to show (default: all of them plus stats)",
)
@click.option("--search", default=None, help="Only list games whose title contains this text")
@click.option("--sort", "sort_by", type=click.Choice(SORT_OPTIONS), default=None, help="Listing order")
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Also write the full result as JSON")
def compare(left_file: str, right_file: str, tab: str, search: str | None, sort_by: str | None, output: str | None) -> None:
    """Compare two collections: common games, games unique to each side, and stats.

    LEFT_FILE is collection A; common games are listed with its copies.
    """
    left_name, left_games = _load(left_file)
    right_name, right_games = _load(right_file)
    sort_by = sort_by or settings.default_sort

    result = reconcile(left_games, right_games)
    log.info(
        f"{BOLD}{left_name}{RESET} vs {BOLD}{right_name}{RESET}: "
        f"{GREEN}{len(result.common)} common{RESET}, "
        f"{len(result.unique_to_a)} only left, {len(result.unique_to_b)} only right"
    )

    tabs = COMPARE_TABS if tab == "all" else (() if tab == "stats" else (tab,))
    for t in tabs:
        games = sort_games(filter_games(select_tab(result, t), search=search), sort_by)
        _echo_games(_TAB_TITLES[t].format(left=left_name, right=right_name), games)

    if tab in ("all", "stats"):
        _echo_stats_table(left_name, right_name, compare_stats(result.stats_a, result.stats_b))

    if output:
        save_result(result, output)
        _echo(f"\n{GREEN}Saved result to {output}{RESET}")


def _echo_collection_stats(name: str, stats: CollectionStats) -> None:
    _echo(f"\n{BOLD}{name}{RESET} — {stats.total} games, {stats.completed} completed\n")
    for label, buckets in (("Platform", stats.by_platform), ("Format", stats.by_format)):
        for value, count in sorted(buckets.items()):
            _echo(f"  {label + ':':<10} {value:<24} {count:>5}")
    missing = stats.total - sum(stats.by_platform.values())
    if missing:
        _echo(f"  {YELLOW}{missing} games without a platform{RESET}")


@cli.command()
@click.argument("collection_file", type=click.Path(dir_okay=False))
def stats(collection_file: str) -> None:
    """Show platform, format and completion counts for one collection."""
    name, games = _load(collection_file)
    _echo_collection_stats(name, compute_stats(games))


if __name__ == "__main__":
    cli()
