"""Filtering and sorting of game lists for display.

These run on lists the engine already returned, so switching tabs, searching
or re-sorting never triggers another reconciliation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, get_args

from game_sync.models import GameRecord, ReconciliationResult, SortOption

SORT_OPTIONS: tuple[str, ...] = get_args(SortOption)

CompletedFilter = Literal["all", "completed", "not_completed"]

CompareTab = Literal["common", "unique-left", "unique-right"]
COMPARE_TABS: tuple[str, ...] = get_args(CompareTab)


def filter_games(
    games: Sequence[GameRecord],
    search: str | None = None,
    platform: str | None = None,
    format: str | None = None,
    completed: CompletedFilter = "all",
) -> list[GameRecord]:
    """Keep games matching every given filter, in their original order.

    ``search`` is a case-insensitive substring of the title. ``platform`` and
    ``format`` must match exactly; None or "all" disables them.
    """
    if completed not in ("all", "completed", "not_completed"):
        raise ValueError(f"Unknown completed filter: {completed!r}")
    query = search.lower() if search else None

    result = []
    for game in games:
        if platform not in (None, "all") and game.platform != platform:
            continue
        if format not in (None, "all") and game.format != format:
            continue
        if completed == "completed" and not game.completed:
            continue
        if completed == "not_completed" and game.completed:
            continue
        if query and query not in game.title.lower():
            continue
        result.append(game)
    return result


def _dated_sort(games: list[GameRecord], field: str, newest_first: bool) -> list[GameRecord]:
    # Undated games always go last. ISO-8601 strings sort chronologically.
    dated = [g for g in games if getattr(g, field)]
    undated = [g for g in games if not getattr(g, field)]
    dated.sort(key=lambda g: getattr(g, field), reverse=newest_first)
    return dated + undated


def sort_games(games: Sequence[GameRecord], sort_by: str = "title_asc") -> list[GameRecord]:
    """Return a new, stably sorted list."""
    games = list(games)

    if sort_by == "title_asc":
        return sorted(games, key=lambda g: g.title.casefold())
    if sort_by == "title_desc":
        return sorted(games, key=lambda g: g.title.casefold(), reverse=True)
    if sort_by == "added_newest":
        return _dated_sort(games, "created_at", newest_first=True)
    if sort_by == "added_oldest":
        return _dated_sort(games, "created_at", newest_first=False)
    if sort_by == "purchase_newest":
        return _dated_sort(games, "purchase_date", newest_first=True)
    if sort_by == "purchase_oldest":
        return _dated_sort(games, "purchase_date", newest_first=False)
    if sort_by == "platform":
        return sorted(games, key=lambda g: g.platform or "")
    if sort_by == "format":
        return sorted(games, key=lambda g: g.format or "")
    if sort_by == "completed_first":
        return sorted(games, key=lambda g: not g.completed)
    if sort_by == "not_completed_first":
        return sorted(games, key=lambda g: bool(g.completed))

    raise ValueError(f"Unknown sort option: {sort_by!r} (expected one of {', '.join(SORT_OPTIONS)})")


def select_tab(result: ReconciliationResult, tab: str) -> list[GameRecord]:
    """Map a compare tab onto its partition. Left is collection A."""
    if tab == "common":
        return result.common
    if tab == "unique-left":
        return result.unique_to_a
    if tab == "unique-right":
        return result.unique_to_b
    raise ValueError(f"Unknown tab: {tab!r} (expected one of {', '.join(COMPARE_TABS)})")
