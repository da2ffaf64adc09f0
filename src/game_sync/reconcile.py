"""Cross-library matching and reconciliation.

Decides whether two game records, entered by different users or imported from
different metadata providers, are the same game, and partitions two
collections into common / unique-to-A / unique-to-B.

Matching rules, first applicable wins:
    1. Both records carry the same provider id -> match
    2. Normalized titles are equal -> match (even when both ids are present
       and differ, so libraries filled from different providers still line up)
    3. Otherwise -> no match

Reconciliation indexes each side once by id and by normalized title, which
gives the same outcome as testing every pair with ``games_match``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from game_sync.models import (
    CollectionStats,
    ComparisonKey,
    GameRecord,
    MetricLeader,
    ReconciliationResult,
    StatsComparison,
)
from game_sync.text.normalize import normalize_title
from game_sync.utils.logging import get_logger

log = get_logger()


def _has_id(key: ComparisonKey) -> bool:
    # Providers start numbering at 1; 0 means "not linked"
    return bool(key.external_id)


def build_key(record: GameRecord) -> ComparisonKey:
    return ComparisonKey(
        external_id=record.external_id,
        normalized_title=normalize_title(record.title),
    )


def games_match(x: ComparisonKey, y: ComparisonKey) -> bool:
    """Check if two comparison keys refer to the same game."""
    if _has_id(x) and _has_id(y) and x.external_id == y.external_id:
        return True
    if x.normalized_title == y.normalized_title:
        return True
    return False


def find_matching_game(
    target: ComparisonKey,
    candidates: Sequence[ComparisonKey],
) -> ComparisonKey | None:
    """First candidate that matches target, in candidate order."""
    for candidate in candidates:
        if games_match(target, candidate):
            return candidate
    return None


class _KeyIndex:
    """Lookup of which ids and normalized titles occur on one side."""

    def __init__(self, keys: Sequence[ComparisonKey]):
        self.ids = {k.external_id for k in keys if _has_id(k)}
        self.titles = {k.normalized_title for k in keys}

    def has_match(self, key: ComparisonKey) -> bool:
        if _has_id(key) and key.external_id in self.ids:
            return True
        return key.normalized_title in self.titles


def reconcile(
    collection_a: Sequence[GameRecord],
    collection_b: Sequence[GameRecord],
) -> ReconciliationResult:
    """Partition two collections into common and unique games.

    Args:
        collection_a: Left-hand collection. Its records represent ``common``.
        collection_b: Right-hand collection.

    Each input record lands in exactly one output list, in its original
    relative order, regardless of duplicates on either side. Inputs are
    not modified.
    """
    keys_a = [build_key(r) for r in collection_a]
    keys_b = [build_key(r) for r in collection_b]
    index_a = _KeyIndex(keys_a)
    index_b = _KeyIndex(keys_b)

    common: list[GameRecord] = []
    unique_to_a: list[GameRecord] = []
    for record, key in zip(collection_a, keys_a):
        if index_b.has_match(key):
            common.append(record)
        else:
            unique_to_a.append(record)

    unique_to_b = [
        record for record, key in zip(collection_b, keys_b)
        if not index_a.has_match(key)
    ]

    log.debug(
        f"Reconciled {len(collection_a)} x {len(collection_b)} games: "
        f"{len(common)} common, {len(unique_to_a)} only A, {len(unique_to_b)} only B"
    )

    return ReconciliationResult(
        common=common,
        unique_to_a=unique_to_a,
        unique_to_b=unique_to_b,
        stats_a=compute_stats(collection_a),
        stats_b=compute_stats(collection_b),
        stats_common=compute_stats(common),
    )


def compute_stats(records: Sequence[GameRecord]) -> CollectionStats:
    """Totals per platform, per format, and completed count in one pass."""
    by_platform: Counter[str] = Counter()
    by_format: Counter[str] = Counter()
    completed = 0

    for record in records:
        if record.platform is not None:
            by_platform[record.platform] += 1
        if record.format is not None:
            by_format[record.format] += 1
        if record.completed:
            completed += 1

    return CollectionStats(
        total=len(records),
        by_platform=dict(by_platform),
        by_format=dict(by_format),
        completed=completed,
    )


def _leader(metric: str, left: int, right: int) -> MetricLeader:
    return MetricLeader(
        metric=metric,
        left=left,
        right=right,
        left_leads=left >= right,
        right_leads=right >= left,
    )


def compare_stats(left: CollectionStats, right: CollectionStats) -> StatsComparison:
    """Side-by-side stats with the leading side flagged per metric. Ties flag both."""
    metrics = [_leader("total", left.total, right.total)]

    for platform in sorted(set(left.by_platform) | set(right.by_platform)):
        metrics.append(_leader(
            f"platform:{platform}",
            left.by_platform.get(platform, 0),
            right.by_platform.get(platform, 0),
        ))
    for fmt in sorted(set(left.by_format) | set(right.by_format)):
        metrics.append(_leader(
            f"format:{fmt}",
            left.by_format.get(fmt, 0),
            right.by_format.get(fmt, 0),
        ))

    metrics.append(_leader("completed", left.completed, right.completed))
    return StatsComparison(metrics=metrics)
