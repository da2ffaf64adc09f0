from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Values the product writes. Records from other sources may carry anything,
# so GameRecord keeps these fields as plain strings.
Platform = Literal["Nintendo Switch", "Nintendo Switch 2"]
Format = Literal["Physical", "Digital"]
GameStatus = Literal["Owned", "Wishlist", "Borrowed", "Lent", "Sold"]
GameCondition = Literal["New", "Like New", "Good", "Fair", "Poor"]

# Listing orders offered by the library and compare views
SortOption = Literal[
    "title_asc",
    "title_desc",
    "added_newest",
    "added_oldest",
    "purchase_newest",
    "purchase_oldest",
    "platform",
    "format",
    "completed_first",
    "not_completed_first",
]


class GameRecord(BaseModel):
    """One game in a collection, already normalized by the caller whatever its origin
    (manual entry, metadata search result, another user's shared library)."""

    # Numeric titles ("1942") arrive as ints from YAML
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    title: str
    external_id: int | None = Field(default=None, alias="thegamesdbId")
    id: str | None = None
    platform: str | None = None
    format: str | None = None
    status: str | None = None
    condition: str | None = None
    notes: str | None = None
    cover_url: str | None = Field(default=None, alias="coverUrl")
    purchase_date: str | None = Field(default=None, alias="purchaseDate")
    completed: bool | None = None
    completed_date: str | None = Field(default=None, alias="completedDate")
    created_at: str | None = Field(default=None, alias="createdAt")

    @field_validator("purchase_date", "completed_date", "created_at", mode="before")
    @classmethod
    def _date_to_iso(cls, v):
        # YAML turns an unquoted 2024-05-01 into a date object
        if isinstance(v, date):
            return v.isoformat()
        return v


class ComparisonKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    external_id: int | None = None
    normalized_title: str


class CollectionStats(BaseModel):
    total: int = 0
    by_platform: dict[str, int] = Field(default_factory=dict)
    by_format: dict[str, int] = Field(default_factory=dict)
    completed: int = 0


class ReconciliationResult(BaseModel):
    """Partitions of two collections. ``common`` holds collection A's copies."""

    common: list[GameRecord] = Field(default_factory=list)
    unique_to_a: list[GameRecord] = Field(default_factory=list)
    unique_to_b: list[GameRecord] = Field(default_factory=list)
    stats_a: CollectionStats = Field(default_factory=CollectionStats)
    stats_b: CollectionStats = Field(default_factory=CollectionStats)
    stats_common: CollectionStats = Field(default_factory=CollectionStats)


class MetricLeader(BaseModel):
    metric: str  # "total", "completed", "platform:<value>", "format:<value>"
    left: int
    right: int
    left_leads: bool
    right_leads: bool


class StatsComparison(BaseModel):
    metrics: list[MetricLeader] = Field(default_factory=list)

    def get(self, metric: str) -> MetricLeader | None:
        for m in self.metrics:
            if m.metric == metric:
                return m
        return None
