"""Price-history analytics: statistics, store comparison and deal detection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .calculator import parse_price

logger = logging.getLogger(__name__)

_TREND_WINDOW = 5
_TREND_UP = 1.05
_TREND_DOWN = 0.95

_EXCELLENT = 0.8
_GOOD = 0.9
_EXPENSIVE = 1.2

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class PricePoint:
    price: float
    store: str = ""
    date: datetime | None = None


@dataclass(frozen=True)
class PriceStatistics:
    count: int = 0
    average: float = 0.0
    min: float = 0.0
    max: float = 0.0
    trend: str = "stable"  # "increasing" | "decreasing" | "stable"


@dataclass(frozen=True)
class StoreComparison:
    store: str
    average_price: float
    price_count: int
    lowest_price: float
    highest_price: float
    last_seen: datetime | None


@dataclass(frozen=True)
class Recommendation:
    type: str  # "stock_up" | "wait"
    message: str
    savings: str = ""


@dataclass(frozen=True)
class DealAnalysis:
    status: str = "no_data"
    average_price: float = 0.0
    historical_low: float = 0.0
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)

    @property
    def has_deals(self) -> bool:
        return bool(self.recommendations)


@dataclass(frozen=True)
class StoreRecommendation:
    store: str
    rank: int
    average_price: float
    price_count: int
    recommendation: str  # "best_price" | "good_option" | "consider"
    savings: float


def _parse_date(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable price date %r", value)
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def price_points(records: Iterable[Any] | None) -> list[PricePoint]:
    """Build PricePoints from loose records like ``{"price": "$2.99", ...}``."""
    points: list[PricePoint] = []
    for record in records or ():
        if isinstance(record, PricePoint):
            points.append(record)
            continue
        if not isinstance(record, Mapping):
            continue
        store = record.get("store")
        points.append(PricePoint(
            price=parse_price(record.get("price")),
            store=store if isinstance(store, str) else "",
            date=_parse_date(record.get("date")),
        ))
    return points


def _date_key(point: PricePoint) -> datetime:
    return point.date or _OLDEST


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def price_statistics(points: Iterable[PricePoint]) -> PriceStatistics:
    """Summarize positive prices and the recent price trend.

    The trend compares the mean of the five most recent points with the
    five before them and needs at least ten points; a move beyond 5%
    either way counts as a trend.
    """
    points = list(points)
    values = [p.price for p in points if p.price > 0]
    if not values:
        return PriceStatistics()

    trend = "stable"
    if len(points) >= 2 * _TREND_WINDOW:
        ordered = sorted(points, key=_date_key, reverse=True)
        recent = _mean([p.price for p in ordered[:_TREND_WINDOW]])
        older = _mean([p.price for p in ordered[_TREND_WINDOW:2 * _TREND_WINDOW]])
        if recent > older * _TREND_UP:
            trend = "increasing"
        elif recent < older * _TREND_DOWN:
            trend = "decreasing"

    return PriceStatistics(
        count=len(values),
        average=round(_mean(values), 2),
        min=round(min(values), 2),
        max=round(max(values), 2),
        trend=trend,
    )


def _group_by_store(points: Iterable[PricePoint]) -> dict[str, list[PricePoint]]:
    groups: dict[str, list[PricePoint]] = {}
    for point in points:
        groups.setdefault(point.store, []).append(point)
    return groups


def store_comparison(points: Iterable[PricePoint]) -> list[StoreComparison]:
    """Per-store price summary, cheapest average first."""
    comparison = []
    for store, group in _group_by_store(points).items():
        prices = [p.price for p in group]
        dates = [p.date for p in group if p.date is not None]
        comparison.append(StoreComparison(
            store=store,
            average_price=round(_mean(prices), 2),
            price_count=len(prices),
            lowest_price=min(prices),
            highest_price=max(prices),
            last_seen=max(dates) if dates else None,
        ))
    comparison.sort(key=lambda c: c.average_price)
    return comparison


def analyze_deal(points: Iterable[PricePoint], current_price: Any) -> DealAnalysis:
    """Rate *current_price* against the price history."""
    values = [p.price for p in points if p.price > 0]
    if not values:
        return DealAnalysis()

    average = _mean(values)
    low = min(values)
    price = parse_price(current_price)
    if price <= 0:
        return DealAnalysis(average_price=round(average, 2), historical_low=round(low, 2))

    recommendations: list[Recommendation] = []
    if price <= average * _EXCELLENT:
        status = "excellent_deal"
        below = (average - price) / average * 100
        recommendations.append(Recommendation(
            type="stock_up",
            message="Excellent price! Consider buying extra.",
            savings=f"{below:.1f}% below average",
        ))
    elif price <= average * _GOOD:
        status = "good_deal"
    elif price >= average * _EXPENSIVE:
        status = "expensive"
        recommendations.append(Recommendation(
            type="wait",
            message="Price is high. Consider waiting or checking other stores.",
            savings=f"{price - average:.2f} above average",
        ))
    else:
        status = "fair_price"

    return DealAnalysis(
        status=status,
        average_price=round(average, 2),
        historical_low=round(low, 2),
        recommendations=tuple(recommendations),
    )


def store_recommendations(
    points: Iterable[PricePoint], limit: int = 5
) -> list[StoreRecommendation]:
    """Rank stores by average price with savings versus the cheapest."""
    averages = sorted(
        ((store, _mean([p.price for p in group]), len(group))
         for store, group in _group_by_store(points).items()),
        key=lambda entry: entry[1],
    )[:max(limit, 0)]
    if not averages:
        return []

    cheapest = averages[0][1]
    ranked = []
    for index, (store, average, count) in enumerate(averages):
        if index == 0:
            label = "best_price"
        elif index < 3:
            label = "good_option"
        else:
            label = "consider"
        ranked.append(StoreRecommendation(
            store=store,
            rank=index + 1,
            average_price=round(average, 2),
            price_count=count,
            recommendation=label,
            savings=round(average - cheapest, 2),
        ))
    return ranked


def similar_items(name: Any, inventory: Iterable[Any] | None) -> list[Any]:
    """Inventory items whose name contains any search term of 3+ chars."""
    if not isinstance(name, str):
        return []
    terms = [t for t in name.lower().split() if len(t) > 2]
    if not terms:
        return []

    matches = []
    for item in inventory or ():
        item_name = item.get("name") if isinstance(item, Mapping) else getattr(item, "name", None)
        if not isinstance(item_name, str):
            continue
        lowered = item_name.lower()
        if any(term in lowered for term in terms):
            matches.append(item)
    return matches
