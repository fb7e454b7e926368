"""Shopping list totals: per-item pricing, tax, discounts and budget tracking.

Every operation here is throw-free. Malformed prices degrade to 0,
malformed quantities to 1, and data-quality problems surface as
``TotalsResult.warnings`` instead of exceptions.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .currency import get_currency_info

if TYPE_CHECKING:
    from ..config import TotalsConfig

logger = logging.getLogger(__name__)

_PRICE_JUNK = re.compile(r"[^\d.-]")
_EDGE_DASHES = re.compile(r"^-+|-+$")
_LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_LEADING_QUANTITY = re.compile(r"^(\d*\.?\d+)")

_POSITIONS = ("before", "after")
_TAX_ALL = "all"
_DEFAULT_CATEGORY = "Other"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_number(value: Any) -> float | None:
    """Coerce a loosely-typed number; None when it isn't one."""
    if _is_number(value):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _to_fixed(amount: float, places: int) -> str:
    """Fixed-point formatting with halves rounded away from zero."""
    value = Decimal(amount)
    if value.is_zero():
        value = Decimal(0)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the places
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return format(value.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _field(item: Any, *keys: str) -> Any:
    """First non-None value among *keys*, from a mapping or attributes."""
    for key in keys:
        if isinstance(item, Mapping):
            value = item.get(key)
        else:
            value = getattr(item, key, None)
        if value is not None:
            return value
    return None


def _category_of(item: Any) -> str | None:
    category = _field(item, "category")
    return category if isinstance(category, str) and category else None


def _item_fields(item: Any) -> dict[str, Any]:
    if isinstance(item, Mapping):
        return dict(item)
    if is_dataclass(item) and not isinstance(item, type):
        return asdict(item)
    attrs = getattr(item, "__dict__", None)
    return dict(attrs) if isinstance(attrs, dict) else {}


def parse_price(value: Any) -> float:
    """Parse a price such as ``"$3.50"`` or ``"1,299.00 kr"``.

    Numbers pass through. Strings keep only digits, dots and dashes, lose
    leading/trailing dashes, and are read up to the first invalid char.
    Anything unparsable is 0; parsed strings are never negative.
    """
    if _is_number(value):
        return float(value) if math.isfinite(value) else 0.0
    if not value or not isinstance(value, str):
        return 0.0

    cleaned = _EDGE_DASHES.sub("", _PRICE_JUNK.sub("", value)).strip()
    m = _LEADING_FLOAT.match(cleaned)
    if not m:
        return 0.0
    return max(0.0, float(m.group()))


def parse_quantity(value: Any) -> float:
    """Read the leading number of an amount like ``"2 lbs"``; default 1."""
    if _is_number(value):
        return float(value) if math.isfinite(value) else 1.0
    if not value or not isinstance(value, str):
        return 1.0

    m = _LEADING_QUANTITY.match(value)
    return float(m.group(1)) if m else 1.0


@dataclass(frozen=True)
class ItemCalc:
    """A shopping list item with its resolved pricing."""

    item: Mapping[str, Any]
    name: str
    category: str | None
    quantity: float
    unit_price: float
    subtotal: float
    tax_amount: float
    total: float
    has_price: bool
    is_estimated: bool
    is_taxable: bool
    formatted_unit_price: str
    formatted_subtotal: str
    formatted_tax_amount: str
    formatted_total: str

    def to_dict(self) -> dict[str, Any]:
        """Original item fields merged with the computed ones."""
        return {
            **self.item,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "subtotal": self.subtotal,
            "tax_amount": self.tax_amount,
            "total": self.total,
            "has_price": self.has_price,
            "is_estimated": self.is_estimated,
            "is_taxable": self.is_taxable,
            "formatted_unit_price": self.formatted_unit_price,
            "formatted_subtotal": self.formatted_subtotal,
            "formatted_tax_amount": self.formatted_tax_amount,
            "formatted_total": self.formatted_total,
        }


@dataclass(frozen=True)
class CategoryTotals:
    name: str
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0
    item_count: int = 0
    estimated_count: int = 0


@dataclass(frozen=True)
class TotalsResult:
    """Priced, taxed and discounted totals for one shopping list."""

    items: tuple[ItemCalc, ...] = ()
    categories: Mapping[str, CategoryTotals] = field(
        default_factory=lambda: MappingProxyType({})
    )
    subtotal: float = 0.0
    taxable_amount: float = 0.0
    non_taxable_amount: float = 0.0
    tax_amount: float = 0.0
    discount_amount: float = 0.0
    coupon_amount: float = 0.0
    total: float = 0.0
    budget: float | None = None
    budget_remaining: float | None = None
    budget_percent_used: float | None = None
    is_over_budget: bool = False
    total_items: int = 0
    items_with_prices: int = 0
    estimated_items: int = 0
    has_incomplete_data: bool = False
    warnings: tuple[str, ...] = ()
    calculated_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


@dataclass(frozen=True)
class CategorySummary:
    name: str
    subtotal: float
    tax_amount: float
    total: float
    item_count: int
    estimated_count: int
    formatted_subtotal: str
    formatted_tax: str
    formatted_total: str


@dataclass(frozen=True)
class Summary:
    """Display-ready projection of a TotalsResult."""

    subtotal: str
    tax: str
    discount: str
    coupon: str
    total: str
    total_items: int
    items_with_prices: int
    estimated_items: int
    budget: str | None
    budget_remaining: str | None
    budget_percent_used: int | None
    is_over_budget: bool
    categories: tuple[CategorySummary, ...]
    has_incomplete_data: bool
    warnings: tuple[str, ...]
    calculated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return a dict for JSON serialization."""
        data = asdict(self)
        data["warnings"] = list(self.warnings)
        data["categories"] = [asdict(c) for c in self.categories]
        data["calculated_at"] = self.calculated_at.isoformat()
        return data


class TotalsCalculator:
    """Computes shopping list totals under one currency/tax configuration."""

    parse_price = staticmethod(parse_price)
    parse_quantity = staticmethod(parse_quantity)

    def __init__(
        self,
        tax_rate: float = 0.0,
        currency_symbol: str = "$",
        currency_position: str = "before",
        decimal_places: int = 2,
        currency: str = "USD",
    ) -> None:
        self.tax_rate = _to_number(tax_rate) or 0.0
        self.currency = currency if isinstance(currency, str) and currency else "USD"
        self.currency_symbol = currency_symbol if isinstance(currency_symbol, str) else "$"
        self.currency_position = (
            currency_position if currency_position in _POSITIONS else "before"
        )
        if (
            isinstance(decimal_places, int)
            and not isinstance(decimal_places, bool)
            and 0 <= decimal_places <= 20
        ):
            self.decimal_places = decimal_places
        else:
            self.decimal_places = 2

    @classmethod
    def for_currency(cls, code: str, tax_rate: float = 0.0) -> TotalsCalculator:
        """Build a calculator using a supported currency's conventions."""
        info = get_currency_info(code)
        return cls(
            tax_rate=tax_rate,
            currency_symbol=info.symbol,
            currency_position=info.position,
            decimal_places=info.decimal_places,
            currency=info.code,
        )

    @classmethod
    def from_config(cls, config: TotalsConfig) -> TotalsCalculator:
        return cls(
            tax_rate=config.tax_rate,
            currency_symbol=config.currency_symbol,
            currency_position=config.currency_position,
            decimal_places=config.decimal_places,
            currency=config.currency,
        )

    def __repr__(self) -> str:
        return (
            f"TotalsCalculator(tax_rate={self.tax_rate!r}, "
            f"currency={self.currency!r}, "
            f"currency_symbol={self.currency_symbol!r}, "
            f"currency_position={self.currency_position!r}, "
            f"decimal_places={self.decimal_places!r})"
        )

    def format_currency(self, amount: Any) -> str:
        """Format *amount* with the configured symbol; junk formats as 0."""
        if not _is_number(amount) or not math.isfinite(amount):
            amount = 0.0
        formatted = _to_fixed(amount, self.decimal_places)
        if self.currency_position == "before":
            return f"{self.currency_symbol}{formatted}"
        return f"{formatted}{self.currency_symbol}"

    @staticmethod
    def normalize_items(shopping_list: Any) -> list[Any]:
        """Flatten the accepted shopping list shapes into one ordered list.

        Accepts a plain list of items, ``{"items": [...]}``, or
        ``{"items": {category: [...]}}``. Grouped items get their
        ``category`` back-filled from the group key.
        """
        if not shopping_list:
            return []
        if isinstance(shopping_list, (list, tuple)):
            return list(shopping_list)

        items = _field(shopping_list, "items")
        if isinstance(items, (list, tuple)):
            return list(items)
        if not isinstance(items, Mapping):
            return []

        flat: list[Any] = []
        for category, group in items.items():
            if not isinstance(group, (list, tuple)):
                continue
            for item in group:
                fields = _item_fields(item)
                fields["category"] = fields.get("category") or category
                flat.append(fields)
        return flat

    def calculate_item_total(
        self, item: Any, taxable_categories: Iterable[str] | None = None
    ) -> ItemCalc:
        taxable = _as_categories(taxable_categories)

        quantity = self.parse_quantity(_field(item, "amount")) or 1.0
        price = _field(item, "price")
        unit = _field(item, "unitPrice", "unit_price")
        estimated = _field(item, "estimatedPrice", "estimated_price")

        unit_price = self.parse_price(price or unit or estimated)
        has_price = bool(price or unit or estimated)
        is_estimated = bool(estimated and not price and not unit)

        category = _category_of(item)
        is_taxable = not taxable or category in taxable or _TAX_ALL in taxable

        subtotal = unit_price * quantity
        tax_amount = subtotal * self.tax_rate if is_taxable else 0.0
        total = subtotal + tax_amount

        name = _field(item, "name")
        return ItemCalc(
            item=MappingProxyType(_item_fields(item)),
            name=name if isinstance(name, str) else ("" if name is None else str(name)),
            category=category,
            quantity=quantity,
            unit_price=unit_price,
            subtotal=subtotal,
            tax_amount=tax_amount,
            total=total,
            has_price=has_price,
            is_estimated=is_estimated,
            is_taxable=is_taxable,
            formatted_unit_price=self.format_currency(unit_price),
            formatted_subtotal=self.format_currency(subtotal),
            formatted_tax_amount=self.format_currency(tax_amount),
            formatted_total=self.format_currency(total),
        )

    def calculate_totals(
        self,
        shopping_list: Any,
        *,
        budget: float | None = None,
        taxable_categories: Iterable[str] | None = None,
        discounts: Iterable[Any] | None = None,
        coupons: Iterable[Any] | None = None,
    ) -> TotalsResult:
        """Compute item, category and overall totals for a shopping list.

        Args:
            shopping_list: Any shape accepted by ``normalize_items``.
            budget: Spending limit; ignored unless a positive number.
            taxable_categories: Categories subject to tax. Empty means
                everything is taxable; ``"all"`` has the same effect.
            discounts: ``{"type": "percentage"|"fixed", "value": n}``
                entries, each applied to the pre-discount subtotal.
            coupons: ``{"value": n}`` entries subtracted as-is.
        """
        taxable = _as_categories(taxable_categories)

        items: list[ItemCalc] = []
        buckets: dict[str, dict[str, Any]] = {}
        subtotal = taxable_amount = non_taxable_amount = tax_amount = 0.0
        total_items = items_with_prices = estimated_items = 0

        for item in self.normalize_items(shopping_list):
            calc = self.calculate_item_total(item, taxable)
            items.append(calc)

            category = _category_of(item) or _DEFAULT_CATEGORY
            bucket = buckets.setdefault(category, {
                "name": category,
                "subtotal": 0.0,
                "tax_amount": 0.0,
                "total": 0.0,
                "item_count": 0,
                "estimated_count": 0,
            })
            bucket["subtotal"] += calc.subtotal
            bucket["tax_amount"] += calc.tax_amount
            bucket["total"] += calc.total
            bucket["item_count"] += 1
            if calc.is_estimated:
                bucket["estimated_count"] += 1

            subtotal += calc.subtotal
            if calc.is_taxable:
                taxable_amount += calc.subtotal
            else:
                non_taxable_amount += calc.subtotal
            tax_amount += calc.tax_amount
            total_items += 1
            if calc.has_price:
                items_with_prices += 1
            if calc.is_estimated:
                estimated_items += 1

        discount_amount = _discount_total(subtotal, discounts)
        coupon_amount = _coupon_total(coupons)
        total = max(0.0, subtotal + tax_amount - discount_amount - coupon_amount)

        budget_value = _to_number(budget)
        budget_remaining = budget_percent_used = None
        is_over_budget = False
        if budget_value is not None and budget_value > 0:
            budget_remaining = budget_value - total
            budget_percent_used = total / budget_value * 100
            is_over_budget = total > budget_value
        else:
            budget_value = None

        warnings: list[str] = []
        if estimated_items > 0:
            warnings.append(f"{estimated_items} items have estimated prices")
        missing = total_items - items_with_prices
        if missing > 0:
            warnings.append(f"{missing} items are missing price information")
        if warnings:
            logger.info("Shopping list totals incomplete: %s", "; ".join(warnings))

        return TotalsResult(
            items=tuple(items),
            categories=MappingProxyType(
                {name: CategoryTotals(**b) for name, b in buckets.items()}
            ),
            subtotal=subtotal,
            taxable_amount=taxable_amount,
            non_taxable_amount=non_taxable_amount,
            tax_amount=tax_amount,
            discount_amount=discount_amount,
            coupon_amount=coupon_amount,
            total=total,
            budget=budget_value,
            budget_remaining=budget_remaining,
            budget_percent_used=budget_percent_used,
            is_over_budget=is_over_budget,
            total_items=total_items,
            items_with_prices=items_with_prices,
            estimated_items=estimated_items,
            has_incomplete_data=estimated_items > 0,
            warnings=tuple(warnings),
        )

    def generate_summary(self, result: TotalsResult) -> Summary:
        """Project a TotalsResult into pre-formatted display values."""
        fmt = self.format_currency
        return Summary(
            subtotal=fmt(result.subtotal),
            tax=fmt(result.tax_amount),
            discount=fmt(result.discount_amount),
            coupon=fmt(result.coupon_amount),
            total=fmt(result.total),
            total_items=result.total_items,
            items_with_prices=result.items_with_prices,
            estimated_items=result.estimated_items,
            budget=fmt(result.budget) if result.budget else None,
            budget_remaining=(
                fmt(result.budget_remaining)
                if result.budget_remaining is not None
                else None
            ),
            budget_percent_used=(
                _round_half_up(result.budget_percent_used)
                if result.budget_percent_used is not None
                else None
            ),
            is_over_budget=result.is_over_budget,
            categories=tuple(
                CategorySummary(
                    name=cat.name,
                    subtotal=cat.subtotal,
                    tax_amount=cat.tax_amount,
                    total=cat.total,
                    item_count=cat.item_count,
                    estimated_count=cat.estimated_count,
                    formatted_subtotal=fmt(cat.subtotal),
                    formatted_tax=fmt(cat.tax_amount),
                    formatted_total=fmt(cat.total),
                )
                for cat in result.categories.values()
            ),
            has_incomplete_data=result.has_incomplete_data,
            warnings=result.warnings,
            calculated_at=result.calculated_at,
        )

    def export_totals(self, result: TotalsResult, fmt: str = "text") -> str | Summary:
        """Render totals as a plain-text receipt, or return the Summary.

        Only ``fmt="text"`` produces a string; any other value returns the
        ``Summary`` object.
        """
        summary = self.generate_summary(result)
        if fmt != "text":
            return summary

        lines: list[str] = ["Shopping List Totals", "=" * 19, ""]

        lines.append(f"Subtotal: {summary.subtotal}")
        if result.tax_amount > 0:
            rate = _to_fixed(self.tax_rate * 100, 1)
            lines.append(f"Tax ({rate}%): {summary.tax}")
        if result.discount_amount > 0:
            lines.append(f"Discount: -{summary.discount}")
        if result.coupon_amount > 0:
            lines.append(f"Coupons: -{summary.coupon}")
        lines.append(f"TOTAL: {summary.total}")
        lines.append("")

        if summary.budget:
            lines.append(f"Budget: {summary.budget}")
            lines.append(f"Remaining: {summary.budget_remaining}")
            lines.append(f"Used: {summary.budget_percent_used}%")
            lines.append("")

        if len(summary.categories) > 1:
            lines.append("Category Breakdown:")
            for cat in summary.categories:
                lines.append(
                    f"  {cat.name}: {cat.formatted_total} ({cat.item_count} items)"
                )
            lines.append("")

        if summary.warnings:
            lines.append("Notes:")
            for warning in summary.warnings:
                lines.append(f"  • {warning}")

        return "".join(f"{line}\n" for line in lines)


def _as_categories(categories: Iterable[str] | str | None) -> tuple[str, ...]:
    if not categories:
        return ()
    if isinstance(categories, str):
        return (categories,)
    try:
        return tuple(categories)
    except TypeError:
        return ()


def _discount_total(subtotal: float, discounts: Iterable[Any] | None) -> float:
    """Sum discounts, each computed against the original subtotal."""
    amount = 0.0
    for discount in discounts or ():
        kind = _field(discount, "type")
        value = _to_number(_field(discount, "value"))
        if value is None or value <= 0:
            logger.debug("Ignoring discount without a positive value: %r", discount)
            continue
        if kind == "percentage":
            amount += subtotal * (value / 100)
        elif kind == "fixed":
            amount += value
        else:
            logger.debug("Ignoring discount of unknown type %r", kind)
    return amount


def _coupon_total(coupons: Iterable[Any] | None) -> float:
    amount = 0.0
    for coupon in coupons or ():
        value = _to_number(_field(coupon, "value"))
        if value is None or value <= 0:
            logger.debug("Ignoring coupon without a positive value: %r", coupon)
            continue
        amount += value
    return amount
