"""CLI entry point for pantry-kit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .config import load_config
from .matching import best_match, can_match, extract_name, normalize
from .totals import (
    TotalsCalculator,
    analyze_deal,
    price_points,
    price_statistics,
    store_comparison,
)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="pantry-kit",
        description="Ingredient matching and shopping list totals",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # match
    match_parser = sub.add_parser("match", help="Check whether two ingredients match")
    match_parser.add_argument("first")
    match_parser.add_argument("second")

    # extract
    extract_parser = sub.add_parser("extract", help="Extract an ingredient name")
    extract_parser.add_argument("line", help="Recipe ingredient line")

    # best-match
    best_parser = sub.add_parser(
        "best-match", help="Pick the best inventory item for an ingredient"
    )
    best_parser.add_argument("name")
    best_parser.add_argument("inventory", help="Inventory JSON file")

    # totals
    totals_parser = sub.add_parser("totals", help="Compute shopping list totals")
    totals_parser.add_argument("shopping_list", help="Shopping list JSON file")
    totals_parser.add_argument("--budget", type=float, default=None)
    totals_parser.add_argument(
        "--taxable", type=str, nargs="+", default=None, metavar="CATEGORY",
        help="Taxable categories (default: from config, else everything)",
    )
    totals_parser.add_argument("--tax-rate", type=float, default=None)
    totals_parser.add_argument("--json", action="store_true", help="Output JSON")
    totals_parser.add_argument(
        "--pdf", type=str, default=None, metavar="FILE",
        help="Also write a PDF receipt",
    )

    # prices
    prices_parser = sub.add_parser("prices", help="Analyze a price history")
    prices_parser.add_argument("history", help="Price history JSON file")
    prices_parser.add_argument("--current", type=str, default=None, metavar="PRICE")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    config = load_config(args.config)
    logging.basicConfig(
        level=(
            logging.DEBUG if args.verbose
            else getattr(logging, config.logging.level, logging.WARNING)
        ),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "match":
            _cmd_match(args)
        case "extract":
            _cmd_extract(args)
        case "best-match":
            _cmd_best_match(args)
        case "totals":
            _cmd_totals(config, args)
        case "prices":
            _cmd_prices(args)


def _load_json(path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(1)


def _dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2, default=str))


def _cmd_match(args) -> None:
    matched = can_match(args.first, args.second)
    print("match" if matched else "no match")
    if not matched:
        sys.exit(1)


def _cmd_extract(args) -> None:
    name = extract_name(args.line)
    print(f"name:       {name}")
    print(f"normalized: {normalize(name)}")


def _cmd_best_match(args) -> None:
    inventory = _load_json(args.inventory)
    if isinstance(inventory, dict):
        inventory = inventory.get("items", [])
    if not isinstance(inventory, list):
        print(f"{args.inventory}: expected a list of items", file=sys.stderr)
        sys.exit(1)

    item = best_match(args.name, inventory)
    if item is None:
        print(f"No inventory item matches {args.name!r}")
        sys.exit(1)
    _dump(item)


def _cmd_totals(config, args) -> None:
    shopping_list = _load_json(args.shopping_list)

    totals_config = config.totals
    if args.tax_rate is not None:
        totals_config = replace(totals_config, tax_rate=args.tax_rate)
    calculator = TotalsCalculator.from_config(totals_config)

    result = calculator.calculate_totals(
        shopping_list,
        budget=args.budget if args.budget is not None else config.totals.budget,
        taxable_categories=(
            args.taxable if args.taxable is not None
            else config.totals.taxable_categories
        ),
    )

    if args.json:
        _dump(calculator.generate_summary(result).to_dict())
    else:
        print(calculator.export_totals(result, "text"))

    if args.pdf:
        from .pdf import render_totals_pdf

        try:
            path = render_totals_pdf(result, calculator, Path(args.pdf))
        except ImportError as e:
            print(f"PDF error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"PDF saved: {path}", file=sys.stderr)


def _cmd_prices(args) -> None:
    history = _load_json(args.history)
    if isinstance(history, dict):
        history = history.get("prices", [])
    points = price_points(history if isinstance(history, list) else [])

    data: dict[str, Any] = {
        "statistics": asdict(price_statistics(points)),
        "stores": [asdict(s) for s in store_comparison(points)],
    }
    if args.current is not None:
        deal = analyze_deal(points, args.current)
        data["deal"] = {**asdict(deal), "has_deals": deal.has_deals}
    _dump(data)
