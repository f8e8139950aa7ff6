#!/usr/bin/env python3
"""Run the underwriting calculators from the command line.

Examples::

    python scripts/analyze_deal.py dscr --loan 280000 --rate 7.25 --term 30 \
        --rent 3200 --taxes 350 --insurance 120
    python scripts/analyze_deal.py flip --price 240000 --rehab 60000 --arv 340000 \
        --months 6 --monthly-costs 1000
    python scripts/analyze_deal.py quote --property-id 1 --type DSCR
    python scripts/analyze_deal.py search --type "Fix & Flip" --rehab-type Heavy
"""

import argparse
import json
import logging
import sys

from investee.api import MockLendingApi
from investee.config import InvesteeConfig
from investee.exceptions import InvesteeError
from investee.logging import setup_logging
from investee.models.lending import (
    FixFlipInput,
    LoanQuoteInput,
    PropertyFilters,
    QuoteRequest,
)
from investee.serialization import to_payload

logger = logging.getLogger("investee.scripts.analyze_deal")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Evaluate investment property loans")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    commands = parser.add_subparsers(dest="command", required=True)

    dscr = commands.add_parser("dscr", help="Debt service coverage for a rental loan")
    dscr.add_argument("--loan", type=float, required=True, help="Loan amount")
    dscr.add_argument("--rate", type=float, required=True, help="Annual interest rate in percent")
    dscr.add_argument("--term", type=float, default=30, help="Term in years (default: 30)")
    dscr.add_argument("--rent", type=float, required=True, help="Gross monthly rent")
    dscr.add_argument("--taxes", type=float, default=0.0, help="Monthly taxes (default: 0)")
    dscr.add_argument("--insurance", type=float, default=0.0, help="Monthly insurance (default: 0)")

    flip = commands.add_parser("flip", help="Fix & Flip return on investment")
    flip.add_argument("--price", type=float, required=True, help="Purchase price")
    flip.add_argument("--rehab", type=float, required=True, help="Rehab budget")
    flip.add_argument("--arv", type=float, required=True, help="After-repair value")
    flip.add_argument(
        "--months", type=float, default=None, help="Holding months (default: configured hold)"
    )
    flip.add_argument("--monthly-costs", type=float, default=0.0, help="Monthly holding costs")

    quote = commands.add_parser("quote", help="Quote a loan on a demo listing")
    quote.add_argument("--property-id", type=int, required=True, help="Listing id")
    quote.add_argument("--type", dest="investment_type", default="DSCR", help="DSCR or 'Fix & Flip'")
    quote.add_argument(
        "--down", type=float, default=None, help="Down payment percent (default: configured)"
    )

    search = commands.add_parser("search", help="Search demo listings")
    search.add_argument("--type", dest="investment_type", default=None)
    search.add_argument("--state", default=None)
    search.add_argument("--rehab-type", default=None)

    return parser


def run(args: argparse.Namespace, api: MockLendingApi) -> object:
    """Dispatch a parsed command and return its JSON payload."""
    if args.command == "dscr":
        result = api.calculate_dscr(
            LoanQuoteInput(
                loan_amount=args.loan,
                interest_rate=args.rate,
                term_years=args.term,
                rent=args.rent,
                taxes=args.taxes,
                insurance=args.insurance,
            )
        )
        return to_payload(result)
    if args.command == "flip":
        result = api.calculate_fix_flip(
            FixFlipInput(
                purchase_price=args.price,
                rehab_budget=args.rehab,
                arv=args.arv,
                holding_months=args.months,
                monthly_costs=args.monthly_costs,
            )
        )
        return to_payload(result)
    if args.command == "quote":
        result = api.generate_quote(
            QuoteRequest(
                property_id=args.property_id,
                investment_type=args.investment_type,
                down_payment_percent=args.down,
            )
        )
        return to_payload(result)
    properties = api.search_properties(
        PropertyFilters(
            investment_type=args.investment_type,
            state=args.state,
            rehab_type=args.rehab_type,
        )
    )
    return [to_payload(p) for p in properties]


def main() -> None:
    """Main entry point."""
    args = build_parser().parse_args()
    config = InvesteeConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        payload = run(args, MockLendingApi(config=config))
    except InvesteeError as e:
        logger.error("%s: %s", type(e).__name__, e)
        sys.exit(1)

    print(json.dumps(payload, indent=2 if args.pretty else None))


if __name__ == "__main__":
    main()
