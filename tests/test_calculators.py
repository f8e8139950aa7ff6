"""Tests for amortization, DSCR, Fix & Flip and quote calculators."""

import pytest

from investee.calculators import (
    amortize,
    classify_roi,
    evaluate_dscr,
    evaluate_fix_flip,
    generate_quote,
)
from investee.calculators.quote import DSCR_RENTAL, FIX_AND_FLIP, product_for
from investee.calculators.rounding import round_currency, round_half_up
from investee.exceptions import (
    DegenerateResultError,
    InvalidInputError,
    PropertyNotFoundError,
)
from investee.models.lending import (
    DSCRStatus,
    FixFlipInput,
    FlipVerdict,
    InvestmentType,
    LoanQuoteInput,
    QuoteRequest,
)
from investee.store import InMemoryPropertyStore


class TestRounding:
    """Tests for display rounding."""

    def test_ties_round_up(self) -> None:
        assert round_currency(1910.5) == 1911
        assert round_currency(2.5) == 3

    def test_negative_dollar_ties_round_toward_positive(self) -> None:
        assert round_currency(-820.5) == -820
        assert round_currency(-2.5) == -2
        assert round_currency(-820.51) == -821

    def test_just_below_half(self) -> None:
        assert round_currency(0.49999999999999994) == 0
        assert round_currency(819.9) == 820

    def test_decimal_places(self) -> None:
        assert round_half_up(11.25, 1) == 11.3
        assert round_half_up(1.3445, 2) == 1.34

    def test_rounds_exact_binary_value(self) -> None:
        """Test 1.345, stored just below the tie, rounds down."""
        assert round_half_up(1.345, 2) == 1.34
        assert round_half_up(1.375, 2) == 1.38

    def test_negative_ties_round_away_from_zero(self) -> None:
        assert round_half_up(-18.75, 1) == -18.8


class TestAmortize:
    """Tests for amortize."""

    def test_standard_payment(self) -> None:
        """Test a 30-year payment against the closed form."""
        assert amortize(280_000, 7.25, 30) == pytest.approx(1910.09, abs=0.01)

    def test_known_payment(self) -> None:
        """Test $300k at 7.5% over 30 years."""
        assert amortize(300_000, 7.5, 30) == pytest.approx(2097.64, abs=0.01)

    def test_zero_rate_is_straight_line(self) -> None:
        """Test zero interest divides principal evenly."""
        assert amortize(120_000, 0, 10) == 120_000 / (10 * 12)
        assert amortize(100_000, 0, 30) == 100_000 / 360

    def test_zero_principal(self) -> None:
        assert amortize(0, 7.25, 30) == 0.0

    @pytest.mark.parametrize("term", [0, -1])
    def test_non_positive_term_rejected(self, term: float) -> None:
        with pytest.raises(InvalidInputError, match="term_years"):
            amortize(100_000, 7.0, term)

    def test_negative_principal_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            amortize(-1, 7.0, 30)

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            amortize(100_000, -0.5, 30)

    def test_payment_non_negative(self) -> None:
        """Test payments are never negative across a range of loans."""
        for loan in (0, 1, 50_000, 1_000_000):
            for rate in (0, 0.01, 5.0, 12.5):
                for term in (0.5, 1, 15, 30):
                    assert amortize(loan, rate, term) >= 0

    def test_higher_rate_costs_more(self) -> None:
        assert amortize(200_000, 8.0, 30) > amortize(200_000, 6.0, 30)

    def test_tiny_rate_matches_straight_line(self) -> None:
        """Test a rate too small to register still yields a payment."""
        assert amortize(100_000, 1e-15, 30) == pytest.approx(100_000 / 360)

    def test_very_long_term_approaches_interest_only(self) -> None:
        """Test a huge term converges on one month of interest."""
        assert amortize(100_000, 12, 100_000) == pytest.approx(1_000)
        assert amortize(100_000, 12, 1e300) == pytest.approx(1_000)

    def test_tiny_rate_dscr(self) -> None:
        result = evaluate_dscr(
            LoanQuoteInput(loan_amount=280_000, interest_rate=1e-15, term_years=30, rent=3_200)
        )

        assert result.p_and_i == 778
        assert result.status == DSCRStatus.PASS


class TestEvaluateDSCR:
    """Tests for evaluate_dscr."""

    def test_passing_rental(self, dscr_input: LoanQuoteInput) -> None:
        """Test the Philadelphia demo rental passes."""
        result = evaluate_dscr(dscr_input)

        assert result.p_and_i == 1910
        assert result.monthly_debt == 2380
        assert result.dscr == 1.34
        assert result.status == DSCRStatus.PASS
        assert result.status == "pass"

    def test_failing_rental(self) -> None:
        """Test low rent fails coverage."""
        result = evaluate_dscr(
            LoanQuoteInput(
                loan_amount=280_000,
                interest_rate=7.25,
                term_years=30,
                rent=1_500,
                taxes=350,
                insurance=120,
            )
        )

        assert result.dscr < 1.10
        assert result.status == DSCRStatus.FAIL

    def test_threshold_is_inclusive(self) -> None:
        """Test a ratio of exactly 1.10 passes."""
        # Zero rate: P&I is 1000/month, no taxes or insurance
        result = evaluate_dscr(
            LoanQuoteInput(loan_amount=120_000, interest_rate=0, term_years=10, rent=1_100)
        )

        assert result.p_and_i == 1000
        assert result.dscr == 1.1
        assert result.status == DSCRStatus.PASS

    def test_taxes_and_insurance_default_to_zero(self) -> None:
        result = evaluate_dscr(
            LoanQuoteInput(loan_amount=120_000, interest_rate=0, term_years=10, rent=1_500)
        )

        assert result.monthly_debt == 1000
        assert result.dscr == 1.5

    def test_custom_threshold(self, dscr_input: LoanQuoteInput) -> None:
        result = evaluate_dscr(dscr_input, pass_threshold=1.5)

        assert result.status == DSCRStatus.FAIL

    def test_zero_debt_is_degenerate(self) -> None:
        """Test a zero debt service raises instead of dividing by zero."""
        with pytest.raises(DegenerateResultError):
            evaluate_dscr(LoanQuoteInput(loan_amount=0, interest_rate=7.25, term_years=30, rent=1_000))

    def test_idempotent(self, dscr_input: LoanQuoteInput) -> None:
        assert evaluate_dscr(dscr_input) == evaluate_dscr(dscr_input)


class TestEvaluateFixFlip:
    """Tests for evaluate_fix_flip."""

    def test_marginal_deal(self, flip_input: FixFlipInput) -> None:
        """Test the Atlanta demo flip is marginal."""
        result = evaluate_fix_flip(flip_input)

        assert result.total_basis == 300_000
        assert result.total_holding == 6_000
        assert result.profit == 34_000
        assert result.roi == 11.3
        assert result.verdict == FlipVerdict.MARGINAL

    def test_strong_deal(self) -> None:
        result = evaluate_fix_flip(
            FixFlipInput(
                purchase_price=240_000,
                rehab_budget=60_000,
                arv=400_000,
                holding_months=6,
                monthly_costs=1_000,
            )
        )

        assert result.roi > 20
        assert result.roi == 31.3
        assert result.verdict == FlipVerdict.STRONG

    def test_weak_deal(self) -> None:
        result = evaluate_fix_flip(
            FixFlipInput(
                purchase_price=240_000,
                rehab_budget=60_000,
                arv=310_000,
                holding_months=6,
                monthly_costs=1_000,
            )
        )

        assert result.roi < 10
        assert result.roi == 1.3
        assert result.verdict == FlipVerdict.WEAK

    def test_losing_deal(self) -> None:
        """Test a negative profit is reported, not clamped."""
        result = evaluate_fix_flip(
            FixFlipInput(purchase_price=240_000, rehab_budget=60_000, arv=250_000, monthly_costs=1_000)
        )

        assert result.profit == -56_000
        assert result.roi == -18.7
        assert result.verdict == FlipVerdict.WEAK

    @pytest.mark.parametrize("months", [None, 0])
    def test_missing_holding_months_defaults_to_six(self, months: float | None) -> None:
        result = evaluate_fix_flip(
            FixFlipInput(
                purchase_price=240_000,
                rehab_budget=60_000,
                arv=340_000,
                holding_months=months,
                monthly_costs=1_000,
            )
        )

        assert result.total_holding == 6_000

    def test_custom_default_holding_months(self) -> None:
        data = FixFlipInput(
            purchase_price=240_000, rehab_budget=60_000, arv=340_000, monthly_costs=1_000
        )

        result = evaluate_fix_flip(data, default_holding_months=9)

        assert result.total_holding == 9_000

    def test_explicit_months_ignore_default(self, flip_input: FixFlipInput) -> None:
        assert evaluate_fix_flip(flip_input, default_holding_months=9).total_holding == 6_000

    def test_monthly_costs_default_to_zero(self) -> None:
        result = evaluate_fix_flip(FixFlipInput(purchase_price=100_000, rehab_budget=0, arv=150_000))

        assert result.total_holding == 0
        assert result.profit == 50_000

    def test_zero_basis_is_degenerate(self) -> None:
        """Test a zero basis raises instead of reporting an infinite ROI."""
        with pytest.raises(DegenerateResultError):
            evaluate_fix_flip(FixFlipInput(purchase_price=0, rehab_budget=0, arv=100_000))

    def test_idempotent(self, flip_input: FixFlipInput) -> None:
        assert evaluate_fix_flip(flip_input) == evaluate_fix_flip(flip_input)


class TestClassifyROI:
    """Tests for the verdict boundaries."""

    @pytest.mark.parametrize(
        "roi, verdict",
        [
            (20.01, FlipVerdict.STRONG),
            (20.0, FlipVerdict.MARGINAL),
            (15.0, FlipVerdict.MARGINAL),
            (10.0, FlipVerdict.MARGINAL),
            (9.99, FlipVerdict.WEAK),
            (-5.0, FlipVerdict.WEAK),
        ],
    )
    def test_boundaries(self, roi: float, verdict: FlipVerdict) -> None:
        assert classify_roi(roi) == verdict


class TestGenerateQuote:
    """Tests for generate_quote."""

    def test_dscr_quote(self, store: InMemoryPropertyStore) -> None:
        """Test a DSCR quote on the $350,000 demo rental."""
        quote = generate_quote(
            store, QuoteRequest(property_id=1, investment_type="DSCR", down_payment_percent=20)
        )

        assert quote.property_id == 1
        assert quote.loan_amount == 280_000
        assert quote.interest_rate == 7.25
        assert quote.term_years == 30
        assert quote.product_type == "DSCR Rental"
        assert quote.est_closing_costs == 8_400

    def test_fix_flip_quote(self, store: InMemoryPropertyStore) -> None:
        quote = generate_quote(
            store, QuoteRequest(property_id=2, investment_type=InvestmentType.FIX_AND_FLIP)
        )

        assert quote.loan_amount == 192_000
        assert quote.interest_rate == 10.5
        assert quote.term_years == 1
        assert quote.product_type == "Fix & Flip"
        assert quote.est_closing_costs == 5_760

    def test_default_down_payment(self, store: InMemoryPropertyStore) -> None:
        quote = generate_quote(store, QuoteRequest(property_id=3, investment_type="DSCR"))

        assert quote.loan_amount == 384_000

    def test_custom_down_payment(self, store: InMemoryPropertyStore) -> None:
        quote = generate_quote(
            store, QuoteRequest(property_id=1, investment_type="DSCR", down_payment_percent=25)
        )

        assert quote.loan_amount == 262_500
        assert quote.est_closing_costs == 7_875

    def test_custom_default_down_payment(self, store: InMemoryPropertyStore) -> None:
        quote = generate_quote(
            store,
            QuoteRequest(property_id=1, investment_type="DSCR"),
            default_down_payment_percent=30,
        )

        assert quote.loan_amount == 245_000

    def test_explicit_down_payment_ignores_default(self, store: InMemoryPropertyStore) -> None:
        quote = generate_quote(
            store,
            QuoteRequest(property_id=1, investment_type="DSCR", down_payment_percent=0),
            default_down_payment_percent=30,
        )

        assert quote.loan_amount == 350_000

    def test_custom_closing_cost_rate(self, store: InMemoryPropertyStore) -> None:
        quote = generate_quote(
            store,
            QuoteRequest(property_id=1, investment_type="DSCR"),
            closing_cost_rate=0.02,
        )

        assert quote.est_closing_costs == 5_600

    def test_unknown_property(self, store: InMemoryPropertyStore) -> None:
        with pytest.raises(PropertyNotFoundError, match="999"):
            generate_quote(store, QuoteRequest(property_id=999, investment_type="DSCR"))

    def test_quote_does_not_mutate_property(self, store: InMemoryPropertyStore) -> None:
        before = store.get_property(1)
        generate_quote(store, QuoteRequest(property_id=1, investment_type="DSCR"))

        assert store.get_property(1) == before

    def test_product_for_unknown_type_prices_as_flip(self) -> None:
        assert product_for("DSCR") is DSCR_RENTAL
        assert product_for(InvestmentType.DSCR) is DSCR_RENTAL
        assert product_for("Bridge") is FIX_AND_FLIP
