import pytest

from erfpacht.domain.finance import annuity_payment
from erfpacht.domain.household import HouseholdInput
from erfpacht.services.comparison import compare_scenarios, resolve_canon_rate, summarize


def _household(**overrides) -> HouseholdInput:
    base = dict(
        contract_type="AB1986",
        selected_year=2025,
        ground_value=100_000.0,
        management_fee=34.0,
        occupied=True,
        marginal_tax_rate=0.37,
        horizon_years=30,
        discount_rate=0.035,
    )
    base.update(overrides)
    return HouseholdInput(**base)


def test_ab1986_household_gets_current_ab2024_and_buyout():
    scenarios = compare_scenarios(_household())

    assert [s.id for s in scenarios] == ["current", "ab2024", "buyout"]
    current, ab2024, buyout = scenarios

    assert current.label == "Huidige situatie (AB1986)"
    assert current.series.gross[0] == pytest.approx(3334.0)
    assert current.series.net[0] == pytest.approx(2100.42)
    assert current.series.years == 30

    assert ab2024.series.gross[0] == pytest.approx(100_000.0 * 0.021 + 34.0)

    assert buyout.series.gross[0] == 100_000.0
    assert buyout.description == "Eenmalige afkoop van €100.000"
    # 30 years of ~2100 net canon never add up to the 100k buyout
    assert buyout.break_even_year is None


def test_ab2024_household_has_no_switch_scenario():
    scenarios = compare_scenarios(_household(contract_type="AB2024"))
    assert [s.id for s in scenarios] == ["current", "buyout"]
    assert scenarios[0].series.gross[0] == pytest.approx(100_000.0 * 0.021 + 34.0)


def test_unknown_contract_is_treated_as_ab1986():
    scenarios = compare_scenarios(_household(contract_type="unknown"))
    assert scenarios[0].label == "Huidige situatie (AB1986)"
    assert "ab2024" in [s.id for s in scenarios]


def test_buyout_breaks_even_when_canon_is_not_deductible():
    scenarios = compare_scenarios(_household(occupied=False))
    buyout = next(s for s in scenarios if s.id == "buyout")
    # cumulative canon 3334 * 30 = 100,020 first reaches 100,000 in year 29
    assert buyout.break_even_year == 29


def test_land_scenario_needs_assessed_value():
    ids = [s.id for s in compare_scenarios(_household(assessed_value=350_000.0))]
    assert ids[-1] == "land"

    scenarios = compare_scenarios(_household(assessed_value=350_000.0, land_surcharge=2_000.0))
    land = scenarios[-1]
    assert land.series.gross[0] == pytest.approx(100_000.0 + 1650.0 + 2_000.0)
    assert land.description == "Afkoop €100.000 + grond €1.650"
    assert land.break_even_year is None


def test_land_scenario_skipped_when_not_possible():
    ids = [
        s.id
        for s in compare_scenarios(_household(assessed_value=350_000.0, land_purchase_possible="no"))
    ]
    assert "land" not in ids


def test_explicit_buyout_amount_wins():
    scenarios = compare_scenarios(_household(buyout_amount=80_000.0))
    buyout = next(s for s in scenarios if s.id == "buyout")
    assert buyout.series.gross[0] == 80_000.0


def test_financed_buyout_uses_household_loan_terms():
    scenarios = compare_scenarios(
        _household(finance_with_loan=True, loan_interest_rate=0.045, loan_term_years=30)
    )
    buyout = next(s for s in scenarios if s.id == "buyout")
    assert buyout.series.gross[0] == pytest.approx(annuity_payment(100_000.0, 0.045, 30))
    assert buyout.series.gross[29] == pytest.approx(buyout.series.gross[0])


def test_resolve_canon_rate_prefers_custom_then_table_then_fallback():
    assert resolve_canon_rate(_household(custom_canon_rate="2.5%")) == pytest.approx(0.025)
    assert resolve_canon_rate(_household(selected_year=2024)) == 0.032
    # no AB1986 rate published for 2031
    assert resolve_canon_rate(_household(selected_year=2031)) == pytest.approx(0.033)


def test_current_contract_fallback_is_regime_independent():
    # AB2024 has no 2031 rate either; the current contract still falls back to 3.3%
    h = _household(contract_type="AB2024", selected_year=2031)
    assert resolve_canon_rate(h) == pytest.approx(0.033)


def test_switch_scenario_uses_ab2024_fallback():
    scenarios = {s.id: s for s in compare_scenarios(_household(selected_year=2031, occupied=False))}
    assert scenarios["current"].series.gross[0] == pytest.approx(100_000 * 0.033 + 34)
    assert scenarios["ab2024"].series.gross[0] == pytest.approx(100_000 * 0.022 + 34)


def test_custom_rate_with_percent_sign():
    scenarios = compare_scenarios(_household(custom_canon_rate="1%"))
    assert scenarios[0].series.gross[0] == pytest.approx(1034.0)


def test_horizon_override_and_zero_horizon():
    scenarios = compare_scenarios(_household(horizon_years=10))
    assert all(s.series.years == 10 for s in scenarios)

    empty = compare_scenarios(_household(horizon_years=0))
    assert all(s.series.years == 0 for s in empty)
    assert all(s.break_even_year is None for s in empty)


def test_compare_is_deterministic():
    h = _household(assessed_value=500_000.0, finance_with_loan=True)
    assert compare_scenarios(h) == compare_scenarios(h)


def test_summarize_headline_figures():
    scenarios = compare_scenarios(_household())
    summary = summarize(scenarios)

    assert summary["current_yearly_net"] == pytest.approx(2100.42)
    assert summary["ab2024_yearly_saving"] == pytest.approx(2100.42 - 2134.0 * 0.63)
    assert summary["buyout_break_even_year"] is None
    assert summary["buyout_npv_advantage"] < 0
    assert summary["cheapest_scenario"] == "ab2024"


def test_summarize_empty():
    summary = summarize([])
    assert summary["cheapest_scenario"] is None
    assert summary["current_yearly_net"] is None
