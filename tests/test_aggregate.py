import pytest

from erfpacht.analysis.aggregate import break_even_year, build_scenario
from erfpacht.domain.finance import npv
from erfpacht.domain.scenario import CashflowSeries


def test_build_scenario_totals_averages_and_npv():
    series = CashflowSeries(gross=(100.0, 100.0, 100.0, 100.0), net=(63.0, 63.0, 63.0, 63.0))
    s = build_scenario("current", "Huidige situatie", "test", series, discount_rate=0.035)

    assert s.total_gross == pytest.approx(400.0)
    assert s.total_net == pytest.approx(252.0)
    assert s.yearly_gross == pytest.approx(100.0)
    assert s.yearly_net == pytest.approx(63.0)
    assert s.npv_gross == pytest.approx(npv(series.gross, 0.035))
    assert s.npv_net == pytest.approx(npv(series.net, 0.035))
    assert s.npv_gross < s.total_gross
    assert s.break_even_year is None


def test_build_scenario_default_discount_rate_is_3_5_pct():
    series = CashflowSeries(gross=(0.0, 103.5), net=(0.0, 103.5))
    s = build_scenario("x", "x", "x", series)
    assert s.npv_gross == pytest.approx(100.0)


def test_build_scenario_empty_series():
    s = build_scenario("x", "x", "x", CashflowSeries(gross=(), net=()))
    assert s.total_net == 0
    assert s.yearly_net == 0.0
    assert s.npv_net == 0.0


def test_series_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        CashflowSeries(gross=(1.0, 2.0), net=(1.0,))


def test_with_break_even_returns_copy():
    s = build_scenario("x", "x", "x", CashflowSeries(gross=(1.0,), net=(1.0,)))
    s2 = s.with_break_even(4)
    assert s.break_even_year is None
    assert s2.break_even_year == 4
    assert s2.total_net == s.total_net


def test_to_dict_flattens_series():
    s = build_scenario("x", "lbl", "desc", CashflowSeries(gross=(1.0, 2.0), net=(0.5, 1.0)))
    d = s.to_dict()
    assert d["cashflows_gross"] == [1.0, 2.0]
    assert d["cashflows_net"] == [0.5, 1.0]
    assert "series" not in d


def test_break_even_never_reached_is_none():
    baseline = [10.0, 20.0, 30.0]
    challenger = [100.0, 100.0, 100.0]
    assert break_even_year(baseline, challenger) is None


def test_break_even_equal_at_year_zero_is_zero():
    assert break_even_year([100.0, 110.0], [100.0, 200.0]) == 0


def test_break_even_first_crossing():
    baseline = [30.0, 60.0, 90.0, 120.0]
    challenger = [100.0, 100.0, 100.0, 100.0]
    assert break_even_year(baseline, challenger) == 3


def test_break_even_tie_counts():
    assert break_even_year([50.0, 100.0], [100.0, 100.0]) == 1


def test_break_even_uses_common_length():
    assert break_even_year([1.0, 2.0, 300.0], [100.0, 100.0]) is None
    assert break_even_year([], []) is None
