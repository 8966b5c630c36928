from erfpacht.analysis.aggregate import build_scenario
from erfpacht.analysis.frames import cumulative_frame
from erfpacht.domain.scenario import CashflowSeries


def _scenarios():
    current = build_scenario(
        "current", "Huidig", "", CashflowSeries(gross=(10.0, 10.0, 10.0), net=(6.0, 6.0, 6.0))
    )
    buyout = build_scenario(
        "buyout", "Afkoop", "", CashflowSeries(gross=(15.0, 0.0, 0.0), net=(15.0, 0.0, 0.0))
    ).with_break_even(None)
    return [current, buyout]


def test_cumulative_frame_net_and_gross():
    net = cumulative_frame(_scenarios())
    assert list(net.columns) == ["current", "buyout"]
    assert net.index.name == "year"
    assert net["current"].tolist() == [6.0, 12.0, 18.0]
    assert net["buyout"].tolist() == [15.0, 15.0, 15.0]

    gross = cumulative_frame(_scenarios(), net=False)
    assert gross["current"].tolist() == [10.0, 20.0, 30.0]


def test_cumulative_frame_pads_shorter_series():
    short = build_scenario("short", "", "", CashflowSeries(gross=(1.0,), net=(1.0,)))
    df = cumulative_frame(_scenarios() + [short])
    assert df["short"].iloc[0] == 1.0
    assert df["short"].iloc[1:].isna().all()


def test_cumulative_frame_empty():
    assert cumulative_frame([]).empty
