from __future__ import annotations

from backend.core.sip import (
    calculate_normal_sip,
    calculate_step_up_sip,
    chart_stride,
    generate_chart_series,
    round_currency,
)


def test_short_horizon_samples_every_year():
    points = generate_chart_series(5000, 12, 10, 10)

    assert [p.year for p in points] == list(range(1, 11))
    assert abs(points[-1].normal_sip_value - calculate_normal_sip(5000, 12, 10)) <= 1
    assert points[-1].step_up_sip_value == round_currency(calculate_step_up_sip(5000, 12, 10, 10))


def test_long_horizon_is_down_sampled():
    points = generate_chart_series(5000, 12, 40, 10)

    assert chart_stride(40) == 4
    assert [p.year for p in points] == [4, 8, 12, 16, 20, 24, 28, 32, 36, 40]


def test_endpoint_always_present():
    for years in range(1, 41):
        points = generate_chart_series(1000, 10, years, 5)
        assert points[-1].year == years
        assert [p.year for p in points] == sorted({p.year for p in points})


def test_uneven_horizon_keeps_final_year():
    # stride 2 for 25 years: even years plus year 25
    years = [p.year for p in generate_chart_series(1000, 10, 25, 5)]
    assert years == list(range(2, 25, 2)) + [25]


def test_zero_step_series_overlap():
    for point in generate_chart_series(2000, 9, 12, 0):
        assert point.normal_sip_value == point.step_up_sip_value


def test_degenerate_inputs_give_empty_series():
    assert generate_chart_series(5000, 12, 0, 10) == []
    assert generate_chart_series(0, 12, 10, 10) == []
