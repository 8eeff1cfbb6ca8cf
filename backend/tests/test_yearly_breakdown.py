from __future__ import annotations

from math import isclose

from backend.core.sip import (
    calculate_step_up_sip,
    generate_yearly_breakdown,
    round_currency,
)


def test_golden_breakdown():
    rows = generate_yearly_breakdown(5000, 12, 10, 10)

    assert len(rows) == 10
    assert [row.year for row in rows] == list(range(1, 11))
    assert rows[0].monthly_contribution == 5000
    assert rows[0].yearly_contribution == 60000
    assert rows[9].monthly_contribution == round_currency(5000 * 1.10**9)
    assert rows[-1].end_of_year_value == round_currency(calculate_step_up_sip(5000, 12, 10, 10))


def test_contributions_step_up_each_year():
    rows = generate_yearly_breakdown(5000, 12, 10, 10)
    for previous, current in zip(rows, rows[1:]):
        assert isclose(current.monthly_contribution, previous.monthly_contribution * 1.1, abs_tol=2.0)
    for row in rows:
        # rounded per field, so allow 12 half-units of drift
        assert abs(row.yearly_contribution - 12 * row.monthly_contribution) <= 6


def test_end_of_year_value_strictly_increases():
    for rate in (0, 1, 12, 30):
        rows = generate_yearly_breakdown(500, rate, 40, 10)
        values = [row.end_of_year_value for row in rows]
        assert all(b > a for a, b in zip(values, values[1:]))


def test_cumulative_contributed_is_conserved():
    rows = generate_yearly_breakdown(1000, 8, 15, 0)
    running = 0
    for row in rows:
        running += row.yearly_contribution
        assert row.cumulative_contributed == running
        assert row.yearly_contribution == 12 * row.monthly_contribution


def test_cumulative_contributed_with_step_up_stays_close():
    rows = generate_yearly_breakdown(5000, 12, 30, 10)
    running = 0
    for index, row in enumerate(rows, start=1):
        running += row.yearly_contribution
        assert abs(row.cumulative_contributed - running) <= index
        if index > 1:
            assert row.cumulative_contributed >= rows[index - 2].cumulative_contributed


def test_gain_is_value_minus_contributed():
    for row in generate_yearly_breakdown(5000, 12, 10, 10):
        assert abs(row.gain - (row.end_of_year_value - row.cumulative_contributed)) <= 1


def test_rounding_does_not_compound():
    """
    A contribution of 0.4 rounds to 0 every month; if rounding fed back into the
    simulation the balance would stay at zero.
    """
    rows = generate_yearly_breakdown(0.4, 0, 10, 0)
    assert rows[0].monthly_contribution == 0
    assert rows[0].end_of_year_value == 5  # 4.8
    assert rows[-1].end_of_year_value == 48
    assert rows[-1].cumulative_contributed == 48


def test_degenerate_inputs_give_empty_breakdown():
    assert generate_yearly_breakdown(5000, 12, 0, 10) == []
    assert generate_yearly_breakdown(0, 12, 10, 10) == []
