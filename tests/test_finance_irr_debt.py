import math
import warnings

import pytest

from wse_finance.finance.debt import amortization_schedule, debt_service, level_payment
from wse_finance.finance.irr import irr, npv, present_value


class TestPresentValueAndNPV:
    def test_period_zero_is_undiscounted(self):
        assert present_value(-250.0, 8.0, 0) == -250.0

    def test_single_period(self):
        assert present_value(110.0, 10.0, 1) == pytest.approx(100.0)

    def test_zero_rate_npv_is_plain_sum(self):
        cfs = [-1000.0, 120.5, 300.0, 410.25, 99.0]
        assert npv(cfs, 0.0) == pytest.approx(sum(cfs))

    def test_npv_discounts_from_index_zero(self):
        assert npv([-100.0, 110.0], 10.0) == pytest.approx(0.0, abs=1e-9)
        assert npv([-100.0, 0.0, 121.0], 10.0) == pytest.approx(0.0, abs=1e-9)

    def test_npv_matches_sum_of_present_values(self):
        cfs = [-500.0, 80.0, 90.0, 100.0, 400.0]
        expected = sum(present_value(cf, 7.5, t) for t, cf in enumerate(cfs))
        assert npv(cfs, 7.5) == pytest.approx(expected)

    def test_empty_npv(self):
        assert npv([], 5.0) == 0.0

    def test_minus_hundred_percent_degrades_to_inf(self):
        assert math.isinf(present_value(50.0, -100.0, 1))


class TestIRR:
    def test_single_period_ten_percent(self):
        assert irr([-100.0, 110.0]) == pytest.approx(0.10, abs=1e-4)

    def test_basic_band(self):
        # Simple 3-period stream with single sign change (~13.07 %)
        r = irr([-100.0, 60.0, 60.0])
        assert math.isfinite(r)
        assert 0.05 < r < 0.15
        assert npv([-100.0, 60.0, 60.0], r * 100.0) == pytest.approx(0.0, abs=1e-4)

    @pytest.mark.parametrize("cfs", [[], [-100.0], [100.0, -10.0], [0.0, 50.0]])
    def test_precondition_violation_returns_zero(self, cfs):
        assert irr(cfs) == 0.0

    def test_no_root_returns_final_bracket_midpoint(self):
        # NPV is -100 at every rate: high collapses onto the lower bound
        assert irr([-100.0, 0.0, 0.0]) == pytest.approx(-0.999999, abs=1e-6)

    def test_custom_precision(self):
        r = irr([-1000.0, 300.0, 400.0, 500.0], precision=1e-8)
        assert npv([-1000.0, 300.0, 400.0, 500.0], r * 100.0) == pytest.approx(0.0, abs=1e-8)


class TestLevelPayment:
    @pytest.mark.parametrize("principal,n", [(1000.0, 4), (700000.0, 10), (1.0, 3), (12345.67, 7)])
    def test_zero_rate_is_straight_line(self, principal, n):
        assert level_payment(principal, 0.0, n) == principal / n

    def test_standard_annuity(self):
        # PMT(5 %, 10, 100000) = 12,950.46
        assert level_payment(100000.0, 5.0, 10) == pytest.approx(12950.46, abs=0.01)

    @pytest.mark.parametrize("term", [0, -3])
    def test_non_positive_term_is_zero(self, term):
        assert level_payment(100000.0, 5.0, term) == 0.0
        assert level_payment(100000.0, 0.0, term) == 0.0

    def test_non_finite_degrades_to_zero(self):
        assert level_payment(float("inf"), 0.0, 5) == 0.0
        assert level_payment(float("nan"), 5.0, 5) == 0.0


class TestAmortization:
    @pytest.mark.parametrize("rate", [0.0, 3.5, 6.0, 12.0])
    def test_full_amortization(self, rate):
        schedule = amortization_schedule(700000.0, rate, 10)
        assert len(schedule) == 10
        assert sum(s.principal for s in schedule) == pytest.approx(700000.0)
        assert schedule[-1].balance == 0.0

    def test_balance_non_increasing(self):
        schedule = amortization_schedule(250000.0, 7.0, 15)
        balances = [s.balance for s in schedule]
        assert all(b >= 0 for b in balances)
        assert balances == sorted(balances, reverse=True)

    def test_level_payments(self):
        schedule = amortization_schedule(100000.0, 5.0, 10)
        for s in schedule:
            assert s.payment == pytest.approx(12950.46, abs=0.01)

    def test_zero_interest(self):
        for s in amortization_schedule(100000.0, 0.0, 5):
            assert s.interest == 0.0
            assert s.payment == pytest.approx(20000.0)

    def test_overpayment_is_clamped(self):
        step = debt_service(50.0, 100.0, 10.0)
        assert step.principal == 50.0
        assert step.interest == pytest.approx(5.0)
        assert step.payment == pytest.approx(55.0)
        assert step.balance == 0.0

    def test_no_balance_no_service(self):
        assert debt_service(0.0, 100.0, 10.0) == (0.0, 0.0, 0.0, 0.0)


class TestDegeneratePayment:
    def test_overflowing_annuity_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert level_payment(700000.0, 1e5, 200) == 0.0

    def test_zero_payment_is_not_clamped_in_final_year(self):
        step = debt_service(100.0, 0.0, 10.0, final=True)
        assert step.payment == 0.0
        assert step.interest == pytest.approx(10.0)
        assert step.principal == pytest.approx(-10.0)
        assert step.balance == pytest.approx(110.0)

    def test_positive_payment_still_settles_residue(self):
        step = debt_service(100.0 + 1e-9, 110.0, 10.0, final=True)
        assert step.principal == 100.0 + 1e-9
        assert step.balance == 0.0
