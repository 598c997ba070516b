from datetime import date

from src.crew_payroll.crew_payroll.core.enums import EntryKind
from src.crew_payroll.crew_payroll.payroll.calculator.base_hours_calculator import BaseHoursPayrollCalculator
from src.crew_payroll.crew_payroll.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.crew_payroll.crew_payroll.payroll.formula import compute_monthly_payroll, compute_ot_pay
from tests.fakes import make_entry, make_worker


def test_ot_pay_uses_fixed_ten_hour_divisor():
    assert compute_ot_pay(1.0, 30000) == 150.0
    assert compute_ot_pay(0, 30000) == 0
    assert compute_ot_pay(0.83, 25000) == 103.75


def test_standard_calculator_ignores_base_hours_for_rate():
    worker = make_worker(salary=30000, base_hours=8)
    assert StandardPayrollCalculator().ot_pay(2.0, worker) == 300.0


def test_base_hours_calculator_uses_worker_base_hours():
    worker = make_worker(salary=30000, base_hours=8)
    assert BaseHoursPayrollCalculator().ot_pay(1.0, worker) == 187.5


def test_rejected_leave_deducts_one_day():
    worker = make_worker(salary=30000)
    entries = [make_entry(date(2026, 3, 2), kind=EntryKind.REJECTED_LEAVE)]

    payroll = compute_monthly_payroll(worker, entries)

    assert payroll.leave_deduction == 1000.0
    assert payroll.final_payable == 29000.0
    assert payroll.rejected_leave_days == 1


def test_approved_leave_has_no_pay_impact_but_advance_still_counts():
    worker = make_worker(salary=30000)
    entries = [
        make_entry(date(2026, 3, 2), working_hours=11.0, ot_hours=1.0, ot_pay=150.0),
        make_entry(date(2026, 3, 3), kind=EntryKind.APPROVED_LEAVE, advance=500.0),
    ]

    payroll = compute_monthly_payroll(worker, entries)

    assert payroll.total_ot_pay == 150.0
    assert payroll.leave_deduction == 0
    assert payroll.total_advances == 500.0
    assert payroll.approved_leave_days == 1
    assert payroll.total_working_hours == 11.0
    assert payroll.total_ot_hours == 1.0
    assert payroll.final_payable == 29650.0


def test_full_formula():
    worker = make_worker(salary=30000)
    entries = [
        make_entry(date(2026, 3, 2), working_hours=12.0, ot_hours=2.0, ot_pay=300.0, advance=200.0),
        make_entry(date(2026, 3, 3), working_hours=11.5, ot_hours=1.5, ot_pay=225.0),
        make_entry(date(2026, 3, 4), kind=EntryKind.REJECTED_LEAVE, advance=1000.0),
        make_entry(date(2026, 3, 5), kind=EntryKind.REJECTED_LEAVE),
    ]

    payroll = compute_monthly_payroll(worker, entries)

    assert payroll.total_ot_pay == 525.0
    assert payroll.leave_deduction == 2000.0
    assert payroll.total_advances == 1200.0
    assert payroll.final_payable == 30000 + 525 - 2000 - 1200


def test_final_payable_can_go_negative():
    worker = make_worker(salary=3000)
    entries = [make_entry(date(2026, 3, 2), advance=5000.0)]

    assert compute_monthly_payroll(worker, entries).final_payable == -2000.0


def test_no_entries_pays_base_salary():
    payroll = compute_monthly_payroll(make_worker(salary=18000), [])
    assert payroll.final_payable == 18000.0
    assert payroll.total_ot_pay == 0


def test_recomputing_is_identical():
    worker = make_worker(salary=27500)
    entries = (
        make_entry(date(2026, 3, 2), working_hours=10.33, ot_hours=0.33, ot_pay=45.38, advance=123.45),
        make_entry(date(2026, 3, 3), kind=EntryKind.REJECTED_LEAVE),
    )

    assert compute_monthly_payroll(worker, entries) == compute_monthly_payroll(worker, entries)


def test_calculator_monthly_delegates_to_formula():
    worker = make_worker(salary=30000)
    entries = [make_entry(date(2026, 3, 2), kind=EntryKind.REJECTED_LEAVE)]

    assert StandardPayrollCalculator().monthly(worker, entries) == compute_monthly_payroll(worker, entries)
