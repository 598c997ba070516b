import pytest

from src.crew_payroll.crew_payroll.core.enums import WorkerStatus
from src.crew_payroll.crew_payroll.core.exceptions import NotFoundError, ValidationError
from src.crew_payroll.crew_payroll.workers.service import WorkerService
from tests.fakes import InMemoryWorkers, make_worker


def test_create_worker_applies_default_base_hours():
    svc = WorkerService(InMemoryWorkers(), default_base_hours=9)

    worker = svc.create_worker(name="  Ravi ", monthly_salary=24000, trade=" ")

    assert worker.name == "Ravi"
    assert worker.base_hours == 9
    assert worker.trade is None
    assert worker.status == WorkerStatus.ACTIVE


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "monthly_salary": 1000},
        {"name": "A", "monthly_salary": -1},
        {"name": "A", "monthly_salary": 1000, "base_hours": 0},
        {"name": "A", "monthly_salary": float("nan")},
        {"name": "A", "monthly_salary": float("inf")},
        {"name": "A", "monthly_salary": 1000, "base_hours": float("inf")},
        {"name": "A" * 121, "monthly_salary": 1000},
        {"name": "A", "monthly_salary": 1000, "trade": "t" * 81},
    ],
)
def test_create_worker_validates_inputs(kwargs):
    with pytest.raises(ValidationError):
        WorkerService(InMemoryWorkers()).create_worker(**kwargs)


def test_derived_rates():
    worker = make_worker(salary=30000, base_hours=8)
    assert worker.daily_rate == 1000.0
    assert worker.hourly_rate == 100.0
    assert worker.ot_rate == 150.0


def test_update_and_status():
    svc = WorkerService(InMemoryWorkers(make_worker(1)))

    updated = svc.update_worker(1, name="Ravi K", monthly_salary=32000, base_hours=9, trade="Mason")
    assert (updated.name, updated.monthly_salary, updated.base_hours, updated.trade) == ("Ravi K", 32000, 9, "Mason")

    assert svc.set_status(1, WorkerStatus.INACTIVE).status == WorkerStatus.INACTIVE
    assert svc.list_workers(active_only=True) == []
    assert len(svc.list_workers()) == 1


def test_unknown_worker():
    svc = WorkerService(InMemoryWorkers())
    with pytest.raises(NotFoundError):
        svc.get_worker(3)
    with pytest.raises(NotFoundError):
        svc.delete_worker(3)


def test_update_rejects_non_finite_salary_and_long_trade():
    svc = WorkerService(InMemoryWorkers(make_worker(1, salary=30000)))
    with pytest.raises(ValidationError):
        svc.update_worker(1, name="Ravi", monthly_salary=float("nan"), base_hours=10)
    with pytest.raises(ValidationError):
        svc.update_worker(1, name="Ravi", monthly_salary=30000, base_hours=10, trade="t" * 81)
    assert svc.get_worker(1).monthly_salary == 30000
