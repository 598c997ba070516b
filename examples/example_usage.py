"""Example: monthly payroll through the service layer (no Flask).

Controllers stay thin; the pay rules live in services and pure formulas.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.crew_payroll.crew_payroll.container import build_container
from src.crew_payroll.crew_payroll.core.settings import AppSettings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=AppSettings.from_module(settings))
    today = date.today()
    for row in container.payroll_report_service.monthly_report(year=today.year, month=today.month):
        print(f"{row.worker_name:<24} {row.final_payable:>12.2f}")


if __name__ == "__main__":
    main()
