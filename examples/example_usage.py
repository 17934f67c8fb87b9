"""Example: use the service layer directly (no Flask).

Prints today's summary and the bank of hours of workspace 1.
"""

import importlib
from datetime import date

from dotenv import load_dotenv

from config import get_settings_module

from src.timeclock_system.timeclock_system.common.datetime_utils import format_minutes
from src.timeclock_system.timeclock_system.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, engine=getattr(settings, "ENGINE", None))

    summary = container.workday_service.compute_day_summary_with_in_progress(1, date.today())
    print(summary.status.value, summary.worked_minutes, summary.in_progress_minutes)

    balance = container.balance_service.compute_bank_balance(1)
    print("bank:", format_minutes(balance.total_minutes, signed=True))


if __name__ == "__main__":
    main()
