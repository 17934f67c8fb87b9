from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.service import AbsenceService
from .balance.mysql_balance_repository import MySQLAdjustmentRepository, MySQLClosingRepository
from .balance.service import BalanceService
from .closings.service import PeriodClosingService
from .core.settings import EngineSettings
from .database.connection import DatabaseConnection, DBConfig
from .entries.mysql_entry_repository import MySQLAuditRepository, MySQLEntryRepository
from .entries.service import EntryService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .validation.service import ValidationService
from .workday.service import WorkdayService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    settings: EngineSettings

    entries_repo: MySQLEntryRepository
    audits_repo: MySQLAuditRepository
    schedules_repo: MySQLScheduleRepository
    absences_repo: MySQLAbsenceRepository
    adjustments_repo: MySQLAdjustmentRepository
    closings_repo: MySQLClosingRepository

    schedule_service: ScheduleService
    absence_service: AbsenceService
    workday_service: WorkdayService
    validation_service: ValidationService
    entry_service: EntryService
    balance_service: BalanceService
    closing_service: PeriodClosingService


def build_container(*, db_config: Mapping, engine: Optional[Mapping] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    settings = EngineSettings.from_mapping(engine)

    entries_repo = MySQLEntryRepository(conn)
    audits_repo = MySQLAuditRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    absences_repo = MySQLAbsenceRepository(conn)
    adjustments_repo = MySQLAdjustmentRepository(conn)
    closings_repo = MySQLClosingRepository(conn)

    schedule_service = ScheduleService(schedules_repo)
    absence_service = AbsenceService(absences_repo)
    workday_service = WorkdayService(entries_repo, schedules_repo, absences_repo, settings=settings)
    validation_service = ValidationService(entries_repo, schedules_repo, absences_repo, settings=settings)
    entry_service = EntryService(entries_repo, audits_repo, validation_service)
    balance_service = BalanceService(
        workday_service, entries_repo, adjustments_repo, closings_repo, settings=settings
    )
    closing_service = PeriodClosingService(balance_service, closings_repo)

    return Container(
        conn=conn,
        settings=settings,
        entries_repo=entries_repo,
        audits_repo=audits_repo,
        schedules_repo=schedules_repo,
        absences_repo=absences_repo,
        adjustments_repo=adjustments_repo,
        closings_repo=closings_repo,
        schedule_service=schedule_service,
        absence_service=absence_service,
        workday_service=workday_service,
        validation_service=validation_service,
        entry_service=entry_service,
        balance_service=balance_service,
        closing_service=closing_service,
    )
