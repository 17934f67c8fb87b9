from __future__ import annotations

from flask import Flask, jsonify, request

from ..absences.policy import LABELS
from ..common.datetime_utils import format_minutes
from ..common.http import date_value, to_json
from ..container import Container
from .model import DaySummary
from .status import is_consistent, status_label


def summary_json(s: DaySummary) -> dict:
    return to_json(
        {
            "date": s.work_date,
            "day_type": s.day_type,
            "day_type_label": LABELS[s.day_type],
            "status": s.status,
            "status_label": status_label(s.status),
            "consistent": is_consistent(s.status),
            "entry_count": s.entry_count,
            "worked_minutes": s.worked_minutes,
            "expected_minutes": s.expected_minutes,
            "expected_minutes_effective": s.expected_minutes_effective,
            "excused_minutes": s.excused_minutes,
            "balance_minutes": s.balance_minutes,
            "balance": format_minutes(s.balance_minutes, signed=True) if s.balance_minutes is not None else None,
            "break_minutes": s.break_minutes,
            "in_progress_minutes": s.in_progress_minutes,
            "provisional_balance_minutes": s.provisional_balance_minutes,
            "intervals": [
                {
                    "in": i.entry_in.timestamp,
                    "out": i.entry_out.timestamp if i.entry_out else None,
                    "duration_minutes": i.duration_minutes,
                    "pause_before_minutes": i.pause_before_minutes,
                    "pause_considered_minutes": i.pause_considered_minutes,
                    "is_primary_pause": i.is_primary_pause,
                    "open": i.open,
                }
                for i in s.intervals
            ],
        }
    )


def register(app: Flask, container: Container) -> None:
    @app.get("/api/workspaces/<int:workspace_id>/days/<day>", endpoint="day_summary")
    def day_summary(workspace_id: int, day: str):
        work_date = date_value(day, "day")
        if request.args.get("in_progress") in {"1", "true", "yes"}:
            summary = container.workday_service.compute_day_summary_with_in_progress(workspace_id, work_date)
        else:
            summary = container.workday_service.compute_day_summary(workspace_id, work_date)
        return jsonify(summary_json(summary))

    @app.get("/api/workspaces/<int:workspace_id>/days/<day>/validation", endpoint="day_validation")
    def day_validation(workspace_id: int, day: str):
        result = container.validation_service.validate_entries(workspace_id, date_value(day, "day"))
        return jsonify(
            {
                "valid": result.is_valid,
                "blocking": [i.to_dict() for i in result.blocking],
                "warnings": [i.to_dict() for i in result.warnings],
            }
        )
