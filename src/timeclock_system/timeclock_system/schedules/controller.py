from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import date_value, int_value, json_body, time_value, to_json
from ..container import Container
from ..core import constants
from ..core.exceptions import ValidationError
from .model import DayScheduleConfig


def _day_config(raw: dict) -> DayScheduleConfig:
    if not isinstance(raw, dict):
        raise ValidationError("Each day must be a JSON object")
    weekday = int_value(raw.get("weekday"), "weekday")
    base = DayScheduleConfig.default_for(weekday)
    return DayScheduleConfig(
        weekday=weekday,
        active=bool(raw.get("active", base.active)),
        expected_minutes=int_value(raw.get("expected_minutes"), "expected_minutes", default=base.expected_minutes),
        minimum_break_minutes=int_value(
            raw.get("minimum_break_minutes"), "minimum_break_minutes", default=base.minimum_break_minutes
        ),
        tolerance_minutes=int_value(raw.get("tolerance_minutes"), "tolerance_minutes", default=base.tolerance_minutes),
        ideal_in=time_value(raw.get("ideal_in"), "ideal_in"),
        ideal_break_out=time_value(raw.get("ideal_break_out"), "ideal_break_out"),
        ideal_break_return=time_value(raw.get("ideal_break_return"), "ideal_break_return"),
        ideal_out=time_value(raw.get("ideal_out"), "ideal_out"),
    )


def register(app: Flask, container: Container) -> None:
    @app.get("/api/workspaces/<int:workspace_id>/schedules", endpoint="schedules_list")
    def schedules_list(workspace_id: int):
        versions = container.schedule_service.timeline(workspace_id).versions
        return jsonify(
            [
                to_json(
                    {
                        "version_id": v.version_id,
                        "start_date": v.start_date,
                        "end_date": v.end_date,
                        "sequence": v.sequence,
                        "max_daily_minutes": v.max_daily_minutes,
                        "min_rest_between_shifts_minutes": v.min_rest_between_shifts_minutes,
                        "description": v.description,
                        "days": [v.days[wd].__dict__ for wd in sorted(v.days)],
                    }
                )
                for v in versions
            ]
        )

    @app.post("/api/workspaces/<int:workspace_id>/schedules", endpoint="schedules_add")
    def schedules_add(workspace_id: int):
        body = json_body()
        days = {cfg.weekday: cfg for cfg in (_day_config(d) for d in body.get("days") or [])}
        version_id = container.schedule_service.add_version(
            workspace_id=workspace_id,
            start_date=date_value(body.get("start_date"), "start_date"),
            days=days or None,
            max_daily_minutes=int_value(
                body.get("max_daily_minutes"), "max_daily_minutes", default=constants.DEFAULT_MAX_DAILY_MINUTES
            ),
            min_rest_between_shifts_minutes=int_value(
                body.get("min_rest_between_shifts_minutes"),
                "min_rest_between_shifts_minutes",
                default=constants.DEFAULT_MIN_REST_MINUTES,
            ),
            description=body.get("description"),
        )
        return jsonify({"success": True, "version_id": version_id}), 201
