from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import date_value, enum_value, int_value, json_body, time_value
from ..container import Container
from ..core.enums import AbsenceType


def register(app: Flask, container: Container) -> None:
    @app.post("/api/workspaces/<int:workspace_id>/absences", endpoint="absences_create")
    def absences_create(workspace_id: int):
        body = json_body()
        start_date = date_value(body.get("start_date"), "start_date")
        excused = body.get("excused_minutes")
        absence_id = container.absence_service.create(
            workspace_id=workspace_id,
            absence_type=enum_value(AbsenceType, body.get("type"), "type"),
            start_date=start_date,
            end_date=date_value(body.get("end_date"), "end_date", default=start_date),
            start_time=time_value(body.get("start_time"), "start_time"),
            end_time=time_value(body.get("end_time"), "end_time"),
            excused_minutes=int_value(excused, "excused_minutes") if excused is not None else None,
            acquisition_period=body.get("acquisition_period"),
            attachment=body.get("attachment"),
            note=body.get("note"),
        )
        return jsonify({"success": True, "absence_id": absence_id}), 201

    @app.delete("/api/absences/<int:absence_id>", endpoint="absences_delete")
    def absences_delete(absence_id: int):
        container.absence_service.delete(absence_id=absence_id)
        return jsonify({"success": True})
