from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.http import datetime_value, date_value, enum_value, json_body, to_json
from ..container import Container
from ..core.enums import Direction, EditReason
from .model import TimeEntry
from .service import RegisterResult


def entry_json(e: TimeEntry) -> dict:
    return to_json(
        {
            "entry_id": e.entry_id,
            "workspace_id": e.workspace_id,
            "timestamp": e.timestamp,
            "direction": e.direction,
            "manually_edited": e.manually_edited,
            "note": e.note,
            "location": e.location,
        }
    )


def result_json(result: RegisterResult) -> dict:
    return {
        "success": True,
        "entry_id": result.entry_id,
        "warnings": [i.to_dict() for i in result.warnings],
        "overridden": [i.to_dict() for i in result.overridden],
    }


def register(app: Flask, container: Container) -> None:
    @app.get("/api/workspaces/<int:workspace_id>/entries", endpoint="entries_list")
    def entries_list(workspace_id: int):
        work_date = date_value(request.args.get("date"), "date", default=date.today())
        entries = container.entry_service.list_for_date(workspace_id, work_date)
        return jsonify({"date": work_date.isoformat(), "entries": [entry_json(e) for e in entries]})

    @app.post("/api/workspaces/<int:workspace_id>/entries", endpoint="entries_register")
    def entries_register(workspace_id: int):
        body = json_body()
        result = container.entry_service.register(
            workspace_id=workspace_id,
            timestamp=datetime_value(body.get("timestamp"), "timestamp"),
            direction=enum_value(Direction, body.get("direction"), "direction", required=False),
            note=body.get("note"),
            location=body.get("location"),
            manual=bool(body.get("manual", False)),
            override_justification=body.get("override_justification"),
        )
        return jsonify(result_json(result)), 201

    @app.put("/api/entries/<int:entry_id>", endpoint="entries_edit")
    def entries_edit(entry_id: int):
        body = json_body()
        timestamp = body.get("timestamp")
        result = container.entry_service.edit(
            entry_id,
            reason=enum_value(EditReason, body.get("reason"), "reason"),
            detail=body.get("detail"),
            timestamp=datetime_value(timestamp, "timestamp") if timestamp else None,
            direction=enum_value(Direction, body.get("direction"), "direction", required=False),
            note=body.get("note"),
            override_justification=body.get("override_justification"),
        )
        return jsonify(result_json(result))

    @app.delete("/api/entries/<int:entry_id>", endpoint="entries_delete")
    def entries_delete(entry_id: int):
        body = json_body()
        container.entry_service.delete(
            entry_id,
            reason=enum_value(EditReason, body.get("reason"), "reason"),
            detail=body.get("detail"),
        )
        return jsonify({"success": True})

    @app.get("/api/entries/<int:entry_id>/history", endpoint="entries_history")
    def entries_history(entry_id: int):
        audits = container.entry_service.history(entry_id)
        return jsonify(
            [
                to_json(
                    {
                        "audit_id": a.audit_id,
                        "action": a.action,
                        "reason": a.reason,
                        "detail": a.detail,
                        "previous_timestamp": a.previous_timestamp,
                        "new_timestamp": a.new_timestamp,
                        "recorded_at": a.recorded_at,
                    }
                )
                for a in audits
            ]
        )
