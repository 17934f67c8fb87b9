from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_value, enum_value, int_value, json_body, to_json
from ..container import Container
from ..core.enums import ClosingType


def register(app: Flask, container: Container) -> None:
    @app.get("/api/workspaces/<int:workspace_id>/balance", endpoint="bank_balance")
    def bank_balance(workspace_id: int):
        as_of = request.args.get("as_of")
        balance = container.balance_service.compute_bank_balance(
            workspace_id, as_of=date_value(as_of, "as_of") if as_of else None
        )
        return jsonify(balance.to_dict())

    @app.get("/api/workspaces/<int:workspace_id>/balance/<period>", endpoint="period_balance")
    def period_balance(workspace_id: int, period: str):
        as_of = request.args.get("as_of")
        result = container.balance_service.compute_period_balance(
            workspace_id,
            enum_value(ClosingType, period, "period"),
            as_of=date_value(as_of, "as_of") if as_of else None,
        )
        return jsonify(
            {
                "period": result.closing_type.value,
                "period_start": result.period_start.isoformat(),
                "period_end": result.period_end.isoformat(),
                **result.balance.to_dict(),
            }
        )

    @app.post("/api/workspaces/<int:workspace_id>/adjustments", endpoint="adjustments_add")
    def adjustments_add(workspace_id: int):
        body = json_body()
        adjustment_id = container.balance_service.add_adjustment(
            workspace_id=workspace_id,
            adjustment_date=date_value(body.get("date"), "date"),
            minutes=int_value(body.get("minutes"), "minutes"),
            justification=body.get("justification") or "",
        )
        return jsonify({"success": True, "adjustment_id": adjustment_id}), 201

    @app.delete("/api/adjustments/<int:adjustment_id>", endpoint="adjustments_delete")
    def adjustments_delete(adjustment_id: int):
        container.balance_service.delete_adjustment(adjustment_id=adjustment_id)
        return jsonify({"success": True})

    @app.post("/api/workspaces/<int:workspace_id>/closings", endpoint="closings_create")
    def closings_create(workspace_id: int):
        body = json_body()
        closing = container.closing_service.close_period(
            workspace_id=workspace_id,
            closing_type=enum_value(ClosingType, body.get("type"), "type"),
            as_of=date_value(body.get("as_of"), "as_of"),
            note=body.get("note"),
            carry_forward=bool(body.get("carry_forward", True)),
        )
        return jsonify({"success": True, "closing": to_json(closing.__dict__)}), 201

    @app.get("/api/workspaces/<int:workspace_id>/closings", endpoint="closings_list")
    def closings_list(workspace_id: int):
        closing_type = enum_value(ClosingType, request.args.get("type"), "type", required=False)
        closings = container.closings_repo.list_for_workspace(workspace_id=workspace_id, closing_type=closing_type)
        return jsonify([to_json(c.__dict__) for c in closings])
