from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import format_local_date, parse_iso_date
from ..common.http import json_body, json_endpoint, optional_str
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.advance_service

    @app.route("/api/advances", methods=["POST"], endpoint="api_add_advance")
    @json_endpoint
    def api_add_advance():
        data = json_body()
        advance_date = optional_str(data, "advance_date")
        advance_id = service.add_advance(
            str(data["employee_id"]),
            float(data["amount"]),
            advance_date=parse_iso_date(advance_date) if advance_date else None,
            notes=optional_str(data, "notes"),
        )
        return {"id": advance_id}, 201

    @app.route("/api/advances/<int:advance_id>", methods=["DELETE"], endpoint="api_delete_advance")
    @json_endpoint
    def api_delete_advance(advance_id: int):
        record = service.delete_advance(advance_id)
        return {
            "id": record.id,
            "employee_id": record.employee_id,
            "advance_date": format_local_date(record.advance_date),
            "amount": record.amount,
        }, 200
