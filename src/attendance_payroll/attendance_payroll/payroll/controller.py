from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, json_endpoint, optional_str
from ..core.constants import DEFAULT_ERRORS_SURFACED
from ..core.enums import GenerationMode
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll/generate", methods=["POST"], endpoint="api_generate_payroll")
    @json_endpoint
    def api_generate_payroll():
        data = json_body()
        result = service.generate_payroll(
            int(data["month"]),
            int(data["year"]),
            mode=GenerationMode(data.get("mode") or GenerationMode.ALL.value),
            department=optional_str(data, "department"),
            employee_id=optional_str(data, "employee_id"),
        )
        return {
            "succeeded": result.succeeded,
            "failed": result.failed,
            "skipped": result.skipped,
            "errors": result.first_errors(DEFAULT_ERRORS_SURFACED),
        }, 200

    @app.route("/api/payroll/recalculate", methods=["POST"], endpoint="api_recalculate_payroll")
    @json_endpoint
    def api_recalculate_payroll():
        data = json_body()
        container.recalculation.schedule(str(data["employee_id"]), int(data["month"]), int(data["year"]))
        failures = [t for t in container.recalculation.failures if t.employee_id == str(data["employee_id"])]
        return {
            "pending": len(container.recalculation.pending),
            "errors": [t.last_error for t in failures[-DEFAULT_ERRORS_SURFACED:]],
        }, 202

    @app.route("/api/payroll/preview", methods=["GET"], endpoint="api_preview_payroll")
    @json_endpoint
    def api_preview_payroll():
        result = service.calculate_for_employee(
            request.args["employee_id"],
            int(request.args["month"]),
            int(request.args["year"]),
        )
        return {"calculation": result.as_dict()}, 200
