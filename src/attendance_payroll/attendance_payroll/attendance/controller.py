from __future__ import annotations

from datetime import datetime

from flask import Flask

from ..common.datetime_utils import format_local_date, parse_iso_date
from ..common.http import json_body, json_endpoint, optional_str
from ..core.enums import AttendanceStatus, PunchKind, ShiftType
from ..container import Container
from .model import AttendanceRecord, DevicePunch


def _record_json(r: AttendanceRecord) -> dict:
    return {
        "id": r.id,
        "employee_id": r.employee_id,
        "attendance_date": format_local_date(r.attendance_date),
        "status": AttendanceStatus(r.status).value,
        "check_in_time": r.check_in_time,
        "check_out_time": r.check_out_time,
        "hours_worked": r.hours_worked,
        "overtime_hours": r.overtime_hours,
        "undertime_hours": r.undertime_hours,
        "shift_type": ShiftType(r.shift_type).value,
        "biometric_verified": r.biometric_verified,
    }


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["POST"], endpoint="api_mark_attendance")
    @json_endpoint
    def api_mark_attendance():
        data = json_body()
        record = AttendanceRecord(
            employee_id=str(data["employee_id"]),
            attendance_date=parse_iso_date(data["attendance_date"]),
            status=AttendanceStatus(data["status"]),
            check_in_time=optional_str(data, "check_in_time"),
            check_out_time=optional_str(data, "check_out_time"),
            overtime_hours=float(data.get("overtime_hours") or 0),
            undertime_hours=float(data.get("undertime_hours") or 0),
            shift_type=ShiftType(data.get("shift_type") or ShiftType.REGULAR.value),
            notes=optional_str(data, "notes"),
            biometric_verified=bool(data.get("biometric_verified", False)),
            biometric_credential_id=optional_str(data, "biometric_credential_id"),
        )
        saved = service.mark_attendance(record)
        return {"attendance": _record_json(saved)}, 200

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="api_bulk_attendance")
    @json_endpoint
    def api_bulk_attendance():
        data = json_body()
        count = service.bulk_mark(
            [str(i) for i in data["employee_ids"]],
            attendance_date=parse_iso_date(data["attendance_date"]),
            status=AttendanceStatus(data["status"]),
            check_in_time=optional_str(data, "check_in_time"),
            notes=optional_str(data, "notes"),
            shift_type=ShiftType(data.get("shift_type") or ShiftType.REGULAR.value),
        )
        return {"count": count}, 200

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="api_delete_attendance")
    @json_endpoint
    def api_delete_attendance(attendance_id: int):
        deleted = service.delete_attendance(attendance_id)
        return {"attendance": _record_json(deleted)}, 200

    @app.route("/api/attendance/device-sync", methods=["POST"], endpoint="api_device_sync")
    @json_endpoint
    def api_device_sync():
        data = json_body()
        punches = [
            DevicePunch(
                device_user_id=int(p["user_id"]),
                timestamp=datetime.fromisoformat(p["timestamp"]),
                kind=PunchKind(p["kind"]),
            )
            for p in data.get("logs", [])
        ]
        result = service.import_device_punches(punches)
        return {"synced": result.success, "failed": result.failed, "errors": result.errors}, 200
