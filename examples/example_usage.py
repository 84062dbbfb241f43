"""Ví dụ: dùng service layer (không qua Flask).

Xem trước lương tháng của một nhân viên, không ghi vào bảng payroll.
Usage: python -m examples.example_usage <employee_id> <month> <year>
"""

import sys

from dotenv import load_dotenv

from config import load_settings

from src.attendance_payroll.attendance_payroll.container import build_container


def main():
    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG)

    employee_id, month, year = sys.argv[1], int(sys.argv[2]), int(sys.argv[3])
    result = container.payroll_service.calculate_for_employee(employee_id, month, year)
    for key, value in result.as_dict().items():
        if key != "calculation_details":
            print(f"{key:>20}: {value}")


if __name__ == "__main__":
    main()
