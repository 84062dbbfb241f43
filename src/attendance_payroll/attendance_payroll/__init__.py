"""Attendance & Payroll package.

Feature modules (employees, attendance, advances, payroll, ...) keep the
salary engine free of storage details: services depend on repository
protocols, MySQL implementations live next to them.
"""
