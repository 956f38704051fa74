"""Driver Payroll package.

This package is organized by feature modules (shifts, rates, payroll, ...)
with a thin function facade (``api``) over SOLID service/repository layers
backed by plain text files.
"""
