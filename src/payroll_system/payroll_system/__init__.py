"""Payroll System package.

This package is organized by feature modules (employees, payroll) with a thin
console menu layer on top of plain service/repository layers.
"""
