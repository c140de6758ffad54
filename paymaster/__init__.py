"""Paymaster payroll engine.

Converts a monthly gross salary into an itemised payslip for Namibia and
South Africa using versioned tax packs.
"""
from __future__ import annotations

__version__ = "0.1.0"
