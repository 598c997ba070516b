"""Crew Payroll package.

Feature modules (workers, entries, payroll, ...) behind a thin Flask
controller layer, with the time/pay computation kept in pure functions.
"""
