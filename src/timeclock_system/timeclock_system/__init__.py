"""Time-clock system package.

This package is organized by feature modules (entries, schedules, absences,
workday, validation, balance, closings) around a pure calculation engine,
with thin Flask controllers and MySQL repositories at the edges.
"""
