"""Attendance Engine package.

This package is organized by feature modules (schedules, attendance, ranking,
payroll) around pure calculators. Nothing here performs I/O: callers pass in
snapshots of workers, records, loans and the stored configuration and get
value objects back.
"""

from .container import Engine, build_engine

__all__ = ["Engine", "build_engine"]
