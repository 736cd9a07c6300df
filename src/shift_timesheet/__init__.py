"""Shift timesheet package.

This package is organized by feature modules (hours, workload, entries,
reports, ...) around a pure time-accounting engine, with thin service and
repository layers for the application that feeds it.
"""
