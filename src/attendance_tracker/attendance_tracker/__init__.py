"""Attendance Tracker package.

Organized by feature modules (workers, payroll, preferences, ...) with a thin
controller (``RosterService``) over pure roster transforms and a key-value
backed repository.
"""
