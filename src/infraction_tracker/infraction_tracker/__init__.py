"""Infraction Tracker package.

Attendance-point record keeping organized by feature modules (policy, records,
stores, settings, ...) with a thin Flask controller layer over service and
repository layers.
"""
