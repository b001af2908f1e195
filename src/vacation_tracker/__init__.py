"""Vacation Tracker package.

Organised by feature modules (employees, vacations, reconciliation, backup, ...)
with a thin Flask controller layer over service/repository layers.
"""
