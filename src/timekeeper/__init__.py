"""Timekeeper package.

Feature modules (accounts, punch, worklogs, payperiods, payroll) sit on top of
a single storage interface, with a thin Flask controller layer on the outside.
"""
