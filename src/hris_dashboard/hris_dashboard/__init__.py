"""HRIS dashboard stats package.

Feature modules (employees, attendance, leave, organization) expose repository
interfaces plus MySQL implementations; ``stats`` turns them into the dashboard
report served by a thin Flask controller.
"""
