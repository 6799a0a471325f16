"""EMS Portal package.

Server-rendered web client for the Employee Management System REST API.
Organized by feature modules (auth, worklogs, dashboard, payroll, users) with a
thin Flask controller layer over service and HTTP repository layers.
"""
