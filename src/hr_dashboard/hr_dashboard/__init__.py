"""HR Dashboard package.

This package is organized by feature modules (employees, attendance, salary,
reports, ...) with a thin Flask controller layer on top of service/repository
layers backed by an in-memory data store.
"""
