"""Payroll service: employees and orders over FastAPI and SQLAlchemy."""

__version__ = "1.0.0"
