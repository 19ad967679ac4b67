"""
API layer for the Employee Backend.

Exposes the HTTP endpoints: signup/login and the employee CRUD routes.
"""
