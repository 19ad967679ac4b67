"""
Employee Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (users, employees, employee queries) and the MongoDB
infrastructure behind it.
"""
