"""
High-level use cases for the users API.

Routers (FastAPI endpoints) should call these services instead of manipulating
the users file directly.
"""
