"""
Core utilities shared across the users API.

This package hosts configuration, request logging, error translation and the
bearer-token guard. Routers and services depend on these primitives instead of
reading os.environ or formatting error bodies themselves.
"""
