"""File-backed users API."""
