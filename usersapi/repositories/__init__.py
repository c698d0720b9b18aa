"""
Persistence adapters.

json_storage owns the users file; sql_repository reads the relational store.
Services should depend on these modules rather than touching files or sessions.
"""
