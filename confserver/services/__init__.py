"""
High-level use cases for the conference backend.

Routers call these services instead of reading or writing the JSON files
directly.
"""
