"""
Persistence adapters.

Services depend on these classes rather than touching the JSON files directly.
"""
