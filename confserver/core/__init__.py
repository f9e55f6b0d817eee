"""
Core utilities shared across the conference backend.

This package hosts configuration, logging setup and the request-level gates
(CORS allow-list, SPA static files) that sit in front of the routers.
"""
