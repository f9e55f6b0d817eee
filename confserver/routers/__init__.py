"""
FastAPI routers grouped by domain (conference data, registrations).

Each module exposes an APIRouter included by the app factory (app.py). The
client bundle is not a router: it is mounted last as a static catch-all.
"""
