"""
FastAPI routers grouped by domain (users, demo).

Each module exposes an APIRouter that the app factory includes; handlers only
translate between HTTP and the services layer.
"""
