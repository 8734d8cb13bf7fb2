"""
FastAPI routers grouped by application (task manager, personal site).

Each module exposes an APIRouter that the app factories include.
"""
