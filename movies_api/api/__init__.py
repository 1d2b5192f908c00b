"""
HTTP layer: FastAPI application, routers, schemas and dependencies.
"""
