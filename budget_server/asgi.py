"""ASGI entry point, e.g. ``uvicorn budget_server.asgi:app``."""
from budget_server.app import create_app

app = create_app()
