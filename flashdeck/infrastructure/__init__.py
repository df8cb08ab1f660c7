"""
Infrastructure layer.

Adapters for the outside world: SQLAlchemy repositories, the model provider
client, the in-memory rate limiter and the FastAPI routers.
"""
