"""Infrastructure layer — the persistent cache.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from commands or output.
"""
