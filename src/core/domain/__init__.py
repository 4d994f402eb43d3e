"""Domain models.

Why:
- Plain, strict data structures (Pydantic v2 and dataclasses).
- The domain knows nothing about Typer, Rich or importlib.
"""
