"""Core interfaces.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- The runner service depends on the abstraction, so tests can pass a fake
  loader instead of importing a real application.
"""
