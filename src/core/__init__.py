"""Core: settings, errors, domain models and the runner service.

Nothing in here prints or exits; the CLI layer owns those side effects.
"""
