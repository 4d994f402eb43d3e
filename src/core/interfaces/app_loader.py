"""Host application loader contract.

Why Protocol:
- Structural typing keeps the service independent of how an application
  boots (importlib, a framework hook, a test double).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.config import AppSettings
from core.domain.models import ApplicationContext


@runtime_checkable
class ApplicationLoader(Protocol):
    """Minimal contract for loading the host application.

    Rules:
    - `load` runs before any user code and must either succeed or raise
      `ApplicationLoadError`.
    - The returned namespace seeds the globals of the executed code.
    """

    def load(self, settings: AppSettings) -> ApplicationContext:
        ...
