"""importlib-based host application loader.

Why an adapter:
- Booting the application is an external concern; the runner service only
  needs an `ApplicationContext` back.
- Tests swap this for a stub without touching `sys.modules`.
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import Any

from core.config import AppSettings
from core.domain.models import ApplicationContext
from core.errors import ApplicationLoadError

logger = logging.getLogger(__name__)


def _ensure_on_sys_path(entry: str) -> None:
    if entry not in sys.path:
        sys.path.insert(0, entry)


class ImportlibApplicationLoader:
    """Loads the application by importing its boot module.

    Rules:
    - The application root goes on `sys.path` so executed code can import the
      application's own packages.
    - When `settings.app_module` is set it is imported; its `app` attribute
      (or the module itself when there is none) is exposed as `app`.
    """

    def load(self, settings: AppSettings) -> ApplicationContext:
        root = settings.resolved_root()
        _ensure_on_sys_path(str(root))

        namespace: dict[str, Any] = {}
        module_name = (settings.app_module or "").strip() or None
        if module_name:
            logger.debug("Importing application module %s", module_name)
            try:
                module = importlib.import_module(module_name)
            except Exception as exc:
                raise ApplicationLoadError(
                    f"Error: Could not load application module {module_name!r}: "
                    f"{type(exc).__name__}: {exc}"
                ) from exc
            namespace["app"] = getattr(module, "app", module)
        else:
            logger.debug("No application module configured; using %s as root only", root)

        return ApplicationContext(root=root, module_name=module_name, namespace=namespace)
