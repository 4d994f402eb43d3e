from __future__ import annotations

import io
import os
import sys
from pathlib import Path

import pytest

from core.config import AppSettings
from core.domain.models import ApplicationContext


class TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class FakeApp:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def hit(self, name: str = "hit") -> str:
        self.calls.append(name)
        return name


class FakeLoader:
    def __init__(self, app: FakeApp | None = None) -> None:
        self.app = app or FakeApp()
        self.loaded = 0

    def load(self, settings: AppSettings) -> ApplicationContext:
        self.loaded += 1
        return ApplicationContext(
            root=settings.resolved_root(),
            module_name="fake.prepare",
            namespace={"app": self.app},
        )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("APPRUN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(sys, "path", list(sys.path))


@pytest.fixture
def app_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "app"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def settings(app_dir: Path) -> AppSettings:
    return AppSettings(app_root=app_dir)


@pytest.fixture
def fake_app() -> FakeApp:
    return FakeApp()


@pytest.fixture
def loader(fake_app: FakeApp) -> FakeLoader:
    return FakeLoader(fake_app)


@pytest.fixture
def tty() -> TtyStream:
    return TtyStream()


@pytest.fixture
def plain() -> io.StringIO:
    return io.StringIO()
