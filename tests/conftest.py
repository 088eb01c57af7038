import pytest
from fastapi.testclient import TestClient

from rachel_wrapper.app import create_app
from rachel_wrapper.config import Settings


@pytest.fixture
def module_root(tmp_path):
    root = tmp_path / "modules"
    root.mkdir()
    return root


@pytest.fixture
def settings(module_root):
    return Settings(module_root=str(module_root), log_level="debug")


@pytest.fixture
def add_module(module_root):
    def _add(name, body, filename="rachel-index.html"):
        mod_dir = module_root / name
        mod_dir.mkdir()
        (mod_dir / filename).write_text(body, encoding="utf-8")
        return mod_dir / filename

    return _add


@pytest.fixture
def make_client(settings):
    def _make(**overrides):
        return TestClient(create_app(settings.model_copy(update=overrides) if overrides else settings))

    return _make
