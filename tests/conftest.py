import os
import pytest
import tempfile


@pytest.fixture(autouse=True)
def isolated_workspace(monkeypatch):
    """Isolate the workspace and default config for each test."""
    with tempfile.TemporaryDirectory() as temp_dir:
        monkeypatch.setenv("PROMPTSLUG_WORKSPACE_ROOT", temp_dir)
        monkeypatch.setattr(
            "promptslug.core.config_manager.DEFAULT_CONFIG_PATH",
            os.path.join(temp_dir, "config", "settings.ini"),
        )
        yield temp_dir
