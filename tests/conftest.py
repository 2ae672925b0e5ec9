# tests/conftest.py
import pytest

from lydio.core.managers.config_manager import config_manager
from lydio.core.utils.path_utils import PathUtils


@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
    """
    Every test starts from the packaged defaults: the user's ~/.lydio override
    is pointed at a non-existing file and in-memory changes are discarded.
    """
    monkeypatch.setattr(PathUtils, "get_user_settings_file", lambda: tmp_path / "no_user_settings.json")
    config_manager.reset()
    yield config_manager
    config_manager.reset()
