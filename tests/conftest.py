import pytest

from config import Config
from kana_converter import reload_settings


@pytest.fixture(autouse=True)
def default_config(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, '_config_path', str(tmp_path / 'config.yaml'))
    reload_settings()
    yield tmp_path / 'config.yaml'
    reload_settings()
