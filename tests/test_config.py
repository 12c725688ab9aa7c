import json

import pytest

from function_drawer.config import DrawerConfig, load_config, save_config, DEFAULT_MAX_DEPTH
from function_drawer.logging_system import LogLevel


def test_defaults():
    config = DrawerConfig()
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.samples == 600
    assert config.simplify is True
    assert config.log_level is LogLevel.MODERATE


def test_log_level_by_name():
    assert DrawerConfig(log_level="verbose").log_level is LogLevel.VERBOSE
    with pytest.raises(ValueError):
        DrawerConfig(log_level="chatty")


@pytest.mark.parametrize("settings", [
    {"max_depth": 0},
    {"max_depth": DEFAULT_MAX_DEPTH + 1},
    {"max_depth": 2000},
    {"max_x": -1.0},
    {"samples": 1},
])
def test_invalid_values(settings):
    with pytest.raises(ValueError):
        DrawerConfig(**settings)


def test_from_dict_ignores_unknown_keys():
    config = DrawerConfig.from_dict({"max_x": 3.0, "colour": "red"})
    assert config.max_x == 3.0


def test_save_and_load(tmp_path):
    path = tmp_path / "drawer.json"
    save_config(DrawerConfig(max_x=4.0, samples=50, log_level=LogLevel.SILENT), path)
    assert json.loads(path.read_text())["log_level"] == "SILENT"
    loaded = load_config(path)
    assert loaded == DrawerConfig(max_x=4.0, samples=50, log_level=LogLevel.SILENT)


def test_missing_or_broken_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "missing.json") == DrawerConfig()
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_config(broken) == DrawerConfig()
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]")
    assert load_config(listing) == DrawerConfig()
