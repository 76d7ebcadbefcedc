"""Tests for config loading and validation."""

import json

from ip_globe.config import DEFAULT_CONFIG, Config, _default_config_path, _validate


class TestValidate:
    """Tests for _validate()."""

    def test_defaults_pass_through(self):
        cfg = _validate({})
        assert cfg["map"]["rows"] == 30
        assert cfg["map"]["cols"] == 120
        assert cfg["network"]["endpoint"] == "http://ip-api.com/json/"
        assert cfg["network"]["timeout_s"] == 5.0

    def test_out_of_range_numbers_are_clamped(self):
        cfg = _validate({"map": {"rows": 2, "cols": 10000}, "network": {"timeout_s": 0}})
        assert cfg["map"]["rows"] == 8
        assert cfg["map"]["cols"] == 400
        assert cfg["network"]["timeout_s"] == 0.5

    def test_garbage_falls_back_to_default(self):
        cfg = _validate({"map": {"rows": "lots", "grid_lat_step": None}})
        assert cfg["map"]["rows"] == 30
        assert cfg["map"]["grid_lat_step"] == 15.0

    def test_glyphs_must_be_single_characters(self):
        cfg = _validate({"map": {"marker_char": "XX", "land_char": "", "grid_char": "+"}})
        assert cfg["map"]["marker_char"] == "●"
        assert cfg["map"]["land_char"] == "#"
        assert cfg["map"]["grid_char"] == "+"

    def test_enums_and_bools(self):
        cfg = _validate({"ui": {"theme": "neon", "color": "off"}, "logging": {"level": "LOUD"}})
        assert cfg["ui"]["theme"] == "auto"
        assert cfg["ui"]["color"] is False
        assert cfg["logging"]["level"] == "INFO"

    def test_label_toggle_and_title(self):
        cfg = _validate({"map": {"show_label": "no"}, "app": {"title": ""}})
        assert cfg["map"]["show_label"] is False
        assert cfg["app"]["title"] == "GPS Globe"

    def test_non_dict_section_is_replaced(self):
        cfg = _validate({"map": "big"})
        assert cfg["map"] == DEFAULT_CONFIG["map"]

    def test_defaults_not_mutated(self):
        _validate({"app": {"title": "Mine"}})
        cfg = _validate({})
        cfg["map"]["rows"] = 99
        assert DEFAULT_CONFIG["map"]["rows"] == 30
        assert DEFAULT_CONFIG["app"]["title"] == "GPS Globe"


class TestConfigFile:
    """Tests for Config.load()/save()."""

    def test_load_creates_file(self, tmp_path):
        path = tmp_path / "sub" / "cfg.json"
        cfg = Config.load(str(path))
        assert path.exists()
        assert cfg["map"]["rows"] == 30
        assert json.loads(path.read_text(encoding="utf-8"))["map"]["cols"] == 120

    def test_load_without_create(self, tmp_path):
        path = tmp_path / "cfg.json"
        Config.load(str(path), create_if_missing=False)
        assert not path.exists()

    def test_user_values_merge_over_defaults(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"network": {"timeout_s": 2}}), encoding="utf-8")
        cfg = Config.load(str(path))
        assert cfg["network"]["timeout_s"] == 2.0
        assert cfg["network"]["endpoint"] == "http://ip-api.com/json/"

    def test_corrupt_file_is_backed_up(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text("{not json", encoding="utf-8")
        cfg = Config.load(str(path))
        assert cfg["map"]["rows"] == 30
        assert (tmp_path / "cfg.json.corrupt.bak").read_text(encoding="utf-8") == "{not json"

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "cfg.json"
        cfg = Config.load(str(path))
        cfg["ui"]["theme"] = "light"
        cfg.save()
        assert Config.load(str(path))["ui"]["theme"] == "light"

    def test_update_validates(self, tmp_path):
        cfg = Config.load(str(tmp_path / "cfg.json"))
        cfg.update({"map": {"rows": 1000}})
        assert cfg["map"]["rows"] == 200
        assert cfg.grid_size == (200, 120)

    def test_env_override(self, tmp_path, monkeypatch):
        target = tmp_path / "env.json"
        monkeypatch.setenv("IP_GLOBE_CONFIG", str(target))
        assert _default_config_path() == str(target)
        cfg = Config.load()
        assert cfg.path == str(target)
        assert cfg.endpoint == "http://ip-api.com/json/"
