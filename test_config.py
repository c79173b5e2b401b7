import pytest
from pydantic import ValidationError

import config
from config import ChessConfig, GameRulesSettings, LoggingSettings


@pytest.fixture(autouse=True)
def _fresh_config():
    config.reset_config()
    yield
    config.reset_config()


def test_defaults():
    cfg = ChessConfig()
    assert cfg.rules.allow_undo is True
    assert cfg.rules.notify_checkmate is True
    assert cfg.ui.use_unicode is False
    assert cfg.logging.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("CHESS_ALLOW_UNDO", "false")
    monkeypatch.setenv("CHESS_UNICODE", "TRUE")
    monkeypatch.setenv("CHESS_LOG_LEVEL", "debug")
    cfg = config.get_config()
    assert cfg.rules.allow_undo is False
    assert cfg.ui.use_unicode is True
    assert cfg.logging.log_level == "DEBUG"
    assert config.get_game_rules() is cfg.rules


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        LoggingSettings(log_level="LOUD")


def test_save_and_load(tmp_path):
    path = tmp_path / "chess.json"
    cfg = ChessConfig(rules=GameRulesSettings(allow_undo=False))
    cfg.save_to_file(str(path))
    loaded = config.load_config_from_file(str(path))
    assert loaded.rules.allow_undo is False
    assert loaded.config_file == str(path)
    assert config.get_config() is loaded


def test_update_from_dict():
    cfg = ChessConfig()
    cfg.update_from_dict({"rules": {"notify_checkmate": False, "unknown": 1}, "nope": {}})
    assert cfg.rules.notify_checkmate is False
    assert cfg.to_dict()["rules"] == {"allow_undo": True, "notify_checkmate": False}


@pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off", False, 0])
def test_bool_settings_parse_false_strings(raw):
    assert GameRulesSettings(allow_undo=raw).allow_undo is False
    assert GameRulesSettings(notify_checkmate=raw).notify_checkmate is False
    assert config.UISettings(show_coordinates=raw).show_coordinates is False


def test_bool_settings_reject_garbage():
    with pytest.raises(ValidationError):
        GameRulesSettings(allow_undo="maybe")


def test_json_false_string_disables_undo(tmp_path):
    path = tmp_path / "chess.json"
    path.write_text('{"rules": {"allow_undo": "false"}}')
    loaded = ChessConfig.load_from_file(str(path))
    assert loaded.rules.allow_undo is False


def test_update_from_dict_parses_strings():
    cfg = ChessConfig()
    cfg.update_from_dict({"rules": {"allow_undo": "false"}, "ui": {"use_unicode": "true"}})
    assert cfg.rules.allow_undo is False
    assert cfg.ui.use_unicode is True
