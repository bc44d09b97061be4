import json

from loguru import logger

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.common.setup_loguru import setup_loguru
from detect_desktop_environment.config import generate_default_config
from detect_desktop_environment.config import load_config
from detect_desktop_environment.schemas.config_struct import Config
from detect_desktop_environment.schemas.config_struct import LoggingConfig


def test_missing_config_uses_defaults(mock_xdg):
    config = load_config(cnst.APP_CONFIG_FILE)
    assert config == Config()
    assert config.logging.enable_console is False
    assert config.logging.enable_file is False


def test_generate_default_config_round_trip(mock_xdg):
    path = generate_default_config()
    assert path == cnst.APP_CONFIG_FILE
    assert json.loads(path.read_text()) == cnst.DEFAULT_CONFIG
    assert load_config(path) == Config()


def test_partial_config_keeps_other_defaults(mock_xdg):
    cnst.APP_CONFIG_DIR.mkdir(parents=True)
    cnst.APP_CONFIG_FILE.write_text(json.dumps({"logging": {"console_level": "DEBUG"}}))

    config = load_config(cnst.APP_CONFIG_FILE)
    assert config.logging.console_level == "DEBUG"
    assert config.logging.enable_colors is True


def test_invalid_config_falls_back(mock_xdg):
    cnst.APP_CONFIG_DIR.mkdir(parents=True)
    cnst.APP_CONFIG_FILE.write_text("{not json")
    assert load_config(cnst.APP_CONFIG_FILE) == Config()

    cnst.APP_CONFIG_FILE.write_text(json.dumps({"logging": {"enable_file": "maybe"}}))
    assert load_config(cnst.APP_CONFIG_FILE) == Config()

    cnst.APP_CONFIG_FILE.write_text(json.dumps(["logging"]))
    assert load_config(cnst.APP_CONFIG_FILE) == Config()


def test_file_logging_writes_to_state_dir(mock_xdg):
    config = Config(logging=LoggingConfig(enable_file=True, file_level="DEBUG"))
    setup_loguru(config)

    logger.debug("hello from the test")
    logger.complete()

    log_file = cnst.APP_LOG_DIR / "app.log"
    assert log_file.exists()
    assert "hello from the test" in log_file.read_text()


def test_console_logging_goes_to_stderr(mock_xdg, capsys):
    setup_loguru(Config(), verbose=True)
    logger.debug("debug line")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "debug line" in captured.err


def test_unknown_log_level_falls_back(mock_xdg):
    cnst.APP_CONFIG_DIR.mkdir(parents=True)
    cnst.APP_CONFIG_FILE.write_text(
        json.dumps({"logging": {"enable_console": True, "console_level": "debug"}})
    )

    config = load_config(cnst.APP_CONFIG_FILE)
    assert config == Config()
    setup_loguru(config)
