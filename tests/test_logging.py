import json
import logging

from sih_portal.core.config.logging_config import build_logging_config, setup_logging


def test_config_routes_errors_to_their_own_file(tmp_path):
    config = build_logging_config(str(tmp_path), "debug")

    assert config["handlers"]["error_file"]["level"] == "ERROR"
    assert config["loggers"]["sih_portal"]["level"] == "DEBUG"
    assert "app_file" not in config["loggers"]["sih_portal.errors"]["handlers"]


def test_setup_writes_json_lines(tmp_path):
    logger = setup_logging(str(tmp_path / "logs"), "INFO")
    logger.info("portal started")
    logging.getLogger("sih_portal.errors").error("store unreachable")
    for handler in logger.handlers + logging.getLogger("sih_portal.errors").handlers:
        handler.flush()

    app_lines = (tmp_path / "logs" / "app.log").read_text().splitlines()
    error_lines = (tmp_path / "logs" / "error.log").read_text().splitlines()

    assert json.loads(app_lines[-1])["message"] == "portal started"
    assert json.loads(error_lines[-1])["message"] == "store unreachable"
    assert all("store unreachable" not in line for line in app_lines)
