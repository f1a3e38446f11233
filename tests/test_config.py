import logging
import os

from utils.config import load_config
from utils.logging_config import init_logging


def test_defaults_without_environment():
    config = load_config({})
    assert config.namespace == "deejoft-portal"
    assert config.log_level == "INFO"
    assert config.log_format == "text"
    assert os.path.basename(config.data_dir) == "data"


def test_environment_overrides(tmp_path):
    config = load_config({
        "PORTAL_DATA_DIR": str(tmp_path / "store"),
        "PORTAL_STORAGE_NAMESPACE": " acme ",
        "PORTAL_LOG_LEVEL": "debug",
        "PORTAL_LOG_FORMAT": "JSON",
    })
    assert config.data_dir == str(tmp_path / "store")
    assert config.namespace == "acme"
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"


def test_unknown_log_format_falls_back_to_text():
    assert load_config({"PORTAL_LOG_FORMAT": "xml"}).log_format == "text"


def test_init_logging_is_idempotent():
    root = logging.getLogger()
    init_logging("INFO", "json")
    init_logging("INFO", "json")
    named = [h for h in root.handlers if h.get_name() == "portal"]
    assert len(named) == 1
    root.removeHandler(named[0])
