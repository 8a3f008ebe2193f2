import importlib
import logging

import pytest

import divide_rule
from divide_rule import utils


def test_get_logger_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setattr(utils, "LOG_LEVEL", "CHATTY")
    lg = utils.get_logger("divide_rule.tests.unknown_level")
    assert lg.level == logging.INFO
    assert len(lg.handlers) == 1


def test_get_logger_known_level(monkeypatch):
    monkeypatch.setattr(utils, "LOG_LEVEL", "DEBUG")
    lg = utils.get_logger("divide_rule.tests.debug_level")
    assert lg.level == logging.DEBUG
    assert utils.get_logger("divide_rule.tests.debug_level") is lg
    assert len(lg.handlers) == 1


def test_validate_square_rows_rejects_scalar():
    with pytest.raises(ValueError, match="list of rows"):
        utils.validate_square_rows(5)


def test_package_keeps_submodule_attribute():
    mod = importlib.import_module("divide_rule.max_subarray")
    assert divide_rule.max_subarray is mod
    assert hasattr(mod, "logger")
