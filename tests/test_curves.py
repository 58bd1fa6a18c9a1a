import logging

import pytest

from curvekit.common.field import PrimeField
from curvekit.common.helpers import LogSettings, get_logger, prepare_logging
from curvekit.common.numeric import BIGINT, UINT64
from curvekit.curve.curves import (
    BN254,
    F101,
    get_field,
    register_field,
    registered_fields,
)


def test_builtin_fields():
    assert get_field("F101") is F101
    assert get_field("BN254") is BN254
    assert {"F101", "BN254"} <= set(registered_fields())
    assert F101.backend is UINT64
    assert BN254.backend is BIGINT
    assert BN254.bits == 254
    assert (F101.a, F101.b) == (98, 3)
    assert (BN254.a, BN254.b) == (0, 3)


def test_register_and_lookup():
    field = PrimeField(97, a=2, b=3, name="F97-test")
    assert register_field(field) is field
    assert get_field("F97-test") is field
    # Registering an equal descriptor again is allowed.
    assert register_field(PrimeField(97, a=2, b=3, name="F97-test")) is field


def test_conflicting_registration():
    with pytest.raises(ValueError):
        register_field(PrimeField(103, name="F101"))


def test_unknown_field():
    with pytest.raises(KeyError):
        get_field("no-such-field")


@pytest.fixture
def reset_logging():
    yield
    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []
    LogSettings.default_level = logging.INFO
    LogSettings.module_levels.clear()
    for logger in LogSettings.loggers.values():
        logger.setLevel(logging.INFO)


def test_logger_levels(tmp_path, reset_logging):
    log = get_logger("curves-test")
    assert LogSettings.loggers["curves-test"] is log
    prepare_logging(tmp_path / "curvekit.log", logging.DEBUG, {"curves-test": logging.WARNING})
    assert log.level == logging.WARNING
    assert get_logger("other-test").level == logging.DEBUG


def test_loggers_namespaced():
    assert get_logger("field").name == "curvekit.field"
    assert logging.getLogger("curvekit.point") is get_logger("point")
    assert logging.getLogger("field") is not get_logger("field")


def test_prepare_logging_replaces_handlers(tmp_path, reset_logging):
    before = list(LogSettings.root.handlers)
    prepare_logging(tmp_path / "curvekit.log")
    prepare_logging()
    prepare_logging()
    added = [h for h in LogSettings.root.handlers if h not in before]
    assert len(added) == 1
    assert type(added[0]) is logging.StreamHandler
    assert not any(h in logging.getLogger().handlers for h in added)
