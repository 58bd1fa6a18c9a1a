"""
Logging helpers shared by curvekit modules.

Every module logger is a child of the "curvekit" logger, so applications can
tune or silence the toolkit as a whole. Loggers are tracked so that a later
call to prepare_logging can adjust the level of loggers that already exist.
"""

import logging
from logging import Handler, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional, Union


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("curvekit")
    default_level = logging.INFO
    module_levels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[Handler] = []


def prepare_logging(
    filepath: Union[Path, str, None] = None,
    log_level: int = logging.INFO,
    level_map: Optional[Dict[str, int]] = None,
) -> None:
    """
    Route curvekit log output to stderr and, optionally, to a rotating log
    file. Handlers installed by an earlier call are replaced, not stacked.

    Args:
        filepath: The base name for the rotating log file.
        log_level: The default level for loggers without a level_map entry.
        level_map: name -> level overrides, applied to existing and future
            loggers. Names are the short module names given to get_logger.
    """
    LogSettings.default_level = log_level
    LogSettings.module_levels.update(level_map if level_map else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.module_levels.get(name, log_level))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )
    if filepath:
        LogSettings.handlers.append(
            RotatingFileHandler(filepath, mode="a", maxBytes=5 * 1024 * 1024, backupCount=2)
        )
    LogSettings.handlers.append(logging.StreamHandler())
    for handler in LogSettings.handlers:
        handler.setFormatter(formatter)
        LogSettings.root.addHandler(handler)


def get_logger(name: str) -> Logger:
    """
    Get the logger curvekit.<name>. A level registered through
    prepare_logging is used if one exists, otherwise the default level.

    Args:
        name: The short module name, e.g. "field".
    """
    logger = LogSettings.root.getChild(name)
    logger.setLevel(LogSettings.module_levels.get(name, LogSettings.default_level))
    LogSettings.loggers[name] = logger
    return logger
