"""Logging support for tile_mapper.

All loggers live below the package root logger ``TILE_MAPPER``. Modules obtain
their logger through ``create_module_logger`` and can trace calls with the
``function_logger`` and ``method_logger`` decorators, which emit at DEBUG level.
Nothing is printed unless a handler is attached, for example via
``log_to_stderr``.
"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO, WARNING

__all__ = [
    "DEBUG",
    "INFO",
    "WARNING",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

TILE_MAPPER_LOGGER_NAME = "TILE_MAPPER"
DEFAULT_LEVEL = DEBUG
LOGGER_FORMAT = "[%(name)s %(levelname)s] %(message)s"

logging.getLogger(TILE_MAPPER_LOGGER_NAME).addHandler(logging.NullHandler())


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Create a module logger.

    Args:
        name: name of the module; defaults to the calling module

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        if mod is None:
            raise ValueError("Could not determine the calling module's name.")
        name = mod.__name__
    return get_module_logger(name)


def get_module_logger(name: str) -> logging.Logger:
    """Return the logger for the given module name."""
    if name.startswith(TILE_MAPPER_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{TILE_MAPPER_LOGGER_NAME}.{name}")


def get_rootlogger() -> logging.Logger:
    """Return the package root logger."""
    return logging.getLogger(TILE_MAPPER_LOGGER_NAME)


def function_logger(modulename: str):
    """Decorator that logs every call to the decorated function.

    Args:
        modulename: the ``__name__`` of the module the function lives in

    """

    def log_calls(function):
        @wraps(function)
        def wrapper(*args, **kwargs):
            logger = get_module_logger(modulename)
            if logger.isEnabledFor(DEBUG):
                logger.debug(
                    "calling %s with %r and %r", function.__name__, args, kwargs
                )
            return function(*args, **kwargs)

        return wrapper

    return log_calls


def method_logger(modulename: str):
    """Decorator that logs every call to the decorated method, prefixed with its class.

    Args:
        modulename: the ``__name__`` of the module the method lives in

    """

    def log_calls(method):
        classname = method.__qualname__.rsplit(".", 1)[0]

        @wraps(method)
        def wrapper(self, *args, **kwargs):
            logger = get_module_logger(modulename)
            if logger.isEnabledFor(DEBUG):
                logger.debug(
                    "calling %s.%s with %r and %r",
                    classname,
                    method.__name__,
                    args,
                    kwargs,
                )
            return method(self, *args, **kwargs)

        return wrapper

    return log_calls


def log_to_stderr(level: int | None = None, pass_root_logger_level: bool = False):
    """Attach a formatted stream handler to the package root logger.

    Args:
        level: the level for the root logger and handler, defaults to DEBUG
        pass_root_logger_level: if True, the handler inherits the root logger's level

    Returns:
        the package root logger

    """
    if level is None:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()
    logger.setLevel(level)

    formatter = logging.Formatter(LOGGER_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    if not pass_root_logger_level:
        handler.setLevel(level)

    if not any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.NullHandler)
        and h.formatter is not None
        and h.formatter._fmt == LOGGER_FORMAT
        for h in logger.handlers
    ):
        logger.addHandler(handler)
    return logger
