"""This provides logging functionality for gridcoord.

It is modeled on the default `logging approach that comes with Python <https://docs.python.org/library/logging.html>`_.
The gridcoord logger sits at the top of a hierarchy of module loggers: every
module uses a child logger named after itself, so client code can silence or
enable gridcoord by configuring ``logging.getLogger("gridcoord")`` alone.
"""

import inspect
import logging
from functools import wraps
from logging import DEBUG

__all__ = [
    "LOGGER_NAME",
    "create_module_logger",
    "function_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

LOGGER_NAME = "gridcoord"
DEFAULT_LEVEL = DEBUG

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Create a module logger.

    Args:
        name: name of the module for which the logger is being created. Defaults
              to the ``__name__`` of the calling module.

    """
    if name is None:
        frame = inspect.currentframe().f_back
        name = frame.f_globals["__name__"]

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def get_rootlogger() -> logging.Logger:
    """Return the gridcoord root logger."""
    return logging.getLogger(LOGGER_NAME)


def method_logger(modulename: str):
    """Decorator for adding debug logging to a method.

    Args:
        modulename: The name of the module in which the method occurs.

    """
    logger = create_module_logger(modulename)

    def real_decorator(meth):
        @wraps(meth)
        def wrapper(self, *args, **kwargs):
            if logger.isEnabledFor(DEBUG):
                classname = type(self).__name__
                logger.debug(
                    f"calling {classname}.{meth.__name__} on {self!r} "
                    f"with {args} and {kwargs}"
                )
            return meth(self, *args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(modulename: str):
    """Decorator for adding debug logging to a function.

    Args:
        modulename: The name of the module in which the function occurs.

    """
    logger = create_module_logger(modulename)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if logger.isEnabledFor(DEBUG):
                logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def log_to_stderr(
    level: int | None = None, pass_root_logger_level: bool = False
) -> logging.Logger:
    """Turn on logging and add a handler which prints to stderr.

    Args:
        level: minimum level of the messages that will be logged
        pass_root_logger_level: bool, optional. Default False
            if True, all gridcoord loggers will be set to the same level as the root logger.

    """
    if not level:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()
    logger.setLevel(level)

    if pass_root_logger_level:
        for name, child in logging.root.manager.loggerDict.items():
            if name.startswith(f"{LOGGER_NAME}.") and isinstance(
                child, logging.Logger
            ):
                child.setLevel(level)

    # avoid creating multiple stderr handlers when called more than once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(levelname)s][%(asctime)s][%(name)s]: %(message)s"
            )
        )
        logger.addHandler(handler)

    return logger
