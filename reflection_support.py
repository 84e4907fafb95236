# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
Generic support tools shared by the reflection modules
"""

import logging
from threading import Lock
from typing import Any, Hashable, List, NoReturn, Optional, Tuple

class LoggerMixin:
    """
    Provides an interface to allow applications to override the logger instance used
    by the reflection modules

    Usage:
        For any (other) module:
            from reflection_support import LoggerMixin
            LoggerMixin.get_logger().debug('message content %s', detail)
        For application:
            import logging
            from reflection_support import LoggerMixin
            LoggerMixin.set_logger(logging.getLogger("my_application"))

    Code that runs before an application logger is set uses the 'default' logger.
    """
    _logger: Optional[logging.Logger] = None

    @classmethod
    def set_logger(cls, logger: Optional[logging.Logger]) -> None:
        """
        Sets the logger instance used by all of the reflection modules

        Args:
            logger (Logger): the logger to use going forward. None restores the default.
        """
        cls._logger = logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """gets the configured or default logger instance"""
        if cls._logger is not None:
            return cls._logger
        return logging.getLogger('default')

class ListHandler(logging.Handler):
    """Save log records to a list"""
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log_records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        """
        capture the log record

        Args:
            record (LogRecord) the standard logging.LogRecord
        """
        self.log_records.append(record)

    def attach(self, logger: logging.Logger) -> bool:
        """
        add the list handler instance to a Logger

        Args:
            logger (logging.Logger) the Logger to also send records to this handler

        Returns (bool) True if the handler was added, False if it was already there.
        """
        if self in logger.handlers:
            return False
        logger.addHandler(self)
        return True

    def messages(self) -> Tuple[Tuple[str, str], ...]:
        """
        The captured records as (levelname, formatted message) pairs, which compare
        directly in tests.
        """
        return tuple((rec.levelname, rec.getMessage()) for rec in self.log_records)

class SentinelTag:
    """
    Unique and immutable marker objects, one per hashable tag.

    SentinelTag(tag) always returns the same instance for equal tags, so markers can be
    compared with 'is'. Keep the tag values in a frozen dataclass of constants instead of
    repeating literals.
    """

    _sentinels: dict[Hashable, 'SentinelTag'] = {}
    _lock = Lock()  # instance creation is shared across threads

    def __new__(cls, tag: Hashable) -> 'SentinelTag':
        with cls._lock:
            if tag not in cls._sentinels:
                instance = super().__new__(cls)
                object.__setattr__(instance, '_tag', tag)
                cls._sentinels[tag] = instance
        return cls._sentinels[tag]

    @property
    def tag(self) -> Hashable:
        """The hashable tag associated with this sentinel instance."""
        return self._tag  # type: ignore pylint:disable=no-member

    def __repr__(self) -> str:
        return f"Sentinel Tag: {repr(self._tag)}"  # type: ignore pylint:disable=no-member

    def __hash__(self) -> int:
        return hash(self._tag)  # type: ignore pylint:disable=no-member

    def __eq__(self, other: object) -> bool:
        return self is other

    def __bool__(self) -> bool:
        return False

    def __setattr__(self, key: str, value: Any) -> NoReturn:
        raise AttributeError("SentinelTag instances are immutable.")

    def __delattr__(self, item: str) -> NoReturn:
        raise AttributeError("SentinelTag instances are immutable.")

def trim_excess(content: str, max_length: int=100) -> str:
    """
    limit content to specified maximum length

    Args:
        content (str): string to limit to maximum length (in characters)
        max_length (int): The maximum allowed width

    Return
        (str) content trimmed to the maximum length. When truncated, the last character is
        replaced by an ellipsis.
    """
    return content[:max_length - 1] + '…' if len(content) > max_length else content

# cSpell:words levelname
# cSpell:allowCompoundWords true
