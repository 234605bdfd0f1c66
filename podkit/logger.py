"""
podkit | logger.py

Log Levels (Level - Value - Description)

NOTSET - 0 - No logging is configured, the logging system is effectively disabled.
TRACE - 1 - Request documents and variables as they are sent.
DEBUG - 2 - Detailed information, typically of interest only when diagnosing problems.
INFO - 3 - Confirmation that things are working as expected. (Default)
WARN - 4 - An indication that something unexpected happened.
ERROR - 5 - Serious problem, the software has not been able to perform some function.
"""

import os
from typing import Optional

MAX_MESSAGE_LENGTH = 4096
LOG_LEVELS = ["NOTSET", "TRACE", "DEBUG", "INFO", "WARN", "ERROR"]


def _validate_log_level(log_level):
    """
    Checks the log level and returns the log level name.
    """
    if isinstance(log_level, str):
        log_level = log_level.upper()

        if log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {log_level}")

        return log_level

    if isinstance(log_level, int):
        if log_level < 0 or log_level >= len(LOG_LEVELS):
            raise ValueError(f"Invalid log level: {log_level}")

        return LOG_LEVELS[log_level]

    raise ValueError(f"Invalid log level: {log_level}")


class PodKitLogger:
    """Singleton class for logging."""

    __instance = None
    level = _validate_log_level(os.environ.get("PODKIT_LOG_LEVEL", "INFO"))

    def __new__(cls):
        if PodKitLogger.__instance is None:
            PodKitLogger.__instance = object.__new__(cls)
        return PodKitLogger.__instance

    def set_level(self, new_level):
        """
        Set the level for logging.
        Can be set to the name or value of the level.
        """
        self.level = _validate_log_level(new_level)
        self.info(f"Log level set to {self.level}")

    def log(self, message, message_level="INFO", operation: Optional[str] = None):
        """
        Log message to stdout if the message level is enabled.
        """
        if self.level == "NOTSET":
            return

        level_index = LOG_LEVELS.index(self.level)
        if level_index > LOG_LEVELS.index(message_level):
            return

        message = str(message)
        # Long response bodies are cut in the middle
        if len(message) > MAX_MESSAGE_LENGTH:
            half_max_length = MAX_MESSAGE_LENGTH // 2
            truncated_amount = len(message) - MAX_MESSAGE_LENGTH
            truncation_note = f"\n...TRUNCATED {truncated_amount} CHARACTERS...\n"
            message = (
                message[:half_max_length] + truncation_note + message[-half_max_length:]
            )

        if operation:
            message = f"{operation} | {message}"

        print(f"{message_level.ljust(7)}| {message}", flush=True)

    def secret(self, secret_name, secret):
        """
        Censors secrets for logging.
        Replaces everything except the first and last characters with *
        """
        secret = str(secret)
        redacted_secret = secret[0] + "*" * (len(secret) - 2) + secret[-1]
        self.info(f"{secret_name}: {redacted_secret}")

    def trace(self, message, operation: Optional[str] = None):
        """
        trace log
        """
        self.log(message, "TRACE", operation)

    def debug(self, message, operation: Optional[str] = None):
        """
        debug log
        """
        self.log(message, "DEBUG", operation)

    def info(self, message, operation: Optional[str] = None):
        """
        info log
        """
        self.log(message, "INFO", operation)

    def warn(self, message, operation: Optional[str] = None):
        """
        warn log
        """
        self.log(message, "WARN", operation)

    def error(self, message, operation: Optional[str] = None):
        """
        error log
        """
        self.log(message, "ERROR", operation)
