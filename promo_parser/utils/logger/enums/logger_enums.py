from enum import Enum


class LoggerLevel(str, Enum):
    """
    Severity levels understood by the console logger, lowest first.
    """

    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"

    @property
    def rank(self) -> int:
        return list(LoggerLevel).index(self)
