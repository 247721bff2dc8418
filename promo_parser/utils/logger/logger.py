import inspect
import os
import traceback
from datetime import datetime

from colorama import Fore, Style, init as colorama_init

from promo_parser.utils.logger.enums.logger_enums import LoggerLevel

colorama_init()


class Logger:
    """
    Console logger with colored output and caller context.

    Prints one line per message with the level, a timestamp and the
    ``module:line`` of the caller. Messages below the threshold taken from
    the ``LOG_LEVEL`` environment variable (``INFO`` when unset) are dropped.
    """

    def __init__(self, threshold: LoggerLevel | None = None) -> None:
        self._log_format = (
            "{color}[{level}]--[{timestamp}]{reset} "
            "{module_color}({module}:{line}){reset}:  {message}"
        )
        self._module_color = Fore.LIGHTBLUE_EX
        self._threshold = threshold or self._threshold_from_env()

    @staticmethod
    def _threshold_from_env() -> LoggerLevel:
        """
        Resolve the minimum level from the environment.

        :return: configured level or INFO for unknown values
        """

        raw = os.getenv("LOG_LEVEL", LoggerLevel.info.value).upper()
        try:
            return LoggerLevel(raw)
        except ValueError:
            return LoggerLevel.info

    def debug(self, message: str) -> None:
        """
        Log a debug-level message.

        :param message: message content to log
        """

        self._log(message=message, level=LoggerLevel.debug, color=Fore.LIGHTGREEN_EX)

    def info(self, message: str) -> None:
        """
        Log an info-level message.

        :param message: message content to log
        """

        self._log(message=message, level=LoggerLevel.info, color=Fore.LIGHTYELLOW_EX)

    def warning(self, message: str) -> None:
        """
        Log a warning-level message.

        :param message: message content to log
        """

        self._log(message=message, level=LoggerLevel.warning, color=Fore.YELLOW)

    def error(self, message: str) -> None:
        """
        Log an error-level message.

        :param message: message content to log
        """

        self._log(message=message, level=LoggerLevel.error, color=Fore.RED)

    def exception(self, message: str) -> None:
        """
        Log an error-level message with the traceback of the active exception.
        """

        formatted_traceback = traceback.format_exc()
        combined = f"{message}\n{formatted_traceback}" if formatted_traceback else message
        self._log(message=combined, level=LoggerLevel.error, color=Fore.RED)

    def _log(self, message: str, level: LoggerLevel, color: str) -> None:
        """
        Format and print a log message with caller context.

        :param message: message content to log
        :param level: log severity level
        :param color: ANSI color code for the level prefix
        """

        if level.rank < self._threshold.rank:
            return

        frame = inspect.currentframe().f_back.f_back
        module_info = inspect.getmodule(frame)

        if module_info and getattr(module_info, "__file__", None):
            module_name = os.path.splitext(os.path.basename(module_info.__file__))[0]
        else:
            module_name = "unknown"

        timestamp = datetime.now().replace(microsecond=0)

        formatted_message = self._log_format.format(
            color=color,
            level=level.value,
            timestamp=timestamp,
            reset=Style.RESET_ALL,
            module_color=self._module_color,
            module=module_name,
            line=frame.f_lineno,
            message=message[:1].upper() + message[1:],
        )

        print(formatted_message)


logger = Logger()
