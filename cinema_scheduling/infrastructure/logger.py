import json
import logging
from typing import Any, Optional

from ..interfaces import ILogger


class ConsoleLogger(ILogger):
    """Реализация логгера поверх стандартного модуля logging."""

    def __init__(self, name: str = "cinema_scheduling", logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    @staticmethod
    def _format(message: str, context: dict) -> str:
        if not context:
            return message
        return f"{message} | context: {json.dumps(context, default=str, ensure_ascii=False)}"

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))
