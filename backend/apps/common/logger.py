import logging
from typing import Any, Dict, Mapping, Optional


class AppLogger:
    """Stdlib logger wrapper that carries bound key/value context.

    Every record is rendered as ``message | key=value key=value`` so request
    handling can be followed through views, services and repositories without a
    structured logging backend.
    """

    def __init__(
        self,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        _logger: Optional[logging.Logger] = None,
    ):
        self._logger = _logger or logging.getLogger(name)
        self._name = name
        self._context: Dict[str, Any] = dict(context or {})

    @property
    def name(self) -> str:
        return self._name

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **extra: Any) -> "AppLogger":
        """Return a child logger with ``extra`` merged over the current context."""
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        """Log at ERROR level and attach the exception currently being handled."""
        self._log(logging.ERROR, message, context, exc_info=True)

    def _log(
        self,
        level: int,
        message: str,
        context: Dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        payload = {**self._context, **context}
        self._logger.log(level, self._format(message, payload), exc_info=exc_info)

    @staticmethod
    def _format(message: str, context: Mapping[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(
            f"{key}={AppLogger._stringify(value)}" for key, value in context.items()
        )
        return f"{message} | {pairs}"

    @staticmethod
    def _stringify(value: Any) -> str:
        if value is None or isinstance(value, (str, int, float, bool)):
            return str(value)
        return repr(value)


def get_logger(name: str, **context: Any) -> AppLogger:
    return AppLogger(name, context)
