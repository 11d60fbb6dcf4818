import logging
import sys
import threading

LOG_PREFIX = "[LOG]: "

_TOKEN = object()


class _StdoutHandler(logging.StreamHandler):
    # Resolve stdout per record so redirected streams are honoured.
    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


class Logger:
    _instance = None
    _lock = threading.Lock()

    def __init__(self, token: object = None) -> None:
        if token is not _TOKEN:
            raise TypeError("Logger cannot be instantiated directly, use Logger.shared().")

        self._logger = logging.getLogger("beverage_shop")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = _StdoutHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_PREFIX + "%(message)s"))
            self._logger.addHandler(handler)

    @classmethod
    def shared(cls) -> "Logger":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_TOKEN)
        return cls._instance

    # Write failures are reported by the handler and never reach the caller.
    def log_message(self, message: str) -> None:
        self._logger.info(message)
