import logging
import json
from datetime import datetime
from typing import List, Dict, Any, Optional
from threading import Lock


class TrainingTraceLogger(logging.Handler):
    """
    A logging handler capturing structured training logs in-memory.

    - Collects log messages (INFO, DEBUG, ERROR, etc.) in a lock-guarded list.
    - Stores each entry with a timestamp, log level, logger name and message.
    - Retrieves logs as a list or JSON, filters by level, counts and clears them.

    Usage:
        handler = TrainingTraceLogger.setup(level=logging.INFO)
        trainer.train(agent, learning, termination, exploration)
        logs = handler.get_logs()
    """

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)
        self.execution_logs: List[Dict[str, Any]] = []
        self._lock = Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """
        Captures the log record and stores it in our internal structure.
        """
        try:
            log_entry = {
                "type": record.levelname,
                "logger": record.name,
                "description": record.getMessage(),
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            }

            with self._lock:
                self.execution_logs.append(log_entry)

        except Exception:
            self.handleError(record)

    def get_logs(self) -> List[Dict[str, Any]]:
        """
        Returns a copy of all captured logs.
        """
        with self._lock:
            return self.execution_logs.copy()

    def get_logs_json(self) -> str:
        """
        Returns all captured logs as a JSON string.
        """
        return json.dumps(self.get_logs(), indent=2)

    def clear_logs(self) -> None:
        with self._lock:
            self.execution_logs.clear()

    def get_logs_by_type(self, log_type: str) -> List[Dict[str, Any]]:
        """
        Returns logs filtered by type (INFO, DEBUG, ERROR, etc.).
        """
        with self._lock:
            return [log for log in self.execution_logs if log["type"] == log_type.upper()]

    def get_logs_count(self) -> int:
        with self._lock:
            return len(self.execution_logs)

    @classmethod
    def setup(cls, level=logging.INFO, logger_name: Optional[str] = None) -> 'TrainingTraceLogger':
        """
        Create the handler and attach it to a logger (the root logger by default).
        Lowers the logger's level to ``level`` if it is currently higher.
        Returns the handler instance so you can call methods on it.
        """
        handler = cls(level)

        target_logger = logging.getLogger(logger_name)
        target_logger.addHandler(handler)

        if target_logger.level == logging.NOTSET or target_logger.level > level:
            target_logger.setLevel(level)

        return handler

    def detach(self, logger_name: Optional[str] = None) -> None:
        """Remove this handler from the logger it was attached to by setup."""
        logging.getLogger(logger_name).removeHandler(self)
