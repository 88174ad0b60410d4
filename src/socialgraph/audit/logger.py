"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from socialgraph.audit.helpers import get_iso_timestamp
from socialgraph.audit.models import LEVELS, LogEvent
from socialgraph.models import UserId

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        user: UserId | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "friendship_added").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        user : UserId | None, optional
            User identifier if event is user-specific.

        Raises
        ------
        ValueError
            If level is not a known log level.
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            user=user,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        """Write event to JSONL file and flush."""
        json.dump(
            asdict(event),
            self._file,
            ensure_ascii=False,
            separators=(",", ":"),
            default=str,
        )
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={"command": command, "parameters": parameters},
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Total execution time in seconds.
        counters : dict[str, int] | None, optional
            Final counters (users, friendships, communities).
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if counters:
            data["counters"] = counters

        self.event("run_finished", data=data)

    def user_added(self, user: UserId) -> None:
        """Log user_added event."""
        self.event("user_added", user=user)

    def friendship_added(self, user_a: UserId, user_b: UserId, merged: bool) -> None:
        """Log friendship_added event.

        Parameters
        ----------
        user_a : UserId
            First endpoint.
        user_b : UserId
            Second endpoint.
        merged : bool
            Whether the friendship joined two communities.
        """
        self.event(
            "friendship_added",
            data={"users": [user_a, user_b], "communities_merged": merged},
        )

    def error(
        self,
        exception_class: str,
        message: str,
        user: UserId | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        user : UserId | None, optional
            User identifier if error is user-specific.
        traceback : str | None, optional
            Stack trace (only in verbose mode).
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if traceback is not None:
            data["traceback"] = traceback

        self.event("error", data=data, level="ERROR", user=user)
