"""
Logging Setup
=============

Console and optional rotating-file logging for the task tracker:
- Plain text or JSON-structured records
- Rotating file handler (10 MB x 5 backups)
- Per-record extra context via ``extra={'extra': {...}}``

Author: jetgause
Created: 2025-12-12
"""

import json
import logging
import logging.handlers
import sys
import traceback
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class LogEntry:
    """Structured log entry."""
    timestamp: str
    level: str
    message: str
    logger_name: str
    module: str
    function: str
    line_number: int
    thread_id: int
    process_id: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(asdict(self), default=str)


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=record.levelname,
            message=record.getMessage(),
            logger_name=record.name,
            module=record.module,
            function=record.funcName,
            line_number=record.lineno,
            thread_id=record.thread,
            process_id=record.process,
            extra=dict(getattr(record, 'extra', {}))
        )

        if record.exc_info:
            log_entry.extra['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        return log_entry.to_json()


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure the root logger.

    Replaces any handlers previously installed by this function, so calling
    it again (e.g. per test app) does not duplicate output.

    Args:
        level: Log level name or number
        log_file: Path of a rotating log file; no file logging when empty
        json_format: Emit JSON records instead of plain text

    Returns:
        The configured root logger
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(root.handlers):
        if getattr(handler, '_tasktracker', False):
            root.removeHandler(handler)
            handler.close()

    formatter = JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler._tasktracker = True
    root.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler._tasktracker = True
        root.addHandler(file_handler)

    return root
