"""Log formatters for lunchctl."""

import logging
from datetime import datetime

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset({
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName',
    'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName'
})


def _quote(value: str) -> str:
    """Quote a logfmt value if it contains spaces, quotes or '='."""
    if value == '' or any(c in value for c in ' "='):
        return '"' + value.replace('"', '\\"') + '"'
    return value


class LogfmtFormatter(logging.Formatter):
    """Logfmt formatter: level=INFO ts=2025-01-01T12:00:00 component=lunchctl.store msg="..." label=co.example"""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as logfmt key=value pairs.

        Args:
            record: Log record to format

        Returns:
            Formatted log line
        """
        parts = [
            f'level={record.levelname}',
            f'ts={datetime.fromtimestamp(record.created).isoformat()}',
            f'component={record.name}',
            f'msg={_quote(record.getMessage())}',
        ]

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            if exc_text:
                exc_text = exc_text.replace('\n', '\\n')
                parts.append(f'error={_quote(exc_text)}')

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith('_'):
                continue
            parts.append(f'{key}={_quote(str(value))}')

        return ' '.join(parts)
