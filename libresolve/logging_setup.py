"""
JSONL logging bootstrap.
Installs a single JSONL file sink on the root logger when the CLI starts.
"""

import json
import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

# LogRecord attributes that are not copied into the JSON payload
_RESERVED = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            base = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "libresolve.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            if isinstance(record.msg, dict):
                base.update(record.msg)
            for k, v in record.__dict__.items():
                if k in _RESERVED:
                    continue
                base.setdefault(k, v)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(base, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str, level: str = "INFO") -> JsonlHandler:
    """Install the JSONL sink on the root logger, replacing a previous one."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
            h.close()
    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler
