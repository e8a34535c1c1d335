"""JSONL logging bootstrap.

Installs a single JSONL sink on the root logger so every resolution step
logged by the loader modules lands in one machine-readable file.
"""

import json
import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = "./esm-loader.log.jsonl"
DEFAULT_LEVEL = "INFO"

# Anything on a record beyond these came in through `extra=`
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))) | {"message"}


class JsonlHandler(logging.Handler):
    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        base = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "esm_loader.log", "ver": "1.0.0"},
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            base["error"] = {"type": type(error).__name__, "message": str(error)}
            kind = getattr(error, "kind", None)
            if kind is not None:
                base["error"]["kind"] = getattr(kind, "value", str(kind))
        for k, v in record.__dict__.items():
            if k in _STANDARD_ATTRS:
                continue
            base.setdefault(k, v)
        return base

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_record(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | None = None, level: str | None = None) -> None:
    path = path or DEFAULT_PATH
    level = (level or DEFAULT_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    root.addHandler(JsonlHandler(path))
