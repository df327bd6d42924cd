import json
import logging
import sys
from datetime import datetime, timezone

# must not collide with LogRecord attributes (filename, module, ...)
STRUCTURED_KEYS = (
    "request_id", "path", "method", "status_code", "latency_ms", "error_code",
    "entity", "record_id", "stored_name",
)

class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage()
        }
        #attach structure extra if present
        for key in STRUCTURED_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def get_logger() -> logging.Logger:
    logger = logging.getLogger("polegrid_api")
    # configured once per process; later calls keep handler and level
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    logger.propagate = False
    return logger
