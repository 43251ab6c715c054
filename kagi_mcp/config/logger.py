import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from datetime import datetime, timezone

# --- Configuration ---
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FILE = os.path.join(LOG_DIR, "kagi_mcp.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

os.makedirs(LOG_DIR, exist_ok=True)


# --- Formatters ---
class UTCFormatter(logging.Formatter):
    """Custom formatter that enforces UTC timestamps."""

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime(datefmt) if datefmt else dt.isoformat()


formatter = UTCFormatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S %Z",
)


# --- Handlers ---
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=MAX_BYTES,
    backupCount=BACKUP_COUNT,
    encoding="utf-8",
)
file_handler.setFormatter(formatter)

# stdout carries the MCP stdio transport, console logs go to stderr only
console_handler = logging.StreamHandler(sys.stderr)
console_handler.setFormatter(formatter)


# --- Root Logger Setup ---
def setup_logging():
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        handlers=[file_handler, console_handler],
    )

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.critical(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception

    # --- Third-party Logging ---
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("mcp").setLevel(logging.WARNING)  # per-request protocol chatter
    logging.getLogger("fastmcp").setLevel(logging.WARNING)

    # Optional: for full request/response traces of the Kagi client:
    # logging.getLogger("kagi_mcp.app.client").setLevel(logging.DEBUG)


setup_logging()
