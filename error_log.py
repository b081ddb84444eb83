"""Last-error log shared by the batch runner and the web app."""
import os
import traceback
from datetime import datetime


def error_log_path() -> str:
    return os.environ.get("ERROR_LOG", "last_error.log")


def log_error(context: str, exc: Exception) -> None:
    """Write the last error with timestamp to the error log (no user data)."""
    with open(error_log_path(), "w", encoding="utf-8") as f:
        f.write(f"[{datetime.now().isoformat(timespec='seconds')}] {context}\n\n")
        if exc.__traceback__:
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=f)
        else:
            f.write(f"{type(exc).__name__}: {exc}\n")
