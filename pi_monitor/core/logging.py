import json
import logging
import os
import pathlib
import sys
import traceback
from typing import Dict, Optional, Union


class ContextualLogRecord(logging.LogRecord):
    """
    Custom LogRecord that captures the source location of the failing frame
    for errors, or of the calling frame otherwise
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        if not self.exc_info and sys.exc_info()[0] is not None:
            self.exc_info = sys.exc_info()

        frame = None
        try:
            if self.levelno >= logging.ERROR and self.exc_info:
                tb = traceback.extract_tb(self.exc_info[2])
                frame = tb[-1] if tb else None
            else:
                for candidate in reversed(traceback.extract_stack()[:-2]):
                    filename = os.path.basename(candidate.filename)
                    if all(
                        module not in filename
                        for module in ["logging", __file__, "contextlib"]
                    ):
                        frame = candidate
                        break
        except Exception:
            frame = None

        if frame is None:
            self.source_file = "Unknown"
            self.line_number = 0
            self.source_function = "Unknown"
        else:
            self.source_file = os.path.basename(frame.filename)
            self.line_number = frame.lineno
            self.source_function = frame.name


class ContextFilter(logging.Filter):
    """
    A logging filter that ensures contextual information is added to log records
    """

    def filter(self, record):
        if not hasattr(record, "source_file"):
            record.source_file = "Unknown"
        if not hasattr(record, "line_number"):
            record.line_number = 0
        if not hasattr(record, "source_function"):
            record.source_function = "Unknown"
        return True


class JsonFormatter(logging.Formatter):
    """JSON log formatter"""

    def __init__(
        self,
        *,
        fmt_keys: Optional[Dict[str, str]] = None,
    ):
        super().__init__()
        self.fmt_keys = (
            fmt_keys
            if fmt_keys is not None
            else {
                "timestamp": "%(asctime)s",
                "level": "%(levelname)s",
                "message": "%(message)s",
                "logger": "%(name)s",
                "module": "%(module)s",
                "function": "%(funcName)s",
                "source_function": "%(source_function)s",
                "line": "%(line_number)d",
                "source_file": "%(source_file)s",
            }
        )

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        message = {}
        for key, value in self.fmt_keys.items():
            if key == "timestamp":
                value = self.formatTime(record, self.datefmt)
            elif key == "message":
                value = record.message
            else:
                try:
                    value = value % record.__dict__
                except (KeyError, ValueError, TypeError):
                    value = "Unknown"
            message[key] = value

        if record.exc_info:
            message["exc_info"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            message.update(record.extra_fields)

        return json.dumps(message)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name
    """
    return logging.getLogger(f"{name}")


def configure_logging(
    debug_mode: bool = False, log_dir: Optional[Union[str, pathlib.Path]] = None
):
    """
    Configure logging with a console handler and, optionally, JSON file handlers

    Args:
        debug_mode: Whether to force DEBUG level logging on the console
        log_dir: Directory for app.log and debug.log; console only when None
    """
    logging.setLogRecordFactory(ContextualLogRecord)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    context_filter = ContextFilter()

    standard_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # console - info by default, debug if --debug
    console_stream_handler = logging.StreamHandler()
    console_stream_handler.addFilter(context_filter)
    console_stream_handler.setFormatter(standard_formatter)
    console_stream_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    root_logger.addHandler(console_stream_handler)

    if log_dir is not None:
        log_dir = pathlib.Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        json_formatter = JsonFormatter()

        # <log_dir>/app.log - gets info or higher
        app_file_handler = logging.FileHandler(log_dir / "app.log")
        app_file_handler.addFilter(context_filter)
        app_file_handler.setFormatter(json_formatter)
        app_file_handler.setLevel(logging.INFO)
        root_logger.addHandler(app_file_handler)

        # <log_dir>/debug.log - gets everything
        debug_file_handler = logging.FileHandler(log_dir / "debug.log")
        debug_file_handler.addFilter(context_filter)
        debug_file_handler.setFormatter(json_formatter)
        debug_file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(debug_file_handler)

    root_logger.setLevel(logging.DEBUG)

    # access lines only in debug mode
    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )
