# logger.py
import logging
import sys


class ANSIColors:
    DEBUG = "\033[36m"       # Cyan
    INFO = "\033[32m"        # Green
    WARNING = "\033[33m"     # Yellow
    ERROR = "\033[31m"       # Red
    CRITICAL = "\033[1;31m"  # Bold Red
    RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Level-coloured lines on a terminal, plain text otherwise."""

    def __init__(self, fmt=None, datefmt=None, use_color=True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record):
        message = super().format(record)

        if not self.use_color:
            return message

        color = {
            logging.DEBUG: ANSIColors.DEBUG,
            logging.INFO: ANSIColors.INFO,
            logging.WARNING: ANSIColors.WARNING,
            logging.ERROR: ANSIColors.ERROR,
            logging.CRITICAL: ANSIColors.CRITICAL,
        }.get(record.levelno, ANSIColors.RESET)
        return f"{color}{message}{ANSIColors.RESET}"


def setup_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """
    Configure the root logger once. Re-running only updates the level, so the
    app factory and the CLI scripts can both call it safely.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    if not any(getattr(h, "_agenda_handler", False) for h in root.handlers):
        stream = stream or sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            ColorFormatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                use_color=hasattr(stream, "isatty") and stream.isatty(),
            )
        )
        handler._agenda_handler = True
        root.addHandler(handler)
    return root
