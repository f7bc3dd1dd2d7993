import logging
import os
import sys

_root_configured = False


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    GREY = "\x1b[38;5;245m"
    BOLD_RED = "\x1b[31;1m"

    @staticmethod
    def disable():
        """Disable colors (for non-terminal output)."""
        for attr in dir(Colors):
            if not attr.startswith("_") and attr not in ("disable", "enabled"):
                setattr(Colors, attr, "")

    @staticmethod
    def enabled():
        """Check if colors are enabled."""
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty() and os.getenv("TERM") != "dumb"


class ColoredFormatter(logging.Formatter):
    """Formatter that tints each line by level."""

    # Names, not codes: Colors.disable() runs after this class is defined
    LEVEL_COLORS = {
        logging.DEBUG: "GREY",
        logging.INFO: "GREY",
        logging.WARNING: "YELLOW",
        logging.ERROR: "RED",
        logging.CRITICAL: "BOLD_RED",
    }

    def format(self, record):
        formatted = super().format(record)
        log_color = getattr(Colors, self.LEVEL_COLORS.get(record.levelno, "RESET"))
        return f"{log_color}{formatted}{Colors.RESET}"


def setup_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Set up a module logger; the shared root handler is installed once.

    Output goes to stderr: the tool server owns stdout for protocol messages.
    """
    global _root_configured

    if not _root_configured:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.INFO)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        formatter = ColoredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _root_configured = True

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    return logger


def set_level(level: str) -> None:
    """Apply a level to every querytrack logger and the root handler."""
    value = getattr(logging, level.upper())
    logging.getLogger().setLevel(value)
    logging.getLogger("querytrack").setLevel(value)
    for name, existing in logging.root.manager.loggerDict.items():
        if name.startswith("querytrack.") and isinstance(existing, logging.Logger):
            existing.setLevel(value)


# Auto-disable colors if not in terminal
if not Colors.enabled():
    Colors.disable()
