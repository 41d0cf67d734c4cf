import sys
import logging
from datetime import datetime
from config import LOG_FILE, LOG_LEVEL


VERBOSE = 5
logging.addLevelName(VERBOSE, "VERBOSE")

AUDIT_LOGGER = "audit"

RESET = "\x1b[0m"
DEFAULT_COLOR = "\x1b[37m"
SEVERITY_COLORS = {
    logging.CRITICAL: "\x1b[31m",
    logging.ERROR: "\x1b[33m",
    logging.WARNING: "\x1b[35m",
    logging.INFO: "\x1b[36m",
    logging.DEBUG: "\x1b[34m",
    VERBOSE: "\x1b[32m",
}


def format_timestamp(moment: datetime) -> str:
    """Renders a moment as 'DD/MM. H:mm:ss' (hour not zero-padded)."""
    return f"{moment:%d/%m.} {moment.hour}:{moment:%M:%S}"


def severity_color(levelno: int) -> str:
    return SEVERITY_COLORS.get(levelno, DEFAULT_COLOR)


class ConsoleFormatter(logging.Formatter):

    """
    Formats every record as '<DD/MM. H:mm:ss> [<source>] <message>'.

    The source is the logger name, so discord.py records show up as
    [discord.gateway], [discord.client] and so on. When colored, the whole line
    is wrapped in the ANSI colour mapped to the record's severity.

    Attributes:
        colored (bool): Whether to wrap lines in ANSI colour codes.
    """

    def __init__(self, colored: bool = True):
        super().__init__()
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        moment = datetime.fromtimestamp(record.created)
        line = f"{format_timestamp(moment)} [{record.name}] {record.getMessage()}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"

        if not self.colored:
            return line
        return f"{severity_color(record.levelno)}{line}{RESET}"


def setup_audit_logger(log_file: str = LOG_FILE) -> logging.Logger:

    """
    Configures the 'audit' logger used for successful command lines.

    Audit lines are already fully formatted by the reporter, so they are written
    as-is to the console and the log file and do not propagate to the root handlers.
    """

    audit = logging.getLogger(AUDIT_LOGGER)
    audit.setLevel(logging.INFO)
    audit.propagate = False

    plain = logging.Formatter("%(message)s")
    for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(log_file, encoding="utf-8")):
        handler.setFormatter(plain)
        audit.addHandler(handler)

    return audit



"""
Configures the global logging system for the application.

This function performs three tasks:
1. **UTF-8 Enforcement**: Reconfigures standard output and error streams to use UTF-8
   encoding so status strings and emojis never break the console.
2. **Multi-Handler Logging**: Every record (including discord.py's own) goes to the
   console, coloured by severity, and uncoloured to the log file.
3. **Audit Logger**: Successful command lines are written verbatim to both outputs.

Returns:
    None
"""
def setup_logger(level: str = LOG_LEVEL, log_file: str = LOG_FILE):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ConsoleFormatter(colored=True))

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(ConsoleFormatter(colored=False))

    logging.basicConfig(
        level=level,
        handlers=[file_handler, console_handler],
    )

    setup_audit_logger(log_file)
