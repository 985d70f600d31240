import logging
import sys
from colorama import Fore, Style, just_fix_windows_console


class ColoredFormatter(logging.Formatter):
    """Custom formatter to add colors to log messages based on log level."""

    COLORS = {
        'DEBUG': Style.DIM,
        'INFO': Fore.BLUE,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT
    }

    def format(self, record):
        log_message = super().format(record)
        color = self.COLORS.get(record.levelname, Style.RESET_ALL)
        return f"{color}{log_message}{Style.RESET_ALL}"


def configure_logging(log_level=logging.INFO, logger_name="cloudhealth_client"):
    """
    Send the library's log records to stdout with colored output.

    The library installs no handlers on its own; call this to see its
    debug output while troubleshooting.

    Args:
        log_level (int, optional): Level to set on the logger
        logger_name (str, optional): Logger to configure. Defaults to the package logger

    Returns:
        logging.Logger: The configured logger
    """
    just_fix_windows_console()

    formatter = ColoredFormatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # Clear existing handlers
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
