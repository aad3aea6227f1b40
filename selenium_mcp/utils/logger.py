import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_print_level = "INFO"


def define_log_level(
    print_level: str = "INFO",
    logfile_level: str = "DEBUG",
    log_dir: Optional[Path] = None,
    name: Optional[str] = None,
):
    """Adjust the log level to above level.

    Console output always goes to stderr: stdout carries protocol messages
    when the stdio transport is active.
    """
    global _print_level
    _print_level = print_level

    _logger.remove()
    _logger.add(sys.stderr, level=print_level)

    if log_dir is not None:
        formatted_date = datetime.now().strftime("%Y%m%d%H%M%S")
        log_name = f"{name}_{formatted_date}" if name else formatted_date
        _logger.add(
            Path(log_dir) / f"{log_name}.log",
            level=logfile_level,
            rotation="10 MB",
        )
    return _logger


logger = define_log_level()
