import sys
from pathlib import Path

from loguru import logger

from . import config


def init_logger(cfg: config.Config):
    """
    Initialize logger.

    This function removes default handlers and adds two new handlers:
    1. Console handler: Displays logs on stderr with colors and concise format,
       leaving stdout to the resolved names.
    2. File handler: Records logs to specified file with size-based rotation and compression.

    Args:
        cfg: config object
    """
    logger.remove()
    # Every record carries the configured name, for both sinks
    logger.configure(extra={'logger_name': cfg.logger_name})
    log_path = Path(cfg.log_dir) / cfg.log_file
    logger.add(
        sys.stderr,
        level=cfg.log_level_console,
        format='<green>{extra[logger_name]}</green> <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>',
        colorize=True,
        diagnose=False,
    )

    logger.add(
        log_path,
        level=cfg.log_level_file,
        rotation='10 MB',
        compression='zip',
        format='{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[logger_name]} | {name}:{function}:{line} - {message}',
        diagnose=False,
    )
