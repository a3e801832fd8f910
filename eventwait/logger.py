import logging
import os

LOGGER_NAME = "eventwait"


def setup_logger(name=LOGGER_NAME, log_dir=None, log_filename="eventwait.log",
                 level=logging.WARNING, console=False):
    """
    Set up and return a logger with optional file and console handlers.

    Args:
        name (str): The logger name.
        log_dir (str): Directory where the log file will be stored. No file
            handler is added when this is None.
        log_filename (str): Log file name.
        level (int): Logging level.
        console (bool): Whether to add a console (stderr) handler.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear out any existing handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, log_filename))
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    # Keep library records away from the root logger.
    logger.propagate = False
    return logger


def setup_from_config(cfg, debug=False):
    """Configure the package logger from the [logging] table of a config."""
    section = cfg.get("logging", {}) or {}
    level_name = "DEBUG" if debug else str(section.get("level", "WARNING"))
    level = getattr(logging, level_name.upper(), logging.WARNING)

    log_dir = section.get("log_dir")
    config_path = cfg.get("__config_path__")
    if log_dir and config_path and not os.path.isabs(log_dir):
        log_dir = os.path.join(os.path.dirname(config_path), log_dir)

    return setup_logger(
        LOGGER_NAME,
        log_dir,
        section.get("log_filename", "eventwait.log"),
        level=level,
        console=debug or bool(section.get("console", False)),
    )
