import logging, json, sys, time, os
from . import config


class DeferredFileHandler(logging.FileHandler):
    """File handler that creates its directory and opens the file on the first record."""

    def __init__(self, filename):
        super().__init__(filename, delay=True)

    def _open(self):
        os.makedirs(os.path.dirname(self.baseFilename) or ".", exist_ok=True)
        return super()._open()


def get_logger(name="stake_accounts", level=None, to_file=None):
    """Unified structured logger for all stake_accounts components."""
    logger = logging.getLogger(name)
    logger.setLevel(config.log_level() if level is None else level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # nothing touches the filesystem until a record is emitted
        to_file = to_file or config.log_file()
        if to_file:
            file_handler = DeferredFileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
