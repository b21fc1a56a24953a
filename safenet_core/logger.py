import logging, json, sys, time, os

from . import config

ROOT_LOGGER = "SAFE"


def _formatter():
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
    return formatter


def _attach_file(root, to_file):
    path = os.path.abspath(to_file)
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == path:
            return
    os.makedirs(os.path.dirname(path), exist_ok=True)
    file_handler = logging.FileHandler(path)
    file_handler.setFormatter(_formatter())
    root.addHandler(file_handler)


def get_logger(name=ROOT_LOGGER, level=None, to_file=None):
    """Structured logger shared by all safenet_core components.

    Handlers live on the "SAFE" parent only; component loggers ("SAFE.IPC",
    ...) propagate to it, so each record is written once per destination.
    """
    root = logging.getLogger(ROOT_LOGGER)

    if not root.handlers:
        root.setLevel(config.log_level())
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_formatter())
        root.addHandler(handler)
        to_file = to_file or config.log_file()

    if to_file:
        _attach_file(root, to_file)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
