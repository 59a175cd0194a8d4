import logging

from .config import Settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(cfg: Settings) -> None:
    level = logging.DEBUG if cfg.debug_logs else getattr(logging, cfg.log_level_default.upper(), logging.WARNING)
    root = logging.getLogger("admissions")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
