import logging
from core.config import get_config


def get_logger(name=None):
  logger = logging.getLogger(name or 'face_harmony')
  # already configured
  if logger.handlers:
    return logger

  cfg = get_config().logging
  logger.setLevel(getattr(logging, cfg.level.upper(), logging.INFO))
  handler = logging.StreamHandler()
  handler.setFormatter(logging.Formatter(cfg.format))
  logger.addHandler(handler)
  return logger
