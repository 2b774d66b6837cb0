from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV = 'FACE_HARMONY_CONFIG'
DEFAULT_PATH = Path(__file__).resolve().parent.parent / 'config.yaml'


class AnalysisConfig(BaseModel):
  epsilon: float = Field(1e-6, gt=0)
  include_features: bool = False


class ServerConfig(BaseModel):
  cors_origins: List[str] = ['http://localhost:3000', 'http://127.0.0.1:3000', '*']


class LoggingConfig(BaseModel):
  level: str = 'INFO'
  format: str = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class Config(BaseModel):
  analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
  server: ServerConfig = Field(default_factory=ServerConfig)
  logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[Path] = None) -> Config:
  if path is None:
    path = Path(os.environ[CONFIG_ENV]) if os.getenv(CONFIG_ENV) else DEFAULT_PATH
  path = Path(path)
  if path.exists():
    try:
      data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as e:
      raise ValueError(f'Invalid YAML format in {path}: {e}')
    cfg = Config(**data)
  else:
    cfg = Config()

  # environment overrides
  level = os.getenv('FACE_HARMONY_LOG_LEVEL')
  if level:
    cfg.logging.level = level
  eps = os.getenv('FACE_HARMONY_EPSILON')
  if eps:
    cfg.analysis = AnalysisConfig(**{**cfg.analysis.model_dump(), 'epsilon': float(eps)})
  return cfg


_config: Optional[Config] = None


def get_config() -> Config:
  global _config
  if _config is None:
    _config = load_config()
  return _config
