from .base_config import BaseConfig

__all__ = ["BaseConfig"]
