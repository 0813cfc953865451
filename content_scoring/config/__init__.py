"""Configuration management for content scoring services."""

from .service_config import ServiceConfig

__all__ = ["ServiceConfig"]
