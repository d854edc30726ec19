"""Configuration of site-wide image defaults."""

from .loader import ConfigLoader, ImageConfig

__all__ = ["ConfigLoader", "ImageConfig"]
