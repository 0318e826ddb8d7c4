"""Configuration for cpx."""

from .settings import CpxSettings, get_settings, load_settings


__all__ = ["CpxSettings", "get_settings", "load_settings"]
