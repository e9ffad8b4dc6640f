"""Configuration module for the Management API client."""
from .settings import ClientSettings, load_settings

__all__ = ["ClientSettings", "load_settings"]
