"""Configuration module."""

from camel_cards.config.settings import CamelCardsSettings, get_settings

__all__ = ["CamelCardsSettings", "get_settings"]
