from __future__ import annotations
from collections.abc import Mapping
from typing import TypeAlias

BasicType: TypeAlias = str | int | float | bool | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType']

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with restricted range of types allowed and type-safe getters
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None
        elif isinstance(value, str):
            return value
        elif isinstance(value, (int, float, bool)):
            return str(value)

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to str")

    def get_choice(self, key: str, choices: list[str], default: str) -> str:
        """Get a string setting that must be one of a fixed set of values (case-insensitive)"""
        value = self.get_str(key, default)
        if value is None:
            return default

        value = value.strip().lower()
        if value not in choices:
            raise SettingsError(f"Invalid value {repr(value)} for setting '{key}', expected one of: {', '.join(choices)}")

        return value
