"""
ADBC API version definitions.
"""

from enum import IntEnum
from typing import Optional


class AdbcVersion(IntEnum):
    """Version of the ADBC API a driver instance presents to callers.

    Member values are the ADBC_VERSION_* constants of the C API, so members
    compare (and sort) by version.
    """

    V100 = 1_000_000
    V110 = 1_001_000

    def __str__(self) -> str:
        return _DOTTED[self]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def default(cls) -> 'AdbcVersion':
        """Version used when none was requested."""
        return cls.V110

    @classmethod
    def from_str(cls, value: str) -> 'AdbcVersion':
        """Create AdbcVersion from its textual form, e.g. "1.1.0", "1_1_0" or "110"."""
        try:
            return _ALIASES[value]
        except KeyError:
            raise ValueError(f"Unrecognized ADBC version: {value}. Available: {sorted(_ALIASES)}") from None

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['AdbcVersion']:
        """Like from_str, but returns None for missing or unrecognized text."""
        if value is None:
            return None
        try:
            return cls.from_str(value)
        except ValueError:
            return None


_DOTTED = {
    AdbcVersion.V100: "1.0.0",
    AdbcVersion.V110: "1.1.0",
}

_ALIASES = {
    "1.0.0": AdbcVersion.V100,
    "1_0_0": AdbcVersion.V100,
    "100": AdbcVersion.V100,
    "1.1.0": AdbcVersion.V110,
    "1_1_0": AdbcVersion.V110,
    "110": AdbcVersion.V110,
}
