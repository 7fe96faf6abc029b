"""
A builder for Driver.

Configuration is resolved from explicit calls and, optionally, from the
process environment (plus a local .env file). Resolution never fails; only
Builder.try_load can raise, and it raises whatever the driver raised.
"""

import os
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

from dotenv import find_dotenv, load_dotenv

from .driver import Driver
from .options import AdbcVersion


logger = logging.getLogger(__name__)


def load_env_file() -> Optional[Exception]:
    """Best-effort load of a local .env file into the process environment.

    The .env file is searched for from the current working directory upwards.
    Variables already set in the environment are left alone. Any failure is
    returned rather than raised so that callers can ignore it.
    """
    try:
        load_dotenv(find_dotenv(usecwd=True))
    except Exception as e:
        return e
    return None


@dataclass(frozen=True)
class Builder:
    """A builder for Driver.

    Attributes:
        adbc_version: ADBC version to request, or None for AdbcVersion.default()
    """

    adbc_version: Optional[AdbcVersion] = None

    ADBC_VERSION_ENV = "ADBC_SNOWFLAKE_ADBC_VERSION"

    @classmethod
    def from_env(
        cls,
        getenv: Optional[Callable[[str], Optional[str]]] = None,
        load_env_file: Callable[[], object] = load_env_file,
    ) -> 'Builder':
        """Construct a builder from the configuration environment variables.

        Args:
            getenv: Variable lookup, defaults to os.environ.get
            load_env_file: Called once before the lookup; its result is ignored

        Returns:
            Builder: adbc_version is set if ADBC_SNOWFLAKE_ADBC_VERSION holds a
            recognized version, None otherwise
        """
        load_env_file()
        if getenv is None:
            getenv = os.environ.get

        value = getenv(cls.ADBC_VERSION_ENV)
        adbc_version = AdbcVersion.parse(value)
        if value is not None and adbc_version is None:
            logger.debug("Ignoring unrecognized %s value %r", cls.ADBC_VERSION_ENV, value)
        return cls(adbc_version=adbc_version)

    def with_adbc_version(self, version: AdbcVersion) -> 'Builder':
        """Use the provided AdbcVersion when loading the driver."""
        return replace(self, adbc_version=version)

    def try_load(self) -> Driver:
        """Try to load the Driver using the values provided to this builder."""
        version = self.adbc_version if self.adbc_version is not None else AdbcVersion.default()
        return Driver.try_new(version)
