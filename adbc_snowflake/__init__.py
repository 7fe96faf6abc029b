"""
ADBC Snowflake Driver Loader

This module resolves the ADBC version to request (from explicit calls and the
environment) and loads the native Snowflake ADBC driver.
"""
from .builder import Builder, load_env_file
from .driver import Driver
from .exceptions import (
    Error, InterfaceError, DatabaseError, DataError, OperationalError,
    IntegrityError, InternalError, ProgrammingError, NotSupportedError,
    Status
)
from .options import AdbcVersion

__version__ = "0.1.0"


def load_driver(version=None):
    """
    Load the driver with configuration taken from the environment.

    Args:
        version: AdbcVersion overriding ADBC_SNOWFLAKE_ADBC_VERSION, optional

    Returns:
        Driver: An initialized driver
    """
    builder = Builder.from_env()
    if version is not None:
        builder = builder.with_adbc_version(version)
    return builder.try_load()


# Export all public symbols
__all__ = [
    # Loader function
    'load_driver', 'load_env_file',

    # Classes
    'Builder', 'Driver', 'AdbcVersion', 'Status',

    # Exceptions
    'Error', 'InterfaceError', 'DatabaseError', 'DataError',
    'OperationalError', 'IntegrityError', 'InternalError', 'ProgrammingError',
    'NotSupportedError',
]
