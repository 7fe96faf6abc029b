"""
ADBC Snowflake Exception Classes

This module defines the ADBC status codes and an exception hierarchy shaped
after PEP 249. Errors are only ever raised while constructing a driver; every
error carries the ADBC status code reported by the native driver.
"""
from enum import IntEnum


class Status(IntEnum):
    """ADBC status codes, as returned by the native driver (AdbcStatusCode)."""

    OK = 0
    UNKNOWN = 1
    NOT_IMPLEMENTED = 2
    NOT_FOUND = 3
    ALREADY_EXISTS = 4
    INVALID_ARGUMENT = 5
    INVALID_STATE = 6
    INVALID_DATA = 7
    INTEGRITY = 8
    INTERNAL = 9
    IO = 10
    CANCELLED = 11
    TIMEOUT = 12
    UNAUTHENTICATED = 13
    UNAUTHORIZED = 14


class Error(Exception):
    """
    Exception that is the base class of all other error exceptions.

    Attributes:
        message: Human readable message reported by the driver
        status: ADBC status code
        vendor_code: Vendor specific error code, 0 if not provided
        sqlstate: Five character SQLSTATE, empty if not provided
    """

    def __init__(self, message, status=Status.UNKNOWN, vendor_code=0, sqlstate=""):
        self.message = message
        self.status = status
        self.vendor_code = vendor_code
        self.sqlstate = sqlstate
        super().__init__(message)


class InterfaceError(Error):
    """
    Exception raised for errors that are related to the database interface
    rather than the database itself.
    """
    pass


class DatabaseError(Error):
    """
    Exception raised for errors that are related to the database.
    """
    pass


class DataError(DatabaseError):
    """
    Exception raised for errors that are due to problems with the processed data.
    """
    pass


class OperationalError(DatabaseError):
    """
    Exception raised for errors that are related to the database's operation
    and not necessarily under the control of the programmer, e.g. I/O failures,
    timeouts or failed authentication.
    """
    pass


class IntegrityError(DatabaseError):
    """
    Exception raised when the relational integrity of the database is affected.
    """
    pass


class InternalError(DatabaseError):
    """
    Exception raised when the driver encounters an internal error, including
    failures to load the native driver library.
    """
    pass


class ProgrammingError(DatabaseError):
    """
    Exception raised for programming errors, e.g. invalid arguments or an
    object used in the wrong state.
    """
    pass


class NotSupportedError(DatabaseError):
    """
    Exception raised in case a method or API version was used which is not
    supported by the driver.
    """
    pass


_STATUS_ERRORS = {
    Status.NOT_IMPLEMENTED: NotSupportedError,
    Status.NOT_FOUND: ProgrammingError,
    Status.INVALID_ARGUMENT: ProgrammingError,
    Status.INVALID_STATE: ProgrammingError,
    Status.INVALID_DATA: DataError,
    Status.ALREADY_EXISTS: IntegrityError,
    Status.INTEGRITY: IntegrityError,
    Status.IO: OperationalError,
    Status.CANCELLED: OperationalError,
    Status.TIMEOUT: OperationalError,
    Status.UNAUTHENTICATED: OperationalError,
    Status.UNAUTHORIZED: OperationalError,
}


def error_from_status(status, message, vendor_code=0, sqlstate=""):
    """
    Build the exception matching an ADBC status code.

    Args:
        status: ADBC status code (int or Status)
        message: Error message
        vendor_code: Vendor specific error code
        sqlstate: SQLSTATE reported by the driver

    Returns:
        Error: An instance of the mapped subclass; unknown codes map to InternalError
    """
    try:
        status = Status(status)
    except ValueError:
        return InternalError(f"{message} (unrecognized status code {status})", Status.INTERNAL, vendor_code, sqlstate)
    error_class = _STATUS_ERRORS.get(status, InternalError)
    return error_class(message, status, vendor_code, sqlstate)
