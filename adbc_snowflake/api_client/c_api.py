import sys
import ctypes
import logging
from importlib import resources

from ..exceptions import InternalError, Status, error_from_status


_DRIVER_LIB_NAME = "adbc_driver_snowflake"
DEFAULT_ENTRYPOINT = "AdbcDriverSnowflakeInit"

# ADBC_ERROR_VENDOR_CODE_PRIVATE_DATA: marks an ADBC 1.1.0 error, not a vendor code
_VENDOR_CODE_PRIVATE_DATA = -2**31

logger = logging.getLogger(__name__)


class AdbcError(ctypes.Structure):
    pass


class AdbcDriver(ctypes.Structure):
    pass


ERROR_RELEASE = ctypes.CFUNCTYPE(None, ctypes.POINTER(AdbcError))
DRIVER_RELEASE = ctypes.CFUNCTYPE(ctypes.c_uint8, ctypes.POINTER(AdbcDriver), ctypes.POINTER(AdbcError))
DRIVER_INIT = ctypes.CFUNCTYPE(ctypes.c_uint8, ctypes.c_int, ctypes.POINTER(AdbcDriver), ctypes.POINTER(AdbcError))

AdbcError._fields_ = [
    ("message", ctypes.c_char_p),
    ("vendor_code", ctypes.c_int32),
    ("sqlstate", ctypes.c_char * 5),
    ("release", ERROR_RELEASE),
    ("private_data", ctypes.c_void_p),
    ("private_driver", ctypes.c_void_p),
]

# Function table of struct AdbcDriver (adbc.h, ADBC 1.1.0), in declaration order.
# Only release is called from here; the rest is handed over untouched.
_DRIVER_FUNCTIONS = [
    # 1.0.0
    "DatabaseInit", "DatabaseNew", "DatabaseSetOption", "DatabaseRelease",
    "ConnectionCommit", "ConnectionGetInfo", "ConnectionGetObjects",
    "ConnectionGetTableSchema", "ConnectionGetTableTypes", "ConnectionInit",
    "ConnectionNew", "ConnectionSetOption", "ConnectionReadPartition",
    "ConnectionRelease", "ConnectionRollback",
    "StatementBind", "StatementBindStream", "StatementExecuteQuery",
    "StatementExecutePartitions", "StatementGetParameterSchema", "StatementNew",
    "StatementPrepare", "StatementRelease", "StatementSetOption",
    "StatementSetSqlQuery", "StatementSetSubstraitPlan",
    # 1.1.0
    "ErrorGetDetailCount", "ErrorGetDetail", "ErrorFromArrayStream",
    "DatabaseGetOption", "DatabaseGetOptionBytes", "DatabaseGetOptionDouble",
    "DatabaseGetOptionInt", "DatabaseSetOptionBytes", "DatabaseSetOptionDouble",
    "DatabaseSetOptionInt",
    "ConnectionCancel", "ConnectionGetOption", "ConnectionGetOptionBytes",
    "ConnectionGetOptionDouble", "ConnectionGetOptionInt", "ConnectionGetStatistics",
    "ConnectionGetStatisticNames", "ConnectionSetOptionBytes",
    "ConnectionSetOptionDouble", "ConnectionSetOptionInt",
    "StatementCancel", "StatementExecuteSchema", "StatementGetOption",
    "StatementGetOptionBytes", "StatementGetOptionDouble", "StatementGetOptionInt",
    "StatementSetOptionBytes", "StatementSetOptionDouble", "StatementSetOptionInt",
]

AdbcDriver._fields_ = [
    ("private_data", ctypes.c_void_p),
    ("private_manager", ctypes.c_void_p),
    ("release", DRIVER_RELEASE),
] + [(name, ctypes.c_void_p) for name in _DRIVER_FUNCTIONS]


def library_filename(name=_DRIVER_LIB_NAME):
    # Define the file name for each platform
    if sys.platform.startswith("win"):
        return f"{name}.dll"
    elif sys.platform.startswith("darwin"):
        return f"lib{name}.dylib"
    return f"lib{name}.so"


def _get_bundled_path():
    path = resources.files("adbc_snowflake").joinpath("_lib").joinpath(library_filename())
    if path.is_file():
        return path
    return None


def load_library(library_path=None):
    """
    Load the native Snowflake ADBC driver library.

    An explicit path wins. Otherwise a copy bundled with the package is used
    if present, and finally the platform file name is handed to the OS loader.

    Returns:
        tuple: (path of the library, ctypes.CDLL). For a bundled library this
        is the package resource path, not a temporary extraction.

    Raises:
        InternalError: If the library cannot be loaded
    """
    try:
        if library_path is not None:
            library_path = str(library_path)
            logger.debug("Loading ADBC driver library from %s", library_path)
            return library_path, ctypes.CDLL(library_path)

        bundled = _get_bundled_path()
        if bundled is not None:
            # as_file extracts the library to a temporary location
            # when the package is installed as a zip.
            with resources.as_file(bundled) as lib_path:
                logger.debug("Loading bundled ADBC driver library from %s", lib_path)
                return str(bundled), ctypes.CDLL(str(lib_path))

        library_path = library_filename()
        logger.debug("Loading ADBC driver library %s from the system search path", library_path)
        return library_path, ctypes.CDLL(library_path)
    except OSError as e:
        raise InternalError(f"Error with dynamic library: {e}", Status.INTERNAL) from e


def _take_error(error, status, entrypoint):
    if error.message:
        message = error.message.decode("utf-8", errors="replace")
    else:
        message = f"{entrypoint} failed with status {status}"
    sqlstate = error.sqlstate.decode("ascii", errors="replace")
    vendor_code = error.vendor_code
    if vendor_code == _VENDOR_CODE_PRIVATE_DATA:
        vendor_code = 0
    exc = error_from_status(status, message, vendor_code, sqlstate)
    if error.release:
        error.release(ctypes.byref(error))
    return exc


def driver_init(library, version, entrypoint=DEFAULT_ENTRYPOINT):
    """
    Call the driver's init entry point for the requested API version.

    Args:
        library: Loaded driver library
        version: AdbcVersion to request
        entrypoint: Name of the exported init function

    Returns:
        AdbcDriver: The populated driver function table

    Raises:
        InternalError: If the entry point is not exported
        Error: Mapped from the status returned by the entry point
    """
    try:
        init = getattr(library, entrypoint)
    except AttributeError as e:
        raise InternalError(f"Error with dynamic library: {e}", Status.INTERNAL) from e
    init.argtypes = [ctypes.c_int, ctypes.POINTER(AdbcDriver), ctypes.POINTER(AdbcError)]
    init.restype = ctypes.c_uint8

    driver = AdbcDriver()
    error = AdbcError()
    status = init(int(version), ctypes.byref(driver), ctypes.byref(error))
    if status != Status.OK:
        raise _take_error(error, status, entrypoint)
    logger.debug("Initialized ADBC driver via %s (ADBC %s)", entrypoint, version)
    return driver


def driver_release(driver):
    """
    Release a driver previously populated by driver_init.

    Raises:
        Error: Mapped from the status returned by the driver's release callback
    """
    if not driver.release:
        return
    error = AdbcError()
    status = driver.release(ctypes.byref(driver), ctypes.byref(error))
    if status != Status.OK:
        raise _take_error(error, status, "release")
