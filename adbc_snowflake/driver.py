"""
ADBC Snowflake Driver Objects

This module defines the Driver class, a handle on an initialized native
Snowflake ADBC driver.
"""
from .api_client import c_api


class Driver:
    """
    Driver objects represent an initialized native driver bound to one ADBC version.

    Drivers are created with Driver.try_new, Driver.try_from or Builder.try_load
    and are owned by the caller, who releases them with release() or by using
    the driver as a context manager.
    """

    def __init__(self, version, library_path, library, driver):
        self.version = version
        self.library_path = library_path
        self._library = library
        self._driver = driver
        self._released = False

    @classmethod
    def try_new(cls, version, library_path=None, entrypoint=c_api.DEFAULT_ENTRYPOINT):
        """
        Load the native driver and initialize it for the given ADBC version.

        Args:
            version: AdbcVersion to request from the driver
            library_path: Explicit path of the driver library, optional
            entrypoint: Name of the driver's init function

        Returns:
            Driver: The initialized driver

        Raises:
            InternalError: If the library or its entry point cannot be loaded
            Error: If the driver refuses to initialize
        """
        library_path, library = c_api.load_library(library_path)
        driver = c_api.driver_init(library, version, entrypoint)
        return cls(version, library_path, library, driver)

    @classmethod
    def try_from(cls, builder):
        """
        Build a Driver from a Builder. Same as builder.try_load().
        """
        return builder.try_load()

    def release(self):
        """
        Release the native driver. Calling it again is a no-op.
        """
        if self._released:
            return
        self._released = True
        c_api.driver_release(self._driver)

    def is_released(self):
        return self._released

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()

    def __repr__(self):
        return f"Driver(version={self.version}, library_path={self.library_path!r})"
