"""
pytest configuration and fixtures for the ADBC Snowflake loader tests.
"""

from unittest.mock import patch

import pytest

from adbc_snowflake.api_client import c_api
from adbc_snowflake.builder import Builder


class FakeDriverLibrary:
    """
    Stands in for the native driver library.

    Exports an init function (a real ctypes callback) under the entry point
    name, so c_api drives it exactly like the shared library.
    """

    def __init__(self, status=0, message=None, vendor_code=0, sqlstate=b"",
                 release_status=0, entrypoint=c_api.DEFAULT_ENTRYPOINT):
        self.init_versions = []
        self.release_calls = 0
        self.error_release_calls = 0
        self._status = status
        self._message = message
        self._vendor_code = vendor_code
        self._sqlstate = sqlstate
        self._release_status = release_status
        # Callbacks must stay referenced for as long as the driver may call them
        self._driver_release = c_api.DRIVER_RELEASE(self._release)
        self._error_release = c_api.ERROR_RELEASE(self._release_error)
        setattr(self, entrypoint, c_api.DRIVER_INIT(self._init))

    def _fill_error(self, error, status):
        if self._message is not None:
            error.contents.message = self._message
        error.contents.vendor_code = self._vendor_code
        error.contents.sqlstate = self._sqlstate
        error.contents.release = self._error_release
        return status

    def _init(self, version, driver, error):
        self.init_versions.append(version)
        if self._status != 0:
            return self._fill_error(error, self._status)
        driver.contents.release = self._driver_release
        return 0

    def _release(self, driver, error):
        self.release_calls += 1
        if self._release_status != 0:
            return self._fill_error(error, self._release_status)
        return 0

    def _release_error(self, error):
        self.error_release_calls += 1


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment and .env files out of the tests."""
    monkeypatch.delenv(Builder.ADBC_VERSION_ENV, raising=False)
    with patch("adbc_snowflake.builder.load_dotenv") as load_dotenv:
        yield load_dotenv


@pytest.fixture
def fake_library():
    """Factory for fake driver libraries."""
    def _create_library(**kwargs):
        return FakeDriverLibrary(**kwargs)

    return _create_library
