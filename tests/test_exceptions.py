"""Tests for custom exceptions."""

import pytest

from sshlist.utils.exceptions import (
    ConfigurationError,
    MenuBackendError,
    SshListError,
)


def test_sshlist_error_is_base():
    """SshListError is base exception for all sshlist errors."""
    assert issubclass(ConfigurationError, SshListError)
    assert issubclass(MenuBackendError, SshListError)


def test_menu_backend_error_has_backend():
    err = MenuBackendError("whiptail not found", backend="whiptail")
    assert err.backend == "whiptail"
    assert "not found" in str(err)


def test_menu_backend_error_without_backend():
    err = MenuBackendError("broken")
    assert err.backend == ""


def test_catch_specific_exception():
    with pytest.raises(SshListError):
        raise ConfigurationError("also caught by base")
