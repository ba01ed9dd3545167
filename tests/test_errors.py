"""Domain error types: hierarchy and message preservation."""

from __future__ import annotations

import pytest

from nulljoin.domain.errors import (
    ConfigurationError,
    JoinerConfigurationError,
    NullElementError,
)


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("Invalid [join] configuration: join.null_policy: bad")

    assert str(exc) == "Invalid [join] configuration: join.null_policy: bad"


@pytest.mark.os_agnostic
def test_configuration_error_is_not_a_value_error() -> None:
    """Configuration problems are kept apart from argument problems."""
    assert not issubclass(ConfigurationError, ValueError)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("error_type", [NullElementError, JoinerConfigurationError])
def test_joiner_errors_are_value_errors(error_type: type[ValueError]) -> None:
    """Joiner errors can be caught as ValueError."""
    with pytest.raises(ValueError, match="index 2"):
        raise error_type("index 2")
