"""
Testes das exceções de domínio
"""
import pytest

from domain.exceptions import (
    DomainException,
    WeatherDecodingError,
    WeatherError,
    WeatherServerError,
    WeatherUnknownError,
)


@pytest.mark.parametrize("error_class,message", [
    (WeatherDecodingError, "Failed to decode the data."),
    (WeatherServerError, "Server error. Please try again later."),
    (WeatherUnknownError, "An unknown error occurred. Please try again."),
])
def test_fixed_user_facing_messages(error_class, message):
    error = error_class(details={'city': 'x'})

    assert str(error) == message
    assert error.message == message
    assert error.details == {'city': 'x'}
    assert isinstance(error, WeatherError)
    assert isinstance(error, DomainException)


def test_details_default_to_empty_dict():
    assert WeatherServerError().details == {}


def test_domain_exception_keeps_message_and_details():
    error = DomainException("boom", details={'k': 1})
    assert str(error) == "boom"
    assert error.details == {'k': 1}
