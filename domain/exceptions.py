"""
Domain Exceptions - Falhas de busca de clima
Clean Architecture: Domain layer exceptions
"""
from domain.constants import Messages


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class WeatherError(DomainException):
    """
    Base para falhas da busca remota de clima

    A mensagem é sempre o texto fixo exibido ao usuário;
    contexto adicional (status HTTP, causa) vai em details.
    """
    default_message = Messages.UNKNOWN_ERROR

    def __init__(self, details: dict = None):
        super().__init__(self.default_message, details=details)


class WeatherDecodingError(WeatherError):
    """Raised when a 200 response body cannot be decoded into WeatherData"""
    default_message = Messages.DECODING_ERROR


class WeatherServerError(WeatherError):
    """Raised when the API answers with a non-200 status"""
    default_message = Messages.SERVER_ERROR


class WeatherUnknownError(WeatherError):
    """Raised when no response arrives at all (transport failure)"""
    default_message = Messages.UNKNOWN_ERROR
