"""
Custom exceptions for the application.
Every record store operation reports failures through one of these types.
"""


class BaseApplicationException(Exception):
    """Base exception for all application-specific exceptions"""
    default_message = "An application error occurred"

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationException):
    """Raised when a payload is missing required fields or is malformed"""
    default_message = "Dados inválidos."


class NotFoundError(BaseApplicationException):
    """Raised when a record id does not exist"""
    default_message = "Registro não encontrado."

    def __init__(self, resource_type=None, resource_id=None, **kwargs):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(**kwargs)


class InternalError(BaseApplicationException):
    """
    Raised when an operation fails for any other reason (storage faults,
    unexpected exceptions). Carries the original failure message verbatim.
    """
    default_message = "Erro interno do servidor."
