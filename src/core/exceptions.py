"""
Sistema di gestione errori centralizzato seguendo i principi SOLID
"""
from abc import ABC
from typing import Optional, Dict, Any
from enum import Enum

from src.core.strings import get_string, DEFAULT_COMPONENT

class ErrorCode(Enum):
    """Codici errore standardizzati"""
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"

    # Upload errors
    CANNOT_READ_SOURCE = "CANNOT_READ_SOURCE"
    TOO_FEW_COLUMNS = "TOO_FEW_COLUMNS"
    TOO_MANY_COLUMNS = "TOO_MANY_COLUMNS"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"

class BaseApplicationException(Exception, ABC):
    """Base exception per l'applicazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Converte l'eccezione in dizionario per la risposta API"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code
        }

class ValidationException(BaseApplicationException):
    """Errori di validazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)

class InfrastructureException(BaseApplicationException):
    """Errori di infrastruttura"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 500)

class EnrolmentUploadException(BaseApplicationException):
    """
    Errore bloccante durante la lettura del file CSV.

    Porta la chiave del messaggio, il parametro opzionale (numero di riga)
    e lo status HTTP da restituire al client.
    """

    def __init__(
        self,
        message_key: str,
        param: Any = None,
        status_code: int = 200,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        component: str = DEFAULT_COMPONENT
    ):
        self.message_key = message_key
        self.param = param
        details = {"message_key": message_key}
        if param is not None:
            details["line"] = param
        super().__init__(
            get_string(message_key, component, {"line": param}),
            error_code,
            details,
            status_code
        )

class CannotReadSourceException(EnrolmentUploadException):
    """Il file non può essere aperto in lettura"""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("cantreadcsv", None, 500, ErrorCode.CANNOT_READ_SOURCE)
        if details:
            self.details.update(details)

class TooFewColumnsException(EnrolmentUploadException):
    """Riga con meno di 5 colonne"""

    def __init__(self, line: int):
        super().__init__("toofewcols", line, 415, ErrorCode.TOO_FEW_COLUMNS)

class TooManyColumnsException(EnrolmentUploadException):
    """Riga con più di 5 colonne"""

    def __init__(self, line: int):
        super().__init__("toomanycols", line, 415, ErrorCode.TOO_MANY_COLUMNS)

