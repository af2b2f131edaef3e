"""
Data models for the enrolment methods upload.

Immutable dataclasses for rows, report entries and the final result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, List, Optional, Sequence

from .param_cleaner import clean_alphanum, clean_text

EXPECTED_COLUMNS = 5


class Operation(Enum):
    """Operazione richiesta dalla prima colonna del CSV"""
    ADD = "add"
    DELETE = "del"
    MODIFY = "mod"
    INVALID = None

    @classmethod
    def parse(cls, code: str) -> "Operation":
        """Corrispondenza esatta (case sensitive); qualsiasi altro valore è INVALID"""
        for operation in (cls.ADD, cls.DELETE, cls.MODIFY):
            if operation.value == code:
                return operation
        return cls.INVALID


@dataclass(frozen=True)
class CsvRow:
    """
    Riga del CSV con i valori già puliti.

    Attributes:
        operation: Codice operazione (solo caratteri alfanumerici)
        parent_idnumber: idnumber del corso padre
        child_idnumber: idnumber del corso figlio
        disable_flag: Valore della colonna di disabilitazione
        group_idnumber: Colonna riservata, letta ma non usata
    """
    operation: str
    parent_idnumber: str
    child_idnumber: str
    disable_flag: str
    group_idnumber: str

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "CsvRow":
        """Costruisce la riga dai campi grezzi; i campi mancanti valgono stringa vuota"""
        values = list(fields[:EXPECTED_COLUMNS])
        values += [''] * (EXPECTED_COLUMNS - len(values))
        return cls(
            operation=clean_alphanum(values[0]),
            parent_idnumber=clean_text(values[1]),
            child_idnumber=clean_text(values[2]),
            disable_flag=clean_text(values[3]),
            group_idnumber=clean_text(values[4]),
        )


@dataclass(frozen=True)
class ReportEntry:
    """Messaggio del report per una riga (numero di riga 1-based)"""
    line: int
    message_key: str
    message: str


@dataclass(frozen=True)
class EnrolmentUploadResult:
    """
    Risultato di un'elaborazione completa (validazione + processo).

    Un errore bloccante non viene rilanciato: finisce in `error` e
    `report` resta None.

    Attributes:
        file_id: Identificativo del file elaborato
        validated: Se la validazione delle colonne è passata
        processed: Se il file è stato elaborato (False in validate_only)
        report: Report testuale, una riga per riga del CSV
        entries: Messaggi del report in ordine di riga
        error: Dettagli dell'errore bloccante, se presente
        started_at: Timestamp inizio operazione
        completed_at: Timestamp fine operazione
    """
    file_id: str
    validated: bool
    processed: bool
    report: Optional[str] = None
    entries: List[ReportEntry] = field(default_factory=list)
    error: Optional[Dict[str, Any]] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def lines(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        """Converte in dizionario per risposta API"""
        return {
            "file_id": self.file_id,
            "success": self.success,
            "validated": self.validated,
            "processed": self.processed,
            "lines": self.lines,
            "report": self.report,
            "error": self.error,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None
        }
