"""
Enrolment Methods Upload Package

Validazione ed elaborazione dei file CSV che aggiungono, modificano o
rimuovono i collegamenti meta tra corsi padre e corsi figlio.
"""

from .models import Operation, CsvRow, ReportEntry, EnrolmentUploadResult
from .line_reader import CSVLineReader
from .meta_sync_service import MetaSyncService
from .enrolment_methods_handler import EnrolmentMethodsHandler

__all__ = [
    'Operation',
    'CsvRow',
    'ReportEntry',
    'EnrolmentUploadResult',
    'CSVLineReader',
    'MetaSyncService',
    'EnrolmentMethodsHandler'
]
