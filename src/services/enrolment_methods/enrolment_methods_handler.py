"""
Enrolment Methods Handler - validation and processing of the upload CSV.

Each row adds, modifies or removes the meta link between a parent course
and a child course. Column errors stop the whole file; every other problem
is reported on its own line and processing continues.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from .models import CsvRow, EnrolmentUploadResult, Operation, ReportEntry, EXPECTED_COLUMNS
from .line_reader import CSVLineReader
from .meta_sync_service import MetaSyncService

from src.core.exceptions import (
    EnrolmentUploadException,
    InfrastructureException,
    TooFewColumnsException,
    TooManyColumnsException
)
from src.core.settings import get_upload_settings
from src.core.strings import get_string
from src.models.course import Course
from src.models.enrol_instance import ENROL_INSTANCE_DISABLED, ENROL_INSTANCE_ENABLED
from src.repository.course_repository import CourseRepository
from src.repository.enrol_instance_repository import EnrolInstanceRepository
from src.repository.staged_file_repository import StagedFileRepository
from src.services.interfaces.meta_sync_service_interface import IMetaSyncService

logger = logging.getLogger(__name__)

RowAction = Callable[[Course, Course, CsvRow], str]


class EnrolmentMethodsHandler:
    """
    Valida ed elabora un file CSV di metodi di iscrizione.

    Formato riga: operation,parent_idnumber,child_idnumber,disable,group_idnumber
    """

    def __init__(
        self,
        db: Session,
        file_id: str,
        id_user: Optional[int] = None,
        meta_sync_service: Optional[IMetaSyncService] = None,
        allow_paths: bool = False
    ):
        settings = get_upload_settings()
        self.db = db
        self.file_id = file_id
        self.id_user = id_user
        self.component = settings.upload_component
        self.disabled_flag = settings.upload_disabled_flag

        self.course_repository = CourseRepository(db)
        self.enrol_instance_repository = EnrolInstanceRepository(db)
        self.line_reader = CSVLineReader(file_id, id_user, StagedFileRepository(db), allow_paths)
        self.meta_sync_service = meta_sync_service or MetaSyncService(db)

        self.report_entries: List[ReportEntry] = []

        self._actions: Dict[Operation, RowAction] = {
            Operation.ADD: self._add_link,
            Operation.DELETE: self._delete_link,
            Operation.MODIFY: self._modify_link,
        }

    def validate(self) -> bool:
        """
        Controlla che ogni riga abbia esattamente 5 colonne.

        Si ferma alla prima riga non valida.

        Raises:
            CannotReadSourceException: se il file non può essere aperto
            TooFewColumnsException: riga con meno di 5 colonne (status 415)
            TooManyColumnsException: riga con più di 5 colonne (status 415)
        """
        with self.line_reader.open_rows() as rows:
            for line, csvrow in enumerate(rows, start=1):
                if len(csvrow) < EXPECTED_COLUMNS:
                    raise TooFewColumnsException(line)
                if len(csvrow) > EXPECTED_COLUMNS:
                    raise TooManyColumnsException(line)
        return True

    def process(self) -> str:
        """
        Elabora tutte le righe e restituisce il report, una riga per riga del CSV.

        Gli errori di riga, compresi quelli del database, finiscono nel report;
        solo la lettura del file può sollevare un'eccezione.
        """
        self.report_entries = []
        with self.line_reader.open_rows() as rows:
            for line, csvrow in enumerate(rows, start=1):
                entry = self._process_row(line, csvrow)
                logger.debug(f"Line {line}: {entry.message_key}")
                self.report_entries.append(entry)

        logger.info(f"Processed {len(self.report_entries)} lines from '{self.file_id}'")
        return "\n".join(entry.message for entry in self.report_entries)

    def run(self, validate_only: bool = False) -> EnrolmentUploadResult:
        """
        Validazione seguita (se richiesto) dall'elaborazione.

        Gli errori bloccanti vengono restituiti nel risultato invece di essere rilanciati.
        """
        started_at = datetime.now()
        validated = False
        try:
            validated = self.validate()
            report = None if validate_only else self.process()
        except EnrolmentUploadException as e:
            logger.warning(f"Upload of '{self.file_id}' failed: {e.message_key} {e.param or ''}")
            return EnrolmentUploadResult(
                file_id=self.file_id,
                validated=validated,
                processed=False,
                error=e.to_dict(),
                started_at=started_at,
                completed_at=datetime.now()
            )

        return EnrolmentUploadResult(
            file_id=self.file_id,
            validated=validated,
            processed=not validate_only,
            report=report,
            entries=list(self.report_entries) if not validate_only else [],
            started_at=started_at,
            completed_at=datetime.now()
        )

    def _process_row(self, line: int, csvrow: Sequence[str]) -> ReportEntry:
        row = CsvRow.from_fields(csvrow)
        strings = {"line": line, "op": row.operation}

        operation = Operation.parse(row.operation)
        if operation is Operation.INVALID:
            return self._entry(line, 'invalidop', strings)

        try:
            message_key = self._dispatch(operation, row, strings)
        except InfrastructureException as e:
            logger.error(f"Line {line}: database error, row skipped: {e.message}")
            self.db.rollback()
            message_key = 'rowdberror'
        return self._entry(line, message_key, strings)

    def _dispatch(self, operation: Operation, row: CsvRow, strings: dict) -> str:
        parent = self.course_repository.get_by_idnumber(row.parent_idnumber)
        if parent is None:
            return 'parentnotfound'

        child = self.course_repository.get_by_idnumber(row.child_idnumber)
        if child is None:
            return 'childnotfound'

        strings["parent"] = parent.shortname
        strings["child"] = child.shortname

        return self._actions[operation](parent, child, row)

    def _delete_link(self, parent: Course, child: Course, row: CsvRow) -> str:
        instance = self.enrol_instance_repository.get_meta_link(parent.id_course, child.id_course)
        if instance is None:
            return 'reldoesntexist'
        self.enrol_instance_repository.delete_instance(instance)
        return 'reldeleted'

    def _modify_link(self, parent: Course, child: Course, row: CsvRow) -> str:
        instance = self.enrol_instance_repository.get_meta_link(parent.id_course, child.id_course)
        if instance is None:
            return 'reldoesntexist'
        self.enrol_instance_repository.update_status(instance, self._status_for(row))
        return 'relmodified'

    def _add_link(self, parent: Course, child: Course, row: CsvRow) -> str:
        # Il collegamento inverso renderebbe il figlio padre del proprio padre
        if self.enrol_instance_repository.get_meta_link(child.id_course, parent.id_course):
            return 'childisparent'
        if self.enrol_instance_repository.get_meta_link(parent.id_course, child.id_course):
            return 'relalreadyexists'

        try:
            self.enrol_instance_repository.add_meta_instance(parent, child.id_course)
        except InfrastructureException as e:
            logger.warning(f"Cannot link course {child.id_course} to {parent.id_course}: {e.message}")
            return 'reladderror'

        synced = self._sync_parent(parent)

        # L'istanza nasce abilitata: la disabilitazione è un secondo passo
        if self._status_for(row) == ENROL_INSTANCE_DISABLED:
            self._disable_new_link(parent, child)
        return 'reladded' if synced else 'relsyncerror'

    def _sync_parent(self, parent: Course) -> bool:
        try:
            self.meta_sync_service.sync(parent.id_course)
        except InfrastructureException as e:
            logger.error(f"Meta sync for course {parent.id_course} failed: {e.message}")
            return False
        return True

    def _disable_new_link(self, parent: Course, child: Course) -> None:
        try:
            instance = self.enrol_instance_repository.get_meta_link(parent.id_course, child.id_course)
            if instance is not None:
                self.enrol_instance_repository.update_status(instance, ENROL_INSTANCE_DISABLED)
        except InfrastructureException as e:
            logger.warning(f"Link {parent.id_course} <- {child.id_course} added but not disabled: {e.message}")

    def _status_for(self, row: CsvRow) -> int:
        if row.disable_flag == self.disabled_flag:
            return ENROL_INSTANCE_DISABLED
        return ENROL_INSTANCE_ENABLED

    def _entry(self, line: int, message_key: str, strings: dict) -> ReportEntry:
        return ReportEntry(
            line=line,
            message_key=message_key,
            message=get_string(message_key, self.component, strings)
        )
