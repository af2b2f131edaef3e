"""
CSV Line Reader for the enrolment methods upload.

Resolves a file identifier to a readable stream: the latest file staged by
the user under that identifier or, for trusted callers, a path on disk.
"""
from __future__ import annotations

import csv
import io
import logging
import os
from contextlib import contextmanager
from typing import Iterator, List, Optional

from src.core.exceptions import CannotReadSourceException
from src.repository.interfaces.staged_file_repository_interface import IStagedFileRepository

logger = logging.getLogger(__name__)


class CSVLineReader:
    """
    Lettore a passata singola delle righe CSV.

    Ogni chiamata a `open_rows()` apre un nuovo handle e lo chiude all'uscita
    dal blocco `with`, anche in caso di eccezione.

    I percorsi su disco sono accettati solo con `allow_paths=True` (riga di
    comando); altrimenti `file_id` è sempre un `draft_item_id` dell'utente.
    """

    def __init__(
        self,
        file_id: str,
        id_user: Optional[int],
        staged_file_repository: IStagedFileRepository,
        allow_paths: bool = False
    ):
        self.file_id = file_id
        self.id_user = id_user
        self.allow_paths = allow_paths
        self._staged_file_repository = staged_file_repository

    @contextmanager
    def open_file(self) -> Iterator[io.StringIO]:
        """
        Apre il file come stream di testo.

        Raises:
            CannotReadSourceException: se il percorso non è leggibile, se non esiste
                un file caricato corrispondente o se il suo contenuto non è disponibile
        """
        if self.allow_paths and os.path.isfile(self.file_id):
            content = self._read_path(self.file_id)
        else:
            content = self._read_staged()

        stream = io.StringIO(self.decode(content), newline='')
        try:
            yield stream
        finally:
            stream.close()

    @contextmanager
    def open_rows(self) -> Iterator[Iterator[List[str]]]:
        """Come open_file, ma restituisce direttamente le righe CSV"""
        with self.open_file() as stream:
            yield self._parse(csv.reader(stream))

    @staticmethod
    def decode(content: bytes) -> str:
        """UTF-8 (rimuovendo il BOM) con fallback su Latin-1"""
        try:
            return content.decode('utf-8-sig')
        except UnicodeDecodeError:
            return content.decode('latin-1')

    def _parse(self, reader) -> Iterator[List[str]]:
        # csv.Error (campo oltre field_size_limit, NUL) rende il file illeggibile
        try:
            yield from reader
        except csv.Error as e:
            logger.warning(f"Malformed CSV '{self.file_id}' at line {reader.line_num}: {e}")
            raise CannotReadSourceException({
                "file_id": self.file_id,
                "line": reader.line_num,
                "reason": str(e)
            }) from e

    def _read_path(self, path: str) -> bytes:
        try:
            with open(path, 'rb') as handle:
                return handle.read()
        except OSError as e:
            logger.warning(f"Cannot open CSV file {path}: {e}")
            raise CannotReadSourceException({"file_id": path}) from e

    def _read_staged(self) -> bytes:
        staged_file = None
        if self.id_user is not None:
            staged_file = self._staged_file_repository.get_latest_for_user(self.id_user, self.file_id)

        if staged_file is None:
            logger.warning(f"No staged file '{self.file_id}' for user {self.id_user}")
            raise CannotReadSourceException({"file_id": self.file_id})

        if staged_file.content is None:
            logger.warning(f"Staged file {staged_file.id_staged_file} has no content")
            raise CannotReadSourceException({"file_id": self.file_id})

        return staged_file.content
