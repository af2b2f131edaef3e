"""
StagedFile Repository seguendo SOLID
"""
from typing import Optional
from sqlalchemy import desc
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from src.models.staged_file import StagedFile
from src.repository.interfaces.staged_file_repository_interface import IStagedFileRepository
from src.core.base_repository import BaseRepository
from src.core.exceptions import InfrastructureException

class StagedFileRepository(BaseRepository[StagedFile, int], IStagedFileRepository):
    """StagedFile Repository seguendo SOLID"""

    def __init__(self, session: Session):
        super().__init__(session, StagedFile)

    def get_latest_for_user(self, id_user: int, draft_item_id: str) -> Optional[StagedFile]:
        """Ultimo file caricato (id più alto) dell'utente per l'identificativo"""
        try:
            return self._session.query(StagedFile).filter(
                StagedFile.id_user == id_user,
                StagedFile.draft_item_id == draft_item_id
            ).order_by(desc(StagedFile.id_staged_file)).first()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving staged file: {str(e)}")

    def stage(self, id_user: int, draft_item_id: str, filename: str, content: bytes) -> StagedFile:
        """Salva il file nell'area di appoggio dell'utente"""
        return self.create({
            "id_user": id_user,
            "draft_item_id": draft_item_id,
            "filename": filename,
            "content": content,
            "filesize": len(content),
        })
