"""
Interfaccia per StagedFile Repository seguendo ISP
"""
from abc import abstractmethod
from typing import Optional
from src.core.interfaces import IRepository
from src.models.staged_file import StagedFile

class IStagedFileRepository(IRepository[StagedFile, int]):
    """Interface per la repository dei file caricati"""

    @abstractmethod
    def get_latest_for_user(self, id_user: int, draft_item_id: str) -> Optional[StagedFile]:
        """Ultimo file caricato dall'utente con l'identificativo indicato"""
        pass

    @abstractmethod
    def stage(self, id_user: int, draft_item_id: str, filename: str, content: bytes) -> StagedFile:
        """Salva un file nell'area di appoggio dell'utente"""
        pass
