"""
Interfaccia per Course Repository seguendo ISP
"""
from abc import abstractmethod
from typing import Optional
from src.core.interfaces import IRepository
from src.models.course import Course

class ICourseRepository(IRepository[Course, int]):
    """Interface per la repository dei corsi"""

    @abstractmethod
    def get_by_idnumber(self, idnumber: str) -> Optional[Course]:
        """Ottiene un corso per identificativo esterno"""
        pass
