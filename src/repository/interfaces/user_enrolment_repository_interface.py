"""
Interfaccia per UserEnrolment Repository seguendo ISP
"""
from abc import abstractmethod
from typing import List, Set
from src.core.interfaces import IRepository
from src.models.user_enrolment import UserEnrolment

class IUserEnrolmentRepository(IRepository[UserEnrolment, int]):
    """Interface per la repository delle iscrizioni utente"""

    @abstractmethod
    def get_active_user_ids(self, id_course: int, exclude_enrol: str = 'meta') -> Set[int]:
        """Utenti con iscrizione attiva nel corso tramite istanze abilitate"""
        pass

    @abstractmethod
    def get_by_instance(self, id_enrol_instance: int) -> List[UserEnrolment]:
        """Iscrizioni di una singola istanza"""
        pass

    @abstractmethod
    def enrol_user(self, id_enrol_instance: int, id_user: int) -> UserEnrolment:
        """Iscrive un utente tramite l'istanza"""
        pass
