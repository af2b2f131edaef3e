"""
Interfaccia per EnrolInstance Repository seguendo ISP
"""
from abc import abstractmethod
from typing import Optional, List
from src.core.interfaces import IRepository
from src.models.course import Course
from src.models.enrol_instance import EnrolInstance

class IEnrolInstanceRepository(IRepository[EnrolInstance, int]):
    """Interface per la repository delle istanze di iscrizione"""

    @abstractmethod
    def get_meta_link(self, id_course: int, id_linked_course: int) -> Optional[EnrolInstance]:
        """Ottiene l'istanza meta che collega id_linked_course a id_course"""
        pass

    @abstractmethod
    def get_meta_instances(self, id_course: int) -> List[EnrolInstance]:
        """Ottiene le istanze meta di un corso"""
        pass

    @abstractmethod
    def add_meta_instance(self, course: Course, id_linked_course: int) -> EnrolInstance:
        """Crea un'istanza meta abilitata sul corso"""
        pass

    @abstractmethod
    def update_status(self, instance: EnrolInstance, status: int) -> EnrolInstance:
        """Abilita o disabilita un'istanza"""
        pass

    @abstractmethod
    def delete_instance(self, instance: EnrolInstance) -> bool:
        """Elimina un'istanza e le iscrizioni collegate"""
        pass
