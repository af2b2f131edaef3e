"""
EnrolInstance Repository seguendo SOLID
"""
import logging
from typing import Optional, List
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from src.models.course import Course
from src.models.enrol_instance import EnrolInstance, ENROL_INSTANCE_ENABLED
from src.repository.interfaces.enrol_instance_repository_interface import IEnrolInstanceRepository
from src.core.base_repository import BaseRepository
from src.core.exceptions import InfrastructureException

logger = logging.getLogger(__name__)

META_ENROL = 'meta'

class EnrolInstanceRepository(BaseRepository[EnrolInstance, int], IEnrolInstanceRepository):
    """EnrolInstance Repository seguendo SOLID"""

    def __init__(self, session: Session):
        super().__init__(session, EnrolInstance)

    def get_meta_link(self, id_course: int, id_linked_course: int) -> Optional[EnrolInstance]:
        """Ottiene il collegamento meta id_course -> id_linked_course, se presente"""
        return self.get_one_by(
            enrol=META_ENROL,
            id_course=id_course,
            id_linked_course=id_linked_course
        )

    def get_meta_instances(self, id_course: int) -> List[EnrolInstance]:
        """Ottiene le istanze meta del corso ordinate per sortorder"""
        try:
            return self._session.query(EnrolInstance).filter(
                EnrolInstance.enrol == META_ENROL,
                EnrolInstance.id_course == id_course
            ).order_by(EnrolInstance.sortorder, EnrolInstance.id_enrol_instance).all()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving meta instances: {str(e)}")

    def add_meta_instance(self, course: Course, id_linked_course: int) -> EnrolInstance:
        """
        Crea un'istanza meta abilitata in coda alle istanze del corso.

        Lo stato iniziale è sempre abilitato: per disabilitarla serve una
        chiamata successiva a update_status.

        Raises:
            InfrastructureException: se il database rifiuta l'inserimento
        """
        try:
            max_sortorder = self._session.query(func.max(EnrolInstance.sortorder)).filter(
                EnrolInstance.id_course == course.id_course
            ).scalar()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error reading sortorder: {str(e)}")

        instance = self.create({
            "enrol": META_ENROL,
            "id_course": course.id_course,
            "id_linked_course": id_linked_course,
            "status": ENROL_INSTANCE_ENABLED,
            "sortorder": 0 if max_sortorder is None else max_sortorder + 1,
        })
        logger.info(f"Meta instance {instance.id_enrol_instance} added: course {course.id_course} <- {id_linked_course}")
        return instance

    def update_status(self, instance: EnrolInstance, status: int) -> EnrolInstance:
        """Imposta lo stato dell'istanza; nessuna scrittura se invariato"""
        if instance.status == status:
            return instance
        instance.status = status
        return self.update(instance)

    def delete_instance(self, instance: EnrolInstance) -> bool:
        """Elimina l'istanza; le iscrizioni utente collegate vengono eliminate in cascata"""
        logger.info(f"Deleting enrol instance {instance.id_enrol_instance} ({instance.enrol})")
        return self.delete_entity(instance)
