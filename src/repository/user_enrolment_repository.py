"""
UserEnrolment Repository seguendo SOLID
"""
from typing import List, Set
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from src.models.enrol_instance import EnrolInstance, ENROL_INSTANCE_ENABLED
from src.models.user_enrolment import UserEnrolment, USER_ENROLMENT_ACTIVE
from src.repository.interfaces.user_enrolment_repository_interface import IUserEnrolmentRepository
from src.core.base_repository import BaseRepository
from src.core.exceptions import InfrastructureException

class UserEnrolmentRepository(BaseRepository[UserEnrolment, int], IUserEnrolmentRepository):
    """UserEnrolment Repository seguendo SOLID"""

    def __init__(self, session: Session):
        super().__init__(session, UserEnrolment)

    def get_active_user_ids(self, id_course: int, exclude_enrol: str = 'meta') -> Set[int]:
        """
        Utenti iscritti al corso con iscrizione attiva su un'istanza abilitata.

        Le istanze del metodo `exclude_enrol` sono ignorate, così un collegamento
        meta non propaga iscrizioni a sua volta ereditate.
        """
        try:
            rows = self._session.query(UserEnrolment.id_user).join(
                EnrolInstance,
                EnrolInstance.id_enrol_instance == UserEnrolment.id_enrol_instance
            ).filter(
                EnrolInstance.id_course == id_course,
                EnrolInstance.enrol != exclude_enrol,
                EnrolInstance.status == ENROL_INSTANCE_ENABLED,
                UserEnrolment.status == USER_ENROLMENT_ACTIVE
            ).distinct().all()
            return {row.id_user for row in rows}
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving enrolled users: {str(e)}")

    def get_by_instance(self, id_enrol_instance: int) -> List[UserEnrolment]:
        """Iscrizioni di una singola istanza"""
        return self.get_all(id_enrol_instance=id_enrol_instance)

    def enrol_user(self, id_enrol_instance: int, id_user: int) -> UserEnrolment:
        """Iscrive un utente con stato attivo"""
        return self.create({
            "id_enrol_instance": id_enrol_instance,
            "id_user": id_user,
            "status": USER_ENROLMENT_ACTIVE,
        })
