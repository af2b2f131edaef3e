"""
Meta link synchronization service.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from src.repository.enrol_instance_repository import EnrolInstanceRepository
from src.repository.user_enrolment_repository import UserEnrolmentRepository
from src.services.interfaces.meta_sync_service_interface import IMetaSyncService

logger = logging.getLogger(__name__)


class MetaSyncService(IMetaSyncService):
    """
    Propaga nel corso padre le iscrizioni del corso figlio.

    Per ogni istanza meta abilitata del corso: iscrive gli utenti attivi nel
    corso collegato e rimuove quelli che non lo sono più. Le istanze
    disabilitate non vengono toccate.
    """

    def __init__(self, db: Session):
        self.db = db
        self.enrol_instance_repository = EnrolInstanceRepository(db)
        self.user_enrolment_repository = UserEnrolmentRepository(db)

    def sync(self, id_course: int) -> int:
        changes = 0

        for instance in self.enrol_instance_repository.get_meta_instances(id_course):
            if not instance.is_enabled:
                continue

            expected = self.user_enrolment_repository.get_active_user_ids(instance.id_linked_course)
            current = {
                ue.id_user: ue
                for ue in self.user_enrolment_repository.get_by_instance(instance.id_enrol_instance)
            }

            for id_user in sorted(expected - current.keys()):
                self.user_enrolment_repository.enrol_user(instance.id_enrol_instance, id_user)
                changes += 1

            for id_user in sorted(current.keys() - expected):
                self.user_enrolment_repository.delete_entity(current[id_user])
                changes += 1

        logger.info(f"Meta sync for course {id_course}: {changes} enrolments changed")
        return changes
