from sqlalchemy import Integer, Column, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from src.database import Base

USER_ENROLMENT_ACTIVE = 0
USER_ENROLMENT_SUSPENDED = 1


class UserEnrolment(Base):
    """
    Modello SQLAlchemy per la tabella 'user_enrolments'.

    Iscrizione di un utente a un corso attraverso una specifica istanza di iscrizione.
    """
    __tablename__ = "user_enrolments"

    id_user_enrolment = Column(Integer, primary_key=True, index=True)
    id_enrol_instance = Column(Integer, ForeignKey('enrol_instances.id_enrol_instance'), nullable=False, index=True)
    id_user = Column(Integer, nullable=False, index=True)
    status = Column(Integer, default=USER_ENROLMENT_ACTIVE, nullable=False)
    date_add = Column(DateTime, default=func.now())

    enrol_instance = relationship("EnrolInstance", back_populates="user_enrolments")

    __table_args__ = (
        Index('idx_user_enrolment_instance_user', 'id_enrol_instance', 'id_user', unique=True),
    )
