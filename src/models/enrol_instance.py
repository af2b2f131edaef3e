from sqlalchemy import Integer, Column, String, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from src.database import Base

ENROL_INSTANCE_ENABLED = 0
ENROL_INSTANCE_DISABLED = 1


class EnrolInstance(Base):
    """
    Modello SQLAlchemy per la tabella 'enrol_instances'.

    Un'istanza con `enrol = 'meta'` collega il corso `id_course` (padre) al corso
    `id_linked_course` (figlio): gli iscritti del figlio vengono sincronizzati nel padre.
    Il collegamento è direzionale, A->B è diverso da B->A.

    Attributes:
        __tablename__ (str): Il nome della tabella nel database.
        id_enrol_instance (Column): Chiave primaria.
        enrol (Column): Nome del metodo di iscrizione (manual, meta, ...).
        id_course (Column): Corso a cui appartiene l'istanza.
        id_linked_course (Column): Corso collegato, valorizzato solo per le istanze meta.
        status (Column): 0 abilitata, 1 disabilitata.
        sortorder (Column): Posizione dell'istanza tra quelle del corso.
        date_add (Column): Data di creazione del record.
        date_upd (Column): Data di ultimo aggiornamento del record.
    """
    __tablename__ = "enrol_instances"

    id_enrol_instance = Column(Integer, primary_key=True, index=True)
    enrol = Column(String(20), nullable=False, index=True)
    id_course = Column(Integer, ForeignKey('courses.id_course'), nullable=False, index=True)
    id_linked_course = Column(Integer, ForeignKey('courses.id_course'), default=None, index=True)
    status = Column(Integer, default=ENROL_INSTANCE_ENABLED, nullable=False)
    sortorder = Column(Integer, default=0, nullable=False)
    date_add = Column(DateTime, default=func.now())
    date_upd = Column(DateTime, default=func.now(), onupdate=func.now())

    course = relationship("Course", back_populates="enrol_instances", foreign_keys=[id_course])
    linked_course = relationship("Course", foreign_keys=[id_linked_course])
    user_enrolments = relationship(
        "UserEnrolment",
        back_populates="enrol_instance",
        cascade="all, delete-orphan"
    )

    # Un solo collegamento per metodo, corso padre e corso figlio
    __table_args__ = (
        Index('idx_enrol_course_linked', 'enrol', 'id_course', 'id_linked_course', unique=True),
    )

    @property
    def is_enabled(self) -> bool:
        return self.status == ENROL_INSTANCE_ENABLED

    def __repr__(self):
        return (
            f"<EnrolInstance(id={self.id_enrol_instance}, enrol={self.enrol}, "
            f"course={self.id_course}, linked={self.id_linked_course}, status={self.status})>"
        )
