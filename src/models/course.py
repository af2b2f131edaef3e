from sqlalchemy import Integer, Column, String, DateTime, func
from sqlalchemy.orm import relationship

from src.database import Base


class Course(Base):
    """
        Modello SQLAlchemy per la tabella 'courses'.

        Il corso è identificato verso l'esterno dal campo `idnumber`, usato
        nei file CSV di upload per indicare corso padre e corso figlio.

        Attributes:
            __tablename__ (str): Nome della tabella nel database.
            id_course (Column): Chiave primaria del corso.
            idnumber (Column): Identificativo esterno del corso, univoco.
            shortname (Column): Nome breve, usato nei messaggi del report.
            fullname (Column): Nome completo del corso.
    """
    __tablename__ = "courses"

    id_course = Column(Integer, primary_key=True, index=True)
    idnumber = Column(String(100), unique=True, index=True)
    shortname = Column(String(255), nullable=False)
    fullname = Column(String(255), default=None)
    date_add = Column(DateTime, default=func.now())

    enrol_instances = relationship(
        "EnrolInstance",
        back_populates="course",
        foreign_keys="EnrolInstance.id_course"
    )

    def __repr__(self):
        return f"<Course(id={self.id_course}, idnumber={self.idnumber}, shortname={self.shortname})>"
