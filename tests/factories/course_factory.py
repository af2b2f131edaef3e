from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from src.models import Course


def create_course_data(
    idnumber: str = "COURSE-1",
    shortname: Optional[str] = None,
    fullname: Optional[str] = None
) -> Dict[str, Any]:
    """Crea dati per un Course"""
    return {
        "idnumber": idnumber,
        "shortname": shortname or idnumber.lower(),
        "fullname": fullname or f"Course {idnumber}"
    }


def create_course(db: Session, **kwargs) -> Course:
    """Crea e salva un Course"""
    course = Course(**create_course_data(**kwargs))
    db.add(course)
    db.commit()
    db.refresh(course)
    return course
