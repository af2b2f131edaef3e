"""
Course Repository seguendo SOLID
"""
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from src.models.course import Course
from src.repository.interfaces.course_repository_interface import ICourseRepository
from src.core.base_repository import BaseRepository
from src.core.exceptions import InfrastructureException

class CourseRepository(BaseRepository[Course, int], ICourseRepository):
    """Course Repository seguendo SOLID"""

    def __init__(self, session: Session):
        super().__init__(session, Course)

    def get_by_idnumber(self, idnumber: str) -> Optional[Course]:
        """Ottiene un corso per idnumber (corrispondenza esatta)"""
        if not idnumber:
            return None
        try:
            return self._session.query(Course).filter(
                Course.idnumber == idnumber
            ).first()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving course by idnumber: {str(e)}")
