"""
Base Repository implementation seguendo SRP e OCP
"""
from typing import Generic, TypeVar, Optional, List, Dict, Any, Type, Union
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from src.core.interfaces import IRepository
from src.core.exceptions import InfrastructureException

T = TypeVar('T')
K = TypeVar('K')

class BaseRepository(Generic[T, K], IRepository[T, K]):
    """Repository base con implementazioni comuni seguendo DRY e SRP"""

    def __init__(self, session: Session, model_class: Type[T]):
        self._session = session
        self._model_class = model_class

    def get_one_by(self, **fields) -> Optional[T]:
        """Ottiene la prima entità con corrispondenza esatta su tutti i campi"""
        try:
            query = self._session.query(self._model_class)
            for field_name, value in fields.items():
                query = query.filter(getattr(self._model_class, field_name) == value)
            return query.first()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__}: {str(e)}")

    def get_all(self, **filters) -> List[T]:
        """Ottiene tutte le entità con filtri opzionali"""
        try:
            query = self._session.query(self._model_class)
            query = self._apply_filters(query, filters)
            return query.all()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__} list: {str(e)}")

    def create(self, entity: Union[T, dict]) -> T:
        """Crea una nuova entità"""
        if isinstance(entity, dict):
            model_instance = self._model_class(**entity)
        elif isinstance(entity, self._model_class):
            model_instance = entity
        else:
            raise ValueError(f"Cannot create {self._model_class.__name__} from {type(entity).__name__}")

        try:
            self._session.add(model_instance)
            self._session.commit()
            self._session.refresh(model_instance)
            return model_instance
        except SQLAlchemyError as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error creating {self._model_class.__name__}: {str(e)}")

    def update(self, entity: T) -> T:
        """Aggiorna un'entità esistente"""
        try:
            self._session.merge(entity)
            self._session.commit()
            self._session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error updating {self._model_class.__name__}: {str(e)}")

    def delete_entity(self, entity: T) -> bool:
        """Elimina un'entità esistente"""
        try:
            self._session.delete(entity)
            self._session.commit()
            return True
        except SQLAlchemyError as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error deleting {self._model_class.__name__}: {str(e)}")

    def _apply_filters(self, query, filters: Dict[str, Any]):
        """Applica filtri alla query"""
        for field_name, value in filters.items():
            if value is None:
                continue

            if hasattr(self._model_class, field_name):
                field = getattr(self._model_class, field_name)

                if isinstance(value, list):
                    # Filtro IN per liste
                    query = query.filter(field.in_(value))
                else:
                    query = query.filter(field == value)

        return query
