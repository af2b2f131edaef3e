"""
Interfacce base per il sistema seguendo ISP (Interface Segregation Principle)
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Union

T = TypeVar('T')
K = TypeVar('K')

class IRepository(Generic[T, K], ABC):
    """Interface base per repository seguendo ISP"""

    @abstractmethod
    def get_one_by(self, **fields) -> Optional[T]:
        """Ottiene la prima entità che corrisponde ai campi indicati"""
        pass

    @abstractmethod
    def get_all(self, **filters) -> List[T]:
        """Ottiene tutte le entità con filtri opzionali"""
        pass

    @abstractmethod
    def create(self, entity: Union[T, dict]) -> T:
        """Crea una nuova entità"""
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """Aggiorna un'entità esistente"""
        pass

    @abstractmethod
    def delete_entity(self, entity: T) -> bool:
        """Elimina un'entità esistente"""
        pass
