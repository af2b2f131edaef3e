"""
Interfaccia per MetaSync Service seguendo ISP
"""
from abc import ABC, abstractmethod

class IMetaSyncService(ABC):
    """Interface per la sincronizzazione delle iscrizioni dei collegamenti meta"""

    @abstractmethod
    def sync(self, id_course: int) -> int:
        """
        Allinea le iscrizioni delle istanze meta del corso a quelle dei corsi collegati.

        Returns:
            Numero di iscrizioni aggiunte o rimosse
        """
        pass
