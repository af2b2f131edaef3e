from sqlalchemy import Integer, Column, String, DateTime, LargeBinary, func

from src.database import Base


class StagedFile(Base):
    """
    Modello SQLAlchemy per la tabella 'staged_files'.

    Area di appoggio dei file caricati, separata per utente. Più file possono
    condividere lo stesso `draft_item_id`: vale l'ultimo caricato.

    Attributes:
        id_staged_file (Column): Chiave primaria, crescente nel tempo.
        id_user (Column): Utente proprietario del file.
        draft_item_id (Column): Identificativo con cui il file viene richiamato.
        filename (Column): Nome originale del file.
        content (Column): Contenuto binario.
        filesize (Column): Dimensione in byte.
        date_add (Column): Data di caricamento.
    """
    __tablename__ = "staged_files"

    id_staged_file = Column(Integer, primary_key=True, index=True)
    id_user = Column(Integer, nullable=False, index=True)
    draft_item_id = Column(String(100), nullable=False, index=True)
    filename = Column(String(255), nullable=False)
    content = Column(LargeBinary, default=None)
    filesize = Column(Integer, default=0)
    date_add = Column(DateTime, default=func.now())

    def __repr__(self):
        return f"<StagedFile(id={self.id_staged_file}, user={self.id_user}, item={self.draft_item_id}, file={self.filename})>"
