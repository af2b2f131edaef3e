from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
import os
from dotenv import load_dotenv

load_dotenv()
SQLALCHEMY_DATABASE_URL = os.environ.get("DATABASE_URL") or \
    f'mysql+pymysql://{os.environ.get("DATABASE_MAIN_USER")}:{os.environ.get("DATABASE_MAIN_PASSWORD")}@{os.environ.get("DATABASE_MAIN_ADDRESS")}:{os.environ.get("DATABASE_MAIN_PORT")}/{os.environ.get("DATABASE_MAIN_NAME")}'


engine = create_engine(SQLALCHEMY_DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base per controllare il nostro DB
Base = declarative_base()


def get_db():
    """
        Generatore di sessione database.

        Crea una sessione database e la chiude automaticamente una volta completate le operazioni.
        È ideale per essere utilizzato con FastAPI come dipendenza per gestire la sessione al database.

        Yields:
            SessionLocal: Una sessione di SQLAlchemy aperta.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Crea le tabelle dei modelli registrati se non esistono già"""
    # Importa i modelli per registrarli su Base.metadata
    import src.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
