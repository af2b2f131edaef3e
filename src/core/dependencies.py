"""
Dependency injection per FastAPI seguendo DIP
"""
from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session
from src.database import get_db

# Type aliases per le dipendenze
db_dependency = Annotated[Session, Depends(get_db)]
