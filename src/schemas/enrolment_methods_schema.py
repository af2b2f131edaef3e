from typing import Optional, Dict, Any
from datetime import datetime
from pydantic import BaseModel


class StagedFileResponseSchema(BaseModel):
    """
        Schema di risposta per un file caricato nell'area di appoggio.

        Attributes:
        - id_staged_file (int): Identificativo interno del file caricato.
        - draft_item_id (str): Identificativo da usare per l'elaborazione.
        - filename (str): Nome originale del file.
        - filesize (int): Dimensione in byte.
    """
    id_staged_file: int
    id_user: int
    draft_item_id: str
    filename: str
    filesize: int
    date_add: Optional[datetime] = None

    model_config = {"from_attributes": True}


class EnrolmentUploadResponseSchema(BaseModel):
    file_id: str
    success: bool
    validated: bool
    processed: bool
    lines: int
    report: Optional[str] = None
    error: Optional[Dict[str, Any]] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
