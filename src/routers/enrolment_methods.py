"""
Enrolment Methods Router

Endpoints per caricare ed elaborare i file CSV dei collegamenti meta tra corsi.
"""
import os
import uuid
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Query, status
from fastapi.responses import JSONResponse, StreamingResponse

from src.core.dependencies import db_dependency
from src.core.exceptions import ValidationException, ErrorCode
from src.core.settings import get_upload_settings
from src.repository.staged_file_repository import StagedFileRepository
from src.schemas.enrolment_methods_schema import StagedFileResponseSchema, EnrolmentUploadResponseSchema
from src.services.enrolment_methods.enrolment_methods_handler import EnrolmentMethodsHandler


router = APIRouter(
    prefix="/api/v1/enrolment-methods",
    tags=["Enrolment Methods"]
)

TEMPLATE_ROWS = [
    "add,PARENT-IDNUMBER,CHILD-IDNUMBER,0,GROUP-IDNUMBER",
    "mod,PARENT-IDNUMBER,CHILD-IDNUMBER,1,GROUP-IDNUMBER",
    "del,PARENT-IDNUMBER,CHILD-IDNUMBER,0,GROUP-IDNUMBER",
]


@router.post(
    "/files",
    status_code=status.HTTP_201_CREATED,
    response_model=StagedFileResponseSchema,
    response_description="File caricato nell'area di appoggio"
)
async def stage_file(
    db: db_dependency,
    file: UploadFile = File(..., description="CSV file to stage"),
    id_user: int = Query(..., gt=0, description="Owner of the staging area"),
    draft_item_id: Optional[str] = Query(None, max_length=100, description="Identifier to reuse; generated if missing")
):
    """
    Carica un file CSV nell'area di appoggio dell'utente.

    Il file viene poi richiamato da `/import` tramite `draft_item_id`.
    Caricando più file con lo stesso identificativo vale l'ultimo.
    """
    settings = get_upload_settings()

    if not file.filename:
        raise ValidationException(
            "Required field 'file' is missing",
            ErrorCode.REQUIRED_FIELD_MISSING,
            {"field_name": "file"}
        )

    extension = os.path.splitext(file.filename)[1].lower()
    if extension not in settings.upload_allowed_extensions:
        raise ValidationException(
            "Il file deve essere in formato CSV",
            ErrorCode.VALIDATION_ERROR,
            {"filename": file.filename, "allowed": settings.upload_allowed_extensions}
        )

    content = await file.read()
    max_size = settings.upload_max_file_size_kb * 1024
    if len(content) > max_size:
        raise ValidationException(
            f"File too large: {len(content)} bytes (max {max_size})",
            ErrorCode.VALIDATION_ERROR,
            {"filename": file.filename, "filesize": len(content)}
        )

    staged_file = StagedFileRepository(db).stage(
        id_user=id_user,
        draft_item_id=draft_item_id or uuid.uuid4().hex,
        filename=file.filename,
        content=content
    )
    return staged_file


@router.post(
    "/import",
    status_code=status.HTTP_200_OK,
    response_model=EnrolmentUploadResponseSchema,
    response_description="File elaborato"
)
async def import_enrolment_methods(
    db: db_dependency,
    file_id: str = Query(..., min_length=1, description="draft_item_id of a file staged through /files"),
    id_user: Optional[int] = Query(None, gt=0, description="Owner of the staged file"),
    validate_only: bool = Query(False, description="If true, only check the column count")
):
    """
    Valida ed elabora un file di metodi di iscrizione.

    **Formato CSV** (nessuna riga di intestazione, 5 colonne):
    ```csv
    operation,parent_idnumber,child_idnumber,disable,group_idnumber
    add,MATH-101,MATH-101-A,0,G1
    ```

    - **operation**: `add`, `del` o `mod`
    - **disable**: `1` crea/imposta il collegamento disabilitato

    Un file illeggibile risponde 500, un numero di colonne errato 415.
    Gli errori delle singole righe sono riportati nel campo `report`.
    """
    handler = EnrolmentMethodsHandler(db, file_id, id_user)
    result = handler.run(validate_only=validate_only)

    if not result.success:
        return JSONResponse(
            status_code=result.error["status_code"],
            content=result.to_dict()
        )
    return result.to_dict()


@router.get(
    "/template",
    status_code=status.HTTP_200_OK,
    response_description="CSV template downloaded"
)
async def get_csv_template():
    """
    Scarica un file di esempio con le tre operazioni supportate.
    """
    content = "\n".join(TEMPLATE_ROWS) + "\n"
    return StreamingResponse(
        iter([content]),
        media_type="text/csv",
        headers={
            "Content-Disposition": "attachment; filename=enrolment_methods_template.csv"
        }
    )
