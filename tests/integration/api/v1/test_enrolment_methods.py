"""
Test di integrazione per gli endpoint Enrolment Methods
Testa caricamento, elaborazione e i casi di errore (400, 415, 422, 500)
"""
from unittest.mock import patch

from fastapi import status

from src.core.exceptions import InfrastructureException
from src.core.settings import EnrolmentUploadSettings
from src.models import ENROL_INSTANCE_DISABLED
from tests.factories.course_factory import create_course
from tests.factories.enrolment_factory import create_enrol_instance, enrol_users, create_staged_file
from tests.helpers.asserts import assert_success_response, assert_error_response, meta_links

BASE_URL = "/api/v1/enrolment-methods"


def _stage(client, content: bytes, filename: str = "links.csv", **params):
    params.setdefault("id_user", 5)
    return client.post(
        f"{BASE_URL}/files",
        params=params,
        files={"file": (filename, content, "text/csv")}
    )


# ============================================================================
# POST /files
# ============================================================================

def test_stage_file(client):
    response = _stage(client, b"add,A,B,0,G\n", draft_item_id="draft-1")

    assert_success_response(response, status.HTTP_201_CREATED, ["id_staged_file", "draft_item_id"])
    data = response.json()
    assert data["draft_item_id"] == "draft-1"
    assert data["id_user"] == 5
    assert data["filesize"] == 12
    assert data["filename"] == "links.csv"


def test_stage_file_generates_draft_item_id(client):
    response = _stage(client, b"add,A,B,0,G\n")

    assert_success_response(response, status.HTTP_201_CREATED)
    assert len(response.json()["draft_item_id"]) == 32


def test_stage_file_rejects_extension(client):
    response = _stage(client, b"add,A,B,0,G\n", filename="links.xlsx")

    assert_error_response(response, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "CSV")


def test_stage_file_rejects_txt_extension(client):
    response = _stage(client, b"add,A,B,0,G\n", filename="links.txt")

    assert_error_response(response, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "CSV")


def test_stage_file_rejects_oversized_upload(client):
    settings = EnrolmentUploadSettings(upload_max_file_size_kb=1)

    with patch("src.routers.enrolment_methods.get_upload_settings", return_value=settings):
        response = _stage(client, b"add,A,B,0,G\n" * 100, draft_item_id="big")

    assert_error_response(response, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "too large")
    assert response.json()["details"]["filesize"] == 1200


def test_stage_file_accepts_upload_at_size_limit(client):
    settings = EnrolmentUploadSettings(upload_max_file_size_kb=1)

    with patch("src.routers.enrolment_methods.get_upload_settings", return_value=settings):
        response = _stage(client, b"x" * 1024)

    assert_success_response(response, status.HTTP_201_CREATED)


def test_stage_file_database_error(client):
    with patch(
        "src.routers.enrolment_methods.StagedFileRepository.stage",
        side_effect=InfrastructureException("insert rejected")
    ):
        response = _stage(client, b"add,A,B,0,G\n")

    assert_error_response(response, status.HTTP_500_INTERNAL_SERVER_ERROR, "DATABASE_ERROR")


def test_stage_file_requires_user(client):
    response = client.post(f"{BASE_URL}/files", files={"file": ("links.csv", b"x", "text/csv")})

    assert_error_response(response, 422, "VALIDATION_ERROR")


# ============================================================================
# POST /import
# ============================================================================

def test_import_staged_file(client, db_session):
    parent = create_course(db_session, idnumber="PARENT-X", shortname="parentx")
    child = create_course(db_session, idnumber="CHILD-Y", shortname="childy")
    enrol_users(db_session, create_enrol_instance(db_session, child), 21, 22)
    _stage(client, b"add,PARENT-X,CHILD-Y,0,G\nadd,PARENT-X,CHILD-Y,0,G\nfoo,a,b,c,d\n", draft_item_id="d1")

    response = client.post(f"{BASE_URL}/import", params={"file_id": "d1", "id_user": 5})

    assert_success_response(response, status.HTTP_200_OK, ["report", "lines"])
    data = response.json()
    assert data["success"] is True
    assert data["lines"] == 3
    assert data["report"].split("\n") == [
        "Line 1: childy linked to parentx",
        "Line 2: childy is already linked to parentx",
        'Line 3: invalid operation "foo"',
    ]
    links = meta_links(db_session)
    assert len(links) == 1
    assert links[0].id_course == parent.id_course
    assert sorted(ue.id_user for ue in links[0].user_enrolments) == [21, 22]


def test_import_disabled_link(client, db_session):
    create_course(db_session, idnumber="PARENT-X")
    create_course(db_session, idnumber="CHILD-Y")
    create_staged_file(db_session, id_user=5, draft_item_id="d1", content=b"add,PARENT-X,CHILD-Y,1,G\n")

    response = client.post(f"{BASE_URL}/import", params={"file_id": "d1", "id_user": 5})

    assert_success_response(response)
    db_session.expire_all()
    assert meta_links(db_session)[0].status == ENROL_INSTANCE_DISABLED


def test_import_validate_only(client, db_session):
    create_course(db_session, idnumber="PARENT-X")
    create_course(db_session, idnumber="CHILD-Y")
    create_staged_file(db_session, id_user=5, draft_item_id="d1", content=b"add,PARENT-X,CHILD-Y,0,G\n")

    response = client.post(
        f"{BASE_URL}/import",
        params={"file_id": "d1", "id_user": 5, "validate_only": True}
    )

    assert_success_response(response)
    data = response.json()
    assert data["validated"] is True
    assert data["processed"] is False
    assert data["report"] is None
    assert meta_links(db_session) == []


def test_import_too_few_columns(client, db_session):
    create_course(db_session, idnumber="PARENT-X")
    create_course(db_session, idnumber="CHILD-Y")
    create_staged_file(
        db_session, id_user=5, draft_item_id="d1",
        content=b"add,PARENT-X,CHILD-Y,0,G\nadd,PARENT-X,CHILD-Y\n"
    )

    response = client.post(f"{BASE_URL}/import", params={"file_id": "d1", "id_user": 5})

    assert_error_response(
        response,
        status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        "TOO_FEW_COLUMNS",
        "Line 2: too few columns"
    )
    assert response.json()["processed"] is False
    assert meta_links(db_session) == []


def test_import_too_many_columns(client, db_session):
    create_staged_file(db_session, id_user=5, draft_item_id="d1", content=b"add,A,B,0,G,extra\n")

    response = client.post(f"{BASE_URL}/import", params={"file_id": "d1", "id_user": 5})

    assert_error_response(response, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, "TOO_MANY_COLUMNS")
    assert response.json()["error"]["details"]["line"] == 1


def test_import_unknown_file(client):
    response = client.post(f"{BASE_URL}/import", params={"file_id": "missing", "id_user": 5})

    assert_error_response(
        response,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "CANNOT_READ_SOURCE",
        "Unable to read"
    )


def test_import_does_not_read_server_paths(client, csv_file):
    path = csv_file("add,A,B,0,G\n")

    response = client.post(f"{BASE_URL}/import", params={"file_id": path, "id_user": 5})

    assert_error_response(response, status.HTTP_500_INTERNAL_SERVER_ERROR, "CANNOT_READ_SOURCE")
    assert response.json()["error"]["details"]["message_key"] == "cantreadcsv"


def test_import_file_of_another_user(client, db_session):
    create_staged_file(db_session, id_user=5, draft_item_id="d1")

    response = client.post(f"{BASE_URL}/import", params={"file_id": "d1", "id_user": 6})

    assert_error_response(response, status.HTTP_500_INTERNAL_SERVER_ERROR, "CANNOT_READ_SOURCE")


# ============================================================================
# GET /template
# ============================================================================

def test_template(client):
    response = client.get(f"{BASE_URL}/template")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/csv")
    rows = response.text.strip().split("\n")
    assert [row.split(",")[0] for row in rows] == ["add", "mod", "del"]
    assert all(len(row.split(",")) == 5 for row in rows)


def test_health(client):
    response = client.get("/health")

    assert response.json() == {"status": "healthy"}
