"""
Test per le parti senza database: pulizia campi, operazioni, stringhe ed eccezioni
"""
import pytest

from src.core.exceptions import (
    CannotReadSourceException,
    TooFewColumnsException,
    TooManyColumnsException
)
from src.core.strings import get_string
from src.services.enrolment_methods.models import CsvRow, Operation
from src.services.enrolment_methods.param_cleaner import clean_alphanum, clean_text


class TestOperation:

    @pytest.mark.parametrize("code,expected", [
        ("add", Operation.ADD),
        ("del", Operation.DELETE),
        ("mod", Operation.MODIFY),
    ])
    def test_known_codes(self, code, expected):
        assert Operation.parse(code) is expected

    @pytest.mark.parametrize("code", ["ADD", "Del", "delete", "", "xyz"])
    def test_other_codes_are_invalid(self, code):
        assert Operation.parse(code) is Operation.INVALID


class TestParamCleaner:

    def test_alphanum_keeps_letters_and_digits(self):
        assert clean_alphanum(" a-d_d! ") == "add"
        assert clean_alphanum("mod2") == "mod2"

    def test_alphanum_none(self):
        assert clean_alphanum(None) == ""

    def test_text_strips_tags_and_control_chars(self):
        assert clean_text("  <i>MATH</i>-101\x00 ") == "MATH-101"

    def test_text_keeps_inner_spaces(self):
        assert clean_text("Course A & B") == "Course A & B"


class TestCsvRow:

    def test_from_fields(self):
        row = CsvRow.from_fields([" add ", " P-1 ", "C-1", " 1", "G<b>1</b>"])

        assert row.operation == "add"
        assert row.parent_idnumber == "P-1"
        assert row.child_idnumber == "C-1"
        assert row.disable_flag == "1"
        assert row.group_idnumber == "G1"

    def test_missing_fields_are_empty(self):
        row = CsvRow.from_fields(["del"])

        assert row.operation == "del"
        assert row.parent_idnumber == ""
        assert row.group_idnumber == ""


class TestStrings:

    def test_substitutes_params(self):
        message = get_string("reladded", params={"line": 3, "child": "c", "parent": "p"})

        assert message == "Line 3: c linked to p"

    def test_missing_params_left_as_placeholder(self):
        assert get_string("parentnotfound", params={"op": "add"}) == "Line {line}: parent course not found"

    def test_unknown_key(self):
        assert get_string("nosuchkey") == "[[nosuchkey]]"

    def test_unknown_component(self):
        assert get_string("reladded", component="other_plugin") == "[[reladded]]"


class TestUploadExceptions:

    def test_too_few_columns(self):
        exc = TooFewColumnsException(4)

        assert exc.to_dict() == {
            "error_code": "TOO_FEW_COLUMNS",
            "message": "Line 4: too few columns, 5 expected",
            "details": {"message_key": "toofewcols", "line": 4},
            "status_code": 415
        }

    def test_too_many_columns(self):
        exc = TooManyColumnsException(1)

        assert exc.status_code == 415
        assert exc.param == 1
        assert exc.message == "Line 1: too many columns, 5 expected"

    def test_cannot_read_source(self):
        exc = CannotReadSourceException({"file_id": "draft-1"})

        assert exc.status_code == 500
        assert exc.param is None
        assert exc.details == {"message_key": "cantreadcsv", "file_id": "draft-1"}
        assert exc.message == "Unable to read the CSV file"
