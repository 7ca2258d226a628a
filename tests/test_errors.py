import pytest

from cfpy.diagnostics import (
    PARSER_INVALID_FORMAT,
    QUERY_INTEGER_OVERFLOW,
    QUERY_INVALID_QUERY,
    QUERY_UNEXPECTED_DATA_TYPE,
)
from cfpy.errors import (
    CfpError,
    ConfigIOError,
    IntegerOverflowError,
    InvalidFormatError,
    InvalidQueryError,
    ParseError,
    QueryError,
    UnexpectedDataTypeError,
)
from cfpy.parser import parse


def test_parse_error_string_includes_code_and_location() -> None:
    with pytest.raises(InvalidFormatError) as exc:
        parse("x = 1")

    error = exc.value
    assert isinstance(error, ParseError)
    assert isinstance(error, CfpError)
    assert error.code == PARSER_INVALID_FORMAT.code
    assert str(error).startswith(f"[{PARSER_INVALID_FORMAT.code}] ")
    assert str(error).endswith(" at line 1:1")
    assert error.details == {"offset": 0}


def test_query_errors_carry_path_and_details() -> None:
    invalid = InvalidQueryError("a.b", "no such property")
    assert isinstance(invalid, QueryError)
    assert invalid.code == QUERY_INVALID_QUERY.code
    assert invalid.path == "a.b"
    assert str(invalid).endswith("('a.b'): no such property")

    mismatch = UnexpectedDataTypeError("a.b", expected="string", found="number")
    assert mismatch.code == QUERY_UNEXPECTED_DATA_TYPE.code
    assert mismatch.details == {"path": "a.b", "expected": "string", "found": "number"}

    overflow = IntegerOverflowError("a.b", 300, "u8")
    assert overflow.code == QUERY_INTEGER_OVERFLOW.code
    assert "300 is out of range for u8" in str(overflow)


def test_config_io_error_message() -> None:
    error = ConfigIOError("/tmp/app.conf", "No such file or directory")

    assert error.path == "/tmp/app.conf"
    assert error.message.endswith("/tmp/app.conf: No such file or directory")
    assert error.details["reason"] == "No such file or directory"
