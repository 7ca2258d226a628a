import logging
from enum import Enum, IntEnum, StrEnum
from pathlib import Path

import pytest

import cfpy
from cfpy import (
    InvalidFormatError,
    InvalidQueryError,
    ParserOptions,
    UnexpectedDataTypeError,
    get_environment_tag,
    get_int,
    get_properties,
    get_str,
    initialize,
    initialize_file,
    teardown,
)
from tests._shared_cases import DEMO_SOURCE


class Stage(IntEnum):
    DEV = 0
    PROD = 1


class Region(StrEnum):
    EU = "eu"
    US = "us"


def test_initialize_from_str_and_bytes() -> None:
    from_text = initialize(DEMO_SOURCE)
    from_bytes = initialize(DEMO_SOURCE.encode("utf-8"))

    assert from_text == from_bytes
    assert get_str(from_text, "applet.proj_1.host_name") == "example.com"


def test_documents_are_independent() -> None:
    first = initialize("a { x = 1 }")
    second = initialize("a { x = 2 }")

    teardown(first)

    assert get_int(second, "a.x") == 2
    with pytest.raises(InvalidQueryError):
        get_int(first, "a.x")


def test_environment_tag_round_trips_through_enum() -> None:
    document = initialize("a {}", ParserOptions.for_environment(1))
    assert get_environment_tag(document, Stage) is Stage.PROD

    regional = initialize("a {}", ParserOptions(environment_tag="eu"))
    assert get_environment_tag(regional, Region) is Region.EU


def test_environment_tag_absent_is_none() -> None:
    assert get_environment_tag(initialize(""), Stage) is None


def test_environment_tag_not_a_member() -> None:
    document = initialize("a {}", ParserOptions.for_environment(7))

    with pytest.raises(UnexpectedDataTypeError) as exc:
        get_environment_tag(document, Stage)

    assert exc.value.path == "<environment>"
    assert exc.value.expected == "Stage"


def test_environment_tag_requires_enum_type() -> None:
    document = initialize("a {}", ParserOptions.for_environment(1))

    with pytest.raises(TypeError):
        get_environment_tag(document, int)  # type: ignore[arg-type]


def test_plain_enum_is_accepted() -> None:
    class Mode(Enum):
        FAST = "fast"

    document = initialize("a {}", ParserOptions(environment_tag="fast"))

    assert get_environment_tag(document, Mode) is Mode.FAST


def test_teardown_releases_document() -> None:
    document = initialize(DEMO_SOURCE)
    teardown(document)

    assert document.released
    assert document.sections == ()
    with pytest.raises(InvalidQueryError) as exc:
        get_str(document, "global.prop_3")
    assert "released" in exc.value.message
    assert get_properties(document, "global") is None


def test_document_context_manager_releases_on_exit() -> None:
    with initialize("a { x = 1 }") as document:
        assert get_int(document, "a.x") == 1

    assert document.released


def test_parse_failure_is_logged_with_excerpt(caplog: pytest.LogCaptureFixture) -> None:
    source = "a {\n  b = 1\n  c { }\n}\n"

    with caplog.at_level(logging.ERROR, logger="cfpy.api"):
        with pytest.raises(InvalidFormatError):
            initialize(source, source_name="app.conf")

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert message.startswith("app.conf at line 3:3\n\n")
    assert "a {\n  b = 1\n   <<< HERE" in message


def test_initialize_file(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_text('server { host = "localhost" port = 8080 }\n', encoding="utf-8")

    document = initialize_file("app.conf", base_dir=tmp_path)

    assert get_int(document, "server.port", "u16") == 8080
    assert get_str(document, "server.host") == "localhost"


def test_initialize_file_logs_path_on_parse_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "broken.conf"
    path.write_bytes(b"x = 1\n")

    with caplog.at_level(logging.ERROR, logger="cfpy.api"):
        with pytest.raises(InvalidFormatError):
            initialize_file(path)

    assert caplog.records[0].getMessage().startswith(f"{path} at line 1:1")


def test_package_exports() -> None:
    for name in cfpy.__all__:
        assert hasattr(cfpy, name)
