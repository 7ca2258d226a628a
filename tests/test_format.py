import pytest

from cfpy.format import format_document, format_item, format_value
from cfpy.model import Boolean, Document, Flat, Nested, Number, Pair, Section, String, ValueList
from cfpy.parser import parse
from tests._debug import debug_dump_document
from tests._shared_cases import VALID_CASES, ConfigCase, case_id


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_formatted_source_reparses_to_equal_document(case: ConfigCase) -> None:
    document = parse(case.source)
    formatted = format_document(document)
    debug_dump_document(case.name, document)

    assert parse(formatted) == document
    assert format_document(parse(formatted)) == formatted


def test_canonical_layout() -> None:
    document = parse('b { c { x = 1 l = [true, "s"] } e {} }\n# comment\na { }')

    assert format_document(document) == (
        "b {\n"
        "    c {\n"
        "        x = 1\n"
        '        l = [true, "s"]\n'
        "    }\n"
        "    e {}\n"
        "}\n"
        "\n"
        "a {}\n"
    )


def test_custom_indent() -> None:
    document = Document((Section("a", Flat((Pair("b", Boolean(False)),))),))

    assert format_document(document, indent="\t") == "a {\n\tb = false\n}\n"


def test_empty_document_formats_to_empty_string() -> None:
    assert format_document(parse("# only comments")) == ""


def test_format_value_and_item() -> None:
    assert format_value(Number(-5)) == "-5"
    assert format_value(String("")) == '""'
    assert format_item(ValueList("l", ())) == "l = []"
    assert format_item(Pair("p", String("v"))) == 'p = "v"'


def test_unwritable_content_raises_value_error() -> None:
    with pytest.raises(ValueError):
        format_value(String('say "hi"'))
    with pytest.raises(ValueError):
        format_document(Document((Section("bad name", Nested(())),)))
    with pytest.raises(ValueError):
        format_item(Pair("x-y", Number(1)))
