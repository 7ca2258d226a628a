import pytest

from cfpy.errors import InvalidNumberError, InvalidTokenError, UnexpectedEndOfInputError
from cfpy.model import Boolean, Number, Pair, String, ValueList
from cfpy.parser import INT64_MAX, INT64_MIN, parse_bool, parse_list, parse_number, parse_property, parse_scalar
from cfpy.scanner import Scanner


def _scalar(text: str):
    return parse_scalar(Scanner(text))


def _list(text: str):
    return parse_list(Scanner(text))


def test_parse_scalar_string_stops_at_closing_quote() -> None:
    scanner = Scanner('"hello world" rest')

    assert parse_scalar(scanner) == String("hello world")
    assert scanner.cursor == len('"hello world"')


def test_parse_scalar_string_keeps_newlines_and_comment_markers() -> None:
    assert _scalar('"line one\nline # two"') == String("line one\nline # two")
    assert _scalar('""') == String("")


def test_parse_scalar_booleans() -> None:
    assert _scalar("true") == Boolean(True)
    assert _scalar("false }") == Boolean(False)


@pytest.mark.parametrize("text", ["truthy", "fals", "t", "true1"])
def test_parse_scalar_rejects_misspelled_booleans(text: str) -> None:
    with pytest.raises(InvalidTokenError):
        _scalar(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("100", 100),
        ("-42", -42),
        ("+7", 7),
        ("007", 7),
        ("-9223372036854775808", INT64_MIN),
        ("9223372036854775807", INT64_MAX),
    ],
)
def test_parse_scalar_numbers(text: str, expected: int) -> None:
    assert _scalar(text) == Number(expected)


@pytest.mark.parametrize("text", ["12ab", "1.5", "--1", "-", "9223372036854775808", "-9223372036854775809", "1_000"])
def test_parse_scalar_rejects_invalid_numbers(text: str) -> None:
    with pytest.raises(InvalidNumberError):
        _scalar(text)


def test_parse_scalar_bare_token_ends_at_delimiters() -> None:
    scanner = Scanner("15}")

    assert parse_scalar(scanner) == Number(15)
    assert scanner.peek() == "}"

    scanner = Scanner("15# comment")
    assert parse_scalar(scanner) == Number(15)
    assert scanner.peek() == "#"


def test_parse_scalar_unterminated_string_is_end_of_input() -> None:
    with pytest.raises(UnexpectedEndOfInputError) as exc:
        _scalar('"oops')

    assert exc.value.offset == 0


def test_parse_scalar_missing_value() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        _scalar("")
    with pytest.raises(InvalidTokenError):
        _scalar("}")


def test_parse_list_mixed_scalars() -> None:
    assert _list('[100, true, "hello"]') == (Number(100), Boolean(True), String("hello"))


def test_parse_list_trims_whitespace_and_allows_newlines() -> None:
    assert _list("[\n  1 ,\n\t2\n]") == (Number(1), Number(2))


def test_parse_list_empty() -> None:
    assert _list("[]") == ()
    assert _list("[   ]") == ()


def test_parse_list_quoted_elements_may_contain_delimiters() -> None:
    assert _list('["a, b", "]", "[x]"]') == (String("a, b"), String("]"), String("[x]"))


def test_parse_list_element_type_follows_leading_character() -> None:
    with pytest.raises(InvalidTokenError):
        _list("[1, tree]")
    with pytest.raises(InvalidNumberError):
        _list("[1, hello]")


@pytest.mark.parametrize("text", ["[1,,2]", "[1,]", "[,1]", "[[1]]", "[1 2]", "[1; 2]"])
def test_parse_list_rejects_malformed_lists(text: str) -> None:
    with pytest.raises((InvalidTokenError, InvalidNumberError)):
        _list(text)


@pytest.mark.parametrize("text", ["[1, 2", "[", '["abc]', "[1,"])
def test_parse_list_unterminated(text: str) -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        _list(text)


def test_parse_property_builds_pair_or_value_list() -> None:
    assert parse_property(Scanner(" 8080"), "port") == Pair(name="port", value=Number(8080))
    assert parse_property(Scanner("\n [1]"), "ids") == ValueList(name="ids", values=(Number(1),))


def test_parse_bool_and_parse_number_helpers() -> None:
    assert parse_bool("true") is True
    assert parse_bool("false") is False
    assert parse_bool("yes") is None
    assert parse_number("-3") == -3
    assert parse_number("3.0") is None
    assert parse_number("") is None
    assert parse_number("٣") is None
