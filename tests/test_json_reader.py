import pytest

from texted.config import MAX_NESTING
from texted.errors import TextedSyntaxError
from texted.reader import parse, parse_json, parse_json_program, parse_json_stream
from texted.types import Number, String, Symbol, make_list, program_equal

SEARCH_AND_REPLACE = [
    make_list(Symbol("search-forward"), String("world")),
    make_list(Symbol("replace-match"), String("earth")),
]


@pytest.mark.parametrize(
    "source,expected",
    [
        ('[["search-forward","world"],["replace-match","earth"]]', SEARCH_AND_REPLACE),
        ('["search-forward","world"]\n["replace-match","earth"]', SEARCH_AND_REPLACE),
        ('["point"]', [make_list(Symbol("point"))]),
        ('["goto-char", 7]', [make_list(Symbol("goto-char"), Number(7))]),
        ('["forward-char", 1.5]', [make_list(Symbol("forward-char"), Number(1.5))]),
        ('["buffer-substring", ["point"], -1]',
         [make_list(Symbol("buffer-substring"), make_list(Symbol("point")), Number(-1))]),
        ("[]", []),
        ("   ", []),
    ],
)
def test_parse_json(source, expected):
    assert program_equal(parse_json(source), expected)
    assert program_equal(parse("json", source), expected)


def test_stream_and_bulk_share_conversion():
    stream = parse_json_stream('["insert", "a"] ["point"]')
    bulk = parse_json_program('[["insert", "a"], ["point"]]')
    assert program_equal(stream, bulk)


@pytest.mark.parametrize(
    "source,fragment",
    [
        ('["insert", true]', "form 0[1]: boolean values are not supported"),
        ('["insert", null]', "form 0[1]: null values are not supported"),
        ('["insert", {"a": 1}]', "form 0[1]: objects are not supported"),
        ('[true]', "form 0: first element of an array must be a string, got boolean"),
        ('[5, "x"]', "first element of an array must be a string, got number"),
        ('["f", [1]]', "form 0[1]: first element of an array must be a string"),
        ('["f", []]', "form 0[1]: empty array is not a valid form"),
        ('5', "form 0: expected an array, got number"),
        ('"point"', "expected an array, got string"),
        ('["point"] ["mark"] 7', "form 2: expected an array, got number"),
        ('["forward-char", NaN]', "NaN is not a valid number"),
        ('["forward-char", Infinity]', "Infinity is not a valid number"),
    ],
)
def test_invalid_json_shapes(source, fragment):
    with pytest.raises(TextedSyntaxError) as exc:
        parse_json(source)
    assert fragment in str(exc.value)


def test_stream_rejects_empty_form():
    with pytest.raises(TextedSyntaxError) as exc:
        parse_json_stream("[]")
    assert "empty array" in str(exc.value)


def test_bulk_rejects_non_array():
    with pytest.raises(TextedSyntaxError):
        parse_json_program('{"forms": []}')


def test_decode_errors_carry_position():
    with pytest.raises(TextedSyntaxError) as exc:
        parse_json('[["point"],\n ["mark"')
    assert exc.value.line == 2
    assert exc.value.column is not None


@pytest.mark.parametrize("depth", [MAX_NESTING + 1, 5000])
def test_nesting_limit(depth):
    source = '["f", ' * (depth - 1) + '["x"]' + "]" * (depth - 1)
    with pytest.raises(TextedSyntaxError) as exc:
        parse_json(source)
    assert "nesting too deep" in str(exc.value)


def test_nesting_at_the_limit():
    source = '["f", ' * (MAX_NESTING - 1) + '["x"]' + "]" * (MAX_NESTING - 1)
    assert len(parse_json_stream(source)) == 1
