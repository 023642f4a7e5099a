import pytest
from hypothesis import given, strategies as st

from risp import I64_MIN, I64_MAX
from risp.errors import RispSyntaxError
from risp.printer import to_source
from risp.reader.parse_errors import UnmatchedCloser, UnmatchedOpeners, TooDeep
from risp.reader.parser import parse, parse_integer
from risp.reader.tokenizer import tokenize
from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable


def _texts(table, tokens):
    return [table.resolve(t) for t in tokens]


def _read(table, source, max_depth=None):
    return parse(tokenize(source, table), table, max_depth)


# Structural equality that keeps Number and Bool apart (True == 1 in Python)
def _same(a, b):
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return type(a) is type(b) and a == b


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("(+(* 2 3)4)", ["(", "+", "(", "*", "2", "3", ")", "4", ")"]),
        ("  a\tb \n c ", ["a", "b", "c"]),
        ("#t #f if", ["#t", "#f", "if"]),
        ("foo-bar? 1.5 \"x", ["foo-bar?", "1.5", "\"x"]),
        ("))((", [")", ")", "(", "("]),
        ("", []),
        ("   ", []),
    ]
)
def test_tokenizer(table, source, expected):
    assert _texts(table, tokenize(source, table)) == expected


def test_tokenizer_interns_every_fragment(table):
    tokens = tokenize("(+ 1 2)", table)
    assert tokens[0] == table.open_paren
    assert tokens[1] == table.add_symbol
    assert tokens[-1] == table.close_paren
    assert tokens[2] == table.intern("1")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("0", 0),
        ("-0", 0),
        ("007", 7),
        (str(I64_MAX), I64_MAX),
        (str(I64_MIN), I64_MIN),
        (str(I64_MAX + 1), None),
        (str(I64_MIN - 1), None),
        ("3.14", None),
        ("1_000", None),
        ("-", None),
        ("+", None),
        ("12a", None),
        ("١٢", None),  # non-ASCII digits are symbols
    ]
)
def test_parse_integer(text, expected):
    assert parse_integer(text) == expected


def test_parse_simple_call(table):
    result = _read(table, "(+ 1 2)")
    assert len(result) == 1
    assert _same(result[0], [table.add_symbol, 1, 2])


@pytest.mark.parametrize(
    "source,expected",
    [
        ("#t", True),
        ("#f", False),
        ("42", 42),
        ("-45", -45),
        ("()", []),
    ]
)
def test_parse_literals(table, source, expected):
    assert _same(_read(table, source), [expected])


def test_parse_symbols_stay_symbols(table):
    (foo,) = _read(table, "foo")
    assert isinstance(foo, Symbol)
    assert table.resolve(foo) == "foo"
    (big,) = _read(table, str(I64_MAX + 1))
    assert isinstance(big, Symbol)


def test_nested_lists(table):
    a, b, c, d = (table.intern(x) for x in "abcd")
    result = _read(table, "((a b) (c d))")
    assert result == [[[a, b], [c, d]]]


def test_several_top_level_expressions(table):
    result = _read(table, "1 (if #t 2 3) x")
    assert _same(result, [1, [table.if_symbol, True, 2, 3], table.intern("x")])


def test_empty_input_parses_to_nothing(table):
    assert _read(table, "") == []


@pytest.mark.parametrize(
    "source,errors",
    [
        (")", [UnmatchedCloser()]),
        ("((", [UnmatchedOpeners(depth=2)]),
        ("(+ 1 2", [UnmatchedOpeners(depth=1)]),
        (") )", [UnmatchedCloser(), UnmatchedCloser()]),
        ("()) ((", [UnmatchedCloser(), UnmatchedOpeners(depth=2)]),
        (") (((", [UnmatchedCloser(), UnmatchedOpeners(depth=3)]),
    ]
)
def test_parse_errors_are_collected(table, source, errors):
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, source)
    assert exc.value.errors == errors


def test_unmatched_closer_leaves_empty_result(table):
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, ")")
    assert exc.value.partial == []


def test_stray_closer_is_ignored_for_structure(table):
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, ") (+ 1 2) )")
    assert exc.value.errors == [UnmatchedCloser(), UnmatchedCloser()]
    assert _same(exc.value.partial, [[table.add_symbol, 1, 2]])


def test_unmatched_openers_error_is_last(table):
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, "( ) ) ( ) ) (")
    assert exc.value.errors == [UnmatchedCloser(), UnmatchedCloser(), UnmatchedOpeners(depth=1)]


def test_error_messages(table):
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, ") ((")
    assert [e.message for e in exc.value.errors] == [
        "Unmatched closing delimiter",
        "2 unmatched opening delimiter",
    ]


def test_nesting_limit(table):
    assert _read(table, "((((1))))", max_depth=4) == [[[[[1]]]]]
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, "(((((1)))))", max_depth=4)
    assert exc.value.errors == [TooDeep(limit=4)]


def test_nesting_limit_reported_once_with_other_errors(table):
    with pytest.raises(RispSyntaxError) as exc:
        _read(table, ") ((((((", max_depth=4)
    assert exc.value.errors == [UnmatchedCloser(), TooDeep(limit=4), UnmatchedOpeners(depth=6)]


# --- Round trip: canonical text -> tree -> canonical text ---

_names = st.from_regex(r"[a-z*+/<>=!?-][a-z0-9*+/<>=!?-]{0,6}", fullmatch=True).filter(
    lambda s: parse_integer(s) is None
)

_atoms = st.one_of(
    st.integers(min_value=I64_MIN, max_value=I64_MAX),
    st.booleans(),
    _names,
)

_trees = st.recursive(_atoms, lambda children: st.lists(children, max_size=5), max_leaves=25)


def _intern_tree(tree, table):
    if isinstance(tree, list):
        return [_intern_tree(t, table) for t in tree]
    if isinstance(tree, str):
        return table.intern(tree)
    return tree


@given(_trees)
def test_render_then_reparse_roundtrip(raw):
    table = SymbolTable()
    tree = _intern_tree(raw, table)
    source = to_source(tree, table)
    reparsed = parse(tokenize(source, table), table)
    assert len(reparsed) == 1
    assert _same(reparsed[0], tree)
    assert to_source(reparsed[0], table) == source
