import threading

import pytest
from hypothesis import given, strategies as st

from risp.errors import RispInvalidHandle
from risp.types.symbol import Symbol
from risp.types.symbol_table import SymbolTable, WELL_KNOWN


@given(st.text().filter(lambda t: "(" not in t and ")" not in t))
def test_intern_is_idempotent_and_resolves_back(text):
    table = SymbolTable()
    first = table.intern(text)
    assert table.intern(text) == first
    assert table.resolve(first) == text


@pytest.mark.parametrize("text,attr", list(WELL_KNOWN.items()))
def test_well_known_symbols_are_interned_eagerly(table, text, attr):
    sym = getattr(table, attr)
    assert table.resolve(sym) == text
    assert table.intern(text) == sym
    assert table.well_known_name(sym) == text


def test_well_known_handles_are_distinct(table):
    handles = {getattr(table, attr) for attr in WELL_KNOWN.values()}
    assert len(handles) == 9
    assert len(table) == 9


def test_user_symbols_are_not_well_known(table):
    assert table.well_known_name(table.intern("foo")) is None


def test_equal_text_gives_equal_handles(table):
    a = table.intern("foo")
    b = table.intern("bar")
    assert a != b
    assert a == table.intern("foo")
    assert hash(a) == hash(table.intern("foo"))
    assert len(table) == 11


def test_resolve_rejects_unknown_handles(table):
    with pytest.raises(RispInvalidHandle):
        table.resolve(Symbol(len(table)))
    with pytest.raises(RispInvalidHandle):
        table.resolve(Symbol(-1))
    with pytest.raises(RispInvalidHandle):
        table.resolve("foo")


def test_contains(table):
    foo = table.intern("foo")
    assert foo in table
    assert Symbol(1000) not in table
    assert "foo" not in table


def test_tables_are_independent():
    t1, t2 = SymbolTable(), SymbolTable()
    t1.intern("only-in-t1")
    assert len(t2) == 9
    assert t2.intern("other") == t1.intern("only-in-t1")  # same slot, different text
    assert t2.resolve(t2.intern("other")) == "other"


def test_concurrent_interning_stays_bijective(table):
    words = [f"w{i}" for i in range(200)]
    results: list[dict[str, Symbol]] = []

    def worker():
        results.append({w: table.intern(w) for w in words})

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r == results[0] for r in results)
    assert len(table) == 9 + len(words)
    for w, sym in results[0].items():
        assert table.resolve(sym) == w
