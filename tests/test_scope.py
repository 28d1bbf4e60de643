import pytest

from context import AnalysisContext, Counters
from errors import DuplicateDeclarationError, UndefinedIdentifierError
from my_types import BOOL, NUMBER, VarType, type_from_keyword
from scope import SymbolTable


def test_declare_and_lookup() -> None:
    table = SymbolTable()
    table.declare("a", NUMBER)
    table.declare("b", BOOL)
    assert table.lookup("a") is VarType.Number
    assert table.lookup("b") is VarType.Bool
    assert "a" in table
    assert len(table) == 2


def test_redeclaration_keeps_first_binding() -> None:
    table = SymbolTable()
    table.declare("a", NUMBER)
    with pytest.raises(DuplicateDeclarationError):
        table.declare("a", BOOL)
    assert table.lookup("a") is NUMBER


def test_lookup_unknown() -> None:
    with pytest.raises(UndefinedIdentifierError, match="Invalid use of undefined Identifier x"):
        SymbolTable().lookup("x")


def test_type_keywords() -> None:
    assert type_from_keyword("num") is NUMBER
    assert type_from_keyword("bool") is BOOL
    assert type_from_keyword("string") is None
    assert str(NUMBER) == "Number"


def test_counters_format() -> None:
    counters = Counters(declarations=3, whiles=1, ifs=2, operators=7)
    assert str(counters) == "{VAR:3, WHILE:1, IF:2, OP:7}"


def test_contexts_do_not_share_state() -> None:
    first = AnalysisContext()
    second = AnalysisContext()
    first.symbols.declare("a", NUMBER)
    assert first.count_operators(["+", "-"]) == 2
    assert "a" not in second.symbols
    assert second.counters == Counters()
