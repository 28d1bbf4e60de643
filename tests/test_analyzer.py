import io

import pytest

from analyzer import TypeChecker
from errors import (
    DuplicateDeclarationError,
    InvalidAssignmentTypeError,
    InvalidConditionTypeError,
    InvalidOperandTypeError,
    SemanticError,
    UndefinedIdentifierError,
)
from my_types import BOOL, NUMBER
from parser import parse
from scope import SymbolTable


def test_operator_and_declaration_counts(check) -> None:
    counters = check("num a; a = 1 + 2 * 3;")
    assert counters.declarations == 1
    assert counters.operators == 2
    assert counters.format() == "{VAR:1, WHILE:0, IF:0, OP:2}"


def test_empty_program(check) -> None:
    assert check("").format() == "{VAR:0, WHILE:0, IF:0, OP:0}"


def test_undefined_identifier_in_expression(check) -> None:
    with pytest.raises(UndefinedIdentifierError) as exc:
        check("num a; a = b;")
    assert exc.value.name == "b"


def test_undefined_identifier_deeply_nested(check) -> None:
    with pytest.raises(UndefinedIdentifierError) as exc:
        check("num a; a = 1 + (2 * (3 - -(x)));")
    assert exc.value.name == "x"


def test_undefined_identifier_in_condition(check) -> None:
    with pytest.raises(UndefinedIdentifierError):
        check("while (!(flag)) { }")


def test_undefined_assignment_target(check) -> None:
    with pytest.raises(UndefinedIdentifierError) as exc:
        check("a = 1;")
    assert exc.value.name == "a"


def test_identifiers_are_case_sensitive(check) -> None:
    with pytest.raises(UndefinedIdentifierError):
        check("num a; A = 1;")


def test_duplicate_declaration(check) -> None:
    with pytest.raises(DuplicateDeclarationError) as exc:
        check("num a; bool a;")
    assert exc.value.name == "a"
    assert str(exc.value) == "Identifier a has multiple declarations"


def test_duplicate_declaration_same_type(check) -> None:
    with pytest.raises(DuplicateDeclarationError):
        check("num a; { num a; }")


def test_block_declarations_are_global(check) -> None:
    counters = check("{ num a; } a = 1;")
    assert counters.declarations == 1


@pytest.mark.parametrize("source", ["if (1) {}", "while (1) {}", "num a; if (a + 1) {}"])
def test_number_condition_rejected(check, source) -> None:
    with pytest.raises(InvalidConditionTypeError):
        check(source)


def test_boolean_condition_accepted(check) -> None:
    counters = check("if (true) {}")
    assert counters.ifs == 1
    assert counters.operators == 0


def test_condition_checked_before_body(check) -> None:
    with pytest.raises(InvalidConditionTypeError):
        check("if (1) { y = 2; }")


def test_assignment_type_mismatch(check) -> None:
    with pytest.raises(InvalidAssignmentTypeError) as exc:
        check("num a; a = true;")
    assert exc.value.name == "a"


def test_assignment_type_match(check) -> None:
    counters = check("bool b; b = false;")
    assert counters.declarations == 1


def test_assignment_error_inside_body(check) -> None:
    with pytest.raises(InvalidAssignmentTypeError):
        check("if (true) { num x; x = false; }")


def test_equality_on_booleans(check) -> None:
    counters = check("bool a; bool b; a = (b == true);")
    assert counters.operators == 1


def test_inequality_on_booleans(check) -> None:
    check("bool a; bool b; a = b != false;")


def test_ordering_on_booleans_rejected(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("bool a; bool b; a = (b < true);")
    assert exc.value.level == "comparison"
    assert exc.value.got is BOOL
    assert exc.value.expected is NUMBER


def test_ordering_left_operand_checked_first(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("bool a; a = true >= x;")
    assert exc.value.level == "comparison"


def test_ordering_right_operand_rejected(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("bool a; a = 1 < true;")
    assert exc.value.level == "comparison"
    assert exc.value.got is BOOL


@pytest.mark.parametrize("op", ["<=", ">", ">="])
def test_ordering_right_operand_rejected_for_each_operator(check, op) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check(f"bool a; bool b; a = 2 {op} b;")
    assert exc.value.level == "comparison"
    assert exc.value.got is BOOL


def test_equality_mixed_operands_allowed(check) -> None:
    check("bool a; a = 1 == true;")


def test_comparison_result_is_boolean(check) -> None:
    with pytest.raises(InvalidAssignmentTypeError):
        check("num a; a = 1 < 2;")


def test_addition_error_reported_at_boolean_operand(check) -> None:
    # x 未声明：若错误在第三个操作数才被发现，会先抛出未定义标识符
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("num a; a = 1 + true + x;")
    assert exc.value.level == "addition"
    assert exc.value.got is BOOL


def test_addition_first_operand_boolean(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("num a; a = true - 1;")
    assert exc.value.level == "addition"


def test_addition_inside_equality_still_numeric(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("bool a; a = true + 1 == 2;")
    assert exc.value.level == "addition"


def test_multiplication_operand(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("num a; a = 2 * true;")
    assert exc.value.level == "multiplication"


def test_unary_sign_operand(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("num a; bool b; a = -b;")
    assert exc.value.level == "unary"


def test_unary_sign_counts_each_token(check) -> None:
    counters = check("num a; a = - - 3;")
    assert counters.operators == 2


def test_negation_operand(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("num a; bool b; b = !a;")
    assert exc.value.level == "negation"
    assert exc.value.got is NUMBER


def test_negation_counts_each_token(check) -> None:
    counters = check("bool b; b = !!true;")
    assert counters.operators == 2


def test_sign_over_negation_rejected(check) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check("num a; a = -!true;")
    assert exc.value.level == "unary"


@pytest.mark.parametrize("source", ["bool b; b = true && 1;", "bool b; b = 1 || true;"])
def test_boolean_connective_operands(check, source) -> None:
    with pytest.raises(InvalidOperandTypeError) as exc:
        check(source)
    assert exc.value.level == "boolean"


def test_boolean_connective_result(check) -> None:
    counters = check("bool b; num n; b = n > 0 && true || !b;")
    assert counters.operators == 4


def test_parenthesized_value_passes_type_through(check) -> None:
    check("num a; a = (((1)));")
    with pytest.raises(InvalidAssignmentTypeError):
        check("num a; a = (true);")


def test_full_program_statistics(check) -> None:
    source = """
    num i; bool done;
    i = 10; done = false;
    while (i > 0 && !done) {
        if (i % 2 == 0) { i = i - 1; }
        else if (i == 1) { done = true; }
        else { i = i - 2; }
    }
    """
    counters = check(source)
    assert counters.format() == "{VAR:2, WHILE:1, IF:2, OP:8}"


def test_independent_runs_are_identical() -> None:
    program = parse("num a; bool b; a = 1 * 2; while (b) { if (a < 3) { a = a + 1; } }")
    first = TypeChecker().check(program)
    second = TypeChecker().check(program)
    assert first == second
    assert first.format() == "{VAR:2, WHILE:1, IF:1, OP:3}"


def test_same_checker_reused() -> None:
    program = parse("num a; a = 1 + 1;")
    checker = TypeChecker()
    assert checker.check(program) == checker.check(program)
    assert len(checker.symbols) == 1


def test_summary_written_to_sink() -> None:
    sink = io.StringIO()
    TypeChecker(sink).check(parse("num a; a = 1 + 2 * 3;"))
    assert sink.getvalue() == "{VAR:1, WHILE:0, IF:0, OP:2}"


def test_nothing_written_on_failure() -> None:
    sink = io.StringIO()
    with pytest.raises(SemanticError):
        TypeChecker(sink).check(parse("num a; a = true;"))
    assert sink.getvalue() == ""


def test_symbols_available_only_after_check() -> None:
    checker = TypeChecker()
    assert checker.symbols is None
    assert checker.counters is None

    checker.check(parse("num a; bool b;"))
    assert isinstance(checker.symbols, SymbolTable)
    assert "a" in checker.symbols and "b" in checker.symbols
