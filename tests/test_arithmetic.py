import pytest

from schemelet.errors import ArityMismatchError, DivisionByZeroError, TypeMismatchError
from schemelet.interpreter import read_eval
from schemelet.types import Integer, LispList, String, TRUE, FALSE


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 3 10)", -7),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 100 5 2)", 10),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(* 99999999999 99999999999 99999999999)", 99999999999 ** 3),
        # / and mod floor; quotient and remainder truncate toward zero
        ("(/ 7 2)", 3),
        ("(/ (- 0 7) 2)", -4),
        ("(mod 7 3)", 1),
        ("(mod (- 0 7) 3)", 2),
        ("(mod 7 (- 0 3))", -2),
        ("(quotient 7 2)", 3),
        ("(quotient (- 0 7) 2)", -3),
        ("(remainder 7 3)", 1),
        ("(remainder (- 0 7) 3)", -1),
        ("(remainder 7 (- 0 3))", 1),
        ("(quotient 100 7 2)", 7),
    ]
)
def test_lisp_arithmetic(run, source, expected):
    assert run(source) == Integer(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(+ "12" 3)', 15),
        ('(+ "12abc" 3)', 15),  # leading numeric prefix
        ('(+ " 7" 1)', 8),
        ('(+ "-4" 10)', 6),
        ("(+ '(5) 1)", 6),
        ("(+ '((5)) 1)", 6),
        ("(+ '(\"5\") 1)", 6),
    ]
)
def test_numeric_coercion(run, source, expected):
    assert run(source) == Integer(expected)


@pytest.mark.parametrize(
    "source,found",
    [
        ('(+ "abc" 1)', String("abc")),
        ('(+ "" 1)', String("")),
        ("(+ 1 #t)", TRUE),
        ("(+ 'a 1)", None),
        ("(+ '(1 2) 1)", LispList([Integer(1), Integer(2)])),
        ("(+ '() 1)", LispList([])),
        ("(+ '(1 . 2) 1)", None),
        ("(< 1 'b)", None),
    ]
)
def test_numeric_type_mismatch(run, source, found):
    with pytest.raises(TypeMismatchError) as info:
        run(source)
    assert info.value.expected_kind == "number"
    if found is not None:
        assert info.value.found == found


@pytest.mark.parametrize("op", ["/", "mod", "quotient", "remainder"])
def test_division_by_zero(run, op):
    with pytest.raises(DivisionByZeroError) as info:
        run(f"({op} 10 0)")
    assert info.value.operator == op
    assert info.value.render() == f"Division by zero in ({op} 10 0)"


def test_type_errors_win_over_division_by_zero(run):
    # Every argument is unpacked before the fold starts
    with pytest.raises(TypeMismatchError):
        run('(/ 1 0 "x")')


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", TRUE),
        ("(= 1 2)", FALSE),
        ("(< 1 2)", TRUE),
        ("(> 1 2)", FALSE),
        ("(/= 1 2)", TRUE),
        ("(>= 2 2)", TRUE),
        ("(<= 3 2)", FALSE),
        ('(= "10" 10)', TRUE),
        ("(&& #t #t)", TRUE),
        ("(&& #t #f)", FALSE),
        ("(|| #f #t)", TRUE),
        ("(|| #f #f)", FALSE),
        ('(string=? "abc" "abc")', TRUE),
        ('(string<? "abc" "abd")', TRUE),
        ('(string>? "abc" "abd")', FALSE),
        ('(string<=? "b" "b")', TRUE),
        ('(string>=? "a" "b")', FALSE),
        ('(string=? 12 "12")', TRUE),
        ('(string=? #t "#t")', TRUE),
        ('(string<? 10 9)', TRUE),  # compared as text
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("(&& #t 1)", "boolean"),
        ('(|| "x" #t)', "boolean"),
        ("(string=? 'a \"a\")", "string"),
        ("(string<? '(1) \"a\")", "string"),
        ("(string>? \"a\" '(1 . 2))", "string"),
    ]
)
def test_comparison_type_mismatch(run, source, kind):
    with pytest.raises(TypeMismatchError) as info:
        run(source)
    assert info.value.expected_kind == kind


@pytest.mark.parametrize("source", ["(+)", "(+ 1)", "(= 1)", "(< 1 2 3)", "(&& #t)", '(string=? "a" "b" "c")'])
def test_arithmetic_arity(run, source):
    with pytest.raises(ArityMismatchError) as info:
        run(source)
    assert info.value.expected == 2


def test_results_have_no_digit_limit():
    nines = "9" * 3000
    # (10**3000 - 1)**2 == 99..98 00..01
    assert read_eval(f"(* {nines} {nines})") == "9" * 2999 + "8" + "0" * 2999 + "1"
    assert read_eval(f"(- 0 {'5' * 6000})") == "-" + "5" * 6000


def test_numeric_strings_have_no_digit_limit():
    assert read_eval(f'(+ "{"9" * 5000}" 1)') == "1" + "0" * 5000
    assert read_eval(f'(+ "-{"1" * 5000}abc" 0)') == "-" + "1" * 5000
