import pytest

from risp.debug_utils.pprint import locate, render_error, to_source
from risp.errors import RispError, RispUnboundSymbol
from risp.reader import read
from risp.types import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        (2.5, "2.5"),
        (True, "#t"),
        (False, "#f"),
        ("a\"b\n", '"a\\"b\\n"'),
        (Symbol("x"), "x"),
        ((), "()"),
        ((1, (Symbol("a"), "s")), '(1 (a "s"))'),
    ],
)
def test_to_source(value, expected):
    assert to_source(value) == expected


def test_callables_print_as_source(interp):
    assert to_source(interp.eval("(fn (a &rest b) (list a b))")) == "(fn (a &rest b) (list a b))"
    assert to_source(interp.eval("defun")).startswith("(macro (name params &rest body)")
    assert to_source(interp.eval("first")) == "<primitive first (lst)>"


def test_printed_values_read_back(interp):
    value = interp.eval("'(a (1 2.5) \"s\" #t ())")
    assert read(to_source(value)) == [value]


def test_locate_nested_operand():
    form = read("(+ 1 (first 5))")[0]
    assert locate(form, [2, 1]) == ("(+ 1 (first 5))", 12, 13)
    assert locate(form, [2]) == ("(+ 1 (first 5))", 5, 14)
    assert locate(form, []) == ("(+ 1 (first 5))", 0, 15)


def test_locate_stops_at_atoms():
    form = read("(f x)")[0]
    assert locate(form, [1, 3]) == ("(f x)", 3, 4)


def _failure(itp, source):
    with pytest.raises(RispError) as info:
        itp.eval(source)
    return info.value


def test_error_path_through_primitive(bare):
    error = _failure(bare, "(+ 1 (first 5))")
    assert error.form == read("(+ 1 (first 5))")[0]
    assert error.path == [1, 2]
    lines = render_error(error.form, error, color=False).splitlines()
    assert lines == [
        "Error: first expects a list, got number",
        " | (+ 1 (first 5))",
        " |             ^",
    ]


def test_error_in_function_body_keeps_its_frame(bare):
    bare.eval("(def f (fn () not-bound))")
    error = _failure(bare, "(+ 1 (f))")
    assert isinstance(error, RispUnboundSymbol)
    assert error.frames == [(read("(fn () not-bound)")[0], [2])]
    # the call site path points at the head of (f)
    assert error.path == [0, 2]
    assert render_error(error.form, error, color=False).splitlines()[1:] == [
        " | (fn () not-bound)",
        f" | {' ' * 7}{'^' * 9}",
        " | (+ 1 (f))",
        f" | {' ' * 6}^",
    ]


def test_error_inside_defun_body(interp):
    interp.eval("(defun head-of (lst) (first lst))")
    error = _failure(interp, "(head-of '())")
    assert render_error(error.form, error, color=False).splitlines() == [
        "Error: first of empty list",
        " | (fn (lst) (first lst))",
        f" | {' ' * 17}^^^",
        " | (head-of (quote ()))",
        f" | {' ' * 1}{'^' * 7}",
    ]


def test_error_inside_macro_expansion(bare):
    bare.eval("(def bad (macro (x) (list 'first x)))")
    error = _failure(bare, "(bad '())")
    assert render_error(error.form, error, color=False).splitlines() == [
        "Error: first of empty list",
        " | (first (quote ()))",
        f" | {' ' * 7}{'^' * 10}",
        " | (bad (quote ()))",
        f" | {' ' * 1}^^^",
    ]


def test_error_inside_macro_transformer(bare):
    bare.eval("(def broken (macro (x) (first x)))")
    error = _failure(bare, "(broken ())")
    assert error.frames == [(read("(macro (x) (first x))")[0], [1, 2])]
    lines = render_error(error.form, error, color=False).splitlines()
    assert lines[2] == f" | {' ' * 18}^"
    assert lines[3:] == [" | (broken ())", f" | {' ' * 1}{'^' * 6}"]


def test_nested_frames_are_rendered_innermost_first(interp):
    interp.eval("(defun inner (x) (first x))")
    interp.eval("(defmacro wrap (e) (list 'inner e))")
    error = _failure(interp, "(wrap '())")
    forms = [to_source(form) for form, _ in error.frames]
    assert forms == ["(fn (x) (first x))", "(inner (quote ()))"]
    assert error.path == [0]


def test_error_inside_special_forms(bare):
    error = _failure(bare, "(if #t (let ((a (rest '()))) a))")
    assert list(reversed(error.path)) == [2, 1, 0, 1, 1]
    text, start, end = locate(error.form, list(reversed(error.path)))
    assert text[start:end] == "(quote ())"


def test_render_without_form():
    error = RispError("boom")
    assert render_error(None, error, color=False) == "Error: boom"


def test_render_with_color():
    error = RispError("boom")
    rendered = render_error(Symbol("x"), error, color=True)
    assert "\033[91m" in rendered
    assert "boom" in rendered
