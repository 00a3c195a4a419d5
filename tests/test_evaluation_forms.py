import pytest

from clojette import errors
from clojette.evaluation.special_forms import SPECIAL_FORMS
from clojette.evaluation.special_forms.cond_form import cond_to_if
from clojette.evaluation.special_forms.define_form import defn_to_def
from clojette.reader.parser import read_one
from clojette.types.literal import FALSE
from clojette.types.seq import ListSeq
from clojette.types.symbol import Symbol, OK


def test_special_form_table():
    assert {str(s) for s in SPECIAL_FORMS} == {
        "quote", "set!", "def", "defn", "if", "fn", "do", "begin", "cond",
    }


# ------------------ do / begin ------------------

def test_do_sequencing(run):
    assert run("(do (def a 10) (def b 20) (+ a b))") == 30


def test_begin_is_do(run):
    assert run("(begin 1 2 3)") == 3


def test_empty_do_is_malformed(run):
    with pytest.raises(errors.MalformedForm):
        run("(do)")


# ------------------ defn ------------------

def test_defn_desugars_to_def_fn():
    tail = read_one("(x [a] (+ a 1))").items
    assert defn_to_def(tail) == read_one("(def x (fn [a] (+ a 1)))")


def test_defn_skips_docstring():
    tail = read_one('(x "adds one" [a] (+ a 1))').items
    assert defn_to_def(tail) == read_one("(def x (fn [a] (+ a 1)))")


def test_defn_defines_procedure(run):
    assert run("(defn inc [a] (+ a 1))") == OK
    assert run("(inc 41)") == 42


def test_defn_recursion(run):
    run("(defn countdown [n] (if (= n 0) (quote done) (countdown (- n 1))))")
    assert run("(countdown 10)") == Symbol("done")


def test_defn_keyword_parameters_are_rejected(run):
    # keywords are not valid parameter names
    with pytest.raises(errors.MalformedForm):
        run('(defn x [:a :b] "Hello")')


def test_defn_string_body_is_not_a_docstring(run):
    run('(defn greet [] "Hello")')
    assert run("(greet)") == "Hello"


@pytest.mark.parametrize("source", ["(defn)", "(defn f)"])
def test_defn_shape(run, source):
    with pytest.raises(errors.MalformedForm):
        run(source)


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ('(cond (= "test" "test") "yes" :else "no")', "yes"),
        ('(cond (= "test" "other") "yes" :else "no")', "no"),
        ('(cond (= 1 2) "one" (= 1 1) "two" else "three")', "two"),
        ('(cond false "a" nil "b")', FALSE),
        ("(cond)", FALSE),
        ("(cond :else 5)", 5),
    ]
)
def test_cond(run, source, expected):
    assert run(source) == expected


def test_cond_to_if_rewrites_pairs():
    clauses = read_one("(a 1 b 2 :else 3)").items
    assert cond_to_if(clauses) == read_one("(if a 1 (if b 2 3))")


def test_cond_without_else_defaults_to_false():
    clauses = read_one("(a 1)").items
    assert cond_to_if(clauses) == ListSeq([Symbol("if"), Symbol("a"), 1, FALSE])


def test_cond_else_not_last(run):
    with pytest.raises(errors.MalformedCond, match="else clause not last"):
        run('(cond :else "no" true "yes")')


def test_cond_odd_clauses(run):
    with pytest.raises(errors.MalformedCond):
        run("(cond true)")


def test_cond_only_evaluates_chosen_action(run):
    assert run("(cond true 1 :else undefined)") == 1


# ------------------ scoping and closures ------------------

def test_def_inside_lambda_does_not_leak(run):
    run("(defn f [] (def inner 1) inner)")
    assert run("(f)") == 1
    with pytest.raises(errors.UnboundVariable):
        run("inner")


def test_parameters_shadow_globals(run):
    run("(def a 1)")
    assert run("((fn [a] a) 2)") == 2
    assert run("a") == 1


def test_closure_captures_defining_environment(run):
    run("(defn adder [n] (fn [x] (+ x n)))")
    run("(def add5 (adder 5))")
    run("(def add7 (adder 7))")
    assert run("(add5 1)") == 6
    assert run("(add7 1)") == 8


def test_closures_share_frames(run):
    run("(defn box [v] (cons (fn [] v) (cons (fn [n] (set! v n)) nil)))")
    run("(def b (box 1))")
    assert run("((car b))") == 1
    run("((car (cdr b)) 5)")
    assert run("((car b))") == 5


def test_closure_sees_later_global_definitions(run):
    run("(defn later [] helper)")
    run("(def helper 3)")
    assert run("(later)") == 3


def test_counter_closure(run):
    run("(defn make-counter [] (def n 0) (fn [] (set! n (+ n 1)) n))")
    run("(def c (make-counter))")
    run("(def d (make-counter))")
    assert [run("(c)"), run("(c)"), run("(d)")] == [1, 2, 1]


def test_failed_evaluation_keeps_earlier_definitions(run):
    with pytest.raises(errors.UnboundVariable):
        run("(do (def kept 1) (undefined))")
    assert run("kept") == 1
