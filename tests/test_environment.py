import pytest

from clojette import errors
from clojette.types.environment import Environment
from clojette.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


@pytest.fixture
def chain():
    root = Environment()
    root.define(a, 1)
    child = Environment(outer=root)
    child.define(b, 2)
    return root, child


def test_lookup_walks_outward(chain):
    root, child = chain
    assert child.lookup(a) == 1
    assert child.lookup(b) == 2
    with pytest.raises(errors.UnboundVariable):
        root.lookup(b)


def test_define_only_touches_innermost_frame(chain):
    root, child = chain
    child.define(a, 10)
    assert child.lookup(a) == 10
    assert root.lookup(a) == 1


def test_define_requires_symbol():
    with pytest.raises(errors.MalformedForm):
        Environment().define("a", 1)


def test_assign_mutates_nearest_existing_binding(chain):
    root, child = chain
    child.assign(a, 5)
    assert root.lookup(a) == 5
    assert a not in child.vars


def test_assign_never_creates(chain):
    root, child = chain
    with pytest.raises(errors.UnboundVariable):
        child.assign(c, 1)
    assert child.find(c) is None


def test_find(chain):
    root, child = chain
    assert child.find(a) is root
    assert child.find(b) is child


def test_extend_binds_pairwise(chain):
    root, child = chain
    grand = child.extend([b, c], [20, 30])
    assert grand.outer is child
    assert grand.lookup(b) == 20
    assert grand.lookup(c) == 30
    assert grand.lookup(a) == 1


@pytest.mark.parametrize(
    "names,values,kind",
    [
        ([a, b], [1], "too few"),
        ([a], [1, 2], "too many"),
        ([], [1], "too many"),
    ]
)
def test_extend_arity(names, values, kind):
    with pytest.raises(errors.ArityError) as info:
        Environment().extend(names, values)
    assert info.value.kind == kind


def test_shared_frame_mutation_is_visible(chain):
    root, child = chain
    sibling = Environment(outer=root)
    child.assign(a, 99)
    assert sibling.lookup(a) == 99


def test_root_and_update(chain):
    root, child = chain
    assert child.root() is root
    root.update({c: 3})
    assert child.lookup(c) == 3


def test_str_and_repr(chain):
    root, child = chain
    assert str(root) == "{a: 1}"
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"
