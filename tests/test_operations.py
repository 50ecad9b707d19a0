import pytest

from matcalc.errors import FileError
from matcalc.matrix import SquareMatrix
from matcalc.operations import (
    Add,
    Comp,
    Identity,
    Operation,
    Scalar,
    Sub,
    Transpose,
)


@pytest.fixture
def a():
    return SquareMatrix(3)


@pytest.fixture
def b():
    return SquareMatrix(3, 5)


def test_operation_is_abstract():
    with pytest.raises(TypeError):
        Operation()


def test_identity(a):
    op = Identity()
    assert op.input_count() == 1
    assert op.compute([a]) == a
    assert op.describe() == "id"


def test_scalar(a):
    op = Scalar(3)
    assert op.input_count() == 1
    assert op.compute([a]) == a * 3
    assert op.describe() == "scal 3"


def test_scalar_overflow_propagates():
    with pytest.raises(FileError):
        Scalar(100).compute([SquareMatrix(2, 500)])


def test_transpose(a):
    op = Transpose()
    assert op.compute([a]) == a.transpose()
    assert op.describe(True) == "tran"


def test_add(a, b):
    op = Add(Identity(), Identity())
    assert op.input_count() == 2
    assert op.compute([a, b]) == a + b
    assert op.describe() == "(id + id)"
    assert op.describe(top_level=True) == "id + id"


def test_sub(a, b):
    op = Sub(Identity(), Identity())
    assert op.input_count() == 2
    assert op.compute([a, b]) == a - b
    assert op.describe(top_level=True) == "id - id"


def test_nested_add(a, b):
    op = Add(Add(Identity(), Identity()), Transpose())
    assert op.input_count() == 3
    assert op.compute([a, b, a]) == a + b + a.transpose()
    assert op.describe(top_level=True) == "(id + id) + tran"


def test_comp_unary_chain(a):
    op = Comp(Scalar(2), Transpose())
    assert op.input_count() == 1
    assert op.compute([a]) == (a * 2).transpose()
    assert op.describe(top_level=True) == "scal 2  ->  tran"


def test_comp_binary_then_unary(a, b):
    op = Comp(Add(Identity(), Identity()), Scalar(2))
    assert op.input_count() == 2
    assert op.compute([a, b]) == (a + b) * 2


def test_comp_unary_then_binary(a, b):
    op = Comp(Transpose(), Sub(Identity(), Identity()))
    assert op.input_count() == 2
    assert op.compute([a, b]) == a.transpose() - b


def test_describe_with_inputs(a):
    op = Identity()
    assert op.describe_with_inputs([a]) == "id(\n" + str(a) + ")"


def test_describe_with_inputs_binary(a, b):
    op = Add(Identity(), Identity())
    text = op.describe_with_inputs([a, b])
    assert text == "(id + id)" + "(\n" + str(a) + ")" + "(\n" + str(b) + ")"