import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsexercises.sparse import SparseMatrix, Term

SAMPLE = [
    [0, 0, 11, 0],
    [12, 0, 0, 0],
    [0, -4, 0, 0],
    [0, 0, 0, -15],
]


def dense(rows, cols):
    return st.lists(
        st.lists(st.integers(-5, 5), min_size=cols, max_size=cols),
        min_size=rows,
        max_size=rows,
    )


shapes = st.tuples(st.integers(1, 4), st.integers(1, 4))


@st.composite
def same_shape_pair(draw):
    rows, cols = draw(shapes)
    return draw(dense(rows, cols)), draw(dense(rows, cols))


@st.composite
def chain(draw):
    n, m, p = draw(st.integers(1, 4)), draw(st.integers(1, 4)), draw(st.integers(1, 4))
    return draw(dense(n, m)), draw(dense(m, p))


def test_from_dense_collects_nonzero_terms_row_major():
    matrix = SparseMatrix.from_dense(SAMPLE)
    assert matrix.terms == (
        Term(0, 2, 11),
        Term(1, 0, 12),
        Term(2, 1, -4),
        Term(3, 3, -15),
    )
    assert (matrix.rows, matrix.cols) == (4, 4)


def test_terms_are_sorted_and_zeros_dropped():
    matrix = SparseMatrix(2, 2, ((1, 1, 3), (0, 1, 0), (0, 0, 2)))
    assert matrix.terms == (Term(0, 0, 2), Term(1, 1, 3))


def test_out_of_bounds_term_rejected():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, (Term(2, 0, 1),))


def test_duplicate_term_rejected():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, (Term(0, 0, 1), Term(0, 0, 2)))


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense([[1, 2], [3]])


def test_transpose_of_sample():
    assert SparseMatrix.from_dense(SAMPLE).transpose().to_dense() == [
        [0, 12, 0, 0],
        [0, 0, -4, 0],
        [11, 0, 0, 0],
        [0, 0, 0, -15],
    ]


def test_multiply_worked_example():
    a = SparseMatrix.from_dense([[1, 2], [3, 4]])
    b = SparseMatrix.from_dense([[5, 6], [7, 8]])
    assert a.multiply(b).to_dense() == [[19, 22], [43, 50]]


def test_multiply_incompatible_raises():
    a = SparseMatrix.from_dense([[1, 2, 3]])
    with pytest.raises(ValueError, match="Incompatible"):
        a.multiply(a)


def test_add_shape_mismatch_raises():
    a = SparseMatrix.from_dense([[1, 2]])
    b = SparseMatrix.from_dense([[1], [2]])
    with pytest.raises(ValueError):
        a.add(b)
    with pytest.raises(ValueError):
        a.subtract(b)


@given(shapes.flatmap(lambda s: dense(*s)))
def test_dense_round_trip(grid):
    assert SparseMatrix.from_dense(grid).to_dense() == grid


@given(shapes.flatmap(lambda s: dense(*s)))
def test_transpose_twice_is_identity(grid):
    matrix = SparseMatrix.from_dense(grid)
    assert matrix.transpose().transpose() == matrix


@given(same_shape_pair())
def test_add_then_subtract_restores(pair):
    a, b = (SparseMatrix.from_dense(g) for g in pair)
    assert a.add(b).subtract(b) == a


@given(same_shape_pair())
def test_add_is_commutative(pair):
    a, b = (SparseMatrix.from_dense(g) for g in pair)
    assert a.add(b) == b.add(a)


@given(shapes.flatmap(lambda s: dense(*s)))
def test_subtract_self_is_empty(grid):
    matrix = SparseMatrix.from_dense(grid)
    difference = matrix.subtract(matrix)
    assert difference.terms == ()
    assert (difference.rows, difference.cols) == (matrix.rows, matrix.cols)


@given(shapes.flatmap(lambda s: dense(*s)))
def test_multiply_by_identity(grid):
    matrix = SparseMatrix.from_dense(grid)
    identity = SparseMatrix(
        matrix.cols, matrix.cols, tuple(Term(i, i, 1) for i in range(matrix.cols))
    )
    assert matrix.multiply(identity) == matrix


@given(chain())
def test_product_transpose_identity(pair):
    a, b = (SparseMatrix.from_dense(g) for g in pair)
    assert a.multiply(b).transpose() == b.transpose().multiply(a.transpose())


@given(chain())
def test_product_has_no_zero_terms(pair):
    a, b = (SparseMatrix.from_dense(g) for g in pair)
    product = a.multiply(b)
    assert all(term.value != 0 for term in product.terms)
    assert (product.rows, product.cols) == (a.rows, b.cols)