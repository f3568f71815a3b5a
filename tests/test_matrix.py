import pytest

from animray.matrix import Matrix


def _translation(x, y, z):
    m = Matrix()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def _sample(offset):
    return Matrix(range(offset, offset + 16))


def test_default_is_identity():
    m = Matrix()
    for r in range(4):
        for c in range(4):
            assert m[r, c] == (1 if r == c else 0)


def test_identity_str():
    assert str(Matrix()) == "1000\n0100\n0010\n0001\n"


def test_rows_and_columns_agree():
    m = _sample(1)
    for r in range(4):
        for c in range(4):
            assert m.row(r)[c] == m.column(c)[r] == m[r][c] == m[r, c]


def test_values_round_trip():
    m = _sample(3)
    assert Matrix(m.values()) == m
    assert m.values() == tuple(range(3, 19))


def test_identity_is_neutral():
    m = _sample(2)
    assert Matrix() @ m == m
    assert m @ Matrix() == m
    assert m * Matrix() == m


def test_multiplication_is_associative():
    a, b, c = _sample(1), _sample(5), _sample(-7)
    assert (a @ b) @ c == a @ (b @ c)


def test_in_place_multiplication_matches():
    a, b = _sample(1), _sample(4)
    expected = a @ b
    a @= b
    assert a == expected
    c = _sample(1)
    c *= b
    assert c == expected


def test_identity_leaves_vector():
    assert Matrix() @ (3, -2, 7, 1) == (3, -2, 7, 1)


def test_translation_moves_point_and_back():
    forward = _translation(10, 23, 54)
    backward = _translation(-10, -23, -54)
    assert forward @ (0, 0, 0, 1) == (10, 23, 54, 1)
    assert backward @ (0, 0, 0, 1) == (-10, -23, -54, 1)
    assert forward @ backward == Matrix()
    assert backward @ (forward @ (4, 5, 6, 1)) == (4, 5, 6, 1)


def test_setitem_changes_only_one_cell():
    m = Matrix()
    m[2, 1] = 9
    assert m[2, 1] == 9
    assert m != Matrix()
    m[2, 1] = 0
    assert m == Matrix()


def test_wrong_number_of_values():
    with pytest.raises(ValueError):
        Matrix(range(15))


def test_bad_vector_length():
    with pytest.raises(ValueError):
        Matrix() @ (1, 2, 3)


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_index_out_of_range(index):
    m = Matrix()
    with pytest.raises(IndexError):
        m.row(index)
    with pytest.raises(IndexError):
        m.column(index)
    with pytest.raises(IndexError):
        m[0, index] = 1