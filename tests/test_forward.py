import numpy as np
import pytest
import sympy
from sympy import Symbol, cos, pi, sin, symbols

from exceptions import InvalidInputError
from forward import (
    as_dh_matrix,
    free_symbol_names,
    get_dh_matrix,
    get_modified_dh_matrix,
    get_xyz_expressions,
)


def test_dh_matrix_standard_form():
    a, alpha, d, theta = symbols('a alpha d theta')
    T = get_dh_matrix(a, alpha, d, theta)

    assert T.shape == (4, 4)
    assert T[0, 0] == cos(theta)
    assert T[0, 1] == -sin(theta)*cos(alpha)
    assert T[1, 2] == -cos(theta)*sin(alpha)
    assert T[0, 3] == a*cos(theta)
    assert T[1, 3] == a*sin(theta)
    assert T[2, 1] == sin(alpha)
    assert T[2, 3] == d
    assert list(T.row(3)) == [0, 0, 0, 1]


def test_dh_matrix_mixes_numbers_and_symbols():
    t = Symbol('t')
    T = get_dh_matrix(2, 0, 0.5, t)

    assert T[0, 3] == 2*cos(t)
    assert T[2, 3] == 0.5
    assert T[2, 2] == 1


def test_single_link_end_effector_position():
    x, y, z = get_xyz_expressions([[1, 0, 0, 0]])

    assert (x, y, z) == (1, 0, 0)


def test_planar_two_link_expressions():
    x, y, z = get_xyz_expressions([[1, 0, 0, 'theta1'], [0.5, 0, 0, 'theta2']])
    t1, t2 = symbols('theta1 theta2')

    assert sympy.expand(sympy.expand_trig(x - (cos(t1) + 0.5*cos(t1 + t2)))) == 0
    assert sympy.expand(sympy.expand_trig(y - (sin(t1) + 0.5*sin(t1 + t2)))) == 0
    assert z == 0


def test_expression_strings_are_parsed():
    x, y, z = get_xyz_expressions([[1, 0, 0, 'theta1 + pi/2']])
    t1 = Symbol('theta1')

    assert sympy.simplify(x + sin(t1)) == 0
    assert sympy.simplify(y - cos(t1)) == 0


def test_numpy_table_is_accepted():
    dh = np.array([[1.0, 0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0]])
    x, y, z = get_xyz_expressions(dh)

    assert float(x) == 2.0
    assert float(y) == 0.0
    assert float(z) == 0.0


def test_prismatic_offset_appears_on_z():
    _, _, z = get_xyz_expressions([[0, 0, 'd1', 0], [1, 0, 0, 'theta2']])

    assert z == Symbol('d1')


def test_verbose_prints_transform_and_expressions(capsys):
    get_xyz_expressions([[1, 0, 0, 'theta1']], verbose=True)
    out = capsys.readouterr().out

    assert "final transformation matrix from base to end-effector:" in out
    assert "x = cos(theta1)" in out
    assert "y = sin(theta1)" in out
    assert "z = 0" in out


def test_modified_dh_translates_before_rotating():
    x, y, z = get_xyz_expressions([[1, 0, 0, 'theta1']], dh_transform_fn=get_modified_dh_matrix)

    assert (x, y, z) == (1, 0, 0)


def test_modified_dh_twist_moves_offset():
    _, y, z = get_xyz_expressions([[0, pi/2, 2, 0]], dh_transform_fn=get_modified_dh_matrix)

    assert y == -2
    assert z == 0


@pytest.mark.parametrize("dh", [
    [[1, 0, 0]],
    [[1, 0, 0, 0, 0]],
    [],
    [[1, 0, 0, None]],
    ["abcd"],
    [1, 2, 3, 4],
    [[1, 0, float('nan'), 0]],
    [[True, 0, 0, 0]],
    [[1, 0, 0, "theta1 +"]],
    [[1, 0, 0, "(theta1"]],
    [[1, 0, 0, ""]],
    [[1, 0, 0, "theta1, theta2"]],
])
def test_malformed_tables_are_rejected(dh):
    with pytest.raises(InvalidInputError):
        as_dh_matrix(dh)


def test_sympy_matrix_with_wrong_columns_is_rejected():
    with pytest.raises(InvalidInputError, match="exactly 4 columns"):
        as_dh_matrix(sympy.Matrix([[1, 0, 0]]))


def test_free_symbol_names_are_sorted():
    dh = [[0, 0, 'd1', 'theta2'], [1, 0, 0, 'b'], [Symbol('a'), 0, 0, 0]]

    assert free_symbol_names(dh) == ['a', 'b', 'd1', 'theta2']


def test_symbols_sharing_a_name_are_rejected():
    dh = [[Symbol('t', real=True), 0, 0, 't']]

    with pytest.raises(InvalidInputError, match="share the name"):
        free_symbol_names(dh)


@pytest.mark.parametrize("text, expected", [
    ("beta + 1", Symbol('beta') + 1),
    ("gamma - pi/2", Symbol('gamma') - pi/2),
    ("N + 1", Symbol('N') + 1),
    ("E", Symbol('E')),
    ("sin(theta1) + 2", sin(Symbol('theta1')) + 2),
])
def test_names_in_strings_are_free_parameters(text, expected):
    dh = as_dh_matrix([[1, 0, 0, text]])

    assert dh[0, 3] == expected


def test_pi_is_the_constant_alone_or_in_expressions():
    bare = as_dh_matrix([[1, 'pi', 0, 'theta1']])
    summed = as_dh_matrix([[1, 'pi + 0', 0, 'theta1']])

    assert bare[0, 1] == summed[0, 1] == pi
    assert free_symbol_names([[1, 'pi', 0, 'theta1']]) == ['theta1']


def test_named_parameters_get_ranges():
    assert free_symbol_names([['beta', 0, 'gamma + 1', 'N']]) == ['N', 'beta', 'gamma']
