"""Symbolic forward kinematics from Denavit-Hartenberg tables.

A DH table is an ``n x 4`` table whose rows are ``(a, alpha, d, theta)`` for
each link, base first. Entries may be numbers, sympy expressions, or strings
naming a free parameter (``"theta1"``) or a small expression of one
(``"theta2 - pi/2"``). Inside strings every bare name is a free parameter
except ``pi``, which is always the constant.
"""

import re
from tokenize import TokenError

import numpy as np
import sympy
from sympy import Matrix, Symbol, cos, sin, eye
from sympy.parsing.sympy_parser import parse_expr

from exceptions import InvalidInputError

DH_COLUMNS = ("a", "alpha", "d", "theta")
CONSTANTS = {"pi": sympy.pi}

_NAME = re.compile(r"\b[A-Za-z_]\w*\b(?!\s*\()")


def get_dh_matrix(a, alpha, d, theta):
    """Standard (Classic) DH transformation matrix."""
    ct, st = cos(theta), sin(theta)
    ca, sa = cos(alpha), sin(alpha)
    return Matrix([
        [ct, -st*ca,  st*sa, a*ct],
        [st,  ct*ca, -ct*sa, a*st],
        [0,      sa,     ca,    d],
        [0,       0,      0,    1]
    ])


def get_modified_dh_matrix(a, alpha, d, theta):
    """Modified (Craig) DH transformation matrix: Rx(alpha) Tx(a) Rz(theta) Tz(d)."""
    ct, st = cos(theta), sin(theta)
    ca, sa = cos(alpha), sin(alpha)
    return Matrix([
        [ct,       -st,     0,      a],
        [st*ca,  ct*ca,   -sa,  -d*sa],
        [st*sa,  ct*sa,    ca,   d*ca],
        [0,          0,     0,      1]
    ])


def _parse_entry(text, where):
    # every plain name is a free parameter, except pi; names followed by "(" stay functions
    local_dict = {name: CONSTANTS.get(name, Symbol(name)) for name in _NAME.findall(text)}
    try:
        expr = parse_expr(text, local_dict=local_dict)
    except (sympy.SympifyError, SyntaxError, TokenError, TypeError, ValueError) as e:
        raise InvalidInputError(f"Cannot parse DH entry {text!r} at {where}") from e
    if not isinstance(expr, sympy.Expr):
        raise InvalidInputError(f"DH entry {text!r} at {where} is not a scalar expression")
    return expr


def _as_entry(value, row, col):
    where = f"row {row}, column '{DH_COLUMNS[col]}'"
    if isinstance(value, sympy.Basic):
        return value
    if isinstance(value, str):
        return _parse_entry(value.strip(), where)
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInputError(f"Boolean DH entry at {where}")
    if isinstance(value, (int, np.integer)):
        return sympy.Integer(int(value))
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            raise InvalidInputError(f"Non-finite DH entry {value} at {where}")
        return sympy.Float(float(value))
    raise InvalidInputError(
        f"DH entry {value!r} at {where} is neither a number, a symbol nor an expression"
    )


def as_dh_matrix(dh_parameters):
    """Convert a DH table (nested lists, numpy array or sympy Matrix) to an n x 4 sympy Matrix.

    Raises:
        InvalidInputError: the table is empty, a row does not have exactly
            4 entries, or an entry cannot be converted.
    """
    if isinstance(dh_parameters, sympy.MatrixBase):
        rows = dh_parameters.tolist()
    else:
        try:
            rows = [row for row in dh_parameters]
        except TypeError as e:
            raise InvalidInputError("DH parameters must be a table of rows (a, alpha, d, theta)") from e

    if len(rows) == 0:
        raise InvalidInputError("DH parameters must contain at least one link")

    entries = []
    for i, row in enumerate(rows, start=1):
        if isinstance(row, str):
            raise InvalidInputError(f"DH row {i} is a string, expected 4 values")
        try:
            row = list(row)
        except TypeError as e:
            raise InvalidInputError(
                f"DH parameters must have exactly 4 columns (a, alpha, d, theta); row {i} is a scalar"
            ) from e
        if len(row) != len(DH_COLUMNS):
            raise InvalidInputError(
                f"DH parameters must have exactly 4 columns (a, alpha, d, theta); row {i} has {len(row)}"
            )
        entries.append([_as_entry(v, i, j) for j, v in enumerate(row)])

    return Matrix(entries)


def free_symbol_names(dh_parameters):
    """Sorted names of the free symbols used anywhere in the DH table."""
    dh = as_dh_matrix(dh_parameters)
    names = {}
    for s in dh.free_symbols:
        if s.name in names and names[s.name] != s:
            raise InvalidInputError(
                f"Two different symbols share the name '{s.name}' (check symbol assumptions)"
            )
        names[s.name] = s
    return sorted(names)


def get_xyz_expressions(dh_parameters, dh_transform_fn=get_dh_matrix, verbose=False):
    """Compose the link transforms and return the end-effector position expressions.

    Args:
        dh_parameters: n x 4 DH table, rows ordered from the base outwards.
        dh_transform_fn: callable ``(a, alpha, d, theta) -> 4x4 matrix``.
        verbose (bool): print the final transform and the position expressions.

    Returns:
        tuple: sympy expressions (x, y, z) of the end-effector position.
    """
    dh = as_dh_matrix(dh_parameters)

    T0_ee = eye(4)
    for i in range(dh.rows):
        a, alpha, d, theta = dh.row(i)
        T0_ee = T0_ee * Matrix(dh_transform_fn(a, alpha, d, theta))

    x, y, z = T0_ee[0, 3], T0_ee[1, 3], T0_ee[2, 3]

    if verbose:
        print("final transformation matrix from base to end-effector:")
        print(sympy.pretty(T0_ee))
        print("expressions for position:")
        print(f"x = {x}")
        print(f"y = {y}")
        print(f"z = {z}")

    return x, y, z
