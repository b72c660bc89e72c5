"""Numerical workspace sweep: validation, parameter grid, vectorized evaluation.

The pipeline is validate -> compose (see ``forward``) -> grid -> evaluate.
Grid dimensions are always ordered by symbol name so that building the grid
and splitting it back per symbol use the same traversal order.
"""

import math
import os
from collections.abc import Mapping

import numpy as np
import scipy.io
import sympy

from exceptions import InvalidInputError, NotTwoDimensionalError
from forward import free_symbol_names, get_dh_matrix, get_xyz_expressions

AXIS_LABELS = ("X", "Y", "Z")
DEFAULT_UNUSED_POSITION_THRESHOLD = 0.0001
POSITIONS_FIELD = "positions"


def _key_name(key):
    if isinstance(key, sympy.Symbol):
        return key.name
    if isinstance(key, str):
        return key
    raise InvalidInputError(f"Parameter range keys must be symbol names, got {key!r}")


def _as_range(name, values):
    if isinstance(values, str):
        raise InvalidInputError(f"Range for '{name}' must be a sequence of numbers, got a string")
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Range for '{name}' must contain real numbers") from e
    if arr.ndim != 1:
        raise InvalidInputError(f"Range for '{name}' must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidInputError(f"Range for '{name}' is empty")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"Range for '{name}' contains non-finite values")
    return arr


def normalize_ranges(parameter_ranges):
    """Return ``{name: 1-D float array}`` with names in sorted order."""
    if not isinstance(parameter_ranges, Mapping):
        raise InvalidInputError("Parameter ranges must be a mapping of symbol name to values")
    ranges = {}
    for key, values in parameter_ranges.items():
        name = _key_name(key)
        if name in ranges:
            raise InvalidInputError(f"Parameter '{name}' has more than one range")
        ranges[name] = _as_range(name, values)
    return {name: ranges[name] for name in sorted(ranges)}


def validate_inputs(dh_parameters, parameter_ranges):
    """Reject malformed DH tables and ranges that do not match its free symbols.

    Raises:
        InvalidInputError: wrong table shape, bad entries, missing or unused
            range keys, or empty/non-numeric ranges.
    """
    names = set(free_symbol_names(dh_parameters))
    ranges = normalize_ranges(parameter_ranges)

    missing = sorted(names - set(ranges))
    if missing:
        raise InvalidInputError(f"No range given for DH parameter(s): {', '.join(missing)}")
    extra = sorted(set(ranges) - names)
    if extra:
        raise InvalidInputError(
            f"Range(s) given for parameter(s) not used in the DH table: {', '.join(extra)}"
        )


def combination_count(parameter_ranges):
    """Number of parameter combinations, the product of all range lengths."""
    return math.prod(len(values) for values in normalize_ranges(parameter_ranges).values())


def parameter_grid(parameter_ranges, verbose=False):
    """Cartesian product of all ranges as flat, index-aligned arrays.

    Returns:
        dict: symbol name -> flat float array of length prod(len(range)).
        Entry ``j`` of every array together forms combination ``j``.
    """
    ranges = normalize_ranges(parameter_ranges)

    if verbose:
        print(f"allocating {combination_count(ranges)} possible DH parameter combinations...")

    grids = np.meshgrid(*ranges.values(), indexing="ij")
    return {name: grid.ravel() for name, grid in zip(ranges, grids)}


def _grid_size(grid):
    for values in grid.values():
        return len(values)
    # no free parameters: a single fixed configuration
    return 1


def evaluate_positions(expressions, grid, verbose=False):
    """Evaluate each position expression over the whole grid.

    Every expression is compiled with ``sympy.lambdify`` over only the symbols
    it contains, so an axis that ignores a parameter never broadcasts over it.

    Returns:
        tuple: flat float arrays (x, y, z), aligned with the grid.
    """
    if verbose:
        print("calculating positions from expressions...")

    n_points = _grid_size(grid)
    positions = []
    for expr in expressions:
        expr = sympy.sympify(expr)
        symbols = sorted(expr.free_symbols, key=lambda s: s.name)
        missing = [s.name for s in symbols if s.name not in grid]
        if missing:
            raise InvalidInputError(f"No grid values for symbol(s): {', '.join(missing)}")

        # Convert from symbolic to numerical function for faster evaluation
        pos_func = sympy.lambdify(symbols, expr, modules="numpy")
        values = pos_func(*[grid[s.name] for s in symbols])
        positions.append(np.broadcast_to(np.asarray(values, dtype=float), (n_points,)).copy())

    return tuple(positions)


def compute_workspace(dh_parameters, parameter_ranges, dh_transform_fn=get_dh_matrix, verbose=False):
    """Run validate -> compose -> grid -> evaluate and return (x, y, z) arrays."""
    validate_inputs(dh_parameters, parameter_ranges)
    expressions = get_xyz_expressions(dh_parameters, dh_transform_fn, verbose)
    grid = parameter_grid(parameter_ranges, verbose)
    return evaluate_positions(expressions, grid, verbose)


def find_unused_axis(positions, unused_position_threshold=DEFAULT_UNUSED_POSITION_THRESHOLD):
    """Index of the axis whose largest magnitude is smallest (first in X, Y, Z order on ties).

    Raises:
        NotTwoDimensionalError: that magnitude is above the threshold.
    """
    magnitudes = [float(np.max(np.abs(p))) for p in positions]
    min_idx = int(np.argmin(magnitudes))

    if magnitudes[min_idx] > unused_position_threshold:
        raise NotTwoDimensionalError(unused_position_threshold, AXIS_LABELS[min_idx], magnitudes[min_idx])
    return min_idx


def save_positions(path, positions):
    """Write (x, y, z) to a .mat file as a 3 x N array named ``positions``."""
    scipy.io.savemat(os.fspath(path), {POSITIONS_FIELD: np.vstack(positions).astype(float)})


def load_positions(path):
    data = scipy.io.loadmat(os.fspath(path))
    stacked = np.asarray(data[POSITIONS_FIELD], dtype=float)
    return tuple(np.array(row) for row in stacked)
