"""2D and 3D scatter plots of the reachable workspace.

Both plotters draw into the same figure (``FIGURE_NUMBER``), clearing it
first, so repeated calls replace the previous workspace.
"""

import matplotlib.pyplot as plt

from forward import get_dh_matrix
from workspace import (
    AXIS_LABELS,
    DEFAULT_UNUSED_POSITION_THRESHOLD,
    compute_workspace,
    find_unused_axis,
    save_positions,
)

FIGURE_NUMBER = 1
TITLE = "Reachable Workspace"


def plot2dworkspace(dh_parameters, parameter_ranges,
                    unused_position_threshold=DEFAULT_UNUSED_POSITION_THRESHOLD,
                    verbose=False, dh_transform_fn=get_dh_matrix):
    """Plot the reachable 2D workspace of a manipulator.

    Every combination in ``parameter_ranges`` is evaluated; the axis whose
    positions all stay within ``unused_position_threshold`` of zero is
    dropped and the other two are drawn.

    Args:
        dh_parameters: n x 4 DH table (a, alpha, d, theta), numbers and symbols.
        parameter_ranges (dict): symbol name -> sequence of values.
        unused_position_threshold (float): max magnitude for an axis to count as unused.
        verbose (bool): print calculation details.
        dh_transform_fn: callable building one link's 4x4 transform.

    Returns:
        tuple: the computed (x, y, z) position arrays.

    Raises:
        InvalidInputError: DH table and ranges do not match.
        NotTwoDimensionalError: no axis is near zero for every combination.
    """
    positions = compute_workspace(dh_parameters, parameter_ranges, dh_transform_fn, verbose)
    unused = find_unused_axis(positions, unused_position_threshold)

    chosen = [i for i in range(len(AXIS_LABELS)) if i != unused]
    first, second = chosen
    if verbose:
        print(f"dropping unused axis {AXIS_LABELS[unused]}, plotting "
              f"{AXIS_LABELS[first]}-{AXIS_LABELS[second]}")

    fig = plt.figure(FIGURE_NUMBER)
    fig.clf()
    ax = fig.add_subplot(111)
    ax.plot(positions[first], positions[second], '.')
    ax.set_title(TITLE)
    ax.set_xlabel(AXIS_LABELS[first])
    ax.set_ylabel(AXIS_LABELS[second])
    ax.set_aspect('equal')
    ax.grid(True)

    return positions


def plot3dworkspace(dh_parameters, parameter_ranges, dh_transform_fn=get_dh_matrix,
                    verbose=False, save_to_file=''):
    """Plot the reachable 3D workspace of a manipulator.

    Args:
        dh_parameters: n x 4 DH table (a, alpha, d, theta), numbers and symbols.
        parameter_ranges (dict): symbol name -> sequence of values.
        dh_transform_fn: callable building one link's 4x4 transform.
        verbose (bool): print calculation details.
        save_to_file (str): .mat file for the positions; empty to skip saving.

    Returns:
        tuple: the computed (x, y, z) position arrays.
    """
    positions = compute_workspace(dh_parameters, parameter_ranges, dh_transform_fn, verbose)

    if save_to_file:
        if verbose:
            print(f"Saving positions to {save_to_file}...")
        save_positions(save_to_file, positions)

    fig = plt.figure(FIGURE_NUMBER)
    fig.clf()
    ax = fig.add_subplot(111, projection='3d')
    ax.plot(*positions, '.')
    ax.set_title(TITLE)
    ax.set_xlabel(AXIS_LABELS[0])
    ax.set_ylabel(AXIS_LABELS[1])
    ax.set_zlabel(AXIS_LABELS[2])
    ax.set_aspect('equal')
    ax.grid(True)

    return positions
