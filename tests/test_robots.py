import numpy as np
import pytest

from exceptions import NotTwoDimensionalError
from robots import ROBOTS, get_robot, planar_2r, puma560
from workspace import compute_workspace, find_unused_axis, validate_inputs


@pytest.mark.parametrize("name", sorted(ROBOTS))
def test_example_robots_are_valid(name):
    dh_parameters, parameter_ranges = get_robot(name, samples=3)

    validate_inputs(dh_parameters, parameter_ranges)


@pytest.mark.parametrize("name", sorted(ROBOTS))
def test_natural_dimension(name):
    _, dims = ROBOTS[name]
    positions = compute_workspace(*get_robot(name, samples=4))

    if dims == 2:
        assert find_unused_axis(positions) == 2
    else:
        with pytest.raises(NotTwoDimensionalError):
            find_unused_axis(positions)


def test_planar_2r_reach():
    dh_parameters, parameter_ranges = planar_2r(l1=1.0, l2=0.5, samples=21)
    x, y, _ = compute_workspace(dh_parameters, parameter_ranges)
    r = np.hypot(x, y)

    assert r.max() == pytest.approx(1.5)
    assert r.min() == pytest.approx(0.5)


def test_puma560_home_position():
    dh_parameters, _ = puma560()
    ranges = {'theta1': [0.0], 'theta2': [0.0], 'theta3': [0.0]}
    x, y, z = compute_workspace(dh_parameters, ranges)

    # arm stretched along x with the shoulder offset on -y
    assert x[0] == pytest.approx(0.4318 + 0.0203)
    assert y[0] == pytest.approx(-0.15005)
    assert z[0] == pytest.approx(26.45 * 0.0254 + 0.4318)


def test_unknown_robot():
    with pytest.raises(ValueError, match="Unknown robot"):
        get_robot("delta")
