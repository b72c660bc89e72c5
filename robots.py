"""Example manipulators as (dh_parameters, parameter_ranges) pairs.

DH rows are [a, alpha, d, theta]. Free joints are given by name and swept
over ``samples`` evenly spaced values within their limits (radians / meters).
"""

import numpy as np
from sympy import pi

# --- PUMA 560 ---
inch = 0.0254
PUMA560_BASE = 26.45 * inch
PUMA560_QLIM = np.array([
    [-160*np.pi/180, 160*np.pi/180],
    [-110*np.pi/180, 110*np.pi/180],
    [-135*np.pi/180, 135*np.pi/180],
])


def planar_2r(l1=1.0, l2=0.5, samples=60):
    """Two revolute links moving in the XY plane."""
    dh_parameters = [
        [l1, 0, 0, 'theta1'],
        [l2, 0, 0, 'theta2'],
    ]
    parameter_ranges = {
        'theta1': np.linspace(0, np.pi, samples),
        'theta2': np.linspace(-np.pi, np.pi, samples),
    }
    return dh_parameters, parameter_ranges


def planar_3r(l1=1.0, l2=0.8, l3=0.5, samples=25):
    """Three revolute links moving in the XY plane."""
    dh_parameters = [
        [l1, 0, 0, 'theta1'],
        [l2, 0, 0, 'theta2'],
        [l3, 0, 0, 'theta3'],
    ]
    parameter_ranges = {
        'theta1': np.linspace(-np.pi/2, np.pi/2, samples),
        'theta2': np.linspace(-2*np.pi/3, 2*np.pi/3, samples),
        'theta3': np.linspace(-np.pi/2, np.pi/2, samples),
    }
    return dh_parameters, parameter_ranges


def rr_spatial(l1=3.0, l2=5.0, samples=40):
    """Base yaw plus shoulder pitch: the end-effector sweeps a spherical cap."""
    dh_parameters = [
        [0,  pi/2, l1, 'theta1'],
        [l2,    0,  0, 'theta2'],
    ]
    parameter_ranges = {
        'theta1': np.linspace(-np.pi, np.pi, samples),
        'theta2': np.linspace(0, np.pi/2, samples),
    }
    return dh_parameters, parameter_ranges


def scara(a1=0.35, a2=0.30, d1=0.40, stroke=0.20, samples=20):
    """SCARA arm: two revolute joints and a vertical prismatic joint d3."""
    dh_parameters = [
        [a1,  0, d1,  'theta1'],
        [a2, pi,  0,  'theta2'],
        [0,   0, 'd3',      0],
    ]
    parameter_ranges = {
        'theta1': np.linspace(-2*np.pi/3, 2*np.pi/3, samples),
        'theta2': np.linspace(-5*np.pi/6, 5*np.pi/6, samples),
        'd3': np.linspace(0, stroke, max(2, samples // 4)),
    }
    return dh_parameters, parameter_ranges


def prrr(l_base=1.0, l_arm1=2.0, l_arm2=2.0, lift=(0.0, 6.0), samples=12):
    """Prismatic lift followed by turret, shoulder and elbow revolute joints."""
    dh_parameters = [
        [0,           0, 'd1',        0],
        [l_base,  -pi/2,    0, 'theta2'],
        [l_arm1,      0,    0, 'theta3'],
        [l_arm2,      0,    0, 'theta4'],
    ]
    parameter_ranges = {
        'd1': np.linspace(lift[0], lift[1], samples),
        'theta2': np.linspace(-np.pi, np.pi, samples),
        'theta3': np.linspace(-np.pi, np.pi, samples),
        'theta4': np.linspace(-np.pi, np.pi, samples),
    }
    return dh_parameters, parameter_ranges


def puma560(samples=27):
    """PUMA 560 with the first three joints free and the wrist held at zero."""
    dh_parameters = [
        [0.0,     pi/2, PUMA560_BASE, 'theta1'],
        [0.4318,     0,          0.0, 'theta2'],
        [0.0203, -pi/2,      0.15005, 'theta3'],
        [0.0,     pi/2,       0.4318,        0],
        [0.0,    -pi/2,          0.0,        0],
        [0.0,        0,          0.0,        0],
    ]
    parameter_ranges = {
        f'theta{i+1}': np.linspace(PUMA560_QLIM[i, 0], PUMA560_QLIM[i, 1], samples)
        for i in range(3)
    }
    return dh_parameters, parameter_ranges


# name -> (builder, natural plot dimension)
ROBOTS = {
    'planar2r': (planar_2r, 2),
    'planar3r': (planar_3r, 2),
    'rr-spatial': (rr_spatial, 3),
    'scara': (scara, 3),
    'prrr': (prrr, 3),
    'puma560': (puma560, 3),
}


def get_robot(name, samples=None):
    """Build a registered robot, optionally overriding its per-joint sample count."""
    try:
        builder, _ = ROBOTS[name]
    except KeyError:
        raise ValueError(f"Unknown robot: {name}") from None
    if samples is None:
        return builder()
    return builder(samples=samples)
