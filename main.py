"""Plot the reachable workspace of one of the example robots.

Usage:
    python main.py --robot planar2r
    python main.py --robot puma560 --samples 20 --save-to-file puma.mat -o puma.png
"""

import argparse
import sys

import matplotlib.pyplot as plt

from exceptions import WorkspaceError
from plot_workspace import FIGURE_NUMBER, plot2dworkspace, plot3dworkspace
from robots import ROBOTS, get_robot
from WorkSpaceAnimation import animate_workspace
from workspace import DEFAULT_UNUSED_POSITION_THRESHOLD, save_positions


def build_parser():
    parser = argparse.ArgumentParser(description='Reachable workspace of a DH-parameterised robot')
    parser.add_argument('--robot', '-r', type=str, default='planar2r',
                        choices=sorted(ROBOTS),
                        help='Example robot to plot (default: planar2r)')
    parser.add_argument('--mode', '-m', type=str, default='auto',
                        choices=['auto', '2d', '3d'],
                        help='Plot dimension; auto uses the robot\'s natural one (default: auto)')
    parser.add_argument('--samples', '-s', type=int, default=None,
                        help='Values per free joint (default: robot specific)')
    parser.add_argument('--threshold', '-t', type=float, default=DEFAULT_UNUSED_POSITION_THRESHOLD,
                        help=f'Unused-axis threshold for 2D plots (default: {DEFAULT_UNUSED_POSITION_THRESHOLD})')
    parser.add_argument('--save-to-file', type=str, default='',
                        help='Save computed positions to this .mat file')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Save the figure to this image file instead of showing it')
    parser.add_argument('--animate', type=str, default=None,
                        help='Also save a rotating 3D animation to this video file')
    parser.add_argument('--fps', type=int, default=30,
                        help='Animation frames per second (default: 30)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print the transform, expressions and grid size')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.samples is not None and args.samples < 1:
        print("✗ Error: --samples must be at least 1", file=sys.stderr)
        return 1

    _, natural_dims = ROBOTS[args.robot]
    mode = args.mode if args.mode != 'auto' else f"{natural_dims}d"

    print(f"\n{'='*60}")
    print(f"CONFIGURATION")
    print(f"{'='*60}")
    print(f"  Robot: {args.robot}")
    print(f"  Mode: {mode}")
    print(f"  Samples per joint: {args.samples if args.samples is not None else 'default'}")
    if mode == '2d':
        print(f"  Unused-axis threshold: {args.threshold}")
    print(f"  Positions file: {args.save_to_file or '-'}")
    print(f"  Figure output: {args.output or 'interactive'}")

    dh_parameters, parameter_ranges = get_robot(args.robot, args.samples)

    try:
        if mode == '2d':
            positions = plot2dworkspace(dh_parameters, parameter_ranges,
                                        unused_position_threshold=args.threshold,
                                        verbose=args.verbose)
            if args.save_to_file:
                if args.verbose:
                    print(f"Saving positions to {args.save_to_file}...")
                save_positions(args.save_to_file, positions)
        else:
            positions = plot3dworkspace(dh_parameters, parameter_ranges,
                                        verbose=args.verbose,
                                        save_to_file=args.save_to_file)
    except WorkspaceError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    print(f"✓ Computed {len(positions[0])} workspace points")

    if args.animate:
        print(f"Writing animation to {args.animate}...")
        animate_workspace(positions, args.animate, fps=args.fps)

    if args.output:
        plt.figure(FIGURE_NUMBER).savefig(args.output, dpi=150)
        print(f"✓ Figure saved to {args.output}")
    else:
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
