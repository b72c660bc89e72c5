#!/usr/bin/env python3
"""
Batch script to render the workspace of every example robot
Usage: python render.py [output_dir] [--samples N]
"""

import argparse
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

from robots import ROBOTS

MAIN_SCRIPT = Path(__file__).with_name("main.py")


def run_workspace(robot, output_file, samples=None, save_positions=False):
    """Render a single robot workspace in a headless subprocess."""
    cmd = [
        sys.executable,  # Use the same Python interpreter
        str(MAIN_SCRIPT),
        "--robot", robot,
        "--output", str(output_file),
    ]
    if samples is not None:
        cmd += ["--samples", str(samples)]
    if save_positions:
        cmd += ["--save-to-file", str(Path(output_file).with_suffix(".mat"))]

    env = dict(os.environ, MPLBACKEND="Agg")

    print(f"\n{'='*60}")
    print(f"Running: robot={robot}")
    print(f"Output: {output_file}")
    print(f"{'='*60}")

    try:
        subprocess.run(cmd, check=True, env=env)
        print(f"✓ Success: {output_file}")
        return True
    except subprocess.CalledProcessError as e:
        print(f"✗ Failed: {output_file}")
        print(f"  Error: {e}")
        return False
    except KeyboardInterrupt:
        print("\n\n⚠ Interrupted by user")
        sys.exit(1)


def main(argv=None):
    """Main batch rendering function."""
    parser = argparse.ArgumentParser(description='Render the workspace of every example robot')
    parser.add_argument('output_dir', nargs='?', default='workspaces',
                        help='Directory for the images (default: workspaces)')
    parser.add_argument('--samples', '-s', type=int, default=None,
                        help='Values per free joint for every robot (default: robot specific)')
    parser.add_argument('--save-positions', action='store_true',
                        help='Also save each robot\'s positions next to its image')
    args = parser.parse_args(argv)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\n{'='*70}")
    print(f"BATCH WORKSPACE RENDERING")
    print(f"{'='*70}")
    print(f"Start time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"Output directory: {output_dir.absolute()}")

    results = []
    for robot in ROBOTS:
        output_file = output_dir / f"workspace_{robot}.png"
        success = run_workspace(robot, output_file, args.samples, args.save_positions)
        results.append((robot, success))

    # Summary
    print(f"\n{'='*70}")
    print(f"BATCH RENDERING SUMMARY")
    print(f"{'='*70}")
    print(f"End time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"\nResults:")

    successful = sum(1 for _, success in results if success)
    failed = len(results) - successful

    for robot, success in results:
        status = "✓" if success else "✗"
        print(f"  {status} {robot:12s}")

    print(f"\nTotal: {len(results)} renderings")
    print(f"Successful: {successful}")
    print(f"Failed: {failed}")

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
