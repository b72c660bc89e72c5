import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation

from plot_workspace import TITLE


def animate_workspace(positions, output, frames=360, fps=30, writer="ffmpeg", dpi=100,
                      elev=30, title=TITLE):
    """Save a turntable animation of a 3D workspace point cloud.

    Points are coloured by their distance from the base axis; the camera
    azimuth advances 360/frames degrees per frame.
    """
    x, y, z = (np.asarray(p, dtype=float) for p in positions)
    r = np.sqrt(x**2 + y**2)

    fig = plt.figure(figsize=(7, 6))
    ax = fig.add_subplot(111, projection='3d')
    ax.scatter(x, y, z, c=r, cmap='viridis', s=1.2, alpha=0.4)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title(title)
    ax.set_aspect('equal')
    ax.view_init(elev=elev, azim=0)
    fig.tight_layout()

    def rotate(i):
        ax.view_init(elev=elev, azim=i * 360.0 / frames)

    try:
        ani = animation.FuncAnimation(fig, rotate, frames=frames, interval=1000.0 / fps)
        ani.save(output, writer=writer, fps=fps, dpi=dpi)
    finally:
        plt.close(fig)
