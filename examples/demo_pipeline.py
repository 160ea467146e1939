# examples/demo_pipeline.py
import numpy as np

from cg2d.pipeline import convex_hull_2d

if __name__ == "__main__":
    rng = np.random.default_rng(7)
    cloud = rng.integers(-50, 50, size=(200, 2))

    pts, ours = convex_hull_2d(cloud, backend="internal")
    _, ref = convex_hull_2d(cloud, backend="scipy")
    print("Points:", len(pts))
    print("Hull (internal):", len(ours))
    print("Hull (scipy):", len(ref))
    print("Match:", set(ours) == set(ref))
