from cg2d.geom import unique_points
from cg2d.hull import ConvexHull2D

if __name__ == "__main__":
    raw = [
        (0,0), (4,0), (4,4), (0,4),
        (2,2), (1,3), (3,1), (2,0),
        (2,4), (0,2), (1,1), (4,4)
    ]
    pts = unique_points(raw)
    hull = ConvexHull2D(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("Boundary:", [(p.x, p.y) for p in hull.boundary()])
    print("Area:", hull.area())

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off — можна глянути в MeshLab/ParaView.")
