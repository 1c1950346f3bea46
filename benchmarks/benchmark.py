import csv
import math
from pathlib import Path
from pyinstrument import Profiler
from planevec import Vector, angle_between, rotate_by, set_magnitude

def read_csv_points(path):
    points = []
    with open(path, 'r') as f:
        reader = csv.reader(f)
        for row in reader:
            if not row or row[0].startswith('#'): continue
            coords = [float(x) for x in row[1:3]]
            points.append((coords[0], coords[1]))
    return points

def make_points(n):
    return [(math.cos(i * 0.37) * (i + 1), math.sin(i * 0.61) * (i + 2)) for i in range(n)]

def run(points):
    acc = Vector((0.0, 0.0))
    for p in points:
        v = Vector(p)
        v.rotate_by(0.25).add((1.0, 1.0)).set_magnitude(2.0)
        acc.add(v)
        rotate_by(p, -0.25)
        set_magnitude({"x": p[0] + 1.0, "y": p[1]}, 3.0)
        angle_between(v, acc)
    return acc

def benchmark_large():
    base_path = Path(__file__).parent.parent
    csv_path = base_path / "tests" / "integration" / "csv" / "arithmetic.csv"

    points = make_points(20_000)
    if csv_path.exists():
        points += read_csv_points(csv_path)
    print(f"Loaded {len(points)} points")

    profiler = Profiler()
    profiler.start()

    N = 10
    print(f"Starting computation ({N} iterations)...")
    for _ in range(N):
        acc = run(points)

    print(f"Computation finished, accumulator {acc}")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("planevec_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
