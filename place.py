"""
Place the letters of the alphabet on a grid, using base 2 for the column and
base 3 for the row.
"""
import argparse
import string
from halton import Sequence

def place(size=10, labels=string.ascii_uppercase):
    grid = [["."] * size for _ in range(size)]
    for (x, y), c in zip(zip(Sequence(2), Sequence(3)), labels):
        grid[int(y * size)][int(x * size)] = c
    return grid

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=10)
    parser.add_argument("--plot", type=str, default=None)
    args = parser.parse_args()

    for row in place(args.size):
        print(" ".join(row))

    if args.plot is not None:
        from halton import halton_sequence
        from plot_summary import plot_points_2d
        n = len(string.ascii_uppercase)
        plot_points_2d(
            halton_sequence(n, 2), halton_sequence(n, 3),
            args.plot, labels=string.ascii_uppercase
        )
