"""Print the origin, its up-right neighbor and the distance between them.

Run with ``python -m gridcoord.examples.origin``.
"""

from gridcoord import Coord


def main() -> list[str]:
    """Print the example lines and return them."""
    origin = Coord(0, 0)
    other = Coord(1, 1)

    lines = [repr(origin), repr(other), repr(origin.distance_to(other))]
    for line in lines:
        print(line)
    return lines


if __name__ == "__main__":
    main()
