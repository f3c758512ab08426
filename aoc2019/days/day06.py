"""Universal orbit map."""

from __future__ import annotations

from collections.abc import Sequence

from .day01 import _run_day

CENTER = "COM"


def _parse_orbits(text: str) -> dict[str, str]:
    orbits: dict[str, str] = {}
    for line in text.strip().split("\n"):
        parent, _, child = line.partition(")")
        orbits[child] = parent
    return orbits


def _parent(orbits: dict[str, str], name: str) -> str:
    try:
        return orbits[name]
    except KeyError:
        raise ValueError(f"object {name!r} orbits nothing") from None


def _depths(orbits: dict[str, str]) -> dict[str, int]:
    depths = {CENTER: 0}
    for name in orbits:
        chain: list[str] = []
        seen: set[str] = set()
        node = name
        while node not in depths:
            if node in seen:
                raise ValueError(f"orbit cycle through {node!r}")
            seen.add(node)
            chain.append(node)
            node = _parent(orbits, node)
        depth = depths[node]
        for link in reversed(chain):
            depth += 1
            depths[link] = depth
    return depths


def _ancestors(orbits: dict[str, str], start: str) -> dict[str, int]:
    hops: dict[str, int] = {}
    current = _parent(orbits, start)
    count = 0
    while current != CENTER:
        if current in hops:
            raise ValueError(f"orbit cycle through {current!r}")
        hops[current] = count
        current = _parent(orbits, current)
        count += 1
    hops[CENTER] = count
    return hops


def part1(text: str) -> int:
    """Total number of direct and indirect orbits."""
    orbits = _parse_orbits(text)
    depths = _depths(orbits)
    return sum(depths[name] for name in orbits)


def part2(text: str) -> int:
    """Fewest orbital transfers to move from YOU's parent to SAN's parent."""
    orbits = _parse_orbits(text)
    you = _ancestors(orbits, "YOU")
    san = _ancestors(orbits, "SAN")
    common = you.keys() & san.keys()
    if not common:
        raise ValueError("YOU and SAN share no common orbit")
    return min(you[name] + san[name] for name in common)


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())