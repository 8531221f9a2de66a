from random import Random
from typing import List, Optional

from models import TunnelInput

EXAMPLE_TUNNELS = [
    TunnelInput(start_location=u, end_location=v, max_cars_per_hour=c)
    for u, v, c in [
        ("A", "B", 5), ("B", "C", 2), ("B", "D", 6), ("C", "E", 3),
        ("A", "F", 7), ("D", "E", 10), ("F", "G", 8), ("E", "G", 4),
    ]
]


def random_tunnels(n: int = 8, density: float = 0.3, cmin: int = 1, cmax: int = 20,
                   seed: Optional[int] = None) -> List[TunnelInput]:
    """Random acyclic network over L0..L{n-1} with head L0 and tail L{n-1}."""
    assert n >= 2, "n must be at least 2"
    rng = Random(seed)
    names = [f"L{i}" for i in range(n)]
    pairs = {(u, v) for u in range(n) for v in range(u + 1, n) if rng.random() < density}
    # Every vertex but L0 needs a way in, every vertex but the last a way out
    for v in range(1, n):
        if not any(b == v for _, b in pairs):
            pairs.add((rng.randint(0, v - 1), v))
    for u in range(n - 1):
        if not any(a == u for a, _ in pairs):
            pairs.add((u, rng.randint(u + 1, n - 1)))
    return [
        TunnelInput(start_location=names[u], end_location=names[v], max_cars_per_hour=rng.randint(cmin, cmax))
        for u, v in sorted(pairs)
    ]
