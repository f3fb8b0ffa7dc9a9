"""Grouping crashes into intersections, building the proximity graph and ranking nodes."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

from .records import CrashGraph, IntersectionNode, ProcessedCrashRecord

UNNAMED = "Unnamed intersection"


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def group_by_intersections(
    data: Iterable[ProcessedCrashRecord], precision: float
) -> list[IntersectionNode]:
    """Cluster crashes whose coordinates round to the same grid cell of size ``precision``."""
    grouped: dict[tuple[int, int], list[ProcessedCrashRecord]] = {}
    for crash in data:
        key = (
            _round_half_away(crash.x_coordinate / precision),
            _round_half_away(crash.y_coordinate / precision),
        )
        grouped.setdefault(key, []).append(crash)

    return [
        IntersectionNode(id=node_id, x=float(x), y=float(y), crashes=crashes)
        for node_id, ((x, y), crashes) in enumerate(grouped.items())
    ]


def edistance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def build_crashgraph(nodes: list[IntersectionNode], max_distance: float) -> CrashGraph:
    """Connect every pair of nodes no further apart than ``max_distance``."""
    adjacency: dict[int, list[int]] = {}
    for i, a in enumerate(nodes):
        for b in nodes[i + 1:]:
            if edistance(a.x, a.y, b.x, b.y) <= max_distance:
                adjacency.setdefault(a.id, []).append(b.id)
                adjacency.setdefault(b.id, []).append(a.id)
    return CrashGraph(nodes=nodes, adjacency=adjacency)


def most_common_name(crashes: Iterable[ProcessedCrashRecord]) -> str:
    """The most frequent non-empty, known intersection name among the crashes."""
    counts = Counter(
        name
        for name in (c.at_roadway_intersection.strip().lower() for c in crashes)
        if name and name != "unknown"
    )
    if not counts:
        return UNNAMED
    return counts.most_common(1)[0][0]


def top_n_high_degree_nodes(graph: CrashGraph, n: int) -> list[tuple[int, str, float, float]]:
    """The ``n`` most connected nodes as (degree, name, x, y), highest degree first."""
    ranked = sorted(
        ((node, len(graph.adjacency.get(node.id, ()))) for node in graph.nodes),
        key=lambda pair: pair[1],
        reverse=True,
    )
    return [
        (degree, most_common_name(node.crashes), node.x, node.y)
        for node, degree in ranked[:n]
    ]


def is_severe(crash: ProcessedCrashRecord) -> bool:
    """True if the crash caused any fatal or nonfatal injury."""
    return (crash.total_fatal_injuries or 0.0) > 0.0 or (
        crash.total_nonfatal_injuries or 0.0
    ) > 0.0


def compute_degree_distribution(graph: CrashGraph) -> dict[int, int]:
    """Map each connected node id to its number of neighbours."""
    return {node_id: len(neighbours) for node_id, neighbours in graph.adjacency.items()}


def print_top_severe_intersections(nodes: Sequence[IntersectionNode], n: int) -> None:
    """Print the ``n`` nodes with the most injury-causing crashes."""
    ranked = sorted(
        (
            (node, count)
            for node in nodes
            if (count := sum(1 for crash in node.crashes if is_severe(crash))) > 0
        ),
        key=lambda pair: pair[1],
        reverse=True,
    )

    print(f"Top {n} intersections with most severe crashes:")
    for rank, (node, count) in enumerate(ranked[:n], start=1):
        name = node.crashes[0].at_roadway_intersection if node.crashes else "unknown"
        print(
            f"{rank}. {name} (Severe crashes: {count}) "
            f"at approx. coords ({node.x:.2f}, {node.y:.2f})"
        )