"""Command line entry point: load crashes, build graphs, report and plot."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .analysis import (
    UNNAMED,
    build_crashgraph,
    compute_degree_distribution,
    group_by_intersections,
    is_severe,
    print_top_severe_intersections,
    top_n_high_degree_nodes,
)
from .loader import load_crash_data
from .visualization import plot_degree_histogram

TOP_N = 5


def _format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="crashnet",
        description="Rank crash intersections by connectivity and severity.",
    )
    parser.add_argument("--data", type=Path, default=Path("data/crash_data.csv"))
    parser.add_argument("--precision", type=float, default=25.0)
    parser.add_argument("--max-distance", type=float, default=10.0)
    parser.add_argument("--output-dir", type=Path, default=Path("histogram_output"))
    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> None:
    crash_data = load_crash_data(args.data)
    print(f"Loaded {len(crash_data)} crash records.")

    intersections = group_by_intersections(crash_data, args.precision)
    graph = build_crashgraph(list(intersections), args.max_distance)
    edges = sum(len(neighbours) for neighbours in graph.adjacency.values()) // 2
    print(f"Built graph with {len(graph.nodes)} intersections & {edges} edges.")

    degrees = compute_degree_distribution(graph)
    print(f"Computed degrees for {len(degrees)} nodes")
    plot_degree_histogram(degrees, args.output_dir / "degree_histogram.png")

    print(f"Top {TOP_N} highest-degree intersections:")
    for degree, name, x, y in top_n_high_degree_nodes(graph, TOP_N):
        if name == UNNAMED or not name.strip():
            label = f"Intersection at ({x:.2f}, {y:.2f})"
        else:
            label = name
        print(f"{label} (Degree: {degree}) at approx. coords ({x:.2f}, {y:.2f})")

    severe_crashes = [crash for crash in crash_data if is_severe(crash)]
    print(f"Filtered to {len(severe_crashes)} severe crashes")
    severe_intersections = group_by_intersections(severe_crashes, args.precision)
    severe_graph = build_crashgraph(list(severe_intersections), args.max_distance)
    print_top_severe_intersections(severe_intersections, TOP_N)

    severe_degrees = compute_degree_distribution(severe_graph)
    plot_degree_histogram(
        severe_degrees, args.output_dir / "severe_crash_degree_histogram.png"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the crash analysis; return the process exit status."""
    args = _parse_args(argv)
    start = time.perf_counter()
    try:
        _run(args)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Duration {_format_duration(time.perf_counter() - start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())