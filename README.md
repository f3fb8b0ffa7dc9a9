# crashnet

`crashnet` reads a CSV file of traffic crash records. It groups nearby crashes
into intersection clusters and joins clusters that lie close to each other into
a proximity graph. It then reports the most connected intersections and the
intersections with the most injury-causing crashes, and saves histograms of
node degrees as PNG files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input data

The CSV file needs a header row with these columns:

| column                     | meaning                                          |
|----------------------------|--------------------------------------------------|
| `crash_number`             | identifier of the crash                          |
| `crash_date`               | date such as `01-Jan-2021` or `01-January-2021`  |
| `crash_time`               | 12-hour time such as `2:13 AM`                   |
| `total_nonfatal_injuries`  | number of non-fatal injuries (may be empty)      |
| `total_fatal_injuries`     | number of fatal injuries (may be empty)          |
| `at_roadway_intersection`  | name of the intersection                         |
| `x_coordinate`             | projected x coordinate                           |
| `y_coordinate`             | projected y coordinate                           |

The file is read as UTF-8. A row is skipped without notice if any of these is
true:

- it has the wrong number of fields or is missing a required column,
- a number field is not a number,
- it has no coordinates,
- its date or time does not match the formats above.

Intersection names are stored in lower case.

## Command line

```
crashnet [--data PATH] [--precision P] [--max-distance D] [--output-dir DIR]
```

| option           | default                 | meaning                                         |
|------------------|-------------------------|-------------------------------------------------|
| `--data`         | `data/crash_data.csv`   | the crash CSV file to read                      |
| `--precision`    | `25.0`                  | grid size that coordinates are snapped to       |
| `--max-distance` | `10.0`                  | largest distance at which clusters are joined   |
| `--output-dir`   | `histogram_output`      | directory that receives the histogram PNG files |

The command prints:

- how many records it loaded,
- how many intersections and edges the graph has,
- how many nodes have at least one neighbour,
- the five highest-degree intersections with their degree and approximate
  grid coordinates,
- how many crashes are severe, where a crash is severe if it has at least one
  fatal or non-fatal injury,
- the five intersections with the most severe crashes,
- how long the run took.

It writes `degree_histogram.png` and `severe_crash_degree_histogram.png` into
the output directory. The directory is not created; it must already exist. A
histogram is not written when no node in its graph has a neighbour.

If the data file cannot be opened or a histogram cannot be saved, the command
prints `Error: ...` to standard error and exits with status 1.

Coordinates in the output are grid cell indices: a crash's coordinates divided
by the precision and rounded to the nearest whole number.

## Library use

```python
from crashnet.loader import load_crash_data
from crashnet.analysis import (
    group_by_intersections,
    build_crashgraph,
    compute_degree_distribution,
    top_n_high_degree_nodes,
    print_top_severe_intersections,
    is_severe,
)
from crashnet.visualization import plot_degree_histogram

crashes = load_crash_data("data/crash_data.csv")
nodes = group_by_intersections(crashes, 25.0)
graph = build_crashgraph(nodes, 10.0)

for degree, name, x, y in top_n_high_degree_nodes(graph, 5):
    print(f"{name} (Degree: {degree}) at ({x:.2f}, {y:.2f})")

severe = [crash for crash in crashes if is_severe(crash)]
print_top_severe_intersections(group_by_intersections(severe, 25.0), 5)

plot_degree_histogram(compute_degree_distribution(graph), "degrees.png")
```

Modules:

- `crashnet.records`: the types `CrashRecord`, `ProcessedCrashRecord`,
  `IntersectionNode` and `CrashGraph`. `ProcessedCrashRecord.from_raw` turns a
  raw row into a cleaned record and returns `None` when the row is not usable.
- `crashnet.loader`: `load_crash_data(file_path)` returns the list of cleaned
  records; an unreadable file raises `OSError`.
- `crashnet.analysis`: `group_by_intersections`, `build_crashgraph`,
  `edistance`, `most_common_name` (returns `"Unnamed intersection"` when no
  usable name is found), `top_n_high_degree_nodes`, `is_severe`,
  `compute_degree_distribution` and `print_top_severe_intersections`.
- `crashnet.visualization`: `plot_degree_histogram(degree_map, output_path)`
  saves an 800×600 PNG bar chart of how many nodes have each degree.
- `crashnet.cli`: `main(argv=None)` runs the command and returns its exit
  status.

## What it does not do

`crashnet` works on one CSV file at a time and keeps everything in memory. It
stores no results other than the histogram images, and it shows no interactive
plots or maps.