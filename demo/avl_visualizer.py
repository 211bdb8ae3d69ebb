#!/usr/bin/env python3
"""AVL Tree Metrics Visualizer

Reads the metrics CSV written by the demo driver and plots height against
the AVL bound and rotation activity per sampling window.

Usage:
    python demo/avl_demo_driver.py --num-inserts 20000
    python demo/avl_visualizer.py --csv /tmp/avl_metrics.csv --output avl.png
"""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt

INT_FIELDS = [
    "op_index",
    "size",
    "height",
    "rotations",
    "rotation_events",
    "max_rotations",
    "elapsed_ms",
]


def load_csv_data(csv_path: str) -> list[dict]:
    """Load CSV rows with numeric fields converted."""
    rows = []
    with open(csv_path) as f:
        reader = csv.DictReader(f)
        for row in reader:
            for key in INT_FIELDS:
                row[key] = int(row[key])
            row["height_bound"] = float(row["height_bound"])
            rows.append(row)
    return rows


def plot_static(csv_path: str, output_path: str | None = None) -> None:
    """Generate static plots from CSV data."""
    rows = load_csv_data(csv_path)

    if not rows:
        print(f"No data found in {csv_path}")
        return

    x = [row["op_index"] for row in rows]

    fig, axes = plt.subplots(3, 1, figsize=(12, 9), sharex=True)

    # (1) Height against the worst-case AVL bound
    axes[0].plot(x, [row["height"] for row in rows], label="height", linewidth=2)
    axes[0].plot(
        x,
        [row["height_bound"] for row in rows],
        label="1.44 log2(n+2) bound",
        linestyle="--",
        linewidth=1.5,
    )
    axes[0].set_ylabel("levels", fontsize=11)
    axes[0].legend(loc="lower right")
    axes[0].set_title("Tree Height", fontsize=12, fontweight="bold")
    axes[0].grid(True, alpha=0.3)

    # (2) Size
    axes[1].plot(x, [row["size"] for row in rows], color="tab:orange", linewidth=2)
    axes[1].set_ylabel("nodes", fontsize=11)
    axes[1].set_title("Tree Size", fontsize=12, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    # (3) Rotations per window, split by phase
    for phase, color in (("insert", "tab:green"), ("delete", "tab:red")):
        px = [row["op_index"] for row in rows if row["phase"] == phase]
        py = [row["rotations"] for row in rows if row["phase"] == phase]
        if px:
            axes[2].bar(px, py, width=max(1, (x[-1] - x[0]) / max(len(x), 1)),
                        color=color, alpha=0.6, label=f"{phase} rotations")
    axes[2].set_ylabel("rotations / window", fontsize=11)
    axes[2].set_xlabel("operation", fontsize=11)
    axes[2].legend(loc="upper left")
    axes[2].set_title("Rotations", fontsize=12, fontweight="bold")
    axes[2].grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
        print(f"Plot saved to {output_path}")
    else:
        plt.show()


def main() -> None:
    """Parse arguments and run visualizer."""
    p = argparse.ArgumentParser(description="AVL tree metrics visualizer")
    p.add_argument(
        "--csv", default="/tmp/avl_metrics.csv", help="Path to metrics CSV file"
    )
    p.add_argument(
        "--output",
        help="Save plot to file (PNG/PDF/SVG) instead of showing it",
    )

    args = p.parse_args()

    csv_path = Path(args.csv)
    if not csv_path.exists():
        print(f"Error: CSV file not found: {csv_path}")
        print("Run demo/avl_demo_driver.py first to generate metrics")
        sys.exit(1)

    if args.output:
        # Non-interactive backend for file output
        matplotlib.use("Agg")

    plot_static(str(csv_path), args.output)


if __name__ == "__main__":
    main()
