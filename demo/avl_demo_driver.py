#!/usr/bin/env python3
"""AVL Tree Demo Driver

Runs a configurable insert/delete workload against the tree and samples
size, height and rotation counts for visualization.

Usage:
    python demo/avl_demo_driver.py --num-inserts 20000 --key-order random
    python demo/avl_demo_driver.py --mode list --num-inserts 5000 --delete-fraction 0.5
"""

from __future__ import annotations

import argparse
import csv
import logging
import math
import random
import time
from collections import defaultdict

from avl_list import AVLConfig, AVLTree, TreeList

logger = logging.getLogger(__name__)

HEADER = [
    "op_index",
    "phase",
    "size",
    "height",
    "height_bound",
    "rotations",
    "rotation_events",
    "max_rotations",
    "elapsed_ms",
]


def height_bound(n: int) -> float:
    """AVL worst-case height (edges) for n nodes."""
    if n == 0:
        return 0.0
    return 1.4405 * math.log2(n + 2) - 1.3277


def make_keys(args: argparse.Namespace) -> list[int]:
    """Build the insert key sequence."""
    keys = list(range(args.num_inserts))
    if args.key_order == "random":
        random.Random(args.seed).shuffle(keys)
    elif args.key_order == "reverse":
        keys.reverse()
    return keys


def run_demo(args: argparse.Namespace) -> None:
    """Run the workload and write sampled metrics to CSV."""
    config = AVLConfig(check_invariants=args.check_invariants)
    tree_list = TreeList(config) if args.mode == "list" else None
    tree = tree_list.tree if tree_list is not None else AVLTree(config)
    rng = random.Random(args.seed)
    keys = make_keys(args)

    counters: defaultdict[str, int] = defaultdict(int)

    print(f"Starting AVL demo: mode={args.mode}, inserts={args.num_inserts}, order={args.key_order}")
    print(f"Delete fraction: {args.delete_fraction}, sample every {args.sample_every} ops")
    print(f"Output: {args.out_csv}")

    with open(args.out_csv, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(HEADER)
        t_start = time.time()
        op_index = 0

        def record(rotations: int) -> None:
            counters["rotations"] += rotations
            if rotations > 0:
                counters["events"] += 1
            counters["max"] = max(counters["max"], rotations)

        def maybe_sample(phase: str) -> None:
            if op_index % args.sample_every == 0:
                w.writerow(sample_row(tree, counters, op_index, phase, t_start))
                counters.clear()

        for key in keys:
            if args.mode == "list":
                position = rng.randint(0, tree.size())
                record(tree.insert_at_rank(position, key, str(key)))
            else:
                record(tree.insert(key, str(key)))
            op_index += 1
            maybe_sample("insert")

        num_deletes = int(len(keys) * args.delete_fraction)
        for _ in range(num_deletes):
            if args.mode == "list":
                record(tree.delete_by_rank(rng.randrange(tree.size())))
            else:
                victim = tree.rank_select(rng.randint(1, tree.size())).key
                record(tree.delete(victim))
            op_index += 1
            maybe_sample("delete")

        w.writerow(sample_row(tree, counters, op_index, "end", t_start))

    logger.info(f"Finished {op_index} operations")
    print(f"Demo complete. Final size={tree.size()}, height={tree.height()}")
    print(f"Metrics written to {args.out_csv}")


def sample_row(
    tree: AVLTree, counters: dict, op_index: int, phase: str, t_start: float
) -> list:
    """Sample current metrics from the tree."""
    return [
        op_index,
        phase,
        tree.size(),
        tree.height(),
        round(height_bound(tree.size()), 3),
        counters.get("rotations", 0),
        counters.get("events", 0),
        counters.get("max", 0),
        int((time.time() - t_start) * 1000),
    ]


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="AVL tree demo driver")

    p.add_argument(
        "--mode",
        choices=["key", "list"],
        default="key",
        help="Key-ordered inserts or random positional inserts",
    )
    p.add_argument("--num-inserts", type=int, default=10_000, help="Number of inserts")
    p.add_argument(
        "--key-order",
        choices=["sequential", "random", "reverse"],
        default="random",
        help="Order of inserted keys",
    )
    p.add_argument(
        "--delete-fraction",
        type=float,
        default=0.5,
        help="Fraction of inserted items deleted afterwards",
    )
    p.add_argument(
        "--check-invariants",
        action="store_true",
        help="Validate the tree after every mutation (slow)",
    )
    p.add_argument("--seed", type=int, default=0, help="Random seed")
    p.add_argument(
        "--sample-every", type=int, default=100, help="Sampling interval in operations"
    )
    p.add_argument(
        "--out-csv", default="/tmp/avl_metrics.csv", help="Output CSV file"
    )
    p.add_argument("--verbose", action="store_true", help="Log rotations at DEBUG")

    args = p.parse_args()
    if not 0.0 <= args.delete_fraction <= 1.0:
        p.error("--delete-fraction must be between 0 and 1")
    if args.sample_every < 1:
        p.error("--sample-every must be positive")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    run_demo(args)


if __name__ == "__main__":
    main()
