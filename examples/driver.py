#!/usr/bin/env python3
"""
Driver script exercising the bstreelib tree engine.

This example demonstrates:
- Building a balanced tree from random input
- The four traversal orders
- Unbalancing the tree with large inserts and rebalancing it

Usage:
    python examples/driver.py                 # 16 random values below 100
    python examples/driver.py --seed 7 -v     # reproducible, with debug logging
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import Tree, pretty_print


def generate_random_numbers(count: int, maximum: int,
                            rng: Optional[random.Random] = None) -> List[int]:
    """Return count unique integers in [0, maximum)."""
    if count > maximum:
        raise ValueError(f"Cannot draw {count} unique values below {maximum}")
    rng = rng or random.Random()
    return rng.sample(range(maximum), count)


def print_orders(tree: Tree, suffix: str = "") -> None:
    print(f"Level Order{suffix}: {tree.level_order()}")
    print(f"Pre Order{suffix}:   {tree.pre_order()}")
    print(f"In Order{suffix}:    {tree.in_order()}")
    print(f"Post Order{suffix}:  {tree.post_order()}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the bstreelib tree engine")
    parser.add_argument("--count", type=int, default=16, help="Number of random values")
    parser.add_argument("--max", type=int, default=100, help="Exclusive upper bound for values")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    values = generate_random_numbers(args.count, args.max, random.Random(args.seed))
    tree = Tree(values)

    print("Initial Tree:")
    pretty_print(tree)
    print(f"Is balanced: {tree.is_balanced()}")
    print_orders(tree)

    for value in range(args.max + 1, args.max + 11):
        tree.insert(value)

    print(f"\nTree after adding nodes > {args.max}:")
    pretty_print(tree)
    print(f"Is balanced after adding nodes > {args.max}: {tree.is_balanced()}")

    tree.rebalance()
    print("\nTree after rebalancing:")
    pretty_print(tree)
    print(f"Is balanced after rebalancing: {tree.is_balanced()}")
    print_orders(tree, " after rebalancing")

    return 0


if __name__ == "__main__":
    sys.exit(main())
