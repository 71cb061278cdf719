import argparse
import logging

from . import settings
from .avltree import AVLTree
from .traversal import ORDERS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="avltreemap",
        description="Build a small AVL tree mapping each key to its square and print it",
    )
    parser.add_argument("--size", type=int, default=settings.DEMO_SIZE)
    parser.add_argument("--order", choices=ORDERS, default=settings.DEFAULT_ORDER)
    parser.add_argument("--verbose", default=False, action="store_true")
    return parser.parse_args(argv)


def build_tree(size):
    tree = AVLTree()
    for i in range(size):
        tree.insert(i, i * i)
    return tree


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=settings.LOG_FORMAT,
    )

    tree = build_tree(args.size)
    for record in tree.traverse(args.order):
        print(record)


if __name__ == "__main__":
    main()
