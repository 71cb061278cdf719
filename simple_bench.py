import argparse
import logging
import random
import statistics
import time

from faker import Faker

from avltreemap import AVLTree, check_invariants
from avltreemap.settings import LOG_FORMAT
from avltreemap.validation import height_bound


def parse_args():
    parser = argparse.ArgumentParser(description="Run a simple benchmark")
    parser.add_argument("--size", type=int, default=10000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--no-validate", default=False, action="store_true")
    parser.add_argument("--remove-fraction", type=float, default=0.5)
    parser.add_argument("--verbose", default=False, action="store_true")
    return parser.parse_args()


def build_workload(size, seed, remove_fraction=0.5):
    """
    Fake people keyed by email. Every other person is written a second time
    with a new job so the tree has to replace values in place. Returns the
    writes in order, the state the tree should end up in and the keys to
    remove afterwards. The same seed always gives the same workload.
    """
    Faker.seed(seed)
    fake = Faker()
    writes = []

    for _ in range(size):
        key = fake.unique.email()
        writes.append((key, (fake.name(), fake.job())))

    for key, (name, _) in writes[::2]:
        writes.append((key, (name, fake.job())))

    expected = dict(writes)
    removals = random.Random(seed).sample(
        sorted(expected), int(len(expected) * remove_fraction)
    )
    return writes, expected, removals


def report_stats(report, stats):
    for k, v in stats.items():
        report.append(f"{k:<6}: {v}")


def summarize(times):
    return {
        "avg": statistics.mean(times),
        "min": min(times),
        "max": max(times),
        "median": statistics.median(times),
        "stddev": statistics.pstdev(times),
    }


def report_results(report, name, times):
    report.append(
        f"{len(times)/sum(times):.2f} {name}/sec ({len(times)} total in {sum(times):.2f} sec)"
    )
    report_stats(report, summarize(times))
    report.append("")


def timed(fn, *args):
    start = time.time()
    result = fn(*args)
    return result, time.time() - start


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT
    )
    report = []

    writes, expected, removals = build_workload(
        args.size, args.seed, args.remove_fraction
    )
    report.append(f"seed {args.seed}, {len(writes)} writes over {len(expected)} keys")
    tree = AVLTree()

    print("=========Starting Benchmark=========\n")
    print("- Test write performance [ ]", end="\r", flush=True)
    write_times = []
    for key, value in writes:
        _, elapsed = timed(tree.insert, key, value)
        write_times.append(elapsed)
    print("- Test write performance [x]")

    print("- Test read performance [ ]", end="\r", flush=True)
    read_times = []
    for key, value in expected.items():
        result, elapsed = timed(tree.value_of, key)
        assert result == value, f"expected {value} got {result}"
        read_times.append(elapsed)
    print("- Test read performance [x]")

    report.append(f"{len(tree)} keys, height {tree.height}")
    report.append(f"AVL height bound {height_bound(len(tree)):.2f}")
    report.append("")

    print("- Test remove performance [ ]", end="\r", flush=True)
    remove_times = []
    for key in removals:
        _, elapsed = timed(tree.remove, key)
        remove_times.append(elapsed)
    for key in removals:
        assert key not in tree, f"{key} still present after remove"
    print("- Test remove performance [x]")

    if not args.no_validate:
        print("- Test validate tree invariants [ ]", end="\r", flush=True)
        check_invariants(tree)
        print("- Test validate tree invariants [x]")

    report_results(report, "writes", write_times)
    report_results(report, "reads", read_times)
    if remove_times:
        report_results(report, "removes", remove_times)
    report.append(f"{len(tree)} keys left, height {tree.height}")

    print()
    print("\n".join(report))
