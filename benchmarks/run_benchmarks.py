#!/usr/bin/env python3
"""Benchmark suite for PyAVL: operation latencies and tree height."""

import argparse
import json
import logging
import math
import random
import time
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyavl import AVLTree
from pyavl.validate import check_invariants

logger = logging.getLogger("pyavl.benchmarks")


class Metrics:
    def __init__(self):
        self.insert_latencies: List[float] = []
        self.search_latencies: List[float] = []
        self.remove_latencies: List[float] = []
        self.heights: List[Tuple[int, int]] = []  # (num_keys, height)

    @staticmethod
    def _percentiles(samples: List[float]) -> Dict:
        return {
            "p50": np.percentile(samples, 50),
            "p95": np.percentile(samples, 95),
            "p99": np.percentile(samples, 99),
        }

    def to_dict(self) -> Dict:
        return {
            "insert_latencies": self._percentiles(self.insert_latencies),
            "search_latencies": self._percentiles(self.search_latencies),
            "remove_latencies": self._percentiles(self.remove_latencies),
            "height_ratio": self._height_ratio(),
        }

    def _height_ratio(self) -> float:
        """Worst observed height relative to log2(n + 1)."""
        if not self.heights:
            return 0.0
        return float(np.max([h / math.log2(n + 1) for n, h in self.heights if n]))

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()

        for name, samples in (
            ("Insert Latency", self.insert_latencies),
            ("Search Latency", self.search_latencies),
            ("Remove Latency", self.remove_latencies),
        ):
            fig.add_trace(go.Box(y=samples, name=name, boxpoints="outliers"))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)


class BenchmarkSuite:
    def __init__(self, num_keys: int, seed: int):
        self.num_keys = num_keys
        self.metrics = Metrics()
        rng = random.Random(seed)
        self._keys = rng.sample(range(num_keys * 10), num_keys)
        self._removal_order = self._keys[:]
        rng.shuffle(self._removal_order)

    def run(self):
        tree = AVLTree()

        for i, key in enumerate(tqdm(self._keys, desc="PyAVL Insert")):
            start = time.perf_counter()
            tree.insert(key)
            self.metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)
            if ((i + 1) & i) == 0:  # sample height at powers of two
                self.metrics.heights.append((len(tree), tree.height))
        self.metrics.heights.append((len(tree), tree.height))
        check_invariants(tree)
        logger.info("inserted %d keys, height %d", len(tree), tree.height)

        for key in tqdm(self._keys, desc="PyAVL Search"):
            start = time.perf_counter()
            found = tree.search(key)
            self.metrics.search_latencies.append((time.perf_counter() - start) * 1e6)
            assert found, f"key {key} lost"

        for key in tqdm(self._removal_order, desc="PyAVL Remove"):
            start = time.perf_counter()
            tree.remove(key)
            self.metrics.remove_latencies.append((time.perf_counter() - start) * 1e6)
        assert len(tree) == 0, "tree not empty after removing every key"


def run_demo():
    """Small walkthrough: insert, search, remove a leaf."""
    tree = AVLTree()
    for key in (10, 20, 30, 40, 50, 25):
        tree.insert(key)
    logger.info("demo: inserted 10, 20, 30, 40, 50, 25 (root %d)", tree.root.key)
    logger.info("demo: search 25 -> %s", "found" if tree.search(25) else "not found")
    logger.info("demo: search 100 -> %s", "found" if tree.search(100) else "not found")
    tree.remove(10)
    check_invariants(tree)
    logger.info("demo: removed 10, %d keys remain", len(tree))


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of keys")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for key order")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    args.output.mkdir(parents=True, exist_ok=True)

    run_demo()

    suite = BenchmarkSuite(args.size, args.seed)
    suite.run()

    suite.metrics.plot_latencies(
        "PyAVL Latency Distribution",
        args.output / "pyavl_latencies.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump({"pyavl": suite.metrics.to_dict()}, f, indent=2)


if __name__ == "__main__":
    main()
