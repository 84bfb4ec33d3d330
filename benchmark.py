#!/usr/bin/env python3
"""
Benchmark suite for JSON Minifier performance analysis.

Measures throughput and size reduction on generated datasets of different
sizes and nesting depths.
"""

import json
import statistics
import time
from typing import Any, Dict, List
from json_minifier import JSONMinifier
from json_minifier.profiler import MinificationProfiler


class BenchmarkSuite:
    """Benchmark suite for JSON Minifier."""

    def __init__(self, repeats: int = 5):
        """Initialize the benchmark suite."""
        self.repeats = repeats
        self.minifier = JSONMinifier()
        self.profiler = MinificationProfiler()

    def create_test_dataset(self, size_category: str) -> Any:
        """Create test datasets of different sizes."""
        if size_category == "small":
            return [{"id": i, "name": f"User {i}", "active": i % 2 == 0} for i in range(100)]
        elif size_category == "medium":
            return {
                "users": {
                    f"user_{i}": {
                        "name": f"User {i}",
                        "profile": {"age": 20 + i % 50, "city": f"City {i % 20}"},
                        "posts": [f"post_{j}" for j in range(i % 10)]
                    } for i in range(500)
                },
                "analytics": {
                    f"day_{i}": {"views": i * 100, "clicks": i * 10, "rate": i / 7} for i in range(365)
                }
            }
        elif size_category == "large":
            return {
                f"section_{i}": [
                    {"id": j, "data": f"Large data content {j} " * 10, "tags": [f"tag_{k}" for k in range(j % 5)]}
                    for j in range(500)
                ] for i in range(40)
            }
        elif size_category == "deep":
            data: Any = {"leaf": True}
            for i in range(2000):
                data = {"level": i, "child": data}
            return data
        else:
            raise ValueError(f"Unknown size category: {size_category}")

    def benchmark_dataset(self, size_category: str) -> Dict[str, Any]:
        """Benchmark minification of one dataset."""
        dataset = self.create_test_dataset(size_category)
        pretty = json.dumps(dataset, indent=2, ensure_ascii=False) if size_category != "deep" \
            else self._dump_deep(dataset)

        timings: List[float] = []
        minified = pretty
        for _ in range(self.repeats):
            with self.profiler.profile(size_category, pretty) as run:
                start = time.perf_counter()
                minified = self.minifier.minify(pretty, f"{size_category}.json")
                timings.append(time.perf_counter() - start)
                run["output"] = minified

        mean_time = statistics.mean(timings)
        input_bytes = len(pretty.encode("utf-8"))
        output_bytes = len(minified.encode("utf-8"))

        return {
            "dataset": size_category,
            "input_bytes": input_bytes,
            "output_bytes": output_bytes,
            "reduction_percent": 100 * (1 - output_bytes / input_bytes),
            "mean_seconds": mean_time,
            "stdev_seconds": statistics.stdev(timings) if len(timings) > 1 else 0.0,
            "throughput_mbps": (input_bytes / 1024 / 1024) / mean_time if mean_time > 0 else 0.0,
        }

    def _dump_deep(self, data: Any) -> str:
        # json.dumps recurses and would hit the recursion limit here.
        parts = []
        depth = 0
        while isinstance(data, dict) and "child" in data:
            parts.append('{\n  "level": %d,\n  "child": ' % data["level"])
            data = data["child"]
            depth += 1
        return "".join(parts) + '{ "leaf": true }' + "\n}" * depth

    def run(self) -> List[Dict[str, Any]]:
        """Run every benchmark and print a report."""
        print("🔬 Benchmarking JSON Minifier...")
        results = []
        for category in ("small", "medium", "large", "deep"):
            result = self.benchmark_dataset(category)
            results.append(result)
            print(f"   {category:<7} {result['input_bytes']:>10} -> {result['output_bytes']:>10} bytes "
                  f"({result['reduction_percent']:.1f}% smaller) "
                  f"{result['mean_seconds'] * 1000:.1f} ms, {result['throughput_mbps']:.1f} MB/s")

        summary = self.profiler.get_summary()
        print(f"\n📊 Runs: {summary['total_files']}, "
              f"memory peak {summary['memory_peak_mb']:.1f} MB")
        return results


if __name__ == "__main__":
    BenchmarkSuite().run()
