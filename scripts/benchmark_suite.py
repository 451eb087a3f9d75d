import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_generator.algo.base import seed_from_int
from maze_generator.algo.growing_tree import SelectionMethod
from maze_generator.algo.registry import create_generator
from maze_generator.core.stats import calculate_stats

RUNS = [
    ("dfs", SelectionMethod.FIRST),
    ("eller", SelectionMethod.FIRST),
    ("prim", SelectionMethod.FIRST),
    ("growing", SelectionMethod.FIRST),
    ("growing", SelectionMethod.MOST_RECENT),
    ("growing", SelectionMethod.RANDOM),
]

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")
    seed = seed_from_int(42)

    for name, method in RUNS:
        label = name if name != "growing" else f"growing/{method.value}"
        generator = create_generator(name, seed=seed, selection_method=method)

        gen_start = time.time()
        maze = generator.generate(width, height)
        gen_time = time.time() - gen_start

        stats = calculate_stats(maze)
        print(f"{label:<20} {gen_time:>8.4f}s  {(width*height)/gen_time:>12,.0f} cells/sec  "
              f"dead ends {stats['dead_end_percent']:5.1f}%  solution {stats['solution_length']}")

def run_suite():
    sizes = [
        (50, 50),
        (100, 100),
        (200, 200),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
