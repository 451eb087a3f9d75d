import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_generator' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_generator.algo.base import seed_from_int
from maze_generator.algo.growing_tree import SelectionMethod
from maze_generator.algo.registry import ALGORITHMS, create_generator
from maze_generator.core.errors import InvalidSeedError, InvalidSizeError, MazeError

STATIC_SEED = bytes([42] * 32)

logger = logging.getLogger("maze_generator")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Generator: rectangular mazes from four interchangeable algorithms")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=sorted(ALGORITHMS), help="Generation Algorithm")
    gen_parser.add_argument("--method", type=str, default=SelectionMethod.FIRST.value,
                            choices=[m.value for m in SelectionMethod], help="Growing tree selection method")
    seed_group = gen_parser.add_mutually_exclusive_group()
    seed_group.add_argument("--seed", type=int, default=None, help="Random Seed")
    seed_group.add_argument("--static", action="store_true", help="Use the fixed all-42 seed")
    gen_parser.add_argument("--no-goal", action="store_true", help="Recursive backtracking: leave the goal at (0, 0)")
    gen_parser.add_argument("--text", action="store_true", help="Print the text rendering to stdout")
    gen_parser.add_argument("--svg", nargs="?", const="-", default=None, metavar="PATH",
                            help="Write SVG to PATH (stdout if omitted)")
    gen_parser.add_argument("--svg-height", type=int, default=None, help="SVG height in pixels")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Show the maze in a window")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator")
    bench_parser.add_argument("--size", type=int, default=100, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def resolve_seed(args):
    if args.static:
        return STATIC_SEED
    if args.seed is not None:
        return seed_from_int(args.seed)
    return None


def run_generate(args) -> int:
    generator = create_generator(
        args.algo,
        seed=resolve_seed(args),
        selection_method=SelectionMethod(args.method),
        compute_goal=not args.no_goal,
    )

    logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
    t0 = time.time()
    maze = generator.generate(args.width, args.height)
    logger.info(f"Generation complete in {time.time()-t0:.4f}s (start {maze.start}, goal {maze.goal})")

    if args.stats:
        from maze_generator.core.stats import calculate_stats
        logger.info(f"Stats: {calculate_stats(maze)}")

    if args.text:
        from maze_generator.render.text import write_text
        write_text(maze, sys.stdout)

    if args.svg is not None:
        from maze_generator.render.svg import SvgOptions, write_svg
        options = SvgOptions(height=args.svg_height)
        if args.svg == "-":
            write_svg(maze, sys.stdout, options)
        else:
            logger.info(f"Saving SVG to {args.svg}...")
            try:
                with open(args.svg, "w", encoding="utf-8") as f:
                    write_svg(maze, f, options)
            except OSError as e:
                from maze_generator.core.errors import RenderError
                raise RenderError(f"Could not open {args.svg}: {e}") from e

    if args.visual:
        logger.info("Visual mode enabled - Opening window...")
        from maze_generator.viz.renderer import Renderer
        renderer = Renderer(maze)
        renderer.init_window()
        renderer.run_loop()

    return 0


def run_benchmark(args) -> int:
    logger.info(f"Running Generator Benchmark (Size: {args.size}x{args.size})...")
    seed = seed_from_int(args.seed)

    print(f"\n{'ALGORITHM':<20} | {'TIME (s)':<10} | {'PASSAGES':<10} | {'SOLUTION':<10}")
    print("-" * 60)

    runs = [(name, SelectionMethod.FIRST) for name in sorted(ALGORITHMS) if name != "growing"]
    runs += [("growing", method) for method in SelectionMethod]

    for name, method in runs:
        generator = create_generator(name, seed=seed, selection_method=method)
        t_start = time.time()
        maze = generator.generate(args.size, args.size)
        duration = time.time() - t_start

        label = name if name != "growing" else f"growing/{method.value}"
        print(f"{label:<20} | {duration:<10.4f} | {maze.graph.edge_count():<10} | {len(maze.solution()):<10}")

    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            return run_generate(args)
        elif args.command == "benchmark":
            return run_benchmark(args)
    except (InvalidSizeError, InvalidSeedError) as e:
        logger.error(str(e))
        return 2
    except MazeError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
