import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'gridmaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

ALGORITHMS = ["random", "crawler", "recursive", "wilsons", "prims"]

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid Maze: procedural maze/dungeon layouts")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=30, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=30, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default="random", choices=ALGORITHMS, help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--no-border", action="store_true", help="Don't draw the outer wall ring")
    gen_parser.add_argument("--vertical-crawls", type=int, default=5, help="Crawler: vertical crawl count")
    gen_parser.add_argument("--horizontal-crawls", type=int, default=5, help="Crawler: horizontal crawl count")
    gen_parser.add_argument("--rooms", type=int, default=0, help="Number of rooms to carve")
    gen_parser.add_argument("--min-room", type=int, default=2, help="Minimum room size")
    gen_parser.add_argument("--max-room", type=int, default=5, help="Maximum room size (exclusive)")
    gen_parser.add_argument("--room-margin", type=int, default=1, help="Room distance from wall")
    gen_parser.add_argument("--wall-char", type=str, default="#", help="Character drawn for walls")
    gen_parser.add_argument("--path-char", type=str, default=".", help="Character drawn for open cells")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm")
    bench_parser.add_argument("--size", type=int, default=100, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    
    setup_logging(args.verbose)
    logger = logging.getLogger("gridmaze")
    
    if args.command is None:
        parser.print_help()
        return 0

    from gridmaze.core.config import GenerationConfig, GenerationType
    from gridmaze.pipeline import MazeSession, generate

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        try:
            config = GenerationConfig(
                width=args.width,
                height=args.height,
                has_border=not args.no_border,
                generation_type=GenerationType.parse(args.algo),
                vertical_crawl_count=args.vertical_crawls,
                horizontal_crawl_count=args.horizontal_crawls,
                number_of_rooms=args.rooms,
                min_room_size=args.min_room,
                max_room_size=args.max_room,
                room_distance_from_wall=args.room_margin,
                seed=args.seed,
            )
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            return 2

        from gridmaze.io.output import TextRenderer
        session = MazeSession(config, TextRenderer(wall=args.wall_char, path=args.path_char))
        snapshot = session.regenerate()

        if args.stats:
            from gridmaze.core.postprocess import MazePostProcessor
            logger.info(f"Stats: {MazePostProcessor.calculate_stats(snapshot.to_grid())}")

    elif args.command == "benchmark":
        logger.info(f"Running Generator Benchmark Suite (Size: {args.size}x{args.size})...")

        print(f"\n{'ALGORITHM':<12} | {'TIME (s)':<10} | {'OPEN':<8} | {'OPEN %':<8}")
        print("-" * 48)

        for gen_type in GenerationType:
            config = GenerationConfig(width=args.size, height=args.size, generation_type=gen_type, seed=args.seed)
            t_start = time.time()
            snapshot = generate(config)
            duration = time.time() - t_start

            total = snapshot.width * snapshot.height
            open_cells = snapshot.open_count()
            print(f"{gen_type.name.lower():<12} | {duration:<10.4f} | {open_cells:<8} | {open_cells / total * 100:<8.1f}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
