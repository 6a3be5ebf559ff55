"""Main entry point for the maze generator."""

import argparse
import sys
from typing import Optional, Sequence

from .domain.types import GridShape, MazePreconditionError
from .utils.grid_factory import generate_maze_grid
from .utils.maze_analysis import (
    analyze_connectivity, find_path_bfs, is_perfect, plot_maze, render_ascii
)
from .utils.maze_serialization import MazeData, save_maze


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze by recursive backtracking")
    parser.add_argument("--rows", type=int, default=21, help="Grid height (odd, at least 3)")
    parser.add_argument("--cols", type=int, default=31, help="Grid width (odd, at least 3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--trim", choices=["legacy", "endpoints"], default="legacy",
                        help="How start/end are removed from the maze list")
    parser.add_argument("--start", type=int, nargs=2, metavar=("ROW", "COL"), help="Start coordinate")
    parser.add_argument("--end", type=int, nargs=2, metavar=("ROW", "COL"), help="End coordinate")
    parser.add_argument("--save", type=str, help="Write the maze as JSON to this path")
    parser.add_argument("--plot", type=str, help="Render the maze with matplotlib to this image path")
    parser.add_argument("--quiet", action="store_true", help="Do not print the maze")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_args(argv)
    start = tuple(args.start) if args.start else None
    end = tuple(args.end) if args.end else None

    try:
        walls, start, end, maze_list = generate_maze_grid(
            args.rows, args.cols, start=start, end=end, seed=args.seed, trim=args.trim
        )
    except MazePreconditionError as e:
        print(f"❌ {e}")
        return 1

    has_path, path = find_path_bfs(walls, start, end)
    shape = GridShape(args.rows, args.cols)

    if not args.quiet:
        print(render_ascii(walls, start, end, path))
        print()
    print(f"Maze {shape.rows}x{shape.cols}, start {start}, end {end}")
    print(f"Carved cells: {len(maze_list)}")
    print(f"Perfect: {'yes' if is_perfect(walls, start) else 'no'}")
    print(f"Reachable cells from start: {len(analyze_connectivity(walls, start))}")
    if has_path:
        print(f"✅ Path exists! Length: {len(path)} steps")
    else:
        print("❌ No path exists from start to end!")

    if args.save:
        maze_data = MazeData(args.rows, args.cols, maze_list, start, end,
                             seed=args.seed, trim=args.trim)
        if save_maze(maze_data, args.save):
            print(f"📁 Maze saved to: {args.save}")

    if args.plot:
        plot_maze(walls, start, end, path, output=args.plot)
        print(f"🖼️  Plot saved to: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
