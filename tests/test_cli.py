from mazecarver.__main__ import main
from mazecarver.utils.maze_serialization import load_maze


def test_main_prints_maze(capsys):
    assert main(["--rows", "7", "--cols", "9", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Maze 7x9" in out
    assert "Perfect: yes" in out
    assert "Path exists" in out
    assert "Reachable cells from start:" in out
    assert "S" in out and "E" in out


def test_main_saves_and_plots(tmp_path):
    save_path = tmp_path / "maze.json"
    plot_path = tmp_path / "maze.png"
    code = main([
        "--rows", "9", "--cols", "9", "--seed", "1", "--trim", "endpoints",
        "--start", "2", "2", "--end", "8", "0", "--quiet",
        "--save", str(save_path), "--plot", str(plot_path),
    ])

    assert code == 0
    maze = load_maze(str(save_path))
    assert maze.start == (2, 2) and maze.end == (8, 0)
    assert maze.trim == "endpoints"
    assert plot_path.exists()


def test_main_rejects_even_dimensions(capsys):
    assert main(["--rows", "8", "--cols", "9"]) == 1
    assert "must be odd" in capsys.readouterr().out
