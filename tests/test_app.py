from mazechase.app import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.maze == "MAZE.txt"
    assert args.score == "MAZESCORE.txt"
    assert args.fps == 30.0
    assert args.seed is None
    assert args.frames is None


def test_parse_args_values():
    args = parse_args(["--maze", "a.bin", "--score", "b.bin", "--fps", "60", "--seed", "4", "--frames", "2"])
    assert (args.maze, args.score) == ("a.bin", "b.bin")
    assert args.fps == 60.0
    assert args.seed == 4
    assert args.frames == 2


def test_main_runs_headless(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    maze_path = tmp_path / "maze.bin"
    score_path = tmp_path / "score.bin"
    result = main(["--maze", str(maze_path), "--score", str(score_path),
                   "--frames", "3", "--fps", "1000", "--seed", "1"])
    assert result == 0
    assert not maze_path.exists()
    assert not score_path.exists()