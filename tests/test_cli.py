from main import run


def test_generate_prints_array(capsys) -> None:
    run(["generate", "5"])
    assert capsys.readouterr().out.strip() == "1 2 3 4 5"


def test_search_prints_steps_and_outcome(capsys) -> None:
    run(["search", "recursive", "4", "--size", "5"])
    out = capsys.readouterr().out

    assert "left 0 right 4 mid 2 comparing 3 depth 0" in out
    assert "found true index 3 comparisons 2" in out
    assert "max_depth 1" in out


def test_search_accepts_explicit_array(capsys) -> None:
    run(["search", "iterative", "7", "--array", "1", "3", "5"])
    assert "found false index -1" in capsys.readouterr().out


def test_perf_prints_one_line_per_size(capsys) -> None:
    run(["perf", "10", "100", "--batches", "2", "--runs", "3"])
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("size ")]

    assert len(lines) == 2
    assert lines[0].startswith("size 10 ")
    assert "theoretical 7" in lines[1]
