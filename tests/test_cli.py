import matplotlib

matplotlib.use("Agg")

from pathgraph.cli import main


def test_demo_default_query(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Shortest path: book -> lp -> drums -> piano" in out
    assert "Total cost: 35" in out


def test_demo_with_k_paths(capsys):
    assert main(["--k", "2"]) == 0
    out = capsys.readouterr().out
    assert "Top 2 paths:" in out
    assert "1: book -> lp -> drums -> piano (cost 35)" in out
    assert "2: book -> poster -> bass_guitar -> piano (cost 50)" in out


def test_unreachable_pair_reports_error(capsys):
    assert main(["--start", "piano", "--end", "book"]) == 1
    assert "[ERROR] no path from" in capsys.readouterr().out


def test_unknown_label_reports_error(capsys):
    assert main(["--end", "guitar"]) == 1
    assert "[ERROR] node 'guitar' is not in the graph" in capsys.readouterr().out


def test_random_network(capsys):
    assert main(["--random", "8", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Shortest path: n0 ->" in out
    assert out.rstrip().splitlines()[-2].endswith("n7")


def test_plot_option(tmp_path, capsys):
    out_file = tmp_path / "demo.png"
    assert main(["--plot", str(out_file)]) == 0
    assert out_file.exists()
    assert f"Saved {out_file}" in capsys.readouterr().out
