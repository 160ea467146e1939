import runpy
from pathlib import Path

MAIN = Path(__file__).resolve().parents[1] / "examples" / "main.py"


def load_main():
    return runpy.run_path(str(MAIN), run_name="console_example")["main"]


def test_console_prints_all_and_found_points(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n4 0\n4 4\n0 4\n2 2\n", encoding="utf-8")

    assert load_main()([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "All Points:"
    assert out[1:6] == ["A: 0, 0", "B: 4, 0", "C: 4, 4", "D: 0, 4", "E: 2, 2"]
    assert out[7] == "Found points:"
    assert out[8:] == ["A: 0, 0", "B: 4, 0", "C: 4, 4", "D: 0, 4"]


def test_console_reports_unreadable_file(tmp_path):
    assert load_main()([str(tmp_path / "missing.txt")]) == 1


def test_console_reports_non_finite_input(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0 0\nnan 1\n", encoding="utf-8")
    assert load_main()([str(path)]) == 1


def test_console_prompts_for_path(tmp_path, capsys, monkeypatch):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n4 0\n2 4\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda: f"  {path}\n")

    assert load_main()([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "specify file path:"
    assert out[1] == "All Points:"
    assert out[-3:] == ["A: 0, 0", "B: 4, 0", "C: 2, 4"]
