from main import main

SAMPLE = (
    "loadNumber pickup dropoff\n"
    "1 (10,0) (20,0)\n"
    "2 (20,0) (30,0)\n"
    "3 (-600,0) (-600,10)\n"
)


def write_file(tmp_path, text):
    path = tmp_path / "loads.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_missing_argument_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "ERROR: No file path provided" in out
    assert "usage:" in out


def test_prints_one_line_per_driver(tmp_path, capsys):
    assert main([write_file(tmp_path, SAMPLE)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["[1, 2]", "[3]"]


def test_summary_prints_total_cost(tmp_path, capsys):
    text = "header\n1 (10,0) (20,0)\n2 (20,0) (30,0)\n"
    assert main([write_file(tmp_path, text), "--summary"]) == 0
    out = capsys.readouterr().out
    assert "Route Distance" in out
    assert "Total cost: 540.00" in out


def test_driver_cost_override(tmp_path, capsys):
    text = "header\n1 (10,0) (20,0)\n2 (20,0) (30,0)\n"
    assert main([write_file(tmp_path, text), "--summary", "--driver-cost", "0"]) == 0
    assert "Total cost: 40.00" in capsys.readouterr().out


def test_missing_file_exits_non_zero(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_malformed_file_exits_non_zero(tmp_path, capsys):
    assert main([write_file(tmp_path, "header\n1 (1,1)\n")]) == 1
    assert "Malformed input" in capsys.readouterr().out


def test_no_loads_exits_with_distinct_code(tmp_path, capsys):
    assert main([write_file(tmp_path, "header\n")]) == 2
    assert "No loads to assign" in capsys.readouterr().out


def test_invalid_config_rejected(tmp_path, capsys):
    assert main([write_file(tmp_path, SAMPLE), "--max-working-time", "-5"]) == 1
    assert "Invalid configuration" in capsys.readouterr().out
