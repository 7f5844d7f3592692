import json

from responsive_grid.cli import main


def test_text_output(capsys):
    assert main(["--width", "375", "--items", "12"]) == 0
    out = capsys.readouterr().out
    assert "breakpoint:   sm" in out
    assert "cell width:   93" in out


def test_json_output_with_overrides(capsys):
    code = main(["--width", "300", "--columns", "xs=1,sm=2", "--padding", "8", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["breakpoint"] == "xs"
    assert data["column_count"] == 1
    assert data["cell_width"] == 284
    assert data["config"]["columns"] == {"xs": 1, "sm": 2}


def test_configuration_error_exit_code(capsys):
    assert main(["--width", "300", "--columns", "xs=0"]) == 2
    assert "must be a positive integer" in capsys.readouterr().err


def test_unknown_breakpoint_exit_code(capsys):
    assert main(["--width", "300", "--columns", "giant=3"]) == 2
