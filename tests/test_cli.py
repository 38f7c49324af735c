"""Tests for the funsvg CLI."""

import json

from funsvg.cli import load_script, main


class TestLoadScript:
    def test_extra_fields_ignored(self, script_file):
        script = load_script(script_file)
        assert len(script.actions) == 7
        assert script.duration_ms == 9500


class TestMain:
    def test_svg(self, script_file, tmp_path, capsys):
        out = tmp_path / "out.svg"
        assert main(["svg", str(script_file), "-o", str(out)]) == 0
        assert out.read_text().startswith('<svg class="funsvg"')
        assert str(out) in capsys.readouterr().out

    def test_png(self, script_file, tmp_path):
        out = tmp_path / "out.png"
        assert main(["png", str(script_file), "-o", str(out), "--scale", "1"]) == 0
        assert out.exists()

    def test_stops(self, script_file, capsys):
        assert main(["stops", str(script_file)]) == 0
        out = capsys.readouterr().out
        assert "Total: 7 stops over 9500 ms" in out

    def test_config_file(self, script_file, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text(f"output_dir: {tmp_path / 'previews'}\n")
        assert main(["--config", str(cfg), "svg", str(script_file)]) == 0
        assert (tmp_path / "previews" / "sample.svg").exists()

    def test_missing_file(self, tmp_path):
        assert main(["svg", str(tmp_path / "missing.funscript")]) == 1

    def test_empty_script_fails(self, tmp_path):
        path = tmp_path / "empty.funscript"
        path.write_text(json.dumps({"actions": []}))
        assert main(["stops", str(path)]) == 1

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.funscript"
        path.write_text("{not json")
        assert main(["stops", str(path)]) == 1

    def test_no_command(self):
        assert main([]) == 1
