"""Tests for the command-line interface.

WHY: Most users only ever run the converter with no arguments from the
folder holding Input/ and Output/. That path, the exit codes, and the
status report are the user-facing contract.

RULES:
- main() is called with an explicit argv list
- Status output is asserted on stderr; stdout stays empty
"""

import pytest

from datavyu_converter.cli import build_config, build_parser, main

from conftest import SAMPLE_EXPORT


def _dirs(input_dir, output_dir):
    return ["--input-dir", str(input_dir), "--output-dir", str(output_dir)]


class TestParser:

    def test_no_arguments(self):
        args = build_parser().parse_args([])
        assert args.input_dir is None
        assert args.frame_rate is None
        assert args.strict is False

    def test_frame_rate_preset(self):
        args = build_parser().parse_args(["--frame-rate", "pal"])
        assert args.frame_rate == 25.0

    def test_invalid_frame_rate_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--frame-rate", "fast"])
        assert exc.value.code == 2
        assert "Invalid frame rate" in capsys.readouterr().err

    def test_build_config_keeps_defaults_for_unset_flags(self, tmp_path):
        args = build_parser().parse_args(["--input-dir", str(tmp_path), "--prefix", "SC_"])
        cfg = build_config(args)
        assert cfg.input_dir == tmp_path
        assert cfg.output_prefix == "SC_"
        assert cfg.start_code == "B"


class TestMain:

    def test_converts_input_directory(self, input_dir, output_dir, write_export, capsys):
        write_export("session1.csv")

        main(_dirs(input_dir, output_dir))

        assert (output_dir / "OUTPUT_session1.csv").is_file()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[OK] session1.csv" in captured.err
        assert "Converted 1 of 1 file(s)." in captured.err

    def test_default_directories_relative_to_cwd(
        self, tmp_path, input_dir, output_dir, write_export, monkeypatch,
    ):
        monkeypatch.chdir(tmp_path)
        write_export("session1.csv")

        main([])

        content = (output_dir / "OUTPUT_session1.csv").read_text(encoding="utf-8")
        assert "X,30,60,,,1,90,3003,00:03.003" in content

    def test_reports_skipped_rows(self, input_dir, output_dir, write_export, capsys):
        write_export("typo.csv", SAMPLE_EXPORT + "3,oops,0,C\n")

        main(_dirs(input_dir, output_dir))

        err = capsys.readouterr().err
        assert "[PARTIAL] typo.csv" in err
        assert "1 row(s) skipped" in err
        assert "line 4:" in err

    def test_failures_exit_zero_by_default(self, input_dir, tmp_path, write_export, capsys):
        write_export("session1.csv")

        main(_dirs(input_dir, tmp_path / "missing-output"))

        assert "[ERROR] session1.csv" in capsys.readouterr().err

    def test_strict_exits_one_on_failure(self, input_dir, tmp_path, write_export):
        write_export("session1.csv")

        with pytest.raises(SystemExit) as exc:
            main(_dirs(input_dir, tmp_path / "missing-output") + ["--strict"])
        assert exc.value.code == 1

    def test_strict_passes_when_everything_converts(self, input_dir, output_dir, write_export):
        write_export("session1.csv")
        main(_dirs(input_dir, output_dir) + ["--strict"])

    def test_missing_input_dir_exits_one(self, tmp_path, output_dir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(_dirs(tmp_path / "nope", output_dir))
        assert exc.value.code == 1
        assert "Input directory not found" in capsys.readouterr().err

    def test_empty_start_code_is_usage_error(self, input_dir, output_dir):
        with pytest.raises(SystemExit) as exc:
            main(_dirs(input_dir, output_dir) + ["--start-code", ""])
        assert exc.value.code == 2

    def test_empty_input_dir(self, input_dir, output_dir, capsys):
        main(_dirs(input_dir, output_dir))
        assert "No input files found." in capsys.readouterr().err
