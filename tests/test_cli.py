import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from openapi_splitter.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliSplit:
    def test_split_json(self, tmp_path):
        output_dir = tmp_path / "out"
        runner = CliRunner()
        result = runner.invoke(main, [str(FIXTURES / "petstore.json"), "-o", str(output_dir)])

        assert result.exit_code == 0, result.output
        assert (output_dir / "openapi.json").exists()
        assert "successfully split" in result.output
        assert "Wrote 12 files." in result.output

    def test_format_option(self, tmp_path):
        output_dir = tmp_path / "out"
        runner = CliRunner()
        result = runner.invoke(main, [
            str(FIXTURES / "petstore.json"),
            "--output", str(output_dir),
            "--format", "yaml",
        ])

        assert result.exit_code == 0, result.output
        assert (output_dir / "openapi.yaml").exists()
        assert (output_dir / "paths" / "pets_petId_.yaml").exists()

    def test_default_output_dir(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, [str(FIXTURES / "petstore.yaml")])
            assert result.exit_code == 0, result.output
            assert Path("openapi-split/openapi.yaml").exists()

    def test_output_from_env(self, tmp_path):
        output_dir = tmp_path / "env-out"
        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(FIXTURES / "petstore.json")],
            env={"OPENAPI_SPLITTER_OUTPUT": str(output_dir)},
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / "openapi.json").exists()

    def test_debug_configures_logging(self, tmp_path):
        runner = CliRunner()
        with patch("openapi_splitter.cli.configure_logging") as mock_configure:
            result = runner.invoke(main, [str(FIXTURES / "petstore.json"), "-o", str(tmp_path / "out"), "--debug"])

        assert result.exit_code == 0, result.output
        mock_configure.assert_called_once_with(True)


class TestCliErrors:
    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.yaml"), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "file not found" in result.output

    def test_invalid_document(self, tmp_path):
        src = tmp_path / "api.json"
        src.write_text(json.dumps({"openapi": "3.0.0"}))
        runner = CliRunner()
        result = runner.invoke(main, [str(src), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "invalid OpenAPI document" in result.output

    def test_bad_format_choice(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(FIXTURES / "petstore.json"), "--format", "toml"])

        assert result.exit_code == 2

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "--output" in result.output
        assert "--format" in result.output
        assert "--debug" in result.output

    def test_single_error_message(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.yaml"), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert result.output.count("file not found") == 1
