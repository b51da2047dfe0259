"""Tests for the command line interface.

Uses Click's CliRunner with a config file in a temporary directory.
"""

import json

import pytest

from colorpicker.cli.main import cli


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Color Picker' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize(
        "command",
        ["rgb2hsv", "hsv2rgb", "rgb2hex", "hex2rgb", "websafe", "inspect", "batch", "config"],
    )
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestConversionCommands:
    """Test the single color conversion commands with default settings."""

    def test_rgb2hsv(self, invoke):
        result = invoke('rgb2hsv', '255', '128', '0')
        assert result.exit_code == 0
        assert result.output == "30, 1.000, 1.000\n"

    def test_rgb2hsv_rejects_out_of_range(self, invoke):
        result = invoke('rgb2hsv', '256', '0', '0')
        assert result.exit_code == 2

    def test_hsv2rgb(self, invoke):
        result = invoke('hsv2rgb', '30', '1', '1')
        assert result.exit_code == 0
        assert result.output == "255, 128, 0\n"

    def test_hsv2rgb_percent(self, invoke):
        result = invoke('hsv2rgb', '--percent', '30', '100', '100')
        assert result.exit_code == 0
        assert result.output == "255, 128, 0\n"

    def test_hsv2rgb_negative_hue(self, invoke):
        result = invoke('hsv2rgb', '--', '-120', '1', '1')
        assert result.exit_code == 0
        assert result.output == "0, 0, 255\n"

    def test_hsv2rgb_rejects_saturation(self, invoke):
        result = invoke('hsv2rgb', '30', '2', '1')
        assert result.exit_code == 2
        assert 'SATURATION' in result.output

    @pytest.mark.parametrize("hue", ["inf", "nan"])
    def test_hsv2rgb_rejects_non_finite_hue(self, invoke, hue):
        result = invoke('hsv2rgb', hue, '1', '1')
        assert result.exit_code == 2
        assert 'HUE' in result.output

    def test_hsv2rgb_rejects_nan_value(self, invoke):
        result = invoke('hsv2rgb', '30', '1', 'nan')
        assert result.exit_code == 2
        assert 'VALUE' in result.output

    def test_rgb2hex(self, invoke):
        result = invoke('rgb2hex', '255', '0', '0')
        assert result.exit_code == 0
        assert result.output == "FF0000\n"

    def test_hex2rgb_shorthand(self, invoke):
        result = invoke('hex2rgb', '#f80')
        assert result.exit_code == 0
        assert result.output == "255, 136, 0\n"

    def test_hex2rgb_invalid(self, invoke):
        result = invoke('hex2rgb', 'zzzz')
        assert result.exit_code == 1
        assert "Error: Invalid color 'zzzz'" in result.output
        assert "Expected a 6-digit hex color" in result.output

    def test_websafe(self, invoke):
        result = invoke('websafe', '130', '130', '130')
        assert result.exit_code == 0
        assert result.output == "153, 153, 153\n"

    def test_websafe_clamps(self, invoke):
        result = invoke('websafe', '300', '0', '20.5')
        assert result.exit_code == 0
        assert result.output == "255, 0, 0\n"

    def test_inspect_hex(self, invoke):
        result = invoke('inspect', 'FF8000')
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "RGB:     255, 128, 0",
            "HSV:     30, 1.000, 1.000",
            "Hex:     FF8000",
            "Websafe: 255, 153, 0 (FF9900)",
        ]

    def test_inspect_rgb(self, invoke):
        result = invoke('inspect', '--rgb', '255', '128', '0')
        assert result.exit_code == 0
        assert "Hex:     FF8000" in result.output

    def test_inspect_needs_a_color(self, invoke):
        assert invoke('inspect').exit_code == 2
        assert invoke('inspect', 'FFF', '--rgb', '1', '2', '3').exit_code == 2


@pytest.mark.integration
class TestBatchCommand:
    """Test converting many colors at once."""

    def test_batch_from_stdin(self, invoke):
        result = invoke('batch', input="FF8000\n\n; comment\n#000\n")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "FF8000\t255, 128, 0\t30, 1.000, 1.000\tFF9900",
            "000000\t0, 0, 0\t0, 0.000, 0.000\t000000",
        ]

    def test_batch_reports_every_bad_line(self, invoke):
        result = invoke('batch', input="nope\nFF8000\n12\n")
        assert result.exit_code == 1
        assert "FF8000\t255, 128, 0" in result.output
        assert "line 1 (nope)" in result.output
        assert "line 3 (12)" in result.output
        assert "2 of 3 failed" in result.output

    def test_batch_from_file(self, invoke, temp_dir):
        source = temp_dir / "colors.txt"
        source.write_text("#369\n", encoding="utf-8")

        result = invoke('batch', str(source))
        assert result.exit_code == 0
        assert result.output.startswith("336699\t51, 102, 153\t")

    def test_batch_json_lines(self, invoke):
        assert invoke('config', 'set', '--format', 'json').exit_code == 0

        result = invoke('batch', input="FF8000\nfff\n")
        assert result.exit_code == 0
        records = [json.loads(line) for line in result.output.splitlines()]
        assert [record["input"] for record in records] == ["FF8000", "fff"]
        assert records[1]["hex"] == "FFFFFF"


@pytest.mark.integration
class TestConfigCommands:
    """Test reading and changing output preferences."""

    def test_show_defaults(self, invoke, config_path):
        result = invoke('config', 'show')
        assert result.exit_code == 0
        assert str(config_path) in result.output
        assert "hex_prefix: False" in result.output
        assert "output_format: text" in result.output

    def test_show_field(self, invoke):
        result = invoke('config', 'show', '--field', 'precision')
        assert result.exit_code == 0
        assert result.output == "3\n"

    def test_set_saves(self, invoke, config_path):
        result = invoke('config', 'set', '--hex-prefix', '--precision', '2')
        assert result.exit_code == 0
        assert "hex_prefix = True" in result.output

        saved = json.loads(config_path.read_text(encoding="utf-8"))
        assert saved["hex_prefix"] is True
        assert saved["precision"] == 2

    def test_set_nothing(self, invoke):
        assert invoke('config', 'set').exit_code == 2

    def test_set_invalid_precision(self, invoke, config_path):
        result = invoke('config', 'set', '--precision', '42')
        assert result.exit_code == 1
        assert "precision" in result.output
        assert not config_path.exists()

    def test_hex_prefix(self, invoke):
        invoke('config', 'set', '--hex-prefix')
        result = invoke('rgb2hex', '255', '0', '0')
        assert result.output == "#FF0000\n"

    def test_json_output(self, invoke):
        invoke('config', 'set', '--format', 'json')
        result = invoke('rgb2hsv', '255', '128', '0')
        assert json.loads(result.output) == {"h": 30, "s": 1.0, "v": 1.0}

    def test_hsv_percent(self, invoke):
        invoke('config', 'set', '--hsv-percent')

        result = invoke('rgb2hsv', '255', '128', '0')
        assert result.output == "30, 100%, 100%\n"

        result = invoke('hsv2rgb', '30', '100', '100')
        assert result.output == "255, 128, 0\n"

    def test_precision(self, invoke):
        invoke('config', 'set', '--precision', '1')
        result = invoke('rgb2hsv', '128', '128', '128')
        assert result.output == "0, 0.0, 0.5\n"

    def test_corrupt_config(self, invoke, config_path):
        config_path.write_text("{ invalid json }", encoding="utf-8")

        result = invoke('rgb2hex', '255', '0', '0')
        assert result.exit_code == 1
        assert "Configuration file" in result.output

    def test_reset_repairs_corrupt_config(self, invoke, config_path):
        config_path.write_text("{ invalid json }", encoding="utf-8")

        result = invoke('config', 'reset', '--yes')
        assert result.exit_code == 0
        assert invoke('rgb2hex', '255', '0', '0').output == "FF0000\n"
        assert config_path.with_suffix(".json.bak").read_text() == "{ invalid json }"

    def test_reset_asks_first(self, invoke, config_path):
        result = invoke('config', 'reset', input="n\n")
        assert result.exit_code == 1
        assert not config_path.exists()

    def test_path(self, invoke, config_path):
        result = invoke('config', 'path')
        assert result.output == f"{config_path}\n"


@pytest.mark.integration
class TestLogging:
    """Test log file options."""

    def test_log_file(self, runner, config_path, temp_dir):
        log_file = temp_dir / "logs" / "colorpicker.log"
        result = runner.invoke(cli, [
            '--config', str(config_path),
            '--log-file', str(log_file),
            '--log-level', 'DEBUG',
            'hex2rgb', 'nope',
        ])

        assert result.exit_code == 1
        assert f"check the log file: {log_file}" in result.output
        assert "convert hex to RGB" in log_file.read_text(encoding="utf-8")
