"""Tests for the intercept command-line interface."""

from __future__ import annotations

from click.testing import CliRunner

from intercept_toolkit.cli import cli


def _run(*args, env=None):
    return CliRunner().invoke(cli, list(args), env=env)


class TestCli:
    def test_distance_nm(self):
        # "--" keeps negative coordinates from being read as options.
        result = _run("distance", "--", "40.7128", "-74.0060", "51.5074", "-0.1278")
        assert result.exit_code == 0
        value, unit = result.output.split()
        assert unit == "nm"
        assert 2950 < float(value) < 3050

    def test_distance_km(self):
        result = _run("distance", "0", "0", "0", "0", "--unit", "km")
        assert result.exit_code == 0
        assert result.output.strip() == "0.00 km"

    def test_distance_rejects_bad_coordinates(self):
        result = _run("distance", "95", "0", "0", "0")
        assert result.exit_code != 0
        assert "latitude" in result.output

    def test_classify(self):
        result = _run("classify", "802.11ac", "BLE", "ADS-B")
        assert result.exit_code == 0
        for word in ("wifi", "bluetooth", "unknown"):
            assert word in result.output

    def test_freq_format_and_parse(self):
        assert _run("freq", "format", "118").output.strip() == "118.000 MHz"
        assert _run("freq", "parse", "1090.5 MHz").output.strip() == "1090.5"

    def test_freq_parse_non_numeric(self):
        result = _run("freq", "parse", "MHz")
        assert result.exit_code == 1
        assert "No frequency" in result.output

    def test_ago_passthrough_for_malformed(self):
        result = _run("ago", "noon")
        assert result.output.strip() == "noon"

    def test_utc(self):
        result = _run("utc")
        assert result.exit_code == 0
        assert len(result.output.strip()) == 8

    def test_check_mac(self):
        assert _run("check", "mac", "AA:BB:CC:DD:EE:FF").exit_code == 0
        assert _run("check", "mac", "AA:BB:CC").exit_code == 1

    def test_check_channel(self):
        assert _run("check", "channel", "6").exit_code == 0
        assert _run("check", "channel", "201").exit_code == 1

    def test_store_roundtrip(self, tmp_path):
        env = {
            "INTERCEPT_STORAGE_BACKEND": "file",
            "INTERCEPT_STORAGE_PATH": str(tmp_path / "s.json"),
        }
        assert _run("store", "set", "layout", '{"cols": 3}', "--json", env=env).exit_code == 0
        result = _run("store", "get", "layout", env=env)
        assert result.exit_code == 0
        assert '"cols": 3' in result.output

    def test_store_get_default(self):
        result = _run("store", "get", "missing", "--default", "none-set")
        assert result.output.strip() == "none-set"

    def test_store_set_invalid_json(self):
        result = _run("store", "set", "k", "{oops", "--json")
        assert result.exit_code != 0

    def test_icon(self):
        result = _run("icon", "anomaly", "--class-name", "amber")
        assert result.exit_code == 0
        assert 'icon-anomaly amber' in result.output

    def test_export(self, tmp_path):
        source = tmp_path / "report.txt"
        source.write_text("3 networks\n")
        out_dir = tmp_path / "downloads"
        result = _run(
            "export", str(source), "--name", "scan.txt",
            env={"INTERCEPT_DOWNLOAD_DIR": str(out_dir)},
        )
        assert result.exit_code == 0
        assert (out_dir / "scan.txt").read_text() == "3 networks\n"

    def test_check_mac_with_markup_characters(self):
        result = _run("check", "mac", "[/x]")
        assert result.exit_code == 1
        assert "[/x]" in result.output

    def test_user_text_printed_literally(self):
        result = _run("ago", "[bold]noon")
        assert result.output.strip() == "[bold]noon"
        result = _run("classify", "[red]wifi")
        assert result.exit_code == 0
        assert "[red]wifi" in result.output

    def test_store_get_markup_value(self):
        set_result = _run("store", "set", "label", "[/tag]")
        assert "Stored label" in set_result.output
        result = _run("store", "get", "label")
        assert result.exit_code == 0
        assert result.output.strip() == "[/tag]"
