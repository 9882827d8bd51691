import pytest
from typer.testing import CliRunner
from errdigest.orchestrator.main import app


runner = CliRunner()


@pytest.fixture
def cli_config(tmp_path):
    path = tmp_path / "cli.yaml"
    path.write_text("logging:\n  file: ''\n", encoding="utf-8")
    return path


class TestScanCommand:
    def test_scan_writes_report(self, go_tree, tmp_path, cli_config):
        base, list_file = go_tree
        output = tmp_path / "errors.md"

        result = runner.invoke(app, [
            "scan", str(list_file), "-o", str(output), "-b", str(base), "-c", str(cli_config)
        ])

        assert result.exit_code == 0, result.output
        report = output.read_text(encoding="utf-8")
        assert "| ERROR: bad thing | a.go | 2 |" in report
        assert len(report.splitlines()) == 7
        assert "Skipped missing file: missing.go" in result.output

    def test_regex_option(self, go_tree, tmp_path, cli_config):
        base, list_file = go_tree
        output = tmp_path / "errors.md"

        result = runner.invoke(app, [
            "scan", str(list_file), "-o", str(output), "-b", str(base),
            "-c", str(cli_config), "--regex", "-p", r"fmt\.Errorf"
        ])

        assert result.exit_code == 0, result.output
        rows = output.read_text(encoding="utf-8").splitlines()[4:]
        assert rows == ['| return fmt.Errorf("Error: wrapped") | pkg/b.go | 4 |']

    def test_missing_list_exits_1(self, tmp_path, cli_config):
        result = runner.invoke(app, [
            "scan", str(tmp_path / "absent.txt"), "-o", str(tmp_path / "o.md"), "-c", str(cli_config)
        ])

        assert result.exit_code == 1
        assert not (tmp_path / "o.md").exists()
        assert "Traceback" not in result.output

    def test_bad_regex_exits_1(self, go_tree, tmp_path, cli_config):
        base, list_file = go_tree

        result = runner.invoke(app, [
            "scan", str(list_file), "-b", str(base), "-c", str(cli_config), "--regex", "-p", "(oops"
        ])

        assert result.exit_code == 1

    def test_empty_pattern_exits_1(self, go_tree, tmp_path, cli_config):
        base, list_file = go_tree
        output = tmp_path / "errors.md"

        result = runner.invoke(app, [
            "scan", str(list_file), "-o", str(output), "-b", str(base), "-c", str(cli_config), "-p", ""
        ])

        assert result.exit_code == 1
        assert "match.patterns" in result.output
        assert not output.exists()

    def test_bad_config_exits_1(self, go_tree, tmp_path):
        _, list_file = go_tree
        bad = tmp_path / "bad.yaml"
        bad.write_text("output:\n  path: ''\n", encoding="utf-8")

        result = runner.invoke(app, ["scan", str(list_file), "-c", str(bad)])

        assert result.exit_code == 1


class TestDemoCommand:
    def test_demo_creates_samples_and_report(self, tmp_path):
        output = tmp_path / "demo.md"

        result = runner.invoke(app, ["demo", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "samples" / "files.txt").exists()
        rows = output.read_text(encoding="utf-8").splitlines()[4:]
        assert len(rows) == 3
        assert rows[1].startswith("| return \"\", fmt.Errorf(\"Error: key %q not found \\| store=%p\"")
