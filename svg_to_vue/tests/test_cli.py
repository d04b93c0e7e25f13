#!/usr/bin/env python3

import json

import pytest
from click.testing import CliRunner

from svg_to_vue.svg_to_vue import svg_to_vue

ICON = '<svg viewBox="0 0 24 24"><path d="M0 0"/></svg>'


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Test cases for the svg_to_vue command"""

    def test_single_file(self, runner, tmp_path):
        source = tmp_path / "icon.svg"
        source.write_text(ICON)
        target = tmp_path / "icon.js"

        result = runner.invoke(svg_to_vue, [str(source), str(target), "--no-svgo"])

        assert result.exit_code == 0, result.output
        out = target.read_text(encoding="utf-8")
        assert 'attrs: Object.assign({"viewBox":"0 0 24 24"}, attrs),' in out

    def test_query_option(self, runner, tmp_path):
        source = tmp_path / "icon.svg"
        source.write_text("<svg>\n  <g/>\n</svg>")
        target = tmp_path / "icon.js"

        result = runner.invoke(svg_to_vue, [str(source), str(target), "--query", "?-svgo"])

        assert result.exit_code == 0, result.output
        assert "children.concat([_c('g')])" in target.read_text(encoding="utf-8")

    def test_config_file(self, runner, tmp_path):
        source = tmp_path / "icon.svg"
        source.write_text("<svg><tspan>a</tspan> <tspan>b</tspan></svg>")
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"svgo_config": False, "preserve_whitespace": True}))
        target = tmp_path / "icon.js"

        result = runner.invoke(svg_to_vue, [str(source), str(target), "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert "_v(' ')" in target.read_text(encoding="utf-8")

    def test_directory(self, runner, tmp_path):
        icons = tmp_path / "icons"
        (icons / "arrows").mkdir(parents=True)
        (icons / "close.svg").write_text(ICON)
        (icons / "arrows" / "left.svg").write_text(ICON)
        out = tmp_path / "out"

        result = runner.invoke(svg_to_vue, [str(icons), str(out), "--no-svgo"])

        assert result.exit_code == 0, result.output
        assert (out / "close.js").exists()
        assert (out / "arrows" / "left.js").exists()

    def test_directory_continues_after_bad_file(self, runner, tmp_path):
        icons = tmp_path / "icons"
        icons.mkdir()
        (icons / "bad.svg").write_text("<svg><g></svg>")
        (icons / "good.svg").write_text(ICON)
        out = tmp_path / "out"

        result = runner.invoke(svg_to_vue, [str(icons), str(out), "--no-svgo"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "bad.svg: CompilationError" in result.output
        assert "1 of 2 file(s) failed" in result.output
        assert not (out / "bad.js").exists()
        assert "functional: true" in (out / "good.js").read_text(encoding="utf-8")

    def test_single_bad_file_exits_non_zero(self, runner, tmp_path):
        source = tmp_path / "icon.svg"
        source.write_text("<svg>")
        target = tmp_path / "icon.js"

        result = runner.invoke(svg_to_vue, [str(source), str(target), "--no-svgo"])

        assert result.exit_code == 1
        assert "icon.svg: CompilationError" in result.output
        assert not target.exists()

    def test_existing_output_requires_force(self, runner, tmp_path):
        source = tmp_path / "icon.svg"
        source.write_text(ICON)
        target = tmp_path / "icon.js"
        target.write_text("old")

        result = runner.invoke(svg_to_vue, [str(source), str(target), "--no-svgo"])
        assert result.exit_code != 0
        assert isinstance(result.exception, FileExistsError)
        assert target.read_text() == "old"

        result = runner.invoke(svg_to_vue, [str(source), str(target), "--no-svgo", "--force"])
        assert result.exit_code == 0, result.output
        assert "functional: true" in target.read_text(encoding="utf-8")


if __name__ == "__main__":
    pytest.main([__file__])
