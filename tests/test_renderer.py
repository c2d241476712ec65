"""Golden-file tests for the subcommand renderer."""
from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from generate_subcommand.exceptions import FileOperationError, RenderError
from generate_subcommand.params import ParameterSet
from generate_subcommand.renderer import diff_against, first_char, generate, render, write_output

FOO = ParameterSet(
    command="foo",
    package="main",
    synopsis="lorem ipsum dolor",
    usage="usage: foo [flags]\n\nwopr foo -q=42",
    username="Alice",
)

BAR = ParameterSet(
    command="Bar",
    package="bar",
    synopsis="sit amet, consectetur",
    usage="usage: bar [flags]\n\nwopr bar -x",
    username="Bob",
)

SCENARIOS = [
    pytest.param("foo.golden", FOO, id="fooCmd"),
    pytest.param("bar.golden", BAR, id="BarCmd"),
]


@pytest.mark.parametrize("golden_name, params", SCENARIOS)
def test_render_matches_golden(golden_name, params, testdata_dir: Path, update_golden: bool) -> None:
    golden_file = testdata_dir / golden_name
    got = render(params)

    if update_golden:
        write_output(got, golden_file)
        pytest.skip(f"updated {golden_file}")

    want = golden_file.read_bytes().decode("utf-8")
    diff = diff_against(got, want, label=golden_name)
    assert not diff, f"files differ (-got +want)\n{diff}"


def test_bar_scenario_contents() -> None:
    content = render(BAR)
    assert content.startswith("package bar\n")
    assert "type BarCmd struct{}" in content
    assert 'return "bar"' in content
    assert "func (b *BarCmd) SetFlags" in content
    assert content.count("// TODO(Bob)") == 2


def test_render_is_deterministic() -> None:
    params = FOO
    assert render(params).encode() == render(params).encode()


def test_render_keeps_quotes_unescaped() -> None:
    params = ParameterSet(command="quote", package="main", synopsis='say "hi" & <bye>')
    assert 'return "say "hi" & <bye>"' in render(params)


def test_render_unknown_template_raises_render_error() -> None:
    params = ParameterSet(command="foo", package="main")
    with pytest.raises(RenderError):
        render(params, template="missing.go.j2")


def test_first_char_of_empty_string_is_empty() -> None:
    assert first_char("") == ""
    assert first_char("Bar") == "B"


def test_generate_writes_file(tmp_path: Path) -> None:
    out = tmp_path / "foo.go"
    content = generate(FOO, out)
    assert out.read_text(encoding="utf-8") == content


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_write_output_creates_file_without_exec_bits(tmp_path: Path) -> None:
    out = tmp_path / "foo.go"
    write_output("package main\n", out)
    mode = stat.S_IMODE(out.stat().st_mode)
    assert mode & 0o111 == 0
    assert mode & 0o600 == 0o600


def test_write_output_truncates_existing_file(tmp_path: Path) -> None:
    out = tmp_path / "foo.go"
    out.write_text("x" * 100)
    write_output("short\n", out)
    assert out.read_text() == "short\n"


def test_write_output_failure_raises_file_operation_error(tmp_path: Path) -> None:
    with pytest.raises(FileOperationError):
        write_output("package main\n", tmp_path / "missing" / "foo.go")


def test_generate_does_not_touch_file_when_render_fails(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "foo.go"
    out.write_text("original")

    def broken_render(params):
        raise RenderError("boom")

    monkeypatch.setattr("generate_subcommand.renderer.render", broken_render)
    with pytest.raises(RenderError):
        generate(FOO, out)
    assert out.read_text() == "original"


def test_diff_against_reports_changed_lines() -> None:
    diff = diff_against("a\nb\n", "a\nc\n", label="x.golden")
    assert "-b" in diff
    assert "+c" in diff
    assert diff_against("same\n", "same\n") == ""
