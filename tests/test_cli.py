# tests/test_cli.py
import sys
import pytest
from unittest.mock import patch

from iconsprite.cli import main

ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
    'fill="#ff0000" stroke="#000000" stroke-width="2" style="opacity: 0.5;" >\n'
    '<path d="M1 1"/>\n</svg>\n'
)

@pytest.fixture
def project(tmp_path):
    icons = tmp_path / "icons"
    (icons / "solid").mkdir(parents=True)
    (icons / "outline").mkdir()
    (icons / "solid" / "plus.svg").write_text(ICON, encoding="utf-8")
    (icons / "outline" / "plus.svg").write_text(ICON, encoding="utf-8")
    (icons / "10-percent.svg").write_text(ICON, encoding="utf-8")
    return tmp_path

def run(args):
    with patch.object(sys, "argv", ["iconsprite", *args]):
        main()

def test_end_to_end_optimize(project, capsys):
    output = project / "out"
    run(["--input", str(project / "icons"), "--output", str(output),
         "--optimize", "--sprite", "--icons"])

    icon_files = sorted(p.name for p in (output / "icons").iterdir())
    assert icon_files == ["Plusoutline.svg", "Plussolid.svg", "one-kPercent.svg"]

    icon = (output / "icons" / "Plussolid.svg").read_text(encoding="utf-8")
    assert icon.startswith('<svg id="Plussolid" ')
    assert 'stroke="currentColor"' in icon
    assert 'fill="currentColor"' in icon
    assert "style=" not in icon
    assert 'height="24"' not in icon

    sprite = (output / "sprite.svg").read_text(encoding="utf-8")
    assert sprite.count("<symbol ") == 3
    assert "var(--stroke-width, 2)" in sprite

    captured = capsys.readouterr()
    assert f"Output: {output}" in captured.out
    assert "Duplicate names found" in captured.err
    assert "Plussolid" in captured.out

def test_no_output_selected_is_fatal(project, capsys):
    output = project / "out"
    with pytest.raises(SystemExit) as exc:
        run(["--input", str(project / "icons"), "--output", str(output), "--id"])

    assert exc.value.code == 1
    assert not output.exists()
    assert "--sprite or --icons" in capsys.readouterr().err

def test_stroke_requires_colors(project, capsys):
    output = project / "out"
    with pytest.raises(SystemExit) as exc:
        run(["--input", str(project / "icons"), "--output", str(output), "--sprite", "--stroke", "red"])

    assert exc.value.code == 1
    assert not output.exists()
    assert "--colors" in capsys.readouterr().err

def test_missing_input_is_fatal(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--input", str(tmp_path / "missing"), "--output", str(tmp_path / "out"), "--sprite"])

    assert exc.value.code == 1
    assert not (tmp_path / "out").exists()
    assert "Error:" in capsys.readouterr().err

def test_debug_prints_options(project, capsys):
    run(["--input", str(project / "icons"), "--output", str(project / "out"), "--icons", "--debug"])

    out = capsys.readouterr().out
    assert "remove_size" in out
    assert "Option" in out
    assert "-> one-kPercent" in out

def test_output_containing_input_is_fatal(project, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--input", str(project / "icons"), "--output", str(project), "--sprite"])

    assert exc.value.code == 1
    assert (project / "icons" / "solid" / "plus.svg").exists()
    assert "must not contain the input folder" in capsys.readouterr().err

def test_failed_wipe_exits(project, monkeypatch, capsys):
    output = project / "out"
    output.mkdir()

    def locked(path, *args, **kwargs):
        raise PermissionError(f"cannot delete {path}")

    monkeypatch.setattr("iconsprite.core.converter.shutil.rmtree", locked)
    with pytest.raises(SystemExit) as exc:
        run(["--input", str(project / "icons"), "--output", str(output), "--sprite"])

    assert exc.value.code == 1
    assert "cannot delete" in capsys.readouterr().err

def test_output_folder_printed_once(project, capsys):
    output = project / "out"
    run(["--input", str(project / "icons"), "--output", str(output), "--sprite"])

    assert capsys.readouterr().out.count(f"Output: {output}") == 1
