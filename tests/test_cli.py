import pytest

from conftest import png_header_only
from img2text.cli import EXIT_FAILURE, EXIT_USAGE, main


def test_no_argument_prints_usage(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == EXIT_USAGE
    captured = capsys.readouterr()
    assert "usage:" in captured.out
    assert "No Image File Path Given." in captured.err


def test_invalid_path(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.png")])
    assert excinfo.value.code == EXIT_FAILURE
    assert "Error: Image Path is Invalid" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_unidentifiable_file(tmp_path, capsys):
    path = tmp_path / "notes.png"
    path.write_text("hello")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == EXIT_FAILURE
    assert "Image Type Identification Failed." in capsys.readouterr().err


def test_success(black_png, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main([str(black_png)])
    out = capsys.readouterr().out
    assert "Info: Image Text Saved!" in out
    # captured streams are not ttys
    assert "\033" not in out
    assert (tmp_path / "black.txt").read_text() == "@@\n@@\n"


def test_output_option(black_png, tmp_path):
    target = tmp_path / "art.txt"
    main([str(black_png), "-o", str(target)])
    assert target.read_text() == "@@\n@@\n"


def test_unwritable_output(black_png, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(black_png), "-o", str(tmp_path / "no" / "such" / "dir.txt")])
    assert excinfo.value.code == EXIT_FAILURE
    assert "Error:" in capsys.readouterr().err


def test_oversized_image_reports_error(tmp_path, monkeypatch, capsys):
    path = tmp_path / "huge.png"
    path.write_bytes(png_header_only(30000, 30000))
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == EXIT_FAILURE
    assert "Error: Image could not be decoded" in capsys.readouterr().err
    assert not (tmp_path / "huge.txt").exists()
