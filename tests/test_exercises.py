"""Tests for the command line runner."""

import pytest

from exercises import main


def test_arrays_defaults(capsys):
    out = main(['arrays'])
    assert out['arrays']['reduce'] == 156
    printed = capsys.readouterr().out
    assert "filter: [2, 4, 6]" in printed
    assert "find: 2" in printed
    assert "map: [1, 4, 9, 16, 25, 36]" in printed
    assert "reduce: 156" in printed
    assert printed.rstrip().endswith("Done.")


def test_arrays_custom_numbers_and_seed(capsys):
    out = main(['arrays', '--numbers', '3', '1', '2', '--seed', '0'])
    assert out['arrays']['sort'] == [1, 2, 3]
    assert out['arrays']['reduce'] == 4


def test_file_explicit_path(tmp_path, capsys):
    path = tmp_path / "datos.txt"
    out = main(['file', '--path', str(path)])
    assert out['file'] == "Hola desde Node.js"
    assert "Hola desde Node.js" in capsys.readouterr().out


def test_file_custom_content(tmp_path):
    path = tmp_path / "hola.txt"
    main(['file', '--path', str(path), '--content', 'hola'])
    assert path.read_text(encoding='utf-8') == 'hola'


def test_file_default_path_in_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(['file'])
    assert (tmp_path / "datos.txt").read_text(encoding='utf-8') == "Hola desde Node.js"


def test_file_error_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(['file', '--path', str(tmp_path / "missing" / "datos.txt")])


def test_all(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = main(['all'])
    assert out['arrays']['find'] == 2
    assert out['file'] == "Hola desde Node.js"


def test_command_required():
    with pytest.raises(SystemExit):
        main([])


def test_arrays_large_number(capsys):
    out = main(['arrays', '--numbers', '4294967296'])
    assert out['arrays']['map'] == [2**64]
    assert out['arrays']['reduce'] == 100 + 2**64
    assert f"map: [{2**64}]" in capsys.readouterr().out


def test_file_ignores_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('DATOS_PATH', str(tmp_path / "other.txt"))
    main(['file'])
    assert (tmp_path / "datos.txt").exists()
    assert not (tmp_path / "other.txt").exists()
