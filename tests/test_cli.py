"""Tests for lconvert.cli."""

from __future__ import annotations

import io
import json
import logging

import pytest

from lconvert import __version__
from lconvert.cli import build_parser, main


def test_convert_arguments(capsys):
    assert main(['convert', '--from', 'qwerty', '--to', 'dvorak', 'hello']) == 0
    assert capsys.readouterr().out == "d.nnr\n"


def test_convert_joins_arguments(capsys):
    assert main(['convert', '--from', 'en', '--to', 'ru', 'ghbdtn', 'vbh']) == 0
    assert capsys.readouterr().out == "привет мир\n"


def test_convert_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO("руддщ\n"))
    assert main(['convert', '--from', 'russian', '--to', 'qwerty']) == 0
    assert capsys.readouterr().out == "hello\n"


def test_convert_unknown_layout(capsys):
    assert main(['convert', '--from', 'azerty', '--to', 'dvorak', 'hello']) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown layout 'azerty'" in captured.err


def test_convert_uses_config(tmp_path, capsys):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"chunk_threshold": 3, "max_workers": 2}))
    assert main(['--config', str(cfg), 'convert', '--from', 'qwerty', '--to', 'dvorak', 'hello']) == 0
    assert capsys.readouterr().out == "d.nnr\n"


def test_layouts(capsys):
    assert main(['layouts']) == 0
    assert capsys.readouterr().out.split("\n")[:4] == ['qwerty (hub)', 'dvorak', 'colemak', 'russian']


def test_table(capsys):
    assert main(['table', '--from', 'qwerty', '--to', 'dvorak']) == 0
    table = json.loads(capsys.readouterr().out)
    assert table['h'] == 'd'
    assert len(table) == 66


def test_table_same_layout_is_empty(capsys):
    assert main(['table', '--from', 'russian', '--to', 'ru']) == 0
    assert json.loads(capsys.readouterr().out) == {}


def test_serve_passes_config_to_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls['app'] = app
        calls.update(kwargs)

    monkeypatch.setattr('uvicorn.run', fake_run)
    assert main(['serve', '--port', '8123']) == 0
    assert calls['host'] == '127.0.0.1'
    assert calls['port'] == 8123
    assert calls['app'].title == 'lconvert'


def test_serve_port_in_use(monkeypatch):
    def fake_run(app, **kwargs):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr('uvicorn.run', fake_run)
    assert main(['serve']) == 1


def test_logfile_written(tmp_path):
    log_file = tmp_path / "logs" / "lconvert.log"
    assert main(['--debug', '--logfile', str(log_file), 'layouts']) == 0
    assert "command: layouts" in log_file.read_text(encoding="utf-8")


def test_config_debug_enables_debug_logging(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"debug": True}))
    log_file = tmp_path / "lconvert.log"
    assert main(['--config', str(cfg), '--logfile', str(log_file), 'layouts']) == 0
    assert logging.getLogger('lconvert').level == logging.DEBUG
    assert "command: layouts" in log_file.read_text(encoding="utf-8")


def test_debug_off_by_default(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"debug": False}))
    assert main(['--config', str(cfg), 'layouts']) == 0
    assert logging.getLogger('lconvert').level == logging.INFO


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
