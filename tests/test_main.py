import subprocess
import sys
from pathlib import Path

import main

ROOT = Path(__file__).resolve().parents[1]


def test_main_prints_example_capacity(capsys):
    assert main.main() == 0
    assert capsys.readouterr().out == "7\n"


def test_main_reports_failure(monkeypatch, capsys):
    monkeypatch.setattr(main, "EXAMPLE_TUNNELS", [])
    assert main.main() == 1
    assert capsys.readouterr().out == ""


def test_script_entry_point():
    p = subprocess.run([sys.executable, "backend/main.py"], cwd=ROOT, capture_output=True)
    assert p.returncode == 0
    assert p.stdout.decode().strip() == "7"
