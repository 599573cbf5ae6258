import json
import sys
import unittest.mock as mock

import pytest
from securechannel.cli import main

DEMO_LINE = "683,811,3,13,5,7,11"

def test_cli_main_help(capsys):
    with mock.patch.object(sys, "argv", ["securechannel", "--help"]):
        with pytest.raises(SystemExit) as e:
            main()
        assert e.value.code == 0
        captured = capsys.readouterr()
        assert "SecureChannel three-party signing protocol CLI" in captured.out

def test_cli_demo(capsys):
    with mock.patch.object(sys, "argv", ["securechannel"]):
        main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Signature: (")
    assert lines[1] == "Verification: true"
    assert lines[2] == "Recovered message: 11"

def test_cli_demo_json(capsys):
    main(["--format", "json", "--recover-with", "checker"])
    data = json.loads(capsys.readouterr().out)
    assert data["verified"] is True
    assert data["recovered"] == 0
    assert data["recovered_with"] == "checker"

def test_cli_run_files(tmp_path, capsys):
    src = tmp_path / "input.txt"
    dst = tmp_path / "output.txt"
    src.write_text(DEMO_LINE, encoding="utf-8")

    main([str(src), str(dst)])

    lines = dst.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Signature: (")
    assert lines[1] == "Verification: true"
    assert lines[2] == "Recovered message: 11"
    assert "Results written to" in capsys.readouterr().out

def test_cli_run_files_with_checker_key(tmp_path):
    src = tmp_path / "input.txt"
    dst = tmp_path / "output.txt"
    src.write_text(DEMO_LINE, encoding="utf-8")

    main([str(src), str(dst), "--recover-with", "checker"])

    assert dst.read_text(encoding="utf-8").splitlines()[2] == "Recovered message: 0"

def test_cli_generate(capsys):
    main(["--generate", "1024"])
    fields = capsys.readouterr().out.strip().split(",")
    assert len(fields) == 7
    assert all(f.isdigit() for f in fields)

def test_cli_run_dispatch(tmp_path):
    with mock.patch("securechannel.cli.cmd_run") as mock_run:
        main(["in.txt", "out.txt", "-v"])
        assert mock_run.called
        args = mock_run.call_args[0][0]
        assert args.input == "in.txt"
        assert args.output == "out.txt"
        assert args.verbose is True
