import json
import logging

import pytest

from smartinput.cli import main

from tests.infrastructure import write_fields_yaml


@pytest.fixture(autouse=True)
def _restore_cli_logger():
    """main() attaches a stderr handler to the package logger; drop it after each test."""
    logger = logging.getLogger("smartinput")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


def test_apply_rewrites(capsys):
    rc, out, _ = run(capsys, "apply", "creditCard", "--old", "1234567", "--new", "12345678")
    assert rc == 0
    data = json.loads(out)
    assert data["preset"] == "credit_card"
    assert data["result"] == {"text": "1234 5678", "selectionStart": 9, "selectionEnd": 9}
    assert data["rewritten"] is True
    assert data["rejected"] is False
    assert [f["name"] for f in data["formatters"]] == ["allow", "max_length", "grouping"]
    assert data["formatters"][1]["params"] == {"max_length": 16, "policy": "truncate"}


def test_apply_rejects_with_options(capsys):
    rc, out, _ = run(capsys, "apply", "mobile", "--new", "4", "--opt", "start_digits=[5]")
    assert rc == 0
    data = json.loads(out)
    assert data["rejected"] is True
    assert data["result"]["text"] == ""


def test_apply_with_caret(capsys):
    rc, out, _ = run(capsys, "apply", "passport",
                     "--old", "ab", "--new", "aXb", "--old-caret", "1", "--new-caret", "2")
    assert rc == 0
    assert json.loads(out)["result"] == {"text": "AXB", "selectionStart": 2, "selectionEnd": 2}


def test_type(capsys):
    rc, out, _ = run(capsys, "type", "creditCard", "1234567890")
    assert rc == 0
    data = json.loads(out)
    assert data["name"] == "credit_card"
    assert data["keystrokes"] == 10
    assert data["result"]["text"] == "1234 5678 90"
    assert data["error"] is None


def test_type_with_int_option(capsys):
    rc, out, _ = run(capsys, "type", "mobile", "123456", "--opt", "max_length=4")
    assert rc == 0
    assert json.loads(out)["result"]["text"] == "1234"


def test_list_presets(capsys):
    rc, out, _ = run(capsys, "list", "presets")
    assert rc == 0
    data = json.loads(out)
    assert "credit_card" in data["names"]
    assert data["defaults"]["mobile"] == {"max_length": 15, "start_digits": []}


def test_list_validators(capsys):
    rc, out, _ = run(capsys, "list", "validators")
    assert rc == 0
    assert "email" in json.loads(out)["names"]


def test_check(tmp_path, capsys):
    cfg = write_fields_yaml(tmp_path, """
        fields:
          phone:
            preset: mobile
            options: {max_length: 10, start_digits: [5]}
            validator: mobile
    """)
    rc, out, _ = run(capsys, "check", str(cfg), "phone", "5123456789")
    assert rc == 0
    assert json.loads(out)["error"] is None

    rc, out, _ = run(capsys, "check", str(cfg), "phone", "512")
    assert rc == 1
    data = json.loads(out)
    assert data["name"] == "phone"
    assert data["error"] == "Mobile number must be at least 10 digits"


@pytest.mark.parametrize("argv,message", [
    (["type", "zip", "1"], "Unknown preset"),
    (["type", "mobile", "1", "--opt", "max_length"], "key=value"),
    (["type", "mobile", "1", "--opt", "max_lenght=3"], "max_lenght"),
    (["apply", "vital_sign", "--new", "5", "--opt", "max_value=abc"], "max_value"),
    (["type", "mobile", "1", "--opt", "start_digits=5"], "allowed digits"),
    (["check", "missing.yaml", "phone", "1"], "not found"),
])
def test_errors_exit_with_2(capsys, argv, message):
    rc, out, err = run(capsys, *argv)
    assert rc == 2
    assert out == ""
    assert message in err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("smartinput ")
