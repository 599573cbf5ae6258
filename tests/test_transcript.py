import json

import pytest
from securechannel.config import DEMO_PARAMS, ProtocolParams
from securechannel.errors import InputFormatError, ParameterError
from securechannel.transcript import (
    load_params,
    parse_params,
    render,
    render_json,
    render_text,
    run_session,
    write_transcript,
)

N = 683 * 811
DEMO_LINE = "683,811,3,13,5,7,11"


def test_parse_params_field_order():
    params = parse_params(DEMO_LINE)
    assert params == DEMO_PARAMS
    assert params.k_signer == 3
    assert params.k_checker == 13
    assert params.k_receiver == 5

def test_parse_params_tolerates_whitespace():
    assert parse_params(" 683, 811 ,3,13,5,7,11\n") == DEMO_PARAMS

def test_parse_params_wrong_field_count():
    with pytest.raises(InputFormatError, match="Expected 7"):
        parse_params("683,811,3")
    with pytest.raises(InputFormatError):
        parse_params(DEMO_LINE + ",1")

def test_parse_params_non_integer_field():
    with pytest.raises(InputFormatError, match="'y'"):
        parse_params("683,811,3,13,5,7,eleven")

def test_load_params_missing_file(tmp_path):
    with pytest.raises(InputFormatError, match="does not exist"):
        load_params(tmp_path / "nope.txt")

def test_load_params_from_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(DEMO_LINE, encoding="utf-8")
    assert load_params(path) == DEMO_PARAMS

def test_to_line_round_trip():
    assert DEMO_PARAMS.to_line() == DEMO_LINE

def test_key_for_unknown_role():
    with pytest.raises(ValueError, match="Unknown role"):
        DEMO_PARAMS.key_for("eve")

def test_demo_session():
    t = run_session(DEMO_PARAMS)
    assert t.verified is True
    assert t.recovered == 11
    assert 0 <= t.signature.s1 < N
    assert 0 <= t.signature.s2 < N
    assert t.recovered_with == "signer"

def test_session_recovering_with_checker_key():
    t = run_session(DEMO_PARAMS, recover_with="checker")
    assert t.verified is True
    assert t.recovered == 0
    assert t.recovered_with == "checker"

def test_session_signature_identity():
    t = run_session(DEMO_PARAMS)
    s1, s2 = t.signature
    assert (s1 * s1 + t.public_param * s2 * s2) % N == DEMO_PARAMS.x

def test_session_invalid_primes():
    params = ProtocolParams(683, 683, 3, 13, 5, 7, 11)
    with pytest.raises(ParameterError, match="P,Q not coprime"):
        run_session(params)

def test_render_text_lines():
    t = run_session(DEMO_PARAMS)
    lines = render_text(t).splitlines()
    assert lines == [
        f"Signature: ({t.signature.s1}, {t.signature.s2})",
        "Verification: true",
        "Recovered message: 11",
    ]

def test_render_json_is_canonical():
    t = run_session(DEMO_PARAMS)
    out = render_json(t)
    assert " " not in out
    data = json.loads(out)
    assert data["signature"] == [t.signature.s1, t.signature.s2]
    assert data["verified"] is True
    assert data["recovered"] == 11
    assert list(data) == sorted(data)

def test_render_unknown_format():
    t = run_session(DEMO_PARAMS)
    with pytest.raises(ValueError, match="Unknown output format"):
        render(t, "xml")

def test_write_transcript(tmp_path):
    t = run_session(DEMO_PARAMS, recover_with="checker")
    out = write_transcript(tmp_path / "out.txt", t)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[1] == "Verification: true"
    assert lines[2] == "Recovered message: 0"
