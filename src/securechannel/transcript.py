"""
transcript.py — Parameter files, protocol sessions and transcript encodings.

Input file: UTF-8 text holding seven comma-separated decimal integers
  p, q, kSigner, kChecker, kReceiver, x, y

Output encodings:
  text  three lines: signature pair, verification result, recovered message
  json  canonical JSON (sorted keys, no insignificant whitespace)
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from .config import FIELD_COUNT, FIELD_ORDER, ProtocolParams
from .errors import InputFormatError
from .party import Party, Signature

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Transcript:
    """Results of one Sign / CheckSign / RecoverMessage session."""
    signature: Signature
    verified: bool
    recovered: int
    public_param: int
    recovered_with: str = "signer"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "signature": [self.signature.s1, self.signature.s2],
            "verified": self.verified,
            "recovered": self.recovered,
            "public_param": self.public_param,
            "recovered_with": self.recovered_with,
        }


def parse_params(text: str) -> ProtocolParams:
    """Parse the comma-separated parameter line.

    Raises:
        InputFormatError: On a wrong field count or a non-integer field.
    """
    fields = text.split(",")
    if len(fields) != FIELD_COUNT:
        raise InputFormatError(
            f"Expected {FIELD_COUNT} comma-separated fields, found {len(fields)}",
            "order: " + ", ".join(FIELD_ORDER),
        )

    values = []
    for name, raw in zip(FIELD_ORDER, fields):
        try:
            values.append(int(raw.strip()))
        except ValueError:
            raise InputFormatError(f"Field '{name}' is not a decimal integer", repr(raw.strip())) from None
    return ProtocolParams(*values)


def load_params(path: Union[str, Path]) -> ProtocolParams:
    path = Path(path)
    if not path.is_file():
        raise InputFormatError("Input file does not exist", str(path))
    return parse_params(path.read_text(encoding="utf-8"))


def run_session(params: ProtocolParams, recover_with: str = "signer") -> Transcript:
    """Run Sign, CheckSign and RecoverMessage across three Parties.

    All three Parties share ``params.p``/``params.q``. The Receiver recovers
    with the key of the ``recover_with`` role; only the signer's key
    reproduces ``y``.

    Raises:
        ParameterError: If a Party or the operand pair is invalid.
        NotInvertibleError: If recovery hits a non-invertible intermediate.
    """
    recovery_key = params.key_for(recover_with)

    signer = Party(params.p, params.q, params.k_signer)
    checker = Party(params.p, params.q, params.k_checker)
    receiver = Party(params.p, params.q, params.k_receiver)

    sig = signer.sign(params.x, params.y)
    h = signer.public_param()
    verified = checker.check_sign(params.x, sig, h)
    recovered = receiver.recover_message(params.x, sig, recovery_key)
    logger.info("Session complete: verified=%s recovered_with=%s", verified, recover_with)

    return Transcript(
        signature=sig,
        verified=verified,
        recovered=recovered,
        public_param=h,
        recovered_with=recover_with,
    )


def render_text(transcript: Transcript) -> str:
    s1, s2 = transcript.signature
    return (
        f"Signature: ({s1}, {s2})\n"
        f"Verification: {str(transcript.verified).lower()}\n"
        f"Recovered message: {transcript.recovered}"
    )


def render_json(transcript: Transcript) -> str:
    return json.dumps(
        transcript.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def render(transcript: Transcript, fmt: str = "text") -> str:
    if fmt == "text":
        return render_text(transcript)
    if fmt == "json":
        return render_json(transcript)
    raise ValueError(f"Unknown output format '{fmt}'; expected one of {', '.join(OUTPUT_FORMATS)}")


def write_transcript(path: Union[str, Path], transcript: Transcript, fmt: str = "text") -> Path:
    path = Path(path)
    path.write_text(render(transcript, fmt), encoding="utf-8")
    return path
