"""Stage 1: Quantum Sanitizer — check the raw form value is a number.

Accepts what a permissive numeric check accepts: optional surrounding
whitespace, an optional sign, digits with an optional fraction and an
optional exponent ("42", " -7 ", "4.7", ".5", "1e3"). The value is converted
to an int truncating toward zero, so "4.7" becomes 4 and "1e3" becomes 1000.

Reads:  payload.data (raw str)
Writes: payload.data (int)
"""
import json
import logging
import random
import re
from decimal import Decimal

from models.payload import Payload
from pipeline.errors import InvalidInputError
from pipeline.gravity import GravityManager
from settings import Settings

logger = logging.getLogger(__name__)

NAME = "QuantumSanitizer"

_NUMERIC_RE = re.compile(
    r"[ \t\n\r\v\f]*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?[ \t\n\r\v\f]*",
    re.ASCII,
)


def run(settings: Settings, payload: Payload, rng: random.Random) -> Payload:
    raw = str(payload.data)
    GravityManager.get_instance().apply_gravity(settings, rng)

    payload.add_log("PROCESS", "Initialising the quantum sanitization flow...")

    # Reverse, encode as JSON, decode again. Nothing is learned.
    mirrored = json.loads(json.dumps(list(reversed(raw))))
    logger.debug("Quantum mirror image: %r", "".join(mirrored))

    if len(raw) > settings.max_input_length or not is_numeric(raw):
        payload.add_log("ERROR", "Non-numeric anomaly detected in sector 7G.")
        raise InvalidInputError("This is not a number! The machine is jammed.")

    value = Decimal(raw.strip())
    if value != 0 and value.adjusted() >= settings.max_digits:
        payload.add_log("ERROR", "Number too heavy for the conveyor belt.")
        raise InvalidInputError(
            f"This number has more than {settings.max_digits} digits. The belt snapped."
        )

    payload.add_log("SUCCESS", "Data stabilised. Converted to a simulated 64-bit Integer.")
    payload.set_data(int(value))
    return payload


def is_numeric(text: str) -> bool:
    return _NUMERIC_RE.fullmatch(text) is not None
