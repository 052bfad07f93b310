"""Stage 5: Hydropneumatic Binary Converter — keep only the last bit.

The binary form of a negative number carries a leading "-" ("-101"), so the
last character is still the lowest bit.

Reads:  payload.data (int)
Writes: payload.data (base64 str of the last binary digit)
"""
import base64
import random

from models.payload import Payload
from settings import Settings

NAME = "BinaryConverter"


def run(settings: Settings, payload: Payload, rng: random.Random) -> Payload:
    binary = format(payload.data, "b")

    payload.add_log("MECHANIC", "Engaging the hydraulic bit press.")
    payload.add_log("DATA", f"Binary representation: {binary}")

    last_bit = binary[-1]
    encrypted = base64.b64encode(last_bit.encode("ascii")).decode("ascii")
    payload.set_data(encrypted)

    payload.add_log(
        "INFO",
        f"The last bit was extracted, encrypted ({encrypted}) and sent down the conveyor belt.",
    )
    return payload
