"""Stage 6: Final Judgment — decode the bit and pronounce the verdict.

Reads:  payload.data (base64 str)
Writes: payload.data (decorated verdict, e.g. "⚖️ EVEN ⚖️")
"""
import base64
import random

from models.payload import Payload
from pipeline.gravity import GravityManager
from settings import Settings

NAME = "FinalJudgment"

EVEN = "EVEN"
ODD = "ODD"

_EMBLEMS = {EVEN: "⚖️", ODD: "🦄"}


def run(settings: Settings, payload: Payload, rng: random.Random) -> Payload:
    GravityManager.get_instance().apply_gravity(settings, rng)

    bit = base64.b64decode(payload.data).decode("ascii")
    result = EVEN if bit == "0" else ODD

    payload.add_log("FINISH", "Analysis complete. Releasing the balloons.")
    payload.set_data(decorate(result))
    return payload


def decorate(result: str) -> str:
    emblem = _EMBLEMS[result]
    return f"{emblem} {result} {emblem}"
