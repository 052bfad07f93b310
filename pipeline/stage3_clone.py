"""Stage 3: Molecular Cloning Vat — sometimes the number duplicates itself.

With probability 1/clone_odds the value is doubled, which always makes it
even.

Reads:  payload.data (int)
Writes: payload.data (int, doubled or unchanged)
"""
import logging
import random

from models.payload import Payload
from pipeline.gravity import GravityManager
from settings import Settings

logger = logging.getLogger(__name__)

NAME = "CloningVat"


def run(settings: Settings, payload: Payload, rng: random.Random) -> Payload:
    num = payload.data
    GravityManager.get_instance().apply_gravity(settings, rng)

    payload.add_log("PROCESS", "Analysing the atomic structure of the number...")

    if rng.randint(1, settings.clone_odds) == 1:
        payload.add_log("WARN", "Instability detected! The number is duplicating!")
        cloned = num * 2
        payload.set_data(cloned)
        payload.add_log("SUCCESS", f"The number was cloned successfully. New value: {cloned}.")
        logger.debug("Cloned %d -> %d", num, cloned)
    else:
        payload.add_log("INFO", "The structure of the number stayed stable. No cloning needed.")
    return payload
