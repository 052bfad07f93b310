"""Stage 2: Cosmic Calculator — add a fluctuation, then take it away again.

Reads/Writes: nothing (payload.data is left untouched)
"""
import logging
import random

from models.payload import Payload
from pipeline.gravity import GravityManager
from settings import Settings

logger = logging.getLogger(__name__)

NAME = "CosmicCalculator"


def run(settings: Settings, payload: Payload, rng: random.Random) -> Payload:
    num = payload.data
    GravityManager.get_instance().apply_gravity(settings, rng)

    payload.add_log("PROCESS", "Aligning the calculation matrices on the universal constants...")

    fluctuation = rng.randint(settings.cosmic_min, settings.cosmic_max)
    payload.add_log("MATH", f"Adding a cosmic fluctuation of +{fluctuation}.")
    temp = num + fluctuation

    payload.add_log("MATH", "Recalibrating by subtracting the cosmic fluctuation...")
    restored = temp - fluctuation
    logger.debug("Fluctuation %d applied and removed: %s -> %s", fluctuation, num, restored)

    payload.add_log("SUCCESS", "The number was checked against the constants of the universe. It is stable.")
    return payload
