"""Gravity manager: the process-wide source of artificial friction.

Stages call ``GravityManager.get_instance().apply_gravity(...)`` to pause
for a random moment before turning. The pause is purely cosmetic.
"""
import logging
import random
import time

from settings import Settings

logger = logging.getLogger(__name__)


class GravityManager:
    _instance: "GravityManager | None" = None

    def __init__(self) -> None:
        self.gravitational_constant = 9.81

    @classmethod
    def get_instance(cls) -> "GravityManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def apply_gravity(self, settings: Settings, rng: random.Random) -> bool:
        """Sleep for a random delay in [gravity_min_ms, gravity_max_ms]."""
        if not settings.gravity_enabled:
            return True
        delay_ms = rng.randint(settings.gravity_min_ms, settings.gravity_max_ms)
        logger.debug("Air friction: %d ms at g=%.2f", delay_ms, self.gravitational_constant)
        time.sleep(delay_ms / 1000)
        return True


def think(settings: Settings) -> None:
    """Block for ``think_delay_ms`` while the AI thinks very hard."""
    if settings.think_delay_ms > 0:
        time.sleep(settings.think_delay_ms / 1000)
