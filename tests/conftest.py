import random
from unittest.mock import MagicMock

import pytest

from models.payload import Payload
from settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with every artificial delay switched off so tests run instantly."""
    return Settings(
        gravity_min_ms=0,
        gravity_max_ms=0,
        think_delay_ms=0,
    )


@pytest.fixture
def rng() -> MagicMock:
    """A scripted random generator. Tests set randint/choice return values as needed.

    Defaults: no cloning (randint returns 2), the AI guesses "Even".
    """
    mock = MagicMock(spec=random.Random)
    mock.randint.return_value = 2
    mock.choice.return_value = "Even"
    return mock


@pytest.fixture
def int_payload() -> Payload:
    """A payload that already went through the sanitizer with the value 7."""
    payload = Payload.from_raw("7")
    payload.set_data(7)
    return payload
