"""Stage 4: Deep Thought AI — a one-neuron network guesses the parity.

The guess is logged and then ignored. Guessing "Cat" may jam the machine
with probability 1/cat_failure_odds.
"""
import random

from models.payload import Payload
from pipeline.errors import CatInterferenceError
from pipeline.gravity import GravityManager, think
from settings import Settings

NAME = "DeepThoughtAI"

GUESSES = ("Even", "Odd", "Maybe", "42", "Cat")


def run(settings: Settings, payload: Payload, rng: random.Random) -> Payload:
    payload.add_log("AI_BOOT", "Booting the neural network (1 neuron detected)...")
    GravityManager.get_instance().apply_gravity(settings, rng)

    prediction = rng.choice(GUESSES)

    payload.add_log("AI_THINK", "The AI is analysing cosmic vibrations...")
    think(settings)

    confidence = rng.randint(1, 99)
    payload.add_log(
        "AI_RESULT",
        f"AI prediction: the number looks like '{prediction}'. (Confidence: {confidence}%)",
    )

    if prediction == "Cat":
        payload.add_log("WARN", "Alert: feline presence detected in the gears.")
        if rng.randint(1, settings.cat_failure_odds) == 1:
            payload.add_log("ERROR", "The cat caused an existential short circuit!")
            raise CatInterferenceError("Fatal error: a cat lay down on the mechanism.")

    payload.add_log("INFO", "Ignoring the AI prediction for safety reasons.")
    return payload
