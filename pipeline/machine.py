"""The machine: runs the raw form value through every stage in order.

Each stage receives the same Payload and may raise MachineJam to halt the
run. A jam is logged as CRITICAL_FAILURE and the payload value is replaced
by ERROR_SENTINEL; the stages after it are never engaged.

Stage order:
  1. QuantumSanitizer   — validate, convert to int
  2. CosmicCalculator   — add and subtract a fluctuation
  3. CloningVat         — sometimes double the value
  4. DeepThoughtAI      — guess, ignore the guess, sometimes meet a cat
  5. BinaryConverter    — keep the last bit, base64 it
  6. FinalJudgment      — decode and pronounce EVEN / ODD
"""
import logging
import random
from typing import Callable

from models.payload import Payload
from models.result import MachineResult
from pipeline import (
    stage1_sanitize,
    stage2_cosmic,
    stage3_clone,
    stage4_deep_thought,
    stage5_binary,
    stage6_judge,
)
from pipeline.errors import MachineJam
from settings import Settings

logger = logging.getLogger(__name__)

ERROR_SENTINEL = "SYSTEM ERROR"

StageFn = Callable[[Settings, Payload, random.Random], Payload]

_DEFAULT_STAGES = (
    stage1_sanitize,
    stage2_cosmic,
    stage3_clone,
    stage4_deep_thought,
    stage5_binary,
    stage6_judge,
)

_VERDICTS = {
    stage6_judge.decorate(stage6_judge.EVEN): "even",
    stage6_judge.decorate(stage6_judge.ODD): "odd",
}


class Machine:
    def __init__(self, stages: list[tuple[str, StageFn]] | None = None) -> None:
        self.stages: list[tuple[str, StageFn]] = list(stages or [])

    def add_stage(self, name: str, stage: StageFn) -> None:
        self.stages.append((name, stage))

    def run(
        self,
        raw: str,
        settings: Settings,
        rng: random.Random | None = None,
    ) -> MachineResult:
        """Run every stage against a fresh Payload and return the result."""
        if rng is None:
            rng = make_rng(settings)

        payload = Payload.from_raw(raw)
        error: str | None = None

        try:
            for index, (name, stage) in enumerate(self.stages, start=1):
                payload.add_log("SYSTEM", f"--> Engaging gear {index}: {name}")
                logger.debug("Gear %d: %s", index, name)
                payload = stage(settings, payload, rng)
        except MachineJam as exc:
            error = str(exc)
            logger.warning("Machine jammed on %r: %s", raw, error)
            payload.add_log("CRITICAL_FAILURE", error)
            payload.set_data(ERROR_SENTINEL)

        payload.add_log("SYSTEM", f"Transformation history: {_format_history(payload)}")

        output = str(payload.data)
        verdict = _VERDICTS.get(output)
        if verdict is not None:
            logger.info("Verdict for %r: %s", raw, verdict)

        return MachineResult(
            raw_input=raw,
            output=output,
            verdict=verdict,
            failed=error is not None,
            error=error,
            logs=payload.logs,
            history=payload.history,
        )


def build_machine() -> Machine:
    """Assemble the machine with the six default stages."""
    machine = Machine()
    for stage in _DEFAULT_STAGES:
        machine.add_stage(stage.NAME, stage.run)
    return machine


def run(raw: str, settings: Settings, rng: random.Random | None = None) -> MachineResult:
    return build_machine().run(raw, settings, rng)


def make_rng(settings: Settings) -> random.Random:
    """A fresh generator per run; seeded when settings.seed is set."""
    return random.Random(settings.seed)


def _format_history(payload: Payload) -> str:
    values = [*payload.history, payload.data]
    return " -> ".join(f'"{v}"' if isinstance(v, str) else str(v) for v in values)
