"""Tests for the machine (the pipeline) end-to-end."""
import random

import pytest

from pipeline import machine
from pipeline.errors import InvalidInputError
from pipeline.machine import ERROR_SENTINEL, Machine, build_machine, make_rng

_STAGE_NAMES = [
    "QuantumSanitizer",
    "CosmicCalculator",
    "CloningVat",
    "DeepThoughtAI",
    "BinaryConverter",
    "FinalJudgment",
]


def _engaged(result) -> list[str]:
    return [
        e.message.split(": ", 1)[1]
        for e in result.logs
        if e.level == "SYSTEM" and e.message.startswith("--> Engaging gear")
    ]


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestVerdict:
    def test_even_number(self, settings, rng):
        result = machine.run("42", settings, rng)
        assert result.verdict == "even"
        assert result.output == "⚖️ EVEN ⚖️"
        assert not result.failed
        assert result.error is None

    def test_odd_number(self, settings, rng):
        result = machine.run("7", settings, rng)
        assert result.verdict == "odd"
        assert result.output == "🦄 ODD 🦄"

    def test_negative_odd_number(self, settings, rng):
        assert machine.run("-3", settings, rng).verdict == "odd"

    def test_zero_is_even(self, settings, rng):
        assert machine.run("0", settings, rng).verdict == "even"

    def test_cloning_makes_odd_number_even(self, settings, rng):
        rng.randint.side_effect = [1_000_000, 1, 50]  # fluctuation, clone, confidence
        result = machine.run("7", settings, rng)
        assert result.verdict == "even"
        assert result.history == ["7", 7, 14, "MA=="]

    def test_history_without_cloning(self, settings, rng):
        result = machine.run("7", settings, rng)
        assert result.history == ["7", 7, "MQ=="]
        assert result.logs[-1].message == 'Transformation history: "7" -> 7 -> "MQ==" -> "🦄 ODD 🦄"'

    @pytest.mark.parametrize("seed", range(40))
    def test_parity_consistent_with_random_runs(self, settings, seed):
        value = seed * 7 - 100
        result = machine.run(str(value), settings, random.Random(seed))
        if result.failed:
            assert result.output == ERROR_SENTINEL
            return
        ints = [v for v in result.history if isinstance(v, int)]
        if len(ints) == 2:
            assert ints[1] == ints[0] * 2
            assert result.verdict == "even"
        else:
            assert result.verdict == ("even" if value % 2 == 0 else "odd")


# ---------------------------------------------------------------------------
# Stage order and logging
# ---------------------------------------------------------------------------

class TestStageLog:
    def test_one_entry_per_stage_in_order(self, settings, rng):
        result = machine.run("10", settings, rng)
        assert _engaged(result) == _STAGE_NAMES

    def test_gear_numbers(self, settings, rng):
        result = machine.run("10", settings, rng)
        gears = [e.message for e in result.logs if e.message.startswith("--> Engaging gear")]
        assert gears[0] == "--> Engaging gear 1: QuantumSanitizer"
        assert gears[5] == "--> Engaging gear 6: FinalJudgment"

    def test_first_and_last_entries(self, settings, rng):
        result = machine.run("10", settings, rng)
        assert result.logs[0].level == "INFO"
        assert result.logs[-1].level == "SYSTEM"
        assert result.logs[-1].message.startswith("Transformation history:")

    def test_build_machine_stage_names(self):
        assert [name for name, _ in build_machine().stages] == _STAGE_NAMES


# ---------------------------------------------------------------------------
# Jams
# ---------------------------------------------------------------------------

class TestJams:
    def test_non_numeric_yields_sentinel(self, settings, rng):
        result = machine.run("banana", settings, rng)
        assert result.output == ERROR_SENTINEL
        assert result.failed
        assert result.verdict is None
        assert "not a number" in result.error

    def test_non_numeric_stops_after_first_stage(self, settings, rng):
        result = machine.run("banana", settings, rng)
        assert _engaged(result) == _STAGE_NAMES[:1]
        assert result.logs[-2].level == "CRITICAL_FAILURE"
        assert result.logs[-1].message == 'Transformation history: "banana" -> "SYSTEM ERROR"'

    @pytest.mark.parametrize("raw", ["", "abc", "12abc", "0x10", "1,5"])
    def test_any_non_numeric_input(self, settings, raw):
        result = machine.run(raw, settings, random.Random(0))
        assert result.output == ERROR_SENTINEL

    def test_cat_failure_yields_sentinel(self, settings, rng):
        rng.choice.return_value = "Cat"
        rng.randint.side_effect = [5_000_000, 2, 50, 1]
        result = machine.run("13", settings, rng)
        assert result.failed
        assert result.output == ERROR_SENTINEL
        assert "cat" in result.error
        assert _engaged(result) == _STAGE_NAMES[:4]
        assert result.history == ["13", 13]

    def test_unexpected_errors_propagate(self, settings, rng):
        def broken(settings, payload, rng):
            raise ValueError("gear snapped")

        m = Machine([("Broken", broken)])
        with pytest.raises(ValueError):
            m.run("1", settings, rng)

    def test_custom_jam_caught(self, settings, rng):
        def picky(settings, payload, rng):
            raise InvalidInputError("nope")

        def never(settings, payload, rng):
            raise AssertionError("must not run")

        result = Machine([("Picky", picky), ("Never", never)]).run("1", settings, rng)
        assert result.error == "nope"
        assert _engaged(result) == ["Picky"]


# ---------------------------------------------------------------------------
# Random generator
# ---------------------------------------------------------------------------

class TestRng:
    def test_seeded_runs_are_reproducible(self, settings):
        settings.seed = 1234
        first = machine.run("21", settings)
        second = machine.run("21", settings)
        assert [e.message for e in first.logs] == [e.message for e in second.logs]

    def test_make_rng_is_fresh_per_call(self, settings):
        assert make_rng(settings) is not make_rng(settings)

    def test_empty_machine_returns_raw(self, settings, rng):
        result = Machine().run("hello", settings, rng)
        assert result.output == "hello"
        assert result.verdict is None
        assert not result.failed
