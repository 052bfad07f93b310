class MachineJam(Exception):
    """Raised by a stage to halt the machine. Caught only by Machine.run."""


class InvalidInputError(MachineJam):
    """The submitted value is not a usable number."""


class CatInterferenceError(MachineJam):
    """A cat lay down on the mechanism (random simulated failure)."""
