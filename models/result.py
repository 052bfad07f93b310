from typing import Literal

from pydantic import BaseModel, Field

from models.payload import LogEntry


class MachineResult(BaseModel):
    """Outcome of one machine run, rendered by the HTML page and the JSON API.

    ``output`` is the decorated verdict (e.g. "⚖️ EVEN ⚖️") or the error
    sentinel when the machine jammed.
    """

    raw_input: str
    output: str
    verdict: Literal["even", "odd"] | None = None
    failed: bool = False
    error: str | None = None
    logs: list[LogEntry] = Field(default_factory=list)
    history: list[int | str] = Field(default_factory=list)
