"""The payload rolled through the machine: current value, log and history.

Each stage mutates the same Payload in place. ``data`` starts as the raw
form string, becomes an int after sanitizing, a base64 string after the
binary converter and finally the decorated verdict.
"""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal[
    "INFO",
    "PROCESS",
    "SUCCESS",
    "ERROR",
    "WARN",
    "MATH",
    "AI_BOOT",
    "AI_THINK",
    "AI_RESULT",
    "MECHANIC",
    "DATA",
    "FINISH",
    "SYSTEM",
    "CRITICAL_FAILURE",
]


class LogEntry(BaseModel):
    time: str  # wall clock, HH:MM:SS.ffffff
    level: LogLevel
    message: str


class Payload(BaseModel):
    data: int | str
    logs: list[LogEntry] = Field(default_factory=list)
    history: list[int | str] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: str) -> "Payload":
        payload = cls(data=raw)
        payload.add_log("INFO", f"Payload created from raw input: {raw}")
        return payload

    def set_data(self, value: int | str) -> None:
        """Replace the current value, pushing the old one onto ``history``."""
        self.history.append(self.data)
        self.data = value

    def add_log(self, level: LogLevel, message: str) -> None:
        self.logs.append(LogEntry(
            time=datetime.now().strftime("%H:%M:%S.%f"),
            level=level,
            message=message,
        ))
