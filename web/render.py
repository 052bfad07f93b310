"""HTML rendering of the machine page via Jinja2.

The same template serves both states: idle (no result yet, the terminal shows
the boot banner) and finished (the terminal replays the machine log, one
entry every ``animation_step_s`` seconds, then the verdict pops in).
"""
import logging
import platform
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models.result import MachineResult
from settings import Settings

logger = logging.getLogger(__name__)

# Path (relative to the package root) where Jinja2 looks for templates
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_ENV = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "j2"]),
)


def render_page(result: MachineResult | None, settings: Settings) -> str:
    """Render the full page. ``result`` is None before anything was submitted."""
    template = _ENV.get_template("index.html.j2")
    logger.debug("Rendering page with %d log entries", len(result.logs) if result else 0)
    return template.render(
        result=result,
        log_delays=_log_delays(result, settings),
        result_delay=_result_delay(result, settings),
        python_version=platform.python_version(),
    )


def _log_delays(result: MachineResult | None, settings: Settings) -> list[float]:
    """Animation delay in seconds for each log entry, in log order."""
    if result is None:
        return []
    return [round(i * settings.animation_step_s, 3) for i in range(len(result.logs))]


def _result_delay(result: MachineResult | None, settings: Settings) -> float:
    """The verdict appears once every log line is visible, plus a pause."""
    if result is None:
        return 0.0
    return round(len(result.logs) * settings.animation_step_s + settings.result_delay_s, 3)
