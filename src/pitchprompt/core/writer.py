# src/pitchprompt/core/writer.py
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from pitchprompt.errors import WriteError
from pitchprompt.models import RenderedPrompt

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class OutputWriter:
    """
    Persists rendered prompts under output_dir.

    Files are opened in exclusive-create mode, so an existing prompt is never
    overwritten: a clash (same template, same second) gets a _2, _3, ... suffix.
    """

    def __init__(self, output_dir: Path, timestamped: bool = True, clock: Optional[Callable[[], datetime]] = None):
        self.output_dir = Path(output_dir)
        self.timestamped = timestamped
        self.clock = clock or datetime.now

    def _base_name(self, template_id: str) -> str:
        if self.timestamped:
            return f"{template_id}_{self.clock().strftime(TIMESTAMP_FORMAT)}"
        return template_id

    def write(self, prompt: RenderedPrompt) -> Path:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(self.output_dir, e.strerror or str(e)) from e

        base = self._base_name(prompt.template_id)
        attempt = 1
        while True:
            name = f"{base}.txt" if attempt == 1 else f"{base}_{attempt}.txt"
            target = self.output_dir / name
            try:
                f = open(target, "x", encoding="utf-8")
            except FileExistsError:
                attempt += 1
                continue
            except OSError as e:
                raise WriteError(target, e.strerror or str(e)) from e
            break

        try:
            with f:
                f.write(prompt.text)
                f.write("\n")
        except OSError as e:
            # No half-written prompts left behind
            target.unlink(missing_ok=True)
            raise WriteError(target, e.strerror or str(e)) from e

        logger.info(f"Prompt saved to: {target}")
        return target
