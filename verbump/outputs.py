"""Run outputs and failure reporting for the workflow runner.

Outputs are appended to the file named by GITHUB_OUTPUT as name=value
lines (multi-line values use the name<<DELIMITER form). Without an output
file they are only logged.
"""

import logging
import sys
import uuid
from pathlib import Path
from typing import Dict, Mapping, TextIO

LOG = logging.getLogger("verbump.outputs")


def _format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class RunOutputs:
    """Collects run outputs and writes each one as soon as it is set."""

    def __init__(self, output_path: Path | str | None = None) -> None:
        self._path = Path(output_path) if output_path else None
        self._values: Dict[str, str] = {}

    @property
    def values(self) -> Dict[str, str]:
        return dict(self._values)

    def set(self, name: str, value: object) -> None:
        """Publish one output; booleans become "true"/"false"."""
        if isinstance(value, bool):
            text = "true" if value else "false"
        else:
            text = "" if value is None else str(value)
        self._values[name] = text
        LOG.info("output %s=%s", name, text)
        if self._path is not None:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(_format_output(name, text))

    def update(self, values: Mapping[str, object]) -> None:
        for name, value in values.items():
            self.set(name, value)


def report_failure(message: str, stream: TextIO | None = None) -> None:
    """Emit the fatal message as a workflow error annotation."""
    stream = stream or sys.stdout
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    stream.write(f"::error::{escaped}\n")
    stream.flush()
