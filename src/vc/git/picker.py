"""Pipe git output through an interactive fuzzy finder."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_PICKER = "sk"


class PickerError(Exception):
    """Exception raised when the picker pipe fails at a given stage."""

    def __init__(self, stage: str, detail: str = ""):
        self.stage = stage
        self.detail = detail
        message = f"{stage}: {detail}" if detail else stage
        super().__init__(message)


def skim_pipe(
    source: Sequence[str],
    picker: str = DEFAULT_PICKER,
    cwd: Optional[Path] = None,
) -> str:
    """Feed a command's stdout to the picker and return the selection.

    Args:
        source: Command whose output lists the candidates.
        picker: Fuzzy finder executable (``sk`` or any fzf-compatible tool).
        cwd: Working directory for the source command.

    Returns:
        The picker's stdout, empty when nothing was selected.

    Raises:
        PickerError: If the picker is missing or a process fails.
    """
    if shutil.which(picker) is None:
        raise PickerError("picker not found", f"{picker} is not in PATH")

    logger.debug(f"pipe {' '.join(source)} | {picker}")

    try:
        listing = subprocess.run(
            list(source),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        raise PickerError("source run", str(e)) from e

    try:
        selection = subprocess.run(
            [picker],
            input=listing.stdout,
            stdout=subprocess.PIPE,
            text=True,
        )
    except FileNotFoundError as e:
        raise PickerError("picker run", str(e)) from e

    # fzf and sk exit 130 when the user aborts, 1 when nothing matched
    if selection.returncode not in (0, 1, 130):
        raise PickerError("picker run", f"{picker} exited with status {selection.returncode}")

    return selection.stdout


def parse_status_line(line: str) -> tuple[str, str]:
    """Split a ``git status -s`` line into its state and filename.

    The state is the first word and the filename the last one, so renames
    (``R  old -> new``) resolve to the new path.
    """
    words = line.split()
    if not words:
        return "", ""
    return words[0], words[-1]
