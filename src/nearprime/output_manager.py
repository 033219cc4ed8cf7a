# output_manager.py

import os

from nearprime.fmt import strip_ansi
from nearprime.workspace import workspace_dir


def resolve_output_path(path: str, workspace_root: str) -> str:
    """
    Resolve user-provided output path.

    Rules:
    - '~' expanded to user home
    - Absolute paths unchanged
    - Relative paths are relative to workspace_root
    """
    if not path:
        raise ValueError("Output path is empty")

    path = os.path.expanduser(path)
    if os.path.isabs(path):
        return os.path.normpath(path)
    return os.path.normpath(os.path.join(workspace_root, path))


class OutputManager:
    """
    Screen and/or file output for reports.

    Usage:
        om = OutputManager(output_file="fixtures.txt")
        om.write("Experiment(...)")   # prints and appends to the file
        om.close()                    # one blank line between runs
    """

    def __init__(self, output_file: str | None = None, quiet: bool = False):
        """
        Parameters:
            output_file: None or "" => screen only, otherwise append to this file
            quiet: if True, nothing goes to the screen (only to the file)
        """
        self.quiet = quiet
        self.output_file = output_file or ""
        self._wrote = False
        self._path: str | None = None

        if self.output_file:
            path = resolve_output_path(self.output_file, str(workspace_dir()))
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._path = path

    @property
    def path(self) -> str | None:
        return self._path

    def write(self, *args, sep: str = " ", end: str = "\n") -> None:
        """Write to screen and file (if configured)."""
        text = sep.join(str(a) for a in args) + end
        self._wrote = True

        if not self.quiet:
            print(text, end="")

        if self._path:
            with open(self._path, "a", encoding="utf-8") as fh:
                fh.write(strip_ansi(text))

    def close(self) -> None:
        """Add a separator line after this run in the output file."""
        if self._path and self._wrote:
            with open(self._path, "a", encoding="utf-8") as fh:
                fh.write("\n")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
