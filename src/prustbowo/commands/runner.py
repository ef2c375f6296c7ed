"""Synchronous external-process invocation.

``CommandRunner`` is the only place that touches ``subprocess``. Everything
else takes a runner argument, so tests pass an object with the same
``run``/``read`` methods instead of launching cargo or git.

There are no timeouts: a hung child process hangs the caller.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """An external program could not be started or exited non-zero."""

    def __init__(
        self,
        argv: list[str],
        returncode: int | None,
        stderr: str = "",
        reason: str = "program not found",
    ) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(self.argv)
        if returncode is None:
            msg = f"{cmd}: {reason}"
        else:
            msg = f"{cmd}: exited with status {returncode}"
        if stderr:
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)


class CommandRunner:
    """Runs programs with :func:`subprocess.run` and waits for them."""

    def _exec(self, argv: list[str], cwd: Path | str, capture: bool) -> subprocess.CompletedProcess:
        logger.debug("Running %s in %s", " ".join(argv), cwd)
        try:
            result = subprocess.run(
                [str(a) for a in argv],
                cwd=cwd,
                capture_output=capture,
                text=True,
            )
        except FileNotFoundError as exc:
            if not Path(cwd).is_dir():
                reason = f"working directory not found: {cwd}"
            else:
                reason = f"program not found ({exc})"
            raise CommandError(argv, None, reason=reason) from exc
        except OSError as exc:
            raise CommandError(argv, None, reason=f"could not start ({exc})") from exc
        if result.returncode != 0:
            raise CommandError(argv, result.returncode, result.stderr or "")
        return result

    def run(self, argv: list[str], cwd: Path | str, quiet: bool = False) -> None:
        """Run *argv* in *cwd*.

        Output goes to the terminal unless *quiet*, in which case it is
        captured and only surfaces through a ``CommandError``.
        """
        self._exec(argv, cwd, capture=quiet)

    def read(self, argv: list[str], cwd: Path | str) -> str:
        """Run *argv* in *cwd* and return its standard output."""
        return self._exec(argv, cwd, capture=True).stdout
