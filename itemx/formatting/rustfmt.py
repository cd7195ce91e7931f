"""Formatter adapter that shells out to rustfmt."""

from __future__ import annotations

import subprocess
from typing import Callable, Iterable, List

from ..logging import get_logger
from .base import Formatter, RenderError

_LOGGER = get_logger("formatting.rustfmt")


class RustfmtFormatter(Formatter):
    """Formats source by piping it through ``rustfmt`` on stdin."""

    name = "rustfmt"

    def __init__(
        self,
        executable: str = "rustfmt",
        *,
        edition: str = "2021",
        runner: Callable[..., str] | None = None,
    ) -> None:
        self._executable = executable
        self._edition = edition
        self._runner = runner or self._default_runner

    @property
    def command(self) -> List[str]:
        return [self._executable, "--edition", self._edition]

    def format(self, source: str) -> str:
        args = self.command
        _LOGGER.debug("Running %s", " ".join(args))
        try:
            return self._runner(args, input_text=source)
        except FileNotFoundError as exc:
            raise RenderError(
                f"rustfmt executable '{self._executable}' not found. "
                "Install it with `rustup component add rustfmt` or use --formatter verbatim."
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise RenderError(f"rustfmt failed: {detail}") from exc
        except OSError as exc:
            raise RenderError(f"Could not run rustfmt: {exc}") from exc

    @staticmethod
    def _default_runner(args: Iterable[str], *, input_text: str) -> str:
        completed = subprocess.run(
            list(args),
            input=input_text,
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout
