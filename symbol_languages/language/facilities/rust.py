# external rust demangler, `rustfilt` (cargo install rustfilt)

import shutil
import subprocess
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import Self

from ..common import MangledName

_logger = getLogger(__name__)

RUSTFILT_EXECUTABLE = "rustfilt"
RUSTFILT_TIMEOUT = 5.0


@dataclass(frozen=True, kw_only=True)
class RustfiltDemangler:
    executable: Path
    timeout: float  # seconds

    def __post_init__(self) -> None:
        assert self.timeout > 0

    @classmethod
    def find(cls, executable: Path | str = RUSTFILT_EXECUTABLE, timeout: float = RUSTFILT_TIMEOUT) -> Self | None:
        path = shutil.which(executable)
        if path is None:
            _logger.debug("`%s` not found, rust names will be demangled with legacy fallback", executable)
            return None

        return cls(
            executable=Path(path),
            timeout=timeout,
        )

    def demangle(self, mangled: MangledName) -> str | None:
        try:
            completed = subprocess.run(
                [self.executable],
                input=mangled,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as exception:
            _logger.debug("`%s` failed for `%s`: %s", self.executable, mangled, exception)
            return None

        if completed.returncode != 0:
            _logger.debug("`%s` exited with %d for `%s`", self.executable, completed.returncode, mangled)
            return None

        # rustfilt passes unrecognized input through unchanged
        demangled = completed.stdout.strip()
        if not demangled or demangled == mangled:
            return None

        return demangled
