from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..core.domain.exceptions import CleanupWarning, StagingFailedError
from ..core.domain.models import StagedScript
from ..core.ports import DefaultTokenGenerator, TokenGeneratorPort

logger = logging.getLogger(__name__)

SCRIPT_PREFIX = "git_commits_"
SCRIPT_SUFFIX = ".sh"
SCRIPT_MODE = 0o755


class TempScriptStager:
    """Writes analysis scripts into uniquely named temp files.

    The only owner of the temp namespace used for staged scripts: paths are
    created here and removed here.
    """

    def __init__(
        self,
        *,
        temp_dir: Path | None = None,
        token_gen: TokenGeneratorPort | None = None,
    ) -> None:
        self._temp_dir = Path(temp_dir) if temp_dir is not None else None
        self._token_gen = token_gen or DefaultTokenGenerator()

    @property
    def temp_dir(self) -> Path:
        if self._temp_dir is not None:
            return self._temp_dir
        return Path(tempfile.gettempdir())

    def stage(self, script_source: str) -> StagedScript:
        path = self.temp_dir / f"{SCRIPT_PREFIX}{self._token_gen.generate()}{SCRIPT_SUFFIX}"
        if not script_source:
            raise StagingFailedError(None, "script source is empty")

        try:
            # "x" refuses to clobber an existing file, so a token collision
            # fails loudly instead of sharing a script between invocations
            with open(path, "xb") as fh:
                fh.write(script_source.encode("utf-8"))
            os.chmod(path, SCRIPT_MODE)
        except FileExistsError as e:
            raise StagingFailedError(None, f"temp file already exists: {e}") from e
        except OSError as e:
            raise StagingFailedError(path, str(e)) from e

        logger.debug("script_staged", extra={"script_path": str(path)})
        return StagedScript(path=path, mode=SCRIPT_MODE)

    def discard(self, path: Path) -> None:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise CleanupWarning(Path(path), str(e)) from e
