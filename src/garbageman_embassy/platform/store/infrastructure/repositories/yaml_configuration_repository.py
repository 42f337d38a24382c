"""YAML file configuration repository.

Stores the state the way the host keeps it on the package volume: one YAML
document with ``version`` and ``config``. Writes go to a sibling temporary
file that is then renamed over the target, so readers never see a torn file.
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import yaml

from ...core.entities.persisted_state import PersistedState


logger = logging.getLogger(__name__)


class YamlConfigurationRepository:
    """YAML file implementation of ConfigurationRepository protocol."""

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    async def load(self) -> Optional[PersistedState]:
        return await asyncio.to_thread(self._read)

    async def save(self, state: PersistedState) -> None:
        await asyncio.to_thread(self._write, state)

    def _read(self) -> Optional[PersistedState]:
        if not self.file_path.exists():
            return None

        with open(self.file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected content in {self.file_path}: expected a mapping")

        return PersistedState.from_dict(data)

    def _write(self, state: PersistedState) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self.file_path.name}.", suffix=".tmp", dir=self.file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(state.to_dict(), f, default_flow_style=False, sort_keys=False)
            os.replace(tmp_path, self.file_path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

        logger.debug(f"Persisted configuration state to {self.file_path}")
