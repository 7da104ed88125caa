"""Locate and load the CODESCOPES file of a repository."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from codescopes.errors import MissingCodescopesFileError
from codescopes.rules.models import RuleSet
from codescopes.rules.parser import parse_rules_file
from codescopes.settings import Settings

logger = logging.getLogger(__name__)


class CodescopesRepository:
    def __init__(self, root: Path, settings: Optional[Settings] = None) -> None:
        self._root = root
        self._settings = settings or Settings()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def candidates(self) -> tuple[Path, ...]:
        filename = self._settings.filename
        return tuple(
            (self._root / search_path / filename) if search_path else (self._root / filename)
            for search_path in self._settings.search_paths
        )

    def find_file(self) -> Optional[Path]:
        for candidate in self.candidates:
            if candidate.is_file():
                logger.debug("Using CODESCOPES file %s", candidate)
                return candidate
        return None

    def exists(self) -> bool:
        return self.find_file() is not None

    def require_file(self) -> Path:
        path = self.find_file()
        if path is None:
            candidates = self.candidates
            raise MissingCodescopesFileError(candidates[0], searched=candidates)
        return path

    def load(self) -> RuleSet:
        return parse_rules_file(self.require_file())
