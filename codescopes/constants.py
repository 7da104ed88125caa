from typing import Final


CODESCOPES_FILENAME: Final[str] = "CODESCOPES"
UNSCOPED: Final[str] = "unscoped"

DEFAULT_SEARCH_PATHS: Final[tuple[str, ...]] = (
    "",
    "docs",
)

COMMENT_PREFIX: Final[str] = "#"
SETTINGS_DIRNAME: Final[str] = "codescopes"
SETTINGS_FILENAME: Final[str] = "config.json"
GIT_EXECUTABLE: Final[str] = "git"
