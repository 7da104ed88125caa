import shutil
import subprocess
import sys
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


README_CODESCOPES = """\
# Root scope
*            core
*.yaml       ops

/docs/       onboarding
/pages/      router
/pages/login auth
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def write_codescopes(repo_root: Path) -> Callable[..., Path]:
    def _write(content: str = README_CODESCOPES, directory: str = "") -> Path:
        path = repo_root / directory / "CODESCOPES" if directory else repo_root / "CODESCOPES"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "codescopes" / "config.json"


@pytest.fixture
def git_repo(repo_root: Path) -> Callable[..., subprocess.CompletedProcess]:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    def _git(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            ["git", *args],
            cwd=str(repo_root),
            capture_output=True,
            text=True,
            check=True,
        )

    _git("init", "-q")
    _git("config", "user.email", "dev@example.com")
    _git("config", "user.name", "Dev")
    _git("config", "commit.gpgsign", "false")
    return _git


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            env.setdefault("COLUMNS", "200")
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
