"""Unified settings for godown."""

import argparse
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Any, ClassVar

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


def read_pyproject(pyproject_path: Path) -> dict:
    """Read pyproject.toml into a dict, empty when it is not shipped alongside."""
    if not pyproject_path.is_file():
        return {}
    with pyproject_path.open("rb") as file_handle:
        return tomllib.load(file_handle)


def get_version(base_dir: Path) -> str:
    """Get version from git tags or fallback to package metadata."""
    try:
        import git

        repo = git.Repo(base_dir, search_parent_directories=True)
        latest_tag = max(repo.tags, key=lambda t: t.commit.committed_datetime, default=None)
        return str(latest_tag) if latest_tag else "0.0.0"
    except Exception:
        try:
            import importlib.metadata

            return importlib.metadata.version("godown")
        except Exception:
            return "0.0.0"


class Settings(BaseSettings):
    """Unified settings for the godown server.

    Precedence: environment variable > command-line flag (passed as init
    kwargs) > default. Empty environment variables count as unset.
    """

    DEBUG: bool = True

    # ClassVar to prevent Pydantic from trying to load from env
    BASE_DIR: ClassVar[Path] = Path(__file__).parent.parent.parent
    PROJECT: ClassVar[dict] = read_pyproject(BASE_DIR / "pyproject.toml")
    API_NAME: ClassVar[str] = PROJECT.get("project", {}).get("name", "godown")
    API_DESCRIPTION: ClassVar[str] = PROJECT.get("project", {}).get("description", "Markdown file server")
    API_VERSION: ClassVar[str] = get_version(BASE_DIR)

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Content
    ROOT: Path = Path(".")
    INDEX: str = "README.md"
    STYLE: Path | None = None

    @property
    def api_url(self) -> str:
        return f"http://localhost:{self.PORT}"

    model_config = SettingsConfigDict(env_ignore_empty=True, extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="godown", description=Settings.API_DESCRIPTION)
    parser.add_argument("--port", type=int, help="HTTP server port (or PORT env var)")
    parser.add_argument("--host", help="bind address (or HOST env var)")
    parser.add_argument("--style", type=Path, help="custom CSS file path (or STYLE env var)")
    parser.add_argument("--index", help="default index file (or INDEX env var)")
    parser.add_argument("--root", type=Path, help="directory to serve (or ROOT env var)")
    return parser


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """Build settings from command-line flags, letting environment variables win."""
    # Unknown flags belong to the Robyn runtime (--processes, --dev, ...)
    args, _ = build_parser().parse_known_args(argv)
    flags: dict[str, Any] = {
        "PORT": args.port,
        "HOST": args.host,
        "STYLE": args.style,
        "INDEX": args.index,
        "ROOT": args.root,
    }
    return Settings(**{name: value for name, value in flags.items() if value is not None})


settings = Settings()  # type: ignore
