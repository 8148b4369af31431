"""Repository configuration — env-driven.

Centralized config using pydantic-settings for environment variable
support. Reads from a .env file and POMFORGE_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ForgeConfig(BaseSettings):
    """Configuration for a statically hosted Maven repository checkout.

    All settings can be overridden via POMFORGE_* environment variables
    or a .env file in the working directory.

    Examples
    --------
    Override via environment::

        export POMFORGE_REPO_ROOT=/srv/maven-site
        export POMFORGE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="POMFORGE_",
        env_file_encoding="utf-8",
    )

    # Layout
    repo_root: Path = Path(".")
    content_dir: str = "docs"

    log_level: str = "INFO"

    # File types
    package_extension: str = ".jar"
    descriptor_extension: str = ".pom"
    metadata_extension: str = ".xml"
    checksum_algorithms: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")

    # Index documents
    index_name: str = "index.html"
    index_template_name: str = "index-template.html"
    index_reserved_names: tuple[str, ...] = (
        "CNAME",
        "index-template.html",
        "index.html",
        "index.css",
        "index.js",
        "robots.txt",
    )

    # Paths that must exist below repo_root before any task runs
    layout_markers: tuple[str, ...] = (
        "docs",
        "docs/CNAME",
        ".gitattributes",
        ".gitignore",
        "README.md",
    )

    @property
    def content_root(self) -> Path:
        """Absolute path of the published directory tree."""
        return (self.repo_root / self.content_dir).resolve()

    @property
    def tracked_extensions(self) -> tuple[str, ...]:
        """Extensions that receive checksum sidecars."""
        return (
            self.package_extension,
            self.descriptor_extension,
            self.metadata_extension,
        )
