"""pomforge: static maven repository maintenance.

Scans the published tree of a statically hosted maven repository and
fills in what is missing:
  - POM descriptors derived from groupId/artifactId/version directories
  - md5, sha1, sha256 and sha512 checksum sidecars
  - browsable index.html listings, rewritten only when they change
"""

__version__ = "0.1.0"
__description__ = "Maintains POMs, checksums and directory indices of a static maven repository"

from pomforge.core.registry import TaskRegistry
from pomforge.core.tasks import build_registry
from pomforge.cli.app import app as cli

__all__ = ["TaskRegistry", "build_registry", "cli", "__version__"]
