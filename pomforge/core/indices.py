"""Browsable ``index.html`` listings for every directory of the tree.

Indices are re-rendered on every run but only written when the rendered
document differs from what is already on disk, so unchanged directories
keep their modification times.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pomforge.models.reports import TaskReport

logger = logging.getLogger(__name__)

_FOLDER_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round" class="lucide lucide-folder"><path d="M20 20a2 2 0 0 0 '
    "2-2V8a2 2 0 0 0-2-2h-7.9a2 2 0 0 1-1.69-.9L9.6 3.9A2 2 0 0 0 7.93 3H4a2 2 0 0 "
    '0-2 2v13a2 2 0 0 0 2 2Z"/></svg>'
)
_FILE_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round" class="lucide lucide-file"><path d="M15 2H6a2 2 0 0 0-2 '
    '2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V7Z"/><path d="M14 2v4a2 2 0 0 0 2 2h4"/></svg>'
)

# Tab indentation matches the surrounding markup of the page template.
DIRECTORY_ENTRY_TEMPLATE = (
    '<div class="entry">\n'
    f"\t\t\t\t\t<span icon>{_FOLDER_ICON}</span>\n"
    "\t\t\t\t\t<span path>${file.name}</span>\n"
    "\t\t\t\t</div>\n"
    "\t\t\t\t"
)
FILE_ENTRY_TEMPLATE = (
    '<div class="entry">\n'
    f"\t\t\t\t\t<span icon>{_FILE_ICON}</span>\n"
    "\t\t\t\t\t<span path>${file.name}</span>\n"
    '\t\t\t\t\t<span class="flex-fill"></span>\n'
    "\t\t\t\t\t<span>${file.size}</span>\n"
    "\t\t\t\t</div>\n"
    "\t\t\t\t"
)

DEFAULT_RESERVED_NAMES: frozenset[str] = frozenset(
    {"CNAME", "index-template.html", "index.html", "index.css", "index.js", "robots.txt"}
)


def listing_sort_key(path: Path) -> tuple[bool, str, str]:
    """Directories first, then names in case-insensitive, lowercase-first order."""
    return (path.is_file(), path.name.casefold(), path.name.swapcase())


def file_size(path: Path) -> str:
    """Textual byte size; directories report ``"0"``."""
    if path.is_dir():
        return "0"
    return str(path.stat().st_size)


class IndexRenderer:
    """Renders directory listings from an on-disk page template.

    Parameters
    ----------
    root:
        The content root. Its logical path is ``/``.
    template:
        Page template text with ``${document.path}`` and ``${body.entries}``
        placeholders. Read from ``<root>/<template_name>`` when omitted.
    """

    def __init__(
        self,
        root: Path,
        *,
        template: str | None = None,
        template_name: str = "index-template.html",
        index_name: str = "index.html",
        reserved_names: frozenset[str] | tuple[str, ...] = DEFAULT_RESERVED_NAMES,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.root = Path(root).resolve()
        self.index_name = index_name
        self.reserved_names = frozenset(reserved_names)
        self.log = log or logger
        if template is None:
            template = (self.root / template_name).read_bytes().decode("utf-8")
        self.template = template

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _relative(self, directory: Path) -> Path:
        # Directories below the root are taken as found; links are not followed.
        directory = Path(directory)
        if directory.is_absolute() and directory.is_relative_to(self.root):
            return directory.relative_to(self.root)
        return directory.resolve().relative_to(self.root)

    def document_path(self, directory: Path) -> str:
        """Logical URL path of a directory, e.g. ``/com/example/``."""
        relative = self._relative(directory).as_posix()
        if relative == ".":
            return "/"
        return f"/{relative}/"

    def list_children(self, directory: Path) -> list[Path]:
        """Direct, non-reserved file and directory children in listing order."""
        children = [
            child
            for child in Path(directory).iterdir()
            if (child.is_file() or child.is_dir()) and child.name not in self.reserved_names
        ]
        return sorted(children, key=listing_sort_key)

    def render_entry(self, child: Path) -> str:
        entry = FILE_ENTRY_TEMPLATE if child.is_file() else DIRECTORY_ENTRY_TEMPLATE
        return entry.replace("${file.name}", child.name).replace(
            "${file.size}", f"{file_size(child)} bytes"
        )

    def render(self, directory: Path) -> str:
        """Return the full index document for ``directory``."""
        entries = "".join(self.render_entry(child) for child in self.list_children(directory))
        return self.template.replace(
            "${document.path}", self.document_path(directory)
        ).replace("${body.entries}", entries)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def render_one(self, directory: Path) -> bool:
        """Render and save one index. Returns True if the file was written."""
        directory = Path(directory)
        index_path = directory / self.index_name

        result = self.render(directory).encode("utf-8")
        previous = index_path.read_bytes() if index_path.exists() else b""
        if previous == result:
            return False

        self.log.debug("Building %s/%s", directory.name, self.index_name)
        index_path.write_bytes(result)
        return True

    def render_all(self, task: str = "build-indices") -> TaskReport:
        """Render the root index and the index of every directory below it."""
        directories = [self.root]
        directories.extend(
            sorted(p for p in self.root.rglob("*") if p.is_dir() and not p.is_symlink())
        )

        written: list[Path] = []
        skipped = 0
        for directory in directories:
            if self.render_one(directory):
                written.append(directory / self.index_name)
            else:
                skipped += 1

        return TaskReport(task=task, written=written, skipped=skipped)
