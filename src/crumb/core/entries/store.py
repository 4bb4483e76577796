"""
Entry storage layer for reading/writing entries from the filesystem.

All entries live flat in one output directory (``crumbs/`` by default),
next to the generated ``README.md`` index. Filenames come from
``generate_filename``; when two entries derive the same name the store
appends ``-2``, ``-3``, ... instead of overwriting the earlier file.
"""

import logging
from collections import Counter
from pathlib import Path

from crumb.core.entries.front_matter import FrontMatter, MalformedFrontMatterError, parse_front_matter
from crumb.core.entries.models import Entry
from crumb.core.errors import DirectoryMissingError, PersistenceError

logger = logging.getLogger(__name__)

INDEX_FILENAME = "README.md"

# Upper bound on -N suffixes tried for one filename
MAX_COLLISION_SUFFIX = 1000


class EntryStore:
    """
    Storage layer for captured entries.

    Example:
        store = EntryStore(Path("crumbs"))
        path = store.save_entry(entry)
        tags = store.get_frequent_tags(10)
    """

    def __init__(self, entries_dir: Path):
        """
        Initialize store with an entries directory.

        Args:
            entries_dir: Directory containing entry files (need not exist yet)
        """
        self.entries_dir = Path(entries_dir)

    def get_entries_dir(self) -> Path:
        """Get the entries directory path."""
        return self.entries_dir

    def get_index_path(self) -> Path:
        """Get the path of the generated README index."""
        return self.entries_dir / INDEX_FILENAME

    def save(self, filename: str, content: str) -> Path:
        """
        Write an entry file, creating the directory if needed.

        The file is created exclusively, so an existing entry is never
        overwritten: a colliding name gets a numeric suffix. If writing
        fails midway the partial file is removed before the error
        propagates.

        Args:
            filename: Target filename (``YYYY-MM-DD-<slug>.md``)
            content: Full markdown content

        Returns:
            Absolute path of the written file

        Raises:
            PersistenceError: If the directory or file cannot be written
        """
        try:
            self.entries_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(
                self.entries_dir, f"cannot create {self.entries_dir}: {e.strerror or e}"
            ) from e

        base = Path(filename)
        for attempt in range(1, MAX_COLLISION_SUFFIX + 1):
            name = base.name if attempt == 1 else f"{base.stem}-{attempt}{base.suffix}"
            target = (self.entries_dir / name).absolute()
            try:
                handle = open(target, "x", encoding="utf-8")
            except FileExistsError:
                continue
            except OSError as e:
                raise PersistenceError(target, f"cannot write {target}: {e.strerror or e}") from e

            try:
                with handle:
                    handle.write(content)
            except OSError as e:
                target.unlink(missing_ok=True)
                raise PersistenceError(target, f"cannot write {target}: {e.strerror or e}") from e

            if attempt > 1:
                logger.info("Filename %s taken, saved as %s", base.name, name)
            logger.debug("Saved entry to %s", target)
            return target

        raise PersistenceError(
            self.entries_dir / base.name,
            f"too many entries named {base.name} in {self.entries_dir}",
        )

    def save_entry(self, entry: Entry) -> Path:
        """Render and save an entry under its generated filename."""
        return self.save(entry.filename, entry.to_markdown())

    def list_entry_files(self) -> list[Path]:
        """
        List entry files in filename order.

        The README index is excluded.

        Raises:
            DirectoryMissingError: If the directory does not exist
            PersistenceError: If the directory cannot be listed
        """
        if not self.entries_dir.is_dir():
            raise DirectoryMissingError(self.entries_dir)
        try:
            paths = [
                path
                for path in self.entries_dir.iterdir()
                if path.suffix == ".md" and path.name != INDEX_FILENAME and path.is_file()
            ]
        except OSError as e:
            raise PersistenceError(
                self.entries_dir, f"cannot list {self.entries_dir}: {e.strerror or e}"
            ) from e
        return sorted(paths, key=lambda p: p.name)

    def read_front_matter(self, path: Path) -> FrontMatter:
        """
        Read and parse one entry file.

        Raises:
            MalformedFrontMatterError: If the header block is malformed
            OSError: If the file cannot be read
        """
        return parse_front_matter(path.read_text(encoding="utf-8"))

    def get_frequent_tags(self, n: int) -> list[str]:
        """
        Return the ``n`` most used tags across all entries.

        Ties keep the order in which tags were first seen while scanning
        files in filename order. Any problem reading the directory yields
        an empty list; unreadable or malformed files are skipped.

        Args:
            n: Maximum number of tags to return

        Returns:
            Tags ordered by descending frequency
        """
        if n <= 0:
            return []

        try:
            paths = self.list_entry_files()
        except (DirectoryMissingError, PersistenceError) as e:
            logger.debug("No tag statistics: %s", e)
            return []

        counts: Counter[str] = Counter()
        for path in paths:
            try:
                front_matter = self.read_front_matter(path)
            except (MalformedFrontMatterError, OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping %s for tag statistics: %s", path.name, e)
                continue
            for tag in front_matter.get_list("tags"):
                if tag:
                    counts[tag] += 1

        # Counter keeps first-seen order; sorted() is stable, so ties keep it too
        return sorted(counts, key=counts.__getitem__, reverse=True)[:n]
