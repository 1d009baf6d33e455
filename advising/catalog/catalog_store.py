from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from cachetools import LRUCache
from rich.console import Console
from rich.markup import escape

from ..config import CatalogConfig
from ..core.course import Course, normalize_course_id
from ..core.exceptions import (
    EmptyLoadError,
    RecordFormatError,
    SourceUnavailableError,
)
from ..index import CourseBST
from .record_parser import RecordParser
from .results import (
    ListingResult,
    LoadResult,
    LoadWarning,
    LookupResult,
    PrerequisiteInfo,
    QueryStatus,
)


class CatalogStore:
    """
    In-memory course catalog.

    Owns:
    - A CourseBST (the ordered index) keyed by course identifier
    - A flat identifier -> title map used to resolve prerequisite titles
    - An LRU cache of lookup results, emptied on every load

    A load always replaces the whole catalog. The reset happens only after
    the source has been opened, so a missing file keeps the previous data.
    Lines rejected by the parser are reported and skipped; a load that
    accepts nothing leaves the store empty and unloaded.
    """

    def __init__(self, config: Optional[CatalogConfig] = None,
                 console: Optional[Console] = None):
        """
        Initialize an empty, unloaded store.

        Args:
            config: Parser and cache settings (defaults to CatalogConfig())
            console: Where load warnings are printed (defaults to stderr)
        """
        self.config = config or CatalogConfig()
        self.console = console or Console(stderr=True)
        self.parser = RecordParser(self.config.delimiter)

        self._index = CourseBST()
        self._titles: Dict[str, str] = {}  # id -> title
        self._lookup_cache: LRUCache[str, LookupResult] = LRUCache(
            maxsize=self.config.lookup_cache_size)

        self._loaded = False
        self._source: Optional[str] = None

    def load(self, source: Union[str, Path]) -> LoadResult:
        """
        Replace the catalog with the records in a course data file.

        Args:
            source: Path of the file to read

        Returns:
            LoadResult with accepted/skipped counts

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            EmptyLoadError: If no line produced a valid record
        """
        source_name = str(source)
        try:
            handle = open(source, "r", encoding=self.config.encoding)
        except OSError as e:
            raise SourceUnavailableError(
                f"Could not open file \"{source_name}\": {e.strerror or e}") from e

        with handle:
            try:
                return self.load_lines(handle, source_name)
            except (OSError, UnicodeDecodeError) as e:
                self._reset()
                raise SourceUnavailableError(
                    f"Could not read file \"{source_name}\": {e}") from e

    def load_lines(self, lines: Iterable[str], source: str = "<lines>") -> LoadResult:
        """
        Replace the catalog with the records parsed from ``lines``.

        This is the pipeline behind ``load``; any iterable of strings works.
        """
        self._reset()

        accepted = 0
        warnings = []
        for line_number, line in enumerate(lines, 1):
            try:
                course = self.parser.parse_line(line, line_number)
            except RecordFormatError as e:
                warning = LoadWarning(e.line_number, e.reason)
                warnings.append(warning)
                self.console.print(
                    f"[yellow]⚠️  Warning ({escape(str(warning))}). Skipping line.[/yellow]")
                continue

            if course is None:
                continue

            self._add(course)
            accepted += 1

        if accepted == 0:
            raise EmptyLoadError(
                f"No valid course records were loaded from \"{source}\"")

        self._loaded = True
        self._source = source
        return LoadResult(source=source, accepted=accepted,
                          skipped=len(warnings), warnings=warnings)

    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def source(self) -> Optional[str]:
        """The source of the last successful load."""
        return self._source

    def size(self) -> int:
        return self._index.size()

    def list_all(self) -> ListingResult:
        """All courses in ascending identifier order."""
        if not self._loaded:
            return ListingResult(QueryStatus.NOT_READY)

        return ListingResult(QueryStatus.OK,
                             list(self._index.traverse_in_order()))

    def lookup(self, raw_course_id: str) -> LookupResult:
        """
        Look up one course and resolve its prerequisite titles.

        Args:
            raw_course_id: User input; trimmed and upper-cased before searching

        Returns:
            LookupResult whose status is OK, NOT_READY, EMPTY_IDENTIFIER
            or NOT_FOUND
        """
        if not self._loaded:
            return LookupResult(QueryStatus.NOT_READY)

        course_id = normalize_course_id(raw_course_id)
        if not course_id:
            return LookupResult(QueryStatus.EMPTY_IDENTIFIER)

        cached = self._lookup_cache.get(course_id)
        if cached is not None:
            return cached

        course = self._index.find(course_id)
        if course is None:
            return LookupResult(QueryStatus.NOT_FOUND, course_id=course_id)

        result = LookupResult(
            QueryStatus.OK,
            course_id=course.course_id,
            title=course.title,
            prerequisites=tuple(
                PrerequisiteInfo(prereq, self._titles.get(prereq))
                for prereq in course.prerequisites
            ),
        )
        self._lookup_cache[course_id] = result
        return result

    def _add(self, course: Course) -> None:
        self._index.insert_or_update(course)
        self._titles[course.course_id] = course.title

    def _reset(self) -> None:
        self._index.clear()
        self._titles.clear()
        self._lookup_cache.clear()
        self._loaded = False
        self._source = None

    def __str__(self) -> str:
        state = f"loaded from {self._source}" if self._loaded else "not loaded"
        return f"CatalogStore({self._index.size()} courses, {state})"

    def __repr__(self) -> str:
        return self.__str__()
