"""Flat-file ingestion pipeline for region boundaries.

Reads delimited records, extracts the name and geometry columns, decodes
the geometry with the source's parser, and commits every resulting Region
to the store in one batch. A failure on any record aborts the run before
anything is written.
"""

from __future__ import annotations

import csv
import io
import logging
import re
import sys
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO, Union

from pydantic import BaseModel, Field, ValidationError

from locator.core.errors import (
    GeometryParseError,
    RecordIncompleteError,
    SourceDecodeError,
    SourceNotFoundError,
)
from locator.geometry.parsers import GeometryParser, WKTParser
from locator.regions.models import Region
from locator.repositories import resolve
from locator.repositories.protocols import RegionRepository

logger = logging.getLogger(__name__)

IngestSource = Union[str, Path, BinaryIO]

# A letter that does not follow a letter, digit or apostrophe starts a word.
_WORD_START_RE = re.compile(r"(?<![\w'\u2019])[^\W\d_]")


class ColumnMap(BaseModel):
    """Zero-based indexes of the name and geometry columns."""

    name: int = Field(ge=0)
    geometry: int = Field(ge=0)


class IngestOptions(BaseModel):
    """Per-source reading options."""

    skip_header_row: bool = False
    title_case: bool = False
    encoding: str = "utf-8"
    delimiter: str = Field(default=",", min_length=1, max_length=1)


class RegionIngester:
    """Loads regions from one flat file per run into a region store."""

    def __init__(
        self,
        store: RegionRepository,
        parser: GeometryParser | None = None,
    ) -> None:
        self._store = store
        self._parser = parser or WKTParser()

    async def ingest(
        self,
        source: IngestSource,
        column_map: ColumnMap,
        city: str,
        state: str,
        options: IngestOptions | None = None,
    ) -> int:
        """Ingest every record of *source* and return the number of regions created.

        Raises:
            SourceNotFoundError: If *source* is a path that does not exist.
            RecordIncompleteError: If a record lacks the name or geometry column.
            SourceDecodeError: If the source is not valid text in *options.encoding*
                or is not well-formed delimited data.
            GeometryParseError: If a record's geometry cannot be decoded.
        """
        options = options or IngestOptions()
        label = _describe(source)

        regions: list[Region] = []
        record_number = 0
        with _open_source(source, options.encoding) as handle:
            try:
                for record_number, fields in _records(handle, options):
                    regions.append(
                        self._build_region(
                            fields, record_number, column_map, city, state, options, label
                        )
                    )
            except (UnicodeDecodeError, csv.Error) as exc:
                raise SourceDecodeError(
                    f"Could not read {label} near record {record_number + 1}: {exc}",
                    record_number=record_number + 1,
                ) from exc

        await resolve(self._store.insert_batch(regions))
        logger.info("Ingested %d regions for %s, %s from %s", len(regions), city, state, label)
        return len(regions)

    def _build_region(
        self,
        fields: list[str],
        record_number: int,
        column_map: ColumnMap,
        city: str,
        state: str,
        options: IngestOptions,
        label: str,
    ) -> Region:
        needed = max(column_map.name, column_map.geometry) + 1
        if len(fields) < needed:
            raise RecordIncompleteError(
                f"Record {record_number} of {label} has {len(fields)} columns, "
                f"expected at least {needed}",
                record_number=record_number,
            )

        name = fields[column_map.name].strip()
        raw_geometry = fields[column_map.geometry]
        if not name or not raw_geometry.strip():
            raise RecordIncompleteError(
                f"Record {record_number} of {label} is missing a name or geometry",
                record_number=record_number,
            )

        if options.title_case:
            name = title_case(name)

        try:
            geometry = self._parser.parse(raw_geometry)
        except GeometryParseError as exc:
            raise GeometryParseError(
                f"Record {record_number} of {label} ({name!r}): {exc}"
            ) from exc

        logger.debug("Parsed record %d (%s) from %s", record_number, name, label)
        try:
            return Region(name=name, city=city, state=state, geometry=geometry)
        except ValidationError as exc:
            raise RecordIncompleteError(
                f"Record {record_number} of {label} is not a valid region: {exc}",
                record_number=record_number,
            ) from exc


@contextmanager
def _open_source(source: IngestSource, encoding: str) -> Iterator[TextIO]:
    """Open *source* as text and close it on every exit path.

    Streams handed to the pipeline are owned by the run and closed with it.
    """
    with ExitStack() as stack:
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.is_file():
                raise SourceNotFoundError(f"No file found at path '{path}'")
            try:
                handle = stack.enter_context(open(path, newline="", encoding=encoding))
            except OSError as exc:
                raise SourceNotFoundError(f"Could not open '{path}': {exc}") from exc
        else:
            stack.callback(source.close)
            handle = stack.enter_context(
                io.TextIOWrapper(source, encoding=encoding, newline="")
            )
        yield handle


def _records(handle: TextIO, options: IngestOptions) -> Iterator[tuple[int, list[str]]]:
    """Yield (record_number, fields) pairs, skipping blank lines.

    Record numbers count physical records from 1, header included.
    """
    _raise_field_size_limit()
    reader = csv.reader(handle, delimiter=options.delimiter)
    if options.skip_header_row:
        next(reader, None)

    record_number = 1 if options.skip_header_row else 0
    for fields in reader:
        record_number += 1
        if not fields:
            continue
        yield record_number, fields


def _describe(source: IngestSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", None) or "<stream>"


def title_case(name: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest.

    Letters after an apostrophe or a digit continue the word, so
    ``"o'hare"`` becomes ``"O'hare"`` and ``"2nd ward"`` becomes ``"2nd Ward"``.
    Hyphens and whitespace separate words (``"west-town"`` -> ``"West-Town"``).
    """
    return _WORD_START_RE.sub(lambda m: m.group().upper(), name.lower())


def _raise_field_size_limit() -> None:
    # Geometry fields can exceed csv's 128 KiB default field size.
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 10
