"""Stops ingestion service.

Reads a GTFS stops table line by line and turns every valid row into a
spatial entity of the target store. Ingestion is best-effort: a bad row
is logged and reported, and the loop moves on to the next one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import IngestConfig, get_config
from ..domain.errors import RecordError, SourceReadError
from ..domain.models import IngestReport, RecordFailure
from ..graph.builder import build_spatial_entity
from ..graph.store import GraphStore
from ..io.records import parse_record


@dataclass
class StopIngestionService:
    """Builds a graph store from a stops table.

    Attributes:
        config: Ingestion configuration (source path, delimiter, line cap)
    """

    config: IngestConfig = field(default_factory=lambda: get_config().ingest)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def ingest_file(
        self,
        store: GraphStore,
        path: Optional[Path] = None,
    ) -> IngestReport:
        """Ingest a stops file into ``store``.

        Args:
            store: Target store.
            path: Stops file; defaults to ``config.stops_path``.

        Returns:
            Counts of processed and rejected lines.

        Raises:
            SourceReadError: If the file cannot be opened or read.
        """
        path = path or self.config.stops_path
        self._logger.info("Processing stops file", extra={"path": str(path)})

        try:
            # Undecodable bytes are read as U+FFFD.
            with path.open(encoding="utf-8-sig", errors="replace") as f:
                return self.ingest_lines(f, store)
        except OSError as e:
            raise SourceReadError(
                f"Failed to read stops file {path}",
                file_path=str(path),
                cause=e,
            )

    def ingest_lines(self, lines: Iterable[str], store: GraphStore) -> IngestReport:
        """Ingest already opened lines; the first one is the header.

        At most ``config.max_lines`` data lines are read, blank ones
        included. Blank lines are skipped silently.
        """
        iterator = iter(lines)
        header = next(iterator, None)
        if header is not None:
            header = header.rstrip("\r\n")
            self._logger.debug("Header discarded", extra={"header": header})

        max_lines = self.config.max_lines
        processed = 0
        lines_read = 0
        failures: List[RecordFailure] = []

        for raw in iterator:
            if max_lines is not None and lines_read >= max_lines:
                self._logger.info("Line cap reached", extra={"max_lines": max_lines})
                break
            lines_read += 1

            line = raw.rstrip("\r\n")
            if not line.strip():
                continue

            try:
                record = parse_record(line, self.config.delimiter)
                build_spatial_entity(record, store, self.config.base_iri)
            except RecordError as e:
                self._logger.warning(
                    "Rejected stops line %d: %s",
                    lines_read,
                    e,
                    extra={"line_number": lines_read, "content": line},
                )
                failures.append(
                    RecordFailure(line_number=lines_read, content=line, reason=str(e))
                )
                continue

            processed += 1
            if processed % self.config.progress_every == 0:
                self._logger.info("Stops processed", extra={"processed": processed})

        report = IngestReport(
            processed=processed,
            lines_read=lines_read,
            failures=tuple(failures),
            header=header,
        )
        self._logger.info(
            "Ingestion completed",
            extra={
                "processed": report.processed,
                "lines_read": report.lines_read,
                "failed": report.failed,
            },
        )
        return report
