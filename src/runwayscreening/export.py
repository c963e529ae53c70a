"""Spreadsheet-compatible CSV export of ranked candidates."""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pendulum
import structlog

from .errors import ExportFailure
from .schemas import CandidateRecord, JobDescription
from .text import slugify

COLUMNS: tuple[str, ...] = (
    "Ranking",
    "Candidate Name",
    "Email Address",
    "Rating Score (%)",
    "Overview",
    "Qualifications",
    "Red Flags",
    "Suggested Interview Questions",
)

_LINE_TERMINATOR = "\n"
_PATH_SEPARATOR_RE = re.compile(r"[\\/]")


@dataclass
class ExportConfig:
    """Formatting options for the CSV artifact."""

    date_locale: str = "en"
    no_flags_label: str = "None identified"
    list_separator: str = "; "


class CsvExporter:
    """Render ranked candidates as a delimited text artifact.

    Layout::

        "Role: <title>"
        "Total Candidates: <n>"
        "Export Date: <localized date>"
        <blank>
        Ranking,Candidate Name,...
        1,"Jane Doe","jane.doe@email.com",91,"...",...

    Integers are written bare, every text field is quoted with embedded quotes
    doubled. Lines are ``\\n`` separated with no trailing newline.
    """

    def __init__(self, *, config: ExportConfig | None = None) -> None:
        self._config = config or ExportConfig()
        self._logger = structlog.get_logger(__name__)

    def serialize(
        self,
        job: JobDescription,
        ranked: Sequence[CandidateRecord],
        *,
        export_date: pendulum.Date | None = None,
    ) -> str:
        if not ranked:
            raise ExportFailure("Cannot export an empty candidate list")
        export_date = export_date or pendulum.today().date()

        buffer = io.StringIO()
        quoted = csv.writer(
            buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator=_LINE_TERMINATOR
        )
        quoted.writerow([f"Role: {job.role_title}"])
        quoted.writerow([f"Total Candidates: {len(ranked)}"])
        quoted.writerow([f"Export Date: {self._format_date(export_date)}"])
        buffer.write(_LINE_TERMINATOR)
        buffer.write(",".join(COLUMNS) + _LINE_TERMINATOR)
        for ranking, candidate in enumerate(ranked, start=1):
            quoted.writerow(self._row(ranking, candidate))

        return buffer.getvalue()[: -len(_LINE_TERMINATOR)]

    def filename(
        self,
        job: JobDescription,
        *,
        export_date: pendulum.Date | None = None,
    ) -> str:
        export_date = export_date or pendulum.today().date()
        slug = _PATH_SEPARATOR_RE.sub("-", slugify(job.role_title))
        return f"{slug}-candidate-analysis-{export_date.to_date_string()}.csv"

    def write(
        self,
        directory: Path,
        job: JobDescription,
        ranked: Sequence[CandidateRecord],
        *,
        export_date: pendulum.Date | None = None,
    ) -> Path:
        export_date = export_date or pendulum.today().date()
        content = self.serialize(job, ranked, export_date=export_date)
        directory = Path(directory)
        path = directory / self.filename(job, export_date=export_date)
        if path.parent != directory:
            raise ExportFailure(f"Export file name escapes {directory}: {path.name!r}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise ExportFailure(f"Failed to write export to {path}: {exc}") from exc
        self._logger.info("export.written", path=str(path), candidate_count=len(ranked))
        return path

    def _row(self, ranking: int, candidate: CandidateRecord) -> list[int | str]:
        separator = self._config.list_separator
        red_flags = (
            separator.join(candidate.red_flags)
            if candidate.red_flags
            else self._config.no_flags_label
        )
        return [
            ranking,
            candidate.display_name,
            candidate.contact_handle,
            candidate.score,
            candidate.overview,
            separator.join(candidate.qualifications),
            red_flags,
            separator.join(candidate.interview_questions),
        ]

    def _format_date(self, value: pendulum.Date) -> str:
        return value.format("L", locale=self._config.date_locale)


__all__ = ["COLUMNS", "CsvExporter", "ExportConfig"]
