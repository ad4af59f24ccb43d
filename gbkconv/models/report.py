from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .outcome import Verdict


FileStatus = Literal["converted", "unchanged", "failed", "error"]


class FileReport(BaseModel):
    path: str
    status: FileStatus
    verdict: Optional[Verdict] = Field(None, description="Classifier verdict, missing when the file could not be read")
    reason: Optional[str] = Field(None, description="Failure or I/O error message")
    guessed_encoding: Optional[str] = Field(None, description="chardet guess, only filled in with --show-info")
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)


class RunSummary(BaseModel):
    root: str
    scan_only: bool = False
    files: List[FileReport] = Field(default_factory=list)

    @property
    def scanned(self) -> int:
        return len(self.files)

    def _with_status(self, *statuses: str) -> List[FileReport]:
        return [report for report in self.files if report.status in statuses]

    @property
    def converted(self) -> List[FileReport]:
        return self._with_status("converted")

    @property
    def unchanged(self) -> List[FileReport]:
        return self._with_status("unchanged")

    @property
    def failed(self) -> List[FileReport]:
        """Undecodable files and files that hit an I/O error."""
        return self._with_status("failed", "error")


__all__ = ["FileReport", "FileStatus", "RunSummary"]
