"""Data models for scan results."""

from pydantic import BaseModel, Field


class ScanResult(BaseModel):
    """Outcome of scanning a dictionary against a puzzle.

    `words` keeps dictionary order and is never sorted or deduplicated.
    """

    words: list[str] = Field(default_factory=list)
    words_scanned: int = Field(0, ge=0)
    rejected_short: int = Field(0, ge=0)
    rejected_missing_middle: int = Field(0, ge=0)
    rejected_foreign_letters: int = Field(0, ge=0)
    elapsed_time: float = Field(0.0, ge=0)

    @property
    def words_found(self) -> int:
        return len(self.words)
