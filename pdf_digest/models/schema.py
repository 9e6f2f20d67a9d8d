"""
Result types for the digest pipeline.

ArticleSummary is the structured record extracted from one PDF. Its
``from_dict`` is the only way LLM replies become summaries, so every shape
check lives there. SubjectGroup and ResultSet are the persisted output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from pdf_digest.errors import SummaryDecodeError

SCALAR_FIELDS: Tuple[str, ...] = (
    "title",
    "objectives",
    "study_type",
    "methodology",
    "findings",
    "conclusions",
    "limitations",
)


@dataclass
class ArticleSummary:
    """
    Structured summary of one article.

    Empty strings mean "unknown". Keywords keep insertion order and never
    contain duplicates.
    """

    SCHEMA_VERSION = 1

    title: str = ""
    objectives: str = ""
    study_type: str = ""
    methodology: str = ""
    findings: str = ""
    conclusions: str = ""
    limitations: str = ""
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ArticleSummary:
        """
        Decode an LLM reply into a summary.

        Unknown keys are ignored and missing keys stay empty. Wrongly typed
        values, or a ``schema_version`` other than ours, raise
        SummaryDecodeError.
        """
        if not isinstance(data, dict):
            raise SummaryDecodeError(f"expected a JSON object, got {type(data).__name__}")

        version = data.get("schema_version", cls.SCHEMA_VERSION)
        if version != cls.SCHEMA_VERSION:
            raise SummaryDecodeError(
                f"unsupported schema_version {version!r}, expected {cls.SCHEMA_VERSION}"
            )

        values: Dict[str, str] = {}
        for name in SCALAR_FIELDS:
            value = data.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise SummaryDecodeError(f"field {name!r} must be a string, got {type(value).__name__}")
            values[name] = value

        raw_keywords = data.get("keywords")
        if raw_keywords is None:
            raw_keywords = []
        if not isinstance(raw_keywords, list):
            raise SummaryDecodeError(f"field 'keywords' must be a list, got {type(raw_keywords).__name__}")

        keywords: List[str] = []
        for kw in raw_keywords:
            if not isinstance(kw, str):
                raise SummaryDecodeError(f"keywords must be strings, got {type(kw).__name__}")
            if kw not in keywords:
                keywords.append(kw)

        return cls(keywords=keywords, **values)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {name: getattr(self, name) for name in SCALAR_FIELDS}
        out["keywords"] = list(self.keywords)
        return out


@dataclass(frozen=True)
class SubjectGroup:
    subject: str
    articles: Tuple[ArticleSummary, ...]
    group_summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "articles": [a.to_dict() for a in self.articles],
            "group_summary": self.group_summary,
        }


@dataclass(frozen=True)
class SkippedBatch:
    index: int
    files: Tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class ResultSet:
    """
    Output of a run: successful groups in processing order.

    Skipped batches are kept for reporting only and are not persisted.
    """

    groups: Tuple[SubjectGroup, ...] = ()
    skipped: Tuple[SkippedBatch, ...] = ()

    def add(self, group: SubjectGroup) -> ResultSet:
        return ResultSet(groups=self.groups + (group,), skipped=self.skipped)

    def skip(self, record: SkippedBatch) -> ResultSet:
        return ResultSet(groups=self.groups, skipped=self.skipped + (record,))

    def to_dict(self) -> Dict[str, Any]:
        return {"subject_groups": [g.to_dict() for g in self.groups]}
