"""Daily Log のデータモデル定義

関連モジュール:
- weeknote/parser.py: テキスト -> WeeklyLog
- weeknote/validator.py: テキスト -> ValidationResult
- weeknote/formatter.py: WeeklyLog -> テキスト
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import InvalidLogDataError

# 日付行が見つからなかった条目に付けるプレースホルダー
UNLABELED_DATE = "未标注"


class SectionType(str, Enum):
    """日次ログの段落種別。定義順がそのまま出力順になる。"""

    PLAN = "plan"
    RESULT = "result"
    ISSUES = "issues"
    NOTES = "notes"

    @property
    def header(self) -> str:
        """テキスト上の見出しトークン（例: "Plan"）"""
        return self.value.capitalize()


class ValidationStatus(str, Enum):
    """検証結果の三状態"""

    VALID = "valid"
    WARNING = "warning"
    ERROR = "error"


class ValidationWarningType(str, Enum):
    """警告の種類"""

    NO_DATE_LINE = "no_date_line"
    NO_SECTIONS = "no_sections"


@dataclass(frozen=True, slots=True)
class DailyLogEntry:
    """1日分のログ条目"""

    date: str
    day_of_week: str = ""
    plan: List[str] = field(default_factory=list)
    result: List[str] = field(default_factory=list)
    issues: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    raw_content: str = ""

    def section(self, kind: SectionType) -> List[str]:
        return getattr(self, kind.value)

    @property
    def has_content(self) -> bool:
        return any(self.section(kind) for kind in SectionType)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "day_of_week": self.day_of_week,
            "plan": list(self.plan),
            "result": list(self.result),
            "issues": list(self.issues),
            "notes": list(self.notes),
            "raw_content": self.raw_content,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyLogEntry":
        """to_dict() の出力から復元する

        Raises:
            InvalidLogDataError: 必須キーの欠落や型の不一致
        """
        if not isinstance(data, Mapping):
            raise InvalidLogDataError(f"条目はオブジェクトである必要があります: {data!r}")

        date = data.get("date")
        if not isinstance(date, str):
            raise InvalidLogDataError("条目の date は文字列である必要があります")

        day_of_week = data.get("day_of_week") or ""
        raw_content = data.get("raw_content") or ""
        if not isinstance(day_of_week, str) or not isinstance(raw_content, str):
            raise InvalidLogDataError("day_of_week と raw_content は文字列である必要があります")

        sections: Dict[str, List[str]] = {}
        for kind in SectionType:
            items = data.get(kind.value) or []
            if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
                raise InvalidLogDataError(f"{kind.value} は文字列のリストである必要があります")
            sections[kind.value] = list(items)

        return cls(date=date, day_of_week=day_of_week, raw_content=raw_content, **sections)


@dataclass(frozen=True, slots=True)
class WeeklyLog:
    """1回の入力を解析した結果"""

    entries: List[DailyLogEntry] = field(default_factory=list)
    start_date: str = ""
    end_date: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [entry.to_dict() for entry in self.entries],
            "start_date": self.start_date,
            "end_date": self.end_date,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WeeklyLog":
        if not isinstance(data, Mapping):
            raise InvalidLogDataError("WeeklyLog はオブジェクトである必要があります")

        raw_entries = data.get("entries")
        if not isinstance(raw_entries, list):
            raise InvalidLogDataError("entries はリストである必要があります")

        entries = [DailyLogEntry.from_dict(item) for item in raw_entries]
        start_date = data.get("start_date", entries[0].date if entries else "")
        end_date = data.get("end_date", entries[-1].date if entries else "")
        if not isinstance(start_date, str) or not isinstance(end_date, str):
            raise InvalidLogDataError("start_date と end_date は文字列である必要があります")

        return cls(entries=entries, start_date=start_date, end_date=end_date)


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """利用者に提示する非致命的な指摘"""

    kind: ValidationWarningType
    message: str
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "message": self.message, "suggestion": self.suggestion}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """検証結果。error は status が ERROR のときだけ設定される。"""

    status: ValidationStatus
    error: Optional[str] = None
    warnings: List[ValidationWarning] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.status is ValidationStatus.ERROR

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "status": self.status.value,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True, slots=True)
class WeekStats:
    """WeeklyLog の集計値"""

    start_date: str
    end_date: str
    total_days: int
    filled_days: int
    item_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_date": self.start_date,
            "end_date": self.end_date,
            "total_days": self.total_days,
            "filled_days": self.filled_days,
            "item_counts": dict(self.item_counts),
        }
