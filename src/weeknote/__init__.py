"""Daily Log の解析・検証・整形ライブラリ

行単位で書かれた日次ログを構造化された WeeklyLog に変換し、
正規形テキストへ書き戻す。

Example:
    >>> from weeknote import parse, validate, format
    >>> log = parse("12-15 | 周一\\nPlan\\n- 完成功能 A")
    >>> log.entries[0].plan
    ['完成功能 A']
    >>> validate("").status.value
    'error'
"""

from .exceptions import ConfigurationError, InvalidLogDataError, WeeknoteError
from .formatter import format_weekly_log
from .models import (
    UNLABELED_DATE,
    DailyLogEntry,
    SectionType,
    ValidationResult,
    ValidationStatus,
    ValidationWarning,
    ValidationWarningType,
    WeeklyLog,
    WeekStats,
)
from .parser import parse_daily_log, parse_day_entry
from .stats import summarize_weekly_log
from .validator import validate_daily_log

parse = parse_daily_log
validate = validate_daily_log
format = format_weekly_log

__all__ = [
    "UNLABELED_DATE",
    "DailyLogEntry",
    "SectionType",
    "ValidationResult",
    "ValidationStatus",
    "ValidationWarning",
    "ValidationWarningType",
    "WeeklyLog",
    "WeekStats",
    "WeeknoteError",
    "ConfigurationError",
    "InvalidLogDataError",
    "parse",
    "validate",
    "format",
    "parse_daily_log",
    "parse_day_entry",
    "validate_daily_log",
    "format_weekly_log",
    "summarize_weekly_log",
]
