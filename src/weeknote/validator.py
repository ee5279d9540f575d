"""Daily Log 入力の検証

解析結果を信用する前に、原始テキストを valid / warning / error に分類する。
error は空入力のみ。形式の崩れは warning として全件集めて返す。
"""

from __future__ import annotations

import logging
from typing import List

from .grammar import match_date_line, match_section_header, split_lines
from .models import (
    ValidationResult,
    ValidationStatus,
    ValidationWarning,
    ValidationWarningType,
)

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "请输入内容"

NO_DATE_LINE_WARNING = ValidationWarning(
    kind=ValidationWarningType.NO_DATE_LINE,
    message="未找到日期行，全部内容将作为一个未标注日期的条目处理",
    suggestion="请使用格式：12-15 | 周一 或 2024-12-23 | 周一",
)

NO_SECTIONS_WARNING = ValidationWarning(
    kind=ValidationWarningType.NO_SECTIONS,
    message="未找到段落标题（Plan / Result / Issues / Notes），内容将归入 Result",
    suggestion="请在每天的内容中使用 Plan、Result、Issues、Notes 作为独立一行的标题",
)


def validate_daily_log(text: str) -> ValidationResult:
    """原始テキストを検証する

    Args:
        text: 検証する原始テキスト

    Returns:
        ValidationResult: 空入力なら ERROR、指摘があれば WARNING、なければ VALID
    """
    if not text or not text.strip():
        return ValidationResult(status=ValidationStatus.ERROR, error=EMPTY_INPUT_MESSAGE)

    lines = split_lines(text)
    warnings: List[ValidationWarning] = []

    if not any(match_date_line(line) for line in lines):
        warnings.append(NO_DATE_LINE_WARNING)

    if not any(match_section_header(line) is not None for line in lines):
        warnings.append(NO_SECTIONS_WARNING)

    if warnings:
        logger.debug("検証警告: %s", [warning.kind.value for warning in warnings])
        return ValidationResult(status=ValidationStatus.WARNING, warnings=warnings)

    return ValidationResult(status=ValidationStatus.VALID)
