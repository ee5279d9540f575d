"""Daily Log の行文法

Parser と Validator が同じ判定を使うよう、行の分類はここに集約する。

    12-15 | 周一          <- 日付行（MM-DD）
    2024-12-23 | 周一     <- 日付行（YYYY-MM-DD）
    Plan                  <- 段落見出し
    - 完成功能 A 开发     <- 項目行
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional

from .models import SectionType

# 日付行: 日付トークンの後ろに任意で "| 曜日"
DATE_LINE_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{1,2}-\d{1,2}|\d{1,2}-\d{1,2})\s*(?:\|\s*(?P<day>.*?))?\s*$"
)

# 項目行の先頭記号（1回だけ取り除く）
LIST_ITEM_PATTERN = re.compile(r"^[-*•]\s+(?P<item>.+)$")

# 行の区切りは "\n" のみ（U+2028 や改ページ文字では分割しない）
LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")

_HEADERS = {kind.header: kind for kind in SectionType}


class DateLine(NamedTuple):
    """日付行の解析結果"""

    date: str
    day_of_week: str


def split_lines(text: str) -> List[str]:
    """改行を残したまま "\\n" で行に分割する。連結すると元のテキストに戻る。"""
    return LINE_PATTERN.findall(text)


def match_date_line(line: str) -> Optional[DateLine]:
    """日付行なら DateLine を返す

    Args:
        line: 1行分のテキスト（改行の有無は問わない）
    """
    match = DATE_LINE_PATTERN.match(line.strip())
    if match is None:
        return None
    return DateLine(match.group("date"), (match.group("day") or "").strip())


def match_section_header(line: str) -> Optional[SectionType]:
    """見出し行（大文字小文字を区別して完全一致）なら段落種別を返す"""
    return _HEADERS.get(line.strip())


def strip_list_marker(line: str) -> str:
    """先頭の "- " などを取り除き、前後の空白を削った項目テキストを返す"""
    stripped = line.strip()
    match = LIST_ITEM_PATTERN.match(stripped)
    if match:
        return match.group("item").strip()
    return stripped


def is_blank(line: str) -> bool:
    return not line.strip()
