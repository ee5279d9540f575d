"""Daily Log 解析モジュール

原始的な日次ログのテキストを WeeklyLog に変換する。
どんな入力に対しても例外を送出せず、必ず1件以上の条目を返す。

設計方針:
- 1回の前方走査で行を分類し、条目ごとに SectionType -> list のアキュムレータへ積む
- 条目を閉じる時点で4つの固定フィールドへ確定させる
- 見出しより前の内容は捨てずに result へ入れる
- raw_content を順に連結すると入力テキストに一致する
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .grammar import (
    DateLine,
    is_blank,
    match_date_line,
    match_section_header,
    split_lines,
    strip_list_marker,
)
from .models import UNLABELED_DATE, DailyLogEntry, SectionType, WeeklyLog

logger = logging.getLogger(__name__)


class _EntryBuilder:
    """構築中の1条目。current_section が None の間は result へ振り分ける。"""

    def __init__(self, date: str, day_of_week: str = "") -> None:
        self.date = date
        self.day_of_week = day_of_week
        self.lines: List[str] = []
        self.sections: Dict[SectionType, List[str]] = {kind: [] for kind in SectionType}
        self.current_section: Optional[SectionType] = None

    def feed(self, line: str) -> None:
        """日付行以外の1行を取り込む"""
        self.lines.append(line)

        section = match_section_header(line)
        if section is not None:
            # 同じ見出しが再び現れても追記になる
            self.current_section = section
            return

        if is_blank(line):
            return

        target = self.current_section or SectionType.RESULT
        self.sections[target].append(strip_list_marker(line))

    @property
    def has_text(self) -> bool:
        return any(not is_blank(line) for line in self.lines)

    def build(self, raw_content: Optional[str] = None) -> DailyLogEntry:
        return DailyLogEntry(
            date=self.date,
            day_of_week=self.day_of_week,
            raw_content="".join(self.lines) if raw_content is None else raw_content,
            **{kind.value: list(items) for kind, items in self.sections.items()},
        )


def parse_daily_log(text: str) -> WeeklyLog:
    """原始 Daily Log テキストを WeeklyLog に解析する

    Args:
        text: 原始テキスト

    Returns:
        WeeklyLog: 出現順の条目と開始・終了日付
    """
    lines = split_lines(text)

    # 最初の日付行より前の部分
    preamble = _EntryBuilder(UNLABELED_DATE)
    builders: List[_EntryBuilder] = []

    for line in lines:
        date_line: Optional[DateLine] = match_date_line(line)
        if date_line is not None:
            builder = _EntryBuilder(date_line.date, date_line.day_of_week)
            builder.lines.append(line)
            builders.append(builder)
            continue

        if builders:
            builders[-1].feed(line)
        else:
            preamble.feed(line)

    if not builders:
        # 日付行が1つもない: 全体を1つの未标注条目にする
        entry = preamble.build(raw_content=text)
        logger.debug("日付行なし: 未标注の条目1件として解析")
        return WeeklyLog(entries=[entry], start_date="", end_date="")

    entries: List[DailyLogEntry] = []
    if preamble.has_text:
        entries.append(preamble.build())
    else:
        # 空行だけの前置きは最初の条目の raw_content に含める
        builders[0].lines[:0] = preamble.lines

    entries.extend(builder.build() for builder in builders)
    logger.debug("Daily Log を解析: %d 件の条目", len(entries))

    return WeeklyLog(entries=entries, start_date=entries[0].date, end_date=entries[-1].date)


def parse_day_entry(day_text: str, date_header: str) -> DailyLogEntry:
    """1日分の本文を、指定した日付行の条目として解析する

    Args:
        day_text: 1日分のテキスト（日付行を含んでいてもよい）
        date_header: 日付行（例: "12-15 | 周一"）

    Returns:
        DailyLogEntry: raw_content は day_text そのもの
    """
    header = match_date_line(date_header)
    if header is None:
        builder = _EntryBuilder(UNLABELED_DATE)
    else:
        builder = _EntryBuilder(header.date, header.day_of_week)

    for line in split_lines(day_text):
        if match_date_line(line) is not None:
            continue
        builder.feed(line)

    return builder.build(raw_content=day_text)
