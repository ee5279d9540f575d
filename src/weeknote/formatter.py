"""WeeklyLog を正規形のテキストへ整形する

出力例:

    12-15 | 周一

    Plan
    - 完成功能 A 开发

    Result

    Issues

    Notes

空の段落も見出しは必ず出力し、各段落の後ろに空行を置く。
条目と条目の間にはさらに空行を1つ挟む。
"""

from __future__ import annotations

from typing import List

from .models import DailyLogEntry, SectionType, WeeklyLog


def format_date_line(entry: DailyLogEntry) -> str:
    """日付行。曜日が空なら "| 曜日" を省く"""
    if entry.day_of_week:
        return f"{entry.date} | {entry.day_of_week}"
    return entry.date


def format_entry_lines(entry: DailyLogEntry) -> List[str]:
    lines = [format_date_line(entry), ""]
    for kind in SectionType:
        lines.append(kind.header)
        lines.extend(f"- {item}" for item in entry.section(kind))
        lines.append("")
    return lines


def format_weekly_log(weekly_log: WeeklyLog) -> str:
    """WeeklyLog を正規形テキストに変換する

    Args:
        weekly_log: parse_daily_log() で得た周ログ

    Returns:
        str: 改行1つで終わるテキスト。条目がなければ空文字列
    """
    lines: List[str] = []
    for index, entry in enumerate(weekly_log.entries):
        if index:
            lines.append("")
        lines.extend(format_entry_lines(entry))
    return "\n".join(lines)
