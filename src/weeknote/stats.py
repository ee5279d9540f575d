"""WeeklyLog の集計"""

from __future__ import annotations

from .models import SectionType, WeekStats, WeeklyLog


def summarize_weekly_log(weekly_log: WeeklyLog) -> WeekStats:
    """条目数・記入済み日数・段落ごとの項目数を数える"""
    entries = weekly_log.entries
    return WeekStats(
        start_date=weekly_log.start_date,
        end_date=weekly_log.end_date,
        total_days=len(entries),
        filled_days=sum(1 for entry in entries if entry.has_content),
        item_counts={
            kind.value: sum(len(entry.section(kind)) for entry in entries)
            for kind in SectionType
        },
    )
