#!/usr/bin/env python3
"""
Daily Log CLI - 日次ログの解析・検証・整形を行うコマンドラインインターフェース

Usage:
    python -m weeknote parse [FILE] [--format json|text]
    python -m weeknote validate [FILE] [--format json|text]
    python -m weeknote format [FILE] [--from-json]
    python -m weeknote stats [FILE] [--format json|text]

FILE を省略した場合は標準入力から読み込む。
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CONFIG_PATH, Config
from .exceptions import WeeknoteError
from .formatter import format_weekly_log
from .logger import setup_logger
from .models import SectionType, ValidationResult, WeekStats, WeeklyLog
from .parser import parse_daily_log
from .stats import summarize_weekly_log
from .validator import validate_daily_log

logger = logging.getLogger(__name__)


def read_input(path: Optional[str]) -> str:
    """ファイルまたは標準入力からテキストを読み込む"""
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def print_json(data: object) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def format_weekly_log_text(weekly_log: WeeklyLog) -> str:
    """WeeklyLog を確認用の要約テキストに整形"""
    lines = [f"期間: {weekly_log.start_date or '-'} ~ {weekly_log.end_date or '-'}"]
    for entry in weekly_log.entries:
        day = f" ({entry.day_of_week})" if entry.day_of_week else ""
        lines.append(f"[{entry.date}]{day}")
        for kind in SectionType:
            items = entry.section(kind)
            lines.append(f"  {kind.header}: {len(items)}件")
            lines.extend(f"    - {item}" for item in items)
    return "\n".join(lines)


def format_validation_text(result: ValidationResult) -> str:
    if result.error:
        return f"{result.status.value}: {result.error}"
    lines = [result.status.value]
    for warning in result.warnings:
        lines.append(f"[{warning.kind.value}] {warning.message}")
        lines.append(f"  -> {warning.suggestion}")
    return "\n".join(lines)


def format_stats_text(stats: WeekStats) -> str:
    counts = ", ".join(f"{key}={value}" for key, value in stats.item_counts.items())
    return (
        f"期間: {stats.start_date or '-'} ~ {stats.end_date or '-'} | "
        f"条目: {stats.total_days} | 記入済み: {stats.filled_days} | {counts}"
    )


def cmd_parse(text: str, output_format: str) -> int:
    """テキストを解析して WeeklyLog を表示"""
    weekly_log = parse_daily_log(text)
    if output_format == "json":
        print_json(weekly_log.to_dict())
    else:
        print(format_weekly_log_text(weekly_log))
    return 0


def cmd_validate(text: str, output_format: str) -> int:
    """テキストを検証する。error のときだけ終了コード1"""
    result = validate_daily_log(text)
    if output_format == "json":
        print_json(result.to_dict())
    else:
        print(format_validation_text(result))

    if result.is_error:
        logger.warning("入力の検証に失敗しました: %s", result.error)
        return 1
    return 0


def cmd_format(text: str, from_json: bool) -> int:
    """正規形テキストを出力"""
    if from_json:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            print(f"Error: JSONの解析に失敗しました: {exc}", file=sys.stderr)
            return 1
        weekly_log = WeeklyLog.from_dict(data)
    else:
        weekly_log = parse_daily_log(text)

    sys.stdout.write(format_weekly_log(weekly_log))
    return 0


def cmd_stats(text: str, output_format: str) -> int:
    """集計値を表示"""
    stats = summarize_weekly_log(parse_daily_log(text))
    if output_format == "json":
        print_json(stats.to_dict())
    else:
        print(format_stats_text(stats))
    return 0


def load_config(config_path: Optional[str]) -> Config:
    if config_path:
        return Config.from_yaml(Path(config_path))
    if DEFAULT_CONFIG_PATH.exists():
        return Config.from_yaml(DEFAULT_CONFIG_PATH)
    return Config.from_env()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weeknote",
        description="Daily Log CLI - 日次ログの解析・検証・整形",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=str, help="YAML設定ファイルのパス")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル（設定ファイルより優先）",
    )

    subparsers = parser.add_subparsers(dest="command", help="実行するコマンド", required=True)

    for name, help_text in (
        ("parse", "テキストを解析して構造化データを表示"),
        ("validate", "テキストの形式を検証"),
        ("stats", "記入状況を集計"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", nargs="?", help="入力ファイル（省略時は標準入力）")
        sub.add_argument(
            "--format",
            choices=["json", "text"],
            help="出力フォーマット（省略時は設定ファイルの値）",
        )

    parser_format = subparsers.add_parser("format", help="正規形のテキストに整形")
    parser_format.add_argument("file", nargs="?", help="入力ファイル（省略時は標準入力）")
    parser_format.add_argument(
        "--from-json",
        action="store_true",
        help="入力を parse --format json の出力として読み込む",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except WeeknoteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logger(args.log_level or config.log_level, config.log_file)

    try:
        text = read_input(args.file)
    except OSError as exc:
        print(f"Error: 入力の読み込みに失敗しました: {exc}", file=sys.stderr)
        return 1

    output_format = getattr(args, "format", None) or config.output_format

    try:
        if args.command == "parse":
            return cmd_parse(text, output_format)
        elif args.command == "validate":
            return cmd_validate(text, output_format)
        elif args.command == "format":
            return cmd_format(text, args.from_json)
        elif args.command == "stats":
            return cmd_stats(text, output_format)
        else:
            print(f"Error: 不明なコマンド: {args.command}", file=sys.stderr)
            return 1
    except WeeknoteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
