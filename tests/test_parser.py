"""Daily Log 解析のテスト"""

import pytest

from weeknote import UNLABELED_DATE, parse_daily_log, parse_day_entry

SAMPLE_DAILY_LOG = """12-15 | 周一
Plan
- 完成功能 A 开发
- 代码 review

Result
- 完成了功能 A 的 80%
- Review 了 3 个 PR

Issues
- 接口文档不清晰

Notes
- 下午有个会议

12-16 | 周二
Plan
- 继续功能 A
- 写单元测试

Result
- 功能 A 完成
- 单元测试覆盖率 85%

Issues

Notes
- 明天需要和产品对齐

12-17 | 周三
Plan
- 开始功能 B

Result
- 功能 B 完成 50%

Issues
- 依赖的服务有 bug

Notes
"""


@pytest.fixture
def weekly_log():
    """サンプルの解析結果"""
    return parse_daily_log(SAMPLE_DAILY_LOG)


def test_parse_multiple_entries(weekly_log) -> None:
    """複数日の条目を解析"""
    assert len(weekly_log.entries) == 3
    assert weekly_log.start_date == "12-15"
    assert weekly_log.end_date == "12-17"


def test_parse_date_and_weekday(weekly_log) -> None:
    """日付と曜日"""
    assert weekly_log.entries[0].date == "12-15"
    assert weekly_log.entries[0].day_of_week == "周一"
    assert weekly_log.entries[1].date == "12-16"
    assert weekly_log.entries[1].day_of_week == "周二"


def test_parse_sections(weekly_log) -> None:
    """4つの段落"""
    first, second, third = weekly_log.entries
    assert first.plan == ["完成功能 A 开发", "代码 review"]
    assert first.result == ["完成了功能 A 的 80%", "Review 了 3 个 PR"]
    assert first.issues == ["接口文档不清晰"]
    assert first.notes == ["下午有个会议"]
    assert second.issues == []
    assert second.notes == ["明天需要和产品对齐"]
    assert third.notes == []


def test_raw_content_reconstructs_input(weekly_log) -> None:
    """raw_content の連結が入力と一致する"""
    assert "".join(entry.raw_content for entry in weekly_log.entries) == SAMPLE_DAILY_LOG
    assert weekly_log.entries[0].raw_content.startswith("12-15 | 周一\n")
    assert "完成功能 A 开发" in weekly_log.entries[0].raw_content


def test_two_entry_sample() -> None:
    """2日分の最小サンプル"""
    log = parse_daily_log("12-15 | 周一\nPlan\n- A\n\nResult\n- B\n\n12-16 | 周二\nPlan\n- C")
    assert log.entries[0].date == "12-15"
    assert log.entries[0].day_of_week == "周一"
    assert log.entries[0].plan == ["A"]
    assert log.entries[0].result == ["B"]
    assert log.entries[1].date == "12-16"
    assert log.entries[1].plan == ["C"]
    assert log.start_date == "12-15"
    assert log.end_date == "12-16"


def test_full_date_form() -> None:
    """YYYY-MM-DD 形式の日付"""
    log = parse_daily_log("2024-12-23 | 周一\nPlan\n- X")
    assert log.entries[0].date == "2024-12-23"
    assert log.entries[0].plan == ["X"]


def test_content_before_header_goes_to_result() -> None:
    """見出しより前の内容は result に入る"""
    log = parse_daily_log("12-23 | 周一\n前置说明\n\nPlan\n- 计划任务")
    entry = log.entries[0]
    assert entry.result == ["前置说明"]
    assert entry.plan == ["计划任务"]


def test_repeated_header_appends() -> None:
    """同じ見出しの再出現は追記になる"""
    log = parse_daily_log("12-23 | 周一\nPlan\n- a\nResult\n- b\nPlan\n- c")
    assert log.entries[0].plan == ["a", "c"]
    assert log.entries[0].result == ["b"]


def test_blank_lines_do_not_close_section() -> None:
    """空行では段落が閉じない"""
    log = parse_daily_log("12-23 | 周一\nIssues\n- a\n\n\n- b")
    assert log.entries[0].issues == ["a", "b"]
    assert log.entries[0].result == []


def test_items_without_marker_are_kept() -> None:
    """記号なしの行もそのまま項目になる"""
    log = parse_daily_log("12-23 | 周一\nNotes\n  记得提交周报  \n* 星号项目\n• 圆点项目")
    assert log.entries[0].notes == ["记得提交周报", "星号项目", "圆点项目"]


def test_header_is_case_sensitive() -> None:
    """小文字の見出しは内容として扱う"""
    log = parse_daily_log("12-23 | 周一\nplan\n- a")
    assert log.entries[0].plan == []
    assert log.entries[0].result == ["plan", "a"]


def test_duplicate_dates_are_not_merged() -> None:
    """同じ日付は別々の条目として残る"""
    log = parse_daily_log("12-23 | 周一\nPlan\n- a\n12-23 | 周一\nPlan\n- b")
    assert [entry.plan for entry in log.entries] == [["a"], ["b"]]


def test_entries_keep_source_order() -> None:
    """日付順に並べ替えない"""
    log = parse_daily_log("12-20 | 周五\n- x\n12-16 | 周一\n- y")
    assert [entry.date for entry in log.entries] == ["12-20", "12-16"]
    assert log.start_date == "12-20"
    assert log.end_date == "12-16"


def test_date_line_whitespace_variants() -> None:
    """パイプ周りの空白は無視する"""
    log = parse_daily_log("  12-15|周一  \n12-16 |   周二\n12-17")
    assert [(e.date, e.day_of_week) for e in log.entries] == [
        ("12-15", "周一"),
        ("12-16", "周二"),
        ("12-17", ""),
    ]


def test_empty_input() -> None:
    """空入力でも未标注の条目が1件できる"""
    log = parse_daily_log("")
    assert len(log.entries) == 1
    entry = log.entries[0]
    assert entry.date == UNLABELED_DATE
    assert entry.day_of_week == ""
    assert entry.plan == entry.result == entry.issues == entry.notes == []
    assert entry.raw_content == ""
    assert log.start_date == ""
    assert log.end_date == ""


def test_whitespace_only_input() -> None:
    """空白のみの入力"""
    log = parse_daily_log("  \n\n")
    assert len(log.entries) == 1
    assert log.entries[0].date == UNLABELED_DATE
    assert not log.entries[0].has_content
    assert log.entries[0].raw_content == "  \n\n"
    assert log.start_date == ""


def test_no_date_line_fallback() -> None:
    """日付行がない場合は全体が1件の未标注条目になる"""
    text = "一些随机文本\n没有日期行"
    log = parse_daily_log(text)
    assert len(log.entries) == 1
    entry = log.entries[0]
    assert entry.date == UNLABELED_DATE
    assert entry.day_of_week == ""
    assert entry.result == ["一些随机文本", "没有日期行"]
    assert entry.raw_content == text
    assert log.start_date == ""
    assert log.end_date == ""


def test_no_date_line_honors_headers() -> None:
    """日付行がなくても見出しは有効"""
    log = parse_daily_log("随手记\nIssues\n- 环境不稳定")
    entry = log.entries[0]
    assert entry.result == ["随手记"]
    assert entry.issues == ["环境不稳定"]


def test_preamble_becomes_leading_entry() -> None:
    """最初の日付行より前の内容は未标注の先頭条目になる"""
    text = "本周重点\n\n12-15 | 周一\nPlan\n- A"
    log = parse_daily_log(text)
    assert [entry.date for entry in log.entries] == [UNLABELED_DATE, "12-15"]
    assert log.entries[0].result == ["本周重点"]
    assert log.start_date == UNLABELED_DATE
    assert log.end_date == "12-15"
    assert "".join(entry.raw_content for entry in log.entries) == text


def test_blank_preamble_is_not_an_entry() -> None:
    """空行だけの前置きは条目にならない"""
    text = "\n\n12-15 | 周一\nPlan\n- A\n"
    log = parse_daily_log(text)
    assert len(log.entries) == 1
    assert log.start_date == "12-15"
    assert log.entries[0].raw_content == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12-15 | 周一", 1),
        ("12-15 | 周一\n12-16 | 周二\n12-17 | 周三", 3),
        ("前言\n12-15 | 周一\n12-16 | 周二", 3),
        ("Plan\n- a\n12-15 | 周一", 2),
    ],
)
def test_entry_count_follows_date_lines(text: str, expected: int) -> None:
    """日付行の数（+ 前置き）だけ条目ができる"""
    assert len(parse_daily_log(text).entries) == expected


def test_crlf_line_endings() -> None:
    """CRLF の改行"""
    text = "12-15 | 周一\r\nPlan\r\n- A\r\n"
    log = parse_daily_log(text)
    assert log.entries[0].day_of_week == "周一"
    assert log.entries[0].plan == ["A"]
    assert log.entries[0].raw_content == text


def test_parse_day_entry() -> None:
    """1日分の本文を解析"""
    body = "Plan\n- 写文档\n\nResult\n- 文档完成"
    entry = parse_day_entry(body, "2024-12-23 | 周一")
    assert entry.date == "2024-12-23"
    assert entry.day_of_week == "周一"
    assert entry.plan == ["写文档"]
    assert entry.result == ["文档完成"]
    assert entry.raw_content == body


def test_parse_day_entry_skips_date_lines_in_body() -> None:
    """本文中の日付行は無視する"""
    entry = parse_day_entry("12-15 | 周一\n顺手修了个 bug", "12-15 | 周一")
    assert entry.result == ["顺手修了个 bug"]


def test_parse_day_entry_with_invalid_header() -> None:
    """日付行でないヘッダーは未标注として扱う"""
    entry = parse_day_entry("Notes\n- n", "not a date")
    assert entry.date == UNLABELED_DATE
    assert entry.day_of_week == ""
    assert entry.notes == ["n"]


def test_placeholder_text_inside_entry_is_content() -> None:
    """本文中の "未标注" は新しい条目を開かない"""
    log = parse_daily_log("12-15 | 周一\nNotes\n未标注\n- x")
    assert len(log.entries) == 1
    assert log.entries[0].notes == ["未标注", "x"]
    assert log.end_date == "12-15"


def test_placeholder_only_text_uses_no_date_fallback() -> None:
    """未标注 で始まる行は日付行ではない"""
    log = parse_daily_log("未标注 | 周一\n- x")
    assert len(log.entries) == 1
    entry = log.entries[0]
    assert entry.date == UNLABELED_DATE
    assert entry.day_of_week == ""
    assert entry.result == ["未标注 | 周一", "x"]
    assert log.start_date == ""
    assert log.end_date == ""


def test_only_newline_splits_lines() -> None:
    """U+2028 や改ページ文字では行を分割しない"""
    text = "12-15 | 周一\nPlan\n- 上线\u2028回滚方案\n- a\x0cb"
    log = parse_daily_log(text)
    assert log.entries[0].plan == ["上线\u2028回滚方案", "a\x0cb"]
    assert log.entries[0].raw_content == text
