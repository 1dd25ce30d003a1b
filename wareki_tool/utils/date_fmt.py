"""日付文字列のパースユーティリティ"""

import calendar
import re
import unicodedata
from datetime import date

_DATE_RE = re.compile(r'\s*(\d{4})[-/](\d{1,2})[-/](\d{1,2})(?:[ T].*)?\s*')


def parse_date(s: str | None) -> date | None:
    """日付文字列を date に変換する。変換不能なら None。

    対応形式:
        - "2024-06-15" / "2024/06/15" / "2024-6-5"
        - "2024-06-15 00:00:00"（時刻部分は無視）
    """
    if not s:
        return None
    m = _DATE_RE.fullmatch(s)
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def days_in_month(year: int, month: int) -> int:
    """その月の日数。うるう年を考慮する。"""
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    """日をその月の末日までに丸める（2/31 → 2/28 など）。"""
    return min(day, days_in_month(year, month))


def parse_digits(s: str | None, max_digits: int = 4) -> int | None:
    """全角を含む数字だけの文字列を整数にする。max_digits 桁を超えたら None。"""
    if not s:
        return None
    s = unicodedata.normalize('NFKC', s).strip()
    if not s.isdecimal() or len(s) > max_digits:
        return None
    return int(s)
