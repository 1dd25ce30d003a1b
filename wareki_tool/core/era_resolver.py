"""元号の解決

年単位 (era_for_year) と日付単位 (era_for_date) の 2 つの粒度で元号を引く。

年単位では改元年が新旧両方の元号に含まれるが、新しい順に走査して最初に
一致したものを返すため、改元年は「その年に始まった元号」に解決される。
日付単位では曖昧さはなく、年齢計算など日付が分かる場合はこちらを使う。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.era_table import ERA_TABLE, EraRecord, EraTable
from core.errors import YearTooEarly


@dataclass(frozen=True, slots=True)
class EraYear:
    """元号と元号内の年数の組（例: 平成 31 年）。"""
    era: EraRecord
    year: int

    @property
    def era_name(self) -> str:
        return self.era.name


@dataclass(frozen=True, slots=True)
class TransitionNotice:
    """改元年の注意情報。表示文言は呼び出し側で組み立てる。

    ending / starting のどちらか一方だけなら片側の通知。
    """
    year: int
    ending: EraRecord | None = None
    starting: EraRecord | None = None

    @property
    def is_double_sided(self) -> bool:
        return self.ending is not None and self.starting is not None

    @property
    def end_date(self) -> date | None:
        """終了する元号の最終日。"""
        return self.ending.end if self.ending is not None else None

    @property
    def start_date(self) -> date | None:
        """始まる元号の初日。"""
        return self.starting.start if self.starting is not None else None


class EraResolver:
    """EraTable を走査して西暦年・日付に対応する元号を返す。"""

    def __init__(self, table: EraTable = ERA_TABLE) -> None:
        self.table = table

    def era_for_year(self, year: int) -> EraRecord | None:
        """年を含む元号を返す。改元年は新しい方の元号。"""
        for era in self.table:
            if year >= era.start_year and (era.end is None or year <= era.end_year):
                return era
        return None

    def era_for_date(self, d: date) -> EraRecord | None:
        """日付を含む元号を返す。明治より前なら None。"""
        for era in self.table:
            if d >= era.start and (era.end is None or d <= era.end):
                return era
        return None

    @staticmethod
    def year_within_era(year: int, era: EraRecord) -> int:
        """
        西暦年を元号内の年数（1 始まり、1 = 元年）に変換する。

        Examples:
            2019 年の令和 → 1
            2019 年の平成 → 31
        """
        if year < era.start_year:
            raise YearTooEarly(era.start_year, year)
        return year - era.start_year + 1

    @staticmethod
    def max_year_in_era(era: EraRecord) -> int | None:
        """終了済み元号の最終年（元号内の年数）。現行元号は上限なしで None。"""
        if era.end is None:
            return None
        return era.end.year - era.start_year + 1

    def transition_notice(self, year: int) -> TransitionNotice | None:
        """year に終了する元号・始まる元号があれば通知を返す。変換は妨げない。"""
        ending = next((e for e in self.table if e.end_year == year), None)
        starting = next((e for e in self.table if e.start_year == year), None)
        if ending is None and starting is None:
            return None
        return TransitionNotice(year=year, ending=ending, starting=starting)
