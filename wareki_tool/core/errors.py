"""変換エラーの型定義

すべて利用者入力・データ起因のエラーで、Converter の境界で捕捉され
ConversionResult.error として返される。メッセージの多言語化は
gui/messages.py が行うため、ここでは値（入力値・上限値・元号）だけを保持する。
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.era_table import EraRecord


class ConversionError(ValueError):
    """変換エラーの基底クラス。"""


class InvalidYear(ConversionError):
    """西暦が整数として解釈できない。"""

    def __init__(self, text: str) -> None:
        super().__init__(f'invalid western year: {text!r}')
        self.text = text


class InvalidEraYear(ConversionError):
    """和暦年が整数として解釈できない、または 0 以下。"""

    def __init__(self, text: str) -> None:
        super().__init__(f'invalid era year: {text!r}')
        self.text = text


class YearTooEarly(ConversionError):
    """対応する最古の元号より前の年。"""

    def __init__(self, min_year: int, year: int | None = None) -> None:
        super().__init__(f'year must be {min_year} or later (got {year})')
        self.min_year = min_year
        self.year = year


class NoEraForYear(ConversionError):
    """どの元号にも該当しない年（元号テーブルの不整合）。"""

    def __init__(self, year: int) -> None:
        super().__init__(f'no era covers year {year}')
        self.year = year


class EraNotFound(ConversionError):
    def __init__(self, era_key: str) -> None:
        super().__init__(f'era not found: {era_key!r}')
        self.era_key = era_key


class EraYearOutOfRange(ConversionError):
    """終了済み元号の年数が上限を超えている。"""

    def __init__(self, era: EraRecord, max_year: int, era_year: int | None = None) -> None:
        super().__init__(f'{era.name} ended in its year {max_year} (got {era_year})')
        self.era = era
        self.max_year = max_year
        self.era_year = era_year


class InvalidDate(ConversionError):
    """実在しない日付（4月31日など）。"""

    def __init__(self, year: int, month: int, day: int) -> None:
        super().__init__(f'invalid date: {year}-{month}-{day}')
        self.year = year
        self.month = month
        self.day = day


class BirthDateInFuture(ConversionError):
    """生年月日が基準日より後。"""

    def __init__(self, birth: date, reference: date) -> None:
        super().__init__(f'birth date {birth.isoformat()} is after {reference.isoformat()}')
        self.birth = birth
        self.reference = reference
