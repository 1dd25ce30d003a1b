"""満年齢の計算"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.era_resolver import EraResolver, EraYear
from core.errors import BirthDateInFuture, InvalidDate


@dataclass(frozen=True, slots=True)
class AgeResult:
    """満年齢と生年の和暦。明治より前の生まれなら era_year は None。"""
    age: int
    era_year: EraYear | None = None


def calculate_age(
    year: int, month: int, day: int,
    reference: date,
    resolver: EraResolver | None = None,
) -> AgeResult:
    """
    生年月日と基準日から満年齢を求め、生年の元号を日付単位で添える。

    Raises:
        InvalidDate: 実在しない生年月日
        BirthDateInFuture: 生年月日が基準日より後

    Examples:
        >>> calculate_age(2000, 1, 1, date(2024, 6, 15)).age
        24
    """
    try:
        birth = date(year, month, day)
    except (ValueError, TypeError, OverflowError):
        raise InvalidDate(year, month, day) from None

    if birth > reference:
        raise BirthDateInFuture(birth, reference)

    age = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        age -= 1

    resolver = resolver or EraResolver()
    era = resolver.era_for_date(birth)
    if era is None:
        return AgeResult(age=age)
    return AgeResult(age=age, era_year=EraYear(era, birth.year - era.start_year + 1))
