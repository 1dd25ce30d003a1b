"""西暦 ⇔ 和暦の双方向変換

  western_to_era(text)          : 西暦入力 → 元号 + 年数
  era_to_western(era_key, text) : 元号 + 年数入力 → 西暦
  calculate_age(y, m, d, ref)   : 生年月日 → 満年齢 + 生年の和暦

いずれも ConversionResult を返し、ConversionError は外に漏らさない。
空欄入力はエラーではなく empty の結果になる。

再入防止:
  変換結果を反対側の入力欄へ書き戻すと、その欄の入力イベントから逆方向の変換が
  呼ばれてしまう。Converter は変換 1 回の間だけラッチを保持し、保持中の呼び出しは
  何も計算せずに suppressed の結果を返す。書き戻しは sink コールバックで行うと
  ラッチ保持中に実行される。
"""

from __future__ import annotations

import contextlib
import logging
import re
import unicodedata
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import MAXYEAR, date

from core.age import AgeResult
from core.age import calculate_age as _calculate_age
from core.era_resolver import EraResolver, EraYear, TransitionNotice
from core.era_table import ERA_TABLE, EraTable
from core.errors import (
    ConversionError,
    EraNotFound,
    EraYearOutOfRange,
    InvalidEraYear,
    InvalidYear,
    NoEraForYear,
    YearTooEarly,
)

logger = logging.getLogger(__name__)

# 9 桁まで
_INT_RE = re.compile(r'[+-]?[0-9]{1,9}')

# datetime と同じ上限。これより後の西暦は扱わない
MAX_YEAR = MAXYEAR


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """変換 1 回分の結果。value と error のどちらか（空欄入力なら両方 None）。"""
    value: EraYear | AgeResult | int | None = None
    error: ConversionError | None = None
    notice: TransitionNotice | None = None
    suppressed: bool = False

    @property
    def ok(self) -> bool:
        return self.value is not None and self.error is None

    @property
    def empty(self) -> bool:
        """空欄入力による no-op。"""
        return self.value is None and self.error is None and not self.suppressed


EMPTY = ConversionResult()
SUPPRESSED = ConversionResult(suppressed=True)

Sink = Callable[[ConversionResult], None]


def _normalize(text: str | None) -> str:
    if text is None:
        return ''
    return unicodedata.normalize('NFKC', str(text)).strip()


def _parse_int(text: str, allow_gannen: bool = False) -> int | None:
    """'2019' / '２０１９' / '2019年' / '元'（和暦のみ）を整数にする。不正なら None。"""
    s = text
    if s.endswith('年'):
        s = s[:-1].rstrip()
    if allow_gannen and s == '元':
        return 1
    if not _INT_RE.fullmatch(s):
        return None
    return int(s)


class Converter:
    """元号テーブルを使った双方向変換器。ラッチはインスタンスごとに持つ。"""

    def __init__(self, table: EraTable = ERA_TABLE) -> None:
        self.table = table
        self.resolver = EraResolver(table)
        self._busy = False

    # ── 再入防止 ────────────────────────────────────────────────────────────

    @property
    def busy(self) -> bool:
        """変換（または updating ブロック）の実行中かどうか。"""
        return self._busy

    @contextlib.contextmanager
    def updating(self) -> Iterator[None]:
        """ラッチを保持する。例外時も必ず元の状態に戻す。

        入力欄の一括クリアなど、変換を伴わない書き換えにも使う。
        """
        prev = self._busy
        self._busy = True
        try:
            yield
        finally:
            self._busy = prev

    def _run(self, name: str, func: Callable[[], ConversionResult], sink: Sink | None) -> ConversionResult:
        if self._busy:
            logger.debug('%s: 変換中のため再入呼び出しを抑止', name)
            return SUPPRESSED
        with self.updating():
            try:
                result = func()
            except ConversionError as exc:
                logger.debug('%s: %s', name, exc)
                result = ConversionResult(error=exc)
            if sink is not None:
                sink(result)
        return result

    # ── 西暦 → 和暦 ────────────────────────────────────────────────────────

    def western_to_era(self, text: str | None, sink: Sink | None = None) -> ConversionResult:
        """西暦の入力文字列を元号 + 年数に変換する。改元年は新しい元号になる。"""
        return self._run('western_to_era', lambda: self._western_to_era(text), sink)

    def _western_to_era(self, text: str | None) -> ConversionResult:
        s = _normalize(text)
        if not s:
            return EMPTY

        year = _parse_int(s)
        if year is None or year > MAX_YEAR:
            raise InvalidYear(str(text))

        oldest = self.table.oldest
        if year < oldest.start_year:
            raise YearTooEarly(oldest.start_year, year)

        era = self.resolver.era_for_year(year)
        if era is None:
            # テーブルの不変条件が崩れていない限り到達しない
            logger.error('西暦 %d に該当する元号がありません（元号テーブルを確認）', year)
            raise NoEraForYear(year)

        era_year = self.resolver.year_within_era(year, era)
        logger.debug('西暦 %d → %s %d', year, era.name, era_year)
        return ConversionResult(
            value=EraYear(era, era_year),
            notice=self.resolver.transition_notice(year),
        )

    # ── 和暦 → 西暦 ────────────────────────────────────────────────────────

    def era_to_western(
        self, era_key: str | None, text: str | None, sink: Sink | None = None,
    ) -> ConversionResult:
        """元号（名前・漢字・コード）と年数の入力文字列を西暦に変換する。"""
        return self._run('era_to_western', lambda: self._era_to_western(era_key, text), sink)

    def _era_to_western(self, era_key: str | None, text: str | None) -> ConversionResult:
        s = _normalize(text)
        if not s:
            return EMPTY

        era_year = _parse_int(s, allow_gannen=True)
        if era_year is None or era_year <= 0:
            raise InvalidEraYear(str(text))

        era = self.table.find(era_key)
        if era is None:
            raise EraNotFound(str(era_key or ''))

        max_year = self.resolver.max_year_in_era(era)
        if max_year is not None and era_year > max_year:
            raise EraYearOutOfRange(era, max_year, era_year)

        year = era.start_year + era_year - 1
        if year > MAX_YEAR:
            raise InvalidEraYear(str(text))
        logger.debug('%s %d → 西暦 %d', era.name, era_year, year)
        return ConversionResult(value=year, notice=self.resolver.transition_notice(year))

    # ── 年齢 ────────────────────────────────────────────────────────────────

    def calculate_age(
        self, year: int, month: int, day: int, reference: date,
        sink: Sink | None = None,
    ) -> ConversionResult:
        """満年齢を計算する。value は AgeResult。"""
        return self._run(
            'calculate_age',
            lambda: ConversionResult(
                value=_calculate_age(year, month, day, reference, self.resolver),
            ),
            sink,
        )
