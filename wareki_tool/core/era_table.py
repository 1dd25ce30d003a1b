"""元号テーブル

明治以降の元号を新しい順に保持する。起動時に一度だけ構築され、
実行中に変更されることはない。構築時に並び順と「現行元号は先頭の 1 つだけ」
という不変条件を検証し、違反していれば EraTableError で即座に失敗する。
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date


class EraTableError(ValueError):
    """元号テーブルの定義が不正（設定エラー）。"""


@dataclass(frozen=True, slots=True)
class EraRecord:
    """1 つの元号。end が None なら現行の元号。"""
    name: str
    label: str
    code: str
    start: date
    end: date | None = None

    @property
    def start_year(self) -> int:
        return self.start.year

    @property
    def end_year(self) -> int | None:
        return self.end.year if self.end is not None else None

    @property
    def is_current(self) -> bool:
        return self.end is None

    def __str__(self) -> str:
        return self.name


def _normalize_key(s: str) -> str:
    """NFKC 正規化 + 小文字化（全角英字も畳み込む）。"""
    return unicodedata.normalize('NFKC', s).strip().lower()


class EraTable:
    """新しい順に並んだ EraRecord の不変コレクション。"""

    def __init__(self, records: Iterable[EraRecord]) -> None:
        self._eras: tuple[EraRecord, ...] = tuple(records)
        self._validate()
        self._index: dict[str, EraRecord] = {}
        for era in self._eras:
            for key in (era.name, era.label, era.code):
                self._index[_normalize_key(key)] = era

    def _validate(self) -> None:
        eras = self._eras
        if not eras:
            raise EraTableError('元号テーブルが空です')

        open_eras = [e for e in eras if e.end is None]
        if len(open_eras) != 1:
            raise EraTableError(
                f'現行元号（終了日なし）はちょうど 1 つ必要です: {[e.name for e in open_eras]}'
            )
        if eras[0].end is not None:
            raise EraTableError(f'先頭の元号 {eras[0].name} が現行元号ではありません')

        for era in eras:
            if era.end is not None and era.end < era.start:
                raise EraTableError(f'{era.name} の終了日が開始日より前です')

        for newer, older in zip(eras, eras[1:]):
            if not newer.start > older.start:
                raise EraTableError(
                    f'開始日の降順になっていません: {newer.name} → {older.name}'
                )
            # older は現行ではないので end は必ずある
            if older.end >= newer.start:
                raise EraTableError(f'{older.name} と {newer.name} の期間が重なっています')

        keys: set[str] = set()
        for era in eras:
            for key in (era.name, era.label, era.code):
                k = _normalize_key(key)
                if k in keys:
                    raise EraTableError(f'元号の識別子が重複しています: {key}')
                keys.add(k)

    # ── 参照 ────────────────────────────────────────────────────────────────

    def all_eras(self) -> tuple[EraRecord, ...]:
        """新しい順の全元号。"""
        return self._eras

    def __iter__(self) -> Iterator[EraRecord]:
        return iter(self._eras)

    def __len__(self) -> int:
        return len(self._eras)

    @property
    def current(self) -> EraRecord:
        return self._eras[0]

    @property
    def oldest(self) -> EraRecord:
        return self._eras[-1]

    def find(self, key: str | None) -> EraRecord | None:
        """名前（大文字小文字無視）・漢字表記・1 文字コードで元号を探す。"""
        if not key:
            return None
        return self._index.get(_normalize_key(key))


# 元号テーブル（開始日順、新しい順に並べる）
ERA_TABLE = EraTable([
    EraRecord('Reiwa', '令和', 'R', date(2019, 5, 1)),
    EraRecord('Heisei', '平成', 'H', date(1989, 1, 8), date(2019, 4, 30)),
    EraRecord('Showa', '昭和', 'S', date(1926, 12, 25), date(1989, 1, 7)),
    EraRecord('Taisho', '大正', 'T', date(1912, 7, 30), date(1926, 12, 24)),
    EraRecord('Meiji', '明治', 'M', date(1868, 1, 25), date(1912, 7, 29)),
])
