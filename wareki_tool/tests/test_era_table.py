"""core/era_table.py のテスト

テスト対象:
  - ERA_TABLE: 組み込みの元号テーブル
  - EraTable: 構築時の不変条件チェック
  - find
"""

from __future__ import annotations

from datetime import date

import pytest

from core.era_table import ERA_TABLE, EraRecord, EraTable, EraTableError

REIWA = EraRecord('Reiwa', '令和', 'R', date(2019, 5, 1))
HEISEI = EraRecord('Heisei', '平成', 'H', date(1989, 1, 8), date(2019, 4, 30))
SHOWA = EraRecord('Showa', '昭和', 'S', date(1926, 12, 25), date(1989, 1, 7))


# ── 組み込みテーブル ──────────────────────────────────────────────────────────


class TestBuiltinTable:
    def test_newest_first(self):
        names = [e.name for e in ERA_TABLE.all_eras()]
        assert names == ['Reiwa', 'Heisei', 'Showa', 'Taisho', 'Meiji']

    def test_current_is_reiwa(self):
        assert ERA_TABLE.current.name == 'Reiwa'
        assert ERA_TABLE.current.is_current
        assert ERA_TABLE.current.end_year is None

    def test_oldest_is_meiji(self):
        assert ERA_TABLE.oldest.name == 'Meiji'
        assert ERA_TABLE.oldest.start == date(1868, 1, 25)

    def test_only_first_is_open(self):
        assert [e.is_current for e in ERA_TABLE] == [True, False, False, False, False]

    def test_start_strictly_descending(self):
        starts = [e.start for e in ERA_TABLE]
        assert all(a > b for a, b in zip(starts, starts[1:]))

    def test_handover_is_next_day(self):
        """旧元号の最終日の翌日が新元号の初日。"""
        eras = ERA_TABLE.all_eras()
        for newer, older in zip(eras, eras[1:]):
            assert (newer.start - older.end).days == 1

    def test_boundary_year_shared(self):
        heisei = ERA_TABLE.find('Heisei')
        assert heisei.end_year == ERA_TABLE.current.start_year == 2019

    def test_restartable(self):
        assert list(ERA_TABLE) == list(ERA_TABLE)
        assert len(ERA_TABLE) == 5

    def test_record_is_immutable(self):
        with pytest.raises(AttributeError):
            ERA_TABLE.current.name = 'X'  # type: ignore[misc]


# ── find ─────────────────────────────────────────────────────────────────────


class TestFind:
    @pytest.mark.parametrize('key', ['Heisei', 'heisei', 'HEISEI', '平成', 'H', 'h', 'Ｈｅｉｓｅｉ', ' Heisei '])
    def test_aliases(self, key):
        assert ERA_TABLE.find(key).name == 'Heisei'

    def test_unknown(self):
        assert ERA_TABLE.find('Edo') is None

    def test_empty_and_none(self):
        assert ERA_TABLE.find('') is None
        assert ERA_TABLE.find(None) is None


# ── 不変条件の検証 ───────────────────────────────────────────────────────────


class TestValidation:
    def test_valid_table(self):
        table = EraTable([REIWA, HEISEI, SHOWA])
        assert len(table) == 3

    def test_empty(self):
        with pytest.raises(EraTableError, match='空'):
            EraTable([])

    def test_no_open_era(self):
        with pytest.raises(EraTableError, match='現行元号'):
            EraTable([HEISEI, SHOWA])

    def test_two_open_eras(self):
        open_heisei = EraRecord('Heisei', '平成', 'H', date(1989, 1, 8))
        with pytest.raises(EraTableError, match='ちょうど 1 つ'):
            EraTable([REIWA, open_heisei])

    def test_open_era_not_first(self):
        with pytest.raises(EraTableError, match='先頭'):
            EraTable([HEISEI, REIWA])

    def test_end_before_start(self):
        broken = EraRecord('Heisei', '平成', 'H', date(1989, 1, 8), date(1988, 1, 1))
        with pytest.raises(EraTableError, match='終了日'):
            EraTable([REIWA, broken])

    def test_not_descending(self):
        with pytest.raises(EraTableError, match='降順'):
            EraTable([REIWA, SHOWA, HEISEI])

    def test_overlap(self):
        late_end = EraRecord('Heisei', '平成', 'H', date(1989, 1, 8), date(2019, 5, 1))
        with pytest.raises(EraTableError, match='重なって'):
            EraTable([REIWA, late_end])

    def test_duplicate_key(self):
        dup = EraRecord('Heisei', '平成', 'R', date(1989, 1, 8), date(2019, 4, 30))
        with pytest.raises(EraTableError, match='重複'):
            EraTable([REIWA, dup])

    def test_gap_is_allowed(self):
        """期間の隙間は不変条件違反ではない（年単位の解決で NoEraForYear になり得る）。"""
        old = EraRecord('Old', '旧', 'O', date(1800, 1, 1), date(1900, 12, 31))
        new = EraRecord('New', '新', 'N', date(1905, 1, 1))
        assert len(EraTable([new, old])) == 2
