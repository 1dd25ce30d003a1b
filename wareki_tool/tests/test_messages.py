"""gui/messages.py のユニットテスト

Tkinter ウィジェットは生成しない。core の構造化された結果が
各言語の文言に組み立てられることを確認する。
"""

from __future__ import annotations

from datetime import date

import pytest

from core.age import AgeResult
from core.era_resolver import EraResolver, EraYear
from core.era_table import ERA_TABLE
from core.errors import (
    BirthDateInFuture,
    EraNotFound,
    EraYearOutOfRange,
    InvalidDate,
    InvalidEraYear,
    InvalidYear,
    NoEraForYear,
    YearTooEarly,
)
from gui.messages import (
    MESSAGES,
    era_option_label,
    render_age,
    render_error,
    render_notice,
    t,
)

REIWA = ERA_TABLE.find('Reiwa')
HEISEI = ERA_TABLE.find('Heisei')


class TestLookup:
    def test_same_keys_in_all_languages(self):
        assert set(MESSAGES['ja']) == set(MESSAGES['en'])

    def test_unknown_key_returns_key(self):
        assert t('no_such_key', 'ja') == 'no_such_key'

    def test_unknown_language_falls_back_to_ja(self):
        assert t('clear_button', 'fr') == 'クリア'

    def test_interpolation(self):
        assert t('error_min_year', 'en', year=1868) == 'Year must be 1868 or later.'


class TestRenderError:
    @pytest.mark.parametrize('err, ja, en', [
        (InvalidYear('abc'), '有効な西暦を入力してください。', 'Please enter a valid Western year.'),
        (YearTooEarly(1868, 1867), '1868年以降を入力してください。', 'Year must be 1868 or later.'),
        (InvalidEraYear('0'), '有効な年数を入力してください。', 'Please enter a positive year for the era.'),
        (EraNotFound('Edo'), '元号「Edo」が見つかりません。', "Era 'Edo' not found."),
        (EraYearOutOfRange(HEISEI, 31, 32), '平成は31年で終わりました。', 'Heisei era ended in year 31.'),
        (InvalidDate(1999, 2, 30), '有効な日付を入力してください。', 'Please enter a valid date.'),
        (
            BirthDateInFuture(date(2030, 1, 1), date(2024, 1, 1)),
            '生年月日は基準日より未来に設定できません。',
            'Date of birth cannot be later than the reference date.',
        ),
        (NoEraForYear(1902), '1902年に該当する元号がありません。', 'No era covers the year 1902.'),
    ])
    def test_both_languages(self, err, ja, en):
        assert render_error(err, 'ja') == ja
        assert render_error(err, 'en') == en


class TestRenderNotice:
    def test_none(self):
        assert render_notice(None, 'ja') == ''

    def test_2019_ja(self):
        notice = EraResolver().transition_notice(2019)
        assert render_notice(notice, 'ja') == (
            '注意: 2019年は平成（4月30日まで）と令和（5月1日から）の両方が存在します。'
        )

    def test_2019_en(self):
        notice = EraResolver().transition_notice(2019)
        assert render_notice(notice, 'en') == (
            'Note: 2019 contains both Heisei (until 4/30) and Reiwa (from 5/1).'
        )

    def test_starting_only(self):
        notice = EraResolver().transition_notice(1868)
        assert render_notice(notice, 'ja') == '注意: 明治は1868年1月25日から始まりました。'
        assert render_notice(notice, 'en') == 'Note: Meiji began on 1/25/1868.'


class TestRenderAge:
    def test_with_era_ja(self):
        result = AgeResult(age=24, era_year=EraYear(HEISEI, 12))
        assert render_age(result, 'ja') == '平成12年生まれ (満24歳)'

    def test_gannen_ja(self):
        result = AgeResult(age=5, era_year=EraYear(REIWA, 1))
        assert render_age(result, 'ja') == '令和元年生まれ (満5歳)'

    def test_gannen_en_numeric(self):
        result = AgeResult(age=5, era_year=EraYear(REIWA, 1))
        assert render_age(result, 'en') == 'Reiwa 1 (5 years old)'

    def test_without_era(self):
        assert render_age(AgeResult(age=160), 'ja') == '満160歳です。'
        assert render_age(AgeResult(age=160), 'en') == 'You are 160 years old.'


class TestEraOptionLabel:
    def test_ja(self):
        assert era_option_label(REIWA, 'ja') == '令和 (Reiwa)'

    def test_en(self):
        assert era_option_label(REIWA, 'en') == 'Reiwa (令和)'

    def test_labels_unique(self):
        for lang in MESSAGES:
            labels = [era_option_label(e, lang) for e in ERA_TABLE]
            assert len(set(labels)) == len(labels)
