"""表示文言テーブル（ja / en）と結果・エラーの文言化

core は文言を持たないため、ConversionError / TransitionNotice / AgeResult の
構造化された値をここで現在の言語の文字列に組み立てる。
"""

from __future__ import annotations

from datetime import date

from core.age import AgeResult
from core.era_resolver import TransitionNotice
from core.era_table import EraRecord
from core.errors import (
    BirthDateInFuture,
    ConversionError,
    EraNotFound,
    EraYearOutOfRange,
    InvalidDate,
    InvalidEraYear,
    InvalidYear,
    NoEraForYear,
    YearTooEarly,
)
from utils.wareki import format_era_year

MESSAGES: dict[str, dict[str, str]] = {
    'ja': {
        'window_title': '和暦・西暦変換',
        'converter_title': '和暦・西暦変換',
        'western_year_label': '西暦 (例: 2025)',
        'western_year_placeholder': '西暦を入力',
        'japanese_year_label': '和暦',
        'japanese_year_placeholder': '年',
        'clear_button': 'クリア',
        'age_title': '年齢計算',
        'birth_date_label': '生年月日',
        'birth_year_placeholder': '年',
        'reference_date_label': '基準日',
        'reference_date_placeholder': 'YYYY-MM-DD',
        'era_option': '{label} ({name})',
        'error_valid_year': '有効な西暦を入力してください。',
        'error_min_year': '{year}年以降を入力してください。',
        'error_no_era': '{year}年に該当する元号がありません。',
        'error_positive_year': '有効な年数を入力してください。',
        'error_era_not_found': '元号「{era_name}」が見つかりません。',
        'error_era_ended': '{era_name}は{max_year}年で終わりました。',
        'error_invalid_date': '有効な日付を入力してください。',
        'error_birth_in_future': '生年月日は基準日より未来に設定できません。',
        'error_reference_date': '基準日を YYYY-MM-DD 形式で入力してください。',
        'notice_both': '注意: {year}年は{ending}（{end_month}月{end_day}日まで）と'
                       '{starting}（{start_month}月{start_day}日から）の両方が存在します。',
        'notice_ending': '注意: {ending}は{year}年{end_month}月{end_day}日で終わりました。',
        'notice_starting': '注意: {starting}は{year}年{start_month}月{start_day}日から始まりました。',
        'age_result': '満{age}歳です。',
        'age_result_with_era': '{era_name}{era_year}年生まれ (満{age}歳)',
    },
    'en': {
        'window_title': 'Japanese Year Converter',
        'converter_title': 'Japanese Year Converter',
        'western_year_label': 'Western Year (e.g., 2025)',
        'western_year_placeholder': 'Enter Western Year',
        'japanese_year_label': 'Japanese Year',
        'japanese_year_placeholder': 'Year',
        'clear_button': 'Clear',
        'age_title': 'Age Calculator',
        'birth_date_label': 'Date of Birth',
        'birth_year_placeholder': 'Year',
        'reference_date_label': 'Reference Date',
        'reference_date_placeholder': 'YYYY-MM-DD',
        'era_option': '{name} ({label})',
        'error_valid_year': 'Please enter a valid Western year.',
        'error_min_year': 'Year must be {year} or later.',
        'error_no_era': 'No era covers the year {year}.',
        'error_positive_year': 'Please enter a positive year for the era.',
        'error_era_not_found': "Era '{era_name}' not found.",
        'error_era_ended': '{era_name} era ended in year {max_year}.',
        'error_invalid_date': 'Please enter a valid date.',
        'error_birth_in_future': 'Date of birth cannot be later than the reference date.',
        'error_reference_date': 'Please enter the reference date as YYYY-MM-DD.',
        'notice_both': 'Note: {year} contains both {ending} (until {end_month}/{end_day}) '
                       'and {starting} (from {start_month}/{start_day}).',
        'notice_ending': 'Note: {ending} ended on {end_month}/{end_day}/{year}.',
        'notice_starting': 'Note: {starting} began on {start_month}/{start_day}/{year}.',
        'age_result': 'You are {age} years old.',
        'age_result_with_era': '{era_name} {era_year} ({age} years old)',
    },
}


def t(key: str, lang: str = 'ja', **kwargs) -> str:
    """文言を引いて埋め込む。未定義のキーはキー名をそのまま返す。"""
    table = MESSAGES.get(lang) or MESSAGES['ja']
    text = table.get(key, key)
    return text.format(**kwargs) if kwargs else text


def era_display_name(era: EraRecord, lang: str = 'ja') -> str:
    """日本語では漢字表記、それ以外はローマ字名。"""
    return era.label if lang == 'ja' else era.name


def era_year_text(era_year: int, lang: str = 'ja') -> str:
    """日本語では 1 年目を「元」と表示する。"""
    return format_era_year(era_year) if lang == 'ja' else str(era_year)


def render_error(err: ConversionError, lang: str = 'ja') -> str:
    if isinstance(err, InvalidYear):
        return t('error_valid_year', lang)
    if isinstance(err, YearTooEarly):
        return t('error_min_year', lang, year=err.min_year)
    if isinstance(err, NoEraForYear):
        return t('error_no_era', lang, year=err.year)
    if isinstance(err, InvalidEraYear):
        return t('error_positive_year', lang)
    if isinstance(err, EraNotFound):
        return t('error_era_not_found', lang, era_name=err.era_key)
    if isinstance(err, EraYearOutOfRange):
        return t(
            'error_era_ended', lang,
            era_name=era_display_name(err.era, lang), max_year=err.max_year,
        )
    if isinstance(err, InvalidDate):
        return t('error_invalid_date', lang)
    if isinstance(err, BirthDateInFuture):
        return t('error_birth_in_future', lang)
    return str(err)


def _md(d: date | None, prefix: str) -> dict[str, int]:
    if d is None:
        return {}
    return {f'{prefix}_month': d.month, f'{prefix}_day': d.day}


def render_notice(notice: TransitionNotice | None, lang: str = 'ja') -> str:
    """改元年の注意文。通知がなければ空文字。"""
    if notice is None:
        return ''
    kwargs: dict = {'year': notice.year}
    kwargs.update(_md(notice.end_date, 'end'))
    kwargs.update(_md(notice.start_date, 'start'))
    if notice.ending is not None:
        kwargs['ending'] = era_display_name(notice.ending, lang)
    if notice.starting is not None:
        kwargs['starting'] = era_display_name(notice.starting, lang)

    if notice.is_double_sided:
        return t('notice_both', lang, **kwargs)
    if notice.ending is not None:
        return t('notice_ending', lang, **kwargs)
    return t('notice_starting', lang, **kwargs)


def render_age(result: AgeResult, lang: str = 'ja') -> str:
    if result.era_year is None:
        return t('age_result', lang, age=result.age)
    era = result.era_year.era
    return t(
        'age_result_with_era', lang,
        era_name=era_display_name(era, lang),
        era_year=era_year_text(result.era_year.year, lang),
        age=result.age,
    )


def era_option_label(era: EraRecord, lang: str = 'ja') -> str:
    """元号選択メニューの表示文字列。"""
    return t('era_option', lang, label=era.label, name=era.name)
