"""年齢計算パネル

生年（入力）・月・日（メニュー）と基準日（YYYY-MM-DD、初期値は今日）から
満年齢と生年の和暦を表示する。
"""

from __future__ import annotations

from datetime import date

import customtkinter as ctk

from core.converter import ConversionResult, Converter
from gui.messages import render_age, render_error, t
from utils.date_fmt import clamp_day, days_in_month, parse_date, parse_digits

_MONTHS = [str(m) for m in range(1, 13)]
_DAYS = [str(d) for d in range(1, 32)]


class AgeFrame(ctk.CTkFrame):
    """年齢計算パネル。"""

    def __init__(self, master, converter: Converter, lang: str = 'ja') -> None:
        super().__init__(master, corner_radius=6)
        self._converter = converter
        self._lang = lang

        self._year_var = ctk.StringVar(value='')
        self._month_var = ctk.StringVar(value='1')
        self._day_var = ctk.StringVar(value='1')
        self._ref_var = ctk.StringVar(value=date.today().isoformat())

        self._build_ui()
        self.set_language(lang)

        for var in (self._year_var, self._month_var):
            var.trace_add('write', lambda *_: self._update_days())
        for var in (self._year_var, self._month_var, self._day_var, self._ref_var):
            var.trace_add('write', lambda *_: self.calculate())

    # ────────────────────────────────────────────────────────────────────────
    # UI 構築
    # ────────────────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self.grid_columnconfigure((0, 1, 2), weight=1)

        self._title = ctk.CTkLabel(self, font=ctk.CTkFont(size=14, weight='bold'))
        self._title.grid(row=0, column=0, columnspan=3, sticky='w', padx=10, pady=(8, 6))

        self._birth_label = ctk.CTkLabel(self)
        self._birth_label.grid(row=1, column=0, columnspan=3, sticky='w', padx=10)
        ctk.CTkEntry(self, textvariable=self._year_var, width=90).grid(
            row=2, column=0, sticky='ew', padx=(10, 4), pady=(2, 8),
        )
        ctk.CTkOptionMenu(self, variable=self._month_var, values=_MONTHS, width=70).grid(
            row=2, column=1, sticky='ew', padx=4, pady=(2, 8),
        )
        self._day_menu = ctk.CTkOptionMenu(self, variable=self._day_var, values=_DAYS, width=70)
        self._day_menu.grid(row=2, column=2, sticky='ew', padx=(4, 10), pady=(2, 8))

        self._ref_label = ctk.CTkLabel(self)
        self._ref_label.grid(row=3, column=0, columnspan=3, sticky='w', padx=10)
        ctk.CTkEntry(self, textvariable=self._ref_var).grid(
            row=4, column=0, columnspan=3, sticky='ew', padx=10, pady=(2, 8),
        )

        self._result_label = ctk.CTkLabel(
            self, text='', font=ctk.CTkFont(size=13), wraplength=420, justify='left',
        )
        self._result_label.grid(row=5, column=0, columnspan=3, sticky='w', padx=10, pady=(2, 8))

    # ── 外部 API ──────────────────────────────────────────────────────────

    def set_language(self, lang: str) -> None:
        self._lang = lang
        self._title.configure(text=t('age_title', lang))
        self._birth_label.configure(text=t('birth_date_label', lang))
        self._ref_label.configure(text=t('reference_date_label', lang))
        self.calculate()

    def calculate(self) -> None:
        """入力がそろっていれば年齢を計算して表示する。"""
        year = parse_digits(self._year_var.get())
        month = parse_digits(self._month_var.get())
        day = parse_digits(self._day_var.get())
        ref_text = self._ref_var.get().strip()
        if year is None or month is None or day is None or not ref_text:
            self._set_result('')
            return

        reference = parse_date(ref_text)
        if reference is None:
            self._set_result(t('error_reference_date', self._lang), error=True)
            return

        self._converter.calculate_age(year, month, day, reference, sink=self._show_age)

    # ── 内部 ──────────────────────────────────────────────────────────────

    def _update_days(self) -> None:
        """年・月に合わせて日メニューの選択肢を作り直す。"""
        year = parse_digits(self._year_var.get())
        month = parse_digits(self._month_var.get())
        if year is None or month is None or year < 1 or not 1 <= month <= 12:
            return
        self._day_menu.configure(values=_DAYS[:days_in_month(year, month)])
        # 選択中の日がメニューから外れたら末日に寄せる
        day = parse_digits(self._day_var.get())
        if day is not None:
            clamped = clamp_day(year, month, day)
            if clamped != day:
                self._day_var.set(str(clamped))

    def _show_age(self, result: ConversionResult) -> None:
        if result.ok:
            self._set_result(render_age(result.value, self._lang))
        elif result.error is not None:
            self._set_result(render_error(result.error, self._lang), error=True)

    def _set_result(self, text: str, error: bool = False) -> None:
        self._result_label.configure(
            text=text, text_color='#c0392b' if error else ('gray10', 'gray90'),
        )
