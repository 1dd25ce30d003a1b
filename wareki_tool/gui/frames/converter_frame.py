"""西暦 ⇔ 和暦 変換パネル

西暦欄・元号メニュー・和暦年欄は StringVar の write トレースで変換を起動する。
変換結果の書き戻しは Converter の sink で行うため、書き戻しによって
反対方向の変換が連鎖することはない。
"""

from __future__ import annotations

import customtkinter as ctk

from core.converter import ConversionResult, Converter
from core.era_table import EraRecord
from gui.messages import era_option_label, render_error, render_notice, t


class ConverterFrame(ctk.CTkFrame):
    """年号変換パネル。"""

    def __init__(self, master, converter: Converter, lang: str = 'ja') -> None:
        super().__init__(master, corner_radius=6)
        self._converter = converter
        self._lang = lang
        self._eras: tuple[EraRecord, ...] = converter.table.all_eras()
        self._options: dict[str, EraRecord] = {}

        self._western_var = ctk.StringVar(value='')
        self._era_var = ctk.StringVar(value='')
        self._era_year_var = ctk.StringVar(value='')

        self._build_ui()
        self.set_language(lang)

        self._western_var.trace_add('write', lambda *_: self._on_western_input())
        self._era_var.trace_add('write', lambda *_: self._on_era_input())
        self._era_year_var.trace_add('write', lambda *_: self._on_era_input())

    # ────────────────────────────────────────────────────────────────────────
    # UI 構築
    # ────────────────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self.grid_columnconfigure((0, 1), weight=1)

        self._title = ctk.CTkLabel(self, font=ctk.CTkFont(size=14, weight='bold'))
        self._title.grid(row=0, column=0, columnspan=2, sticky='w', padx=10, pady=(8, 6))

        # ── 西暦 ─────────────────────────────────────────────────────────
        self._western_label = ctk.CTkLabel(self)
        self._western_label.grid(row=1, column=0, columnspan=2, sticky='w', padx=10)
        ctk.CTkEntry(self, textvariable=self._western_var).grid(
            row=2, column=0, columnspan=2, sticky='ew', padx=10, pady=(2, 8),
        )

        # ── 和暦 ─────────────────────────────────────────────────────────
        self._japanese_label = ctk.CTkLabel(self)
        self._japanese_label.grid(row=3, column=0, columnspan=2, sticky='w', padx=10)
        self._era_menu = ctk.CTkOptionMenu(self, variable=self._era_var, values=[''])
        self._era_menu.grid(row=4, column=0, sticky='ew', padx=(10, 4), pady=(2, 8))
        ctk.CTkEntry(self, textvariable=self._era_year_var, width=80).grid(
            row=4, column=1, sticky='ew', padx=(4, 10), pady=(2, 8),
        )

        self._clear_btn = ctk.CTkButton(self, width=100, command=self.clear)
        self._clear_btn.grid(row=5, column=0, columnspan=2, padx=10, pady=4)

        self._message_label = ctk.CTkLabel(
            self, text='', text_color='#c0392b', wraplength=420, justify='left',
        )
        self._message_label.grid(row=6, column=0, columnspan=2, sticky='w', padx=10, pady=(2, 8))

    # ── 外部 API ──────────────────────────────────────────────────────────

    def set_language(self, lang: str) -> None:
        """表示言語を切り替える。選択中の元号と入力値は保持する。"""
        selected = self._selected_era()
        self._lang = lang
        self._options = {era_option_label(e, lang): e for e in self._eras}

        self._title.configure(text=t('converter_title', lang))
        self._western_label.configure(text=t('western_year_label', lang))
        self._japanese_label.configure(text=t('japanese_year_label', lang))
        self._clear_btn.configure(text=t('clear_button', lang))

        with self._converter.updating():
            self._era_menu.configure(values=list(self._options))
            self._era_var.set(era_option_label(selected or self._eras[0], lang))

        # 言語依存のメッセージを再表示する
        self._on_western_input()

    def clear(self) -> None:
        """全入力をクリアする。クリア中は変換を起動しない。"""
        with self._converter.updating():
            self._western_var.set('')
            self._era_year_var.set('')
            self._era_var.set(era_option_label(self._eras[0], self._lang))
        self._set_message('')

    # ── イベントハンドラ ──────────────────────────────────────────────────

    def _on_western_input(self) -> None:
        self._converter.western_to_era(self._western_var.get(), sink=self._show_era)

    def _on_era_input(self) -> None:
        era = self._selected_era()
        self._converter.era_to_western(
            era.name if era is not None else self._era_var.get(),
            self._era_year_var.get(),
            sink=self._show_western,
        )

    # ── 結果表示（ラッチ保持中に呼ばれる） ───────────────────────────────

    def _show_era(self, result: ConversionResult) -> None:
        if result.ok:
            self._era_var.set(era_option_label(result.value.era, self._lang))
            self._era_year_var.set(str(result.value.year))
            self._set_message(render_notice(result.notice, self._lang))
            return
        self._clear_japanese()
        self._set_message(render_error(result.error, self._lang) if result.error else '')

    def _show_western(self, result: ConversionResult) -> None:
        if result.ok:
            self._western_var.set(str(result.value))
            self._set_message(render_notice(result.notice, self._lang))
            return
        self._western_var.set('')
        self._set_message(render_error(result.error, self._lang) if result.error else '')

    def _clear_japanese(self) -> None:
        self._era_var.set(era_option_label(self._eras[0], self._lang))
        self._era_year_var.set('')

    def _selected_era(self) -> EraRecord | None:
        return self._options.get(self._era_var.get())

    def _set_message(self, text: str) -> None:
        self._message_label.configure(text=text)
