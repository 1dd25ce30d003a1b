"""和暦・西暦変換ツール — メインウィンドウ

表示言語の切り替えはこのセッション内だけ保持する（config.json には保存しない）。
"""

from __future__ import annotations

import logging

import customtkinter as ctk

from core.config import LANGUAGES, get_language, load_config
from core.converter import Converter
from gui.frames.age_frame import AgeFrame
from gui.frames.converter_frame import ConverterFrame
from gui.messages import t

logger = logging.getLogger(__name__)

_LANGUAGE_LABELS = {'ja': '日本語', 'en': 'English'}


class App(ctk.CTk):
    """メインウィンドウ。言語状態の管理と各フレームの調整役。"""

    def __init__(self, config: dict | None = None) -> None:
        super().__init__()
        self.config_data = config if config is not None else load_config()
        appearance = self.config_data.get('appearance', {})
        ctk.set_appearance_mode(appearance.get('mode', 'light'))
        ctk.set_default_color_theme(appearance.get('color_theme', 'blue'))
        self.geometry(appearance.get('geometry', '560x600'))
        self.minsize(420, 480)

        self._lang = get_language(self.config_data)
        self._converter = Converter()
        self._lang_buttons: dict[str, ctk.CTkButton] = {}

        self._build_layout()
        self.set_language(self._lang)

    # ────────────────────────────────────────────────────────────────────────
    # レイアウト構築
    # ────────────────────────────────────────────────────────────────────────

    def _build_layout(self) -> None:
        self.grid_columnconfigure(0, weight=1)

        # ── 言語切り替え ────────────────────────────────────────────────
        header_bar = ctk.CTkFrame(self, height=36, corner_radius=0, fg_color='transparent')
        header_bar.grid(row=0, column=0, sticky='e', padx=10, pady=(8, 0))
        for i, lang in enumerate(LANGUAGES):
            btn = ctk.CTkButton(
                header_bar, text=_LANGUAGE_LABELS.get(lang, lang), width=80,
                command=lambda lang=lang: self.set_language(lang),
            )
            btn.grid(row=0, column=i, padx=(4, 0))
            self._lang_buttons[lang] = btn

        self._converter_frame = ConverterFrame(self, self._converter, self._lang)
        self._converter_frame.grid(row=1, column=0, sticky='ew', padx=10, pady=(8, 4))

        self._age_frame = AgeFrame(self, self._converter, self._lang)
        self._age_frame.grid(row=2, column=0, sticky='ew', padx=10, pady=(4, 10))

    # ── 外部 API ──────────────────────────────────────────────────────────

    def set_language(self, lang: str) -> None:
        if lang not in LANGUAGES:
            return
        logger.debug('表示言語を %s に切り替え', lang)
        self._lang = lang
        self.title(t('window_title', lang))
        for code, btn in self._lang_buttons.items():
            btn.configure(state='disabled' if code == lang else 'normal')
        self._converter_frame.set_language(lang)
        self._age_frame.set_language(lang)
