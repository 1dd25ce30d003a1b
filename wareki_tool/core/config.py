"""設定ファイル（config.json）読み込み

設定は読み込みのみ。表示言語の切り替えはセッション内だけで保持し、
config.json には書き戻さない。
"""

import json
import os
import sys
from typing import Any

LANGUAGES: tuple[str, ...] = ('ja', 'en')


def _get_app_dir() -> str:
    """アプリの実行ディレクトリを返す。"""
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _get_config_path() -> str:
    """config.json の絶対パスを返す。exe / 開発どちらでも動作する。"""
    return os.path.join(_get_app_dir(), 'config.json')


def _default_config() -> dict[str, Any]:
    return {
        'app_version': '1.0.0',
        'language': 'ja',
        'log_level': 'INFO',
        'appearance': {
            'mode': 'light',
            'color_theme': 'blue',
            'geometry': '560x600',
        },
    }


def _deep_merge(base: dict, override: dict) -> dict:
    """ネストした辞書を再帰的にマージする。override が優先。"""
    result = dict(base)
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def load_config(path: str | None = None) -> dict[str, Any]:
    """config.json を読み込む。存在しない / 不正な場合はデフォルト値を返す。"""
    defaults = _default_config()
    path = path or _get_config_path()
    if not os.path.exists(path):
        return defaults
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        return defaults
    if not isinstance(data, dict):
        return defaults
    return _deep_merge(defaults, data)


def get_language(config: dict[str, Any]) -> str:
    """初期表示言語を返す。未対応の値なら 'ja'。"""
    lang = str(config.get('language', 'ja')).lower()
    return lang if lang in LANGUAGES else 'ja'
