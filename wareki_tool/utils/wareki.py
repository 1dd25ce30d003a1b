"""和暦の表示用ユーティリティ"""


def format_era_year(era_year: int) -> str:
    """元号内の年数を表示用にする。1 年目は「元」。"""
    return '元' if era_year == 1 else str(era_year)
