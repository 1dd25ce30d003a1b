"""utils/wareki.py のユニットテスト"""

from utils.wareki import format_era_year


class TestFormatEraYear:
    def test_first_year(self):
        assert format_era_year(1) == '元'

    def test_other_years(self):
        assert format_era_year(2) == '2'
        assert format_era_year(31) == '31'
