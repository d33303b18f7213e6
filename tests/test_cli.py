import argparse

import pytest

from src.cli import main, parse_overrides

ADDRESS = "1247 Maple Grove Avenue, Portland, OR 97214"


class TestParseOverrides:
    def test_percent_and_dollar_fields(self):
        parser = argparse.ArgumentParser()
        overrides = parse_overrides(["vacancy_pct=6", "monthly_rent=2900"], parser)
        assert overrides["vacancy_pct"] == pytest.approx(0.06)
        assert overrides["monthly_rent"] == 2900

    def test_missing_equals_exits(self):
        with pytest.raises(SystemExit):
            parse_overrides(["monthly_rent"], argparse.ArgumentParser())

    def test_non_number_exits(self):
        with pytest.raises(SystemExit):
            parse_overrides(["monthly_rent=lots"], argparse.ArgumentParser())


class TestMain:
    def test_all_scenarios(self, capsys):
        main([ADDRESS, "--beds", "3", "--baths", "2", "--year", "2006"])
        out = capsys.readouterr().out
        assert ADDRESS in out
        assert "Long-Term Rental" in out
        assert "Short-Term (Airbnb)" in out
        assert "Owner-Occupied" in out

    def test_single_scenario(self, capsys):
        main([ADDRESS, "--scenario", "owner"])
        out = capsys.readouterr().out
        assert "Owner-Occupied" in out
        assert "Long-Term Rental" not in out
        assert "Net Benefit vs Renting" in out

    def test_override_shown(self, capsys):
        main([ADDRESS, "--scenario", "rental", "--set", "purchase_price=500000"])
        assert "$500,000" in capsys.readouterr().out

    def test_unknown_field_exits(self):
        with pytest.raises(SystemExit):
            main([ADDRESS, "--set", "hold_years=7"])

    def test_fraction_out_of_range_exits(self):
        with pytest.raises(SystemExit):
            main([ADDRESS, "--set", "vacancy_pct=150"])

    def test_bad_scenario_exits(self):
        with pytest.raises(SystemExit):
            main([ADDRESS, "--scenario", "flip"])
