"""Tests for config loading and the CLI entry points."""

import argparse

import pytest

from rent_own_sim import cli, monte_carlo_cli
from rent_own_sim.config import DEFAULTS, build_household, load_config, parse_args, resolve


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "nope.toml") == {}

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("age = 40\nrent = 1800.0\n")
        assert load_config(path) == {"age": 40, "rent": 1800.0}

    def test_household_table_and_aliases(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[household]\nnetworth = 150000\ncurrent_age = 35\nmortgage_debt = 1000\n")
        raw = load_config(path)
        assert raw["savings"] == 150000
        assert raw["age"] == 35
        assert raw["mortgage"] == 1000
        assert "household" not in raw

    def test_malformed_exits(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text("age = = 3\n")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "Failed to read config file" in capsys.readouterr().err


class TestResolve:
    def test_priority(self):
        args = argparse.Namespace(age=50, rent=None, savings=None)
        r = resolve(args, {"rent": 999.0, "age": 20})
        assert r["age"] == 50            # CLI wins
        assert r["rent"] == 999.0        # config next
        assert r["savings"] == DEFAULTS["savings"]

    def test_build_household(self):
        household = build_household(dict(DEFAULTS))
        assert household.current_age == 30
        assert household.total_savings == 200000.0
        assert household.mortgage_debt == 400000.0
        assert household.mortgage_term == 30
        assert household.max_baseline_retirement_income == 3000.0

    def test_parse_args_with_config(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text("monthly_income = 8000\n")
        r, args = parse_args("test", ["--config", str(path), "--age", "45", "--seed", "3"])
        assert r["age"] == 45
        assert r["monthly_income"] == 8000
        assert args.seed == 3


class TestCli:
    def test_single_run(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        cli.main(["--seed", "1", "--every", "10"])
        out = capsys.readouterr().out
        assert "Own vs rent savings projection" in out
        assert "Age" in out
        assert "mortgage installment $2,147.29/mo" in out

    def test_equivalent_rent(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        cli.main(["--seed", "1", "--equivalent-rent"])
        assert "Rent: $" in capsys.readouterr().out

    def test_equivalent_rent_reports_depletion(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        cli.main([
            "--seed", "1", "--equivalent-rent", "--monthly-income", "1000",
            "--savings", "50000", "--home-value", "0", "--mortgage", "0",
        ])
        assert "Rent: savings depleted at age" in capsys.readouterr().out

    def test_invalid_config_exits(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            cli.main(["--min-retirement-income", "5000", "--max-retirement-income", "1000"])
        assert "min retirement income" in capsys.readouterr().err

    def test_chart(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        cli.main(["--seed", "1", "--chart", str(tmp_path / "charts"), "--name", "x"])
        assert (tmp_path / "charts" / "trajectory-x.png").exists()

    def test_monte_carlo(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        monte_carlo_cli.main(["--seed", "1", "--mc-runs", "20", "--chart", str(tmp_path)])
        out = capsys.readouterr().out
        assert "Monte Carlo final savings (N=20)" in out
        assert (tmp_path / "mc_fan.png").exists()
