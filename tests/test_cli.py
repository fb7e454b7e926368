"""Tests for the pantry-kit command line."""

import json

import pytest

from pantry.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PANTRY_TAX_RATE", "PANTRY_CURRENCY", "PANTRY_BUDGET", "PANTRY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def shopping_list(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps({"items": [
        {"name": "Milk", "amount": "2", "price": "$3.50", "category": "Dairy"},
        {"name": "Soap", "price": "2.00", "category": "Household Items"},
    ]}))
    return path


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "pantry-kit" in capsys.readouterr().out


class TestMatch:
    def test_match(self, capsys):
        main(["match", "ground beef", "hamburger"])
        assert capsys.readouterr().out.strip() == "match"

    def test_no_match_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["match", "peanut butter", "butter"])
        assert exc.value.code == 1
        assert capsys.readouterr().out.strip() == "no match"


def test_extract(capsys):
    main(["extract", "2 cups all-purpose flour, sifted"])
    out = capsys.readouterr().out
    assert "name:       all purpose flour" in out
    assert "normalized: all purpose flour" in out


class TestBestMatch:
    def test_found(self, tmp_path, capsys):
        inventory = tmp_path / "inventory.json"
        inventory.write_text(json.dumps([
            {"name": "whole milk", "quantity": 1},
            {"name": "carrots", "quantity": 4},
        ]))
        main(["best-match", "1 cup milk", str(inventory)])
        assert json.loads(capsys.readouterr().out)["name"] == "whole milk"

    def test_not_found(self, tmp_path):
        inventory = tmp_path / "inventory.json"
        inventory.write_text(json.dumps({"items": [{"name": "carrots"}]}))
        with pytest.raises(SystemExit) as exc:
            main(["best-match", "saffron", str(inventory)])
        assert exc.value.code == 1


class TestTotals:
    def test_text_receipt(self, shopping_list, capsys):
        main(["totals", str(shopping_list), "--tax-rate", "0.1", "--taxable", "Household Items"])
        out = capsys.readouterr().out
        assert "Subtotal: $9.00" in out
        assert "Tax (10.0%): $0.20" in out
        assert "TOTAL: $9.20" in out
        assert "Category Breakdown:" in out

    def test_json_summary(self, shopping_list, capsys):
        main(["totals", str(shopping_list), "--json", "--budget", "20"])
        data = json.loads(capsys.readouterr().out)
        assert data["total"] == "$9.00"
        assert data["budget"] == "$20.00"
        assert data["budget_percent_used"] == 45

    def test_config_file(self, shopping_list, tmp_path, capsys):
        config = tmp_path / "pantry.toml"
        config.write_text('[totals]\ncurrency = "EUR"\ntax_rate = 0.2\n')
        main(["--config", str(config), "totals", str(shopping_list)])
        assert "TOTAL: €10.80" in capsys.readouterr().out

    def test_tax_rate_overrides_config_file(self, shopping_list, tmp_path, capsys):
        """--tax-rate replaces the file's rate but keeps its currency."""
        config = tmp_path / "pantry.toml"
        config.write_text('[totals]\ncurrency = "EUR"\ntax_rate = 0.2\n')
        main(["--config", str(config), "totals", str(shopping_list), "--tax-rate", "0.05"])
        out = capsys.readouterr().out
        assert "Tax (5.0%): €0.45" in out
        assert "TOTAL: €9.45" in out

    def test_invalid_json(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        with pytest.raises(SystemExit) as exc:
            main(["totals", str(bad)])
        assert exc.value.code == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["totals", str(tmp_path / "missing.json")])
        assert exc.value.code == 1


def test_prices(tmp_path, capsys):
    history = tmp_path / "history.json"
    history.write_text(json.dumps({"prices": [
        {"price": "$3.00", "store": "Aldi", "date": "2025-01-01"},
        {"price": "$5.00", "store": "Kroger", "date": "2025-01-02"},
    ]}))
    main(["prices", str(history), "--current", "2.50"])
    data = json.loads(capsys.readouterr().out)
    assert data["statistics"]["average"] == 4.0
    assert [s["store"] for s in data["stores"]] == ["Aldi", "Kroger"]
    assert data["deal"]["status"] == "excellent_deal"
    assert data["deal"]["has_deals"] is True
