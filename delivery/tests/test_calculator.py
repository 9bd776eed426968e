"""
Tests for the interactive delivery cost calculator script.
"""

import pytest

from delivery.scripts import calculator
from delivery.enums import CargoFragility, CargoSize, Distance, DeliveryServiceWorkload


def feed_input(monkeypatch, answers):
    """Replace input() with a fixed sequence of answers."""
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestUserInput:
    """Tests for prompting and shipment construction."""

    def test_selections_map_to_members(self, monkeypatch):
        """Numbered choices follow the enum order."""
        feed_input(monkeypatch, ["2", "1", "2", "5"])
        shipment = calculator.get_user_input()
        assert shipment == {
            "distance": Distance.LESS_30_KM,
            "cargo_size": CargoSize.LARGE,
            "cargo_fragility": CargoFragility.NOT_FRAGILE,
            "workload": DeliveryServiceWorkload.LOW,
        }

    @pytest.mark.parametrize("answer", ["0", "5", "abc", ""])
    def test_invalid_selection(self, monkeypatch, answer):
        """Out of range or non-numeric choices are rejected."""
        feed_input(monkeypatch, [answer])
        with pytest.raises(ValueError, match="Invalid selection"):
            calculator.choose("Distance", calculator.DISTANCE_LABELS)

    def test_shipment_df_uses_values(self):
        """The DataFrame holds plain string values."""
        df = calculator.create_shipment_df({
            "distance": Distance.LESS_2_KM,
            "cargo_size": CargoSize.SMALL,
            "cargo_fragility": CargoFragility.FRAGILE,
            "workload": DeliveryServiceWorkload.HIGH,
        })
        assert df.row(0) == ("less_2km", "small", "fragile", "high")


class TestMain:
    """End-to-end runs of the calculator."""

    def test_prints_total(self, monkeypatch, capsys):
        """Less than 30 km, large, fragile, very high: 1120.00."""
        feed_input(monkeypatch, ["2", "1", "1", "1"])
        calculator.main()
        out = capsys.readouterr().out
        assert "TOTAL:" in out
        assert "1120.00" in out

    def test_prints_minimum_price(self, monkeypatch, capsys):
        """Short small shipment shows the floor line."""
        feed_input(monkeypatch, ["4", "2", "2", "5"])
        calculator.main()
        out = capsys.readouterr().out
        assert "Minimum price:" in out
        assert "400.00" in out

    def test_forbidden_prints_reason(self, monkeypatch, capsys):
        """Fragile over 30 km prints the refusal instead of a price."""
        feed_input(monkeypatch, ["1", "2", "1", "5"])
        calculator.main()
        out = capsys.readouterr().out
        assert "not possible" in out
        assert "TOTAL:" not in out
