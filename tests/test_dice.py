"""Tests for aquaterra.dice: RandomDice and ScriptedDice."""

import pytest

from aquaterra.dice import DiceExhausted, RandomDice, ScriptedDice


class TestRandomDice:
    def test_rolls_are_inclusive_and_bounded(self) -> None:
        dice = RandomDice(seed=7)
        seen = {dice.roll(5, 8) for _ in range(500)}
        assert seen == {5, 6, 7, 8}

    def test_same_seed_same_rolls(self) -> None:
        a, b = RandomDice(seed=42), RandomDice(seed=42)
        assert [a.roll(20, 49) for _ in range(10)] == [b.roll(20, 49) for _ in range(10)]

    def test_degenerate_range(self) -> None:
        assert RandomDice().roll(3, 3) == 3


class TestScriptedDice:
    def test_replays_in_order_and_records_ranges(self) -> None:
        dice = ScriptedDice([30, 9])
        assert dice.roll(20, 49) == 30
        assert dice.roll(5, 14) == 9
        assert dice.calls == [(20, 49), (5, 14)]
        assert dice.remaining == 0

    def test_exhausted(self) -> None:
        dice = ScriptedDice([1])
        dice.roll(1, 6)
        with pytest.raises(DiceExhausted):
            dice.roll(1, 6)
