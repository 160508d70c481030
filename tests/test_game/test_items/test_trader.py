import random

import pytest
from wss_game.components.supplies import Supplies
from wss_game.items import (
    EffectContext,
    Item,
    ItemEvent,
    TradeOffer,
    TradeOutcome,
    Trader,
)

def test_make_offer_draw_order(scripted_rng):
    rng = scripted_rng([2, 1, 2])
    offer = Trader.make_offer(rng)

    assert offer == TradeOffer(food=2, water=1, gold_asked=3)
    assert rng.calls == [3, 3, 3]

def test_accepted_scenario(scripted_rng, event_bus, recorded):
    s = Supplies(food=0, water=0, gold=5)
    Trader().apply(s, EffectContext(rng=scripted_rng([2, 1, 2]), events=event_bus))

    assert s.snapshot() == (2, 1, 2)
    assert [e.type for e in recorded] == [ItemEvent.TRADE_OFFERED, ItemEvent.TRADE_ACCEPTED]
    assert recorded[0]["offer"] == TradeOffer(2, 1, 3)
    assert "3 gold" in recorded[0]["message"]

@pytest.mark.parametrize("gold_draw", [0, 1, 2])
def test_broke_player_always_declined(scripted_rng, event_bus, recorded, gold_draw):
    s = Supplies(food=4, water=-1, gold=0)
    Trader().apply(s, EffectContext(rng=scripted_rng([2, 2, gold_draw]), events=event_bus))

    assert s.snapshot() == (4, -1, 0)
    assert recorded[-1].type == ItemEvent.TRADE_DECLINED

@pytest.mark.parametrize("asked", [1, 2, 3])
def test_exact_gold_is_enough(asked):
    s = Supplies(gold=asked)
    outcome = Trader.settle(s, TradeOffer(food=1, water=1, gold_asked=asked))

    assert outcome is TradeOutcome.ACCEPTED
    assert s.snapshot() == (1, 1, 0)

@pytest.mark.parametrize("asked", [1, 2, 3])
def test_one_gold_short_changes_nothing(asked):
    s = Supplies(food=7, water=8, gold=asked - 1)
    outcome = Trader.settle(s, TradeOffer(food=2, water=2, gold_asked=asked))

    assert outcome is TradeOutcome.DECLINED
    assert s.snapshot() == (7, 8, asked - 1)

def test_negative_gold_declines():
    s = Supplies(gold=-3)
    assert Trader.settle(s, TradeOffer(0, 0, 1)) is TradeOutcome.DECLINED
    assert s.gold == -3

def test_zero_offer_still_costs_gold():
    s = Supplies(gold=2)
    assert Trader.settle(s, TradeOffer(0, 0, 2)) is TradeOutcome.ACCEPTED
    assert s.snapshot() == (0, 0, 0)

def test_offer_ranges_over_many_draws():
    rng = random.Random(1234)
    offers = [Trader.make_offer(rng) for _ in range(2000)]

    assert {o.food for o in offers} == {0, 1, 2}
    assert {o.water for o in offers} == {0, 1, 2}
    assert {o.gold_asked for o in offers} == {1, 2, 3}

def test_apply_with_default_context_stays_in_range():
    trader = Trader()
    for _ in range(200):
        s = Supplies(gold=10)
        trader.apply(s)
        spent = 10 - s.gold
        assert spent in (1, 2, 3)
        assert s.food in (0, 1, 2)
        assert s.water in (0, 1, 2)

def test_each_apply_draws_a_fresh_offer(scripted_rng):
    s = Supplies(gold=10)
    rng = scripted_rng([0, 0, 0, 2, 2, 2])
    trader = Trader()
    trader.apply(s, EffectContext(rng=rng))
    trader.apply(s, EffectContext(rng=rng))

    assert s.snapshot() == (2, 2, 6)
    assert rng.values == []

def test_trader_is_always_repeatable():
    trader = Trader()
    assert trader.repeatable() is True
    trader.apply(Supplies())
    assert trader.repeatable() is True
    assert isinstance(trader, Item)

def test_offer_is_frozen():
    offer = TradeOffer(1, 1, 1)
    with pytest.raises(AttributeError):
        offer.food = 2

def test_failing_subscriber_does_not_break_trade(scripted_rng, event_bus, caplog):
    def broken(event):
        raise RuntimeError("sink down")

    event_bus.subscribe_all(ItemEvent, broken)
    s = Supplies(food=0, water=0, gold=5)

    Trader().apply(s, EffectContext(rng=scripted_rng([2, 1, 2]), events=event_bus))

    assert s.snapshot() == (2, 1, 2)
    assert "Error in event handler" in caplog.text
