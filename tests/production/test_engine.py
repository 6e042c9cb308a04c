from __future__ import annotations

import pytest

from hexfactory.grid import HexCoord, HexGrid
from hexfactory.production.catalog import RecipeCatalog
from hexfactory.production.engine import ProductionEngine, TickResult
from hexfactory.production.factories import Factory
from hexfactory.production.ledger import ResourceLedger
from hexfactory.production.loader import DEFAULT_RECIPES
from hexfactory.shared.enums import STAGE_SEQUENCE, ProductionStage
from hexfactory.shared.errors import AlreadyPlacedError


def _engine(stock: dict[str, int] | None = None) -> ProductionEngine:
    return ProductionEngine(
        HexGrid(),
        RecipeCatalog.build(DEFAULT_RECIPES),
        ledger=ResourceLedger(stock),
    )


def test_mine_feeds_smelter_across_ticks() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.mine("iron_ore"))
    engine.grid.place(HexCoord(1, 0), Factory.smelter("iron_ingot"))

    observed = []
    for _ in range(3):
        engine.advance(4.0)
        ledger = engine.ledger
        observed.append((ledger.quantity("iron_ore"), ledger.quantity("iron_ingot")))

    assert observed == [(1, 0), (1, 1), (1, 2)]
    assert engine.tick_index == 3


def test_first_tick_reports_starved_smelter() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.mine("iron_ore"))
    engine.grid.place(HexCoord(1, 0), Factory.smelter("iron_ingot"))

    result = engine.advance(4.0)

    assert result.tick_index == 0
    assert result.ledger == {"iron_ore": 1}
    assert len(result.starved) == 1
    starved = result.starved[0]
    assert starved.coordinate == HexCoord(1, 0)
    assert starved.recipe_id == "iron_ingot"
    assert starved.missing == {"iron_ore": 1}


def test_starvation_leaves_ledger_and_progress_untouched() -> None:
    engine = _engine({"copper_ingot": 1})
    assembler = Factory.basic_assembler("circuit")
    engine.grid.place(HexCoord(0, 0), assembler)

    result = engine.advance(3.0)

    assert result.ledger == {"copper_ingot": 1}
    assert result.starved[0].missing == {"gear": 1}
    assert assembler.progress == pytest.approx(1.0)

    engine.advance(3.0)
    assert assembler.progress == pytest.approx(2.0)
    assert engine.ledger.quantity("copper_ingot") == 1


def test_assembler_consumes_both_inputs() -> None:
    engine = _engine({"copper_ingot": 1, "gear": 1})
    engine.grid.place(HexCoord(0, 0), Factory.basic_assembler("circuit"))

    result = engine.advance(3.0)

    assert result.starved == ()
    assert result.ledger == {"copper_ingot": 0, "gear": 0, "circuit": 1}


def test_row_major_order_decides_contention() -> None:
    engine = _engine({"iron_ore": 1})
    first = Factory.smelter("iron_ingot")
    second = Factory.smelter("iron_ingot")
    engine.grid.place(HexCoord(0, 1), second)
    engine.grid.place(HexCoord(1, 0), first)

    result = engine.advance(4.0)

    assert engine.ledger.quantity("iron_ingot") == 1
    assert [s.coordinate for s in result.starved] == [HexCoord(0, 1)]
    assert first.progress == 0.0
    assert second.progress == pytest.approx(1.0)


def test_partial_progress_does_not_craft() -> None:
    engine = _engine()
    mine = Factory.mine("stone")
    engine.grid.place(HexCoord(0, 0), mine)

    engine.advance(2.0)
    assert engine.ledger_snapshot() == {}
    assert mine.progress == pytest.approx(0.5)

    engine.advance(2.0)
    assert engine.ledger.quantity("stone") == 1


def test_mine_without_recipe_is_idle() -> None:
    engine = _engine()
    mine = Factory.mine()
    engine.grid.place(HexCoord(0, 0), mine)

    result = engine.advance(4.0)

    assert result.ledger == {}
    assert result.starved == ()
    assert mine.progress == pytest.approx(1.0)
    assert [e.event_type for e in result.log.events()] == ["factory_idle"]


def test_unknown_product_is_idle() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.smelter("gold_ingot"))

    result = engine.advance(4.0)

    assert result.log.events()[0].event_type == "factory_idle"


def test_negative_delta_is_rejected() -> None:
    engine = _engine()
    with pytest.raises(ValueError, match="non-negative"):
        engine.advance(-1.0)
    assert engine.tick_index == 0


def test_zero_delta_changes_nothing() -> None:
    engine = _engine()
    mine = Factory.mine("iron_ore")
    engine.grid.place(HexCoord(0, 0), mine)

    result = engine.advance(0.0)

    assert result.ledger == {}
    assert mine.progress == 0.0
    assert engine.tick_index == 1


def test_tick_log_follows_stage_order() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.mine("iron_ore"))
    engine.grid.place(HexCoord(1, 0), Factory.smelter("iron_ingot"))

    result = engine.advance(4.0)

    assert tuple(log.stage for log in result.log.stages) == STAGE_SEQUENCE
    extraction, conversion, assembly = result.log.stages
    assert [e.event_type for e in extraction.events] == ["factory_crafted"]
    assert [e.event_type for e in conversion.events] == ["factory_starved"]
    assert assembly.events == ()
    assert extraction.events[0].stage is ProductionStage.EXTRACTION
    assert extraction.events[0].coordinate == (0, 0)


def test_observers_receive_every_tick() -> None:
    engine = _engine()
    received: list[TickResult] = []
    engine.subscribe(received.append)

    engine.advance(1.0)
    engine.advance(1.0)
    engine.unsubscribe(received.append)
    engine.advance(1.0)

    assert [result.tick_index for result in received] == [0, 1]


def test_snapshot_is_isolated_from_later_ticks() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.mine("iron_ore"))
    engine.advance(4.0)
    snapshot = engine.ledger_snapshot()

    engine.advance(4.0)

    assert snapshot["iron_ore"] == 1
    assert engine.ledger.quantity("iron_ore") == 2


def test_reload_catalog_replaces_recipes() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.mine("iron_ore"))
    engine.reload_catalog(RecipeCatalog.build([]))

    result = engine.advance(4.0)

    assert result.ledger == {}
    assert result.log.events()[0].event_type == "factory_idle"


def test_occupancy_queries() -> None:
    engine = _engine()
    engine.grid.place(HexCoord(0, 0), Factory.mine("iron_ore"))
    engine.grid.place(HexCoord(1, 0), Factory.smelter("iron_ingot"))
    engine.grid.place(HexCoord(3, 3), Factory.mine("stone"))

    info = engine.occupancy_at(HexCoord(1, 0))
    assert info is not None
    assert info.product == "iron_ingot"
    assert engine.occupancy_at(HexCoord(5, 5)) is None
    assert [n.coordinate for n in engine.neighbors_of(HexCoord(0, 0))] == [
        HexCoord(1, 0)
    ]


def test_starved_converter_never_touches_ledger() -> None:
    engine = _engine({"copper_ore": 2})
    engine.grid.place(HexCoord(0, 0), Factory.smelter("iron_ingot"))

    for _ in range(5):
        result = engine.advance(4.0)
        assert result.ledger == {"copper_ore": 2}
        assert len(result.starved) == 1


def test_factory_placed_once_advances_at_its_own_rate() -> None:
    engine = _engine()
    mine = Factory.mine("iron_ore")
    engine.grid.place(HexCoord(0, 0), mine)
    with pytest.raises(AlreadyPlacedError):
        engine.grid.place(HexCoord(5, 5), mine)

    engine.advance(2.0)

    assert engine.ledger.quantity("iron_ore") == 0
    assert mine.progress == pytest.approx(0.5)


@pytest.mark.parametrize("delta_time", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_delta_is_rejected(delta_time: float) -> None:
    engine = _engine()
    mine = Factory.mine("iron_ore")
    engine.grid.place(HexCoord(0, 0), mine)

    with pytest.raises(ValueError, match="finite and non-negative"):
        engine.advance(delta_time)

    assert engine.tick_index == 0
    assert mine.progress == 0.0
    assert engine.ledger_snapshot() == {}
