"""Tests for GameEvents dispatch."""

import pytest

from gambit.core.enums import Color
from gambit.core.types import E2, E4
from gambit.game.events import (
    Deselected,
    GameEvents,
    MoveCommitted,
    MoveRejected,
    PromotionPending,
    RejectReason,
    Selected,
)


class TestGameEvents:
    def test_specific_handler_then_catch_all(self) -> None:
        events = GameEvents()
        calls: list[str] = []
        events.on_any.append(lambda e: calls.append("any"))
        events.on_selected.append(lambda e: calls.append("selected"))
        events.emit(Selected(E2))
        assert calls == ["selected", "any"]

    def test_multiple_handlers(self) -> None:
        events = GameEvents()
        a: list = []
        b: list = []
        events.on_move_committed.append(a.append)
        events.on_move_committed.append(b.append)
        events.emit(MoveCommitted(E2, E4))
        assert a == b == [MoveCommitted(E2, E4)]

    def test_routing(self) -> None:
        events = GameEvents()
        deselected: list = []
        rejected: list = []
        pending: list = []
        events.on_deselected.append(deselected.append)
        events.on_move_rejected.append(rejected.append)
        events.on_promotion_pending.append(pending.append)
        events.emit(Deselected())
        events.emit(MoveRejected(E2, E4, RejectReason.BAD_SHAPE))
        events.emit(PromotionPending(E4, Color.WHITE))
        assert deselected == [Deselected()]
        assert rejected == [MoveRejected(E2, E4, RejectReason.BAD_SHAPE)]
        assert pending == [PromotionPending(E4, Color.WHITE)]

    def test_no_handlers(self) -> None:
        GameEvents().emit(Selected(E2))

    def test_unknown_event(self) -> None:
        with pytest.raises(TypeError):
            GameEvents().emit(object())  # type: ignore[arg-type]
