import weakref

import pytest

from core.events.domain_events import domain_events
from core.events.signal import Signal
from core.models import PriceSource


def test_domain_event_signal_connect_emit_disconnect():
    seen: list[str] = []

    def _handler(op: str) -> None:
        seen.append(op)

    domain_events.items_changed.connect(_handler)
    domain_events.items_changed.connect(_handler)
    domain_events.items_changed.emit("add")
    domain_events.items_changed.disconnect(_handler)
    domain_events.items_changed.emit("delete")

    assert seen == ["add"]


def test_signal_emit_prunes_dead_weak_proxies():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _Listener:
        def __call__(self, payload: str) -> None:
            seen.append(payload)

    listener = _Listener()
    signal.connect(weakref.proxy(listener))
    signal.emit("p-1")
    del listener
    signal.emit("p-2")

    assert seen == ["p-1"]
    assert len(signal) == 0


def test_signal_emit_keeps_other_errors_visible():
    signal: Signal[str] = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    with pytest.raises(RuntimeError, match="boom"):
        signal.emit("x")


def test_editor_emits_price_and_schedule_changes(services):
    editor = services["editor"]
    sources: list[PriceSource] = []
    task_counts: list[int] = []
    domain_events.price_source_changed.connect(sources.append)
    domain_events.schedule_changed.connect(task_counts.append)

    editor.add_generic("Mobilização")
    editor.toggle_price_source()
    editor.set_price_source(PriceSource.REFERENCE_B)
    editor.regenerate_schedule()

    assert sources == [PriceSource.REFERENCE_B]
    assert task_counts == [1]
