"""
Tests for notification sinks
"""

from rocketshoes_cart.connectors.notifications.sinks import FanoutSink, LogNotificationSink, ToastBuffer
from rocketshoes_cart.ports.interfaces import Severity

from conftest import RecordingSink


def test_toast_buffer_drains_once():
    buffer = ToastBuffer()
    buffer.notify("Adicionado", Severity.INFO)
    buffer.notify("Erro na remoção do produto", Severity.ERROR)

    assert buffer.drain() == [
        {"message": "Adicionado", "severity": "info"},
        {"message": "Erro na remoção do produto", "severity": "error"},
    ]
    assert buffer.drain() == []


def test_fanout_reaches_every_sink():
    first, second = RecordingSink(), RecordingSink()

    FanoutSink(LogNotificationSink(), first, second).notify("Adicionado", Severity.INFO)

    assert first.toasts == second.toasts == [("Adicionado", Severity.INFO)]
