
"""Sinks de notificação (toasts): log estruturado e buffer para a superfície HTTP."""
from __future__ import annotations
import threading
from ...core.logging import get_logger
from ...ports.interfaces import Severity

log = get_logger()

class LogNotificationSink:
    """Emite cada toast como evento de log (uso headless/CLI)."""
    def notify(self, message: str, severity: Severity) -> None:
        if severity is Severity.ERROR:
            log.warning("toast", message=message, severity=severity.value)
        else:
            log.info("toast", message=message, severity=severity.value)

class ToastBuffer:
    """Acumula toasts até a camada de UI drená-los (ex: ao fim de uma request)."""
    def __init__(self):
        self._items: list[dict] = []
        self._mutex = threading.Lock()

    def notify(self, message: str, severity: Severity) -> None:
        with self._mutex:
            self._items.append({"message": message, "severity": severity.value})

    def drain(self) -> list[dict]:
        with self._mutex:
            items, self._items = self._items, []
        return items

class FanoutSink:
    """Repassa a notificação para vários sinks."""
    def __init__(self, *sinks):
        self.sinks = sinks

    def notify(self, message: str, severity: Severity) -> None:
        for s in self.sinks:
            s.notify(message, severity)
