
"""Bootstrap do container de DI (kink): settings, store, adapters HTTP e CartManager."""
from kink import di
from .settings import Settings
from .logging import get_logger
from .db import create_session_factory
from ..connectors.api.http_api import HttpCatalogService, HttpStockService
from ..connectors.notifications.sinks import FanoutSink, LogNotificationSink, ToastBuffer
from ..domain.services.cart_manager import CartManager
from ..repo.store import SqlPersistenceStore

def bootstrap_di(settings: Settings | None = None) -> None:
    settings = settings or Settings()
    di[Settings] = settings
    di["logger"] = get_logger(settings.log_level)
    di["session_factory"] = create_session_factory(settings.database_url, create_schema=settings.db_auto_create)
    di[SqlPersistenceStore] = SqlPersistenceStore(di["session_factory"])
    di[HttpStockService] = HttpStockService(settings)
    di[HttpCatalogService] = HttpCatalogService(settings)
    di[ToastBuffer] = ToastBuffer()
    di[CartManager] = CartManager(
        stock=di[HttpStockService],
        catalog=di[HttpCatalogService],
        store=di[SqlPersistenceStore],
        notifier=FanoutSink(LogNotificationSink(), di[ToastBuffer]),
        storage_key=settings.storage_key,
        notify_on_increment=settings.notify_on_increment,
    )
