
"""API Flask: superfície de UI sobre o CartManager (carrinho, mutações e toasts)."""
from __future__ import annotations
import asyncio
import threading
from flask import Flask, request, jsonify
from kink import di
from ..core.di import bootstrap_di
from ..core.logging import set_trace_id, get_logger
from ..core.settings import Settings
from ..connectors.notifications.sinks import ToastBuffer
from ..domain.services.cart_manager import CartManager

log = get_logger()

# Uma operação por vez: a UI original desabilitava os botões durante a request
_ops_lock = threading.Lock()

def _cart_body(manager: CartManager) -> dict:
    return {
        "cart": [item.model_dump() for item in manager.cart],
        "amounts": {str(k): v for k, v in manager.items_amount().items()},
    }

def _int_field(body, name: str) -> int | None:
    if not isinstance(body, dict):
        return None
    value = body.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value

def create_app(settings: Settings | None = None) -> Flask:
    """Cria a app e o container de DI."""
    bootstrap_di(settings)
    app = Flask(__name__)

    def run_op(op, *args):
        """Executa a operação serializada e devolve carrinho + toasts emitidos."""
        manager = di[CartManager]
        toasts = di[ToastBuffer]
        with _ops_lock:
            toasts.drain()
            result = op(manager, *args)
            if asyncio.iscoroutine(result):
                asyncio.run(result)
            body = _cart_body(manager) | {"toasts": toasts.drain()}
        return jsonify(body)

    @app.before_request
    def _trace():
        set_trace_id(request.headers.get("X-Trace-Id"))

    @app.get("/healthz")
    def healthz():
        """Health check básico."""
        return {"ok": True}

    @app.get("/cart")
    def get_cart():
        """Carrinho atual e mapa id -> quantidade."""
        return jsonify(_cart_body(di[CartManager]))

    @app.post("/cart/items")
    def add_item():
        """Adiciona 1 unidade do produto (ou insere com amount=1)."""
        body = request.get_json(silent=True)
        product_id = _int_field(body, "product_id")
        if product_id is None:
            return {"error": "missing product_id"}, 400
        log.info("ui_add", product_id=product_id)
        return run_op(CartManager.add_product, product_id)

    @app.delete("/cart/items/<int:product_id>")
    def remove_item(product_id: int):
        log.info("ui_remove", product_id=product_id)
        return run_op(CartManager.remove_product, product_id)

    @app.patch("/cart/items/<int:product_id>")
    def update_item(product_id: int):
        """Define quantidade exata. Corpo: {"amount": int}."""
        body = request.get_json(silent=True)
        amount = _int_field(body, "amount")
        if amount is None:
            return {"error": "missing amount"}, 400
        log.info("ui_update", product_id=product_id, amount=amount)
        return run_op(CartManager.update_product_amount, product_id, amount)

    return app

def main() -> None:
    settings = Settings()
    create_app(settings).run(host=settings.host, port=settings.port, debug=settings.flask_debug)
