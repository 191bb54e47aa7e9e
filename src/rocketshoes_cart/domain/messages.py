
"""Mensagens (toasts) exibidas ao usuário. Conjunto fixo, PT-BR."""
from ..ports.interfaces import Severity

OUT_OF_STOCK = "Quantidade solicitada fora de estoque"
ADD_FAILED = "Erro na adição do produto"
REMOVE_FAILED = "Erro na remoção do produto"
UPDATE_FAILED = "Erro na alteração de quantidade do produto"
ADDED = "Adicionado"

SEVERITY = {
    OUT_OF_STOCK: Severity.ERROR,
    ADD_FAILED: Severity.ERROR,
    REMOVE_FAILED: Severity.ERROR,
    UPDATE_FAILED: Severity.ERROR,
    ADDED: Severity.INFO,
}
