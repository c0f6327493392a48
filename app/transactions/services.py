import logging

from .filters import build_transaction_filter
from .models import Transaction
from .validators import validate_transaction

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Validation, filtering and CRUD orchestration for transactions.

    All persistence goes through the injected store; errors are raised as
    the types in ``transactions.errors`` and left to the caller to render.
    """

    def __init__(self, store):
        self.store = store

    def create(self, payload):
        fields = validate_transaction(payload)
        transaction = self.store.create(fields)
        logger.info("Created transaction %s for user %s", transaction.pk, transaction.user_id)
        return transaction

    def list(self, user_id=None, type=None, category=None):
        predicate = build_transaction_filter(user_id=user_id, type=type, category=category)
        return self.store.find_many(predicate)

    def list_spent(self, user_id=None):
        return self.list(user_id=user_id, type=Transaction.SPENT)

    def list_receive(self, user_id=None):
        return self.list(user_id=user_id, type=Transaction.RECEIVE)

    def list_by_category(self, category, user_id=None):
        return self.list(user_id=user_id, category=category)

    def update(self, pk, payload, user_id=None):
        fields = validate_transaction(payload)
        scope = self._scope(user_id)
        transaction = self.store.update(pk, fields, scope=scope)
        logger.info("Updated transaction %s", pk)
        return transaction

    def delete(self, pk, user_id=None):
        scope = self._scope(user_id)
        self.store.delete(pk, scope=scope)
        logger.info("Deleted transaction %s", pk)
        return {"message": "Transaction deleted"}

    @staticmethod
    def _scope(user_id):
        if user_id is None:
            return None
        predicate = build_transaction_filter(user_id=user_id)
        # blank userId parses to "no constraint"
        return predicate or None
