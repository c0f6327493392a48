"""ORM-backed storage for transactions."""

import logging

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction as db_transaction
from django.db.models import Q

from .errors import NotFoundError, PersistenceError
from .models import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """
    Thin persistence handle over the Transaction table.

    Missing rows surface as NotFoundError, every other database failure
    (including lock and statement timeouts) as PersistenceError.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _queryset(self):
        return Transaction.objects.using(self.using)

    def create(self, fields):
        try:
            return self._queryset().create(**fields)
        except (DatabaseError, OverflowError) as e:
            logger.error("Failed to create transaction: %s", e)
            raise PersistenceError("Failed to create transaction") from e

    def find_many(self, predicate=None):
        queryset = self._queryset()
        if predicate is not None:
            queryset = queryset.filter(predicate)
        try:
            return list(queryset.order_by('id'))
        except DatabaseError as e:
            logger.error("Failed to query transactions: %s", e)
            raise PersistenceError("Failed to retrieve transactions") from e

    def update(self, pk, fields, scope=None):
        lookup = self._lookup(pk, scope)
        try:
            with db_transaction.atomic(using=self.using):
                updated = self._queryset().filter(lookup).update(**fields)
                if not updated:
                    raise NotFoundError()
                return self._queryset().get(pk=pk)
        except Transaction.DoesNotExist as e:
            raise NotFoundError() from e
        except (DatabaseError, OverflowError) as e:
            logger.error("Failed to update transaction %s: %s", pk, e)
            raise PersistenceError("Failed to update transaction") from e

    def delete(self, pk, scope=None):
        lookup = self._lookup(pk, scope)
        try:
            deleted, _ = self._queryset().filter(lookup).delete()
        except DatabaseError as e:
            logger.error("Failed to delete transaction %s: %s", pk, e)
            raise PersistenceError("Failed to delete transaction") from e
        if not deleted:
            raise NotFoundError()

    @staticmethod
    def _lookup(pk, scope):
        lookup = Q(pk=pk)
        if scope is not None:
            lookup &= scope
        return lookup
