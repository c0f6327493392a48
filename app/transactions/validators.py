"""Request validation for transaction payloads."""

from .errors import ValidationError
from .models import MAX_USER_ID, Transaction
from .serializers import TransactionSerializer

REQUIRED_FIELDS = ('date', 'type', 'amount', 'category', 'userId')
TRANSACTION_TYPES = (Transaction.SPENT, Transaction.RECEIVE)

FIELD_ERROR_MESSAGES = {
    'date': "Invalid date format",
    'type': "Invalid transaction type",
    'amount': "Invalid amount",
    'category': "Invalid category",
    'userId': "Invalid userId",
}


def validate_transaction(payload):
    """
    Validate a create or update payload and return the normalized fields,
    keyed by model field name.

    Raises ValidationError before anything touches storage.
    """
    if not hasattr(payload, 'get'):
        raise ValidationError("Request body must be a JSON object")

    # Falsy values (0, "", null, false) count as missing
    if not all(payload.get(field) for field in REQUIRED_FIELDS):
        raise ValidationError("All fields are required")

    if payload.get('type') not in TRANSACTION_TYPES:
        raise ValidationError("Invalid transaction type")

    serializer = TransactionSerializer(data={field: payload.get(field) for field in REQUIRED_FIELDS})
    if not serializer.is_valid():
        field = next(iter(serializer.errors))
        raise ValidationError(FIELD_ERROR_MESSAGES.get(field, "Invalid data"))
    return dict(serializer.validated_data)


def parse_user_id(value):
    """Parse a userId query/path value; None or blank means no constraint."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("Invalid userId")
    if not isinstance(value, int):
        value = str(value).strip()
        if not value:
            return None
        if not (value.isascii() and value.isdigit()):
            raise ValidationError("Invalid userId")
        value = int(value)

    if value < 0 or value > MAX_USER_ID:
        raise ValidationError("Invalid userId")
    return value
