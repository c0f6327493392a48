from dateutil.parser import isoparse
from rest_framework import serializers
from rest_framework.settings import ISO_8601

from .models import MAX_USER_ID, Transaction

DATE_FORMAT = '%d-%m-%Y'


class TransactionDateField(serializers.DateField):
    """
    Accepts DD-MM-YYYY or any ISO-8601 date/date-time string and renders
    DD-MM-YYYY. Date-times are truncated to their calendar date.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('format', DATE_FORMAT)
        kwargs.setdefault('input_formats', [DATE_FORMAT, ISO_8601])
        super().__init__(**kwargs)

    def to_internal_value(self, value):
        try:
            return super().to_internal_value(value)
        except serializers.ValidationError:
            if not isinstance(value, str):
                raise

        try:
            return isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            self.fail('invalid', format='DD-MM-YYYY, ISO-8601')


class TransactionSerializer(serializers.ModelSerializer):
    date = TransactionDateField()
    userId = serializers.IntegerField(source='user_id', min_value=1, max_value=MAX_USER_ID)

    class Meta:
        model = Transaction
        fields = ['id', 'date', 'type', 'amount', 'category', 'userId']
        read_only_fields = ['id']
        extra_kwargs = {'category': {'trim_whitespace': False}}
