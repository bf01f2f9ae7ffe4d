"""
Serializer fields shared by the record serializers.
"""
from datetime import datetime

from django.utils.dateparse import parse_datetime
from rest_framework import serializers

from core.services import is_unset_timestamp


class RecordTimestampField(serializers.DateTimeField):
    """
    DateTimeField that reads the zero date (0001-01-01T00:00:00, with or
    without a UTC offset) as "no value", so the store fills in the current
    time. The zero date is caught before timezone conversion, which would
    overflow at year 1.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, value):
        parsed = value
        if isinstance(value, str):
            try:
                parsed = parse_datetime(value.strip())
            except ValueError:
                parsed = None

        if isinstance(parsed, datetime) and is_unset_timestamp(parsed):
            return None
        return super().to_internal_value(value)
