"""
Base service classes.
Services hold the record store operations and use repositories for data access.
"""
from datetime import datetime
from typing import Any, Optional, Sequence
from django.utils import timezone
import logging

from core.exceptions import BaseApplicationException, InternalError, NotFoundError
from core.repositories import BaseRepository

logger = logging.getLogger(__name__)


def is_unset_timestamp(value) -> bool:
    """
    A timestamp counts as unset when it is missing or carries the zero
    date (0001-01-01T00:00:00) that clients send for "no value".
    """
    if value is None:
        return True
    return value.replace(tzinfo=None) == datetime.min


class BaseService:
    """
    Base service class providing common functionality.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self, operation: str, func, *args, **kwargs):
        """
        Run func, letting application errors through and turning anything
        else into an InternalError that keeps the original message.
        """
        try:
            return func(*args, **kwargs)
        except BaseApplicationException:
            raise
        except Exception as e:
            self.log_error(f"{operation} failed", error=e)
            raise InternalError(message=str(e)) from e

    def log_info(self, message: str, **context):
        """Log info message with context"""
        self.logger.info(f"{message} | Context: {context}")

    def log_error(self, message: str, error: Exception = None, **context):
        """Log error message with context"""
        if error:
            self.logger.error(f"{message} | Context: {context}", exc_info=error)
        else:
            self.logger.error(f"{message} | Context: {context}")


class RecordStoreService(BaseService):
    """
    Generic record store: List / Get / Create / Delete over one model.

    One instance exists per entity kind. Records are never updated; the only
    way to change the collection is to create or delete a record.

    Args:
        model: Django model backing the store
        ordering: order_by() fields used by list()
        timestamp_field: model field filled with the current time on create
            when the payload leaves it unset
        not_found_message: message for unknown ids, formatted with ``id``
    """

    def __init__(
        self,
        model,
        ordering: Optional[Sequence[str]] = None,
        timestamp_field: Optional[str] = None,
        not_found_message: Optional[str] = None,
    ):
        super().__init__()
        self.model = model
        self.repository = BaseRepository(model, ordering)
        self.timestamp_field = timestamp_field
        self.not_found_message = not_found_message or (
            f"{model._meta.verbose_name.capitalize()} com ID {{id}} não encontrado."
        )
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    @property
    def name(self) -> str:
        return self.model.__name__

    def list(self) -> list:
        """All records, in the store ordering"""
        return self.execute('list', lambda: list(self.repository.get_all()))

    def get(self, id: int):
        """
        Get one record.

        Raises:
            NotFoundError: If no record has this id
            InternalError: On any storage failure
        """
        return self.execute('get', self._get_or_raise, id)

    def create(self, data: dict[str, Any]):
        """
        Persist a new record from validated field values.

        The id is always assigned by the database. The timestamp field, if the
        kind has one, is set to now when the payload leaves it unset; a
        provided value is kept as is.
        """
        return self.execute('create', self._create, dict(data))

    def delete(self, id: int) -> None:
        """
        Remove one record.

        Raises:
            NotFoundError: If no record has this id
        """
        self.execute('delete', self._delete, id)

    def _get_or_raise(self, id: int):
        instance = self.repository.get_by_id(id)
        if instance is None:
            self.logger.warning(f"{self.name} #{id} not found")
            raise NotFoundError(
                resource_type=self.name,
                resource_id=id,
                message=self.not_found_message.format(id=id),
            )
        return instance

    def _create(self, data: dict[str, Any]):
        data.pop('id', None)
        if self.timestamp_field and is_unset_timestamp(data.get(self.timestamp_field)):
            data[self.timestamp_field] = timezone.now()

        instance = self.repository.create(**data)
        self.log_info(f"{self.name} created", id=instance.pk)
        return instance

    def _delete(self, id: int) -> None:
        instance = self._get_or_raise(id)
        self.repository.delete(instance)
        self.log_info(f"{self.name} deleted", id=id)
