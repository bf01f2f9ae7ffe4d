"""
Repository pattern implementation.
Abstracts data access and provides a clean interface for the record store.
"""
from typing import Generic, TypeVar, Optional, Sequence
from django.db.models import QuerySet, Model
from django.db import transaction

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Base repository providing the single-table operations a record store needs.
    Follows Repository pattern for data access abstraction.
    """

    def __init__(self, model: type[T], ordering: Optional[Sequence[str]] = None):
        self.model = model
        self.ordering = list(ordering) if ordering else ['id']

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single instance by ID, None when absent"""
        return self.model.objects.filter(pk=id).first()

    def get_all(self, **filters) -> QuerySet[T]:
        """Get all instances matching filters, in the repository ordering"""
        return self.model.objects.filter(**filters).order_by(*self.ordering)

    @transaction.atomic
    def create(self, **kwargs) -> T:
        """Create a new instance"""
        return self.model.objects.create(**kwargs)

    @transaction.atomic
    def delete(self, instance: T) -> None:
        """Delete an instance"""
        instance.delete()
