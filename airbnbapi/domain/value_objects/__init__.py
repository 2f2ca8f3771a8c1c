"""Domain value objects."""

from airbnbapi.domain.value_objects.batch_operation import BatchOperation

__all__ = ["BatchOperation"]
