"""Filter registry."""

from typing import Type

from .base import BaseFilter

# Filter classes by filter id
filter_registry: dict[str, Type[BaseFilter]] = {}


def register_filter(filter_id: str):
    """Class decorator registering a filter under ``filter_id``.

    Sets ``filter_type`` on the class; :func:`get_filter` and
    :meth:`BaseFilter.from_dict` both resolve ids through this table.
    """

    def decorator(cls: Type[BaseFilter]):
        if filter_id in filter_registry and filter_registry[filter_id] is not cls:
            raise ValueError(f"Filter id already registered: {filter_id}")
        cls.filter_type = filter_id  # type: ignore[attr-defined]
        filter_registry[filter_id] = cls
        return cls

    return decorator


def get_filter(filter_id: str, **params) -> BaseFilter:
    """Create a registered filter by id.

    Raises:
        ValueError: If no filter is registered under ``filter_id``.
    """
    filter_cls = filter_registry.get(filter_id)
    if filter_cls is None:
        raise ValueError(f"Unknown filter type: {filter_id}")
    return filter_cls(**params)


def list_filters(category: str | None = None) -> list[str]:
    """Registered filter ids, optionally restricted to one category."""
    return sorted(
        filter_id for filter_id, filter_cls in filter_registry.items()
        if category is None or filter_cls.category == category
    )
