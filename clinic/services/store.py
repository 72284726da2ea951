"""
Durable keyed record store.

A :class:`RecordStore` wraps one model class and exposes the small
keyed-collection interface the services rely on.  Each model's table is
the store's namespace; identifiers are never looked up across stores.
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from django.db import models, transaction
from django.db.models import Max

V = TypeVar('V', bound=models.Model)


class RecordStore(Generic[V]):
    def __init__(self, model: type[V]):
        self.model = model

    @property
    def namespace(self) -> str:
        return self.model._meta.db_table

    @transaction.atomic
    def insert(self, key: str, value: V) -> V:
        """Insert or overwrite ``value`` under ``key``.

        New keys are appended at the end of the store; overwriting keeps
        the record's original position.
        """
        value.pk = key
        existing_seq = (
            self.model.objects.filter(pk=key).values_list('seq', flat=True).first()
        )
        if existing_seq is None:
            last = self.model.objects.aggregate(last=Max('seq'))['last'] or 0
            value.seq = last + 1
            value.save(force_insert=True)
        else:
            value.seq = existing_seq
            value.save(force_update=True)
        return value

    def get(self, key: str) -> Optional[V]:
        return self.model.objects.filter(pk=key).first()

    def remove(self, key: str) -> None:
        self.model.objects.filter(pk=key).delete()

    def values(self) -> list[V]:
        return list(self.model.objects.order_by('seq'))

    def __len__(self) -> int:
        return self.model.objects.count()

    def __contains__(self, key: object) -> bool:
        return self.model.objects.filter(pk=key).exists()

    def __repr__(self) -> str:
        return f"RecordStore({self.namespace})"
