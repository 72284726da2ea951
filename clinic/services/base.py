from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from django.db import transaction

from clinic.results import Result, invalid_payload, not_found, ok, success_message
from clinic.serializers import describe_errors
from clinic.services.identifiers import IdentifierGenerator
from clinic.services.query import QueryEngine
from clinic.services.store import RecordStore

logger = logging.getLogger(__name__)


class EntityService:
    """Shared plumbing for the per-entity services.

    Subclasses set ``label`` (used in messages) and build on the
    validate / lookup / merge / remove helpers.  Every mutating helper
    runs inside a single transaction, so a rejected call leaves the store
    untouched.
    """
    label = 'Record'

    def __init__(self, store: RecordStore, ids: IdentifierGenerator, query: QueryEngine):
        self.store = store
        self.ids = ids
        self.query = query

    def validate(self, serializer_class, payload: Optional[Mapping[str, Any]], *, partial: bool = False):
        s = serializer_class(data=payload if payload is not None else {}, partial=partial)
        if not s.is_valid():
            text = describe_errors(s.errors)
            logger.info('%s payload rejected: %s', self.label, text)
            return None, invalid_payload(text)
        return dict(s.validated_data), None

    def missing(self, key: str) -> Result:
        return not_found(f"{self.label} with id={key} not found")

    def lookup(self, key: str) -> Result:
        record = self.store.get(key)
        if record is None:
            return self.missing(key)
        return ok(record)

    def add(self, record) -> Result:
        key = self.ids()
        self.store.insert(key, record)
        logger.info('%s created id=%s', self.label, key)
        return ok(record)

    @transaction.atomic
    def merge(self, key: str, serializer_class, payload: Optional[Mapping[str, Any]]) -> Result:
        """Shallow-merge the validated fields of ``payload`` over record ``key``."""
        record = self.store.get(key)
        if record is None:
            return self.missing(key)
        changes, error = self.validate(serializer_class, payload, partial=True)
        if error:
            return error
        for field, value in changes.items():
            setattr(record, field, value)
        self.store.insert(key, record)
        logger.info('%s updated id=%s fields=%s', self.label, key, sorted(changes))
        return ok(record)

    @transaction.atomic
    def remove(self, key: str) -> Result:
        if self.store.get(key) is None:
            return self.missing(key)
        self.store.remove(key)
        logger.info('%s deleted id=%s', self.label, key)
        return success_message(f"{self.label} with id={key} deleted successfully")
