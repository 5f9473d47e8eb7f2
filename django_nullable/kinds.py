""" Classify field values as empty or not """
from enum import Enum

from django.db import models


__all__ = ['FieldKind', 'is_empty', 'is_structured_field', 'COLLECTION_TYPES']


# Python types that are treated as collections when deciding emptiness
COLLECTION_TYPES = (dict, list, tuple, set, frozenset)


class FieldKind(Enum):
    """ The shape of an in-memory value, each with its own emptiness rule """
    TEXT = 'text'
    COLLECTION = 'collection'
    SCALAR = 'scalar'

    @classmethod
    def of_value(cls, value):
        """ Kind of an in-memory value, which may not match its field before clean() """
        if isinstance(value, (str, bytes, bytearray)):
            return cls.TEXT
        if isinstance(value, COLLECTION_TYPES):
            return cls.COLLECTION
        return cls.SCALAR

    def is_empty(self, value):
        return _predicates[self](value)


def _text_is_empty(value):
    return not value.strip()


def _collection_is_empty(value):
    return len(value) == 0


def _scalar_is_empty(value):
    # Numbers, booleans, dates and the like always carry a value
    return value is None


_predicates = {
    FieldKind.TEXT: _text_is_empty,
    FieldKind.COLLECTION: _collection_is_empty,
    FieldKind.SCALAR: _scalar_is_empty,
}


def is_structured_field(field):
    """ Whether a model field holds JSON structures """
    return isinstance(field, models.JSONField)


def is_empty(value):
    """ True for None, blank or whitespace-only text, and empty collections """
    return FieldKind.of_value(value).is_empty(value)
