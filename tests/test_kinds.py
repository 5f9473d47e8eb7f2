from datetime import date
from decimal import Decimal
from unittest import TestCase

from django.db import models

from django_nullable import FieldKind, is_empty
from django_nullable.kinds import is_structured_field


class EncodedJSONField(models.JSONField):
    pass


class FieldKindTest(TestCase):

    def test_of_value(self):
        self.assertIs(FieldKind.of_value(''), FieldKind.TEXT)
        self.assertIs(FieldKind.of_value(b''), FieldKind.TEXT)
        self.assertIs(FieldKind.of_value([]), FieldKind.COLLECTION)
        self.assertIs(FieldKind.of_value({}), FieldKind.COLLECTION)
        self.assertIs(FieldKind.of_value(0), FieldKind.SCALAR)
        self.assertIs(FieldKind.of_value(None), FieldKind.SCALAR)

    def test_is_structured_field(self):
        self.assertTrue(is_structured_field(models.JSONField()))
        self.assertTrue(is_structured_field(EncodedJSONField()))
        self.assertFalse(is_structured_field(models.TextField()))
        self.assertFalse(is_structured_field(models.IntegerField()))


class IsEmptyTest(TestCase):

    def test_empty(self):
        for value in (None, '', '   ', '\n\t', b'', b'  ', [], {}, (), set(), frozenset()):
            with self.subTest(value=value):
                self.assertTrue(is_empty(value))

    def test_not_empty(self):
        for value in ('a', ' a ', b'a', [''], {'': None}, (None, ), 0, 0.0, False, Decimal('0'), date.today()):
            with self.subTest(value=value):
                self.assertFalse(is_empty(value))
