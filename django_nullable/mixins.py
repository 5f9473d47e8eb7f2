""" Model mixin that saves empty nullable fields as NULL """
import inspect
import json
import logging

from django.core import checks
from django.core.exceptions import FieldDoesNotExist
from django.db.models.fields.related_descriptors import ForeignKeyDeferredAttribute
from django.db.models.signals import class_prepared, pre_save
from django.dispatch import receiver

from .kinds import is_empty, is_structured_field


__all__ = [
    'NullableFieldsMixin',
    'normalize_nullable_fields',
]

logger = logging.getLogger(__name__)


class NullableFieldsMixin:
    """ Mixin first to a Model to store empty values of nullable fields as NULL

        Declare the fields with nullable_fields, by name or attname:

            class Person(NullableFieldsMixin, models.Model):
                nullable_fields = ('middle_name', 'tags')

        Each concrete model is hooked to pre_save when prepared, so every
        save() replaces blank text, whitespace-only text, empty collections and
        empty JSON values in those fields with None.
    """
    nullable_fields = None

    @classmethod
    def check(cls, **kwargs):
        errors = super().check(**kwargs)
        errors.extend(cls._check_nullable_fields())
        return errors

    @classmethod
    def _check_nullable_fields(cls):
        nullable = cls.nullable_fields
        if not nullable:
            return []
        if (not isinstance(nullable, (list, tuple, set, frozenset))
                or not all(isinstance(name, str) for name in nullable)):
            return [
                checks.Error(
                    "'nullable_fields' must be a list, tuple or set of field names.",
                    obj=cls,
                    id='django_nullable.E001')]

        errors = []
        for name in nullable:
            try:
                field = cls._meta.get_field(name)
            except FieldDoesNotExist:
                field = None
            if field is None or field not in cls._meta.concrete_fields:
                errors.append(checks.Error(
                    "'nullable_fields' refers to '{name}', which is not a concrete field of '{model}'.".format(
                        name=name, model=cls._meta.label),
                    obj=cls,
                    id='django_nullable.E002'))
            elif not field.null:
                errors.append(checks.Warning(
                    "Nullable field '{name}' is declared with null=False.".format(name=name),
                    hint='Set null=True on the field, or saving an empty value will fail.',
                    obj=cls,
                    id='django_nullable.W001'))
        return errors

    def get_attributes(self):
        """ Loaded values of concrete fields, keyed by attname """
        # Deferred fields are absent from __dict__ until fetched
        return {
            field.attname: self.__dict__[field.attname]
            for field in self._meta.concrete_fields
            if field.attname in self.__dict__}

    def set_nullable_fields(self):
        """ Set empty nullable fields to None """
        for attname, value in self.nullable_from_dict(self.get_attributes()).items():
            new_value = self.null_if_empty(value, attname)
            if new_value is None and value is not None:
                logger.debug('Setting empty {model}.{attname} to None'.format(
                    model=self._meta.label, attname=attname))
            # Write past any descriptor so custom setters do not see the None
            self.__dict__[attname] = new_value

    def null_if_empty(self, value, key=None):
        """ Return None if value is empty, otherwise the (decoded) value
            * value :: Candidate value
            * key :: Field name or attname the value belongs to, if any
        """
        if key is not None and self.is_json_castable(key) and not self.has_set_mutator(key):
            value = self.from_json(value, key)
        return None if is_empty(value) else value

    def nullable_from_dict(self, attributes):
        """ Subset of attributes that are declared nullable """
        nullable = self.nullable_fields
        if not isinstance(nullable, (list, tuple, set, frozenset)) or not nullable:
            # Assume no fields are nullable
            return {}
        attnames = {self._attname_for(name) for name in nullable}
        return {key: value for key, value in attributes.items() if key in attnames}

    def is_json_castable(self, key):
        """ Whether the field holds a JSON encoded structure """
        field = self._field_for(key)
        return field is not None and is_structured_field(field)

    def has_set_mutator(self, key):
        """ Whether a custom setter manages assignment to the field """
        descriptor = inspect.getattr_static(type(self), self._attname_for(key), None)
        # Django's own foreign key attname descriptor only clears a cache on set
        if descriptor is None or isinstance(descriptor, ForeignKeyDeferredAttribute):
            return False
        return hasattr(type(descriptor), '__set__')

    def from_json(self, value, key=None):
        """ Decoded form of a JSON value
            A model JSONField keeps its value decoded in memory, so only bytes
            are decoded for it, with the field's decoder. Text for keys that
            are not model fields is decoded with json. Undecodable input gives None
        """
        field = self._field_for(key) if key is not None else None
        if isinstance(value, str):
            if field is not None:
                return value
        elif not isinstance(value, (bytes, bytearray)):
            return value
        try:
            return json.loads(value, cls=getattr(field, 'decoder', None))
        except (TypeError, ValueError):
            return None

    def _field_for(self, key):
        try:
            return self._meta.get_field(key)
        except FieldDoesNotExist:
            return None

    def _attname_for(self, name):
        return getattr(self._field_for(name), 'attname', name)


def normalize_nullable_fields(*instances):
    """ Apply the pre_save normalization explicitly, such as before bulk_create() """
    for instance in instances:
        if not isinstance(instance, NullableFieldsMixin):
            raise TypeError('{cls} does not use NullableFieldsMixin'.format(cls=instance.__class__.__name__))
        instance.set_nullable_fields()


def set_nullable_fields_on_save(sender, instance, **kwargs):
    instance.set_nullable_fields()


@receiver(class_prepared)
def register_nullable_model(sender, **kwargs):
    """ Hook each prepared model using the mixin to pre_save, once per class """
    if not issubclass(sender, NullableFieldsMixin):
        return
    pre_save.connect(
        set_nullable_fields_on_save,
        sender=sender,
        dispatch_uid='django_nullable.{label}'.format(label=sender._meta.label))
    logger.debug('Registered nullable fields for {model}'.format(model=sender._meta.label))
