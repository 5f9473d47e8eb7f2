from django.db import models

from ..kinds import is_empty


class NullCharField(models.CharField):
    """ CharField that stores blank and whitespace-only values as NULL """
    description = "String (up to %(max_length)s), with blanks stored as NULL"

    def __init__(self, *args, null=True, blank=True, **kwargs):
        if not null or not blank:
            raise ValueError('NullCharField cannot have null or blank settings turned off')

        super().__init__(*args, null=null, blank=blank, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        # Always on, so not part of the definition
        kwargs.pop('null', None)
        kwargs.pop('blank', None)
        return name, path, args, kwargs

    def pre_save(self, instance, add):
        value = super().pre_save(instance, add)
        if is_empty(value):
            setattr(instance, self.attname, None)
            return None
        return value

    def to_python(self, value):
        value = super().to_python(value)
        if is_empty(value):
            return None
        return value
