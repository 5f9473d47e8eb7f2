from .kinds import FieldKind, is_empty
from .mixins import NullableFieldsMixin, normalize_nullable_fields
from .fields import NullCharField

__all__ = [
    'FieldKind',
    'NullCharField',
    'NullableFieldsMixin',
    'is_empty',
    'normalize_nullable_fields',
]
