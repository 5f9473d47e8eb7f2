from .nullcharfield import NullCharField

__all__ = [
    'NullCharField',
]
