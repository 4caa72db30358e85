"""Errors raised while decoding SKU strings."""
from enum import Enum


class IntErrorKind(Enum):
    EMPTY = 'empty'
    INVALID_DIGIT = 'invalid digit'
    POS_OVERFLOW = 'positive overflow'
    NEG_OVERFLOW = 'negative overflow'


def get_key_name(key: str) -> str:
    return key.replace('_', ' ')


class SkuError(ValueError):
    """Base error for this package."""


class SkuFormatError(SkuError):
    """Raised when a SKU does not start with a defindex and a quality."""

    def __init__(self):
        super().__init__('Invalid SKU format. Must begin with a defindex followed by a quality e.g. "5021;6"')


class SkuIntError(SkuError):
    """Raised when the value of an attribute is not a valid integer."""

    def __init__(self, key: str, kind: IntErrorKind, value: str = ''):
        self.key = key
        self.kind = kind
        self.value = value
        super().__init__(self._get_msg())

    def _get_msg(self) -> str:
        messages = {
            IntErrorKind.EMPTY: 'is empty',
            IntErrorKind.INVALID_DIGIT: 'contains invalid digit',
            IntErrorKind.POS_OVERFLOW: 'overflows integer bounds',
            IntErrorKind.NEG_OVERFLOW: 'underflows integer bounds'
        }
        return f'Value for {get_key_name(self.key)} in SKU {messages[self.kind]}.'


class SkuValueError(SkuError):
    """Raised when an integer does not map to a known code of its attribute."""

    def __init__(self, key: str, number: int):
        self.key = key
        self.number = number
        super().__init__(f'Unknown {get_key_name(key)}: {number}')


class SkuDocumentError(SkuError):
    """Raised when a SKU embedded in a JSON or YAML document cannot be decoded."""
