from functools import partial
from typing import List, Tuple, Optional, Any, Callable, Dict

from tf2.code import is_ascii_digit, parse_i32, parse_u32, parse_code
from tf2.error import SkuError, SkuFormatError
from tf2.type.item import Quality, KillstreakTier, Wear, Sheen, Killstreaker
from tf2.type.paint import Paint
from tf2.type.sku import Sku

DELIMITER = ';'

UNKNOWN_DEFINDEX = -1
UNKNOWN_QUALITY = Quality.RARITY2

ElementParser = Callable[[str, str], Any]
OnError = Callable[[str, SkuError], None]

ELEMENT_PARSERS: Dict[str, Tuple[str, ElementParser]] = {
    'u': ('particle', parse_u32),
    'w': ('wear', partial(parse_code, Wear)),
    'n': ('craft_number', parse_u32),
    'c': ('crate_number', parse_u32),
    'p': ('paint', partial(parse_code, Paint)),
    'pk': ('skin', parse_u32),
    'kt-': ('killstreak_tier', partial(parse_code, KillstreakTier)),
    'td-': ('target_defindex', parse_u32),
    'od-': ('output_defindex', parse_u32),
    'oq-': ('output_quality', partial(parse_code, Quality)),
    'ks-': ('sheen', partial(parse_code, Sheen)),
    'ke-': ('killstreaker', partial(parse_code, Killstreaker)),
}

ELEMENT_FLAGS: Dict[str, Tuple[str, bool]] = {
    'uncraftable': ('craftable', False),
    'australium': ('australium', True),
    'strange': ('strange', True),
    'festive': ('festivized', True),
}


def tokenize(string: str) -> List[str]:
    return string.split(DELIMITER) if string else []


def split_element(element: str) -> Tuple[str, str]:
    """Split a token into its name and the trailing run of ASCII digits.

    Non-ASCII characters, including Unicode digits, end the run, so
    'u🍌122' splits into ('u🍌', '122') and never reads as a particle.
    """
    split_at = len(element)
    while split_at > 0 and is_ascii_digit(element[split_at - 1]):
        split_at -= 1

    return element[:split_at], element[split_at:]


def parse_sku_element(element: str) -> Optional[Tuple[str, Any]]:
    """Convert one attribute token into a (field, value) pair.

    Returns None for unknown attribute names.

    Raises:
        SkuIntError, SkuValueError: if a known attribute carries a bad value.
    """
    name, value = split_element(element)

    if name in ELEMENT_PARSERS:
        field, parse = ELEMENT_PARSERS[name]
        return field, parse(field, value)

    return ELEMENT_FLAGS.get(name)


def decode_strict(string: str) -> Sku:
    """Decode a SKU, failing on the first malformed attribute.

    Raises:
        SkuFormatError: if the defindex or quality is missing.
        SkuIntError, SkuValueError: if an attribute value is invalid.
    """
    tokens = tokenize(string)
    if len(tokens) < 2:
        raise SkuFormatError()

    attrs = {
        'defindex': parse_i32('defindex', tokens[0]),
        'quality': parse_code(Quality, 'quality', tokens[1])
    }
    for element in tokens[2:]:
        attr = parse_sku_element(element)
        if attr:
            attrs[attr[0]] = attr[1]

    return Sku(**attrs)


def ignore_error(element: str, error: SkuError):
    pass


def apply_element(attrs: dict, element: str, on_error: OnError):
    try:
        attr = parse_sku_element(element)
    except SkuError as e:
        on_error(element, e)
        return

    if attr:
        attrs[attr[0]] = attr[1]


def decode_lossy(string: str, on_error: OnError = None) -> Sku:
    """Decode a SKU without ever failing.

    A missing or unparsable defindex becomes -1 and a missing or unparsable
    quality becomes rarity2; either token is then read as a regular attribute.
    Bad attributes are left unset. Every discarded failure is passed to
    on_error together with the token that caused it.
    """
    on_error = on_error or ignore_error
    tokens = tokenize(string)
    defindex_str, quality_str = (tokens + ['', ''])[:2]
    attrs = {}

    try:
        attrs['defindex'] = parse_i32('defindex', defindex_str)
    except SkuError as e:
        on_error(defindex_str, e)
        attrs['defindex'] = UNKNOWN_DEFINDEX
        apply_element(attrs, defindex_str, on_error)

    try:
        attrs['quality'] = parse_code(Quality, 'quality', quality_str)
    except SkuError as e:
        on_error(quality_str, e)
        attrs['quality'] = UNKNOWN_QUALITY
        apply_element(attrs, quality_str, on_error)

    for element in tokens[2:]:
        apply_element(attrs, element, on_error)

    return Sku(**attrs)
