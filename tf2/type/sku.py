from dataclasses import dataclass, replace
from typing import Optional, List

from tf2.code import to_code
from tf2.type.item import Quality, KillstreakTier, Wear, Sheen, Killstreaker
from tf2.type.paint import Paint


@dataclass(frozen=True)
class Sku:
    # Negative for items missing from the schema e.g. "Random Craft Hat"
    defindex: int
    quality: Quality
    craftable: bool = True
    australium: bool = False
    strange: bool = False
    festivized: bool = False
    particle: Optional[int] = None
    skin: Optional[int] = None
    killstreak_tier: Optional[KillstreakTier] = None
    wear: Optional[Wear] = None
    target_defindex: Optional[int] = None
    output_defindex: Optional[int] = None
    output_quality: Optional[Quality] = None
    craft_number: Optional[int] = None
    crate_number: Optional[int] = None
    paint: Optional[Paint] = None
    sheen: Optional[Sheen] = None
    killstreaker: Optional[Killstreaker] = None

    def __str__(self) -> str:
        return format_sku(self)


def default_sku() -> Sku:
    return Sku(0, Quality.NORMAL)


def with_attributes(sku: Sku, **attrs) -> Sku:
    return replace(sku, **attrs)


def format_sku(sku: Sku) -> str:
    """Render a SKU in canonical form.

    Attributes always come out in the same order so equal SKUs produce equal
    strings. Enum attributes are written as their numeric code.
    """
    tokens: List[str] = [str(sku.defindex), str(to_code(sku.quality))]

    if sku.particle is not None:
        tokens.append(f'u{sku.particle}')
    if not sku.craftable:
        tokens.append('uncraftable')
    if sku.australium:
        tokens.append('australium')
    if sku.strange:
        tokens.append('strange')
    if sku.wear is not None:
        tokens.append(f'w{to_code(sku.wear)}')
    if sku.skin is not None:
        tokens.append(f'pk{sku.skin}')
    if sku.killstreak_tier is not None:
        tokens.append(f'kt-{to_code(sku.killstreak_tier)}')
    if sku.festivized:
        tokens.append('festive')
    if sku.crate_number is not None:
        tokens.append(f'c{sku.crate_number}')
    if sku.craft_number is not None:
        tokens.append(f'n{sku.craft_number}')
    if sku.target_defindex is not None:
        tokens.append(f'td-{sku.target_defindex}')
    if sku.output_defindex is not None:
        tokens.append(f'od-{sku.output_defindex}')
    if sku.output_quality is not None:
        tokens.append(f'oq-{to_code(sku.output_quality)}')
    if sku.paint is not None:
        tokens.append(f'p{to_code(sku.paint)}')
    if sku.sheen is not None:
        tokens.append(f'ks-{to_code(sku.sheen)}')
    if sku.killstreaker is not None:
        tokens.append(f'ke-{to_code(sku.killstreaker)}')

    return ';'.join(tokens)


def to_sku_string(sku: Sku) -> str:
    return format_sku(sku)
