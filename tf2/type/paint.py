from enum import IntEnum


class Paint(IntEnum):
    """Paint cans keyed by the decimal RGB value the game stores for them."""
    INDUBITABLY_GREEN = 7511618
    ZEPHENIAHS_GREED = 4345659
    NOBLE_HATTERS_VIOLET = 5322826
    COLOR_NO_216_190_216 = 14204632
    A_DEEP_COMMITMENT_TO_PURPLE = 8208497
    MANN_CO_ORANGE = 13595446
    MUSKELMANNBRAUN = 10843461
    PECULIARLY_DRAB_TINCTURE = 12955537
    RADIGAN_CONAGHER_BROWN = 6901050
    YE_OLDE_RUSTIC_COLOUR = 8154199
    AUSTRALIUM_GOLD = 15185211
    AGED_MOUSTACHE_GREY = 8289918
    AN_EXTRAORDINARY_ABUNDANCE_OF_TINGE = 15132390
    A_DISTINCTIVE_LACK_OF_HUE = 1315860
    TEAM_SPIRIT = 12073019
    OPERATORS_OVERALLS = 4732984
    WATERLOGGED_LAB_COAT = 11049612
    BALACLAVAS_ARE_FOREVER = 3874595
    AN_AIR_OF_DEBONAIR = 6637376
    THE_VALUE_OF_TEAMWORK = 8400928
    CREAM_SPIRIT = 12807213
    A_MANNS_MINT = 12377523
    AFTER_EIGHT = 2960676
    DARK_SALMON_INJUSTICE = 15308410
    PINK_AS_HELL = 16738740
    A_COLOR_SIMILAR_TO_SLATE = 3100495
    DRABLY_OLIVE = 8421376
    THE_BITTER_TASTE_OF_DEFEAT_AND_LIME = 3329330
    THE_COLOR_OF_A_GENTLEMANNS_BUSINESS_PANTS = 15787618

    def __str__(self) -> str:
        return PAINT_NAMES[self]

    @property
    def hex_color(self) -> str:
        return f'{self.value:06X}'


PAINT_NAMES = {
    Paint.INDUBITABLY_GREEN: 'Indubitably Green',
    Paint.ZEPHENIAHS_GREED: "Zepheniah's Greed",
    Paint.NOBLE_HATTERS_VIOLET: "Noble Hatter's Violet",
    Paint.COLOR_NO_216_190_216: 'Color No. 216-190-216',
    Paint.A_DEEP_COMMITMENT_TO_PURPLE: 'A Deep Commitment to Purple',
    Paint.MANN_CO_ORANGE: 'Mann Co. Orange',
    Paint.MUSKELMANNBRAUN: 'Muskelmannbraun',
    Paint.PECULIARLY_DRAB_TINCTURE: 'Peculiarly Drab Tincture',
    Paint.RADIGAN_CONAGHER_BROWN: 'Radigan Conagher Brown',
    Paint.YE_OLDE_RUSTIC_COLOUR: 'Ye Olde Rustic Colour',
    Paint.AUSTRALIUM_GOLD: 'Australium Gold',
    Paint.AGED_MOUSTACHE_GREY: 'Aged Moustache Grey',
    Paint.AN_EXTRAORDINARY_ABUNDANCE_OF_TINGE: 'An Extraordinary Abundance of Tinge',
    Paint.A_DISTINCTIVE_LACK_OF_HUE: 'A Distinctive Lack of Hue',
    Paint.TEAM_SPIRIT: 'Team Spirit',
    Paint.OPERATORS_OVERALLS: "Operator's Overalls",
    Paint.WATERLOGGED_LAB_COAT: 'Waterlogged Lab Coat',
    Paint.BALACLAVAS_ARE_FOREVER: 'Balaclavas Are Forever',
    Paint.AN_AIR_OF_DEBONAIR: 'An Air of Debonair',
    Paint.THE_VALUE_OF_TEAMWORK: 'The Value of Teamwork',
    Paint.CREAM_SPIRIT: 'Cream Spirit',
    Paint.A_MANNS_MINT: "A Mann's Mint",
    Paint.AFTER_EIGHT: 'After Eight',
    Paint.DARK_SALMON_INJUSTICE: 'Dark Salmon Injustice',
    Paint.PINK_AS_HELL: 'Pink as Hell',
    Paint.A_COLOR_SIMILAR_TO_SLATE: 'A Color Similar to Slate',
    Paint.DRABLY_OLIVE: 'Drably Olive',
    Paint.THE_BITTER_TASTE_OF_DEFEAT_AND_LIME: 'The Bitter Taste of Defeat and Lime',
    Paint.THE_COLOR_OF_A_GENTLEMANNS_BUSINESS_PANTS: "The Color of a Gentlemann's Business Pants"
}
