from enum import IntEnum


class Quality(IntEnum):
    NORMAL = 0
    GENUINE = 1
    RARITY2 = 2
    VINTAGE = 3
    RARITY3 = 4
    UNUSUAL = 5
    UNIQUE = 6
    COMMUNITY = 7
    VALVE = 8
    SELF_MADE = 9
    CUSTOMIZED = 10
    STRANGE = 11
    COMPLETED = 12
    HAUNTED = 13
    COLLECTORS = 14
    DECORATED_WEAPON = 15

    def __str__(self) -> str:
        names = {
            self.NORMAL: 'Normal',
            self.GENUINE: 'Genuine',
            self.RARITY2: 'rarity2',
            self.VINTAGE: 'Vintage',
            self.RARITY3: 'rarity3',
            self.UNUSUAL: 'Unusual',
            self.UNIQUE: 'Unique',
            self.COMMUNITY: 'Community',
            self.VALVE: 'Valve',
            self.SELF_MADE: 'Self-Made',
            self.CUSTOMIZED: 'Customized',
            self.STRANGE: 'Strange',
            self.COMPLETED: 'Completed',
            self.HAUNTED: 'Haunted',
            self.COLLECTORS: 'Collector\'s',
            self.DECORATED_WEAPON: 'Decorated Weapon'
        }
        return names[self]


class Wear(IntEnum):
    FACTORY_NEW = 1
    MINIMAL_WEAR = 2
    FIELD_TESTED = 3
    WELL_WORN = 4
    BATTLE_SCARRED = 5

    def __str__(self) -> str:
        names = {
            self.FACTORY_NEW: 'Factory New',
            self.MINIMAL_WEAR: 'Minimal Wear',
            self.FIELD_TESTED: 'Field-Tested',
            self.WELL_WORN: 'Well-Worn',
            self.BATTLE_SCARRED: 'Battle Scarred'
        }
        return names[self]

    @classmethod
    def from_short_str(cls, value: str):
        if value is None:
            return None

        names = {
            'fn': cls.FACTORY_NEW,
            'mw': cls.MINIMAL_WEAR,
            'ft': cls.FIELD_TESTED,
            'ww': cls.WELL_WORN,
            'bs': cls.BATTLE_SCARRED
        }
        return names.get(value.lower())


class KillstreakTier(IntEnum):
    KILLSTREAK = 1
    SPECIALIZED = 2
    PROFESSIONAL = 3

    def __str__(self) -> str:
        names = {
            self.KILLSTREAK: 'Killstreak',
            self.SPECIALIZED: 'Specialized Killstreak',
            self.PROFESSIONAL: 'Professional Killstreak'
        }
        return names[self]


class Sheen(IntEnum):
    TEAM_SHINE = 1
    DEADLY_DAFFODIL = 2
    MANNDARIN = 3
    MEAN_GREEN = 4
    AGONIZING_EMERALD = 5
    VILLAINOUS_VIOLET = 6
    HOT_ROD = 7

    def __str__(self) -> str:
        names = {
            self.TEAM_SHINE: 'Team Shine',
            self.DEADLY_DAFFODIL: 'Deadly Daffodil',
            self.MANNDARIN: 'Manndarin',
            self.MEAN_GREEN: 'Mean Green',
            self.AGONIZING_EMERALD: 'Agonizing Emerald',
            self.VILLAINOUS_VIOLET: 'Villainous Violet',
            self.HOT_ROD: 'Hot Rod'
        }
        return names[self]


class Killstreaker(IntEnum):
    FIRE_HORNS = 2002
    CEREBRAL_DISCHARGE = 2003
    TORNADO = 2004
    FLAMES = 2005
    SINGULARITY = 2006
    INCINERATOR = 2007
    HYPNO_BEAM = 2008

    def __str__(self) -> str:
        names = {
            self.FIRE_HORNS: 'Fire Horns',
            self.CEREBRAL_DISCHARGE: 'Cerebral Discharge',
            self.TORNADO: 'Tornado',
            self.FLAMES: 'Flames',
            self.SINGULARITY: 'Singularity',
            self.INCINERATOR: 'Incinerator',
            self.HYPNO_BEAM: 'Hypno-Beam'
        }
        return names[self]
