from unittest import TestCase

from tf2.parse import decode_strict
from tf2.type.item import Quality, KillstreakTier, Wear, Sheen, Killstreaker
from tf2.type.paint import Paint
from tf2.type.sku import Sku, default_sku, with_attributes, format_sku, to_sku_string


class SkuTest(TestCase):
    full_sku = Sku(5, Quality.UNUSUAL,
                   particle=13,
                   craftable=False,
                   australium=True,
                   strange=True,
                   wear=Wear.FACTORY_NEW,
                   skin=2,
                   killstreak_tier=KillstreakTier.KILLSTREAK,
                   festivized=True,
                   crate_number=3,
                   craft_number=4,
                   target_defindex=6,
                   output_defindex=7,
                   output_quality=Quality.COLLECTORS,
                   paint=Paint.A_COLOR_SIMILAR_TO_SLATE,
                   sheen=Sheen.DEADLY_DAFFODIL,
                   killstreaker=Killstreaker.FIRE_HORNS)
    full_sku_str = '5;5;u13;uncraftable;australium;strange;w1;pk2;kt-1;festive;c3;n4;td-6;od-7;oq-14;p3100495;ks-2;ke-2002'

    def test_new(self):
        sku = Sku(264, Quality.STRANGE)

        self.assertTrue(sku.craftable)
        self.assertFalse(sku.australium)
        self.assertIsNone(sku.particle)
        self.assertEqual(str(sku), '264;11')

    def test_default(self):
        self.assertEqual(default_sku(), Sku(0, Quality.NORMAL))
        self.assertEqual(str(default_sku()), '0;0')

    def test_with_attributes(self):
        sku = with_attributes(Sku(264, Quality.STRANGE), killstreak_tier=KillstreakTier.PROFESSIONAL)

        self.assertEqual(str(sku), '264;11;kt-3')

    def test_immutable(self):
        sku = Sku(264, Quality.STRANGE)

        with self.assertRaises(AttributeError):
            sku.defindex = 1

    def test_hashable(self):
        skus = {decode_strict('1;6;u13'), decode_strict('1;6;u13'), decode_strict('1;6')}

        self.assertEqual(len(skus), 2)

    def test_format_all_attributes(self):
        self.assertEqual(format_sku(self.full_sku), self.full_sku_str)
        self.assertEqual(to_sku_string(self.full_sku), self.full_sku_str)

    def test_round_trip(self):
        self.assertEqual(decode_strict(self.full_sku_str), self.full_sku)
        self.assertEqual(str(decode_strict(self.full_sku_str)), self.full_sku_str)

    def test_format_order_does_not_depend_on_input_order(self):
        a = decode_strict('1;6;ke-2002;u13;festive;pk3')
        b = decode_strict('1;6;pk3;festive;u13;ke-2002')

        self.assertEqual(a, b)
        self.assertEqual(str(a), '1;6;u13;pk3;festive;ke-2002')
        self.assertEqual(str(a), str(b))

    def test_zero_is_not_absent(self):
        sku = Sku(1, Quality.UNIQUE, particle=0, craft_number=0)

        self.assertEqual(str(sku), '1;6;u0;n0')
