from unittest import TestCase

from tf2.code import parse_u32, parse_i32, from_code, to_code, parse_code
from tf2.error import SkuIntError, SkuValueError, SkuFormatError, IntErrorKind
from tf2.type.item import Quality, Sheen, Killstreaker


class CodeTest(TestCase):

    def assertIntError(self, kind: IntErrorKind, func, value: str):
        with self.assertRaises(SkuIntError) as ctx:
            func('test', value)
        self.assertEqual(ctx.exception.kind, kind)

    def test_parse_u32(self):
        self.assertEqual(parse_u32('test', '703'), 703)
        self.assertEqual(parse_u32('test', '007'), 7)
        self.assertEqual(parse_u32('test', '+5'), 5)
        self.assertEqual(parse_u32('test', '0' * 5000 + '1'), 1)

    def test_parse_u32_errors(self):
        self.assertIntError(IntErrorKind.EMPTY, parse_u32, '')
        self.assertIntError(IntErrorKind.INVALID_DIGIT, parse_u32, '-0')
        self.assertIntError(IntErrorKind.INVALID_DIGIT, parse_u32, '1_000')
        self.assertIntError(IntErrorKind.INVALID_DIGIT, parse_u32, ' 5')
        self.assertIntError(IntErrorKind.INVALID_DIGIT, parse_u32, '+')
        self.assertIntError(IntErrorKind.INVALID_DIGIT, parse_u32, '١٢')
        self.assertIntError(IntErrorKind.POS_OVERFLOW, parse_u32, '4294967296')
        self.assertIntError(IntErrorKind.POS_OVERFLOW, parse_u32, '9' * 5000)

    def test_parse_i32(self):
        self.assertEqual(parse_i32('test', '-1'), -1)
        self.assertEqual(parse_i32('test', '2147483647'), 2147483647)
        self.assertIntError(IntErrorKind.INVALID_DIGIT, parse_i32, '-')
        self.assertIntError(IntErrorKind.NEG_OVERFLOW, parse_i32, '-2147483649')
        self.assertIntError(IntErrorKind.NEG_OVERFLOW, parse_i32, '-' + '9' * 20)

    def test_from_code(self):
        self.assertEqual(from_code(Quality, 'quality', 11), Quality.STRANGE)

        with self.assertRaises(SkuValueError) as ctx:
            from_code(Killstreaker, 'killstreaker', 2001)
        self.assertEqual(ctx.exception.key, 'killstreaker')
        self.assertEqual(ctx.exception.number, 2001)

    def test_to_code(self):
        self.assertEqual(to_code(Sheen.HOT_ROD), 7)
        self.assertEqual(to_code(Killstreaker.HYPNO_BEAM), 2008)

    def test_parse_code(self):
        self.assertEqual(parse_code(Sheen, 'sheen', '1'), Sheen.TEAM_SHINE)
        self.assertRaises(SkuValueError, parse_code, Sheen, 'sheen', '8')
        self.assertRaises(SkuIntError, parse_code, Sheen, 'sheen', '')


class ErrorTest(TestCase):

    def test_int_error_messages(self):
        self.assertEqual(str(SkuIntError('craft_number', IntErrorKind.EMPTY)),
                         'Value for craft number in SKU is empty.')
        self.assertEqual(str(SkuIntError('particle', IntErrorKind.INVALID_DIGIT, 'x')),
                         'Value for particle in SKU contains invalid digit.')
        self.assertEqual(str(SkuIntError('particle', IntErrorKind.POS_OVERFLOW, '4294967296')),
                         'Value for particle in SKU overflows integer bounds.')
        self.assertEqual(str(SkuIntError('defindex', IntErrorKind.NEG_OVERFLOW, '-2147483649')),
                         'Value for defindex in SKU underflows integer bounds.')

    def test_value_error_message(self):
        self.assertEqual(str(SkuValueError('killstreak_tier', 5)), 'Unknown killstreak tier: 5')

    def test_format_error_message(self):
        self.assertEqual(str(SkuFormatError()),
                         'Invalid SKU format. Must begin with a defindex followed by a quality e.g. "5021;6"')

    def test_errors_are_value_errors(self):
        self.assertIsInstance(SkuFormatError(), ValueError)
