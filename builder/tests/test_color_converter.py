from django.test import SimpleTestCase

from builder.utils.color_converter import ColorConverter, parse_color_to_flutter


class ColorConverterTest(SimpleTestCase):
    """Test cases for style color conversion"""

    def setUp(self):
        self.converter = ColorConverter()

    def test_six_digit_hex_is_opaque(self):
        """Test #RRGGBB gets a full alpha channel"""
        self.assertEqual(self.converter.convert_color('#3B82F6'), 'Color(0xFF3B82F6)')
        self.assertEqual(self.converter.convert_color('#3b82f6'), 'Color(0xFF3B82F6)')

    def test_short_hex_is_expanded(self):
        self.assertEqual(self.converter.convert_color('#fff'), 'Color(0xFFFFFFFF)')
        self.assertEqual(self.converter.convert_color('#1a2'), 'Color(0xFF11AA22)')

    def test_eight_digit_hex_moves_alpha_first(self):
        """Test #RRGGBBAA becomes 0xAARRGGBB"""
        self.assertEqual(self.converter.convert_color('#11223344'), 'Color(0x44112233)')

    def test_transparent_values(self):
        for value in ('transparent', 'TRANSPARENT', '', '   ', None):
            with self.subTest(value=value):
                self.assertEqual(self.converter.convert_color(value), 'Colors.transparent')

    def test_unsupported_values_fall_back_to_black(self):
        """Test named colors, functions and malformed hex all become black"""
        for value in ('not-a-color', 'red', 'rgb(0, 0, 0)', '#12345', '#ggg', '#', 42):
            with self.subTest(value=value):
                self.assertEqual(self.converter.convert_color(value), 'Colors.black')

    def test_module_shortcut(self):
        self.assertEqual(parse_color_to_flutter('#000000'), 'Color(0xFF000000)')
