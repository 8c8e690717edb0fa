from django.test import SimpleTestCase

from builder.generators.header_extractor import AppHeaderExtractor
from builder.generators.schema import Component


class AppHeaderExtractorTest(SimpleTestCase):
    """Test cases for app header extraction"""

    def test_header_removed_from_positioned_stack(self):
        components = [
            Component(type='Text'),
            Component(type='AppHeader', props={'appTitle': 'Inbox'}),
            Component(type='Button'),
        ]

        extraction = AppHeaderExtractor('My App').extract(components)

        self.assertEqual([c.type for c in extraction.positioned], ['Text', 'Button'])
        self.assertEqual(extraction.header.title, 'Inbox')
        self.assertEqual(extraction.header_count, 1)

    def test_header_lexicon_is_case_insensitive(self):
        for header_type in ('appheader', 'AppBar', 'HEADER', 'TopBar'):
            with self.subTest(header_type=header_type):
                extraction = AppHeaderExtractor().extract([Component(type=header_type)])
                self.assertIsNotNone(extraction.header)
                self.assertEqual(extraction.positioned, [])

    def test_no_header(self):
        extraction = AppHeaderExtractor().extract([Component(type='Text')])
        self.assertIsNone(extraction.header)
        self.assertEqual(len(extraction.positioned), 1)

    def test_only_first_header_supplies_fields(self):
        """Test later headers are dropped from the stack as well"""
        components = [
            Component(type='Header', props={'appTitle': 'First'}),
            Component(type='Text'),
            Component(type='AppBar', props={'appTitle': 'Second'}),
        ]

        with self.assertLogs('builder.generators.header_extractor', level='WARNING'):
            extraction = AppHeaderExtractor().extract(components)

        self.assertEqual(extraction.header.title, 'First')
        self.assertEqual(extraction.header_count, 2)
        self.assertEqual([c.type for c in extraction.positioned], ['Text'])

    def test_header_defaults(self):
        header = AppHeaderExtractor().build_header_fields(Component(type='AppHeader'))

        self.assertEqual(header.title, 'Generated App')
        self.assertEqual(header.background_color, '#3b82f6')
        self.assertEqual(header.title_color, '#ffffff')
        self.assertEqual(header.height, 64)
        self.assertEqual(header.title_font_size, '18')
        self.assertFalse(header.show_back_button)
        self.assertFalse(header.show_menu_button)

    def test_title_falls_back_to_app_name(self):
        header = AppHeaderExtractor('Shop').build_header_fields(
            Component(type='AppHeader', props={'appTitle': ''})
        )
        self.assertEqual(header.title, 'Shop')

    def test_height_and_title_size_floors(self):
        header = AppHeaderExtractor().build_header_fields(Component(
            type='AppHeader',
            props={'height': '20', 'titleSize': 10},
        ))

        self.assertEqual(header.height, 44)
        self.assertEqual(header.title_font_size, '12')

    def test_malformed_height_uses_default(self):
        header = AppHeaderExtractor().build_header_fields(Component(
            type='AppHeader',
            props={'height': 'tall'},
        ))
        self.assertEqual(header.height, 64)

    def test_font_size_used_when_title_size_missing(self):
        header = AppHeaderExtractor().build_header_fields(Component(
            type='AppHeader',
            props={'fontSize': 22},
        ))
        self.assertEqual(header.title_font_size, '22')

    def test_title_font_percent_overrides_fixed_size(self):
        header = AppHeaderExtractor().build_header_fields(Component(
            type='AppHeader',
            props={'titleSize': 30},
            responsive={'titleFontPercent': 0.05},
        ))
        self.assertEqual(header.title_font_size, 'MediaQuery.of(context).size.width * 0.05')

    def test_button_flags(self):
        header = AppHeaderExtractor().build_header_fields(Component(
            type='AppHeader',
            props={'showBackButton': True, 'showMenuButton': 'true'},
        ))
        self.assertTrue(header.show_back_button)
        self.assertTrue(header.show_menu_button)
