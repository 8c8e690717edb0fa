from django.test import SimpleTestCase

from builder.generators.schema_normalizer import SchemaNormalizer


class SchemaNormalizerTest(SimpleTestCase):
    """Test cases for raw screen normalization"""

    def setUp(self):
        self.normalizer = SchemaNormalizer()

    def test_dropped_components_take_priority(self):
        screen = self.normalizer.normalize_screen({
            'content': {'droppedComponents': [{'type': 'Text'}]},
            'components': [{'type': 'Button'}, {'type': 'Icon'}],
        })

        self.assertEqual([c.type for c in screen.components], ['Text'])

    def test_flat_components_used_without_canvas_content(self):
        screen = self.normalizer.normalize_screen({
            'content': {'droppedComponents': 'not a list'},
            'components': [{'type': 'Button'}, {'type': 'Icon'}],
        })

        self.assertEqual([c.type for c in screen.components], ['Button', 'Icon'])

    def test_no_components(self):
        screen = self.normalizer.normalize_screen({'name': 'Empty'})
        self.assertEqual(screen.components, [])

    def test_non_object_components_are_skipped(self):
        """Test malformed entries are dropped and order is kept"""
        with self.assertLogs('builder.generators.schema_normalizer', level='WARNING'):
            screen = self.normalizer.normalize_screen({
                'components': [{'type': 'Text'}, 'junk', None, {'type': 'Image'}],
            })

        self.assertEqual([c.type for c in screen.components], ['Text', 'Image'])

    def test_name_fallback_chains(self):
        screen = self.normalizer.normalize_screen({'name': 'Login', 'screenName': 'ignored'})
        self.assertEqual(screen.screen_name, 'Login')
        self.assertEqual(screen.original_name, 'Login')

        screen = self.normalizer.normalize_screen({'screenName': 'profile', 'originalName': 'Profile'})
        self.assertEqual(screen.screen_name, 'profile')
        self.assertEqual(screen.original_name, 'Profile')

    def test_defaults_for_unknown_shape(self):
        """Test an unusable payload still produces a screen"""
        for raw in (None, [], 'screen', 7):
            with self.subTest(raw=raw):
                screen = self.normalizer.normalize_screen(raw)
                self.assertEqual(screen.screen_name, 'home')
                self.assertEqual(screen.original_name, 'Home')
                self.assertEqual(screen.components, [])
                self.assertEqual(screen.screen_properties, {})
                self.assertEqual(screen.metadata, {})

    def test_screen_properties_chain(self):
        screen = self.normalizer.normalize_screen({
            'screenProperties': {'backgroundColor': '#111111'},
            'content': {'screenProperties': {'backgroundColor': '#222222'}},
        })
        self.assertEqual(screen.screen_properties, {'backgroundColor': '#111111'})

        screen = self.normalizer.normalize_screen({
            'content': {'screenProperties': {'backgroundColor': '#222222'}},
        })
        self.assertEqual(screen.screen_properties, {'backgroundColor': '#222222'})

    def test_component_fields(self):
        component = self.normalizer.normalize_component({
            'type': 'Text',
            'props': {'text': 'Hi'},
            'position': {'x': 10, 'y': 20},
            'size': 'bad',
            'responsive': {'widthPercent': 0.5},
        })

        self.assertEqual(component.type_key, 'text')
        self.assertEqual(component.props, {'text': 'Hi'})
        self.assertEqual(component.position, {'x': 10, 'y': 20})
        self.assertEqual(component.size, {})
        self.assertTrue(component.has_responsive_geometry)

    def test_missing_type(self):
        component = self.normalizer.normalize_component({'type': 5})
        self.assertEqual(component.type, '')

    def test_normalize_screens_requires_list(self):
        self.assertEqual(self.normalizer.normalize_screens({'name': 'x'}), [])
        self.assertEqual(len(self.normalizer.normalize_screens([{}, {}])), 2)
