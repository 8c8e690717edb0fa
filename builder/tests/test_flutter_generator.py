from django.test import SimpleTestCase

from builder.generators.flutter_generator import FlutterGenerator, compile_screen
from builder.generators.schema_normalizer import SchemaNormalizer

HEADER = {
    'type': 'AppHeader',
    'props': {'appTitle': 'Dashboard', 'backgroundColor': '#3b82f6', 'showBackButton': True},
}

SCREEN = {
    'name': 'home',
    'screenProperties': {'backgroundColor': '#f3f4f6'},
    'content': {
        'droppedComponents': [
            HEADER,
            {
                'type': 'Text',
                'props': {'text': 'Welcome back'},
                'position': {'x': 20, 'y': 40},
                'size': {'width': 320, 'height': 30},
            },
            {
                'type': 'Button',
                'props': {'text': 'Continue'},
                'position': {'x': 20, 'y': 600},
                'size': {'width': 320, 'height': 48},
                'responsive': {'widthPercent': 0.9},
            },
        ],
    },
}


class FlutterGeneratorTest(SimpleTestCase):
    """Test cases for main.dart assembly"""

    def test_compile_screen(self):
        result = compile_screen(SCREEN, app_name='My App')

        self.assertEqual(result.screen_name, 'home')
        self.assertEqual(result.component_count, 3)
        self.assertEqual(result.positioned_count, 2)
        self.assertTrue(result.has_app_bar)
        self.assertFalse(result.is_fallback)
        self.assertEqual(result.line_count, len(result.code.split('\n')))
        self.assertTrue(result.code.startswith("import 'package:flutter/material.dart';"))

    def test_document_structure(self):
        code = compile_screen(SCREEN, app_name='My App').code

        self.assertIn("title: 'My App',", code)
        self.assertIn('body: SafeArea(', code)
        self.assertIn('LayoutBuilder(', code)
        self.assertIn('builder: (context, constraints) {', code)
        self.assertIn('return Stack(', code)
        self.assertIn('fit: StackFit.expand,', code)
        self.assertEqual(code.count('Positioned('), 2)

    def test_app_bar_from_header(self):
        code = compile_screen(SCREEN).code

        self.assertIn('appBar: AppBar(', code)
        self.assertIn("'Dashboard'", code)
        self.assertIn('toolbarHeight: 64,', code)
        self.assertIn('Icons.arrow_back', code)
        self.assertNotIn('Icons.menu', code)

    def test_header_never_positioned(self):
        result = compile_screen({'components': [HEADER]})

        self.assertEqual(result.positioned_count, 0)
        self.assertNotIn('Positioned(', result.code)
        self.assertIn('appBar: AppBar(', result.code)

    def test_no_app_bar_without_header(self):
        result = compile_screen({'components': [{'type': 'Text'}]})

        self.assertFalse(result.has_app_bar)
        self.assertNotIn('appBar:', result.code)

    def test_seed_color_from_header(self):
        code = compile_screen(SCREEN).code

        self.assertIn('ColorScheme.fromSeed(seedColor: Color(0xFF3B82F6))', code)
        self.assertIn('scaffoldBackgroundColor: Color(0xFFF3F4F6),', code)
        self.assertIn('      backgroundColor: Color(0xFFF3F4F6),', code)

    def test_seed_color_from_screen_without_header(self):
        code = compile_screen({
            'components': [{'type': 'Text'}],
            'screenProperties': {'backgroundColor': '#ff0000'},
        }).code

        self.assertIn('ColorScheme.fromSeed(seedColor: Color(0xFFFF0000))', code)
        self.assertIn('scaffoldBackgroundColor: Color(0xFFFF0000),', code)

    def test_default_screen_background(self):
        code = compile_screen({'components': [{'type': 'Text'}]}).code
        self.assertIn('scaffoldBackgroundColor: Color(0xFFFFFFFF),', code)

    def test_scaffold_turns_white_when_matching_header(self):
        """Test a background identical to the header color is replaced by white"""
        code = compile_screen({
            'components': [HEADER, {'type': 'Text'}],
            'screenProperties': {'backgroundColor': '#3b82f6'},
        }).code

        self.assertIn('scaffoldBackgroundColor: Colors.white,', code)
        self.assertIn('      backgroundColor: Colors.white,', code)
        self.assertIn('ColorScheme.fromSeed(seedColor: Color(0xFF3B82F6))', code)

    def test_white_heuristic_is_textual(self):
        code = compile_screen({
            'components': [HEADER, {'type': 'Text'}],
            'screenProperties': {'backgroundColor': '#3B82F6'},
        }).code

        self.assertNotIn('Colors.white', code)

    def test_scale_factors_only_for_legacy_layouts(self):
        code = compile_screen(SCREEN).code
        self.assertIn('final double sx = constraints.maxWidth / 360.0;', code)
        self.assertIn('final double sy = constraints.maxHeight / 720.0;', code)

        code = compile_screen({
            'components': [{'type': 'Text', 'responsive': {'xPercent': 0.1, 'yPercent': 0.1}}],
        }).code
        self.assertNotIn('final double sx', code)
        self.assertIn('left: constraints.maxWidth * 0.1,', code)

    def test_paint_order_follows_components(self):
        code = compile_screen({
            'components': [
                {'type': 'Text', 'props': {'text': 'bottom'}},
                {'type': 'Text', 'props': {'text': 'top'}},
            ],
        }).code

        self.assertLess(code.index("'bottom'"), code.index("'top'"))

    def test_empty_screen_uses_welcome_document(self):
        result = compile_screen({'name': 'empty', 'components': []}, app_name='Shop')

        self.assertTrue(result.is_fallback)
        self.assertEqual(result.positioned_count, 0)
        self.assertIn('Icons.mobile_friendly', result.code)
        self.assertIn("'Welcome to Shop!'", result.code)
        self.assertNotIn('Positioned(', result.code)

    def test_app_name_is_escaped(self):
        code = compile_screen({'components': [{'type': 'Text'}]}, app_name="Bob's App").code
        self.assertIn("title: 'Bob\\'s App',", code)

    def test_output_is_deterministic(self):
        screen = SchemaNormalizer().normalize_screen(SCREEN)
        generator = FlutterGenerator('My App')

        first = generator.compile_screen(screen).code
        second = generator.compile_screen(screen).code

        self.assertEqual(first, second)
        self.assertEqual(first, compile_screen(SCREEN, app_name='My App').code)

    def test_malformed_components_still_compile(self):
        result = compile_screen({
            'components': [
                {'type': 'Text', 'props': {'fontSize': 'huge'}, 'position': {'x': 'left'}},
                {'type': 'Image', 'props': {'src': 12}},
                {'props': {}},
                'garbage',
            ],
        })

        self.assertEqual(result.positioned_count, 3)
        self.assertIn("Text('Unknown')", result.code)
