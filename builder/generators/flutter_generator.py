# File: builder/generators/flutter_generator.py

import logging
from dataclasses import dataclass
from typing import Any, Optional

from builder.utils.color_converter import ColorConverter
from .constants import DEFAULT_APP_NAME, DEFAULT_SCREEN_BACKGROUND, REFERENCE_HEIGHT, REFERENCE_WIDTH
from .header_extractor import AppHeaderExtractor, HeaderFields
from .layout_resolver import SCALE_X, SCALE_Y
from .property_mapper import PropertyMapper
from .schema import AppConfig, Screen
from .schema_normalizer import SchemaNormalizer
from .widget_generator import WidgetGenerator

logger = logging.getLogger(__name__)

# Indent level of the Stack children inside HomeScreen.build
STACK_CHILD_INDENT = 8


@dataclass
class GeneratedScreen:
    """Compiled main.dart with statistics"""
    code: str
    screen_name: str
    line_count: int = 0
    component_count: int = 0
    positioned_count: int = 0
    has_app_bar: bool = False
    is_fallback: bool = False


class FlutterGenerator:
    """Assembles the single-screen Flutter application (lib/main.dart).

    One generator compiles one screen; a fresh WidgetGenerator is used per
    compile so nothing leaks between requests.
    """

    def __init__(self, app_name: Optional[str] = None):
        self.app_name = app_name
        self.property_mapper = PropertyMapper()

    @property
    def display_name(self) -> str:
        return str(self.property_mapper.first_present(self.app_name, default=DEFAULT_APP_NAME))

    def generate_main_dart(self, app_config: AppConfig) -> str:
        """main.dart for the first screen of an app config"""
        screen = app_config.home_screen
        if screen is None:
            return self.generate_fallback_main_dart()
        return self.compile_screen(screen).code

    def compile_screen(self, screen: Screen) -> GeneratedScreen:
        if not screen.components:
            logger.info(f"Screen {screen.screen_name} has no components, using welcome screen")
            code = self.generate_fallback_main_dart()
            return GeneratedScreen(
                code=code,
                screen_name=screen.screen_name,
                line_count=len(code.split('\n')),
                is_fallback=True,
            )

        extraction = AppHeaderExtractor(self.app_name).extract(screen.components)
        widget_generator = WidgetGenerator()

        snippets = []
        for component in extraction.positioned:
            snippet = widget_generator.generate_component(component, STACK_CHILD_INDENT)
            if snippet is not None:
                snippets.append(snippet)

        logger.info(
            f"Compiled screen {screen.screen_name}: {len(snippets)} positioned components, "
            f"app bar={'yes' if extraction.header else 'no'}"
        )

        code = self._assemble(
            header=extraction.header,
            background=screen.screen_properties.get('backgroundColor'),
            stack_children=snippets,
            uses_reference_scale=widget_generator.uses_reference_scale,
        )
        return GeneratedScreen(
            code=code,
            screen_name=screen.screen_name,
            line_count=len(code.split('\n')),
            component_count=len(screen.components),
            positioned_count=len(snippets),
            has_app_bar=extraction.header is not None,
        )

    def _assemble(self, header: Optional[HeaderFields], background: Any,
                  stack_children: list, uses_reference_scale: bool) -> str:
        pm = self.property_mapper
        background = str(pm.first_present(background, default=DEFAULT_SCREEN_BACKGROUND))

        seed_color = pm.map_color(header.background_color if header else background)
        if header and background == header.background_color:
            # Avoid a screen that reads as one big header
            scaffold_color = ColorConverter.WHITE
        else:
            scaffold_color = pm.map_color(background)

        return f"""import 'package:flutter/material.dart';

void main() {{
  runApp(MyApp());
}}

class MyApp extends StatelessWidget {{
  @override
  Widget build(BuildContext context) {{
    return MaterialApp(
      title: {pm.map_value(self.display_name)},
      theme: ThemeData(
        useMaterial3: true,
        colorScheme: ColorScheme.fromSeed(seedColor: {seed_color}),
        scaffoldBackgroundColor: {scaffold_color},
      ),
      home: HomeScreen(),
      debugShowCheckedModeBanner: false,
    );
  }}
}}

class HomeScreen extends StatelessWidget {{
  @override
  Widget build(BuildContext context) {{
    return Scaffold(
{self._app_bar(header)}      backgroundColor: {scaffold_color},
      body: SafeArea(
        child: LayoutBuilder(
          builder: (context, constraints) {{
{self._scale_factors(uses_reference_scale)}            return Stack(
              fit: StackFit.expand,
              clipBehavior: Clip.none,
              children: [
{self._stack_children(stack_children)}              ],
            );
          }},
        ),
      ),
    );
  }}
}}
"""

    def _app_bar(self, header: Optional[HeaderFields]) -> str:
        if header is None:
            return ''

        pm = self.property_mapper
        title_color = pm.map_color(header.title_color)
        leading = ''
        if header.show_back_button:
            leading = """
        leading: IconButton(
          icon: Icon(Icons.arrow_back),
          onPressed: () => Navigator.of(context).pop(),
        ),"""
        actions = ''
        if header.show_menu_button:
            actions = """
        actions: [
          IconButton(
            icon: Icon(Icons.menu),
            onPressed: () {},
          ),
        ],"""

        return f"""      appBar: AppBar(
        toolbarHeight: {pm.map_number(header.height)},
        title: Text(
          {pm.map_value(header.title)},
          style: TextStyle(
            fontSize: {header.title_font_size},
            color: {title_color},
            fontWeight: FontWeight.w600,
          ),
        ),
        backgroundColor: {pm.map_color(header.background_color)},
        foregroundColor: {title_color},
        elevation: 1,
        centerTitle: false,{leading}{actions}
      ),
"""

    @staticmethod
    def _scale_factors(uses_reference_scale: bool) -> str:
        if not uses_reference_scale:
            return ''
        pm = PropertyMapper
        return (
            f"            final double {SCALE_X} = constraints.maxWidth / {pm.map_double(REFERENCE_WIDTH)};\n"
            f"            final double {SCALE_Y} = constraints.maxHeight / {pm.map_double(REFERENCE_HEIGHT)};\n"
        )

    @staticmethod
    def _stack_children(snippets: list) -> str:
        if not snippets:
            return ''
        return ',\n'.join(snippets) + ',\n'

    def generate_fallback_main_dart(self) -> str:
        """Welcome screen used when a screen has no components"""
        pm = self.property_mapper
        name = self.display_name
        return f"""import 'package:flutter/material.dart';

void main() {{
  runApp(MyApp());
}}

class MyApp extends StatelessWidget {{
  @override
  Widget build(BuildContext context) {{
    return MaterialApp(
      title: {pm.map_value(name)},
      theme: ThemeData(
        useMaterial3: true,
        colorScheme: ColorScheme.fromSeed(seedColor: Colors.grey),
      ),
      home: HomeScreen(),
    );
  }}
}}

class HomeScreen extends StatelessWidget {{
  @override
  Widget build(BuildContext context) {{
    return Scaffold(
      appBar: AppBar(
        title: Text({pm.map_value(name)}),
      ),
      body: Center(
        child: Column(
          mainAxisAlignment: MainAxisAlignment.center,
          children: [
            Icon(
              Icons.mobile_friendly,
              size: 64,
              color: Theme.of(context).primaryColor,
            ),
            SizedBox(height: 24),
            Text(
              {pm.map_value(f'Welcome to {name}!')},
              style: Theme.of(context).textTheme.headlineMedium,
              textAlign: TextAlign.center,
            ),
            SizedBox(height: 16),
            Text(
              'Your app is ready to use',
              style: Theme.of(context).textTheme.bodyLarge,
              textAlign: TextAlign.center,
            ),
          ],
        ),
      ),
    );
  }}
}}
"""


def compile_screen(raw_screen: Any, app_name: Optional[str] = None) -> GeneratedScreen:
    """Normalize a raw screen payload and compile it to main.dart"""
    screen = SchemaNormalizer().normalize_screen(raw_screen)
    return FlutterGenerator(app_name).compile_screen(screen)
