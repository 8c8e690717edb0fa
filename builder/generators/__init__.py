"""
Flutter code generation package for the App Creator packager

This package turns visual builder screen JSON into a single-screen Flutter
application and packages it with the rest of a Flutter project.

Main Components:
- SchemaNormalizer: Reconciles raw screen payloads into a Screen
- AppHeaderExtractor: Pulls the app bar component out of the stack
- LayoutStrategyResolver: Resolves Positioned geometry per component
- WidgetGenerator: Generates individual Flutter widgets per component type
- FlutterGenerator: Assembles lib/main.dart
- FlutterProjectBuilder: Builds the complete project tree / ZIP
"""

from .flutter_generator import FlutterGenerator, GeneratedScreen, compile_screen
from .header_extractor import AppHeaderExtractor
from .layout_resolver import LayoutStrategyResolver
from .project_builder import FlutterProjectBuilder
from .property_mapper import PropertyMapper
from .schema_normalizer import SchemaNormalizer
from .widget_generator import WidgetGenerator

__version__ = '1.0.0'

__all__ = [
    'AppHeaderExtractor',
    'FlutterGenerator',
    'FlutterProjectBuilder',
    'GeneratedScreen',
    'LayoutStrategyResolver',
    'PropertyMapper',
    'SchemaNormalizer',
    'WidgetGenerator',
    'compile_screen',
]
