"""
Color Converter Utility
Converts visual builder style colors to Flutter Color literals
"""

import logging
import re

logger = logging.getLogger(__name__)


class ColorConverter:
    """Converts color values to Flutter format"""

    TRANSPARENT = 'Colors.transparent'
    BLACK = 'Colors.black'
    WHITE = 'Colors.white'

    HEX_PATTERN = re.compile(r'^[0-9a-fA-F]+$')

    def convert_color(self, color) -> str:
        """
        Convert a style color to a Flutter Color literal

        Args:
            color: Color value from the builder ('#RRGGBB', 'transparent', ...)

        Returns:
            Flutter Color string. Never raises: anything that is not a hex
            color comes back as black.
        """
        if color is None:
            return self.TRANSPARENT

        try:
            color_str = str(color).strip()
            if not color_str or color_str.lower() == 'transparent':
                return self.TRANSPARENT

            if color_str.startswith('#'):
                return self._hex_to_flutter(color_str)

            logger.debug(f"Unsupported color value {color_str!r}, using black")
            return self.BLACK
        except Exception as e:
            logger.warning(f"Failed to convert color {color!r}: {e}")
            return self.BLACK

    def _hex_to_flutter(self, hex_color: str) -> str:
        """Convert hex color to Flutter Color"""
        hex_color = hex_color.lstrip('#')

        if not self.HEX_PATTERN.match(hex_color):
            return self.BLACK

        # Handle 3-digit hex
        if len(hex_color) == 3:
            hex_color = ''.join([c * 2 for c in hex_color])

        # Add alpha if not present
        if len(hex_color) == 6:
            hex_color = 'FF' + hex_color
        elif len(hex_color) == 8:
            # Move alpha to front for Flutter
            hex_color = hex_color[6:8] + hex_color[0:6]
        else:
            return self.BLACK

        return f"Color(0x{hex_color.upper()})"


_converter = ColorConverter()


def parse_color_to_flutter(color) -> str:
    """Module-level shortcut used by the generators"""
    return _converter.convert_color(color)
