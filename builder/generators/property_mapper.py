"""Property mapping utilities for converting builder props to Flutter literals"""

import math
import re
from typing import Any, Iterable, Optional

from builder.utils.color_converter import parse_color_to_flutter
from .constants import BOX_FIT_MAP, DEFAULT_ICON, ICON_MAP, TEXT_ALIGN_MAP

NUMBER_PREFIX = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


class PropertyMapper:
    """Maps component props to Flutter widget property values.

    Every mapper is total: unknown or malformed input falls back to a
    documented default instead of raising.
    """

    @staticmethod
    def is_present(value: Any) -> bool:
        """A prop counts as given unless it is missing, null or an empty string"""
        return value is not None and value != ''

    @staticmethod
    def first_present(*values: Any, default: Any = None) -> Any:
        """Return the first given value in priority order, else ``default``"""
        for value in values:
            if PropertyMapper.is_present(value):
                return value
        return default

    @staticmethod
    def parse_number(value: Any) -> Optional[float]:
        """Parse a loosely typed numeric prop.

        Accepts numbers and numeric strings with trailing units ("16px").
        Returns None for anything unparsable, booleans and non-finite values.
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            number = float(value)
        else:
            match = NUMBER_PREFIX.match(str(value))
            if not match:
                return None
            try:
                number = float(match.group(0))
            except ValueError:
                return None

        if math.isnan(number) or math.isinf(number):
            return None
        return number

    @staticmethod
    def number_or(value: Any, default: float, floor: Optional[float] = None) -> float:
        """Parsed number, ``default`` when unparsable, raised to ``floor`` if given"""
        number = PropertyMapper.parse_number(value)
        if number is None:
            number = float(default)
        if floor is not None:
            number = max(number, float(floor))
        return number

    @staticmethod
    def to_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            return value.strip().lower() in ('true', '1', 'yes', 'on')
        return False

    @staticmethod
    def map_color(color: Any) -> str:
        return parse_color_to_flutter(color)

    @staticmethod
    def map_icon(name: Any) -> str:
        """Convert a builder icon name to a Material icon, star when unknown"""
        if not isinstance(name, str):
            return DEFAULT_ICON
        return ICON_MAP.get(name.strip().lower(), DEFAULT_ICON)

    @staticmethod
    def map_box_fit(object_fit: Any) -> str:
        key = str(object_fit).strip().lower() if object_fit is not None else ''
        return BOX_FIT_MAP.get(key, 'BoxFit.cover')

    @staticmethod
    def map_text_align(text_align: Any) -> str:
        key = str(text_align).strip().lower() if text_align is not None else ''
        return TEXT_ALIGN_MAP.get(key, 'TextAlign.left')

    @staticmethod
    def is_bold(font_weight: Any, bold_weights: Iterable[str]) -> bool:
        if font_weight is None or isinstance(font_weight, bool):
            return False
        if isinstance(font_weight, (int, float)):
            number = PropertyMapper.parse_number(font_weight)
            return number is not None and PropertyMapper.map_number(number) in bold_weights
        return str(font_weight).strip().lower() in bold_weights

    @staticmethod
    def map_value(value: Any) -> str:
        """Quote a value as a single-quoted Dart string literal"""
        text = '' if value is None else str(value)
        text = (
            text.replace('\\', '\\\\')
            .replace("'", "\\'")
            .replace('$', '\\$')
            .replace('\r', '\\r')
            .replace('\n', '\\n')
        )
        return f"'{text}'"

    @staticmethod
    def map_number(value: float) -> str:
        """Dart numeric literal, integral values without a fraction"""
        value = float(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)

    @staticmethod
    def map_double(value: float) -> str:
        """Dart double literal, always carrying a fraction"""
        value = float(value)
        if value.is_integer():
            return f'{int(value)}.0'
        return repr(value)

    @staticmethod
    def map_edge_insets(padding_all: Optional[float] = None,
                        horizontal: Optional[float] = None,
                        vertical: Optional[float] = None) -> str:
        """Uniform padding wins over the horizontal/vertical pair"""
        if padding_all is not None:
            return f'EdgeInsets.all({PropertyMapper.map_number(padding_all)})'
        return (f'EdgeInsets.symmetric('
                f'horizontal: {PropertyMapper.map_number(horizontal or 0)}, '
                f'vertical: {PropertyMapper.map_number(vertical or 0)})')

    @staticmethod
    def map_border_radius(radius: float) -> str:
        return f'BorderRadius.circular({PropertyMapper.map_number(radius)})'

    @staticmethod
    def viewport_font_size(percent: float) -> str:
        """Font size expressed relative to the device width"""
        return f'MediaQuery.of(context).size.width * {PropertyMapper.map_number(percent)}'
