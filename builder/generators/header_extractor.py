"""Pulls the app header component out of a screen's component list"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import DEFAULT_APP_NAME, HEADER_DEFAULTS
from .property_mapper import PropertyMapper
from .schema import Component

logger = logging.getLogger(__name__)


@dataclass
class HeaderFields:
    title: str
    background_color: str
    title_color: str
    height: float
    title_font_size: str
    show_back_button: bool = False
    show_menu_button: bool = False


@dataclass
class HeaderExtraction:
    header: Optional[HeaderFields]
    positioned: List[Component] = field(default_factory=list)
    header_count: int = 0


class AppHeaderExtractor:
    """Separates header-lexicon components from the positioned stack.

    The first header component supplies the app bar fields. Every header
    component is removed from the stack, so extra headers are dropped.
    """

    def __init__(self, app_name: Optional[str] = None):
        self.app_name = app_name

    def extract(self, components: List[Component]) -> HeaderExtraction:
        headers = [component for component in components if component.is_header]
        positioned = [component for component in components if not component.is_header]

        if len(headers) > 1:
            logger.warning(f"{len(headers)} header components found; only the first is rendered as the app bar")

        header = self.build_header_fields(headers[0]) if headers else None
        return HeaderExtraction(header=header, positioned=positioned, header_count=len(headers))

    def build_header_fields(self, component: Component) -> HeaderFields:
        props = component.props

        title_percent = component.responsive_value('titleFontPercent')
        if title_percent is not None:
            title_font_size = PropertyMapper.viewport_font_size(title_percent)
        else:
            size = PropertyMapper.parse_number(props.get('titleSize'))
            if size is None:
                size = PropertyMapper.number_or(props.get('fontSize'), HEADER_DEFAULTS['titleSize'])
            title_font_size = PropertyMapper.map_number(max(size, HEADER_DEFAULTS['minTitleSize']))

        return HeaderFields(
            title=str(PropertyMapper.first_present(
                props.get('appTitle'), self.app_name, default=DEFAULT_APP_NAME)),
            background_color=str(PropertyMapper.first_present(
                props.get('backgroundColor'), default=HEADER_DEFAULTS['backgroundColor'])),
            title_color=str(PropertyMapper.first_present(
                props.get('titleColor'), default=HEADER_DEFAULTS['titleColor'])),
            height=PropertyMapper.number_or(
                props.get('height'), HEADER_DEFAULTS['height'], floor=HEADER_DEFAULTS['minHeight']),
            title_font_size=title_font_size,
            show_back_button=PropertyMapper.to_bool(props.get('showBackButton')),
            show_menu_button=PropertyMapper.to_bool(props.get('showMenuButton')),
        )
