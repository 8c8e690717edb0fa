# File: builder/generators/widget_generator.py

import logging
import textwrap
from typing import Callable, Dict, Optional

from .constants import (
    BUTTON_DEFAULTS,
    CARD_DEFAULTS,
    CONTAINER_DEFAULTS,
    DEFAULT_HEADING_LEVEL,
    HEADING_DEFAULTS,
    HEADING_SIZES,
    ICON_DEFAULTS,
    IMAGE_DEFAULTS,
    TEXT_DEFAULTS,
    UNKNOWN_HEADING_SIZE,
)
from .layout_resolver import LayoutStrategyResolver
from .property_mapper import PropertyMapper
from .schema import Component

logger = logging.getLogger(__name__)

Emitter = Callable[[Component], str]


class WidgetGenerator:
    """Generates Flutter widget code for visual builder components"""

    def __init__(self):
        self.property_mapper = PropertyMapper()
        self.layout_resolver = LayoutStrategyResolver()
        self.uses_reference_scale = False
        self.emitters: Dict[str, Emitter] = {
            'text': self._generate_text,
            'heading': self._generate_heading,
            'button': self._generate_button,
            'card': self._generate_card,
            'icon': self._generate_icon,
            'image': self._generate_image,
            'container': self._generate_container,
        }

    def register(self, component_type: str, emitter: Emitter):
        """Add or replace the emitter for a component type"""
        self.emitters[component_type.lower()] = emitter

    def generate_component(self, component: Component, indent: int = 0) -> Optional[str]:
        """Generate a component wrapped in its Positioned, None for header components"""
        widget_code = self.generate_widget(component, indent + 1)
        if widget_code is None:
            return None

        geometry = self.layout_resolver.resolve(component)
        if geometry.uses_reference_scale:
            self.uses_reference_scale = True
        return self.layout_resolver.wrap(geometry, widget_code, indent)

    def generate_widget(self, component: Component, indent: int = 0) -> Optional[str]:
        """Generate the bare widget for a component"""
        if component.is_header:
            # Rendered through Scaffold.appBar
            return None

        emitter = self.emitters.get(component.type_key, self._generate_placeholder)
        return textwrap.indent(emitter(component), '  ' * indent)

    def _font_size(self, component: Component, fixed: float) -> str:
        """Viewport-relative size when fontPercent is set, else the fixed size"""
        percent = component.responsive_value('fontPercent')
        if percent is not None:
            return self.property_mapper.viewport_font_size(percent)
        return self.property_mapper.map_number(fixed)

    def _generate_placeholder(self, component: Component) -> str:
        label = component.type or 'Unknown'
        logger.debug(f"No emitter for component type {label!r}, rendering placeholder")
        return f"""Container(
  child: Text({self.property_mapper.map_value(label)}),
)"""

    def _generate_text(self, component: Component) -> str:
        """Generate Text widget"""
        props = component.props
        pm = self.property_mapper

        text = pm.first_present(props.get('text'), default=TEXT_DEFAULTS['text'])
        font_size = pm.number_or(props.get('fontSize'), TEXT_DEFAULTS['fontSize'],
                                 floor=TEXT_DEFAULTS['minFontSize'])
        color = pm.map_color(pm.first_present(props.get('color'), default=TEXT_DEFAULTS['color']))
        weight = 'FontWeight.bold' if pm.is_bold(props.get('fontWeight'), ('bold', '700')) else 'FontWeight.normal'
        font_style = 'FontStyle.italic' if props.get('fontStyle') == 'italic' else 'FontStyle.normal'

        return f"""Text(
  {pm.map_value(text)},
  textAlign: {pm.map_text_align(props.get('textAlign'))},
  style: TextStyle(
    fontSize: {self._font_size(component, font_size)},
    color: {color},
    fontWeight: {weight},
    fontStyle: {font_style},
  ),
)"""

    def _generate_heading(self, component: Component) -> str:
        """Generate heading Text widget"""
        props = component.props
        pm = self.property_mapper

        text = pm.first_present(props.get('text'), default=HEADING_DEFAULTS['text'])
        level = pm.first_present(props.get('level'), default=DEFAULT_HEADING_LEVEL)
        if isinstance(level, (int, float)) and not isinstance(level, bool):
            level = f'h{int(level)}'
        font_size = HEADING_SIZES.get(str(level).strip().lower(), UNKNOWN_HEADING_SIZE)
        color = pm.map_color(pm.first_present(props.get('color'), default=HEADING_DEFAULTS['color']))
        weight = 'FontWeight.bold' if props.get('fontWeight') == 'bold' else 'FontWeight.w600'

        return f"""Text(
  {pm.map_value(text)},
  style: TextStyle(
    fontSize: {self._font_size(component, font_size)},
    color: {color},
    fontWeight: {weight},
  ),
)"""

    def _button_padding(self, props: Dict) -> str:
        pm = self.property_mapper

        def given(key):
            return key in props and props[key] is not None

        if given('padding'):
            return pm.map_edge_insets(padding_all=max(pm.number_or(props['padding'], 0), 0))

        horizontal = (max(pm.number_or(props['paddingHorizontal'], 0), 0)
                      if given('paddingHorizontal') else BUTTON_DEFAULTS['paddingHorizontal'])
        vertical = (max(pm.number_or(props['paddingVertical'], 0), 0)
                    if given('paddingVertical') else BUTTON_DEFAULTS['paddingVertical'])
        return pm.map_edge_insets(horizontal=horizontal, vertical=vertical)

    def _generate_button(self, component: Component) -> str:
        """Generate ElevatedButton widget"""
        props = component.props
        pm = self.property_mapper

        text = pm.first_present(props.get('text'), default=BUTTON_DEFAULTS['text'])
        background = pm.first_present(props.get('backgroundColor'), default=BUTTON_DEFAULTS['backgroundColor'])
        text_color = pm.first_present(props.get('color'), props.get('textColor'), default=BUTTON_DEFAULTS['color'])
        border_color = pm.first_present(props.get('borderColor'), default=background)
        font_size = pm.number_or(props.get('fontSize'), BUTTON_DEFAULTS['fontSize'],
                                 floor=BUTTON_DEFAULTS['minFontSize'])
        weight = ('FontWeight.bold' if pm.is_bold(props.get('fontWeight'), ('bold', '600', '700'))
                  else 'FontWeight.normal')
        border_radius = pm.number_or(props.get('borderRadius'), BUTTON_DEFAULTS['borderRadius'])
        border_width = pm.number_or(props.get('borderWidth'), BUTTON_DEFAULTS['borderWidth'])

        return f"""ElevatedButton(
  onPressed: () {{
    // Add button action here
  }},
  style: ElevatedButton.styleFrom(
    backgroundColor: {pm.map_color(background)},
    foregroundColor: {pm.map_color(text_color)},
    side: BorderSide(
      color: {pm.map_color(border_color)},
      width: {pm.map_number(border_width)},
    ),
    shape: RoundedRectangleBorder(
      borderRadius: {pm.map_border_radius(border_radius)},
    ),
    padding: {self._button_padding(props)},
  ),
  child: Text(
    {pm.map_value(text)},
    style: TextStyle(
      fontSize: {self._font_size(component, font_size)},
      fontWeight: {weight},
    ),
  ),
)"""

    def _generate_card(self, component: Component) -> str:
        """Generate Card widget with optional title and body text"""
        props = component.props
        pm = self.property_mapper

        background = pm.first_present(props.get('backgroundColor'), default=CARD_DEFAULTS['backgroundColor'])
        elevation = max(pm.number_or(props.get('elevation'), CARD_DEFAULTS['elevation']), 0)
        border_radius = pm.number_or(props.get('borderRadius'), CARD_DEFAULTS['borderRadius'])
        padding = max(pm.number_or(props.get('padding'), CARD_DEFAULTS['padding']), 0)
        title = pm.first_present(props.get('title'), default=None)
        body = pm.first_present(props.get('text'), props.get('content'), props.get('description'), default=None)

        children = []
        if title is not None:
            title_size = pm.number_or(props.get('titleSize'), CARD_DEFAULTS['titleSize'],
                                      floor=CARD_DEFAULTS['minFontSize'])
            title_color = pm.first_present(props.get('titleColor'), default=CARD_DEFAULTS['titleColor'])
            children.append(f"""Text(
  {pm.map_value(title)},
  style: TextStyle(
    fontSize: {self._font_size(component, title_size)},
    color: {pm.map_color(title_color)},
    fontWeight: FontWeight.w600,
  ),
)""")
        if body is not None:
            if children:
                children.append('SizedBox(height: 8)')
            body_size = pm.number_or(props.get('fontSize'), CARD_DEFAULTS['fontSize'],
                                     floor=CARD_DEFAULTS['minFontSize'])
            text_color = pm.first_present(props.get('textColor'), props.get('color'),
                                          default=CARD_DEFAULTS['textColor'])
            children.append(f"""Text(
  {pm.map_value(body)},
  style: TextStyle(
    fontSize: {pm.map_number(body_size)},
    color: {pm.map_color(text_color)},
  ),
)""")

        child = ''
        if children:
            items = ',\n'.join(textwrap.indent(code, '        ') for code in children)
            child = f"""
  child: Padding(
    padding: EdgeInsets.all({pm.map_number(padding)}),
    child: Column(
      crossAxisAlignment: CrossAxisAlignment.start,
      mainAxisSize: MainAxisSize.min,
      children: [
{items},
      ],
    ),
  ),"""

        return f"""Card(
  color: {pm.map_color(background)},
  elevation: {pm.map_number(elevation)},
  margin: EdgeInsets.zero,
  shape: RoundedRectangleBorder(
    borderRadius: {pm.map_border_radius(border_radius)},
  ),{child}
)"""

    def _generate_icon(self, component: Component) -> str:
        """Generate Icon widget"""
        props = component.props
        pm = self.property_mapper

        name = pm.first_present(props.get('name'), default=ICON_DEFAULTS['name'])
        size = pm.number_or(props.get('size'), ICON_DEFAULTS['size'], floor=ICON_DEFAULTS['minSize'])
        color = pm.first_present(props.get('color'), default=ICON_DEFAULTS['color'])

        return f"""Icon(
  {pm.map_icon(name)},
  size: {pm.map_number(size)},
  color: {pm.map_color(color)},
)"""

    def _generate_image(self, component: Component) -> str:
        """Generate network image, or a placeholder when there is no source"""
        props = component.props
        pm = self.property_mapper

        radius = pm.map_border_radius(pm.number_or(props.get('borderRadius'), IMAGE_DEFAULTS['borderRadius']))
        src = props.get('src')
        src = src.strip() if isinstance(src, str) else ''

        if not src:
            return f"""Container(
  decoration: BoxDecoration(
    color: Colors.grey[300],
    borderRadius: {radius},
  ),
  child: Icon(
    Icons.broken_image,
    size: 32,
    color: Colors.grey[600],
  ),
)"""

        box_fit = pm.map_box_fit(pm.first_present(props.get('objectFit'), default=IMAGE_DEFAULTS['objectFit']))

        return f"""ClipRRect(
  borderRadius: {radius},
  child: Image.network(
    {pm.map_value(src)},
    fit: {box_fit},
    loadingBuilder: (context, child, loadingProgress) {{
      if (loadingProgress == null) return child;
      return Container(
        decoration: BoxDecoration(
          color: Colors.grey[300],
          borderRadius: {radius},
        ),
        child: Center(
          child: CircularProgressIndicator(
            value: loadingProgress.expectedTotalBytes != null
                ? loadingProgress.cumulativeBytesLoaded /
                    loadingProgress.expectedTotalBytes!
                : null,
          ),
        ),
      );
    }},
    errorBuilder: (context, error, stackTrace) {{
      return Container(
        decoration: BoxDecoration(
          color: Colors.grey[300],
          borderRadius: {radius},
        ),
        child: Column(
          mainAxisAlignment: MainAxisAlignment.center,
          children: [
            Icon(
              Icons.broken_image,
              size: 32,
              color: Colors.grey[600],
            ),
            SizedBox(height: 4),
            Text(
              'Image not available',
              style: TextStyle(
                fontSize: 12,
                color: Colors.grey[600],
              ),
            ),
          ],
        ),
      );
    }},
  ),
)"""

    def _generate_container(self, component: Component) -> str:
        """Generate Container widget with an optional centered label"""
        props = component.props
        pm = self.property_mapper

        background = pm.first_present(props.get('backgroundColor'), default=CONTAINER_DEFAULTS['backgroundColor'])
        radius = pm.number_or(props.get('borderRadius'), CONTAINER_DEFAULTS['borderRadius'])
        text = props.get('text')

        child = ''
        if pm.is_present(text):
            text_color = pm.first_present(props.get('textColor'), default=CONTAINER_DEFAULTS['textColor'])
            font_size = pm.number_or(props.get('fontSize'), CONTAINER_DEFAULTS['fontSize'],
                                     floor=CONTAINER_DEFAULTS['minFontSize'])
            child = f"""
  child: Center(
    child: Text(
      {pm.map_value(text)},
      style: TextStyle(
        color: {pm.map_color(text_color)},
        fontSize: {pm.map_number(font_size)},
      ),
    ),
  ),"""

        return f"""Container(
  decoration: BoxDecoration(
    color: {pm.map_color(background)},
    borderRadius: {pm.map_border_radius(radius)},
  ),{child}
)"""
