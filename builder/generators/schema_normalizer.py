"""Normalization of raw visual builder screen payloads"""

import logging
from typing import Any, Dict, List, Optional

from .property_mapper import PropertyMapper
from .schema import Component, Screen

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


class SchemaNormalizer:
    """Turns the screen shapes the builder has produced over time into a Screen.

    Screens arrive either with ``content.droppedComponents`` (canvas saves) or
    with a flat ``components`` list (page JSON). This is the only place that
    knows about both; nothing here raises on bad input.
    """

    def normalize_screens(self, raw_screens: Any) -> List[Screen]:
        if not isinstance(raw_screens, list):
            return []
        return [self.normalize_screen(raw) for raw in raw_screens]

    def normalize_screen(self, raw: Any) -> Screen:
        screen = _as_dict(raw)
        content = _as_dict(screen.get('content'))

        dropped = content.get('droppedComponents')
        if isinstance(dropped, list):
            raw_components = dropped
            source = 'content.droppedComponents'
        elif isinstance(screen.get('components'), list):
            raw_components = screen['components']
            source = 'components'
        else:
            raw_components = []
            source = None

        components = []
        for index, raw_component in enumerate(raw_components):
            component = self.normalize_component(raw_component)
            if component is None:
                logger.warning(f"Skipping component #{index}: expected an object, got {type(raw_component).__name__}")
                continue
            components.append(component)

        if isinstance(screen.get('screenProperties'), dict):
            screen_properties = screen['screenProperties']
        else:
            screen_properties = _as_dict(content.get('screenProperties'))

        normalized = Screen(
            screen_name=str(PropertyMapper.first_present(
                screen.get('name'), screen.get('screenName'), default='home')),
            original_name=str(PropertyMapper.first_present(
                screen.get('originalName'), screen.get('name'), default='Home')),
            components=components,
            screen_properties=screen_properties,
            metadata=_as_dict(screen.get('metadata')),
        )

        if source:
            logger.debug(f"Screen {normalized.screen_name}: {len(components)} components from {source}")
        else:
            logger.debug(f"Screen {normalized.screen_name}: no components found")
        return normalized

    def normalize_component(self, raw: Any) -> Optional[Component]:
        if not isinstance(raw, dict):
            return None

        component_type = raw.get('type')
        return Component(
            type=component_type if isinstance(component_type, str) else '',
            props=_as_dict(raw.get('props')),
            position=_as_dict(raw.get('position')),
            size=_as_dict(raw.get('size')),
            responsive=_as_dict(raw.get('responsive')),
            raw=raw,
        )
