"""Canonical shapes the screen compiler works on"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import HEADER_TYPES, RESPONSIVE_GEOMETRY_FIELDS
from .property_mapper import PropertyMapper


@dataclass
class Component:
    """One typed, positioned element dropped on a screen"""
    type: str = ''
    props: Dict[str, Any] = field(default_factory=dict)
    position: Dict[str, Any] = field(default_factory=dict)
    size: Dict[str, Any] = field(default_factory=dict)
    responsive: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def type_key(self) -> str:
        return self.type.strip().lower()

    @property
    def is_header(self) -> bool:
        return self.type_key in HEADER_TYPES

    def responsive_value(self, name: str) -> Optional[float]:
        """Responsive fraction for ``name``, None when not defined"""
        return PropertyMapper.parse_number(self.responsive.get(name))

    @property
    def has_responsive_geometry(self) -> bool:
        return any(self.responsive_value(name) is not None for name in RESPONSIVE_GEOMETRY_FIELDS)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.raw)


@dataclass
class Screen:
    """A normalized page: paint-ordered components plus page properties"""
    screen_name: str = 'home'
    original_name: str = 'Home'
    components: List[Component] = field(default_factory=list)
    screen_properties: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'screenName': self.screen_name,
            'originalName': self.original_name,
            'components': [component.to_dict() for component in self.components],
            'screenProperties': self.screen_properties,
            'metadata': self.metadata,
        }


@dataclass
class AppConfig:
    """Everything one packaging request needs; built once, never mutated"""
    app_name: str
    bundle_id: str
    screens: List[Screen]
    version: str
    build_number: str
    build_time: str
    app_icon: Optional[str] = None
    project_id: Optional[str] = None
    template_id: Optional[str] = None

    @property
    def home_screen(self) -> Optional[Screen]:
        return self.screens[0] if self.screens else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'appName': self.app_name,
            'bundleId': self.bundle_id,
            'screens': [screen.to_dict() for screen in self.screens],
            'projectId': self.project_id,
            'templateId': self.template_id,
            'buildTime': self.build_time,
            'appIcon': self.app_icon,
            'version': self.version,
            'buildNumber': self.build_number,
        }
