"""Geometry resolution for components placed on the screen stack"""

from dataclasses import dataclass
from typing import Dict, Optional

from .constants import DEFAULT_POSITION, DEFAULT_SIZE, REFERENCE_HEIGHT, REFERENCE_WIDTH
from .property_mapper import PropertyMapper
from .schema import Component

RESPONSIVE = 'responsive'
LEGACY = 'legacy'

# Names the generated body builder binds for legacy scaling
SCALE_X = 'sx'
SCALE_Y = 'sy'


@dataclass(frozen=True)
class AxisValue:
    """One geometry value: a raw pixel amount or a factor of some basis.

    ``basis`` is ``maxWidth``/``maxHeight`` for viewport fractions,
    ``sx``/``sy`` for reference-frame scaled pixels and None for raw pixels.
    """
    value: float
    basis: Optional[str] = None

    def expression(self) -> str:
        if self.basis in ('maxWidth', 'maxHeight'):
            return f'constraints.{self.basis} * {PropertyMapper.map_number(self.value)}'
        if self.basis in (SCALE_X, SCALE_Y):
            return f'{PropertyMapper.map_double(self.value)} * {self.basis}'
        return PropertyMapper.map_double(self.value)

    def evaluate(self, width: float, height: float) -> float:
        if self.basis == 'maxWidth':
            return self.value * width
        if self.basis == 'maxHeight':
            return self.value * height
        if self.basis == SCALE_X:
            return self.value * (width / REFERENCE_WIDTH)
        if self.basis == SCALE_Y:
            return self.value * (height / REFERENCE_HEIGHT)
        return self.value


@dataclass(frozen=True)
class Geometry:
    left: AxisValue
    top: AxisValue
    width: AxisValue
    height: AxisValue
    strategy: str

    @property
    def uses_reference_scale(self) -> bool:
        return self.strategy == LEGACY

    def evaluate(self, width: float, height: float) -> Dict[str, float]:
        """Concrete layout for a ``width`` x ``height`` surface"""
        return {
            'left': self.left.evaluate(width, height),
            'top': self.top.evaluate(width, height),
            'width': self.width.evaluate(width, height),
            'height': self.height.evaluate(width, height),
        }


class LayoutStrategyResolver:
    """Decides where each component sits on the full-viewport stack.

    A component with any responsive geometry field gets per-axis geometry:
    fields with a percent follow the viewport, the others keep their raw
    pixel value unscaled. A component with none of them is scaled as a whole
    from the 360x720 reference frame. The two paths are not equivalent for a
    partially responsive component; existing layouts depend on that.
    """

    def resolve(self, component: Component) -> Geometry:
        x = PropertyMapper.number_or(component.position.get('x'), DEFAULT_POSITION['x'])
        y = PropertyMapper.number_or(component.position.get('y'), DEFAULT_POSITION['y'])
        width = PropertyMapper.number_or(component.size.get('width'), DEFAULT_SIZE['width'])
        height = PropertyMapper.number_or(component.size.get('height'), DEFAULT_SIZE['height'])

        if component.has_responsive_geometry:
            return Geometry(
                left=self._axis(component.responsive_value('xPercent'), x, 'maxWidth'),
                top=self._axis(component.responsive_value('yPercent'), y, 'maxHeight'),
                width=self._axis(component.responsive_value('widthPercent'), width, 'maxWidth'),
                height=self._axis(component.responsive_value('heightPercent'), height, 'maxHeight'),
                strategy=RESPONSIVE,
            )

        return Geometry(
            left=AxisValue(x, SCALE_X),
            top=AxisValue(y, SCALE_Y),
            width=AxisValue(width, SCALE_X),
            height=AxisValue(height, SCALE_Y),
            strategy=LEGACY,
        )

    @staticmethod
    def _axis(percent: Optional[float], pixels: float, basis: str) -> AxisValue:
        if percent is not None:
            return AxisValue(percent, basis)
        return AxisValue(pixels)

    def wrap(self, geometry: Geometry, child_code: str, indent: int) -> str:
        """Wrap a widget generated at ``indent + 1`` in a Positioned"""
        spaces = '  ' * indent
        return (
            f"{spaces}Positioned(\n"
            f"{spaces}  left: {geometry.left.expression()},\n"
            f"{spaces}  top: {geometry.top.expression()},\n"
            f"{spaces}  width: {geometry.width.expression()},\n"
            f"{spaces}  height: {geometry.height.expression()},\n"
            f"{spaces}  child: {child_code.lstrip()},\n"
            f"{spaces})"
        )
