"""Constants for Flutter screen compilation and project packaging"""

# Component types rendered as the Scaffold app bar instead of a positioned layer
HEADER_TYPES = frozenset({'appheader', 'appbar', 'header', 'topbar'})

# Reference design frame used by legacy pixel layouts
REFERENCE_WIDTH = 360.0
REFERENCE_HEIGHT = 720.0

# Geometry used when a component carries no position/size
DEFAULT_POSITION = {'x': 0, 'y': 0}
DEFAULT_SIZE = {'width': 100, 'height': 30}

# Responsive fields that switch a component to per-axis geometry
RESPONSIVE_GEOMETRY_FIELDS = ('xPercent', 'yPercent', 'widthPercent', 'heightPercent')
RESPONSIVE_FONT_FIELDS = ('fontPercent', 'titleFontPercent')

# Heading levels -> font size
HEADING_SIZES = {
    'h1': 32,
    'h2': 28,
    'h3': 24,
    'h4': 20,
    'h5': 18,
    'h6': 16,
}
DEFAULT_HEADING_LEVEL = 'h1'
UNKNOWN_HEADING_SIZE = 24

# Visual builder icon names -> Material icons
ICON_MAP = {
    'user': 'Icons.person',
    'person': 'Icons.person',
    'home': 'Icons.home',
    'settings': 'Icons.settings',
    'search': 'Icons.search',
    'menu': 'Icons.menu',
    'star': 'Icons.star',
    'heart': 'Icons.favorite',
    'plus': 'Icons.add',
    'add': 'Icons.add',
    'minus': 'Icons.remove',
    'remove': 'Icons.remove',
    'check': 'Icons.check',
    'close': 'Icons.close',
    'x': 'Icons.close',
}
DEFAULT_ICON = 'Icons.star'

# objectFit -> BoxFit
BOX_FIT_MAP = {
    'contain': 'BoxFit.contain',
    'fill': 'BoxFit.fill',
    'cover': 'BoxFit.cover',
}

TEXT_ALIGN_MAP = {
    'center': 'TextAlign.center',
    'right': 'TextAlign.right',
    'left': 'TextAlign.left',
}

# Defaults applied per component type
DEFAULT_APP_NAME = 'Generated App'
DEFAULT_SCREEN_BACKGROUND = '#ffffff'

HEADER_DEFAULTS = {
    'backgroundColor': '#3b82f6',
    'titleColor': '#ffffff',
    'height': 64,
    'minHeight': 44,
    'titleSize': 18,
    'minTitleSize': 12,
}

TEXT_DEFAULTS = {
    'text': 'Sample Text',
    'fontSize': 16,
    'minFontSize': 12,
    'color': '#000000',
}

HEADING_DEFAULTS = {
    'text': 'Heading',
    'color': '#1f2937',
}

BUTTON_DEFAULTS = {
    'text': 'Button',
    'backgroundColor': '#3b82f6',
    'color': '#ffffff',
    'fontSize': 14,
    'minFontSize': 12,
    'borderRadius': 8,
    'borderWidth': 0,
    'paddingHorizontal': 16,
    'paddingVertical': 12,
}

ICON_DEFAULTS = {
    'name': 'star',
    'size': 24,
    'minSize': 16,
    'color': '#6b7280',
}

IMAGE_DEFAULTS = {
    'borderRadius': 8,
    'objectFit': 'cover',
}

CONTAINER_DEFAULTS = {
    'backgroundColor': '#F5F5F5',
    'borderRadius': 8,
    'textColor': '#000000',
    'fontSize': 14,
    'minFontSize': 12,
}

CARD_DEFAULTS = {
    'backgroundColor': '#ffffff',
    'elevation': 2,
    'borderRadius': 8,
    'padding': 16,
    'titleSize': 18,
    'fontSize': 14,
    'minFontSize': 12,
    'titleColor': '#111827',
    'textColor': '#4b5563',
}

# Packaging
PUBSPEC_DEPENDENCIES = {
    'cupertino_icons': '^1.0.2',
    'cached_network_image': '^3.3.0',
    'http': '^1.1.0',
    'path_provider': '^2.1.1',
    'shared_preferences': '^2.2.2',
}

PUBSPEC_DEV_DEPENDENCIES = {
    'flutter_lints': '^2.0.0',
}
