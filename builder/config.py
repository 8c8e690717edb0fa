"""
Configuration settings for app packaging.
"""

import os
from django.conf import settings

DEFAULT_BUNDLE_ID = 'com.visios.nocode'
DEFAULT_APP_VERSION = '1.0.1'
DEFAULT_FLUTTER_SDK_CONSTRAINT = '>=3.0.0 <4.0.0'


class PackagingConfig:
    """Configuration class for packaging settings."""

    def __init__(self):
        self.bundle_id = getattr(
            settings,
            'BUNDLE_ID',
            os.environ.get('BUNDLE_ID', DEFAULT_BUNDLE_ID)
        )

        self.default_app_version = getattr(
            settings,
            'DEFAULT_APP_VERSION',
            os.environ.get('DEFAULT_APP_VERSION', DEFAULT_APP_VERSION)
        )

        self.flutter_sdk_constraint = getattr(
            settings,
            'FLUTTER_SDK_CONSTRAINT',
            DEFAULT_FLUTTER_SDK_CONSTRAINT
        )

        # Paths
        self.output_dir = getattr(
            settings,
            'PACKAGING_OUTPUT_DIR',
            os.path.join(settings.MEDIA_ROOT, 'flutter_projects')
        )
