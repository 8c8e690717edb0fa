"""Flutter project builder that packages a builder template into a project tree"""

import io
import json
import logging
import re
import zipfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from django.utils import timezone

from builder.config import PackagingConfig
from .constants import DEFAULT_APP_NAME, PUBSPEC_DEPENDENCIES, PUBSPEC_DEV_DEPENDENCIES
from .flutter_generator import FlutterGenerator
from .property_mapper import PropertyMapper
from .schema import AppConfig
from .schema_normalizer import SchemaNormalizer
from .template_loader import TemplateLoader

logger = logging.getLogger(__name__)


def to_package_name(app_name: str) -> str:
    """pubspec package name: lower case, anything outside [a-z0-9] becomes '_'"""
    return re.sub(r'[^a-z0-9]', '_', app_name.lower())


def escape_dart_multiline(text: str) -> str:
    """Make text safe inside a ''' Dart string"""
    return text.replace('\\', '\\\\').replace('$', '\\$').replace("'''", "\\'\\'\\'")


class FlutterProjectBuilder:
    """Builds a complete Flutter project from a packaging request.

    ``project_data`` is the request body sent by the visual builder:
    ``{template: {name, screens}, deploymentInfo: {...}, projectId, templateId}``.
    """

    def __init__(self, project_data: Dict[str, Any], config: Optional[PackagingConfig] = None):
        self.project_data = project_data if isinstance(project_data, dict) else {}
        self.config = config or PackagingConfig()
        self.normalizer = SchemaNormalizer()
        self.template_loader = TemplateLoader()
        self.app_config = self.build_app_config()
        self.output_dir = None
        self.build_errors: List[str] = []

    def build_app_config(self) -> AppConfig:
        template = self.project_data.get('template')
        template = template if isinstance(template, dict) else {}
        deployment = self.project_data.get('deploymentInfo')
        deployment = deployment if isinstance(deployment, dict) else {}

        screens = self.normalizer.normalize_screens(template.get('screens'))
        for index, screen in enumerate(screens, start=1):
            logger.info(f"Screen {index}: {screen.screen_name} ({len(screen.components)} components)")
        if not screens:
            logger.warning("No screens found in template data")

        build_time = timezone.now()
        app_config = AppConfig(
            app_name=str(PropertyMapper.first_present(
                deployment.get('appName'), template.get('name'), default=DEFAULT_APP_NAME)),
            bundle_id=str(PropertyMapper.first_present(
                deployment.get('bundleId'), default=self.config.bundle_id)),
            screens=screens,
            version=str(PropertyMapper.first_present(
                deployment.get('version'), default=self.config.default_app_version)),
            build_number=str(PropertyMapper.first_present(
                deployment.get('buildNumber'), default=int(build_time.timestamp()))),
            build_time=build_time.isoformat(),
            app_icon=deployment.get('appIcon') or None,
            project_id=self.project_data.get('projectId'),
            template_id=self.project_data.get('templateId'),
        )
        logger.info(
            f"App configuration: {app_config.app_name} ({app_config.bundle_id}) "
            f"{app_config.version}+{app_config.build_number}, {len(screens)} screens"
        )
        return app_config

    def generate_main_dart(self) -> str:
        return FlutterGenerator(self.app_config.app_name).generate_main_dart(self.app_config)

    def generate_files(self) -> Dict[str, str]:
        """Generate every project file as ``{relative path: content}``"""
        app_config = self.app_config
        config_json = json.dumps(app_config.to_dict(), indent=2)
        context = {
            'app_name': app_config.app_name,
            'comment_name': ' '.join(app_config.app_name.split()),
            'package_name': to_package_name(app_config.app_name),
            'bundle_id': app_config.bundle_id,
            'version': app_config.version,
            'build_number': app_config.build_number,
            'build_time': app_config.build_time,
            'sdk_constraint': self.config.flutter_sdk_constraint,
            'dependencies': list(PUBSPEC_DEPENDENCIES.items()),
            'dev_dependencies': list(PUBSPEC_DEV_DEPENDENCIES.items()),
            'config_json': escape_dart_multiline(config_json),
        }
        render = self.template_loader.render_template

        files = {
            'pubspec.yaml': render('pubspec_yaml', context),
            'lib/main.dart': self.generate_main_dart(),
            'lib/screens_data.dart': render('screens_data_dart', context),
            'assets/app_config.json': config_json,
            'ios/Runner/Info.plist': render('info_plist', context),
            'android/app/src/main/AndroidManifest.xml': render('android_manifest', context),
            '.gitignore': render('gitignore', context),
            'README.md': render('readme', context),
        }
        logger.info(f"Generated {len(files)} project files for {app_config.app_name}")
        return files

    def build_zip(self) -> bytes:
        """Project tree as an in-memory ZIP archive"""
        zip_buffer = io.BytesIO()
        with zipfile.ZipFile(zip_buffer, 'w', zipfile.ZIP_DEFLATED) as zip_file:
            for file_path, content in self.generate_files().items():
                zip_file.writestr(file_path, content)
        return zip_buffer.getvalue()

    def write_project(self, output_path: Optional[str] = None) -> Tuple[bool, str, List[str]]:
        """
        Write the project tree to disk

        Returns:
            Tuple of (success: bool, output_path: str, errors: List[str])
        """
        try:
            if output_path:
                self.output_dir = Path(output_path)
            else:
                stamp = timezone.now().strftime('%Y%m%d_%H%M%S')
                package_name = to_package_name(self.app_config.app_name)
                self.output_dir = Path(self.config.output_dir) / f'{package_name}_{stamp}'

            for file_path, content in self.generate_files().items():
                self._write_file(file_path, content)

            logger.info(f"Project written to {self.output_dir}")
            return True, str(self.output_dir), self.build_errors

        except OSError as e:
            error_msg = f"Failed to write project: {e}"
            self.build_errors.append(error_msg)
            logger.error(error_msg)
            return False, "", self.build_errors

    def _write_file(self, relative_path: str, content: str):
        target = self.output_dir / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding='utf-8')
