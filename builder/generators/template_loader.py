"""Template loader for the static files of a packaged Flutter project"""

from pathlib import Path
from typing import Dict, Optional

from django.template import Context, Template

# Rendered with HTML/XML escaping switched on
XML_TEMPLATES = {'info_plist', 'android_manifest'}


class TemplateLoader:
    """Loads and renders project boilerplate templates"""

    # Default project templates
    TEMPLATES = {
        'pubspec_yaml': '''name: {{ package_name }}
description: A Flutter app generated by App Creator
version: {{ version }}+{{ build_number }}

environment:
  sdk: '{{ sdk_constraint }}'
  flutter: ">=3.0.0"

dependencies:
  flutter:
    sdk: flutter
{% for name, version in dependencies %}  {{ name }}: {{ version }}
{% endfor %}
dev_dependencies:
  flutter_test:
    sdk: flutter
{% for name, version in dev_dependencies %}  {{ name }}: {{ version }}
{% endfor %}
flutter:
  uses-material-design: true
  assets:
    - assets/
''',

        'screens_data_dart': '''// Generated screens data for {{ comment_name }}
import 'dart:convert';

class ScreensData {
  static const String appConfigJson = \'\'\'{{ config_json }}\'\'\';

  static Map<String, dynamic> get appConfig {
    return json.decode(appConfigJson);
  }

  static List<dynamic> get screens {
    return appConfig['screens'] ?? [];
  }

  static String get appName {
    return appConfig['appName'] ?? 'My App';
  }

  static String get bundleId {
    return appConfig['bundleId'] ?? 'com.example.app';
  }

  static String get projectId {
    return appConfig['projectId'] ?? '';
  }

  static String get templateId {
    return appConfig['templateId'] ?? '';
  }
}
''',

        'info_plist': '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
  <key>CFBundleDevelopmentRegion</key>
  <string>en</string>
  <key>CFBundleDisplayName</key>
  <string>{{ app_name }}</string>
  <key>CFBundleExecutable</key>
  <string>Runner</string>
  <key>CFBundleIdentifier</key>
  <string>{{ bundle_id }}</string>
  <key>CFBundleInfoDictionaryVersion</key>
  <string>6.0</string>
  <key>CFBundleName</key>
  <string>{{ app_name }}</string>
  <key>CFBundlePackageType</key>
  <string>APPL</string>
  <key>CFBundleShortVersionString</key>
  <string>$(MARKETING_VERSION)</string>
  <key>CFBundleVersion</key>
  <string>$(CURRENT_PROJECT_VERSION)</string>
  <key>LSRequiresIPhoneOS</key>
  <true/>
  <key>UILaunchStoryboardName</key>
  <string>LaunchScreen</string>
  <key>UIMainStoryboardFile</key>
  <string>Main</string>
  <key>UISupportedInterfaceOrientations</key>
  <array>
    <string>UIInterfaceOrientationPortrait</string>
    <string>UIInterfaceOrientationLandscapeLeft</string>
    <string>UIInterfaceOrientationLandscapeRight</string>
  </array>
  <key>UIViewControllerBasedStatusBarAppearance</key>
  <false/>
  <key>CADisableMinimumFrameDurationOnPhone</key>
  <true/>
  <key>UIApplicationSupportsIndirectInputEvents</key>
  <true/>
  <key>CFBundleIconName</key>
  <string>AppIcon</string>
</dict>
</plist>
''',

        'android_manifest': '''<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    package="{{ bundle_id }}">
    <uses-permission android:name="android.permission.INTERNET"/>
    <application
        android:label="{{ app_name }}"
        android:name="${applicationName}"
        android:icon="@mipmap/ic_launcher">
        <activity
            android:name=".MainActivity"
            android:exported="true"
            android:launchMode="singleTop"
            android:theme="@style/LaunchTheme"
            android:configChanges="orientation|keyboardHidden|keyboard|screenSize|smallestScreenSize|locale|layoutDirection|fontScale|screenLayout|density|uiMode"
            android:hardwareAccelerated="true"
            android:windowSoftInputMode="adjustResize">
            <intent-filter>
                <action android:name="android.intent.action.MAIN"/>
                <category android:name="android.intent.category.LAUNCHER"/>
            </intent-filter>
        </activity>
        <meta-data
            android:name="flutterEmbedding"
            android:value="2" />
    </application>
</manifest>
''',

        'gitignore': '''# Miscellaneous
*.class
*.log
*.pyc
*.swp
.DS_Store
.atom/
.buildlog/
.history
.svn/

# IntelliJ related
*.iml
*.ipr
*.iws
.idea/

# Flutter/Dart/Pub related
**/doc/api/
.dart_tool/
.flutter-plugins
.flutter-plugins-dependencies
.packages
.pub-cache/
.pub/
/build/

# iOS
**/ios/Pods/
**/ios/.symlinks/
''',

        'readme': '''# {{ app_name }}

Flutter application generated by App Creator.

- Bundle ID: `{{ bundle_id }}`
- Version: {{ version }} ({{ build_number }})
- Generated: {{ build_time }}

## Getting Started

```
flutter pub get
flutter run
```
''',
    }

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template loader

        Args:
            template_dir: Optional directory containing custom templates
        """
        self.template_dir = template_dir
        self.custom_templates = {}

        if template_dir and template_dir.exists():
            self._load_custom_templates()

    def _load_custom_templates(self):
        """Load custom templates from directory"""
        for template_file in self.template_dir.glob('*.template'):
            template_name = template_file.stem
            with open(template_file, 'r', encoding='utf-8') as f:
                self.custom_templates[template_name] = f.read()

    def get_template(self, template_name: str) -> Optional[str]:
        # Check custom templates first
        if template_name in self.custom_templates:
            return self.custom_templates[template_name]
        return self.TEMPLATES.get(template_name)

    def render_template(self, template_name: str, context: Dict) -> str:
        """
        Render a template with context

        Args:
            template_name: Name of the template
            context: Context dictionary for rendering

        Returns:
            Rendered template string
        """
        template_content = self.get_template(template_name)
        if not template_content:
            raise ValueError(f"Template '{template_name}' not found")

        template = Template(template_content)
        autoescape = template_name in XML_TEMPLATES
        return template.render(Context(context, autoescape=autoescape))
