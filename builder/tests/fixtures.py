"""Shared packaging payloads for the builder tests"""

import copy

SCREEN = {
    'name': 'home',
    'originalName': 'Home',
    'content': {
        'droppedComponents': [
            {
                'type': 'AppHeader',
                'props': {'appTitle': 'Test App', 'backgroundColor': '#1f2937'},
            },
            {
                'type': 'Heading',
                'props': {'text': 'Hello', 'level': 'h2'},
                'position': {'x': 24, 'y': 40},
                'size': {'width': 312, 'height': 40},
            },
            {
                'type': 'Button',
                'props': {'text': 'Start'},
                'position': {'x': 24, 'y': 600},
                'size': {'width': 312, 'height': 48},
            },
        ],
        'screenProperties': {'backgroundColor': '#ffffff'},
    },
}

PACKAGE_REQUEST = {
    'template': {'name': 'Starter Template', 'screens': [SCREEN]},
    'deploymentInfo': {
        'appName': 'My Test App',
        'bundleId': 'com.test.app',
        'version': '2.0.0',
        'buildNumber': '42',
    },
    'projectId': 'project-1',
    'templateId': 'template-1',
}


def package_request(**deployment_overrides):
    payload = copy.deepcopy(PACKAGE_REQUEST)
    payload['deploymentInfo'].update(deployment_overrides)
    return payload
