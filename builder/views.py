# File: builder/views.py

import logging

from django.http import HttpResponse
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from builder.generators.flutter_generator import compile_screen
from builder.generators.project_builder import FlutterProjectBuilder, to_package_name
from builder.serializers import CompileScreenSerializer, PackageRequestSerializer

logger = logging.getLogger(__name__)


class PackagerViewSet(viewsets.ViewSet):
    """Compiles builder screens and packages them as Flutter projects"""
    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=['post'], url_path='compile-screen')
    def compile_screen(self, request):
        """
        Compile a single screen to lib/main.dart

        Request body:
        {
            "screen": {...},      // raw screen JSON from the builder
            "appName": "My App"   // optional, used for titles
        }
        """
        serializer = CompileScreenSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        result = compile_screen(data['screen'], app_name=data.get('appName'))

        return Response({
            'screenName': result.screen_name,
            'code': result.code,
            'lineCount': result.line_count,
            'componentCount': result.component_count,
            'positionedCount': result.positioned_count,
            'hasAppBar': result.has_app_bar,
            'isFallback': result.is_fallback,
        })

    @action(detail=False, methods=['post'])
    def package(self, request):
        """Generate every file of the Flutter project"""
        builder = self._get_builder(request)
        if isinstance(builder, Response):
            return builder

        try:
            files = builder.generate_files()
        except Exception as e:
            logger.exception("Packaging failed")
            return Response(
                {'error': f'Packaging failed: {e}'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        app_config = builder.app_config
        return Response({
            'appName': app_config.app_name,
            'bundleId': app_config.bundle_id,
            'version': app_config.version,
            'buildNumber': app_config.build_number,
            'files': files,
            'file_count': len(files),
        })

    @action(detail=False, methods=['post'])
    def download(self, request):
        """Download the generated Flutter project as ZIP"""
        builder = self._get_builder(request)
        if isinstance(builder, Response):
            return builder

        try:
            archive = builder.build_zip()
        except Exception as e:
            logger.exception("Packaging failed")
            return Response(
                {'error': f'Packaging failed: {e}'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        response = HttpResponse(archive, content_type='application/zip')
        filename = to_package_name(builder.app_config.app_name)
        response['Content-Disposition'] = f'attachment; filename="{filename}.zip"'
        return response

    def _get_builder(self, request):
        serializer = PackageRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        logger.info(f"Packaging request from {request.user}: {serializer.validated_data['deploymentInfo']['appName']}")
        return FlutterProjectBuilder(serializer.validated_data)
