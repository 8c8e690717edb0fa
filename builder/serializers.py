# File: builder/serializers.py

from rest_framework import serializers


class DeploymentInfoSerializer(serializers.Serializer):
    appName = serializers.CharField(max_length=100)
    bundleId = serializers.CharField(required=False, allow_blank=True, max_length=155)
    version = serializers.CharField(required=False, allow_blank=True, max_length=20)
    buildNumber = serializers.CharField(required=False, allow_blank=True, max_length=20)
    appIcon = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PackageRequestSerializer(serializers.Serializer):
    """Packaging request sent by the visual builder"""
    template = serializers.JSONField()
    deploymentInfo = DeploymentInfoSerializer()
    projectId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    templateId = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_template(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('template must be an object')
        return value


class CompileScreenSerializer(serializers.Serializer):
    """Single screen payload; its shape is normalized by the compiler, not here"""
    screen = serializers.JSONField()
    appName = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
