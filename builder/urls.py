# File: builder/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import PackagerViewSet

app_name = 'builder'

router = DefaultRouter()
router.register(r'packager', PackagerViewSet, basename='packager')

urlpatterns = [
    path('', include(router.urls)),
]

# Available endpoints:
#
# POST /api/builder/packager/compile-screen/   - Compile one screen to lib/main.dart
# POST /api/builder/packager/package/          - Generate every project file as JSON
# POST /api/builder/packager/download/         - Download the generated project as ZIP
