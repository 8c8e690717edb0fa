from django.apps import AppConfig


class BuilderConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'builder'
    verbose_name = 'Flutter App Packager'
