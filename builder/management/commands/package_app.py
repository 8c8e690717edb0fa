import json

from django.core.management.base import BaseCommand, CommandError

from builder.generators.project_builder import FlutterProjectBuilder


class Command(BaseCommand):
    help = 'Package a visual builder payload (JSON file) into a Flutter project'

    def add_arguments(self, parser):
        parser.add_argument('payload', type=str, help='Path to the packaging request JSON')
        parser.add_argument('--output', type=str, default=None, help='Directory to write the project to')
        parser.add_argument('--main-only', action='store_true',
                            help='Print the generated lib/main.dart instead of writing the project')

    def handle(self, *args, **options):
        try:
            with open(options['payload'], 'r', encoding='utf-8') as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise CommandError(f"Could not read payload: {e}")

        builder = FlutterProjectBuilder(payload)

        if options['main_only']:
            self.stdout.write(builder.generate_main_dart())
            return

        self.stdout.write(f"Packaging app: {builder.app_config.app_name}")
        success, output_path, errors = builder.write_project(options['output'])

        if success:
            self.stdout.write(
                self.style.SUCCESS(
                    f"Successfully generated project at '{output_path}'"
                )
            )
        else:
            raise CommandError(f"Failed to generate project: {'; '.join(errors) or 'Unknown error'}")
