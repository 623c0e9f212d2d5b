"""
Management command to show where an asset is and whether it can be sold.

Usage:
    python manage.py asset_position A-1001
    python manage.py asset_position A-1001 --history
"""

from django.core.management.base import BaseCommand

from assetman import inventory


class Command(BaseCommand):
    """Asset position command."""

    help = 'Shows the derived position and availability of an asset'

    def add_arguments(self, parser):
        parser.add_argument('asset_id')
        parser.add_argument(
            '--history',
            action='store_true',
            help='Also print every movement, oldest first',
        )

    def handle(self, *args, **options):
        asset_id = options['asset_id']

        position = inventory.current_position(asset_id)
        if position.is_known:
            self.stdout.write(f'{asset_id}: at {position.location_code}')
        else:
            self.stdout.write(f'{asset_id}: no known location')

        verdict = inventory.check_availability(asset_id)
        if verdict.available:
            self.stdout.write(self.style.SUCCESS('available'))
        else:
            self.stdout.write(self.style.WARNING(f'unavailable: {verdict.reason}'))

        if options['history']:
            for movement in inventory.history(asset_id):
                source = movement.from_location.code if movement.from_location else '-'
                target = movement.to_location.code if movement.to_location else '-'
                self.stdout.write(
                    f'{movement.created_at:%Y-%m-%d %H:%M:%S}  {movement.reason:<8} {source} -> {target}'
                )
