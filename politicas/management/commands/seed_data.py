"""
Management command to insert the initial policies, permissions, access logs
and audit trails into an empty database.
"""
from django.core.management.base import BaseCommand
from politicas.seed import seed_initial_data


class Command(BaseCommand):
    help = 'Insert initial data when the policy table is empty'

    def handle(self, *args, **options):
        self.stdout.write('Seeding initial data...')

        if seed_initial_data():
            self.stdout.write(self.style.SUCCESS('✓ Initial data created'))
        else:
            self.stdout.write(self.style.WARNING('Policies already exist, nothing to do'))
