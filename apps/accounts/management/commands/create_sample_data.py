"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 1 admin, 2 collection centres, 3 recyclers
- 4 vouchers
- Recycling sessions at both centres
- Ledger credits for the recorded recycling
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, Role
from apps.catalog.models import RecyclableItem, MeasurementType
from apps.recycling.models import RecyclingSession, RecyclingTransaction
from apps.recycling.services import create_session
from apps.rewards.models import PointsLedgerEntry, Voucher, VoucherRedemption, LedgerSource
from apps.rewards.services import record_ledger_entry


# Points credited per stored unit: per item counted, per kg weighed
POINTS_PER_ITEM = 2
POINTS_PER_KG = 5


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_vouchers()
        self.create_sessions(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (admin, superuser)')
        self.stdout.write('  north@example.com / password123 (centre staff)')
        self.stdout.write('  south@example.com / password123 (centre staff)')
        for recycler in users['recyclers']:
            self.stdout.write(f'  {recycler.email} / password123 (recycler, code {recycler.public_id})')

    def clear_data(self):
        """Clear all sample data from the database."""
        PointsLedgerEntry.objects.all().wipe()
        VoucherRedemption.objects.all().delete()
        Voucher.objects.all().delete()
        RecyclingTransaction.objects.all().delete()
        RecyclingSession.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def _user(self, email, password, **defaults):
        user, _ = User.objects.get_or_create(email=email, defaults=defaults)
        user.set_password(password)
        user.save()
        return user

    def create_users(self):
        self.stdout.write('  Creating profiles...')

        admin = self._user(
            'admin@example.com', 'admin123',
            full_name='Admin User', role=Role.ADMIN, is_staff=True, is_superuser=True,
        )
        north = self._user(
            'north@example.com', 'password123',
            full_name='North Collection Centre', role=Role.CENTRE_STAFF,
        )
        south = self._user(
            'south@example.com', 'password123',
            full_name='South Collection Centre', role=Role.CENTRE_STAFF,
        )
        recyclers = [
            self._user(f'{name.lower()}@example.com', 'password123', full_name=f'{name} Recycler')
            for name in ('Alice', 'Bob', 'Charlie')
        ]

        return {
            'admin': admin,
            'centres': [north, south],
            'recyclers': recyclers,
        }

    def create_vouchers(self):
        self.stdout.write('  Creating vouchers...')

        vouchers = [
            ('Coffee Voucher', 'One free coffee at participating cafes', 50),
            ('Reusable Tote Bag', 'Branded cotton shopping bag', 120),
            ('Cinema Ticket', 'One standard 2D screening', 300),
            ('Grocery Voucher', '20 off at partner supermarkets', 500),
        ]
        for name, description, cost in vouchers:
            Voucher.objects.get_or_create(
                name=name,
                defaults={'description': description, 'points_cost': cost},
            )

    def create_sessions(self, users):
        """Record sessions through the service and credit points for them."""
        self.stdout.write('  Creating recycling sessions...')

        items = {item.name: item for item in RecyclableItem.objects.all()}
        if not items:
            self.stdout.write(self.style.WARNING('  No catalog items; skipping sessions.'))
            return

        baskets = [
            [('Plastic Bottle', 12), ('Aluminium Tin', 6)],
            [('Newspaper', Decimal('2.5')), ('Glass', 3)],
            [('Cardboard', Decimal('4.2')), ('Plastic Bottle', 5)],
        ]

        north, south = users['centres']
        for index, recycler in enumerate(users['recyclers']):
            for centre, basket in ((north, baskets[index]), (south, baskets[(index + 1) % len(baskets)])):
                lines = [
                    {'item_id': items[name].id, 'quantity': quantity}
                    for name, quantity in basket
                    if name in items
                ]
                if not lines:
                    continue

                session = create_session(
                    centre=centre,
                    recycler_id=recycler.id,
                    lines=lines,
                )
                record_ledger_entry(
                    user=recycler,
                    change=self._points_for(session),
                    source=LedgerSource.RECYCLING,
                    reason=f'Recycling at {centre.full_name}',
                )

    def _points_for(self, session):
        points = 0
        for tx in session.transactions.select_related('item'):
            if tx.item.measurement_type == MeasurementType.WEIGHT:
                points += (tx.quantity // 1000) * POINTS_PER_KG
            else:
                points += tx.quantity * POINTS_PER_ITEM
        return max(points, 1)
