"""
Management command to compute settlement transfers from a JSON file.

The file holds either a list of member balances or an object with a
``members`` list:

    [
        {"id": "a", "name": "Alice", "balance": "30.00"},
        {"id": "b", "name": "Bob", "balance": "-10.00"},
        {"id": "c", "name": "Carol", "balance": "-20.00"}
    ]

Usage:
    python manage.py settle_balances balances.json
    python manage.py settle_balances - < balances.json
    python manage.py settle_balances balances.json --json
"""

import json
import sys
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError

from apps.settlements.exceptions import SettlementServiceError
from apps.settlements.serializers import (
    SettlementPlanInputSerializer,
    SettlementSummarySerializer,
)
from apps.settlements.services import SettlementService


class Command(BaseCommand):
    help = 'Compute the transfers that settle a group from a JSON file of member balances'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='Path to the JSON file, or "-" to read from stdin',
        )
        parser.add_argument(
            '--allow-unbalanced',
            action='store_true',
            help='Settle as much as possible even if balances do not sum to zero',
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print the full settlement summary as JSON',
        )

    def handle(self, *args, **options):
        payload = self.load_payload(options['path'])
        if isinstance(payload, list):
            payload = {'members': payload}

        serializer = SettlementPlanInputSerializer(data=payload)
        if not serializer.is_valid():
            raise CommandError(f'Invalid balances: {json.dumps(serializer.errors)}')

        try:
            summary = SettlementService.get_settlement_summary(
                serializer.get_members(),
                require_balanced=False if options['allow_unbalanced'] else None,
            )
        except SettlementServiceError as e:
            raise CommandError(str(e))

        if options['json']:
            data = SettlementSummarySerializer(summary).data
            self.stdout.write(json.dumps(data, indent=2))
            return

        if summary['is_settled']:
            self.stdout.write(self.style.SUCCESS('All settled up!'))
            return

        for transfer in summary['transfers']:
            self.stdout.write(
                f'{transfer.from_name or transfer.from_id} -> '
                f'{transfer.to_name or transfer.to_id}: {transfer.amount}'
            )
        self.stdout.write(self.style.SUCCESS(
            f"\n{summary['transfer_count']} transfer(s), {summary['total_amount']} in total"
        ))

    def load_payload(self, path):
        try:
            if path == '-':
                return json.load(sys.stdin, parse_float=Decimal)
            with open(path, encoding='utf-8') as fh:
                return json.load(fh, parse_float=Decimal)
        except OSError as e:
            raise CommandError(f'Cannot read {path}: {e}')
        except json.JSONDecodeError as e:
            raise CommandError(f'Invalid JSON in {path}: {e}')
