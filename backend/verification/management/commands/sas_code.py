"""
Render a SAS code from hex-encoded key-derivation output.

Usage: python manage.py sas_code 0a1b2c3d4e5f --form emoji
"""
import binascii

from django.core.management.base import BaseCommand, CommandError

from verification.exceptions import InvalidInputLength
from verification.sas import DEFAULT_SEPARATOR, to_decimal_code, to_emoji_code


class Command(BaseCommand):
    help = 'Render the decimal and/or emoji SAS for hex-encoded derived bytes'

    def add_arguments(self, parser):
        parser.add_argument('secret_hex', help='SAS bytes from the key derivation, hex-encoded')
        parser.add_argument(
            '--form', choices=['decimal', 'emoji', 'both'], default='both',
            help='Which code form to render (default: both)',
        )
        parser.add_argument(
            '--separator', default=DEFAULT_SEPARATOR,
            help='Separator between the three decimal numbers (default: a space)',
        )

    def handle(self, *args, **options):
        try:
            secret = binascii.unhexlify(options['secret_hex'])
        except (binascii.Error, ValueError) as e:
            raise CommandError(f'Invalid hex input: {e}')

        form = options['form']
        try:
            if form in ('decimal', 'both'):
                self.stdout.write(to_decimal_code(secret, separator=options['separator']))
            if form in ('emoji', 'both'):
                for emoji in to_emoji_code(secret):
                    self.stdout.write(f'{emoji.emoji}  {emoji.description}')
        except InvalidInputLength as e:
            raise CommandError(str(e))
