import unicodedata
from urllib.parse import quote

from django.conf import settings


def format_price_clp(price):
    """
    Format an amount of Chilean pesos: 199990 -> "$ 199.990".
    CLP has no decimals, so the amount is rounded to an integer first.
    """
    amount = int(round(price))
    sign = '-' if amount < 0 else ''
    grouped = f'{abs(amount):,}'.replace(',', '.')
    return f'{sign}$ {grouped}'


def fold_text(value):
    """Lowercase and strip diacritics: "Árbol" -> "arbol"."""
    if not value:
        return ''
    decomposed = unicodedata.normalize('NFD', str(value))
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def locale_sort_key(value):
    """Sort key close to a locale-aware compare: accents and case only break ties."""
    value = value or ''
    return (fold_text(value), value)


def build_whatsapp_url(parent, variant, number=None):
    """Link that opens a WhatsApp chat asking about ``variant``."""
    number = number or settings.WHATSAPP_NUMBER
    message = (
        f'¡Hola! Estoy interesado/a en {parent.name} - {variant.variant_name}. '
        '¿Podrías proporcionarme más información?'
    )
    return f'https://wa.me/{number}?text={quote(message)}'
