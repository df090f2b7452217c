from django import template

register = template.Library()

CURRENCY_LABELS = {
    "IRT": "Toman",
    "TOMAN": "Toman",
    "IRR": "Rial",
}


def _to_int(val):
    try:
        return int(val)
    except (TypeError, ValueError):
        return 0


@register.filter
def currency_label(code):
    """IRT -> Toman, IRR -> Rial; anything else is shown as-is."""
    code = (code or "").strip()
    return CURRENCY_LABELS.get(code.upper(), code)


@register.filter
def money(value, code=""):
    """Format an integer amount: {{ order.total|money:order.currency }} -> 150,000 Toman"""
    amount = f"{_to_int(value):,}"
    label = currency_label(code)
    return f"{amount} {label}" if label else amount
