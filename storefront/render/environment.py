# storefront/render/environment.py
from functools import lru_cache
from datetime import datetime
from pathlib import Path
import re

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from storefront.domain.cart_form import add_line_form, encode_cart_form
from storefront.domain.schemas import Money, Product
from storefront.render import carousel

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_TEMPLATE_TAG_RE = re.compile(r"<(/?template)", re.IGNORECASE)

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_money(money: Money | None) -> str:
    if money is None:
        return ""
    symbol = _CURRENCY_SYMBOLS.get(money.currency_code)
    if symbol:
        return f"{symbol}{money.amount:,.2f}"
    return f"{money.amount:,.2f} {money.currency_code}"


def long_date(value: datetime) -> str:
    """``October 5, 2024``"""
    return f"{value:%B} {value.day}, {value.year}"


def sanitize_content_html(html: str) -> Markup:
    # article bodies are platform-authored HTML, only the video attribute is rewritten
    return Markup(html.replace('controls="controls"', "controls"))


def embeddable_html(html: str | None) -> Markup:
    """
    Trusted third-party markup (review widgets) that may end up inside a
    streamed ``<template>`` slot. Its own template tags are neutralized so
    it cannot close or reopen the slot.
    """
    if not html:
        return Markup("")
    return Markup(_TEMPLATE_TAG_RE.sub(r"&lt;\1", html))


def add_to_cart_input(product: Product) -> str | None:
    """Cart form payload adding one of the product's first variant, if any."""
    variant = product.first_variant
    if variant is None:
        return None
    return encode_cart_form(add_line_form(variant.id, 1))


def can_add_to_cart(product: Product) -> bool:
    variant = product.first_variant
    return bool(variant and variant.available_for_sale)


@lru_cache(maxsize=1)
def get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["money"] = format_money
    env.filters["long_date"] = long_date
    env.filters["sanitize_content_html"] = sanitize_content_html
    env.filters["embeddable_html"] = embeddable_html
    env.globals["add_to_cart_input"] = add_to_cart_input
    env.globals["can_add_to_cart"] = can_add_to_cart
    env.globals["carousel"] = carousel
    return env
