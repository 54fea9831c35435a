# storefront/render/page.py
"""Page composition.

The home page is streamed: every section is rendered in a fixed order and
sent as soon as it is ready, followed by the footer. Sections that need the
deferred recommended products only emit a placeholder slot. Once the footer
is out, the handle is awaited once and each slot gets its final markup in a
``<template>`` plus a one-line script that swaps it in.
"""
from dataclasses import dataclass, field
from typing import AsyncIterator

from markupsafe import Markup, escape

from storefront.domain.schemas import Cart
from storefront.render.cart_line import render_cart_line
from storefront.render.environment import get_env
from storefront.services.home_loader import HomeData
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

HOME_TITLE = "Hydrogen | Home"
CART_TITLE = "Hydrogen | Cart"

HOME_SECTIONS = (
    "hero",
    "advantages",
    "recommended_products",
    "information",
    "science",
    "bundles",
    "customized_product",
    "innovate_engineering",
    "blogs",
    "images_collection",
)

MAIN_CLOSE = "</main>\n"
DOCUMENT_CLOSE = "</body>\n</html>\n"


@dataclass
class Slot:
    id: str
    template: str
    context: dict


@dataclass
class DeferredSlots:
    """Placeholders waiting for the deferred recommended products."""

    prefix: str = "deferred"
    slots: list[Slot] = field(default_factory=list)

    def placeholder(self, template: str, **context) -> Markup:
        slot = Slot(id=f"{self.prefix}-{len(self.slots)}", template=template, context=context)
        self.slots.append(slot)
        return Markup('<div id="{}" class="deferred-placeholder">Loading...</div>').format(slot.id)

    def __iter__(self):
        return iter(self.slots)

    def __len__(self):
        return len(self.slots)


def render_document_open(title: str, nonce: str) -> str:
    return get_env().get_template("document_open.html").render(title=title, nonce=nonce)


def render_footer() -> str:
    return MAIN_CLOSE + get_env().get_template("footer.html").render()


def render_section(name: str, data: HomeData, slots: DeferredSlots) -> str:
    template = get_env().get_template(f"sections/{name}.html")
    return template.render(data=data, slots=slots)


def render_slot(slot: Slot, products, nonce: str) -> str:
    content = get_env().get_template(slot.template).render(products=products, **slot.context)
    return (
        f'<template id="{slot.id}-content">{content}</template>\n'
        f'<script nonce="{escape(nonce)}">$swap("{slot.id}")</script>\n'
    )


async def stream_home(data: HomeData, nonce: str) -> AsyncIterator[str]:
    slots = DeferredSlots()

    yield render_document_open(HOME_TITLE, nonce)
    for name in HOME_SECTIONS:
        yield render_section(name, data, slots)
    yield render_footer()

    if len(slots):
        products = await data.recommended_products
        logger.info(
            f"Recommended products resolved ({len(products) if products is not None else 'none'}), "
            f"filling {len(slots)} slot(s)"
        )
        for slot in slots:
            yield render_slot(slot, products, nonce)

    yield DOCUMENT_CLOSE


def render_cart_page(cart: Cart | None, nonce: str) -> str:
    lines = [render_cart_line(line) for line in cart.lines] if cart else []
    body = get_env().get_template("cart.html").render(cart=cart, lines=lines)
    return render_document_open(CART_TITLE, nonce) + body + render_footer() + DOCUMENT_CLOSE
