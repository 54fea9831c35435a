# storefront/render/cart_line.py
from dataclasses import dataclass
from typing import Sequence
from urllib.parse import quote, urlencode

from markupsafe import Markup

from storefront.domain.cart_form import encode_cart_form, remove_lines_form, update_line_form
from storefront.domain.schemas import CartLine, SelectedOption
from storefront.render.environment import get_env


def decrement_target(quantity: int) -> int:
    # 1 -> 0, which the platform treats as removing the line
    return max(0, quantity - 1)


def increment_target(quantity: int) -> int:
    return quantity + 1


@dataclass(frozen=True)
class QuantityButton:
    name: str
    label: str
    symbol: str
    target: int
    disabled: bool
    form_input: str


def quantity_controls(line: CartLine) -> tuple[QuantityButton, QuantityButton]:
    """
    Decrease/increase buttons for a cart line.

    Each button posts a LinesUpdate form with its target quantity. Both are
    disabled while the line has a mutation the platform has not confirmed.
    """
    disabled = line.is_optimistic
    decrease = decrement_target(line.quantity)
    increase = increment_target(line.quantity)

    return (
        QuantityButton(
            name="decrease-quantity",
            label="Decrease quantity",
            symbol="−",
            target=decrease,
            disabled=disabled,
            form_input=encode_cart_form(update_line_form(line.id, decrease)),
        ),
        QuantityButton(
            name="increase-quantity",
            label="Increase quantity",
            symbol="+",
            target=increase,
            disabled=disabled,
            form_input=encode_cart_form(update_line_form(line.id, increase)),
        ),
    )


def variant_url(handle: str, selected_options: Sequence[SelectedOption]) -> str:
    path = f"/products/{quote(handle)}"
    params = urlencode([(option.name, option.value) for option in selected_options])
    return f"{path}?{params}" if params else path


def render_cart_line(line: CartLine, layout: str = "page") -> Markup:
    decrease, increase = quantity_controls(line)
    template = get_env().get_template("cart_line.html")
    return Markup(
        template.render(
            line=line,
            layout=layout,
            url=variant_url(line.merchandise.product.handle, line.merchandise.selected_options),
            decrease=decrease,
            increase=increase,
            remove_input=encode_cart_form(remove_lines_form([line.id])),
        )
    )
