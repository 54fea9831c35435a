# storefront/domain/cart_form.py
"""Cart form protocol.

Every cart button on the site is a tiny form posting a single field,
``cartFormInput``, to ``/cart``. Its value is JSON ``{"action", "inputs"}``:

- ``LinesAdd``     ``{"lines": [{"merchandiseId", "quantity"}]}``
- ``LinesUpdate``  ``{"lines": [{"id", "quantity"}]}`` (quantity 0 removes)
- ``LinesRemove``  ``{"lineIds": [...]}``
"""
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from storefront.domain.schemas import StorefrontModel

CART_FORM_FIELD = "cartFormInput"


class CartFormError(ValueError):
    """Raised when a cart form submission cannot be understood."""

    pass


class CartLineInput(StorefrontModel):
    merchandise_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, gt=0)


class CartLineUpdateInput(StorefrontModel):
    id: str = Field(..., min_length=1)
    quantity: int

    @field_validator("quantity")
    @classmethod
    def _clamp_quantity(cls, value: int) -> int:
        return max(0, value)


class LinesAddInputs(StorefrontModel):
    lines: List[CartLineInput] = Field(..., min_length=1)


class LinesUpdateInputs(StorefrontModel):
    lines: List[CartLineUpdateInput] = Field(..., min_length=1)


class LinesRemoveInputs(StorefrontModel):
    line_ids: List[str] = Field(..., min_length=1)


class LinesAdd(BaseModel):
    action: Literal["LinesAdd"] = "LinesAdd"
    inputs: LinesAddInputs


class LinesUpdate(BaseModel):
    action: Literal["LinesUpdate"] = "LinesUpdate"
    inputs: LinesUpdateInputs


class LinesRemove(BaseModel):
    action: Literal["LinesRemove"] = "LinesRemove"
    inputs: LinesRemoveInputs


CartForm = Annotated[Union[LinesAdd, LinesUpdate, LinesRemove], Field(discriminator="action")]

_cart_form_adapter = TypeAdapter(CartForm)


def parse_cart_form(raw: str) -> CartForm:
    try:
        return _cart_form_adapter.validate_json(raw)
    except ValidationError as e:
        raise CartFormError(f"Invalid cart form input: {e.error_count()} error(s)") from e


def encode_cart_form(form: CartForm) -> str:
    return form.model_dump_json(by_alias=True)


def update_line_form(line_id: str, quantity: int) -> LinesUpdate:
    return LinesUpdate(
        inputs=LinesUpdateInputs(lines=[CartLineUpdateInput(id=line_id, quantity=quantity)])
    )


def remove_lines_form(line_ids: List[str]) -> LinesRemove:
    return LinesRemove(inputs=LinesRemoveInputs(line_ids=line_ids))


def add_line_form(merchandise_id: str, quantity: int = 1) -> LinesAdd:
    return LinesAdd(
        inputs=LinesAddInputs(
            lines=[CartLineInput(merchandise_id=merchandise_id, quantity=quantity)]
        )
    )


def as_variables(form: CartForm) -> dict:
    """GraphQL variables for the mutation matching ``form``."""
    return form.inputs.model_dump(by_alias=True)
