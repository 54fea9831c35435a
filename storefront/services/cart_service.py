# storefront/services/cart_service.py
from dataclasses import dataclass, field

from storefront.domain.cart_form import (
    CartForm,
    CartFormError,
    LinesAdd,
    LinesRemove,
    LinesUpdate,
    as_variables,
)
from storefront.domain.schemas import Cart, CartUserError
from storefront.services.queries import (
    CART_CREATE_MUTATION,
    CART_LINES_ADD_MUTATION,
    CART_LINES_REMOVE_MUTATION,
    CART_LINES_UPDATE_MUTATION,
    CART_QUERY,
)
from storefront.services.storefront_client import StorefrontClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CartMutationResult:
    cart: Cart | None
    user_errors: list[CartUserError] = field(default_factory=list)


class CartService:
    """
    Thin layer over the platform cart.

    query (get_cart) is read only, commands (add/update/remove) forward the
    cart form inputs as mutations. The platform owns the cart state, this
    class never inspects it beyond parsing the response.
    """

    def __init__(self, client: StorefrontClient):
        self.client = client

    #query
    async def get_cart(self, cart_id: str) -> Cart | None:
        data = await self.client.aquery(CART_QUERY, {"cartId": cart_id})
        cart = data.get("cart")
        if not cart:
            logger.info(f"Cart {cart_id} not found")
            return None
        return Cart.model_validate(cart)

    #commands
    async def apply(self, cart_id: str | None, form: CartForm) -> CartMutationResult:
        if isinstance(form, LinesAdd):
            return await self.add_lines(cart_id, form)
        if isinstance(form, LinesUpdate):
            return await self.update_lines(cart_id, form)
        if isinstance(form, LinesRemove):
            return await self.remove_lines(cart_id, form)
        raise CartFormError(f"Unsupported cart action: {form.action}")

    async def add_lines(self, cart_id: str | None, form: LinesAdd) -> CartMutationResult:
        variables = as_variables(form)

        # first item creates the cart
        if not cart_id:
            logger.info("No cart yet, creating one")
            data = await self.client.amutate(CART_CREATE_MUTATION, variables)
            return self._result(data, "cartCreate")

        logger.info(f"Adding {len(form.inputs.lines)} line(s) to cart {cart_id}")
        data = await self.client.amutate(
            CART_LINES_ADD_MUTATION, {"cartId": cart_id, **variables}
        )
        return self._result(data, "cartLinesAdd")

    async def update_lines(self, cart_id: str | None, form: LinesUpdate) -> CartMutationResult:
        if not cart_id:
            raise CartFormError("No cart to update")

        # quantity 0 is a removal on the platform side
        logger.info(
            f"Updating cart {cart_id}: "
            + ", ".join(f"{line.id}->{line.quantity}" for line in form.inputs.lines)
        )
        data = await self.client.amutate(
            CART_LINES_UPDATE_MUTATION, {"cartId": cart_id, **as_variables(form)}
        )
        return self._result(data, "cartLinesUpdate")

    async def remove_lines(self, cart_id: str | None, form: LinesRemove) -> CartMutationResult:
        if not cart_id:
            raise CartFormError("No cart to remove lines from")

        logger.info(f"Removing lines {form.inputs.line_ids} from cart {cart_id}")
        data = await self.client.amutate(
            CART_LINES_REMOVE_MUTATION, {"cartId": cart_id, **as_variables(form)}
        )
        return self._result(data, "cartLinesRemove")

    def _result(self, data: dict, field_name: str) -> CartMutationResult:
        payload = data.get(field_name) or {}
        user_errors = [CartUserError.model_validate(e) for e in payload.get("userErrors") or []]

        for error in user_errors:
            logger.warning(f"{field_name} user error: {error.message}")

        cart = payload.get("cart")
        return CartMutationResult(
            cart=Cart.model_validate(cart) if cart else None,
            user_errors=user_errors,
        )
