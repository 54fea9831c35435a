# storefront/api/routers/cart.py
import requests
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from storefront.api.dependencies import get_storefront_client
from storefront.api.security import create_content_security_policy
from storefront.domain.cart_form import CART_FORM_FIELD, CartFormError, parse_cart_form
from storefront.render.page import render_cart_page
from storefront.services.cart_service import CartService
from storefront.services.storefront_client import StorefrontClient, StorefrontError
from storefront.utils.settings import CART_COOKIE_NAME
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(client: StorefrontClient):
    return CartService(client)


@router.get("", response_class=HTMLResponse)
async def cart_page(request: Request, client: StorefrontClient = Depends(get_storefront_client)):
    cart_id = request.cookies.get(CART_COOKIE_NAME)
    svc = get_service(client)

    cart = None
    if cart_id:
        try:
            cart = await svc.get_cart(cart_id)
        except (StorefrontError, requests.RequestException) as e:
            raise HTTPException(status_code=502, detail=str(e))

    nonce, policy = create_content_security_policy()
    return HTMLResponse(
        render_cart_page(cart, nonce),
        headers={"Content-Security-Policy": policy},
    )


@router.post("")
async def cart_action(
    request: Request,
    cart_form_input: str = Form(..., alias=CART_FORM_FIELD),
    client: StorefrontClient = Depends(get_storefront_client),
):
    cart_id = request.cookies.get(CART_COOKIE_NAME)
    svc = get_service(client)

    try:
        form = parse_cart_form(cart_form_input)
        result = await svc.apply(cart_id, form)
    except CartFormError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (StorefrontError, requests.RequestException) as e:
        logger.error(f"Cart mutation failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    response = RedirectResponse(url="/cart", status_code=303)
    if result.cart and result.cart.id != cart_id:
        response.set_cookie(CART_COOKIE_NAME, result.cart.id, httponly=True, samesite="lax")
    return response
