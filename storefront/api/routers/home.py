# storefront/api/routers/home.py
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from storefront.api.dependencies import get_storefront_client
from storefront.api.security import create_content_security_policy
from storefront.render.page import stream_home
from storefront.services.home_loader import HomeLoader
from storefront.services.storefront_client import StorefrontClient

router = APIRouter(tags=["home"])


@router.get("/", response_class=StreamingResponse)
async def home(client: StorefrontClient = Depends(get_storefront_client)):
    """
    Home page, streamed.

    Bundles and blogs are loaded before the first byte; a bundles failure
    fails the request. Recommended products arrive later in the same body.
    """
    data = await HomeLoader(client).load()
    nonce, policy = create_content_security_policy()

    return StreamingResponse(
        stream_home(data, nonce),
        media_type="text/html; charset=utf-8",
        headers={"Content-Security-Policy": policy},
    )
