# storefront/api/security.py
import secrets

from storefront.utils.settings import PUBLIC_STORE_DOMAIN

CDN = "https://cdn.shopify.com"
REVIEWS = (
    "https://cdn-static.okendo.io",
    "https://surveys.okendo.io",
    "https://api.okendo.io",
    "https://d3hw6dc1ow8pp2.cloudfront.net",
    "https://d3g5hqndtiniji.cloudfront.net",
    "https://dov7r31oq5dkj.cloudfront.net",
)


def create_content_security_policy(store_domain: str | None = None) -> tuple[str, str]:
    """
    Fresh nonce plus the Content-Security-Policy header value that allows it.

    Inline scripts rendered for the response must carry the same nonce.
    """
    nonce = secrets.token_urlsafe(16)
    store = f"https://{store_domain or PUBLIC_STORE_DOMAIN}"

    directives = {
        "base-uri": ["'self'"],
        "default-src": ["'self'", f"'nonce-{nonce}'", CDN, store, *REVIEWS, "data:"],
        "img-src": ["'self'", CDN, *REVIEWS, "data:"],
        "media-src": ["'self'", CDN, *REVIEWS],
        "style-src": ["'self'", "'unsafe-inline'", CDN, "https://fonts.googleapis.com", *REVIEWS],
        "font-src": ["'self'", "https://fonts.gstatic.com", *REVIEWS],
        "script-src": ["'self'", f"'nonce-{nonce}'", CDN, *REVIEWS],
        "connect-src": ["'self'", store, *REVIEWS],
        "frame-ancestors": ["'none'"],
    }
    header = "; ".join(f"{name} {' '.join(sources)}" for name, sources in directives.items())
    return nonce, header
