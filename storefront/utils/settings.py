# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

PUBLIC_STORE_DOMAIN = os.getenv("PUBLIC_STORE_DOMAIN", "hydrogen-preview.myshopify.com")
PUBLIC_STOREFRONT_API_TOKEN = os.getenv("PUBLIC_STOREFRONT_API_TOKEN", "")
STOREFRONT_API_VERSION = os.getenv("STOREFRONT_API_VERSION", "2024-10")
STOREFRONT_TIMEOUT_SECONDS = float(os.getenv("STOREFRONT_TIMEOUT_SECONDS", 5))
STOREFRONT_COUNTRY = os.getenv("STOREFRONT_COUNTRY", "US")
STOREFRONT_LANGUAGE = os.getenv("STOREFRONT_LANGUAGE", "EN")
BUNDLES_COLLECTION_HANDLE = os.getenv("BUNDLES_COLLECTION_HANDLE", "Sleep")
CART_COOKIE_NAME = os.getenv("CART_COOKIE_NAME", "cart")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
