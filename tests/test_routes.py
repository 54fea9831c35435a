"""
Route tests: the FastAPI app with the in-memory storefront behind it.
"""
import json

import pytest
import requests
from fastapi.testclient import TestClient

from storefront.services.storefront_client import StorefrontError
from tests.factories import make_cart, make_cart_line

CART_ID = "gid://shopify/Cart/abc"


def _form(payload: dict) -> dict:
    return {"cartFormInput": json.dumps(payload)}


class TestHomeRoute:
    def test_renders_streamed_page(self, test_client: TestClient):
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Great things never came from comfort zones" in response.text
        assert "Product 1" in response.text
        assert "Product 10" in response.text
        assert response.text.rstrip().endswith("</html>")

    def test_csp_nonce_matches_scripts(self, test_client: TestClient):
        response = test_client.get("/")

        policy = response.headers["content-security-policy"]
        nonce = policy.split("'nonce-")[1].split("'")[0]
        assert f'nonce="{nonce}"' in response.text

    def test_recommended_failure_still_ok(self, test_client: TestClient, fake_client):
        fake_client.errors["RecommendedProducts"] = StorefrontError([{"message": "boom"}])

        response = test_client.get("/")

        assert response.status_code == 200
        assert 'data-section="bundles"' in response.text

    def test_bundles_failure_fails_request(self, test_app, fake_client):
        fake_client.errors["BundlesCollection"] = requests.ConnectionError("storefront down")

        with TestClient(test_app, raise_server_exceptions=False) as client:
            response = client.get("/")

        assert response.status_code == 500


class TestCartRoutes:
    def test_add_creates_cart_and_sets_cookie(self, test_client: TestClient, fake_client):
        fake_client.responses["CartCreate"] = {
            "cartCreate": {"cart": make_cart("gid://shopify/Cart/new", [make_cart_line()]), "userErrors": []}
        }

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesAdd", "inputs": {"lines": [{"merchandiseId": "v1", "quantity": 1}]}}),
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/cart"
        assert "gid://shopify/Cart/new" in response.headers["set-cookie"]
        assert fake_client.calls[-1] == (
            "CartCreate",
            {"lines": [{"merchandiseId": "v1", "quantity": 1}]},
        )

    def test_add_to_existing_cart(self, test_client: TestClient, fake_client):
        fake_client.responses["CartLinesAdd"] = {"cartLinesAdd": {"cart": make_cart(CART_ID), "userErrors": []}}
        test_client.cookies.set("cart", CART_ID)

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesAdd", "inputs": {"lines": [{"merchandiseId": "v1", "quantity": 2}]}}),
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert "set-cookie" not in response.headers
        name, variables = fake_client.calls[-1]
        assert name == "CartLinesAdd"
        assert variables["cartId"] == CART_ID

    def test_update_to_zero_forwards_removal_quantity(self, test_client: TestClient, fake_client):
        fake_client.responses["CartLinesUpdate"] = {
            "cartLinesUpdate": {"cart": make_cart(CART_ID), "userErrors": []}
        }
        test_client.cookies.set("cart", CART_ID)

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesUpdate", "inputs": {"lines": [{"id": "l1", "quantity": 0}]}}),
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert fake_client.calls[-1] == (
            "CartLinesUpdate",
            {"cartId": CART_ID, "lines": [{"id": "l1", "quantity": 0}]},
        )

    def test_remove(self, test_client: TestClient, fake_client):
        fake_client.responses["CartLinesRemove"] = {
            "cartLinesRemove": {"cart": make_cart(CART_ID), "userErrors": []}
        }
        test_client.cookies.set("cart", CART_ID)

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesRemove", "inputs": {"lineIds": ["l1"]}}),
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert fake_client.calls[-1] == ("CartLinesRemove", {"cartId": CART_ID, "lineIds": ["l1"]})

    def test_user_errors_still_redirect(self, test_client: TestClient, fake_client):
        fake_client.responses["CartLinesUpdate"] = {
            "cartLinesUpdate": {
                "cart": make_cart(CART_ID),
                "userErrors": [{"code": "INVALID", "field": ["lines"], "message": "Not enough stock"}],
            }
        }
        test_client.cookies.set("cart", CART_ID)

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesUpdate", "inputs": {"lines": [{"id": "l1", "quantity": 99}]}}),
            follow_redirects=False,
        )

        assert response.status_code == 303

    def test_update_without_cart_is_bad_request(self, test_client: TestClient):
        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesUpdate", "inputs": {"lines": [{"id": "l1", "quantity": 2}]}}),
            follow_redirects=False,
        )
        assert response.status_code == 400

    def test_invalid_form_is_bad_request(self, test_client: TestClient):
        response = test_client.post("/cart", data={"cartFormInput": "{"}, follow_redirects=False)
        assert response.status_code == 400

    @pytest.mark.parametrize("quantity", [None, [1], 1.7])
    def test_malformed_quantity_is_bad_request(self, test_client: TestClient, fake_client, quantity):
        test_client.cookies.set("cart", CART_ID)

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesUpdate", "inputs": {"lines": [{"id": "l1", "quantity": quantity}]}}),
            follow_redirects=False,
        )

        assert response.status_code == 400
        assert fake_client.calls == []

    def test_missing_field_is_unprocessable(self, test_client: TestClient):
        response = test_client.post("/cart", data={"other": "x"}, follow_redirects=False)
        assert response.status_code == 422

    def test_platform_error_is_bad_gateway(self, test_client: TestClient, fake_client):
        fake_client.errors["CartLinesRemove"] = StorefrontError([{"message": "Internal error"}])
        test_client.cookies.set("cart", CART_ID)

        response = test_client.post(
            "/cart",
            data=_form({"action": "LinesRemove", "inputs": {"lineIds": ["l1"]}}),
            follow_redirects=False,
        )
        assert response.status_code == 502

    def test_cart_page_lists_lines(self, test_client: TestClient, fake_client):
        fake_client.responses["CartQuery"] = {"cart": make_cart(CART_ID, [make_cart_line(quantity=3)])}
        test_client.cookies.set("cart", CART_ID)

        response = test_client.get("/cart")

        assert response.status_code == 200
        assert 'name="decrease-quantity" value="2"' in response.text
        assert 'name="increase-quantity" value="4"' in response.text
        assert fake_client.calls[-1][1]["cartId"] == CART_ID

    def test_cart_page_without_cart(self, test_client: TestClient, fake_client):
        response = test_client.get("/cart")

        assert response.status_code == 200
        assert "Your cart is empty" in response.text
        assert fake_client.calls == []


def test_health(test_client: TestClient):
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
