import pytest
import requests

from storefront.domain.schemas import Blog
from storefront.services.blogs import (
    BALANCED_DIET,
    PODCASTS,
    articles_limit,
    fetch_filtered_blogs,
    filter_blogs,
)
from storefront.services.storefront_client import StorefrontError
from tests.factories import blogs_response, make_article, make_blog
from tests.fakes import FakeStorefrontClient


def _blogs(*titles: str) -> list[Blog]:
    return [
        Blog.model_validate(make_blog(title, [make_article(i)], n=i))
        for i, title in enumerate(titles, start=1)
    ]


class TestFilterBlogs:
    def test_keeps_only_exact_title(self):
        a, b, c = make_article(1), make_article(2), make_article(3)
        d = make_article(4)
        blogs = [
            Blog.model_validate(make_blog("Balanced Diet", [a, b, c], n=1)),
            Blog.model_validate(make_blog("Podcasts", [d], n=2)),
        ]

        result = filter_blogs(blogs, "Podcasts")

        assert len(result) == 1
        assert result[0].title == "Podcasts"
        assert [article.id for article in result[0].articles] == [d["id"]]

    def test_no_match_is_empty(self):
        assert filter_blogs(_blogs("News", "Recipes"), "Podcasts") == []

    def test_empty_input(self):
        assert filter_blogs([], "Podcasts") == []

    def test_case_sensitive_without_normalization(self):
        blogs = _blogs("podcasts", "Podcasts ", "PODCASTS")
        assert filter_blogs(blogs, "Podcasts") == []

    def test_preserves_relative_order(self):
        blogs = _blogs("Podcasts", "News", "Podcasts", "Podcasts")
        result = filter_blogs(blogs, "Podcasts")
        assert [blog.id for blog in result] == [blogs[0].id, blogs[2].id, blogs[3].id]


def test_articles_limit_per_use_case():
    assert articles_limit(BALANCED_DIET) == 3
    assert articles_limit(PODCASTS) == 100


@pytest.mark.asyncio
class TestFetchFilteredBlogs:
    async def test_sends_bounded_variables(self):
        client = FakeStorefrontClient(responses={"GetBlogs": blogs_response()})

        await fetch_filtered_blogs(client, BALANCED_DIET)
        await fetch_filtered_blogs(client, PODCASTS)

        assert client.calls == [
            ("GetBlogs", {"first": 3, "articlesFirst": 3}),
            ("GetBlogs", {"first": 3, "articlesFirst": 100}),
        ]

    async def test_returns_parsed_matches(self):
        client = FakeStorefrontClient(
            responses={
                "GetBlogs": blogs_response(
                    make_blog("Balanced Diet", [make_article(1), make_article(2)], n=1),
                    make_blog("Podcasts", [make_article(3)], n=2),
                )
            }
        )

        result = await fetch_filtered_blogs(client, BALANCED_DIET)

        assert [blog.title for blog in result] == ["Balanced Diet"]
        assert [article.title for article in result[0].articles] == ["Article 1", "Article 2"]
        assert result[0].articles[0].author_name == "Jane Doe"

    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError("connection refused"),
            StorefrontError([{"message": "Throttled"}]),
            RuntimeError("boom"),
        ],
    )
    async def test_failure_maps_to_empty(self, error):
        client = FakeStorefrontClient(errors={"GetBlogs": error})
        assert await fetch_filtered_blogs(client, PODCASTS) == []

    async def test_malformed_payload_maps_to_empty(self):
        client = FakeStorefrontClient(
            responses={"GetBlogs": {"blogs": {"edges": [{"node": {"title": "Podcasts"}}]}}}
        )
        assert await fetch_filtered_blogs(client, PODCASTS) == []

    async def test_missing_blogs_key_is_empty(self):
        client = FakeStorefrontClient(responses={"GetBlogs": {}})
        assert await fetch_filtered_blogs(client, PODCASTS) == []
