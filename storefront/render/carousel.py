# storefront/render/carousel.py
"""Slider settings for the home page carousels.

The slider reads its options from a ``data-slick`` JSON attribute, so the
models serialize to the widget's camelCase keys and drop unset options.
"""
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MOBILE = 768
TABLET = 1024


class _SliderModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ResponsiveSettings(_SliderModel):
    slides_to_show: int
    slides_to_scroll: int | None = None


class Breakpoint(_SliderModel):
    breakpoint: int
    settings: ResponsiveSettings


class CarouselSettings(_SliderModel):
    infinite: bool = True
    slides_to_show: int
    slides_to_scroll: int = 1
    autoplay: bool | None = None
    speed: int = 2000
    autoplay_speed: int | None = None
    css_ease: str = "linear"
    arrows: bool = False
    dots: bool | None = None
    focus_on_select: bool | None = None
    rtl: bool | None = None
    responsive: List[Breakpoint] = []

    def to_attr(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


def _responsive(mobile: int, tablet: int, scroll: bool = False) -> List[Breakpoint]:
    return [
        Breakpoint(
            breakpoint=MOBILE,
            settings=ResponsiveSettings(slides_to_show=mobile, slides_to_scroll=mobile if scroll else None),
        ),
        Breakpoint(
            breakpoint=TABLET,
            settings=ResponsiveSettings(slides_to_show=tablet, slides_to_scroll=tablet if scroll else None),
        ),
    ]


HERO_CAROUSEL = CarouselSettings(
    slides_to_show=4,
    autoplay=True,
    autoplay_speed=2000,
    responsive=_responsive(1, 2),
)

PARTNER_CAROUSEL = CarouselSettings(
    slides_to_show=6,
    autoplay=True,
    autoplay_speed=2000,
    rtl=True,
    responsive=_responsive(2, 4),
)

VIDEOS_CAROUSEL = CarouselSettings(
    slides_to_show=5,
    autoplay=True,
    autoplay_speed=2000,
    focus_on_select=True,
    responsive=_responsive(2, 4),
)

TRENDING_PRODUCTS_CAROUSEL = CarouselSettings(
    slides_to_show=4,
    slides_to_scroll=4,
    dots=False,
    arrows=True,
    speed=1000,
    focus_on_select=True,
    responsive=_responsive(1, 2, scroll=True),
)
