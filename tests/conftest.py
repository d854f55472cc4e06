"""Pytest fixtures for Permalink Distiller tests."""

from datetime import datetime

import pytest

from schemas import Resource


@pytest.fixture
def make_resource():
    """Factory for resources with sensible defaults."""

    def _make(path: str, **kwargs) -> Resource:
        return Resource(path=path, destination_path=path, **kwargs)

    return _make


@pytest.fixture
def localized_options():
    """Blog options for a multilingual blog with dated sources."""
    return {
        "sources": ":lang/:year/:month/:day/:title.html",
        "permalink": ":lang/:year/:month/:title/",
        "environment": "production",
        "default_locale": "en",
    }


@pytest.fixture
def sample_resources(make_resource):
    """A small site: three articles, a draft, a companion image and a plain page."""
    return [
        make_resource(
            "en/2014/03/15/hello-world.html",
            date=datetime(2014, 3, 15),
            tags=["intro", "news"],
        ),
        make_resource("en/2014/03/15/hello-world/cover.jpg"),
        make_resource(
            "de/2014/04/01/hallo-welt.html",
            date=datetime(2014, 4, 1),
            tags=["news"],
        ),
        make_resource(
            "en/2013/12/24/holidays.html",
            date=datetime(2013, 12, 24),
            tags=["intro"],
        ),
        make_resource(
            "en/2015/01/01/draft.html",
            date=datetime(2015, 1, 1),
            published=False,
        ),
        make_resource("en/2015/01/01/draft/chart.png"),
        make_resource("about.html"),
    ]
