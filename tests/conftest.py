"""Shared fixtures for the Markdown Extra tests."""

import pytest
from bs4 import BeautifulSoup

from markdown_extra.config import get_extra_config
from markdown_extra.session import ConversionSession


@pytest.fixture
def make_session():
    def factory(**options):
        return ConversionSession(get_extra_config(options))

    return factory


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def soup():
    def parse(html):
        return BeautifulSoup(html, "html.parser")

    return parse


class StubHost:
    """Host that records its input and returns canned output."""

    def __init__(self, output="<p>stub</p>"):
        self.output = output
        self.calls = []

    def render(self, text):
        self.calls.append(text)
        return self.output


@pytest.fixture
def stub_host():
    return StubHost
