"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_TEMPLATE = """\
# Best {{service}} in {{city}}

Looking for {{service}} near {{city}}? prompt("Write an intro about {{service}} in {{city}}")

## Why choose {{business_name}}

prompt('List three reasons to hire {{business_name}}')

image_prompt("A photo of {{city}} skyline")
"""

SAMPLE_DATA = {
    "service": "Plumbing",
    "city": "Boston",
    "business_name": "Ace Pipes",
}

SAMPLE_ARTICLE = """\
Intro line one.
Intro line two.

## Getting Started

First paragraph.

- step one
* step two

### Details

Closing words.
"""


@pytest.fixture(name="template")
def template_fixture():
    return SAMPLE_TEMPLATE


@pytest.fixture(name="data")
def data_fixture():
    return dict(SAMPLE_DATA)


@pytest.fixture(name="article")
def article_fixture():
    return SAMPLE_ARTICLE
