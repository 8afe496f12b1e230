#!/usr/bin/env python3
import pytest

from retag.image import Image, override_tag
from retag.test.mocks.mock_classes import MockImage
from retag.utils import logger
from retag.utils.exceptions import MissingImageReferenceError

log = logger.setup("test_image")


def test_image_init():
    log.info("Test init image with url")
    image = Image(url="registry.example.com/app@sha256:abc")
    assert str(image) == "registry.example.com/app@sha256:abc"

    log.info("Test init throws MissingImageReferenceError")
    with pytest.raises(MissingImageReferenceError) as e:
        Image(url="")
    assert "Missing url" in e.value.args[0]


def test_image_with_tag():
    log.info("Test `with_tag` replaces the tag and keeps the subclass")
    image = MockImage().with_tag("2.0")
    assert isinstance(image, MockImage)
    assert image.url == "registry.example.com/example1/example:2.0"

    log.info("Test `with_tag` adds a tag to an untagged url")
    image = Image(url="registry.example.com:5000/example").with_tag("latest")
    assert str(image) == "registry.example.com:5000/example:latest"


def test_override_tag():
    log.info("Test existing tag is replaced")
    assert override_tag("2.0", "registry.example.com/app:1.0") == (
        "registry.example.com/app:2.0"
    )
    assert override_tag("2.0", "app:1.0") == "app:2.0"

    log.info("Test tag is appended when missing")
    assert override_tag("2.0", "registry.example.com/app") == (
        "registry.example.com/app:2.0"
    )
    assert override_tag("2.0", "app") == "app:2.0"

    log.info("Test registry port is not mistaken for a tag")
    assert override_tag("2.0", "registry.example.com:5000/app") == (
        "registry.example.com:5000/app:2.0"
    )
    assert override_tag("2.0", "registry.example.com:5000/app:1.0") == (
        "registry.example.com:5000/app:2.0"
    )
