from dataclasses import dataclass

from retag.utils.exceptions import MissingImageReferenceError


def override_tag(tag: str, image: str) -> str:
    """Replace the tag of an image reference, or add one if it has none.

    The tag is whatever follows the last colon, unless a slash comes after
    that colon, in which case the colon separates a registry host from its
    port and the reference is untagged.
    """
    i = image.rfind(":")
    if i != -1 and "/" not in image[i:]:
        return f"{image[:i]}:{tag}"
    return f"{image}:{tag}"


@dataclass(frozen=True)
class Image:
    """An image reference exactly as it is handed to the container tool."""

    url: str

    def __post_init__(self) -> None:
        if not self.url:
            raise MissingImageReferenceError(
                "Missing url for Image type. A reference must be provided at instantiation"
            )

    def with_tag(self, tag: str) -> "Image":
        return type(self)(url=override_tag(tag, self.url))

    def __str__(self):
        return self.url
