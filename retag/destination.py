from retag.config import Config
from retag.utils import logger
from retag.utils.exceptions import (
    EmptyDestinationError,
    RepositoryNotFoundForDestinationError,
    RepositoryNotFoundForSourceError,
)

log = logger.setup(name="destination")

# selectors starting with this bypass the config entirely
LITERAL_DESTINATION_PREFIX = "!"


def generate_destination_path(image: str, destination: str, config: Config) -> str:
    """Build the destination reference for `image`.

    The registry path of the repository the image comes from is stripped, and
    the remaining path is placed under the repository named by `destination`.
    A bare image name without any `/` is used as is.

    Raises:
        RepositoryNotFoundForSourceError: no repository prefixes the image.
        RepositoryNotFoundForDestinationError: no repository is named `destination`.
    """
    if len(image.split("/")) < 2:
        return get_destination(destination, image, config)

    for repo in config.repositories:
        prefix = f"{repo.registry_path}/"
        if image.startswith(prefix):
            log.debug("Source image matches repository %s", repo.name)
            return get_destination(destination, image[len(prefix) :], config)

    raise RepositoryNotFoundForSourceError(image)


def get_destination(destination: str, image_path: str, config: Config) -> str:
    if destination.startswith(LITERAL_DESTINATION_PREFIX):
        literal = destination.replace(LITERAL_DESTINATION_PREFIX, "", 1)
        if not literal.strip():
            raise EmptyDestinationError(destination)
        return literal

    for repo in config.repositories:
        if repo.matches(destination):
            log.debug("Destination %s matches repository %s", destination, repo.name)
            return apply_destination_mapping(
                f"{repo.registry_path}/{image_path}", repo.destination_mappings
            )

    raise RepositoryNotFoundForDestinationError(destination)


def apply_destination_mapping(path: str, mapping: dict[str, str]) -> str:
    """Replace the first occurrence of the first mapping key found in `path`.

    At most one substitution is made; keys are tried in mapping order.
    """
    for source, dest in mapping.items():
        if source in path:
            return path.replace(source, dest, 1)
    return path
