#!/usr/bin/env python3

import argparse
import sys
from typing import Optional

from retag.config import Config, load_config
from retag.container_tools.engine import ContainerEngine
from retag.destination import apply_destination_mapping, generate_destination_path
from retag.image import Image
from retag.utils import logger
from retag.utils.exceptions import (
    ConfigValidationError,
    EmptyDestinationError,
    GenericSubprocessError,
    MissingImageReferenceError,
    PushAbortedError,
    RepositoryNotFoundForDestinationError,
    RepositoryNotFoundForSourceError,
)

log = logger.setup(name="retag")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="retag",
        description="Pull an image, re-tag it for another registry and push it",
    )
    parser.add_argument(
        "-c",
        "--container-tool",
        default="docker",
        help="container tool used to pull, tag and push (podman/docker)",
    )
    parser.add_argument(
        "-i",
        "--image",
        required=True,
        help="image that will be used",
    )
    parser.add_argument(
        "-d",
        "--destination-repository",
        "--destination",
        dest="destination",
        required=True,
        help='destination repository picked from the config by repository "name" '
        'or "additionalNames". If it starts with "!" the config is ignored and '
        'the image is pushed to whatever follows the "!"',
    )
    parser.add_argument(
        "-t",
        "--override-tag",
        default="",
        help="override image tag",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="push image without asking for destination path verification",
    )
    parser.add_argument(
        "-C",
        "--config",
        default=None,
        help="config file, defaults to $RETAG_CONFIG or config.json",
    )
    args = parser.parse_args(argv)
    if not args.container_tool:
        parser.error("Must specify --container-tool")
    if not args.image:
        parser.error("Must specify --image")
    if not args.destination:
        parser.error("Must specify --destination-repository")
    return args


def derive_destination(
    source: Image, selector: str, config: Config, tag: str = ""
) -> Image:
    """Apply repository lookup, global mappings and tag override, in that order."""
    destination = generate_destination_path(str(source), selector, config)
    destination = apply_destination_mapping(destination, config.destination_mappings)
    image = Image(url=destination)
    return image.with_tag(tag) if tag else image


def confirm_destination(destination: Image) -> None:
    print(f"Generated destination image: {destination}")
    try:
        answer = input("Do you agree to tag & push it? [type y to confirm]: ")
    except EOFError:
        answer = ""
    if answer.strip().lower() != "y":
        raise PushAbortedError("Push aborted by user.")


def _log_output(output: str) -> None:
    if output and output.strip():
        log.info(output.strip())


def retag_image(engine: ContainerEngine, source: Image, destination: Image) -> None:
    log.info("Pulling image...")
    _log_output(engine.pull(source, log_cmd=True))

    log.info("Tagging image...")
    _log_output(engine.tag(source, destination, log_cmd=True))

    log.info("Pushing image...")
    _log_output(engine.push(destination, log_cmd=True))


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ConfigValidationError) as ex:
        log.error(ex)
        sys.exit(1)

    source = Image(url=args.image)
    try:
        destination = derive_destination(
            source, args.destination, config, args.override_tag
        )
    except (
        EmptyDestinationError,
        MissingImageReferenceError,
        RepositoryNotFoundForSourceError,
        RepositoryNotFoundForDestinationError,
    ) as ex:
        log.error(ex)
        sys.exit(1)

    if not args.force:
        try:
            confirm_destination(destination)
        except PushAbortedError as ex:
            log.error(ex)
            sys.exit(1)

    engine = ContainerEngine(executable=args.container_tool)
    try:
        retag_image(engine, source, destination)
    except GenericSubprocessError:
        sys.exit(1)
    log.info(f"Pushed {destination}")


if __name__ == "__main__":
    main()
