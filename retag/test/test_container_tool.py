from retag.container_tools.container_tool import ContainerTool
from retag.test.mocks.mock_classes import MockImage
from retag.utils import logger

log = logger.setup("test_container_tool")


def test_container_tool_init():
    log.info("Test init container tool with params results in expected values")
    container_tool = ContainerTool(executable="podman")
    assert container_tool.executable == "podman"

    log.info("Test init container tool without params defaults to docker")
    container_tool = ContainerTool()
    assert container_tool.executable == "docker"


def test_build_cmd():
    log.info("Test arguments are prefixed with the executable and cast to str")
    assert ContainerTool(executable="podman")._build_cmd("pull", MockImage()) == [
        "podman",
        "pull",
        "registry.example.com/example1/example:1.0",
    ]
