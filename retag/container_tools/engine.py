import subprocess
from dataclasses import dataclass

from retag.container_tools.container_tool import ContainerTool
from retag.image import Image
from retag.utils import logger
from retag.utils.decorators import subprocess_error_handler

log = logger.setup(name="engine")


@dataclass
class ContainerEngine(ContainerTool):
    """A docker compatible container engine (docker, podman, nerdctl...).

    Every command returns the combined stdout and stderr of the process.
    """

    def _run(self, cmd: list[str], log_cmd: bool = False) -> str:
        if log_cmd:
            log.info(cmd)
        result = subprocess.run(
            args=cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=True,
            encoding="utf-8",
            errors="replace",
        )
        return result.stdout

    @subprocess_error_handler(logging_message="ContainerEngine.pull failed")
    def pull(self, image: Image | str, log_cmd: bool = False) -> str:
        return self._run(self._build_cmd("pull", image), log_cmd=log_cmd)

    @subprocess_error_handler(logging_message="ContainerEngine.tag failed")
    def tag(self, src: Image | str, dest: Image | str, log_cmd: bool = False) -> str:
        """Give the local image `src` the additional name `dest`."""
        return self._run(self._build_cmd("tag", src, dest), log_cmd=log_cmd)

    @subprocess_error_handler(logging_message="ContainerEngine.push failed")
    def push(self, image: Image | str, log_cmd: bool = False) -> str:
        return self._run(self._build_cmd("push", image), log_cmd=log_cmd)
