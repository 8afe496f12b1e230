from abc import ABC
from dataclasses import dataclass


@dataclass
class ContainerTool(ABC):
    """
    An abstract base class that represents a container tool.

    Attributes:
        executable (str): Name or path of the binary to invoke. Default is "docker".

    Methods:
        _build_cmd(*args: str) -> list[str]:
            Prefix the executable to the given arguments, casting each one to str so
            Image objects and paths can be passed directly.
    """

    executable: str = "docker"

    def _build_cmd(self, *args) -> list[str]:
        return [self.executable, *(str(arg) for arg in args)]
