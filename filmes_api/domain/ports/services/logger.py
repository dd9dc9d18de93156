from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for use cases that receive their logger by injection."""

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        pass
