"""TransformPipeline — runs ordered text rewrites over a note body."""

from abc import ABC, abstractmethod


class Transform(ABC):
    @abstractmethod
    def apply(self, content: str) -> str:
        """Rewrite markdown content. Must never raise on any input."""
        ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def apply(self, content: str) -> str:
        for t in self.transforms:
            content = t.apply(content)
        return content
