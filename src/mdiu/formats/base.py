"""Abstract base class for output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Iterator, Optional

from mdiu.config import Config
from mdiu.model.schema import Block


class Format(ABC):
    """Base class of the built-in formats.

    The set of formats is fixed by this package: subclasses defined
    outside ``mdiu.formats`` are rejected.
    """

    name: ClassVar[str]
    extension: ClassVar[str]

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not cls.__module__.startswith("mdiu.formats."):
            raise TypeError(
                f"{cls.__qualname__} cannot subclass Format: formats are provided by mdiu only"
            )

    @abstractmethod
    def render(self, blocks: Iterable[Block]) -> str:
        """Render blocks, in order, to a single string.

        Args:
            blocks: The blocks of a validated document.

        Returns:
            The complete output text.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def with_lookahead(blocks: Iterable[Block]) -> Iterator[tuple[Block, Optional[Block]]]:
    """Yield each block paired with the block after it (None for the last)."""
    iterator = iter(blocks)
    try:
        current = next(iterator)
    except StopIteration:
        return
    for following in iterator:
        yield current, following
        current = following
    yield current, None
