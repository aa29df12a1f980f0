from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SourceItem:
    file_id: str
    content: str


class InputSource(Protocol):
    """A finite, ordered producer of ``SourceItem``s.

    Implementations raise ``InputError`` when content cannot be produced.
    """

    def __iter__(self) -> Iterator[SourceItem]: ...


class MemorySource:
    def __init__(self, items: Iterable[SourceItem | tuple[str, str]]) -> None:
        self._items = [
            item if isinstance(item, SourceItem) else SourceItem(file_id=str(item[0]), content=str(item[1]))
            for item in items
        ]

    def __iter__(self) -> Iterator[SourceItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["InputSource", "MemorySource", "SourceItem"]
