"""Size-sorted collection of discovered icons"""

from typing import Iterable, Iterator, Optional

from siteicons.models import Icon


class IconCollection:
    """Icons sorted ascending by area (width x height).

    The collection is never modified after construction. Every icon carries
    dimensions, so no member needs to be checked again.
    """

    def __init__(self, icons: Iterable[Icon]) -> None:
        self._icons: list[Icon] = sorted(icons, key=lambda icon: icon.dimensions.area)

    def __len__(self) -> int:
        return len(self._icons)

    def __iter__(self) -> Iterator[Icon]:
        return iter(self._icons)

    def __repr__(self) -> str:
        return f"IconCollection({len(self._icons)} icons)"

    def largest(self) -> Optional[Icon]:
        """Return the icon with the largest area, or None if the collection is empty."""
        return self._icons[-1] if self._icons else None

    def at_least(self, width: int, height: int) -> Optional[Icon]:
        """Return the smallest icon that is at least `width` x `height`.

        If no icon is big enough the largest icon is returned instead, so callers get
        some icon whenever one exists. None is returned only for an empty collection.
        """
        for icon in self._icons:
            if icon.width >= width and icon.height >= height:
                return icon
        return self.largest()

    def into_sequence(self) -> list[Icon]:
        """Return the icons sorted ascending by area."""
        return list(self._icons)
