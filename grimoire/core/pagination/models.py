from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A fixed-capacity slice of a note buffer's lines."""

    index: int
    capacity: int
    content: str

    @property
    def first_line(self) -> int:
        """Offset of the page's first line in the buffer."""
        return self.index * self.capacity
