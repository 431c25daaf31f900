from typing import Iterable, Iterator, Optional, Sequence

import pandas as pd

from errors import OutOfRange


DEFAULT_COLUMNS = ("Name", "Pods", "Containers")


class RowRecord(tuple):
    """Immutable display fields of one row: a name plus summary strings."""

    def __new__(cls, fields: Iterable = ()):
        return super().__new__(cls, ("" if f is None else str(f) for f in fields))

    @property
    def name(self) -> str:
        return self[0] if self else ""


class Section:
    def __init__(
        self,
        title: str,
        rows: Sequence = (),
        display_height: int = 1,
        columns: Sequence[str] = DEFAULT_COLUMNS,
    ):
        self.title = str(title)
        self.columns = tuple(str(c) for c in columns)
        self.rows = tuple(r if isinstance(r, RowRecord) else RowRecord(r) for r in rows)
        self.display_height = max(1, int(display_height))
        self.inner_selected: Optional[int] = None

    @classmethod
    def from_frame(cls, title, df: pd.DataFrame, display_height=1):
        rows = []
        for values in df.itertuples(index=False, name=None):
            rows.append(RowRecord("" if (v is None or pd.isna(v)) else v for v in values))
        return cls(title, rows, display_height=display_height, columns=df.columns)

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return (
            f"Section({self.title!r}, rows={len(self.rows)}, "
            f"inner_selected={self.inner_selected!r})"
        )

    def select(self, index: Optional[int]):
        if index is None:
            self.inner_selected = None
            return
        if index < 0 or index >= len(self.rows):
            raise OutOfRange(f"row {index} out of range for {self.title!r} ({len(self.rows)} rows)")
        self.inner_selected = index

    # ---------- inner cursor ----------
    def next_row(self):
        total = len(self.rows)
        if total == 0:
            return
        current = -1 if self.inner_selected is None else self.inner_selected
        self.inner_selected = (current + 1) % total

    def previous_row(self):
        total = len(self.rows)
        if total == 0:
            return
        current = 0 if self.inner_selected is None else self.inner_selected
        self.inner_selected = (current - 1 + total) % total

    @property
    def selected_row(self) -> Optional[RowRecord]:
        if self.inner_selected is None or not (0 <= self.inner_selected < len(self.rows)):
            return None
        return self.rows[self.inner_selected]


class SectionStore:
    """Ordered, fixed set of sections; insertion order is display order."""

    def __init__(self, sections: Iterable[Section] = ()):
        self._sections = tuple(sections)

    def __len__(self):
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def get(self, index: int) -> Section:
        if index is None or index < 0 or index >= len(self._sections):
            raise OutOfRange(f"section {index} out of range ({len(self._sections)} sections)")
        return self._sections[index]

    def titles(self) -> list[str]:
        return [s.title for s in self._sections]

    def display_heights(self) -> list[int]:
        return [s.display_height for s in self._sections]
