import logging

import pandas as pd

from section_store import DEFAULT_COLUMNS, Section, SectionStore


logger = logging.getLogger(__name__)

PLACEHOLDER_ROWS = 30

DEFAULT_SECTIONS = [
    {"title": "ReplicaSets", "display_height": 12, "rows": PLACEHOLDER_ROWS, "name_prefix": "replicaname"},
    {"title": "Services", "display_height": 8, "rows": PLACEHOLDER_ROWS, "name_prefix": "servicename"},
]


def placeholder_frame(count: int, name_prefix: str = "replicaname") -> pd.DataFrame:
    count = max(0, int(count))
    cols = list(DEFAULT_COLUMNS)
    return pd.DataFrame(
        {
            cols[0]: [f"{name_prefix}-{i + 1}" for i in range(count)],
            cols[1]: ["10/10"] * count,
            cols[2]: ["20/20"] * count,
        },
        columns=cols,
    )


class DefaultSectionsInitializer:
    def __init__(self, definitions=None):
        self.definitions = definitions if definitions is not None else DEFAULT_SECTIONS

    def create(self) -> SectionStore:
        sections = []
        for spec in self.definitions:
            df = placeholder_frame(
                spec.get("rows", PLACEHOLDER_ROWS),
                spec.get("name_prefix", "replicaname"),
            )
            sections.append(
                Section.from_frame(spec["title"], df, display_height=spec.get("display_height", 1))
            )
        logger.debug("built %d sections: %s", len(sections), [s.title for s in sections])
        return SectionStore(sections)
