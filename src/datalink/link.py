"""🔗 Link - Relationship between two named datasets.

A link records:
- The source (``from_dataset``) and target (``to_dataset``) dataset names
- A free-form link type tag (e.g. "keyed")
- One or more column mappings joining the two datasets

Each column mapping goes from columns of ``from_dataset`` (keys) to the
matching columns of ``to_dataset`` (values). A mapping with several pairs is
a composite key; several mappings are alternative ways to join.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ColumnMapping = dict[str, str]


@dataclass
class Link:
    """A link between two datasets.

    Renames are matched by exact name and never fail: a name that is not
    referenced by the link is simply ignored.

    Example:
        link = Link(
            from_dataset="patients",
            to_dataset="visits",
            link_type="keyed",
            link_columns=[{"id": "patient_id"}],
        )

        link.rename_dataset("patients", "people")
        link.rename_column("visits", "patient_id", "pid")
        # link.link_columns == [{"id": "pid"}]
    """

    from_dataset: str = ""
    to_dataset: str = ""
    link_type: str = ""
    link_columns: list[ColumnMapping] = field(default_factory=list)

    def __post_init__(self) -> None:
        # The link owns its mappings, never the caller's objects
        self.link_columns = [dict(mapping) for mapping in self.link_columns or []]

    def clone(self) -> Link:
        """Create an independent copy of this link."""
        return Link(
            from_dataset=self.from_dataset,
            to_dataset=self.to_dataset,
            link_type=self.link_type,
            link_columns=self.link_columns,
        )

    def involves(self, dataset_name: str) -> bool:
        """Check whether either side of the link is ``dataset_name``."""
        return dataset_name in (self.from_dataset, self.to_dataset)

    def rename_dataset(self, old_name: str, new_name: str) -> None:
        """Rename a dataset referenced by the link.

        Both sides are checked, so a self-link is renamed on both ends.

        Args:
            old_name: Current dataset name
            new_name: Name to use instead
        """
        if self.from_dataset == old_name:
            self.from_dataset = new_name
        if self.to_dataset == old_name:
            self.to_dataset = new_name

    def rename_column(
        self,
        dataset_name: str,
        old_column_name: str,
        new_column_name: str,
    ) -> None:
        """Rename a column of one of the linked datasets.

        Columns of ``from_dataset`` are the mapping keys, columns of
        ``to_dataset`` are the mapping values. When both sides are
        ``dataset_name`` keys and values are renamed.

        Renaming onto a key that already exists in a mapping leaves a single
        entry at the first key's position, holding the later value.

        Args:
            dataset_name: Dataset the column belongs to
            old_column_name: Current column name
            new_column_name: Name to use instead
        """
        if self.from_dataset == dataset_name:
            for mapping in self.link_columns:
                if old_column_name not in mapping:
                    continue
                items = [
                    (new_column_name if key == old_column_name else key, value)
                    for key, value in mapping.items()
                ]
                mapping.clear()
                mapping.update(items)
        if self.to_dataset == dataset_name:
            for mapping in self.link_columns:
                for key, value in mapping.items():
                    if value == old_column_name:
                        mapping[key] = new_column_name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "from_dataset": self.from_dataset,
            "to_dataset": self.to_dataset,
            "link_type": self.link_type,
            "link_columns": [dict(mapping) for mapping in self.link_columns],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Link:
        """Create from dictionary.

        Raises:
            pydantic.ValidationError: If the dictionary is not link-shaped
        """
        from .config import LinkConfig

        return LinkConfig.from_dict(data).to_link()
