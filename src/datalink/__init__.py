"""🔗 datalink - Links between tabular datasets.

Quick Start:
    from datalink import Link

    link = Link("patients", "visits", "keyed", [{"id": "patient_id"}])

    link.rename_dataset("patients", "people")
    link.rename_column("visits", "patient_id", "pid")
    copy = link.clone()

From YAML:
    from datalink import load_links, show_links

    links = load_links(yaml_text)
    show_links(links)
"""

from .config import LinkConfig, LinksConfig, Settings, get_settings, load_links
from .display import show_links
from .link import ColumnMapping, Link

__version__ = "1.0.0"

__all__ = [
    "Link",
    "ColumnMapping",
    "LinkConfig",
    "LinksConfig",
    "Settings",
    "get_settings",
    "load_links",
    "show_links",
    "__version__",
]
