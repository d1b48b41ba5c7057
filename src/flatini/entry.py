import dataclasses
from collections.abc import Iterable

Config = dict[str, dict[str, str]]


@dataclasses.dataclass(frozen=True, slots=True)
class Entry:
    """A single key/value pair and the section it was declared under.

    Attributes:
        section: The section name. The empty string is the default section.
        key: The entry's key, which is only empty for a bare `=` line.
        value: The entry's value. Continued lines leave a newline in here.
    """

    section: str = ""
    key: str = ""
    value: str = ""


def to_dict(entries: Iterable[Entry]) -> Config:
    """Group entries into a dictionary of sections mapped to their properties.

    Later entries override earlier ones with the same section and key.

    Args:
        entries: The entries to group.

    Returns:
        A dictionary of sections mapped to their properties.
    """

    config: Config = {}

    for entry in entries:
        config.setdefault(entry.section, {})[entry.key] = entry.value

    return config


def from_dict(config: Config) -> list[Entry]:
    """Flatten a dictionary of sections into entries, in insertion order.

    Sections without any properties have no entries and are dropped.
    """

    return [
        Entry(section, key, value)
        for section, properties in config.items()
        for key, value in properties.items()
    ]
