from dataclasses import dataclass


@dataclass(frozen=True)
class Personality:
    """
    Describes the voice the catalog is written in.

    The id prefixes every template id so a UI can tell which
    catalog a line came from if a second voice is ever added.
    """

    id: str


DEFAULT_PERSONALITY = Personality(id="punchy")
