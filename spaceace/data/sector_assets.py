"""Static catalog of named sector templates.

Each template describes a sector card: name, broad type, danger flag and a
short description. Templates are keyed by lowercase name. Galaxy generation
draws from this table without replacement.
"""

from dataclasses import dataclass

from ..models.sector import SectorType
from ..utils.rng import GameRNG


@dataclass(frozen=True)
class SectorAsset:
    """Template for a named sector."""

    name: str
    type: SectorType
    is_dangerous: bool
    description: str

    @property
    def image_name(self) -> str:
        """Card artwork file for this sector."""
        return f"{self.name}.png"


# Fixed key to template mapping (deterministic insertion order)
SECTOR_ASSETS: dict[str, SectorAsset] = {
    "lanai": SectorAsset(
        "Lanai", SectorType.CIVILIZED, False,
        "Home of Starbase 42. The starting point for Space Aces.",
    ),
    "solaris": SectorAsset(
        "Solaris", SectorType.CIVILIZED, False,
        "A bright star system with established trade routes.",
    ),
    "lumina": SectorAsset(
        "Lumina", SectorType.CIVILIZED, False,
        "A luminous system known for its research facilities.",
    ),
    "vega": SectorAsset(
        "Vega", SectorType.CIVILIZED, False,
        "An established system with strong governmental presence.",
    ),
    "gemma": SectorAsset(
        "Gemma", SectorType.FRONTIER, False,
        "A mining system rich in precious gems and crystals.",
    ),
    "rukbat": SectorAsset(
        "Rukbat", SectorType.FRONTIER, False,
        "A frontier system with agricultural colonies.",
    ),
    "viridis": SectorAsset(
        "Viridis", SectorType.FRONTIER, False,
        "A green world with terraforming operations.",
    ),
    "hope": SectorAsset(
        "Hope", SectorType.FRONTIER, False,
        "A colony system representing hope for expansion.",
    ),
    "corsair": SectorAsset(
        "Corsair", SectorType.DANGEROUS, True,
        "Known pirate haven with frequent raids.",
    ),
    "tyranus": SectorAsset(
        "Tyranus", SectorType.DANGEROUS, True,
        "A system ruled by a tyrannical warlord.",
    ),
    "malalo": SectorAsset(
        "Malalo", SectorType.DANGEROUS, True,
        "A system plagued by conflicts and unrest.",
    ),
    "maelstro": SectorAsset(
        "Maelstro", SectorType.DANGEROUS, True,
        "A chaotic system with dangerous space storms.",
    ),
    "vanta": SectorAsset(
        "Vanta", SectorType.ANOMALY, True,
        "A dark system with mysterious properties.",
    ),
    "eidolon": SectorAsset(
        "Eidolon", SectorType.ANOMALY, True,
        "A ghostly system with spectral phenomena.",
    ),
    "gazer": SectorAsset(
        "Gazer", SectorType.ANOMALY, True,
        "A system with strange observational effects.",
    ),
    "efflux": SectorAsset(
        "Efflux", SectorType.ANOMALY, True,
        "A system with dangerous energy emissions.",
    ),
    "xinti": SectorAsset(
        "Xinti", SectorType.UNKNOWN, False,
        "An unexplored system of alien origin.",
    ),
    "douglas": SectorAsset(
        "Douglas", SectorType.FRONTIER, False,
        "A hardy frontier system with industrial focus.",
    ),
    "asimov": SectorAsset(
        "Asimov", SectorType.CIVILIZED, False,
        "A system renowned for its robotic industries.",
    ),
    "antilae": SectorAsset(
        "Antilae", SectorType.FRONTIER, False,
        "A frontier system on the edge of known space.",
    ),
    "arrak": SectorAsset(
        "Arrak", SectorType.DANGEROUS, True,
        "A desert system with harsh conditions.",
    ),
    "bandor": SectorAsset(
        "Bandor", SectorType.DANGEROUS, True,
        "A system controlled by criminal organizations.",
    ),
    "beez": SectorAsset(
        "Beez", SectorType.FRONTIER, False,
        "A system with industrious insectoid colonies.",
    ),
    "bloom": SectorAsset(
        "Bloom", SectorType.FRONTIER, False,
        "A flourishing agricultural system.",
    ),
    "fluffulon": SectorAsset(
        "Fluffulon", SectorType.CIVILIZED, False,
        "A peaceful system known for its comfort industries.",
    ),
    "frigus": SectorAsset(
        "Frigus", SectorType.FRONTIER, False,
        "A cold system with ice mining operations.",
    ),
    "glorp": SectorAsset(
        "Glorp", SectorType.UNKNOWN, False,
        "A mysterious system with unusual properties.",
    ),
    "hondo": SectorAsset(
        "Hondo", SectorType.FRONTIER, False,
        "A system with a strong martial tradition.",
    ),
    "ionos": SectorAsset(
        "Ionos", SectorType.ANOMALY, True,
        "A system with dangerous ionic storms.",
    ),
    "jurassi": SectorAsset(
        "Jurassi", SectorType.DANGEROUS, True,
        "A primitive system with dangerous megafauna.",
    ),
    "lupin": SectorAsset(
        "Lupin", SectorType.FRONTIER, False,
        "A wild system with pack-hunting species.",
    ),
    "magrath": SectorAsset(
        "Magrath", SectorType.CIVILIZED, False,
        "A magical system with mystical properties.",
    ),
    "revati": SectorAsset(
        "Revati", SectorType.CIVILIZED, False,
        "A prosperous trading system.",
    ),
    "scintilla": SectorAsset(
        "Scintilla", SectorType.CIVILIZED, False,
        "A sparkling system known for its entertainment.",
    ),
    "snacc": SectorAsset(
        "Snacc", SectorType.FRONTIER, False,
        "A system specializing in food production.",
    ),
    "snodd": SectorAsset(
        "Snodd", SectorType.UNKNOWN, False,
        "An oddly named system with peculiar inhabitants.",
    ),
    "toblero": SectorAsset(
        "Toblero", SectorType.FRONTIER, False,
        "A system known for its triangular space stations.",
    ),
    "wolfram": SectorAsset(
        "Wolfram", SectorType.FRONTIER, False,
        "A metallic system rich in rare minerals.",
    ),
}

BLANK_CARD = "!Blank.png"  # Artwork for undiscovered sectors


def get_sector_asset(name: str) -> SectorAsset | None:
    """Look up a template by name, case-insensitively.

    Args:
        name: Sector name or key (e.g., "Vega", "vega")

    Returns:
        The matching SectorAsset, or None if the name is unknown
    """
    return SECTOR_ASSETS.get(name.lower())


def get_all_sector_names() -> list[str]:
    """Return every template key in catalog order."""
    return list(SECTOR_ASSETS)


def get_sectors_by_type(type: SectorType) -> list[SectorAsset]:
    return [asset for asset in SECTOR_ASSETS.values() if asset.type == type]


def get_random_sector(rng: GameRNG) -> SectorAsset:
    """Pick any template uniformly at random (with replacement)."""
    return rng.choice(list(SECTOR_ASSETS.values()))
