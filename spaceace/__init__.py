"""SpaceAce companion core: galaxy map, dice and journal for tabletop play."""

__version__ = "1.0.0"
