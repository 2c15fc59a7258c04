"""Campaign configuration constants."""

# Galaxy layout
HOME_SECTOR_ID = "home-sector"
HOME_SECTOR_ASSET = "lanai"  # Home template is fixed, never drawn at random
GALAXY_RING_COUNT = 4  # Rings 1-4 around the home sector
OUTER_RING_DISCOVERY_PROB = 0.3  # Rings 2-4; ring 1 is always discovered

# Dice
ROLL_HISTORY_LIMIT = 100  # Oldest rolls are evicted past this

# Rendering
DEFAULT_HEX_SIZE = 40.0  # Pixel radius, center to vertex

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
