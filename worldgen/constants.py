"""Project-wide constants for the Traveller world generator."""

# --- Metadata ---
TITLE = "Traveller Worldgen"
VERSION = "0.4.0"

# --- Defaults for the seed main world ---
INITIAL_NAME = "Main World"
INITIAL_UPP = "A788899-A"

# --- Companion star orbits (relative to the parent star) ---
PRIMARY_ORBIT = -1  # Top-level primary, orbits nothing
CONTACT_ORBIT = 0  # Shares the primary's position
FAR_ORBIT = 1000  # Too distant to occupy a numbered slot

# --- Well-known body names ---
RING_NAME = "Ring System"
BELT_NAME = "Planetoid Belt"

# --- Generation limits ---
SATELLITE_RETRY_LIMIT = 64  # Collision retries before a satellite orbit falls back
MAX_DIGIT = 15  # Largest value a single UPP hex digit can hold

# --- Main-world habitability ---
BREATHABLE_ATMOSPHERES = (5, 6, 8)
STAR_BONUS = 4  # Primary-type bonus for worlds that need a conventional star
