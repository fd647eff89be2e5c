"""Constants used for dataset parsing and element record fields."""

# Top-level dataset keys
NAME_KEY = "name"
VERSION_KEY = "version"
SOURCE_KEY = "source"
ELEMENTS_KEY = "elements"

# Identity keys
ATOMIC_NUMBER_KEY = "atomic_number"
SYMBOL_KEY = "symbol"
ELEMENT_NAME_KEY = "name"

# Position in the table
GROUP_KEY = "group"
PERIOD_KEY = "period"
BLOCK_KEY = "block"

# Composition keys
ATOMIC_WEIGHT_KEY = "atomic_weight"
PROTONS_KEY = "protons"
NEUTRONS_KEY = "neutrons"
ELECTRONS_KEY = "electrons"

# Physical properties
MELTING_POINT_KEY = "melting_point"
BOILING_POINT_KEY = "boiling_point"
DENSITY_KEY = "density"
ELECTRONEGATIVITY_KEY = "electronegativity"
PHASE_KEY = "phase"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
