from enum import Enum


class SourceKind(Enum):
    """Random number generator sources selectable by name."""
    CRYPTO = "crypto"
    PSEUDO = "pseudo"                # deterministic source seeded from the clock
    DETERMINISTIC = "deterministic"  # deterministic source with the default seed
    MT32 = "mt32"
    MT64 = "mt64"
    SIMPLE = "simple"
