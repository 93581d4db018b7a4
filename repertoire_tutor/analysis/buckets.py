from __future__ import annotations

from enum import StrEnum


class OpeningBucket(StrEnum):
    # 1.e4 e5, White repertoire
    RUY_LOPEZ = "ruy_lopez"
    ITALIAN_GAME = "italian_game"
    SCOTCH_GAME = "scotch_game"
    FOUR_KNIGHTS = "four_knights"
    PETROV_DEFENSE = "petrov_defense"
    PHILIDOR_DEFENSE = "philidor_defense"
    BISHOPS_OPENING = "bishops_opening"
    KINGS_GAMBIT = "kings_gambit"
    VIENNA_GAME = "vienna_game"
    CENTER_GAME = "center_game"
    PONZIANI = "ponziani"

    # 1.d4, White repertoire
    CATALAN = "catalan"
    QUEENS_GAMBIT = "queens_gambit"
    LONDON_SYSTEM = "london_system"
    TROMPOWSKY = "trompowsky"
    TORRE_ATTACK = "torre_attack"
    COLLE_SYSTEM = "colle_system"
    VERESOV = "veresov"
    BLACKMAR_DIEMER = "blackmar_diemer"

    # Flank openings
    ENGLISH_OPENING = "english_opening"
    KINGS_INDIAN_ATTACK = "kings_indian_attack"
    RETI_OPENING = "reti_opening"
    BIRDS_OPENING = "birds_opening"
    LARSEN_OPENING = "larsen_opening"
    GROB_ATTACK = "grob_attack"
    OTHER_WHITE = "other_white"

    # Sicilian complex
    SICILIAN_ALAPIN = "sicilian_alapin"
    SICILIAN_CLOSED = "sicilian_closed"
    SICILIAN_NAJDORF = "sicilian_najdorf"
    SICILIAN_DRAGON = "sicilian_dragon"
    SICILIAN_SCHEVENINGEN = "sicilian_scheveningen"
    SICILIAN_CLASSICAL = "sicilian_classical"
    SICILIAN_SVESHNIKOV = "sicilian_sveshnikov"
    SICILIAN_ACCELERATED_DRAGON = "sicilian_accelerated_dragon"
    SICILIAN_TAIMANOV = "sicilian_taimanov"
    SICILIAN_KAN = "sicilian_kan"
    SICILIAN_OTHER = "sicilian_other"

    # Other defenses to 1.e4
    FRENCH_DEFENSE = "french_defense"
    CARO_KANN = "caro_kann"
    SCANDINAVIAN = "scandinavian"
    ALEKHINE_DEFENSE = "alekhine_defense"
    PIRC_DEFENSE = "pirc_defense"
    MODERN_DEFENSE = "modern_defense"
    OWEN_DEFENSE = "owen_defense"
    KINGS_PAWN_OTHER = "kings_pawn_other"

    # Defenses to 1.d4
    GRUNFELD = "grunfeld"
    KINGS_INDIAN = "kings_indian"
    NIMZO_INDIAN = "nimzo_indian"
    QUEENS_INDIAN = "queens_indian"
    BOGO_INDIAN = "bogo_indian"
    QUEENS_GAMBIT_DECLINED = "queens_gambit_declined"
    QUEENS_GAMBIT_ACCEPTED = "queens_gambit_accepted"
    BENONI = "benoni"
    BUDAPEST_GAMBIT = "budapest_gambit"
    D4_OTHER = "d4_other"
    SLAV_DEFENSE = "slav_defense"
    SEMI_SLAV = "semi_slav"
    TARRASCH_DEFENSE = "tarrasch_defense"
    CHIGORIN_DEFENSE = "chigorin_defense"
    DUTCH_DEFENSE = "dutch_defense"

    # Defenses to flank openings
    ENGLISH_SYMMETRICAL = "english_symmetrical"
    ANGLO_INDIAN = "anglo_indian"
    OTHER_BLACK = "other_black"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


WHITE_BUCKETS: frozenset[OpeningBucket] = frozenset(
    {
        OpeningBucket.RUY_LOPEZ,
        OpeningBucket.ITALIAN_GAME,
        OpeningBucket.SCOTCH_GAME,
        OpeningBucket.FOUR_KNIGHTS,
        OpeningBucket.PETROV_DEFENSE,
        OpeningBucket.PHILIDOR_DEFENSE,
        OpeningBucket.BISHOPS_OPENING,
        OpeningBucket.KINGS_GAMBIT,
        OpeningBucket.VIENNA_GAME,
        OpeningBucket.CENTER_GAME,
        OpeningBucket.PONZIANI,
        OpeningBucket.SICILIAN_ALAPIN,
        OpeningBucket.SICILIAN_CLOSED,
        OpeningBucket.CATALAN,
        OpeningBucket.QUEENS_GAMBIT,
        OpeningBucket.LONDON_SYSTEM,
        OpeningBucket.TROMPOWSKY,
        OpeningBucket.TORRE_ATTACK,
        OpeningBucket.COLLE_SYSTEM,
        OpeningBucket.VERESOV,
        OpeningBucket.BLACKMAR_DIEMER,
        OpeningBucket.ENGLISH_OPENING,
        OpeningBucket.KINGS_INDIAN_ATTACK,
        OpeningBucket.RETI_OPENING,
        OpeningBucket.BIRDS_OPENING,
        OpeningBucket.LARSEN_OPENING,
        OpeningBucket.GROB_ATTACK,
        OpeningBucket.OTHER_WHITE,
    }
)

# Buckets reachable from both repertoires: sicilian_alapin, sicilian_closed,
# philidor_defense.
BLACK_BUCKETS: frozenset[OpeningBucket] = frozenset(
    {
        OpeningBucket.SICILIAN_ALAPIN,
        OpeningBucket.SICILIAN_CLOSED,
        OpeningBucket.SICILIAN_NAJDORF,
        OpeningBucket.SICILIAN_DRAGON,
        OpeningBucket.SICILIAN_SCHEVENINGEN,
        OpeningBucket.SICILIAN_CLASSICAL,
        OpeningBucket.SICILIAN_SVESHNIKOV,
        OpeningBucket.SICILIAN_ACCELERATED_DRAGON,
        OpeningBucket.SICILIAN_TAIMANOV,
        OpeningBucket.SICILIAN_KAN,
        OpeningBucket.SICILIAN_OTHER,
        OpeningBucket.FRENCH_DEFENSE,
        OpeningBucket.CARO_KANN,
        OpeningBucket.SCANDINAVIAN,
        OpeningBucket.ALEKHINE_DEFENSE,
        OpeningBucket.PIRC_DEFENSE,
        OpeningBucket.MODERN_DEFENSE,
        OpeningBucket.PHILIDOR_DEFENSE,
        OpeningBucket.OWEN_DEFENSE,
        OpeningBucket.KINGS_PAWN_OTHER,
        OpeningBucket.GRUNFELD,
        OpeningBucket.KINGS_INDIAN,
        OpeningBucket.NIMZO_INDIAN,
        OpeningBucket.QUEENS_INDIAN,
        OpeningBucket.BOGO_INDIAN,
        OpeningBucket.QUEENS_GAMBIT_DECLINED,
        OpeningBucket.QUEENS_GAMBIT_ACCEPTED,
        OpeningBucket.BENONI,
        OpeningBucket.BUDAPEST_GAMBIT,
        OpeningBucket.D4_OTHER,
        OpeningBucket.SLAV_DEFENSE,
        OpeningBucket.SEMI_SLAV,
        OpeningBucket.TARRASCH_DEFENSE,
        OpeningBucket.CHIGORIN_DEFENSE,
        OpeningBucket.DUTCH_DEFENSE,
        OpeningBucket.ENGLISH_SYMMETRICAL,
        OpeningBucket.ANGLO_INDIAN,
        OpeningBucket.OTHER_BLACK,
    }
)

BUCKET_LABELS: dict[OpeningBucket, str] = {
    OpeningBucket.RUY_LOPEZ: "Ruy Lopez",
    OpeningBucket.ITALIAN_GAME: "Italian Game",
    OpeningBucket.SCOTCH_GAME: "Scotch Game",
    OpeningBucket.FOUR_KNIGHTS: "Four Knights Game",
    OpeningBucket.PETROV_DEFENSE: "Petrov Defense",
    OpeningBucket.PHILIDOR_DEFENSE: "Philidor Defense",
    OpeningBucket.BISHOPS_OPENING: "Bishop's Opening",
    OpeningBucket.KINGS_GAMBIT: "King's Gambit",
    OpeningBucket.VIENNA_GAME: "Vienna Game",
    OpeningBucket.CENTER_GAME: "Center Game",
    OpeningBucket.PONZIANI: "Ponziani Opening",
    OpeningBucket.CATALAN: "Catalan Opening",
    OpeningBucket.QUEENS_GAMBIT: "Queen's Gambit",
    OpeningBucket.LONDON_SYSTEM: "London System",
    OpeningBucket.TROMPOWSKY: "Trompowsky Attack",
    OpeningBucket.TORRE_ATTACK: "Torre Attack",
    OpeningBucket.COLLE_SYSTEM: "Colle System",
    OpeningBucket.VERESOV: "Veresov Attack",
    OpeningBucket.BLACKMAR_DIEMER: "Blackmar-Diemer Gambit",
    OpeningBucket.ENGLISH_OPENING: "English Opening",
    OpeningBucket.KINGS_INDIAN_ATTACK: "King's Indian Attack",
    OpeningBucket.RETI_OPENING: "Réti Opening",
    OpeningBucket.BIRDS_OPENING: "Bird's Opening",
    OpeningBucket.LARSEN_OPENING: "Larsen's Opening",
    OpeningBucket.GROB_ATTACK: "Grob Attack",
    OpeningBucket.OTHER_WHITE: "Other (White)",
    OpeningBucket.SICILIAN_ALAPIN: "Sicilian Defense: Alapin",
    OpeningBucket.SICILIAN_CLOSED: "Sicilian Defense: Closed",
    OpeningBucket.SICILIAN_NAJDORF: "Sicilian Defense: Najdorf",
    OpeningBucket.SICILIAN_DRAGON: "Sicilian Defense: Dragon",
    OpeningBucket.SICILIAN_SCHEVENINGEN: "Sicilian Defense: Scheveningen",
    OpeningBucket.SICILIAN_CLASSICAL: "Sicilian Defense: Classical",
    OpeningBucket.SICILIAN_SVESHNIKOV: "Sicilian Defense: Sveshnikov",
    OpeningBucket.SICILIAN_ACCELERATED_DRAGON: "Sicilian Defense: Accelerated Dragon",
    OpeningBucket.SICILIAN_TAIMANOV: "Sicilian Defense: Taimanov",
    OpeningBucket.SICILIAN_KAN: "Sicilian Defense: Kan",
    OpeningBucket.SICILIAN_OTHER: "Sicilian Defense: Other",
    OpeningBucket.FRENCH_DEFENSE: "French Defense",
    OpeningBucket.CARO_KANN: "Caro-Kann Defense",
    OpeningBucket.SCANDINAVIAN: "Scandinavian Defense",
    OpeningBucket.ALEKHINE_DEFENSE: "Alekhine's Defense",
    OpeningBucket.PIRC_DEFENSE: "Pirc Defense",
    OpeningBucket.MODERN_DEFENSE: "Modern Defense",
    OpeningBucket.OWEN_DEFENSE: "Owen's Defense",
    OpeningBucket.KINGS_PAWN_OTHER: "Other vs 1.e4",
    OpeningBucket.GRUNFELD: "Grünfeld Defense",
    OpeningBucket.KINGS_INDIAN: "King's Indian Defense",
    OpeningBucket.NIMZO_INDIAN: "Nimzo-Indian Defense",
    OpeningBucket.QUEENS_INDIAN: "Queen's Indian Defense",
    OpeningBucket.BOGO_INDIAN: "Bogo-Indian Defense",
    OpeningBucket.QUEENS_GAMBIT_DECLINED: "Queen's Gambit Declined",
    OpeningBucket.QUEENS_GAMBIT_ACCEPTED: "Queen's Gambit Accepted",
    OpeningBucket.BENONI: "Benoni Defense",
    OpeningBucket.BUDAPEST_GAMBIT: "Budapest Gambit",
    OpeningBucket.D4_OTHER: "Other vs 1.d4",
    OpeningBucket.SLAV_DEFENSE: "Slav Defense",
    OpeningBucket.SEMI_SLAV: "Semi-Slav Defense",
    OpeningBucket.TARRASCH_DEFENSE: "Tarrasch Defense",
    OpeningBucket.CHIGORIN_DEFENSE: "Chigorin Defense",
    OpeningBucket.DUTCH_DEFENSE: "Dutch Defense",
    OpeningBucket.ENGLISH_SYMMETRICAL: "English: Symmetrical",
    OpeningBucket.ANGLO_INDIAN: "Anglo-Indian / vs 1.Nf3",
    OpeningBucket.OTHER_BLACK: "Other (Black)",
}


def bucket_label(bucket: OpeningBucket | str | None) -> str:
    if bucket is None:
        return "Unclassified"
    if not OpeningBucket.is_valid(bucket):
        raise ValueError(f"Unknown opening bucket: {bucket}")
    return BUCKET_LABELS[OpeningBucket(bucket)]
