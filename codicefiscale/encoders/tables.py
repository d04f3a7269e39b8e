"""Character tables for the codice fiscale.

Reference: DPR 605/1973, Decreto MEF 12/03/1974 (Allegato: tabelle per il
calcolo del carattere di controllo).
"""

from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

VOWELS: frozenset[str] = frozenset("aeiou")

# Month number (1-12) → letter, calendar order
MONTH_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "H", "L", "M", "P", "R", "S", "T")

# Nation code meaning "born in Italy, use the city code"
SENTINEL_NATION_CODE = "0000"

# Checksum tables per Decreto MEF 12/03/1974
ODD_VALUES: dict[str, int] = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}

EVEN_VALUES: dict[str, int] = {
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9,
    "A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 6,
    "H": 7, "I": 8, "J": 9, "K": 10, "L": 11, "M": 12, "N": 13,
    "O": 14, "P": 15, "Q": 16, "R": 17, "S": 18, "T": 19, "U": 20,
    "V": 21, "W": 22, "X": 23, "Y": 24, "Z": 25,
}

# Homocodic substitution: digit → letter (omocodia)
HOMOCODIC_LETTERS: dict[str, str] = {
    "0": "L", "1": "M", "2": "N", "3": "P", "4": "Q",
    "5": "R", "6": "S", "7": "T", "8": "U", "9": "V",
}
