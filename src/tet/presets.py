"""Built-in English character distributions.

Letter and space frequencies follow the table used by Minguri et al. (CHI 2019)
for their worked examples, so results are comparable with the paper.
"""

from tet.distribution import Distribution

# a-z followed by space
LETTER_SPACE_PROBABILITIES: dict[str, float] = {
    "a": 0.06545420428810268,
    "b": 0.012614349400134882,
    "c": 0.022382079660795914,
    "d": 0.032895839710101495,
    "e": 0.10287480840814522,
    "f": 0.019870906945619955,
    "g": 0.01628201251975626,
    "h": 0.0498866519336527,
    "i": 0.05679944220647908,
    "j": 0.0009771967640664421,
    "k": 0.005621008826086285,
    "l": 0.03324279082953061,
    "m": 0.020306796250368523,
    "n": 0.057236004874678816,
    "o": 0.061720746945911634,
    "p": 0.015073764715016882,
    "q": 0.0008384527300266635,
    "r": 0.049980287430261394,
    "s": 0.05327793252372975,
    "t": 0.07532249847431097,
    "u": 0.022804128240333354,
    "v": 0.007977317166161044,
    "w": 0.017073508770571122,
    "x": 0.0014120607927983009,
    "y": 0.014305632773116854,
    "z": 0.0005138874382474097,
    " ": 0.18325568938199557,
}

_LETTER_MASS = 1.0 - LETTER_SPACE_PROBABILITIES[" "]

LETTER_PROBABILITIES: dict[str, float] = {
    symbol: p / _LETTER_MASS for symbol, p in LETTER_SPACE_PROBABILITIES.items() if symbol != " "
}

ENGLISH_LETTERS_AND_SPACE = Distribution.from_probabilities(LETTER_SPACE_PROBABILITIES)
ENGLISH_LETTERS = Distribution.from_probabilities(LETTER_PROBABILITIES)
