"""
Byte <-> word transcoding.

Each byte value maps to one word of a fixed 256-word vocabulary (the
Bytewords list: four-letter, lowercase, pairwise distinct), so a byte string
can be read aloud or written down as a phrase.
"""

from typing import Iterable, List

from .errors import UnknownWord


def byte_to_word(value: int) -> str:
    if not 0 <= value <= 255:
        raise ValueError(f"Byte value out of range: {value}")
    return WORDLIST[value]


def word_to_byte(word: str) -> int:
    """Look up a word, ignoring case and surrounding whitespace."""
    try:
        return WORD_INDICES[word.strip().lower()]
    except KeyError:
        raise UnknownWord(word) from None


def to_words(data: Iterable[int]) -> List[str]:
    return [byte_to_word(b) for b in data]


def from_words(words: Iterable[str]) -> bytes:
    return bytes(word_to_byte(w) for w in words)


def encode_phrase(data: bytes) -> str:
    """Converts bytes into a space-separated phrase."""
    return " ".join(to_words(data))


def decode_phrase(phrase: str) -> bytes:
    """Converts a space-separated phrase back into bytes. Raises UnknownWord."""
    return from_words(phrase.split())


# fmt: off
WORDLIST = (
    "able", "acid", "also", "apex", "aqua", "arch", "atom", "aunt",
    "away", "axis", "back", "bald", "barn", "belt", "beta", "bias",
    "blue", "body", "brag", "brew", "bulb", "buzz", "calm", "cash",
    "cats", "chef", "city", "claw", "code", "cola", "cook", "cost",
    "crux", "curl", "cusp", "cyan", "dark", "data", "days", "deli",
    "dice", "diet", "door", "down", "draw", "drop", "drum", "dull",
    "duty", "each", "easy", "echo", "edge", "epic", "even", "exam",
    "exit", "eyes", "fact", "fair", "fern", "figs", "film", "fish",
    "fizz", "flap", "flew", "flux", "foxy", "free", "frog", "fuel",
    "fund", "gala", "game", "gear", "gems", "gift", "girl", "glow",
    "good", "gray", "grim", "guru", "gush", "gyro", "half", "hang",
    "hard", "hawk", "heat", "help", "high", "hill", "holy", "hope",
    "horn", "huts", "iced", "idea", "idle", "inch", "inky", "into",
    "iris", "iron", "item", "jade", "jazz", "join", "jolt", "jowl",
    "judo", "jugs", "jump", "junk", "jury", "keep", "keno", "kept",
    "keys", "kick", "kiln", "king", "kite", "kiwi", "knob", "lamb",
    "lava", "lazy", "leaf", "legs", "liar", "limp", "lion", "list",
    "logo", "loud", "love", "luau", "luck", "lung", "main", "many",
    "math", "maze", "memo", "menu", "meow", "mild", "mint", "miss",
    "monk", "nail", "navy", "need", "news", "next", "noon", "note",
    "numb", "obey", "oboe", "omit", "onyx", "open", "oval", "owls",
    "paid", "part", "peck", "play", "plus", "poem", "pool", "pose",
    "puff", "puma", "purr", "quad", "quiz", "race", "ramp", "real",
    "redo", "rich", "road", "rock", "roof", "ruby", "ruin", "runs",
    "rust", "safe", "saga", "scar", "sets", "silk", "skew", "slot",
    "soap", "solo", "song", "stub", "surf", "swan", "taco", "task",
    "taxi", "tent", "tied", "time", "tiny", "toil", "tomb", "toys",
    "trip", "tuna", "twin", "ugly", "undo", "unit", "urge", "user",
    "vast", "very", "veto", "vial", "vibe", "view", "visa", "void",
    "vows", "wall", "wand", "warm", "wasp", "wave", "waxy", "webs",
    "what", "when", "whiz", "wolf", "work", "yank", "yawn", "yell",
    "yoga", "yurt", "zaps", "zero", "zest", "zinc", "zone", "zoom",
)
# fmt: on

WORD_INDICES = {word: index for index, word in enumerate(WORDLIST)}
