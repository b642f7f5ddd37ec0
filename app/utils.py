import math

DEFAULT_WORDS_PER_MINUTE = 200


def calculate_reading_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / words_per_minute) or 1
    return f"{minutes} min read"
