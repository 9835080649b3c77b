"""Spell duration to combat rounds."""

import re


ROUNDS_PER_MINUTE = 10
MAX_ROUNDS = 100
CONCENTRATION_DEFAULT_ROUNDS = 10  # About a one-minute fight

ONE_ROUND_PATTERN = re.compile(r"(?<!\d)1\s*round\b")
MINUTES_PATTERN = re.compile(r"(\d+)\s*minute")
ROUNDS_PATTERN = re.compile(r"(\d+)\s*round")


def estimate_duration(duration: str | None) -> int:
    """Estimate how many rounds a spell stays active.

    Examples:
        >>> estimate_duration("Instantaneous")
        1
        >>> estimate_duration("Concentration, up to 1 minute")
        10
        >>> estimate_duration("Concentration, up to 1 hour")
        10
    """
    if not duration:
        return 1

    text = duration.lower()

    if "instantaneous" in text or ONE_ROUND_PATTERN.search(text):
        return 1

    minutes = MINUTES_PATTERN.search(text)
    if minutes:
        return min(int(minutes.group(1)) * ROUNDS_PER_MINUTE, MAX_ROUNDS)

    rounds = ROUNDS_PATTERN.search(text)
    if rounds:
        return int(rounds.group(1))

    if "concentration" in text:
        return CONCENTRATION_DEFAULT_ROUNDS

    return 1
