MAX_STARS = 5


def format_rub(value: int) -> str:
    """``12500`` -> ``"12\\xa0500"``, grouped the way ru-RU locale prints numbers."""
    return f"{int(value):,}".replace(",", "\xa0")


def star_line(stars: int) -> str:
    stars = max(0, min(int(stars), MAX_STARS))
    return "★" * stars + "☆" * (MAX_STARS - stars)
