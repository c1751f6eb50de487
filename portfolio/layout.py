"""Static page chrome: header navigation and logo."""

from models.data_models import NavLink

NAVIGATION = [
    NavLink(label="About", href="#skills"),
    NavLink(label="Work", href="#work"),
    NavLink(label="Blogs", href="#blogs"),
    NavLink(label="Contact", href="#contact"),
]


def logo_name(author: str) -> str:
    """Header logo text, e.g. ``Ada Lovelace`` -> ``ADALOVELACE``."""
    return "".join(author.split()).upper()
