import re


def to_slug(text: str) -> str:
    """Convert an item name to its asset file slug.

    Example: "White T-Shirt" -> "white-t-shirt", "3D Glasses" -> "3d-glasses"
    """
    slug = text.strip().lower().replace(" ", "-")
    return re.sub(r"[^a-z0-9-]", "", slug)


def item_name_to_asset_path(section_dir: str, item_name: str) -> str:
    """Build the extension-less asset path for an item, e.g. "/mood/neutral"."""
    return f"/{section_dir}/{to_slug(item_name)}"
