"""
Category Taxonomy

The closed set of canonical product categories, grouped by domain.
Products are stored under exactly one of these names, and every alias in
``category_aliases`` resolves to one of them.

Definition order is significant: the category resolver walks
``VALID_CATEGORIES`` in this order for its canonical-prefix tier, so the
first prefix-compatible name listed here wins.
"""

from typing import Dict, List, Optional, Tuple

# =============================================================================
# CATEGORY GROUPS (domain -> canonical names, in definition order)
# =============================================================================
CATEGORY_GROUPS: Dict[str, Tuple[str, ...]] = {
    "topwear": (
        "Tshirts",      # stored as 'Tshirts', not 'T-Shirts'
        "Shirts",
        "Tops",
        "Tunics",
        "Sweaters",
        "Sweatshirts",
        "Jackets",
        "Blazers",
        "Coats",
        "Waistcoats",
        "Shrugs",
        "Rain Jackets",
        "Suits",
        "Tank Tops",
        "Polo Tshirts",
    ),
    "bottomwear": (
        "Jeans",
        "Trousers",
        "Shorts",
        "Skirts",
        "Leggings",
        "Jeggings",
        "Track Pants",
        "Joggers",
        "Capris",
        "Cargo Pants",
    ),
    "ethnic": (
        "Kurtis",
        "Kurtas",
        "Sarees",
        "Kurta Sets",
        "Lehenga Choli",
        "Dupattas",
        "Churidars",
        "Salwars",
        "Palazzos",
        "Patiala",
        "Dhotis",
        "Sherwanis",
        "Nehru Jackets",
        "Dress Material",
        "Saree Blouses",
    ),
    "dresses": (
        "Dresses",
        "Jumpsuits",
        "Playsuits",
        "Co-ords",
        "Rompers",
        "Dungarees",
    ),
    "innerwear": (
        "Bras",
        "Briefs",
        "Boxers",
        "Trunks",
        "Innerwear Vests",
        "Camisoles",
        "Shapewear",
        "Thermals",
        "Night Suits",
        "Nightdress",
        "Lounge Pants",
        "Robes",
        "Swimwear",
        "Socks",
        "Stockings",
    ),
    "footwear": (
        "Heels",
        "Flats",
        "Sandals",
        "Sports Shoes",
        "Casual Shoes",
        "Formal Shoes",
        "Sports Sandals",
        "Flip Flops",
        "Boots",
        "Loafers",
        "Mojaris",
        "Slippers",
        "Wedges",
        "Clogs",
    ),
    "bags": (
        "Handbags",
        "Backpacks",
        "Clutches",
        "Laptop Bags",
        "Messenger Bags",
        "Duffel Bags",
        "Trolley Bags",
        "Totes",
        "Wallets",
        "Waist Pouches",
        "Mobile Pouches",
    ),
    "accessories": (
        "Watches",
        "Sunglasses",
        "Caps",
        "Belts",
        "Ties",
        "Cufflinks",
        "Scarves",
        "Stoles",
        "Mufflers",
        "Gloves",
        "Hair Accessories",
        "Umbrellas",
        "Keychains",
        "Suspenders",
        "Pocket Squares",
        "Eyeglass Frames",
        "Smart Watches",
    ),
    "jewellery": (
        "Earrings",
        "Necklaces",
        "Pendants",
        "Bangles",
        "Bracelets",
        "Rings",
        "Anklets",
        "Nose Pins",
        "Jewellery Sets",
        "Mangalsutras",
        "Brooches",
        "Maang Tikkas",
    ),
    "beauty": (
        "Lipstick",
        "Lip Gloss",
        "Lip Liner",
        "Lip Balm",
        "Nail Polish",
        "Kajal and Eyeliner",
        "Mascara",
        "Eyeshadow",
        "Foundation",
        "Primer",
        "Compact",
        "Concealer",
        "Blush",
        "Highlighter",
        "Makeup Remover",
    ),
    "personal_care": (
        "Face Wash",
        "Moisturiser",
        "Sunscreen",
        "Face Serum",
        "Face Masks",
        "Toners",
        "Body Lotion",
        "Body Wash",
        "Shampoo",
        "Conditioner",
        "Hair Oil",
        "Hair Colour",
        "Perfumes",
        "Deodorants",
        "Beard Oil",
        "Trimmers",
    ),
}

# Flattened canonical list, preserving group and in-group order.
VALID_CATEGORIES: Tuple[str, ...] = tuple(
    name for names in CATEGORY_GROUPS.values() for name in names
)

# Catch-all returned when nothing matches (a top-level apparel category).
FALLBACK_CATEGORY = "Tshirts"

_CANONICAL_BY_LOWER: Dict[str, str] = {name.lower(): name for name in VALID_CATEGORIES}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def is_canonical(name) -> bool:
    """Case-insensitive exact membership test. Non-strings are never canonical."""
    if not isinstance(name, str):
        return False
    return name.strip().lower() in _CANONICAL_BY_LOWER


def canonical_name(name) -> Optional[str]:
    """Return the stored spelling of a canonical category, or None."""
    if not isinstance(name, str):
        return None
    return _CANONICAL_BY_LOWER.get(name.strip().lower())


def all_categories() -> List[str]:
    """All canonical categories in definition order."""
    return list(VALID_CATEGORIES)


def category_groups() -> Dict[str, List[str]]:
    """Canonical categories grouped by domain, e.g. for admin dropdowns."""
    return {group: list(names) for group, names in CATEGORY_GROUPS.items()}


def group_for(name) -> Optional[str]:
    """Domain a canonical category belongs to, or None for unknown names."""
    stored = canonical_name(name)
    if stored is None:
        return None
    for group, names in CATEGORY_GROUPS.items():
        if stored in names:
            return group
    return None
