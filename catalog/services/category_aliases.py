"""
Category Alias Index

Maps free-text variants of a category (plurals, hyphenations, synonyms,
regional names) onto canonical taxonomy names.

The table is an ordered sequence of ``(variant, canonical)`` pairs rather
than a plain dict literal because its order is load-bearing: the category
resolver's alias-prefix tier returns the *first* alias, in this order, that
is prefix-compatible with the input. Reordering entries changes results.

Keys are lowercase and trimmed. A later duplicate key overrides the earlier
value but keeps the earlier position.
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

# =============================================================================
# ALIAS TABLE (variant -> canonical), order is significant
# =============================================================================
CATEGORY_ALIASES: Tuple[Tuple[str, str], ...] = (
    # ── T-Shirts ────────────────────────────────────────────
    ("t-shirt", "Tshirts"),
    ("t-shirts", "Tshirts"),
    ("tshirt", "Tshirts"),
    ("tshirts", "Tshirts"),
    ("tee", "Tshirts"),
    ("tees", "Tshirts"),
    ("t shirt", "Tshirts"),
    ("t shirts", "Tshirts"),

    # ── Shirts ──────────────────────────────────────────────
    ("shirt", "Shirts"),
    ("shirts", "Shirts"),

    # ── Jeans ───────────────────────────────────────────────
    ("jean", "Jeans"),
    ("jeans", "Jeans"),
    ("denim", "Jeans"),
    ("denim jeans", "Jeans"),

    # ── Dresses ─────────────────────────────────────────────
    ("dress", "Dresses"),
    ("dresses", "Dresses"),
    ("gown", "Dresses"),
    ("frock", "Dresses"),

    # ── Jackets ─────────────────────────────────────────────
    ("jacket", "Jackets"),
    ("jackets", "Jackets"),
    ("coat", "Jackets"),
    ("blazer", "Blazers"),
    ("blazers", "Blazers"),

    # ── Kurtis / Kurtas ─────────────────────────────────────
    ("kurti", "Kurtis"),
    ("kurtis", "Kurtis"),
    ("kurta", "Kurtas"),
    ("kurtas", "Kurtas"),

    # ── Sarees ──────────────────────────────────────────────
    ("saree", "Sarees"),
    ("sarees", "Sarees"),
    ("sari", "Sarees"),
    ("saris", "Sarees"),

    # ── Tops ────────────────────────────────────────────────
    ("top", "Tops"),
    ("tops", "Tops"),
    ("blouse", "Tops"),

    # ── Bottoms ─────────────────────────────────────────────
    ("short", "Shorts"),
    ("shorts", "Shorts"),
    ("trouser", "Trousers"),
    ("trousers", "Trousers"),
    ("pant", "Trousers"),
    ("pants", "Trousers"),

    # ── Sweaters / Sweatshirts ──────────────────────────────
    ("sweater", "Sweaters"),
    ("sweaters", "Sweaters"),
    ("sweatshirt", "Sweatshirts"),
    ("sweatshirts", "Sweatshirts"),
    ("hoodie", "Sweatshirts"),
    ("hoodies", "Sweatshirts"),

    # ── Footwear ────────────────────────────────────────────
    ("heel", "Heels"),
    ("heels", "Heels"),
    ("high heel", "Heels"),
    ("flat", "Flats"),
    ("flats", "Flats"),
    ("sandal", "Sandals"),
    ("sandals", "Sandals"),
    ("sneaker", "Sports Shoes"),
    ("sneakers", "Sports Shoes"),
    ("sports shoe", "Sports Shoes"),
    ("sports shoes", "Sports Shoes"),
    ("running shoes", "Sports Shoes"),
    ("casual shoe", "Casual Shoes"),
    ("casual shoes", "Casual Shoes"),
    ("formal shoe", "Formal Shoes"),
    ("formal shoes", "Formal Shoes"),
    ("shoe", "Casual Shoes"),
    ("shoes", "Casual Shoes"),

    # ── Accessories ─────────────────────────────────────────
    ("handbag", "Handbags"),
    ("handbags", "Handbags"),
    ("bag", "Handbags"),
    ("bags", "Handbags"),
    ("purse", "Handbags"),
    ("backpack", "Backpacks"),
    ("backpacks", "Backpacks"),
    ("wallet", "Wallets"),
    ("wallets", "Wallets"),
    ("watch", "Watches"),
    ("watches", "Watches"),
    ("sunglass", "Sunglasses"),
    ("sunglasses", "Sunglasses"),
    ("cap", "Caps"),
    ("caps", "Caps"),
    ("hat", "Caps"),

    # =========================================================================
    # Extended taxonomy
    # =========================================================================

    # ── Topwear ─────────────────────────────────────────────
    ("tunic", "Tunics"),
    ("cardigan", "Sweaters"),
    ("cardigans", "Sweaters"),
    ("pullover", "Sweaters"),
    ("jumper", "Sweaters"),
    ("overcoat", "Coats"),
    ("trench coat", "Coats"),
    ("waistcoat", "Waistcoats"),
    ("shrug", "Shrugs"),
    ("raincoat", "Rain Jackets"),
    ("rain jacket", "Rain Jackets"),
    ("windcheater", "Rain Jackets"),
    ("suit", "Suits"),
    ("tank top", "Tank Tops"),
    ("polo", "Polo Tshirts"),
    ("polos", "Polo Tshirts"),
    ("polo shirt", "Polo Tshirts"),
    ("polo t-shirt", "Polo Tshirts"),

    # ── Bottomwear ──────────────────────────────────────────
    ("skirt", "Skirts"),
    ("legging", "Leggings"),
    ("tights", "Leggings"),
    ("jegging", "Jeggings"),
    ("track pant", "Track Pants"),
    ("trackpants", "Track Pants"),
    ("jogger", "Joggers"),
    ("capri", "Capris"),
    ("cargo", "Cargo Pants"),
    ("cargos", "Cargo Pants"),
    ("chino", "Trousers"),
    ("chinos", "Trousers"),

    # ── Ethnic wear ─────────────────────────────────────────
    ("kurta set", "Kurta Sets"),
    ("lehenga", "Lehenga Choli"),
    ("lehengas", "Lehenga Choli"),
    ("ghagra", "Lehenga Choli"),
    ("dupatta", "Dupattas"),
    ("churidar", "Churidars"),
    ("salwar", "Salwars"),
    ("palazzo", "Palazzos"),
    ("palazzo pants", "Palazzos"),
    ("patiala pants", "Patiala"),
    ("dhoti", "Dhotis"),
    ("sherwani", "Sherwanis"),
    ("nehru jacket", "Nehru Jackets"),
    ("unstitched suit", "Dress Material"),
    ("saree blouse", "Saree Blouses"),

    # ── Dresses & one-pieces ────────────────────────────────
    ("jumpsuit", "Jumpsuits"),
    ("playsuit", "Playsuits"),
    ("co-ord", "Co-ords"),
    ("co-ord set", "Co-ords"),
    ("coord set", "Co-ords"),
    ("romper", "Rompers"),
    ("dungaree", "Dungarees"),
    ("overalls", "Dungarees"),
    ("maxi dress", "Dresses"),
    ("midi dress", "Dresses"),
    ("bodycon", "Dresses"),

    # ── Innerwear & loungewear ──────────────────────────────
    ("bra", "Bras"),
    ("brief", "Briefs"),
    ("panties", "Briefs"),
    ("boxer", "Boxers"),
    ("trunk", "Trunks"),
    ("vest", "Innerwear Vests"),
    ("vests", "Innerwear Vests"),
    ("camisole", "Camisoles"),
    ("thermal", "Thermals"),
    ("night suit", "Night Suits"),
    ("pyjamas", "Night Suits"),
    ("pajamas", "Night Suits"),
    ("nightwear", "Night Suits"),
    ("nightie", "Nightdress"),
    ("nighty", "Nightdress"),
    ("nightgown", "Nightdress"),
    ("lounge pant", "Lounge Pants"),
    ("pyjama", "Lounge Pants"),
    ("robe", "Robes"),
    ("bathrobe", "Robes"),
    ("swimsuit", "Swimwear"),
    ("bikini", "Swimwear"),
    ("swimming costume", "Swimwear"),
    ("sock", "Socks"),
    ("stocking", "Stockings"),

    # ── Footwear ────────────────────────────────────────────
    ("boot", "Boots"),
    ("loafer", "Loafers"),
    ("mojari", "Mojaris"),
    ("jutti", "Mojaris"),
    ("juttis", "Mojaris"),
    ("slipper", "Slippers"),
    ("flip flop", "Flip Flops"),
    ("flip-flops", "Flip Flops"),
    ("flipflops", "Flip Flops"),
    ("slides", "Flip Flops"),
    ("wedge", "Wedges"),
    ("clog", "Clogs"),
    ("trainer", "Sports Shoes"),
    ("trainers", "Sports Shoes"),
    ("stilettos", "Heels"),
    ("pumps", "Heels"),
    ("floaters", "Sports Sandals"),
    ("oxfords", "Formal Shoes"),
    ("brogues", "Formal Shoes"),

    # ── Bags ────────────────────────────────────────────────
    ("clutch", "Clutches"),
    ("laptop bag", "Laptop Bags"),
    ("messenger bag", "Messenger Bags"),
    ("sling bag", "Messenger Bags"),
    ("duffel", "Duffel Bags"),
    ("duffle bag", "Duffel Bags"),
    ("gym bag", "Duffel Bags"),
    ("trolley", "Trolley Bags"),
    ("suitcase", "Trolley Bags"),
    ("luggage", "Trolley Bags"),
    ("tote", "Totes"),
    ("tote bag", "Totes"),
    ("fanny pack", "Waist Pouches"),
    ("waist pouch", "Waist Pouches"),
    ("belt bag", "Waist Pouches"),
    ("mobile pouch", "Mobile Pouches"),
    ("phone pouch", "Mobile Pouches"),
    ("rucksack", "Backpacks"),

    # ── Accessories ─────────────────────────────────────────
    ("belt", "Belts"),
    ("tie", "Ties"),
    ("necktie", "Ties"),
    ("bow tie", "Ties"),
    ("cufflink", "Cufflinks"),
    ("scarf", "Scarves"),
    ("stole", "Stoles"),
    ("muffler", "Mufflers"),
    ("glove", "Gloves"),
    ("hairband", "Hair Accessories"),
    ("hair clip", "Hair Accessories"),
    ("scrunchie", "Hair Accessories"),
    ("umbrella", "Umbrellas"),
    ("keychain", "Keychains"),
    ("key chain", "Keychains"),
    ("suspender", "Suspenders"),
    ("pocket square", "Pocket Squares"),
    ("spectacles", "Eyeglass Frames"),
    ("eyeglasses", "Eyeglass Frames"),
    ("glasses", "Eyeglass Frames"),
    ("smartwatch", "Smart Watches"),
    ("smart watch", "Smart Watches"),
    ("fitness band", "Smart Watches"),
    ("shades", "Sunglasses"),
    ("beanie", "Caps"),
    ("hats", "Caps"),

    # ── Jewellery ───────────────────────────────────────────
    ("earring", "Earrings"),
    ("jhumka", "Earrings"),
    ("jhumkas", "Earrings"),
    ("studs", "Earrings"),
    ("necklace", "Necklaces"),
    ("chain", "Necklaces"),
    ("chains", "Necklaces"),
    ("pendant", "Pendants"),
    ("bangle", "Bangles"),
    ("kada", "Bangles"),
    ("bracelet", "Bracelets"),
    ("ring", "Rings"),
    ("anklet", "Anklets"),
    ("payal", "Anklets"),
    ("nose pin", "Nose Pins"),
    ("nose ring", "Nose Pins"),
    ("jewellery set", "Jewellery Sets"),
    ("jewelry set", "Jewellery Sets"),
    ("jewelry sets", "Jewellery Sets"),
    ("mangalsutra", "Mangalsutras"),
    ("brooch", "Brooches"),
    ("maang tikka", "Maang Tikkas"),

    # ── Beauty ──────────────────────────────────────────────
    ("lipsticks", "Lipstick"),
    ("lip stick", "Lipstick"),
    ("gloss", "Lip Gloss"),
    ("lip pencil", "Lip Liner"),
    ("chapstick", "Lip Balm"),
    ("lip care", "Lip Balm"),
    ("nail paint", "Nail Polish"),
    ("nail enamel", "Nail Polish"),
    ("kajal", "Kajal and Eyeliner"),
    ("eyeliner", "Kajal and Eyeliner"),
    ("kohl", "Kajal and Eyeliner"),
    ("eye shadow", "Eyeshadow"),
    ("bb cream", "Foundation"),
    ("cc cream", "Foundation"),
    ("face primer", "Primer"),
    ("compact powder", "Compact"),
    ("pressed powder", "Compact"),
    ("blusher", "Blush"),
    ("illuminator", "Highlighter"),
    ("micellar water", "Makeup Remover"),
    ("cleansing oil", "Makeup Remover"),

    # ── Personal care ───────────────────────────────────────
    ("facewash", "Face Wash"),
    ("cleanser", "Face Wash"),
    ("moisturizer", "Moisturiser"),
    ("face cream", "Moisturiser"),
    ("sunblock", "Sunscreen"),
    ("spf", "Sunscreen"),
    ("serum", "Face Serum"),
    ("sheet mask", "Face Masks"),
    ("face mask", "Face Masks"),
    ("toner", "Toners"),
    ("lotion", "Body Lotion"),
    ("shower gel", "Body Wash"),
    ("hair conditioner", "Conditioner"),
    ("hair color", "Hair Colour"),
    ("hair dye", "Hair Colour"),
    ("perfume", "Perfumes"),
    ("fragrance", "Perfumes"),
    ("eau de parfum", "Perfumes"),
    ("body mist", "Perfumes"),
    ("deodorant", "Deodorants"),
    ("deo", "Deodorants"),
    ("trimmer", "Trimmers"),
    ("shaver", "Trimmers"),
)


# =============================================================================
# ALIAS INDEX
# =============================================================================

class AliasIndex:
    """
    Exact-match alias lookup with a stable iteration order.

    Lookups lowercase and trim the input; internal whitespace is left alone,
    so "t  shirt" (two spaces) is not the same key as "t shirt".

    Usage:
        index = AliasIndex([("tee", "Tshirts"), ("top", "Tops")])
        index.lookup("  TEE ")   # → "Tshirts"
        list(index.items())      # → [("tee", "Tshirts"), ("top", "Tops")]
    """

    __slots__ = ("_entries",)

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        entries: Dict[str, str] = {}
        for variant, canonical in pairs:
            entries[variant.strip().lower()] = canonical
        self._entries = entries

    def lookup(self, text) -> Optional[str]:
        if not isinstance(text, str):
            return None
        return self._entries.get(text.strip().lower())

    def items(self) -> Iterator[Tuple[str, str]]:
        """Alias pairs in definition order."""
        return iter(self._entries.items())

    def __contains__(self, text) -> bool:
        return self.lookup(text) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AliasIndex({len(self._entries)} aliases)"


# Singleton instance
alias_index = AliasIndex(CATEGORY_ALIASES)


def lookup_alias(text) -> Optional[str]:
    """Canonical category for an exact alias match, or None."""
    return alias_index.lookup(text)
