"""
Search Tag Synthesizer

Derives a search vocabulary for each template from its sparse metadata
(key, name, category) plus any colors extracted from its thumbnail.

Tags are never shown to the user; they only widen what a free-text query
can hit. They are built once per catalog and never change afterwards.

Usage:
    from switcher.tags import TagIndex, synthesize

    tags = synthesize("cozastore", "CozaStore", "eCommerce")
    "shop" in tags            # True (substring containment)

    index = TagIndex.build(catalog)
    index["cozastore"].text   # space-joined tag string
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Iterator

from .catalog import DEFAULT_CATEGORY, Catalog


# =============================================================================
# CATEGORY SYNONYMS
# =============================================================================
# When someone searches any of these terms, templates in the category appear.
# Matched against the template category by equality or substring in either
# direction, so "Real Estate" and "Estate" both expand.

CATEGORY_SYNONYMS: dict[str, tuple[str, ...]] = {
    "charity": (
        "church", "nonprofit", "ngo", "foundation", "donation", "donate",
        "volunteer", "religious", "faith", "ministry", "mission", "cause",
        "fundraising", "giving", "help", "support", "community", "outreach",
        "temple", "mosque", "synagogue", "worship",
    ),
    "business": (
        "corporate", "company", "agency", "firm", "enterprise", "professional",
        "consulting", "consultant", "office", "b2b", "services", "solutions",
        "startup",
    ),
    "portfolio": (
        "cv", "resume", "personal", "freelancer", "designer", "developer",
        "artist", "creative", "showcase", "work", "projects", "vcard",
    ),
    "blog": (
        "news", "magazine", "article", "journalist", "writer", "author",
        "content", "stories", "posts", "editorial", "media",
    ),
    "ecommerce": (
        "shop", "store", "shopping", "products", "sell", "buy", "cart",
        "checkout", "retail", "marketplace", "boutique", "fashion", "clothes",
        "clothing",
    ),
    "medical": (
        "health", "healthcare", "hospital", "clinic", "doctor", "dentist",
        "dental", "pharmacy", "medicine", "patient", "care", "wellness",
        "therapy", "therapist", "nurse", "physician",
    ),
    "education": (
        "school", "university", "college", "academy", "learning", "course",
        "courses", "training", "tutor", "teacher", "student", "class", "lms",
        "elearning", "online learning",
    ),
    "real estate": (
        "property", "properties", "home", "homes", "house", "houses",
        "apartment", "apartments", "rent", "rental", "realtor", "agent",
        "listing", "listings", "interior", "architecture",
    ),
    "restaurant": (
        "food", "cafe", "coffee", "bakery", "pizza", "burger", "dining",
        "menu", "cook", "cooking", "recipe", "recipes", "chef", "kitchen",
        "bar", "pub", "catering",
    ),
    "travel": (
        "hotel", "hotels", "tour", "tours", "tourism", "vacation", "holiday",
        "trip", "booking", "resort", "adventure", "explore", "destination",
        "flight", "cruise",
    ),
    "fitness": (
        "gym", "sport", "sports", "yoga", "workout", "exercise", "training",
        "trainer", "athletic", "athlete", "crossfit", "boxing",
        "martial arts", "health",
    ),
    "event": (
        "wedding", "party", "conference", "concert", "music", "dj",
        "festival", "celebration", "meetup", "gathering", "ceremony",
    ),
    "construction": (
        "building", "builder", "architect", "architecture", "contractor",
        "roofing", "renovation", "remodel", "handyman", "plumber",
        "electrician", "hvac", "industrial",
    ),
    "finance": (
        "bank", "banking", "loan", "loans", "accounting", "accountant",
        "investment", "investor", "money", "crypto", "cryptocurrency",
        "trading", "insurance", "tax", "financial",
    ),
    "lawyer": (
        "law", "legal", "attorney", "justice", "court", "advocate", "notary",
        "solicitor", "litigation", "counsel",
    ),
    "beauty": (
        "salon", "spa", "barber", "barbershop", "hair", "hairdresser",
        "makeup", "cosmetic", "skincare", "nails", "wellness", "massage",
    ),
    "pet": (
        "animal", "animals", "dog", "dogs", "cat", "cats", "vet",
        "veterinary", "veterinarian", "pet care", "grooming", "shelter",
    ),
    "transportation": (
        "logistics", "shipping", "cargo", "car", "cars", "auto", "automotive",
        "taxi", "delivery", "moving", "truck", "fleet", "transport",
    ),
    "technology": (
        "tech", "it", "software", "saas", "app", "digital", "cyber",
        "hosting", "cloud", "startup", "innovation",
    ),
    "job board": (
        "jobs", "career", "careers", "recruitment", "hiring", "employment",
        "hr", "human resources", "talent", "staffing",
    ),
    "photography": (
        "photo", "photos", "photographer", "camera", "studio", "film",
        "video", "videography", "media", "creative",
    ),
    "gaming": (
        "game", "games", "esports", "stream", "streamer", "twitch",
        "youtube gaming", "player",
    ),
    "agriculture": (
        "farm", "farming", "organic", "garden", "gardening", "nursery",
        "florist", "flowers", "plants", "nature",
    ),
}


# =============================================================================
# FEATURE PATTERNS
# =============================================================================
# (tag, pattern) pairs tested against the lowercased name, key and category.
# Every matching pattern contributes its tag.

_RAW_FEATURE_PATTERNS: tuple[tuple[str, str], ...] = (
    # ----- Template types / industries -----
    ("portfolio", r"portfolio|folio|gallery|showcase|work|cv|resume|personal"),
    ("blog", r"blog|news|magazine|article|post|journal|writer"),
    ("ecommerce", r"shop|store|cart|ecommerce|product|market|fashion|cloth|boutique"),
    ("landing", r"landing|launch|startup|app|saas|software|coming soon"),
    ("business", r"business|corporate|company|agency|consulting|firm|office"),
    ("restaurant", r"restaurant|food|cafe|coffee|recipe|pizza|burger|bakery|cook|kitchen|menu|dining|bar|pub"),
    ("medical", r"medical|health|doctor|clinic|hospital|dental|pharma|care|covid|therapy|wellness"),
    ("education", r"education|school|university|course|learning|tutor|academy|study|lms|elearning"),
    ("real-estate", r"real estate|property|home|house|interior|estate|rent|apartment|listing|realtor"),
    ("travel", r"travel|hotel|tour|vacation|trip|booking|resort|adventure|cruise"),
    ("fitness", r"fitness|gym|sport|yoga|workout|training|basketball|soccer|crossfit"),
    ("event", r"event|wedding|party|conference|concert|music|dj|festival"),
    ("construction", r"construction|building|architect|contractor|roofing|hvac|plumber|handyman"),
    ("finance", r"finance|bank|loan|accounting|investment|money|crypto|trading|insurance"),
    ("lawyer", r"lawyer|law|legal|attorney|justice|notary|advocate"),
    ("beauty", r"beauty|salon|spa|barber|hair|makeup|cosmetic|skincare"),
    ("charity", r"charity|nonprofit|donation|foundation|volunteer|ngo|church"),
    ("job-board", r"job|career|recruit|hire|employment|hr|resume|cv"),
    ("photography", r"photo|video|camera|studio|creative|film|media"),
    ("pet", r"pet|animal|dog|cat|vet|veterinary"),
    ("transportation", r"transport|logistics|shipping|cargo|car|auto|delivery|taxi|moving"),
    ("technology", r"tech|digital|it|software|cyber|hosting|domain|cloud"),
    ("gaming", r"game|gaming|esport|stream|twitch"),
    ("podcast", r"podcast|audio|radio|music|band"),
    ("agriculture", r"farm|agriculture|organic|garden|nursery|florist"),
    ("kids", r"kids|children|baby|daycare|kindergarten|toy"),
    ("fashion", r"fashion|clothing|apparel|wear|style|model"),
    ("furniture", r"furniture|decor|home|interior|kitchen|bathroom"),
    # ----- UI components & features -----
    ("slider", r"slider|carousel|slideshow|swiper|banner|hero"),
    ("gallery", r"gallery|lightbox|masonry|grid|portfolio"),
    ("video", r"video|youtube|vimeo|player|embed"),
    ("contact-form", r"contact|form|email|subscribe|newsletter"),
    ("google-maps", r"map|location|address|directions"),
    ("testimonials", r"testimonial|review|feedback|rating|client"),
    ("pricing", r"pricing|price|plan|package|subscription"),
    ("team", r"team|staff|member|about|people"),
    ("counter", r"counter|stats|number|achievement|milestone"),
    ("timeline", r"timeline|history|process|step|progress"),
    ("accordion", r"accordion|faq|question|collapse|toggle"),
    ("tabs", r"tab|pill|switch|segment"),
    ("modal", r"modal|popup|lightbox|overlay|dialog"),
    ("menu", r"menu|navigation|navbar|header|sidebar|mega"),
    ("footer", r"footer|bottom|copyright"),
    ("cards", r"card|box|tile|grid|block"),
    ("icons", r"icon|font awesome|feather|material"),
    ("social", r"social|facebook|twitter|instagram|linkedin|share"),
    ("login", r"login|signin|register|signup|auth|account"),
    ("search", r"search|filter|sort|find"),
    ("cart", r"cart|checkout|payment|order|shop"),
    ("booking", r"booking|reservation|appointment|schedule|calendar"),
    ("chat", r"chat|messenger|whatsapp|support|live"),
    # ----- Design styles -----
    ("dark", r"dark|night|black"),
    ("minimal", r"minimal|clean|simple|whitespace"),
    ("colorful", r"color|creative|vibrant|gradient"),
    ("elegant", r"elegant|luxury|premium|exclusive|vip"),
    ("one-page", r"onepage|single|parallax|scrolling"),
    ("multi-page", r"multi|page|subpage"),
    ("animated", r"anim|motion|slide|fade|zoom|bounce"),
    ("flat", r"flat|material|metro|modern"),
    ("3d", r"3d|three|dimension|perspective"),
    ("gradient", r"gradient|colorful|vibrant"),
    ("glassmorphism", r"glass|blur|frosted|transparent"),
    ("neumorphism", r"neumorphism|soft|shadow"),
    ("retro", r"retro|vintage|classic|old|nostalgia"),
    ("futuristic", r"futuristic|future|cyber|neon|sci-fi"),
    ("handwritten", r"handwritten|script|cursive|brush"),
    ("bold", r"bold|strong|heavy|thick"),
    # ----- Similar to brands -----
    ("airbnb", r"airbnb|booking|rental|vacation|host"),
    ("uber", r"uber|taxi|ride|driver|transport"),
    ("spotify", r"spotify|music|playlist|stream|audio"),
    ("netflix", r"netflix|movie|stream|video|watch"),
    ("amazon", r"amazon|shop|store|ecommerce|product"),
    ("apple", r"apple|minimal|clean|sleek|ios"),
    ("google", r"google|material|search|android"),
    ("facebook", r"facebook|social|community|network"),
    ("instagram", r"instagram|photo|image|gallery|feed"),
    ("twitter", r"twitter|tweet|social|feed|news"),
    ("linkedin", r"linkedin|professional|business|job|career"),
    ("dribbble", r"dribbble|design|creative|portfolio|shot"),
    ("behance", r"behance|portfolio|creative|design|project"),
    ("medium", r"medium|blog|article|read|story"),
    ("mailchimp", r"mailchimp|email|newsletter|marketing|campaign"),
    ("stripe", r"stripe|payment|checkout|transaction"),
    ("shopify", r"shopify|store|ecommerce|product|sell"),
    ("wordpress", r"wordpress|blog|cms|theme|template"),
    ("wix", r"wix|website|builder|drag|drop"),
    ("squarespace", r"squarespace|portfolio|minimal|elegant"),
    # ----- Performance & technical -----
    ("fast", r"fast|speed|quick|performance|lightweight"),
    ("seo", r"seo|search engine|optimization|meta|sitemap"),
    ("accessible", r"accessible|accessibility|a11y|wcag|aria"),
    ("mobile-first", r"mobile|responsive|adaptive|fluid"),
    ("cross-browser", r"browser|chrome|firefox|safari|edge"),
    ("retina", r"retina|hdpi|high resolution|crisp|sharp"),
    ("lazy-load", r"lazy|defer|async|performance"),
    ("pwa", r"pwa|progressive|offline|installable"),
    ("amp", r"amp|accelerated|mobile|fast"),
    # ----- Colors from template names -----
    ("blue", r"blue|ocean|sky|aqua|azure|navy|sea|water|pacific"),
    ("green", r"green|eco|nature|organic|leaf|forest|garden|farm"),
    ("red", r"red|crimson|ruby|scarlet|fire"),
    ("orange", r"orange|amber|sunset"),
    ("purple", r"purple|violet|lavender|magenta"),
    ("yellow", r"yellow|gold|golden|sun|bright"),
    ("pink", r"pink|rose|blush"),
    ("brown", r"brown|wood|coffee|chocolate|earth"),
    ("white", r"white|light|bright|clean|minimal"),
    ("black", r"black|dark|night|shadow"),
    ("grey", r"grey|gray|silver|neutral"),
)

FEATURE_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (tag, re.compile(pattern, re.IGNORECASE)) for tag, pattern in _RAW_FEATURE_PATTERNS
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
MIN_NAME_WORD_LENGTH = 3


# =============================================================================
# TAG SET
# =============================================================================


@dataclass(frozen=True)
class TagSet:
    """
    Synthesized tags for one template.

    ``tokens`` keeps insertion order for storage only; consumers must treat
    it as a set. Containment (``word in tags``) is substring containment
    over the space-joined text, so "estat" matches the tag "real estate".
    """

    tokens: tuple[str, ...]

    @cached_property
    def text(self) -> str:
        return " ".join(self.tokens)

    def __contains__(self, needle: str) -> bool:
        return needle in self.text

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def has_token(self, token: str) -> bool:
        """Exact token membership (no substring matching)."""
        return token in self.tokens


def _name_words(name_lower: str) -> list[str]:
    return [
        word
        for word in _NON_ALNUM.sub(" ", name_lower).split()
        if len(word) >= MIN_NAME_WORD_LENGTH
    ]


def synthesize(
    key: str, name: str, category: str, colors: Iterable[str] = ()
) -> TagSet:
    """
    Build the tag set for one template.

    Args:
        key: Template key (also tested against the feature patterns)
        name: Display name
        category: Category label; empty means "Other"
        colors: Colors extracted from the thumbnail, added verbatim

    Returns:
        TagSet with category, synonyms, pattern tags, name words and colors
    """
    name_lower = (name or "").lower()
    key_lower = (key or "").lower()
    category_lower = (category or DEFAULT_CATEGORY).lower()

    # dict keys give an insertion-ordered set
    tags: dict[str, None] = {}

    def add(tag: str) -> None:
        if tag:
            tags.setdefault(tag, None)

    add(category_lower)

    for canonical, synonyms in CATEGORY_SYNONYMS.items():
        if (
            category_lower == canonical
            or canonical in category_lower
            or category_lower in canonical
        ):
            for synonym in synonyms:
                add(synonym)
            add(canonical)

    for tag, pattern in FEATURE_PATTERNS:
        if (
            pattern.search(name_lower)
            or pattern.search(key_lower)
            or pattern.search(category_lower)
        ):
            add(tag)

    for word in _name_words(name_lower):
        add(word)

    for color in colors:
        add(color)

    return TagSet(tokens=tuple(tags))


class TagIndex(Mapping):
    """Tags for every template in a catalog, computed once at load."""

    def __init__(self, tags: dict[str, TagSet]):
        self._tags = dict(tags)

    @classmethod
    def build(cls, catalog: Catalog) -> "TagIndex":
        return cls(
            {
                item.key: synthesize(item.key, item.name, item.category, item.colors)
                for item in catalog
            }
        )

    def __getitem__(self, key: str) -> TagSet:
        return self._tags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)
