"""
Industry layout definitions.

Each industry offers three layouts that render the same business data
with a different visual treatment, plus a color palette per layout:

- a warm/approachable layout (the usual default)
- a polished/professional layout
- a compact, conversion-focused layout
"""

from __future__ import annotations

from blink.core.ir import IndustryDefinition, LayoutStyle, LayoutVariant, Palette


def _layout(
    name: str,
    description: str,
    style: tuple[str, str, str, str, str],
    emphasis: list[str],
    **section_order: list[str],
) -> LayoutVariant:
    hero_style, card_style, border_radius, shadows, spacing = style
    return LayoutVariant(
        name=name,
        description=description,
        style=LayoutStyle(
            hero_style=hero_style,
            card_style=card_style,
            border_radius=border_radius,
            shadows=shadows,
            spacing=spacing,
        ),
        emphasis=emphasis,
        section_order=section_order,
    )


def _palette(primary: str, secondary: str, accent: str) -> Palette:
    return Palette(primary=primary, secondary=secondary, accent=accent)


# Shared style tuples: (hero, card, radius, shadows, spacing)
_COMPACT = ("minimal", "flat", "4px", "none", "compact")
_STRUCTURED = ("split", "bordered", "8px", "minimal", "structured")


# =============================================================================
# Healthcare & Medical
# =============================================================================

HEALTHCARE = IndustryDefinition(
    key="healthcare",
    layouts={
        "patient-focused": _layout(
            "Patient Focused",
            "Warm, welcoming design emphasizing easy booking and comfort",
            ("centered", "rounded", "16px", "soft", "comfortable"),
            ["booking", "testimonials", "comfort", "accessibility"],
            home=[
                "hero",
                "quick-actions",
                "services-preview",
                "testimonials",
                "stats",
                "insurance",
                "cta",
            ],
            services=["hero", "category-tabs", "service-grid", "process", "cta"],
            about=["hero", "mission", "values", "team", "certifications", "cta"],
        ),
        "medical-professional": _layout(
            "Medical Professional",
            "Clean, clinical design emphasizing credentials and expertise",
            _STRUCTURED,
            ["credentials", "expertise", "statistics", "technology"],
            home=[
                "hero",
                "stats",
                "services-preview",
                "providers-preview",
                "certifications",
                "insurance",
                "cta",
            ],
            services=["hero", "service-list", "credentials", "technology", "cta"],
            about=["hero", "story", "certifications", "team", "stats", "cta"],
        ),
        "clinical-dashboard": _layout(
            "Clinical Dashboard",
            "Data-focused design with quick access to patient tools",
            _COMPACT,
            ["efficiency", "data", "quick-access", "portal"],
            home=["hero-compact", "portal-actions", "quick-stats", "services-grid", "contact-bar"],
            services=["search-filter", "service-table", "booking-sidebar"],
            about=["hero-minimal", "facts", "team-list", "contact"],
        ),
    },
    default_layout="patient-focused",
    color_palettes={
        "patient-focused": _palette("#059669", "#10B981", "#34D399"),
        "medical-professional": _palette("#0284C7", "#0EA5E9", "#38BDF8"),
        "clinical-dashboard": _palette("#7C3AED", "#8B5CF6", "#A78BFA"),
    },
)

DENTAL = IndustryDefinition(
    key="dental",
    layouts={
        "family-friendly": _layout(
            "Family Friendly",
            "Approachable design for all ages, emphasizing comfort",
            ("centered", "rounded", "20px", "soft", "comfortable"),
            ["family", "comfort", "gentle-care", "kids"],
            home=["hero", "services-preview", "team", "testimonials", "insurance", "cta"],
        ),
        "modern-cosmetic": _layout(
            "Modern Cosmetic",
            "Sleek design highlighting cosmetic and aesthetic services",
            _STRUCTURED,
            ["cosmetic", "technology", "before-after", "results"],
            home=["hero", "before-after", "services", "technology", "testimonials", "cta"],
        ),
        "clinical-efficient": _layout(
            "Clinical Efficient",
            "Professional design focused on appointments and procedures",
            _COMPACT,
            ["efficiency", "procedures", "booking", "insurance"],
            home=["hero-compact", "booking-widget", "services-list", "insurance", "contact"],
        ),
    },
    default_layout="family-friendly",
    color_palettes={
        "family-friendly": _palette("#0D9488", "#14B8A6", "#5EEAD4"),
        "modern-cosmetic": _palette("#3B82F6", "#60A5FA", "#93C5FD"),
        "clinical-efficient": _palette("#6366F1", "#818CF8", "#A5B4FC"),
    },
)


# =============================================================================
# Food & Beverage
# =============================================================================

PIZZA_RESTAURANT = IndustryDefinition(
    key="pizza-restaurant",
    layouts={
        "family-fun": _layout(
            "Family Fun",
            "Playful design with bold colors and easy ordering",
            ("centered", "rounded", "20px", "soft", "comfortable"),
            ["menu", "ordering", "specials", "family"],
            home=["hero", "specials", "menu-preview", "reviews", "location", "cta"],
        ),
        "artisan-craft": _layout(
            "Artisan Craft",
            "Sophisticated design highlighting quality ingredients",
            _STRUCTURED,
            ["ingredients", "craft", "story", "quality"],
            home=["hero", "story", "ingredients", "menu", "reviews", "cta"],
        ),
        "quick-order": _layout(
            "Quick Order",
            "Efficient design optimized for online ordering",
            _COMPACT,
            ["ordering", "speed", "deals", "delivery"],
            home=["hero-compact", "order-widget", "deals", "menu-grid", "delivery-info"],
        ),
    },
    default_layout="family-fun",
    color_palettes={
        "family-fun": _palette("#DC2626", "#F97316", "#FBBF24"),
        "artisan-craft": _palette("#92400E", "#B45309", "#D97706"),
        "quick-order": _palette("#E11D48", "#F43F5E", "#FB7185"),
    },
)

STEAKHOUSE = IndustryDefinition(
    key="steakhouse",
    layouts={
        "luxury-dining": _layout(
            "Luxury Dining",
            "Elegant dark theme showcasing premium cuts",
            ("fullscreen", "bordered", "4px", "dramatic", "spacious"),
            ["ambiance", "cuts", "wine", "experience"],
            home=[
                "hero-fullscreen",
                "signature-dishes",
                "wine-list",
                "private-dining",
                "reviews",
                "cta",
            ],
        ),
        "rustic-grill": _layout(
            "Rustic Grill",
            "Warm wood tones emphasizing tradition and quality",
            ("split", "rounded", "12px", "soft", "comfortable"),
            ["tradition", "quality", "cuts", "atmosphere"],
            home=["hero", "our-story", "menu-highlights", "butcher-cuts", "reviews", "reservations"],
        ),
        "modern-chophouse": _layout(
            "Modern Chophouse",
            "Contemporary design with clean lines",
            ("minimal", "flat", "0", "none", "structured"),
            ["modern", "menu", "chef", "reservations"],
            home=["hero-minimal", "featured", "menu", "chef-section", "reservations"],
        ),
    },
    default_layout="luxury-dining",
    color_palettes={
        "luxury-dining": _palette("#1F1F1F", "#991B1B", "#B91C1C"),
        "rustic-grill": _palette("#78350F", "#92400E", "#B45309"),
        "modern-chophouse": _palette("#18181B", "#27272A", "#71717A"),
    },
)

COFFEE_CAFE = IndustryDefinition(
    key="coffee-cafe",
    layouts={
        "cozy-warmth": _layout(
            "Cozy Warmth",
            "Warm, inviting design with earthy tones",
            ("centered", "rounded", "16px", "soft", "comfortable"),
            ["atmosphere", "menu", "community", "warmth"],
            home=["hero", "featured-drinks", "menu-preview", "story", "hours-location", "cta"],
        ),
        "modern-minimal": _layout(
            "Modern Minimal",
            "Clean Scandinavian-inspired design",
            _STRUCTURED,
            ["coffee", "sourcing", "quality", "craft"],
            home=["hero", "coffee-sourcing", "menu", "brewing-methods", "location"],
        ),
        "quick-grab": _layout(
            "Quick Grab",
            "Efficient design for mobile ordering",
            _COMPACT,
            ["ordering", "loyalty", "speed", "pickup"],
            home=["hero-compact", "order-now", "rewards", "menu-grid", "locations"],
        ),
    },
    default_layout="cozy-warmth",
    color_palettes={
        "cozy-warmth": _palette("#78350F", "#92400E", "#F59E0B"),
        "modern-minimal": _palette("#1F2937", "#374151", "#9CA3AF"),
        "quick-grab": _palette("#047857", "#059669", "#34D399"),
    },
)

RESTAURANT = IndustryDefinition(
    key="restaurant",
    layouts={
        "farm-fresh": _layout(
            "Farm Fresh",
            "Organic feel highlighting local ingredients",
            ("centered", "rounded", "12px", "soft", "comfortable"),
            ["farm", "local", "seasonal", "fresh"],
            home=["hero", "farm-partners", "seasonal-menu", "chef", "reviews", "reservations"],
        ),
        "elegant-dining": _layout(
            "Elegant Dining",
            "Sophisticated design for upscale experience",
            ("fullscreen", "bordered", "4px", "minimal", "spacious"),
            ["experience", "tasting-menu", "wine", "ambiance"],
            home=[
                "hero-fullscreen",
                "philosophy",
                "tasting-menu",
                "wine-pairings",
                "reviews",
                "cta",
            ],
        ),
        "neighborhood-bistro": _layout(
            "Neighborhood Bistro",
            "Friendly approachable design",
            ("split", "rounded", "16px", "soft", "comfortable"),
            ["community", "daily-specials", "atmosphere", "family"],
            home=["hero", "daily-specials", "menu", "events", "location", "cta"],
        ),
    },
    default_layout="farm-fresh",
    color_palettes={
        "farm-fresh": _palette("#166534", "#15803D", "#22C55E"),
        "elegant-dining": _palette("#1E1B18", "#44403C", "#A8A29E"),
        "neighborhood-bistro": _palette("#0369A1", "#0284C7", "#38BDF8"),
    },
)

BAKERY = IndustryDefinition(
    key="bakery",
    layouts={
        "artisan-charm": _layout(
            "Artisan Charm",
            "Rustic warmth highlighting handcrafted goods",
            ("centered", "rounded", "20px", "soft", "comfortable"),
            ["handmade", "tradition", "fresh-daily", "craft"],
            home=["hero", "fresh-today", "signature-items", "story", "custom-orders", "cta"],
        ),
        "modern-patisserie": _layout(
            "Modern Patisserie",
            "Elegant French-inspired design",
            _STRUCTURED,
            ["elegance", "technique", "seasonal", "custom"],
            home=["hero", "collections", "seasonal-specials", "custom-cakes", "reviews"],
        ),
        "sweet-simple": _layout(
            "Sweet & Simple",
            "Clean design for quick ordering",
            _COMPACT,
            ["ordering", "menu", "catering", "pickup"],
            home=["hero-compact", "order-widget", "menu-grid", "catering", "locations"],
        ),
    },
    default_layout="artisan-charm",
    color_palettes={
        "artisan-charm": _palette("#92400E", "#B45309", "#FBBF24"),
        "modern-patisserie": _palette("#831843", "#9D174D", "#DB2777"),
        "sweet-simple": _palette("#DC2626", "#EF4444", "#FCA5A5"),
    },
)


# =============================================================================
# Beauty & Wellness
# =============================================================================

SALON_SPA = IndustryDefinition(
    key="salon-spa",
    layouts={
        "luxury-retreat": _layout(
            "Luxury Retreat",
            "Elegant spa-like design emphasizing relaxation",
            ("fullscreen", "rounded", "16px", "soft", "spacious"),
            ["relaxation", "services", "experience", "booking"],
            home=[
                "hero-fullscreen",
                "featured-services",
                "packages",
                "team",
                "testimonials",
                "cta",
            ],
        ),
        "modern-beauty": _layout(
            "Modern Beauty",
            "Trendy design highlighting services and team",
            _STRUCTURED,
            ["services", "team", "portfolio", "booking"],
            home=["hero", "services", "team-preview", "gallery", "reviews", "booking"],
        ),
        "quick-book": _layout(
            "Quick Book",
            "Efficient design optimized for appointments",
            _COMPACT,
            ["booking", "services", "prices", "availability"],
            home=["hero-compact", "booking-widget", "services-list", "prices", "contact"],
        ),
    },
    default_layout="luxury-retreat",
    color_palettes={
        "luxury-retreat": _palette("#831843", "#9D174D", "#F9A8D4"),
        "modern-beauty": _palette("#7C3AED", "#8B5CF6", "#C4B5FD"),
        "quick-book": _palette("#0D9488", "#14B8A6", "#5EEAD4"),
    },
)

FITNESS_GYM = IndustryDefinition(
    key="fitness-gym",
    layouts={
        "bold-energy": _layout(
            "Bold Energy",
            "High-energy design with bold colors and dynamic elements",
            ("fullscreen", "angular", "4px", "dramatic", "structured"),
            ["motivation", "classes", "results", "community"],
            home=[
                "hero-fullscreen",
                "classes",
                "trainers",
                "transformation",
                "membership",
                "cta",
            ],
        ),
        "modern-wellness": _layout(
            "Modern Wellness",
            "Balanced design emphasizing overall wellness",
            ("split", "rounded", "12px", "soft", "comfortable"),
            ["wellness", "programs", "nutrition", "balance"],
            home=[
                "hero",
                "programs",
                "wellness-approach",
                "trainers",
                "testimonials",
                "membership",
            ],
        ),
        "functional-focused": _layout(
            "Functional Focused",
            "Clean design highlighting equipment and facilities",
            ("minimal", "bordered", "8px", "minimal", "compact"),
            ["facilities", "equipment", "hours", "membership"],
            home=["hero-compact", "facilities", "class-schedule", "membership-tiers", "contact"],
        ),
    },
    default_layout="bold-energy",
    color_palettes={
        "bold-energy": _palette("#DC2626", "#EF4444", "#FCA5A5"),
        "modern-wellness": _palette("#059669", "#10B981", "#6EE7B7"),
        "functional-focused": _palette("#1F2937", "#374151", "#6B7280"),
    },
)

YOGA = IndustryDefinition(
    key="yoga",
    layouts={
        "serene-zen": _layout(
            "Serene Zen",
            "Peaceful design with natural elements",
            ("centered", "rounded", "24px", "soft", "spacious"),
            ["peace", "classes", "teachers", "community"],
            home=["hero", "philosophy", "classes", "teachers", "schedule", "cta"],
        ),
        "modern-flow": _layout(
            "Modern Flow",
            "Contemporary design balancing tradition and modernity",
            _STRUCTURED,
            ["styles", "schedule", "workshops", "community"],
            home=["hero", "styles", "schedule", "workshops", "testimonials", "membership"],
        ),
        "active-practice": _layout(
            "Active Practice",
            "Dynamic design for fitness-focused yoga",
            _COMPACT,
            ["classes", "schedule", "pricing", "booking"],
            home=["hero-compact", "class-types", "schedule-widget", "pricing", "contact"],
        ),
    },
    default_layout="serene-zen",
    color_palettes={
        "serene-zen": _palette("#0D9488", "#14B8A6", "#99F6E4"),
        "modern-flow": _palette("#7C3AED", "#8B5CF6", "#C4B5FD"),
        "active-practice": _palette("#EA580C", "#F97316", "#FDBA74"),
    },
)

BARBERSHOP = IndustryDefinition(
    key="barbershop",
    layouts={
        "classic-heritage": _layout(
            "Classic Heritage",
            "Traditional barbershop aesthetic with vintage charm",
            ("centered", "bordered", "8px", "soft", "comfortable"),
            ["tradition", "services", "barbers", "experience"],
            home=["hero", "services", "barbers", "gallery", "testimonials", "booking"],
        ),
        "modern-grooming": _layout(
            "Modern Grooming",
            "Contemporary design for the modern gentleman",
            ("split", "rounded", "12px", "minimal", "structured"),
            ["grooming", "products", "team", "booking"],
            home=["hero", "services", "products", "team", "reviews", "cta"],
        ),
        "quick-cuts": _layout(
            "Quick Cuts",
            "Efficient design focused on easy booking",
            _COMPACT,
            ["booking", "services", "prices", "location"],
            home=["hero-compact", "booking-widget", "services-prices", "location", "hours"],
        ),
    },
    default_layout="classic-heritage",
    color_palettes={
        "classic-heritage": _palette("#1F2937", "#374151", "#B91C1C"),
        "modern-grooming": _palette("#0F172A", "#1E293B", "#0EA5E9"),
        "quick-cuts": _palette("#18181B", "#27272A", "#22C55E"),
    },
)


# =============================================================================
# Professional & Home Services
# =============================================================================

LAW_FIRM = IndustryDefinition(
    key="law-firm",
    layouts={
        "trust-authority": _layout(
            "Trust & Authority",
            "Traditional design emphasizing experience and results",
            ("split", "bordered", "4px", "minimal", "structured"),
            ["expertise", "results", "team", "testimonials"],
            home=["hero", "practice-areas", "results", "attorneys", "testimonials", "contact"],
        ),
        "modern-practice": _layout(
            "Modern Practice",
            "Contemporary design for approachable legal services",
            ("centered", "rounded", "12px", "soft", "comfortable"),
            ["accessibility", "areas", "process", "consultation"],
            home=["hero", "how-we-help", "practice-areas", "team", "process", "cta"],
        ),
        "results-focused": _layout(
            "Results Focused",
            "Data-driven design highlighting case outcomes",
            ("minimal", "flat", "0", "none", "compact"),
            ["results", "stats", "cases", "consultation"],
            home=["hero-compact", "stats", "practice-areas", "case-results", "contact-form"],
        ),
    },
    default_layout="trust-authority",
    color_palettes={
        "trust-authority": _palette("#1E3A5F", "#2563EB", "#3B82F6"),
        "modern-practice": _palette("#0F766E", "#14B8A6", "#2DD4BF"),
        "results-focused": _palette("#18181B", "#27272A", "#A1A1AA"),
    },
)

REAL_ESTATE = IndustryDefinition(
    key="real-estate",
    layouts={
        "luxury-properties": _layout(
            "Luxury Properties",
            "High-end design showcasing premium listings",
            ("fullscreen", "bordered", "4px", "dramatic", "spacious"),
            ["listings", "luxury", "agent", "experience"],
            home=[
                "hero-fullscreen",
                "featured-listings",
                "neighborhoods",
                "agent",
                "testimonials",
                "contact",
            ],
        ),
        "modern-search": _layout(
            "Modern Search",
            "Search-focused design for easy property discovery",
            ("centered", "rounded", "12px", "soft", "comfortable"),
            ["search", "listings", "tools", "resources"],
            home=["hero-search", "featured", "neighborhoods", "tools", "testimonials", "cta"],
        ),
        "local-expert": _layout(
            "Local Expert",
            "Community-focused design highlighting local expertise",
            ("split", "rounded", "16px", "soft", "comfortable"),
            ["community", "expertise", "listings", "guides"],
            home=["hero", "featured", "area-guides", "about-agent", "reviews", "contact"],
        ),
    },
    default_layout="luxury-properties",
    color_palettes={
        "luxury-properties": _palette("#1F2937", "#B8860B", "#D4AF37"),
        "modern-search": _palette("#0369A1", "#0284C7", "#38BDF8"),
        "local-expert": _palette("#166534", "#15803D", "#22C55E"),
    },
)

PLUMBER = IndustryDefinition(
    key="plumber",
    layouts={
        "trust-service": _layout(
            "Trust & Service",
            "Reliable design emphasizing trust and availability",
            ("centered", "rounded", "12px", "soft", "comfortable"),
            ["emergency", "services", "trust", "testimonials"],
            home=[
                "hero",
                "emergency-banner",
                "services",
                "why-choose-us",
                "testimonials",
                "contact",
            ],
        ),
        "professional-clean": _layout(
            "Professional Clean",
            "Clean design highlighting expertise and licensing",
            _STRUCTURED,
            ["licensing", "services", "process", "pricing"],
            home=["hero", "credentials", "services", "process", "pricing", "contact"],
        ),
        "quick-call": _layout(
            "Quick Call",
            "Action-focused design for immediate service",
            _COMPACT,
            ["call-now", "emergency", "services", "areas"],
            home=["hero-emergency", "call-widget", "services-list", "service-areas", "hours"],
        ),
    },
    default_layout="trust-service",
    color_palettes={
        "trust-service": _palette("#0369A1", "#0284C7", "#38BDF8"),
        "professional-clean": _palette("#1E3A5F", "#2563EB", "#60A5FA"),
        "quick-call": _palette("#DC2626", "#EF4444", "#FCA5A5"),
    },
)

CLEANING = IndustryDefinition(
    key="cleaning",
    layouts={
        "fresh-clean": _layout(
            "Fresh & Clean",
            "Bright design emphasizing cleanliness and trust",
            ("centered", "rounded", "16px", "soft", "comfortable"),
            ["cleanliness", "services", "trust", "booking"],
            home=["hero", "services", "why-choose-us", "process", "testimonials", "booking"],
        ),
        "eco-friendly": _layout(
            "Eco-Friendly",
            "Natural design highlighting green cleaning",
            ("split", "rounded", "12px", "soft", "comfortable"),
            ["eco", "products", "health", "sustainability"],
            home=["hero", "eco-commitment", "services", "products", "testimonials", "cta"],
        ),
        "quick-quote": _layout(
            "Quick Quote",
            "Conversion-focused design for instant quotes",
            _COMPACT,
            ["quote", "pricing", "services", "booking"],
            home=["hero-compact", "quote-calculator", "services", "pricing", "contact"],
        ),
    },
    default_layout="fresh-clean",
    color_palettes={
        "fresh-clean": _palette("#0891B2", "#06B6D4", "#67E8F9"),
        "eco-friendly": _palette("#166534", "#15803D", "#4ADE80"),
        "quick-quote": _palette("#7C3AED", "#8B5CF6", "#A78BFA"),
    },
)

AUTO_SHOP = IndustryDefinition(
    key="auto-shop",
    layouts={
        "trusted-mechanic": _layout(
            "Trusted Mechanic",
            "Reliable design emphasizing expertise and honesty",
            ("split", "bordered", "8px", "soft", "comfortable"),
            ["trust", "certifications", "services", "reviews"],
            home=[
                "hero",
                "certifications",
                "services",
                "why-choose-us",
                "testimonials",
                "contact",
            ],
        ),
        "modern-auto": _layout(
            "Modern Auto",
            "Contemporary design for tech-savvy customers",
            ("centered", "rounded", "12px", "soft", "structured"),
            ["technology", "services", "booking", "transparency"],
            home=["hero", "services", "technology", "pricing", "reviews", "booking"],
        ),
        "quick-service": _layout(
            "Quick Service",
            "Efficient design for fast appointments",
            _COMPACT,
            ["booking", "services", "pricing", "location"],
            home=["hero-compact", "booking-widget", "services-prices", "hours", "location"],
        ),
    },
    default_layout="trusted-mechanic",
    color_palettes={
        "trusted-mechanic": _palette("#1E40AF", "#2563EB", "#60A5FA"),
        "modern-auto": _palette("#DC2626", "#EF4444", "#FCA5A5"),
        "quick-service": _palette("#16A34A", "#22C55E", "#86EFAC"),
    },
)


# =============================================================================
# Tech, Retail & Education
# =============================================================================

SAAS = IndustryDefinition(
    key="saas",
    layouts={
        "enterprise-trust": _layout(
            "Enterprise Trust",
            "Professional design for B2B SaaS products",
            _STRUCTURED,
            ["features", "integrations", "security", "enterprise"],
            home=["hero", "logos", "features", "integrations", "security", "pricing", "cta"],
        ),
        "modern-startup": _layout(
            "Modern Startup",
            "Bold design for innovative products",
            ("centered", "rounded", "16px", "soft", "comfortable"),
            ["innovation", "demo", "features", "testimonials"],
            home=["hero", "demo-video", "features", "how-it-works", "testimonials", "pricing"],
        ),
        "conversion-focused": _layout(
            "Conversion Focused",
            "Optimized design for signups and trials",
            _COMPACT,
            ["signup", "trial", "features", "pricing"],
            home=["hero-signup", "features-grid", "comparison", "pricing", "faq"],
        ),
    },
    default_layout="modern-startup",
    color_palettes={
        "enterprise-trust": _palette("#1E40AF", "#3B82F6", "#60A5FA"),
        "modern-startup": _palette("#7C3AED", "#8B5CF6", "#A78BFA"),
        "conversion-focused": _palette("#059669", "#10B981", "#34D399"),
    },
)

ECOMMERCE = IndustryDefinition(
    key="ecommerce",
    layouts={
        "boutique-luxury": _layout(
            "Boutique Luxury",
            "High-end design for premium products",
            ("fullscreen", "bordered", "0", "minimal", "spacious"),
            ["products", "story", "quality", "experience"],
            home=[
                "hero-fullscreen",
                "featured-collection",
                "story",
                "categories",
                "instagram",
                "newsletter",
            ],
        ),
        "modern-shop": _layout(
            "Modern Shop",
            "Clean design optimized for browsing",
            ("split", "rounded", "12px", "soft", "comfortable"),
            ["products", "categories", "deals", "reviews"],
            home=["hero", "categories", "featured", "deals", "reviews", "newsletter"],
        ),
        "fast-checkout": _layout(
            "Fast Checkout",
            "Conversion-optimized design",
            _COMPACT,
            ["deals", "products", "cart", "checkout"],
            home=["hero-deals", "trending", "categories-grid", "deals", "recently-viewed"],
        ),
    },
    default_layout="modern-shop",
    color_palettes={
        "boutique-luxury": _palette("#1F1F1F", "#44403C", "#D4AF37"),
        "modern-shop": _palette("#0369A1", "#0284C7", "#38BDF8"),
        "fast-checkout": _palette("#DC2626", "#EF4444", "#FCA5A5"),
    },
)

SCHOOL = IndustryDefinition(
    key="school",
    layouts={
        "academic-excellence": _layout(
            "Academic Excellence",
            "Traditional design emphasizing achievements",
            _STRUCTURED,
            ["academics", "achievements", "faculty", "programs"],
            home=["hero", "stats", "programs", "faculty", "achievements", "apply"],
        ),
        "vibrant-community": _layout(
            "Vibrant Community",
            "Energetic design highlighting student life",
            ("centered", "rounded", "16px", "soft", "comfortable"),
            ["community", "activities", "events", "culture"],
            home=["hero", "upcoming-events", "programs", "student-life", "testimonials", "apply"],
        ),
        "info-focused": _layout(
            "Info Focused",
            "Practical design for easy navigation",
            _COMPACT,
            ["admissions", "programs", "calendar", "portal"],
            home=[
                "hero-compact",
                "quick-links",
                "announcements",
                "programs",
                "calendar",
                "contact",
            ],
        ),
    },
    default_layout="vibrant-community",
    color_palettes={
        "academic-excellence": _palette("#1E3A5F", "#1E40AF", "#3B82F6"),
        "vibrant-community": _palette("#7C3AED", "#8B5CF6", "#C4B5FD"),
        "info-focused": _palette("#0F766E", "#14B8A6", "#2DD4BF"),
    },
)


INDUSTRY_DEFINITIONS: dict[str, IndustryDefinition] = {
    definition.key: definition
    for definition in (
        HEALTHCARE,
        DENTAL,
        PIZZA_RESTAURANT,
        STEAKHOUSE,
        COFFEE_CAFE,
        RESTAURANT,
        BAKERY,
        SALON_SPA,
        FITNESS_GYM,
        YOGA,
        BARBERSHOP,
        LAW_FIRM,
        REAL_ESTATE,
        PLUMBER,
        CLEANING,
        AUTO_SHOP,
        SAAS,
        ECOMMERCE,
        SCHOOL,
    )
}

DEFAULT_INDUSTRY = "healthcare"


__all__ = [
    "DEFAULT_INDUSTRY",
    "INDUSTRY_DEFINITIONS",
]
