"""
Alternate spellings and near-synonyms for catalog industries.

Keys are slugs (lowercase, hyphen-separated); values are catalog keys.
"""

INDUSTRY_ALIASES: dict[str, str] = {
    # Healthcare
    "medical": "healthcare",
    "clinic": "healthcare",
    "hospital": "healthcare",
    "doctor": "healthcare",
    "dentist": "dental",
    # Food & beverage
    "pizzeria": "pizza-restaurant",
    "pizza": "pizza-restaurant",
    "cafe": "coffee-cafe",
    "coffee": "coffee-cafe",
    "coffeeshop": "coffee-cafe",
    "coffee-shop": "coffee-cafe",
    "steak": "steakhouse",
    "grill": "steakhouse",
    "bistro": "restaurant",
    "diner": "restaurant",
    "patisserie": "bakery",
    # Beauty & wellness
    "spa": "salon-spa",
    "salon": "salon-spa",
    "beauty": "salon-spa",
    "nail-salon": "salon-spa",
    "gym": "fitness-gym",
    "fitness": "fitness-gym",
    "barber": "barbershop",
    # Professional services
    "lawyer": "law-firm",
    "attorney": "law-firm",
    "legal": "law-firm",
    "accounting": "law-firm",
    "realtor": "real-estate",
    "realestate": "real-estate",
    # Home services
    "plumbing": "plumber",
    "electrician": "plumber",
    "hvac": "plumber",
    "janitorial": "cleaning",
    "maid": "cleaning",
    "mechanic": "auto-shop",
    "automotive": "auto-shop",
    "auto": "auto-shop",
    "car-repair": "auto-shop",
    # Tech, retail & education
    "software": "saas",
    "tech": "saas",
    "shop": "ecommerce",
    "store": "ecommerce",
    "retail": "ecommerce",
    "academy": "school",
    "education": "school",
}

__all__ = ["INDUSTRY_ALIASES"]
