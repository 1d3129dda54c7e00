# backend/budget_travel/services/activity_service.py

from typing import Any, Dict, List, Optional

from budget_travel.core.config_loader import settings
from budget_travel.core.logger import logger
from budget_travel.models.inventory_models import ActivityOption
from budget_travel.utils.hashing import hash_string, round_half_up


CATEGORIES: List[Dict[str, Any]] = [
    {
        "name": "Sightseeing",
        "multiplier": 1.0,
        "subcategories": ["Landmarks", "Architecture", "City Tours", "Walking Tours", "Bus Tours"],
        "interests": ["history", "culture", "architecture", "sightseeing"],
    },
    {
        "name": "Cultural",
        "multiplier": 1.2,
        "subcategories": ["Museums", "Art Galleries", "Theaters", "Historical Sites", "Local Customs"],
        "interests": ["history", "culture", "art", "museums", "education"],
    },
    {
        "name": "Food & Drink",
        "multiplier": 1.5,
        "subcategories": ["Food Tours", "Cooking Classes", "Wine Tasting", "Local Cuisine", "Cafes"],
        "interests": ["food", "culinary", "wine", "local cuisine", "gastronomy"],
    },
    {
        "name": "Nature & Outdoors",
        "multiplier": 0.9,
        "subcategories": ["Parks", "Gardens", "Hiking", "Wildlife", "Beaches"],
        "interests": ["nature", "outdoors", "hiking", "wildlife", "adventure"],
    },
    {
        "name": "Adventure",
        "multiplier": 1.8,
        "subcategories": ["Water Sports", "Zip-lining", "Rock Climbing", "Bungee Jumping", "Skydiving"],
        "interests": ["adventure", "adrenaline", "sports", "extreme", "active"],
    },
    {
        "name": "Entertainment",
        "multiplier": 1.7,
        "subcategories": ["Concerts", "Live Shows", "Nightlife", "Theme Parks", "Events"],
        "interests": ["entertainment", "nightlife", "shows", "fun", "music"],
    },
    {
        "name": "Shopping",
        "multiplier": 0.5,
        "subcategories": ["Local Markets", "Shopping Districts", "Boutiques", "Souvenir Shops", "Malls"],
        "interests": ["shopping", "markets", "local products", "souvenirs"],
    },
    {
        "name": "Relaxation",
        "multiplier": 1.4,
        "subcategories": ["Spas", "Wellness", "Beaches", "Parks", "Meditation"],
        "interests": ["relaxation", "wellness", "spa", "peaceful", "mindfulness"],
    },
]

CATEGORY_MULTIPLIERS = {c["name"]: c["multiplier"] for c in CATEGORIES}

DEFAULT_INTERESTS = ["history", "food", "culture", "nature"]

EXTRA_TAGS = [
    "top-rated", "popular", "must-see", "authentic", "local experience",
    "family-friendly", "educational", "unique", "traditional", "Instagram-worthy",
]

SUITABLE_FOR = [
    "Families", "Couples", "Solo travelers", "Groups", "Seniors",
    "Children", "Photography enthusiasts", "History buffs", "Art lovers", "Foodies",
]

ADDRESS_STREETS = [
    "Main", "Park", "Grand", "Museum", "Festival",
    "Cultural", "Market", "Historic", "Art", "Central",
]


def base_activity_price(category: str, duration_hours: int) -> int:
    """$20 per hour scaled by the category multiplier."""
    return round_half_up(20 * duration_hours * CATEGORY_MULTIPLIERS.get(category, 1.0))


def _activity_name(city: str, category: str, subcategory: str, seed: int) -> str:
    prefixes = [
        city,
        f"{city} Signature",
        f"{city} Ultimate",
        f"{city} Classic",
        f"Authentic {city}",
        f"Historic {city}",
        f"Exclusive {city}",
        f"Top-Rated {city}",
        f"Private {city}",
        f"Premium {city}",
    ]
    suffixes = [
        f"{subcategory} Experience",
        f"{subcategory} Adventure",
        f"{subcategory} Tour",
        f"{subcategory} Discovery",
        f"{subcategory} Exploration",
        f"{subcategory} Journey",
        f"{category} Experience",
        f"Best of {subcategory}",
        f"{subcategory} Highlights",
        f"{subcategory} Excursion",
    ]
    return f"{prefixes[seed % len(prefixes)]} {suffixes[(seed + 3) % len(suffixes)]}"


def _activity_description(name: str, city: str, subcategory: str, duration: str) -> str:
    sub = subcategory.lower()
    introductions = [
        f"Discover the best of {city} with this {sub} experience.",
        f"Immerse yourself in the {city} {sub} scene with this guided tour.",
        f"Experience {city}'s world-renowned {sub} in this unforgettable activity.",
        f"Explore the highlights of {city}'s {sub} with expert local guides.",
        f"Enjoy an authentic {city} experience with this top-rated {sub} tour.",
    ]
    middles = [
        f"This {duration} adventure takes you through the most iconic spots and hidden gems.",
        f"With a duration of {duration}, you'll have plenty of time to enjoy the experience without rushing.",
        f"Over the course of {duration}, you'll see why {city} is famous for its {sub}.",
        f"This carefully designed {duration} tour offers the perfect balance of information and enjoyment.",
        f"For {duration}, our experienced guides will share fascinating insights and stories about {city}.",
    ]
    conclusions = [
        "Perfect for first-time visitors and returning travelers alike.",
        f"An essential experience for anyone wanting to truly understand {city}.",
        "Book early to secure your spot - this is one of our most popular activities!",
        "Suitable for all ages and interests, making it a perfect addition to any itinerary.",
        "By the end, you'll have memories and photos to cherish for years to come.",
    ]

    seed = hash_string(name)
    return " ".join([
        introductions[seed % len(introductions)],
        middles[(seed + 7) % len(middles)],
        conclusions[(seed + 13) % len(conclusions)],
    ])


def _activity_highlights(city: str, subcategory: str, category: str, count: int, seed: int) -> List[str]:
    options = [
        f"Experience the best of {city}'s {subcategory.lower()}",
        f"Learn about the rich history of {city} from expert guides",
        "Skip-the-line access to popular attractions",
        "Small group sizes for a more personalized experience",
        "Convenient pickup and drop-off at central locations",
        "Discover hidden gems not found in guidebooks",
        "Sample local delicacies and specialties",
        "Take stunning photos at the best viewpoints",
        "Receive insider tips and recommendations for the rest of your stay",
        "Flexible booking options with free cancellation",
        "Environmentally conscious and sustainable tour practices",
        "Authentic interactions with local communities",
        "Access to exclusive locations not open to the general public",
        "All entrance fees and equipment included in the price",
        "Digital souvenir package with professional photos",
        "Support local businesses and artisans",
    ]

    highlights: List[str] = []
    for i in range(count):
        option = options[(seed + i * 17) % len(options)]
        if option not in highlights:
            highlights.append(option)
        else:
            highlights.append(f"Enjoy the unique {category.lower()} culture of {city}")
    return highlights


def generate_activity(
    city: str,
    category: Dict[str, Any],
    seed: int,
    interest: Optional[str] = None,
) -> ActivityOption:
    name_of_category = category["name"]
    subcategories = category["subcategories"]
    # items are seeded 100 apart; each field gets its own stride over that step
    variant = seed // 100
    subcategory = subcategories[(seed + variant) % len(subcategories)]

    name = _activity_name(city, name_of_category, subcategory, seed + variant * 3)

    # 1..5 hours, plus an optional half hour
    duration_hours = max(1, ((seed + variant * 9) % 10) % 6)
    duration_minutes = ((seed + 3 + variant) % 2) * 30
    if duration_minutes > 0:
        duration = f"{duration_hours} hours {duration_minutes} minutes"
    else:
        duration = f"{duration_hours} hours"

    # +/- 20% around the category price
    variability = 0.8 + ((seed + variant * 13) % 40) / 100
    price = round_half_up(base_activity_price(name_of_category, duration_hours) * variability)

    rating = 3.5 + ((seed + variant * 31) % 30) / 20
    review_multiplier = max(1, int(rating - 3) * 3)
    review_count = 50 + (seed % 150) * review_multiplier

    locations = [
        f"{city} Downtown",
        f"{city} Historical District",
        f"Central {city}",
        f"{subcategory} District",
        f"{city} {subcategory} Center",
        f"{city} Waterfront",
        f"{city} Park Area",
        f"{city} Cultural Zone",
    ]

    tags = [name_of_category.lower(), subcategory.lower()]
    if interest:
        tags.append(interest.lower())
    for i in range(3):
        tags.append(EXTRA_TAGS[(seed + variant + i * 7) % len(EXTRA_TAGS)])

    suitable_for = [
        SUITABLE_FOR[(seed + variant + i * 13) % len(SUITABLE_FOR)]
        for i in range(2 + (seed + variant) % 3)
    ]

    return ActivityOption(
        id=f"activity-{seed}",
        name=name,
        description=_activity_description(name, city, subcategory, duration),
        category=name_of_category,
        subcategories=[subcategory],
        location=locations[(seed + variant * 5) % len(locations)],
        address=f"{100 + seed % 900} {ADDRESS_STREETS[(seed + 5 + variant) % len(ADDRESS_STREETS)]} Street, {city}",
        city=city,
        price=price,
        duration=duration,
        duration_hours=duration_hours + duration_minutes / 60,
        rating=rating,
        review_count=review_count,
        booking_required=(seed + variant) % 3 != 0,
        distance_from_center=f"{((seed + variant * 7) % 30) / 10:.1f} km",
        suitable_for=suitable_for,
        highlights=_activity_highlights(city, subcategory, name_of_category, 3 + (seed + variant) % 2, seed + variant),
        tags=tags,
        seed=seed,
    )


def _matching_categories(interest: str) -> List[Dict[str, Any]]:
    return [
        c for c in CATEGORIES
        if any(ci in interest or interest in ci for ci in c["interests"])
    ]


class ActivityService:
    def __init__(self, max_activities: Optional[int] = None):
        self.max_activities = max_activities or settings.max_activities

    def find_activities(
        self,
        destination: str,
        interests: Optional[List[str]] = None,
        trip_duration: int = 3,
    ) -> List[ActivityOption]:
        """
        Generate bookable activities for a destination.

        One activity is seeded per user interest (up to eight), the rest
        cycle through all categories. The pool size is
        min(max_activities, trip_duration * 4 + 10).

        Returns:
            Activities sorted by rating desc, then price asc. [] on failure.
        """
        try:
            city = destination.split(",")[0].strip()
            seed = hash_string(destination)
            return self._generate_activities(city, interests or [], trip_duration, seed)
        except Exception as e:
            logger.error(f"Error finding activities for {destination!r}: {e}")
            return []

    def _generate_activities(
        self,
        city: str,
        interests: List[str],
        trip_duration: int,
        seed: int,
    ) -> List[ActivityOption]:
        num_activities = min(self.max_activities, trip_duration * 4 + 10)
        user_interests = interests or DEFAULT_INTERESTS

        activities: List[ActivityOption] = []

        for i, raw_interest in enumerate(user_interests[:len(CATEGORIES)]):
            interest = raw_interest.lower()
            matching = _matching_categories(interest)
            if not matching:
                continue

            category = matching[(seed + i) % len(matching)]
            activities.append(generate_activity(city, category, seed + i * 100, interest))

        remaining = num_activities - len(activities)
        for i in range(remaining):
            # len(activities) grows as we go, so consecutive picks drift
            category = CATEGORIES[(seed + i + len(activities)) % len(CATEGORIES)]
            activities.append(
                generate_activity(city, category, seed + (i + len(activities)) * 100)
            )

        activities.sort(key=lambda a: (-a.rating, a.price))
        return activities
