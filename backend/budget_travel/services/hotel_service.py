# backend/budget_travel/services/hotel_service.py

import math
from typing import List

from budget_travel.core.logger import logger
from budget_travel.models.inventory_models import HotelOption
from budget_travel.utils.hashing import hash_string, round_half_up
from budget_travel.utils.time_utils import DateLike, count_nights, parse_iso_date


TYPE_MULTIPLIERS = {
    "hotel": 1.0,
    "hostel": 0.4,
    "apartment": 1.2,
    "resort": 1.8,
    "villa": 2.5,
    "guesthouse": 0.7,
}

NAME_PREFIXES = {
    "hotel": ["Grand", "Royal", "Imperial", "Palace", "Luxury", "Comfort", "Central", "Premier"],
    "hostel": ["Backpacker's", "Traveler's", "City", "Budget", "Friendly", "Adventure", "Urban"],
    "apartment": ["Modern", "Luxury", "Central", "Cozy", "Elegant", "Urban", "Executive", "Premium"],
    "resort": ["Paradise", "Tropical", "Oceanview", "Beachfront", "Luxury", "Island", "Exclusive"],
}
DEFAULT_PREFIXES = ["Grand", "Central", "Comfort", "City", "Urban"]

NAME_SUFFIXES = {
    "hotel": ["Hotel", "Suites", "Inn", "Plaza", "Grand Hotel", "Residency", "Hotel & Spa"],
    "hostel": ["Hostel", "Backpackers", "House", "Lodge", "Hub", "Zone", "Nest"],
    "apartment": ["Apartments", "Suites", "Residences", "Studios", "Lofts", "Flats"],
    "resort": ["Resort", "Resort & Spa", "Beach Resort", "Villas", "Island Resort", "Retreat"],
}
DEFAULT_SUFFIXES = ["Hotel", "Inn", "Suites", "Lodge"]

ROOM_TYPES = {
    "hotel": ["Standard Room", "Deluxe Room", "Superior Room", "Junior Suite", "Executive Suite"],
    "hostel": ["Shared Dormitory", "Private Room", "Family Room", "Deluxe Dormitory", "Ensuite Room"],
    "apartment": ["Studio Apartment", "One-Bedroom Apartment", "Two-Bedroom Apartment", "Penthouse", "Loft"],
    "resort": ["Deluxe Room", "Garden View Suite", "Ocean View Room", "Villa", "Bungalow"],
    "villa": ["Luxury Villa", "Private Pool Villa", "Garden Villa", "Beachfront Villa", "Family Villa"],
    "guesthouse": ["Standard Room", "Double Room", "Family Room", "Deluxe Room", "Suite"],
}

COMMON_AMENITIES = [
    "Free WiFi",
    "Air conditioning",
    "TV",
    "Private bathroom",
    "Breakfast included",
]

LUXURY_AMENITIES = [
    "Swimming pool",
    "Spa",
    "Fitness center",
    "Room service",
    "Restaurant",
    "Bar",
    "Concierge service",
    "Airport shuttle",
    "Business center",
    "Parking",
]

STREET_NAMES = [
    "Main", "Park", "Oak", "Pine", "Maple", "Cedar", "Elm", "Market",
    "Broadway", "Hill", "Lake", "River", "Church", "High", "Center",
]

CANCELLATION_POLICIES = [
    "Free cancellation up to 24 hours before check-in",
    "Free cancellation up to 48 hours before check-in",
    "Free cancellation up to 7 days before check-in",
    "Non-refundable",
    "Partially refundable (70% refund up to 48 hours before check-in)",
]

QUALITY_ADJECTIVES = ["excellent", "fantastic", "wonderful", "great", "superb", "exceptional"]
LOCATION_ADJECTIVES = ["centrally located", "conveniently situated", "ideally located", "perfectly positioned"]
CITY_DESCRIPTIONS = ["vibrant", "historic", "beautiful", "charming", "exciting", "picturesque"]


def base_nightly_price(accommodation_type: str, rating: float) -> int:
    """$100 x type multiplier x 1.3^(rating - 3), rounded."""
    multiplier = TYPE_MULTIPLIERS.get(accommodation_type, 1.0)
    return round_half_up(100 * multiplier * math.pow(1.3, rating - 3))


def rooms_needed(guests: int) -> int:
    # two guests per room
    return math.ceil(guests / 2)


def _describe(hotel_name: str, city: str, rating: float, accommodation_type: str) -> str:
    seed = hash_string(f"{hotel_name}-{city}")

    quality = QUALITY_ADJECTIVES[seed % len(QUALITY_ADJECTIVES)]
    located = LOCATION_ADJECTIVES[(seed + 1) % len(LOCATION_ADJECTIVES)]
    city_desc = CITY_DESCRIPTIONS[(seed + 2) % len(CITY_DESCRIPTIONS)]

    description = (
        f"{hotel_name} offers {quality} accommodations in {city}. "
        f"This {rating:.1f}-star {accommodation_type} is {located} in the {city_desc} city center."
    )

    if rating >= 4.5:
        description += " Guests consistently rate the property highly for its exceptional service and amenities."
    elif rating >= 4.0:
        description += " The property is well-regarded for its comfort and convenient location."
    else:
        description += " The property offers good value for money in a convenient setting."

    return description


class HotelService:

    def search_hotels(
        self,
        destination: str,
        check_in_date: DateLike,
        check_out_date: DateLike,
        guests: int = 2,
        accommodation_type: str = "hotel",
    ) -> List[HotelOption]:
        """
        Generate accommodation options for a stay.

        Args:
            destination: "City" or "City, Country"
            check_in_date: YYYY-MM-DD or date
            check_out_date: YYYY-MM-DD or date, must be after check-in
            guests: number of guests, rooms = ceil(guests / 2)
            accommodation_type: hotel / hostel / apartment / resort / villa / guesthouse

        Returns:
            8-15 options sorted by total price ascending, or [] when the
            stay is empty or anything fails.
        """
        try:
            check_in = parse_iso_date(check_in_date)
            check_out = parse_iso_date(check_out_date)
            nights = count_nights(check_in, check_out)

            if guests < 1 or nights < 1:
                logger.warning(
                    f"Skipping hotel search for {destination!r}: guests={guests}, nights={nights}"
                )
                return []

            parts = destination.split(",")
            city = parts[0].strip()
            country = parts[1].strip() if len(parts) > 1 else "Unknown"

            acc_type = (accommodation_type or "hotel").lower()
            seed = hash_string(f"{destination}-{check_in.isoformat()}-{check_out.isoformat()}")

            return self._generate_hotels(city, country, nights, guests, acc_type, seed)

        except Exception as e:
            logger.error(f"Error searching hotels for {destination!r}: {e}")
            return []

    def _generate_hotels(
        self,
        city: str,
        country: str,
        nights: int,
        guests: int,
        accommodation_type: str,
        seed: int,
    ) -> List[HotelOption]:
        prefixes = NAME_PREFIXES.get(accommodation_type, DEFAULT_PREFIXES)
        suffixes = NAME_SUFFIXES.get(accommodation_type, DEFAULT_SUFFIXES)
        room_types = ROOM_TYPES.get(accommodation_type, ROOM_TYPES["hotel"])
        rooms = rooms_needed(guests)

        # 8..15 options
        num_hotels = 8 + seed % 8

        hotels: List[HotelOption] = []
        for i in range(num_hotels):
            hotel_seed = seed + i * 100

            name = f"{prefixes[(hotel_seed + i * 3) % len(prefixes)]} {city} {suffixes[(hotel_seed + 7 + i) % len(suffixes)]}"

            # 3.0 .. 4.9 stars
            rating = round(3.0 + ((hotel_seed + i * 7) % 20) / 10, 1)
            review_count = 50 + (hotel_seed + i * 37) % 1000

            variability = 0.85 + ((hotel_seed + i * 13) % 30) / 100
            price_per_night = round_half_up(base_nightly_price(accommodation_type, rating) * variability)
            total_price = price_per_night * nights * rooms

            amenities = list(COMMON_AMENITIES)
            num_luxury = min(math.floor(rating - 2), len(LUXURY_AMENITIES))
            for j in range(num_luxury):
                amenities.append(LUXURY_AMENITIES[(hotel_seed + i + j * 11) % len(LUXURY_AMENITIES)])

            street = STREET_NAMES[(hotel_seed + i) % len(STREET_NAMES)]
            distance = 0.1 + (hotel_seed % 49) / 10

            hotels.append(HotelOption(
                id=f"hotel-{hotel_seed}",
                name=name,
                description=_describe(name, city, rating, accommodation_type),
                address=f"{100 + hotel_seed % 900} {street} St, {city}",
                city=city,
                country=country,
                price=total_price,
                price_per_night=price_per_night,
                rating=rating,
                review_count=review_count,
                amenities=amenities,
                room_type=room_types[(hotel_seed + i * 9) % len(room_types)],
                accommodation_type=accommodation_type,
                distance_from_center=f"{distance:.1f} km",
                cancellation_policy=CANCELLATION_POLICIES[(hotel_seed + i * 3) % len(CANCELLATION_POLICIES)],
                check_in=f"{14 + (hotel_seed + i) % 4}:00",
                check_out=f"{10 + hotel_seed % 3}:00",
                number_of_guests=guests,
                number_of_rooms=rooms,
                seed=hotel_seed,
            ))

        hotels.sort(key=lambda h: h.price)
        return hotels
