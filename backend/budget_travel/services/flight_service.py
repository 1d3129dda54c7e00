# backend/budget_travel/services/flight_service.py

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from budget_travel.core.config_loader import settings
from budget_travel.core.logger import logger
from budget_travel.models.inventory_models import Flight, Layover
from budget_travel.utils.hashing import hash_string, round_half_up
from budget_travel.utils.time_utils import DateLike, parse_iso_date


AIRLINES = [
    "Delta Airlines",
    "United Airlines",
    "American Airlines",
    "British Airways",
    "Lufthansa",
    "Air France",
    "Emirates",
    "Singapore Airlines",
    "Qatar Airways",
    "Turkish Airlines",
]

HUB_AIRPORTS = [
    "ATL", "ORD", "DFW", "DEN", "LAX",   # US
    "LHR", "CDG", "AMS", "FRA", "MAD",   # Europe
    "DXB", "DOH", "AUH",                 # Middle East
    "HKG", "SIN", "ICN", "NRT", "PEK",   # Asia
]


def airport_code(city: str) -> str:
    """First three letters of the city, padded with a hash-picked letter for short names."""
    if not city:
        return "XXX"

    code = city[0].upper()
    code += city[min(1, len(city) - 1)].upper()
    code += city[min(2, len(city) - 1)].upper()

    if len(city) < 3:
        code += chr(65 + hash_string(city) % 26)
    return code


def base_flight_duration(origin: str, destination: str) -> int:
    """3 to 14 hours, fixed per city pair."""
    return hash_string(f"{origin}-{destination}") % 12 + 3


def base_flight_price(origin: str, destination: str, duration_hours: int) -> int:
    """$150 + $70/hour, shifted by -30..+29 per city pair."""
    variability = hash_string(f"{origin}-{destination}") % 60 - 30
    return 150 + duration_hours * 70 + variability


class FlightService:
    def __init__(self, origin_city: Optional[str] = None, origin_airport: Optional[str] = None):
        self.origin_city = origin_city or settings.default_origin_city
        self.origin_airport = origin_airport or settings.default_origin_airport

    def search_flights(
        self,
        destination: str,
        depart_date: DateLike,
        return_date: DateLike,
        passengers: int = 1,
        origin_city: Optional[str] = None,
        origin_airport: Optional[str] = None,
    ) -> List[Flight]:
        """
        Generate outbound and return flights between the origin and the
        destination city. The origin defaults to the one this service was
        built with.

        Args:
            destination: "City" or "City, Country"
            depart_date: outbound date (YYYY-MM-DD or date)
            return_date: return date (YYYY-MM-DD or date)
            passengers: prices scale linearly with this
            origin_city: departure city for the outbound leg
            origin_airport: its airport code, derived from the city when omitted

        Returns:
            Flights sorted by price ascending. Empty list on bad input or
            any internal failure.
        """
        try:
            if passengers < 1:
                logger.warning(f"Skipping flight search: passengers={passengers}")
                return []

            outbound_day = parse_iso_date(depart_date)
            return_day = parse_iso_date(return_date)

            if origin_city:
                origin_city = origin_city.split(",")[0].strip()
                origin_airport = origin_airport or airport_code(origin_city)
            else:
                origin_city = self.origin_city
                origin_airport = origin_airport or self.origin_airport

            destination_city = destination.split(",")[0].strip()
            destination_airport = airport_code(destination_city)

            outbound = self._generate_flights(
                origin_city,
                origin_airport,
                destination_city,
                destination_airport,
                outbound_day,
                passengers,
                direction="outbound",
            )
            inbound = self._generate_flights(
                destination_city,
                destination_airport,
                origin_city,
                origin_airport,
                return_day,
                passengers,
                direction="return",
            )

            flights = outbound + inbound
            flights.sort(key=lambda f: f.price)
            return flights

        except Exception as e:
            logger.error(f"Error searching flights for {destination!r}: {e}")
            return []

    def _generate_flights(
        self,
        origin_city: str,
        origin_airport: str,
        destination_city: str,
        destination_airport: str,
        departure_day: date,
        passengers: int,
        direction: str,
    ) -> List[Flight]:
        departure_midnight = datetime.combine(departure_day, time())
        seed = hash_string(
            f"{origin_city}-{destination_city}-{departure_midnight.isoformat()}"
        )

        # 3..7 flights per leg
        num_flights = 3 + seed % 5
        base_duration = base_flight_duration(origin_city, destination_city)

        flights: List[Flight] = []
        for i in range(num_flights):
            airline = AIRLINES[(seed + i) % len(AIRLINES)]
            flight_number = f"{airline[:2].upper()}{100 + (seed + i) % 900}"

            # 06:00 .. 21:55 in 5 minute steps
            departure_hour = 6 + (seed + i * 3) % 16
            departure_minute = ((seed + i * 7) % 12) * 5
            departure_time = departure_midnight.replace(
                hour=departure_hour, minute=departure_minute
            )

            duration_hours = max(1, base_duration + (seed + i) % 5 - 2)
            duration_minutes = ((seed + i * 13) % 12) * 5
            arrival_time = departure_time + timedelta(
                hours=duration_hours, minutes=duration_minutes
            )

            base_price = base_flight_price(origin_city, destination_city, duration_hours)
            price_multiplier = 0.85 + ((seed + i * 17) % 30) / 100
            price = round_half_up(base_price * price_multiplier * passengers)

            stops = 0 if i == 0 else min(2, (seed + i) % 3)
            layovers = None
            if stops > 0:
                layovers = []
                for j in range(stops):
                    layover_minutes = 45 + (seed + i * j) % 135
                    layovers.append(Layover(
                        airport=HUB_AIRPORTS[(seed + i + j * 7) % len(HUB_AIRPORTS)],
                        duration=f"{layover_minutes // 60}h {layover_minutes % 60}m",
                    ))

            if i == 0:
                cabin_class = "Business"
            elif i == 1:
                cabin_class = "Premium Economy"
            else:
                cabin_class = "Economy"

            flights.append(Flight(
                id=f"flight-{origin_airport}-{destination_airport}-{i}",
                airline=airline,
                flight_number=flight_number,
                departure_airport=origin_airport,
                departure_city=origin_city,
                arrival_airport=destination_airport,
                arrival_city=destination_city,
                departure_time=departure_time,
                arrival_time=arrival_time,
                duration=f"{duration_hours}h {duration_minutes}m",
                stops=stops,
                price=price,
                cabin_class=cabin_class,
                direction=direction,
                layovers=layovers,
                seed=seed + i,
            ))

        flights.sort(key=lambda f: f.price)
        return flights
