from sanitation.errors import ValidationError
from sanitation.model.zone.zone_response import PickupSlot, ZoneResponse

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
# Weekly pickup rotation shared by every zone; only the time window differs.
ROTATION = ("wet", "dry", "wet", "dry", "both", "wet")

ZONES = (
    (1, "Dharampeth Zone", ("Dharampeth", "Seminary Hills", "Law College Square", "Bajaj Nagar"), "6:00 AM - 9:00 AM"),
    (2, "Hanuman Nagar Zone", ("Hanuman Nagar", "Pratap Nagar", "Manewada", "Trimurti Nagar"), "7:00 AM - 10:00 AM"),
    (3, "Dhantoli Zone", ("Dhantoli", "Ramdaspeth", "Civil Lines", "Sadar"), "6:30 AM - 9:30 AM"),
    (4, "Nehru Nagar Zone", ("Nehru Nagar", "Gayatri Nagar", "Rahate Colony", "Wardhaman Nagar"), "7:30 AM - 10:30 AM"),
    (5, "Sataranjipura Zone", ("Sataranjipura", "Mominpura", "Gandhibagh", "Itwari"), "6:00 AM - 9:00 AM"),
    (6, "Lakadganj Zone", ("Lakadganj", "Pardi", "Satranjipura", "Tajbagh"), "6:30 AM - 9:30 AM"),
    (7, "Ashi Nagar Zone", ("Ashi Nagar", "Jaripatka", "Indora", "Kalamna"), "7:00 AM - 10:00 AM"),
    (8, "Mangalwari Zone", ("Mangalwari", "Mahal", "Punapur", "Sitabuldi"), "6:00 AM - 9:00 AM"),
    (9, "Gandhibagh Zone", ("Gandhibagh", "Cotton Market", "Maskasath", "Khamla"), "7:30 AM - 10:30 AM"),
    (10, "Laxmi Nagar Zone", ("Laxmi Nagar", "Mankapur", "Friends Colony", "Narendra Nagar"), "6:30 AM - 9:30 AM"),
)


def _normalize_day(day: str | None) -> str | None:
    if day is None or not day.strip() or day.strip().lower() == "all":
        return None
    for name in WEEKDAYS:
        if name.lower() == day.strip().lower():
            return name
    raise ValidationError(f"Unknown collection day: {day}")


def list_zones(day: str | None = None) -> list[ZoneResponse]:
    selected = _normalize_day(day)
    zones = []
    for zone_id, name, areas, window in ZONES:
        schedule = [
            PickupSlot(day=weekday, time=window, type=kind)
            for weekday, kind in zip(WEEKDAYS, ROTATION)
            if selected is None or weekday == selected
        ]
        zones.append(ZoneResponse(id=zone_id, name=name, areas=list(areas), schedule=schedule))
    return zones
