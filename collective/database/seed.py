"""Built-in collections used when nothing has been persisted yet."""

from datetime import datetime, timedelta, timezone


def seed_events():
    starts_at = datetime.now(timezone.utc) + timedelta(days=3)
    return [
        {
            "id": "1",
            "title": "Early Summer Forest Portraits",
            "date": starts_at.isoformat(timespec="milliseconds"),
            "location": "Olympic Forest Park, North Garden",
            "description": "Catch the first summer light, fresh and natural style.",
            "status": "UPCOMING",
            "requiredResources": [],
        }
    ]


def seed_resources():
    return [
        {
            "id": "101",
            "name": "Japanese school uniform (L)",
            "category": "COSTUME",
            "description": "Navy blazer with plaid skirt",
            "totalQuantity": 2,
            "availableQuantity": 2,
            "imageUrl": "https://picsum.photos/200/200?random=1",
            "location": "Wardrobe A",
            "itemCode": "C-001",
            "bookedDates": [],
        },
        {
            "id": "102",
            "name": "Vintage suitcase",
            "category": "PROP",
            "description": "Brown leather, suits retro shoots",
            "totalQuantity": 1,
            "availableQuantity": 1,
            "imageUrl": "https://picsum.photos/200/200?random=2",
            "location": "Prop room B2",
            "bookedDates": [],
        },
    ]


def seed_theme_plans():
    return [{"month": 1, "themes": []}]


def seed_empty():
    return []
