"""Example catalog written to an empty store on first start."""

from __future__ import annotations

from datetime import datetime, timezone

from .models import ContentItem, ContentType, Country, Genre

_SAMPLE_VIDEOS = "http://commondatastorage.googleapis.com/gtv-videos-bucket/sample"

SEED_ENTRIES: tuple[dict, ...] = (
    {
        "id": "1",
        "title": "Stranger Things",
        "description": (
            "When a young boy vanishes, a small town uncovers a mystery involving secret experiments, "
            "terrifying supernatural forces, and one strange little girl."
        ),
        "poster_path": "https://picsum.photos/seed/stranger/300/450",
        "video_path": f"{_SAMPLE_VIDEOS}/BigBuckBunny.mp4",
        "content_type": ContentType.SERIES,
        "country": Country.AMERICA,
        "genre": Genre.SCI_FI,
        "year": 2016,
        "is_popular": True,
    },
    {
        "id": "2",
        "title": "Squid Game",
        "description": (
            "Hundreds of cash-strapped players accept a strange invitation to compete in children's games. "
            "Inside, a tempting prize awaits with deadly high stakes."
        ),
        "poster_path": "https://picsum.photos/seed/squid/300/450",
        "video_path": f"{_SAMPLE_VIDEOS}/ElephantsDream.mp4",
        "content_type": ContentType.SERIES,
        "country": Country.KOREA,
        "genre": Genre.THRILLER,
        "year": 2021,
        "is_popular": True,
    },
    {
        "id": "3",
        "title": "RRR",
        "description": (
            "A fearless warrior on a perilous mission comes face to face with a steely cop serving the "
            "British forces in this epic saga set in pre-independent India."
        ),
        "poster_path": "https://picsum.photos/seed/rrr/300/450",
        "video_path": f"{_SAMPLE_VIDEOS}/ForBiggerBlazes.mp4",
        "content_type": ContentType.SINGLE,
        "country": Country.INDIA,
        "genre": Genre.ACTION,
        "year": 2022,
        "is_popular": True,
    },
    {
        "id": "4",
        "title": "Crouching Tiger",
        "description": (
            "A young Chinese warrior steals a sword from a famed swordsman and then escapes into a world of "
            "romantic adventure with a mysterious man in the frontier of the nation."
        ),
        "poster_path": "https://picsum.photos/seed/tiger/300/450",
        "video_path": f"{_SAMPLE_VIDEOS}/TearsOfSteel.mp4",
        "content_type": ContentType.SINGLE,
        "country": Country.CHINA,
        "genre": Genre.ACTION,
        "year": 2000,
        "is_popular": False,
    },
    {
        "id": "5",
        "title": "The Office",
        "description": (
            "A mockumentary on a group of typical office workers, where the workday consists of ego clashes, "
            "inappropriate behavior, and tedium."
        ),
        "poster_path": "https://picsum.photos/seed/office/300/450",
        "video_path": f"{_SAMPLE_VIDEOS}/BigBuckBunny.mp4",
        "content_type": ContentType.SERIES,
        "country": Country.AMERICA,
        "genre": Genre.COMEDY,
        "year": 2005,
        "is_popular": True,
    },
    {
        "id": "6",
        "title": "The Protector",
        "description": (
            "Discovering his ties to a secret ancient order, a young man living in modern Istanbul embarks "
            "on a quest to save the city from an immortal enemy."
        ),
        "poster_path": "https://picsum.photos/seed/protector/300/450",
        "video_path": f"{_SAMPLE_VIDEOS}/SubaruOutbackOnStreetAndDirt.mp4",
        "content_type": ContentType.SERIES,
        "country": Country.TURKEY,
        "genre": Genre.ACTION,
        "year": 2018,
        "is_popular": True,
    },
)


def seed_items(now: datetime | None = None) -> list[ContentItem]:
    """Build the example entries, all stamped with the same creation time."""
    stamp = (now or datetime.now(timezone.utc)).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return [ContentItem(**entry, created_at=stamp) for entry in SEED_ENTRIES]
