"""Seed script to populate the movie and theater catalogue for local use."""

import asyncio

from sqlalchemy import select

from marquee.database import AsyncSessionLocal
from marquee.models import Movie, Theater

MOVIES = [
    {
        "id": 1,
        "title": "Inception",
        "duration": 148,
        "genre": "Sci-Fi",
        "description": "A thief who steals corporate secrets through dream-sharing technology is given the inverse task of planting an idea.",
        "image_url": "https://example.com/posters/inception.jpg",
    },
    {
        "id": 2,
        "title": "Spirited Away",
        "duration": 125,
        "genre": "Animation",
        "description": "A young girl wanders into a world ruled by gods, witches and spirits.",
        "image_url": "https://example.com/posters/spirited-away.jpg",
    },
    {
        "id": 3,
        "title": "Heat",
        "duration": 170,
        "genre": "Crime",
        "description": None,
        "image_url": None,
    },
]

THEATERS = [
    {"id": 1, "name": "Grand", "location": "Downtown"},
    {"id": 2, "name": "Roxy", "location": "Riverside"},
]


async def seed_catalog() -> None:
    """Insert the sample movies and theaters, skipping ids already present."""
    async with AsyncSessionLocal() as session:
        for model, rows in ((Movie, MOVIES), (Theater, THEATERS)):
            for row in rows:
                result = await session.execute(select(model.id).where(model.id == row["id"]))
                if result.scalar_one_or_none() is not None:
                    print(f"{model.__name__} {row['id']} already exists, skipping")
                    continue

                session.add(model(**row))
                print(f"Added {model.__name__.lower()}: {row.get('title') or row.get('name')}")

        await session.commit()
        print("Catalogue seeding complete")


def main() -> None:
    asyncio.run(seed_catalog())


if __name__ == "__main__":
    main()
