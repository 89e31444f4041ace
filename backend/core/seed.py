import logging
from datetime import date

from sqlalchemy import func
from sqlmodel import select

from core.database import session_scope
from models import Owner, Pet, PetType

logger = logging.getLogger(__name__)

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]

# first name, last name, address, city, telephone, [(pet name, birth date, type)]
OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023",
     [("Leo", date(2010, 9, 7), "cat")]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749",
     [("Basil", date(2012, 8, 6), "hamster")]),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763",
     [("Rosy", date(2011, 4, 17), "dog"), ("Jewel", date(2010, 3, 7), "dog")]),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198",
     [("Iggy", date(2010, 11, 30), "lizard")]),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765",
     [("George", date(2010, 1, 20), "snake")]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654",
     [("Samantha", date(2012, 9, 4), "cat"), ("Max", date(2012, 9, 4), "cat")]),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387",
     [("Lucky", date(2011, 8, 6), "bird")]),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683",
     [("Mulligan", date(2007, 2, 24), "dog")]),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435",
     [("Freddy", date(2010, 3, 9), "bird")]),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487",
     [("Lucky", date(2010, 6, 24), "dog"), ("Sly", date(2012, 6, 8), "cat")]),
]


async def seed_sample_data() -> bool:
    """Load the sample owners and pets unless the database already has owners."""
    async with session_scope() as session:
        result = await session.execute(select(func.count(Owner.id)))
        if result.scalar_one() > 0:
            logger.info("Owners already present, skipping sample data")
            return False

        types = {}
        for name in PET_TYPES:
            result = await session.execute(select(PetType).where(PetType.name == name))
            types[name] = result.scalars().first() or PetType(name=name)
            session.add(types[name])

        for first_name, last_name, address, city, telephone, pets in OWNERS:
            owner = Owner(
                first_name=first_name,
                last_name=last_name,
                address=address,
                city=city,
                telephone=telephone,
            )
            owner.pets = [
                Pet(name=pet_name, birth_date=birth_date, type=types[type_name])
                for pet_name, birth_date, type_name in pets
            ]
            session.add(owner)

    logger.info(f"Loaded {len(OWNERS)} sample owners")
    return True
