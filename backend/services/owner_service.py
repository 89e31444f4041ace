import logging
from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select

from models import Owner, OwnerBase, OwnerPage, Pet

logger = logging.getLogger(__name__)

class OwnerService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_owner_by_id(self, owner_id: int) -> Owner:
        result = await self.session.execute(
            select(Owner)
            .where(Owner.id == owner_id)
            .options(selectinload(Owner.pets).selectinload(Pet.type))
        )
        owner = result.scalars().first()
        if not owner:
            raise HTTPException(status_code=404, detail="Owner not found")
        return owner

    async def find_by_last_name(self, last_name: str, page: int = 1, per_page: int = 5) -> OwnerPage:
        condition = Owner.last_name.startswith(last_name, autoescape=True)

        count_query = select(func.count(Owner.id)).where(condition)
        total_result = await self.session.execute(count_query)
        total = total_result.scalar_one()

        query = (
            select(Owner)
            .where(condition)
            .options(selectinload(Owner.pets).selectinload(Pet.type))
            .order_by(Owner.last_name.asc(), Owner.first_name.asc(), Owner.id.asc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.session.execute(query)
        owners = result.scalars().all()

        total_pages = (total + per_page - 1) // per_page
        logger.info(f"Owners search lastName={last_name!r} page={page}: {total} total, {len(owners)} on page")

        return OwnerPage(
            content=list(owners),
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
        )

    async def save(self, owner: Owner) -> Owner:
        """Insert a new owner or update the stored one with the same id."""
        if owner.id is None:
            target = owner
            self.session.add(target)
        else:
            target = await self.session.get(Owner, owner.id)
            if not target:
                raise HTTPException(status_code=404, detail="Owner not found")
            for field in OwnerBase.model_fields:
                setattr(target, field, getattr(owner, field))

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error saving owner {owner.id}: {str(e)}")
            raise

        await self.session.refresh(target)
        return target
