"""Search history repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catbreeds.models import SearchHistory
from catbreeds.repositories.base import BaseRepository


class SearchHistoryRepository(BaseRepository[SearchHistory]):
    """Repository for SearchHistory model."""

    def __init__(self, session: AsyncSession):
        super().__init__(SearchHistory, session)

    async def promote(self, query: str) -> SearchHistory:
        """Drop any earlier occurrence of the query and append it as newest."""
        await self.session.execute(delete(SearchHistory).where(SearchHistory.query == query))
        return await self.create({"query": query})

    async def prune(self, keep: int) -> int:
        """Delete all but the newest `keep` entries."""
        newest = select(SearchHistory.id).order_by(SearchHistory.id.desc()).limit(keep)
        result = await self.session.execute(
            delete(SearchHistory)
            .where(SearchHistory.id.not_in(newest))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def recent(self, limit: int) -> list[str]:
        """Newest queries first."""
        result = await self.session.execute(
            select(SearchHistory.query).order_by(SearchHistory.id.desc()).limit(limit)
        )
        return list(result.scalars().all())
