from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from classpoints.db.session import get_db
from classpoints.schemas.ranking import RankingItem
from classpoints.services.ranking import get_ranking

router = APIRouter(prefix="/ranking", tags=["ranking"])


@router.get("", response_model=list[RankingItem])
def ranking(time_range: str = Query(default="all"), db: Session = Depends(get_db)):
    return get_ranking(db, time_range)
