"""
GetUs.Fit API - Profile Routes.

Read and replace the caller's free-form profile document.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.plan import OkResponse
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.profiles import ProfileStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
def get_profile(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> Optional[Dict[str, Any]]:
    """Return the caller's profile, or null when none has been saved."""
    scope = enforce(authorize(caller, Operation.READ_PROFILE))
    return ProfileStore(db).get(scope.owner_id)


@router.put("", response_model=OkResponse, response_model_exclude_none=True)
def update_profile(
    profile: Dict[str, Any] = Body(...),
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """Create or replace the caller's profile; the body is stored verbatim."""
    scope = enforce(authorize(caller, Operation.UPDATE_PROFILE))
    ProfileStore(db).upsert(scope.owner_id, profile)
    logger.info(f"Profile updated for account {scope.owner_id}")
    return OkResponse()
