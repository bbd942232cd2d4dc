# storefront/utils/activity_helpers.py
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.activity_models import UserActivity

logger = logging.getLogger(__name__)


async def log_user_activity(db: AsyncSession, actor, message: str) -> UserActivity:
    """
    Stage an audit row for ``actor`` (a User, or None for anonymous calls).
    It is written by the caller's commit, together with the change it describes.
    """
    activity = UserActivity(
        user_id=actor.id if actor is not None else None,
        username=actor.email if actor is not None else "anonymous",
        message=message,
    )
    db.add(activity)
    logger.debug("Activity staged for %s: %s", activity.username, message)
    return activity
