"""
Report routes for flagging users and posts
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user
from ..core.exceptions import ValidationError, NotFoundError
from ..core.logging import get_logger
from ..database import get_db
from ..models.post import Post
from ..models.report import Report
from ..models.user import User
from ..schemas.report import ReportCreate, ReportResponse

logger = get_logger(__name__)
router = APIRouter()


@router.post("", response_model=ReportResponse)
def create_report(
    report_data: ReportCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    File a report against a user and/or a post. Reports are append-only
    and start out as "pending".
    """
    if report_data.reported_user_id is not None:
        if report_data.reported_user_id == current_user.id:
            raise ValidationError("You cannot report yourself")
        reported_user = db.query(User).filter(User.id == report_data.reported_user_id).first()
        if not reported_user:
            raise NotFoundError("User not found")

    if report_data.reported_post_id is not None:
        post = db.query(Post).filter(Post.id == report_data.reported_post_id).first()
        if not post:
            raise NotFoundError("Post not found")
        if post.user_id == current_user.id:
            raise ValidationError("You cannot report your own listing")

    report = Report(
        reporter_id=current_user.id,
        reported_user_id=report_data.reported_user_id,
        reported_post_id=report_data.reported_post_id,
        reason=report_data.reason,
        description=report_data.description,
        created_by=current_user.username
    )
    db.add(report)
    db.commit()
    db.refresh(report)

    logger.info(
        f"User {current_user.id} filed report {report.id} "
        f"(user={report.reported_user_id}, post={report.reported_post_id}, reason={report.reason})"
    )
    return report
