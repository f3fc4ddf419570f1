"""
Course-delivery endpoint: email the learner, then log the delivery.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from core.access import require_api_key
from core.context import AppContext, get_context
from interactions import service as interaction_service
from verticals import catalog

from . import schemas

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/api/course-delivery")
async def course_delivery(
    request: schemas.CourseDeliveryRequest | None = None,
    ctx: AppContext = Depends(get_context),
) -> dict:
    if request is None:
        request = schemas.CourseDeliveryRequest()
    if not request.email or not request.course_title:
        raise HTTPException(status_code=400, detail="email and courseTitle are required")

    email_sent = await ctx.notifier.send_course_email(
        to=request.email,
        course_title=request.course_title,
        note=request.note,
    )

    # Logged whatever the email outcome was.
    result = await interaction_service.log_interaction(
        ctx.db,
        ctx.stats,
        user_id=request.email,
        message=f"Course delivery: {request.course_title}",
        response=request.note or "Access link delivered via SendGrid",
        business_type=catalog.COURSES_BUSINESS_TYPE,
    )
    if result.error is not None:
        raise HTTPException(status_code=500, detail=str(result.error))

    return {
        "success": True,
        "message": (
            "Course delivery logged and email sent"
            if email_sent
            else "Logged course delivery (email not configured)"
        ),
        "emailSent": email_sent,
        "data": result.data,
    }
