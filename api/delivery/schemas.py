"""
Pydantic schemas for course-delivery endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CourseDeliveryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    course_title: str | None = Field(default=None, alias="courseTitle")
    note: str | None = None
