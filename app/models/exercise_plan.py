from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns
PlanId = BigInteger().with_variant(Integer, "sqlite")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExercisePlan(Base):
    __tablename__ = "exercise_plans"

    id = Column(PlanId, primary_key=True, autoincrement=True)
    user_id = Column(
        String(255), ForeignKey("user_profiles.user_id", ondelete="CASCADE"), nullable=False
    )
    goal = Column(String(20), nullable=False)
    daily_calorie_change = Column(Float, nullable=False)  # negative = deficit, positive = surplus
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    user = relationship("UserProfile", back_populates="exercise_plans")
    exercise_sets = relationship(
        "ExerciseSet",
        back_populates="exercise_plan",
        cascade="all, delete-orphan",
        order_by="ExerciseSet.id",
    )

    __table_args__ = (
        Index("ix_exercise_plans_user_id_created_at", "user_id", "created_at"),
    )


class ExerciseSet(Base):
    __tablename__ = "exercise_sets"

    id = Column(PlanId, primary_key=True, autoincrement=True)
    exercise_plan_id = Column(
        PlanId, ForeignKey("exercise_plans.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    equipment = Column(String(100))
    duration_minutes = Column(Integer, nullable=False)  # per session
    sessions_per_week = Column(Integer, nullable=False)

    exercise_plan = relationship("ExercisePlan", back_populates="exercise_sets")
