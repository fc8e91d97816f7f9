from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base
from app.models.exercise_plan import PlanId, utc_now


class NutritionPlan(Base):
    __tablename__ = "nutrition_plans"

    id = Column(PlanId, primary_key=True, autoincrement=True)
    user_id = Column(
        String(255), ForeignKey("user_profiles.user_id", ondelete="CASCADE"), nullable=False
    )
    daily_calories_to_eat = Column(Float, nullable=False)
    breakfast_calories = Column(Float, nullable=False)
    lunch_calories = Column(Float, nullable=False)
    dinner_calories = Column(Float, nullable=False)
    pre_workout_calories = Column(Float)
    post_workout_calories = Column(Float)
    breakfast_foods = Column(JSON, nullable=False, default=list)
    lunch_foods = Column(JSON, nullable=False, default=list)
    dinner_foods = Column(JSON, nullable=False, default=list)
    pre_workout_foods = Column(JSON, nullable=False, default=list)
    post_workout_foods = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    user = relationship("UserProfile", back_populates="nutrition_plans")

    __table_args__ = (
        Index("ix_nutrition_plans_user_id_created_at", "user_id", "created_at"),
    )
