import enum
import uuid

from sqlalchemy import Column, Float, Integer, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class GenderType(enum.Enum):
    male = "MALE"
    female = "FEMALE"
    other = "OTHER"


def generate_user_id() -> str:
    return str(uuid.uuid4())


class UserProfile(Base):
    __tablename__ = "user_profiles"

    user_id = Column(String(255), primary_key=True, index=True, default=generate_user_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String(20), nullable=False)
    height = Column(Float, nullable=False)
    curr_weight = Column(Float, nullable=False)
    desired_weight = Column(Float, nullable=False)
    target_days = Column(Integer, nullable=False)

    # Plans are removed explicitly by the profile service before the profile
    # row is deleted; the ORM cascade covers deletes issued through the session.
    exercise_plans = relationship(
        "ExercisePlan",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="ExercisePlan.created_at",
    )
    nutrition_plans = relationship(
        "NutritionPlan",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="NutritionPlan.created_at",
    )
