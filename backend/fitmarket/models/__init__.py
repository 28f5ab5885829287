from fitmarket.models.user import User, UserRole
from fitmarket.models.workout import WorkoutContent
from fitmarket.models.nutrition_plan import NutritionPlan
from fitmarket.models.advice import Advice
from fitmarket.models.purchase import Purchase, ContentType
from fitmarket.models.revoked_token import RevokedToken

__all__ = [
    "User",
    "UserRole",
    "WorkoutContent",
    "NutritionPlan",
    "Advice",
    "Purchase",
    "ContentType",
    "RevokedToken",
]
