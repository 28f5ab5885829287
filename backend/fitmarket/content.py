# fitmarket/content.py
"""Display labels, advice categories, prices and URL checks shared by the catalogs."""
from __future__ import annotations

import re

from fitmarket.models import ContentType, UserRole

YOUTUBE_URL_RE = re.compile(r"^(https?://)?(www\.)?(youtube\.com|youtu\.be)/.+")

ROLE_LABELS = {
    UserRole.client: "Client",
    UserRole.trainer: "Trainer",
    UserRole.nutritionist: "Nutritionist",
}

# purchases list / purchase form wording
PLAN_TYPE_LABELS = {
    ContentType.workout: "Workout Plan",
    ContentType.nutrition: "Nutrition Plan",
}

# dashboard wording
CONTENT_TYPE_LABELS = {
    ContentType.workout: "Workout",
    ContentType.nutrition: "Nutrition",
}

PLAN_NOT_FOUND = "Plan not found"
UNKNOWN_AUTHOR = "Unknown author"

PRICES = {
    ContentType.workout: 29.99,
    ContentType.nutrition: 24.99,
}
DEFAULT_PRICE = 19.99

COMMON_CATEGORIES = {
    "general": "General",
    "motivation": "Motivation",
    "habits": "Healthy Habits",
}
TRAINER_CATEGORIES = {
    "exercise": "Exercise",
    "technique": "Technique",
    "recovery": "Recovery",
    "strength": "Strength Training",
    "cardio": "Cardio",
}
NUTRITIONIST_CATEGORIES = {
    "nutrition": "Nutrition",
    "diet": "Diet",
    "supplements": "Supplements",
    "hydration": "Hydration",
    "weight_loss": "Weight Loss",
    "muscle_gain": "Muscle Gain",
}
CATEGORY_LABELS = {**COMMON_CATEGORIES, **TRAINER_CATEGORIES, **NUTRITIONIST_CATEGORIES}


def is_youtube_url(url: str) -> bool:
    return bool(YOUTUBE_URL_RE.match(url))


def video_source(url: str) -> str:
    """Badge shown next to a workout: "youtube" for YouTube links, else "video"."""
    return "youtube" if "youtube.com" in url or "youtu.be" in url else "video"


def role_label(role: str) -> str:
    try:
        return ROLE_LABELS[UserRole(role)]
    except ValueError:
        return role


def plan_type_label(content_type: str) -> str:
    try:
        return PLAN_TYPE_LABELS[ContentType(content_type)]
    except ValueError:
        return content_type


def content_type_label(content_type: str) -> str:
    try:
        return CONTENT_TYPE_LABELS[ContentType(content_type)]
    except ValueError:
        return content_type


def categories_for_role(role: str) -> dict[str, str]:
    if role == UserRole.trainer:
        return {**COMMON_CATEGORIES, **TRAINER_CATEGORIES}
    if role == UserRole.nutritionist:
        return {**COMMON_CATEGORIES, **NUTRITIONIST_CATEGORIES}
    return dict(COMMON_CATEGORIES)


def category_label(category: str | None) -> str:
    if not category:
        return "General"
    return CATEGORY_LABELS.get(category, category)


def price_for(content_type: str) -> float:
    try:
        return PRICES[ContentType(content_type)]
    except ValueError:
        return DEFAULT_PRICE


def initials(name: str) -> str:
    return "".join(word[0] for word in name.split() if word)[:2].upper()
