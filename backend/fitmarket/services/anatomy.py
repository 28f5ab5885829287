# fitmarket/services/anatomy.py
from __future__ import annotations

from fitmarket.schemas.anatomy import AnatomyImage, BodyPart
from fitmarket.storage import Bucket, ObjectStorage

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg")


def anatomy_images(storage: ObjectStorage) -> list[AnatomyImage]:
    return [
        AnatomyImage(
            id=name,
            name=name,
            url=storage.public_url(Bucket.anatomy, name),
            view="back" if "back" in name else "front",
        )
        for name in storage.list(Bucket.anatomy)
        if name.endswith(IMAGE_SUFFIXES)
    ]


def _ex(id, name, description, difficulty, *equipment):
    return {"id": id, "name": name, "description": description,
            "difficulty": difficulty, "equipment": list(equipment)}


# Static reference shown next to the anatomy images
BODY_PARTS = [
    BodyPart(
        id="chest", name="Chest",
        muscles=["Pectoralis Major", "Pectoralis Minor", "Anterior Deltoid"],
        description="Chest muscles drive pushing movements and stabilise the upper trunk.",
        exercises=[
            _ex("1", "Bench Press", "Basic lift for chest strength and mass.", "intermediate", "Barbell", "Bench", "Plates"),
            _ex("2", "Push-ups", "Bodyweight staple, good for beginners.", "beginner", "Bodyweight"),
            _ex("3", "Dumbbell Press", "Longer range of motion and unilateral work.", "intermediate", "Dumbbells", "Bench"),
        ],
    ),
    BodyPart(
        id="shoulders", name="Shoulders",
        muscles=["Anterior Deltoid", "Lateral Deltoid", "Posterior Deltoid"],
        description="The deltoids move and stabilise the shoulder in every direction.",
        exercises=[
            _ex("4", "Overhead Press", "Fundamental shoulder strength lift.", "intermediate", "Barbell"),
            _ex("5", "Lateral Raises", "Isolates the lateral deltoid for shoulder width.", "beginner", "Dumbbells"),
            _ex("6", "Reverse Flyes", "Strengthens the rear deltoid and improves posture.", "beginner", "Dumbbells"),
        ],
    ),
    BodyPart(
        id="arms", name="Arms",
        muscles=["Biceps", "Triceps", "Brachialis", "Brachioradialis"],
        description="Arm muscles take part in every pulling and pushing movement.",
        exercises=[
            _ex("7", "Biceps Curl", "Basic biceps builder.", "beginner", "Dumbbells"),
            _ex("8", "Triceps Extensions", "Isolates the triceps.", "beginner", "Dumbbells"),
            _ex("9", "Pull-ups", "Compound lift for biceps and back.", "advanced", "Pull-up bar"),
        ],
    ),
    BodyPart(
        id="back", name="Back",
        muscles=["Latissimus Dorsi", "Rhomboids", "Trapezius", "Erector Spinae"],
        description="Back muscles are key for posture and pulling movements.",
        exercises=[
            _ex("10", "Barbell Row", "Builds thickness through the mid back.", "intermediate", "Barbell"),
            _ex("11", "Lat Pulldown", "Targets the lats with adjustable load.", "beginner", "Cable machine"),
            _ex("12", "Deadlift", "Full posterior chain strength.", "advanced", "Barbell", "Plates"),
        ],
    ),
    BodyPart(
        id="legs", name="Legs",
        muscles=["Quadriceps", "Hamstrings", "Glutes", "Calves"],
        description="The largest muscle group, responsible for locomotion and power.",
        exercises=[
            _ex("13", "Squats", "The fundamental lower body lift.", "intermediate", "Barbell", "Rack"),
            _ex("14", "Lunges", "Unilateral strength and balance.", "beginner", "Dumbbells"),
            _ex("15", "Romanian Deadlift", "Hamstring and glute emphasis.", "intermediate", "Barbell"),
        ],
    ),
    BodyPart(
        id="core", name="Core",
        muscles=["Rectus Abdominis", "Obliques", "Transverse Abdominis"],
        description="The core stabilises the spine and transfers force between limbs.",
        exercises=[
            _ex("16", "Plank", "Isometric hold for the whole core.", "beginner", "Bodyweight"),
            _ex("17", "Crunches", "Classic rectus abdominis work.", "beginner", "Bodyweight"),
            _ex("18", "Side Plank", "Targets the obliques.", "intermediate", "Bodyweight"),
        ],
    ),
]
