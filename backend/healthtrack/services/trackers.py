"""
Tracker categories served by the API.
"""
from healthtrack.models.workout import WorkoutEntry
from healthtrack.models.calorie import CalorieEntry, CalorieTotal
from healthtrack.models.water import WaterTracker
from healthtrack.models.body_profile import BodyProfile
from healthtrack.services.tracked_resource import TrackedResource, TrackedResourceService

workouts = TrackedResourceService(TrackedResource(
    name="workout",
    model=WorkoutEntry,
    fields=("tracker_date", "tracker_workout", "tracker_duration"),
))

calorie_entries = TrackedResourceService(TrackedResource(
    name="calorie entry",
    model=CalorieEntry,
    fields=("food_input", "cal_input", "price_input", "fat_input", "carbs_input", "protein_input"),
))

calorie_totals = TrackedResourceService(TrackedResource(
    name="calorie total",
    model=CalorieTotal,
    fields=("cal_total", "price_total", "carbs_total", "protein_total", "fat_total"),
    singleton=True,
    reset_values={
        "cal_total": 0,
        "price_total": 0,
        "carbs_total": 0,
        "protein_total": 0,
        "fat_total": 0,
    },
))

water = TrackedResourceService(TrackedResource(
    name="water tracker",
    model=WaterTracker,
    fields=("water_target", "water_consumed"),
    singleton=True,
    accumulate=frozenset({"water_consumed"}),
    reset_values={"water_target": 0, "water_consumed": 0},
))

body_profile = TrackedResourceService(TrackedResource(
    name="bmr/bmi profile",
    model=BodyProfile,
    fields=(
        "bmi", "bmr", "water_intake", "weight_gain", "weight_loss", "tdee",
        "macro_ratio", "protein_macro_ratio", "fat_macro_ratio", "carbs_macro_ratio",
    ),
    singleton=True,
))
