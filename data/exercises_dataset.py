EXERCISES_DATA = [
    # Chest
    {"id": "bench_press", "name": "Barbell Bench Press", "muscles": ["chest", "triceps", "shoulders"], "equipment": ["barbell", "bench"], "movement": "compound", "cues": ["Retract scapulae", "Bar to lower chest"]},
    {"id": "db_press", "name": "Dumbbell Bench Press", "muscles": ["chest", "triceps"], "equipment": ["dumbbell", "bench"], "movement": "compound", "cues": ["Elbows at 45 degrees"]},
    {"id": "incline_db_press", "name": "Incline Dumbbell Press", "muscles": ["upper_chest", "chest", "shoulders"], "equipment": ["dumbbell", "bench"], "movement": "compound", "cues": ["Bench at 30 degrees"]},
    {"id": "pushup", "name": "Push-Up", "muscles": ["chest", "triceps", "core"], "equipment": ["bodyweight"], "movement": "compound", "cues": ["Body in one line"]},
    {"id": "decline_pushup", "name": "Feet-Elevated Push-Up", "muscles": ["upper_chest", "chest", "triceps"], "equipment": ["bodyweight"], "movement": "compound", "cues": ["Feet on a box"]},
    {"id": "band_chest_press", "name": "Band Chest Press", "muscles": ["chest", "triceps"], "equipment": ["band"], "movement": "compound", "cues": ["Anchor band behind you"]},
    {"id": "cable_fly", "name": "Cable Fly", "muscles": ["chest"], "equipment": ["cable"], "movement": "isolation", "cues": ["Soft elbows"]},
    # Back
    {"id": "barbell_row", "name": "Barbell Row", "muscles": ["back", "lats", "rear_delts", "biceps"], "equipment": ["barbell"], "movement": "compound", "cues": ["Torso near 45 degrees"]},
    {"id": "db_row", "name": "One-Arm Dumbbell Row", "muscles": ["back", "lats", "biceps"], "equipment": ["dumbbell", "bench"], "movement": "compound", "cues": ["Pull elbow to hip"]},
    {"id": "lat_pulldown", "name": "Lat Pulldown", "muscles": ["lats", "back", "biceps"], "equipment": ["cable", "machine"], "movement": "compound", "cues": ["Chest up"]},
    {"id": "pullup", "name": "Pull-Up", "muscles": ["lats", "back", "biceps"], "equipment": ["bodyweight", "bar"], "movement": "compound", "cues": ["Full hang to chin over bar"]},
    {"id": "inverted_row", "name": "Inverted Row", "muscles": ["back", "rear_delts", "biceps"], "equipment": ["bodyweight", "bar"], "movement": "compound", "cues": ["Squeeze shoulder blades"]},
    {"id": "band_row", "name": "Band Seated Row", "muscles": ["back", "lats", "biceps"], "equipment": ["band"], "movement": "compound", "cues": ["Tall posture"]},
    {"id": "face_pull", "name": "Face Pull", "muscles": ["rear_delts", "back"], "equipment": ["cable", "band"], "movement": "isolation", "cues": ["Pull to forehead"]},
    {"id": "db_rear_delt_fly", "name": "Dumbbell Rear Delt Fly", "muscles": ["rear_delts"], "equipment": ["dumbbell"], "movement": "isolation", "cues": ["Lead with elbows"]},
    # Legs
    {"id": "back_squat", "name": "Back Squat", "muscles": ["quads", "glutes", "core"], "equipment": ["barbell", "rack"], "movement": "compound", "cues": ["Brace before descent"]},
    {"id": "leg_press", "name": "Leg Press", "muscles": ["quads", "glutes"], "equipment": ["machine"], "movement": "compound", "cues": ["Knees track toes"]},
    {"id": "goblet_squat", "name": "Goblet Squat", "muscles": ["quads", "glutes"], "equipment": ["dumbbell"], "movement": "compound", "cues": ["Elbows inside knees"]},
    {"id": "split_squat", "name": "Bulgarian Split Squat", "muscles": ["quads", "glutes"], "equipment": ["dumbbell", "bodyweight", "bench"], "movement": "compound", "cues": ["Front shin vertical"]},
    {"id": "band_squat", "name": "Banded Squat", "muscles": ["quads", "glutes"], "equipment": ["band"], "movement": "compound", "cues": ["Stand on band"]},
    {"id": "wall_sit", "name": "Wall Sit", "muscles": ["quads"], "equipment": ["bodyweight"], "movement": "isolation", "cues": ["Thighs parallel"]},
    {"id": "leg_extension", "name": "Leg Extension", "muscles": ["quads"], "equipment": ["machine"], "movement": "isolation", "cues": ["Pause at top"]},
    {"id": "rdl", "name": "Romanian Deadlift", "muscles": ["hams", "glutes", "back"], "equipment": ["barbell"], "movement": "compound", "cues": ["Hips back, neutral spine"]},
    {"id": "db_rdl", "name": "Dumbbell Romanian Deadlift", "muscles": ["hams", "glutes"], "equipment": ["dumbbell"], "movement": "compound", "cues": ["Dumbbells close to legs"]},
    {"id": "nordic_curl", "name": "Nordic Curl", "muscles": ["hams"], "equipment": ["bodyweight"], "movement": "isolation", "cues": ["Control the descent"]},
    {"id": "leg_curl", "name": "Lying Leg Curl", "muscles": ["hams"], "equipment": ["machine"], "movement": "isolation", "cues": ["Hips pressed down"]},
    {"id": "band_leg_curl", "name": "Band Leg Curl", "muscles": ["hams"], "equipment": ["band"], "movement": "isolation", "cues": ["Slow eccentric"]},
    {"id": "hip_thrust", "name": "Barbell Hip Thrust", "muscles": ["glutes", "hams"], "equipment": ["barbell", "bench"], "movement": "compound", "cues": ["Chin tucked"]},
    {"id": "glute_bridge", "name": "Glute Bridge", "muscles": ["glutes", "hams"], "equipment": ["bodyweight"], "movement": "compound", "cues": ["Drive through heels"]},
    {"id": "standing_calf_raises", "name": "Standing Calf Raises", "muscles": ["calves"], "equipment": ["machine", "dumbbell", "bodyweight"], "movement": "isolation", "cues": ["Full stretch at bottom"]},
    {"id": "seated_calf_press", "name": "Seated Calf Press", "muscles": ["calves"], "equipment": ["machine"], "movement": "isolation", "cues": ["Pause at top"]},
    {"id": "band_calf_press", "name": "Band Calf Press", "muscles": ["calves"], "equipment": ["band"], "movement": "isolation", "cues": ["Band around forefoot"]},
    # Shoulders
    {"id": "ohp", "name": "Overhead Press", "muscles": ["shoulders", "triceps"], "equipment": ["barbell"], "movement": "compound", "cues": ["Squeeze glutes"]},
    {"id": "db_ohp", "name": "Dumbbell Shoulder Press", "muscles": ["shoulders", "triceps"], "equipment": ["dumbbell"], "movement": "compound", "cues": ["Press slightly in front"]},
    {"id": "pike_pushup", "name": "Pike Push-Up", "muscles": ["shoulders", "triceps"], "equipment": ["bodyweight"], "movement": "compound", "cues": ["Hips high"]},
    {"id": "band_ohp", "name": "Band Overhead Press", "muscles": ["shoulders", "triceps"], "equipment": ["band"], "movement": "compound", "cues": ["Stand on band"]},
    {"id": "lateral_raise", "name": "Lateral Raise", "muscles": ["shoulders"], "equipment": ["dumbbell", "cable"], "movement": "isolation", "cues": ["Lead with elbows"]},
    # Arms
    {"id": "close_grip_bench", "name": "Close-Grip Bench Press", "muscles": ["triceps", "chest"], "equipment": ["barbell", "bench"], "movement": "compound", "cues": ["Elbows tucked"]},
    {"id": "dips", "name": "Parallel Bar Dips", "muscles": ["triceps", "chest"], "equipment": ["bodyweight", "bar"], "movement": "compound", "cues": ["Slight forward lean"]},
    {"id": "skullcrusher", "name": "EZ-Bar Skullcrusher", "muscles": ["triceps"], "equipment": ["barbell"], "movement": "isolation", "cues": ["Elbows fixed"]},
    {"id": "triceps_pushdown", "name": "Cable Triceps Pushdown", "muscles": ["triceps"], "equipment": ["cable", "band"], "movement": "isolation", "cues": ["Lock elbows at sides"]},
    {"id": "chin_up", "name": "Chin-Up", "muscles": ["biceps", "lats"], "equipment": ["bodyweight", "bar"], "movement": "compound", "cues": ["Supinated grip"]},
    {"id": "barbell_curl", "name": "Barbell Curl", "muscles": ["biceps"], "equipment": ["barbell"], "movement": "isolation", "cues": ["No swinging"]},
    {"id": "db_curl", "name": "Dumbbell Curl", "muscles": ["biceps"], "equipment": ["dumbbell"], "movement": "isolation", "cues": ["Supinate at top"]},
    {"id": "band_curl", "name": "Band Curl", "muscles": ["biceps"], "equipment": ["band"], "movement": "isolation", "cues": ["Elbows still"]},
    # Core
    {"id": "plank", "name": "Plank", "muscles": ["core"], "equipment": ["bodyweight"], "movement": "isolation", "cues": ["Ribs down"]},
    {"id": "hanging_leg_raise", "name": "Hanging Leg Raise", "muscles": ["core"], "equipment": ["bodyweight", "bar"], "movement": "isolation", "cues": ["Posterior pelvic tilt"]},
    {"id": "cable_crunch", "name": "Cable Crunch", "muscles": ["core"], "equipment": ["cable"], "movement": "isolation", "cues": ["Round the spine"]},
]
