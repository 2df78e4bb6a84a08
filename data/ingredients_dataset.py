INGREDIENTS_DATA = [
    # Low budget
    {"id": "eggs_low", "name": "Eggs", "category": "protein", "budget_tier": "low", "macro_per_100g": {"kcal": 143, "p": 12.6, "c": 0.7, "f": 9.5}, "portion": {"unit": "piece", "grams_per_piece": 50, "min_pieces": 1, "max_pieces": 4, "step_pieces": 1}},
    {"id": "chicken_thigh_low", "name": "Chicken Thigh", "category": "protein", "budget_tier": "low", "macro_per_100g": {"kcal": 177, "p": 24.0, "c": 0.0, "f": 8.9}, "portion": {"typical_g": 150, "min_g": 80, "max_g": 250, "step_g": 10}},
    {"id": "canned_tuna_low", "name": "Canned Tuna", "category": "protein", "budget_tier": "low", "macro_per_100g": {"kcal": 116, "p": 25.5, "c": 0.0, "f": 0.8}, "typical_portion_g": 120},
    {"id": "lentils_low", "name": "Cooked Lentils", "category": "protein", "budget_tier": "low", "macro_per_100g": {"kcal": 116, "p": 9.0, "c": 20.0, "f": 0.4}, "typical_portion_g": 200},
    {"id": "white_rice_low", "name": "White Rice", "category": "carb", "budget_tier": "low", "macro_per_100g": {"kcal": 130, "p": 2.7, "c": 28.2, "f": 0.3}, "portion": {"typical_g": 180, "min_g": 80, "max_g": 300, "step_g": 10}},
    {"id": "oats_low", "name": "Rolled Oats", "category": "carb", "budget_tier": "low", "macro_per_100g": {"kcal": 379, "p": 13.2, "c": 67.7, "f": 6.5}, "portion": {"typical_g": 60, "min_g": 30, "max_g": 120, "step_g": 5}},
    {"id": "potato_low", "name": "Boiled Potato", "category": "carb", "budget_tier": "low", "macro_per_100g": {"kcal": 87, "p": 1.9, "c": 20.1, "f": 0.1}, "typical_portion_g": 250},
    {"id": "cabbage_low", "name": "Cabbage", "category": "veg", "budget_tier": "low", "macro_per_100g": {"kcal": 25, "p": 1.3, "c": 5.8, "f": 0.1}, "typical_portion_g": 100},
    {"id": "carrot_low", "name": "Carrot", "category": "veg", "budget_tier": "low", "macro_per_100g": {"kcal": 41, "p": 0.9, "c": 9.6, "f": 0.2}, "typical_portion_g": 100},
    {"id": "frozen_peas_low", "name": "Frozen Peas", "category": "veg", "budget_tier": "low", "macro_per_100g": {"kcal": 81, "p": 5.4, "c": 14.5, "f": 0.4}, "typical_portion_g": 80},
    {"id": "vegetable_oil_low", "name": "Vegetable Oil", "category": "fat", "budget_tier": "low", "macro_per_100g": {"kcal": 884, "p": 0.0, "c": 0.0, "f": 100.0}, "portion": {"typical_g": 10, "min_g": 5, "max_g": 20, "step_g": 5}},
    {"id": "peanut_butter_low", "name": "Peanut Butter", "category": "fat", "budget_tier": "low", "macro_per_100g": {"kcal": 588, "p": 25.0, "c": 20.0, "f": 50.0}, "portion": {"typical_g": 20, "min_g": 10, "max_g": 40, "step_g": 5}},
    {"id": "sunflower_seeds_low", "name": "Sunflower Seeds", "category": "fat", "budget_tier": "low", "macro_per_100g": {"kcal": 584, "p": 20.8, "c": 20.0, "f": 51.5}, "portion": {"typical_g": 20, "min_g": 10, "max_g": 40, "step_g": 5}},
    # Medium budget
    {"id": "chicken_breast", "name": "Chicken Breast", "category": "protein", "budget_tier": "medium", "macro_per_100g": {"kcal": 165, "p": 31.0, "c": 0.0, "f": 3.6}, "portion": {"typical_g": 150, "min_g": 80, "max_g": 250, "step_g": 10}},
    {"id": "eggs", "name": "Whole Eggs", "category": "protein", "budget_tier": "medium", "macro_per_100g": {"kcal": 143, "p": 12.6, "c": 0.7, "f": 9.5}, "portion": {"unit": "piece", "grams_per_piece": 50, "min_pieces": 2, "max_pieces": 4, "step_pieces": 1}},
    {"id": "greek_yogurt", "name": "Greek Yogurt 0%", "category": "protein", "budget_tier": "medium", "macro_per_100g": {"kcal": 59, "p": 10.3, "c": 3.6, "f": 0.4}, "portion": {"typical_g": 200, "min_g": 100, "max_g": 300, "step_g": 50}},
    {"id": "lean_beef", "name": "Lean Ground Beef", "category": "protein", "budget_tier": "medium", "macro_per_100g": {"kcal": 176, "p": 26.0, "c": 0.0, "f": 8.0}, "typical_portion_g": 150},
    {"id": "tofu", "name": "Firm Tofu", "category": "protein", "budget_tier": "medium", "macro_per_100g": {"kcal": 144, "p": 17.3, "c": 2.8, "f": 8.7}, "typical_portion_g": 180},
    {"id": "brown_rice", "name": "Brown Rice", "category": "carb", "budget_tier": "medium", "macro_per_100g": {"kcal": 123, "p": 2.7, "c": 25.6, "f": 1.0}, "portion": {"typical_g": 180, "min_g": 80, "max_g": 300, "step_g": 10}},
    {"id": "sweet_potato", "name": "Sweet Potato", "category": "carb", "budget_tier": "medium", "macro_per_100g": {"kcal": 86, "p": 1.6, "c": 20.1, "f": 0.1}, "typical_portion_g": 200},
    {"id": "wholegrain_pasta", "name": "Wholegrain Pasta", "category": "carb", "budget_tier": "medium", "macro_per_100g": {"kcal": 149, "p": 5.8, "c": 30.0, "f": 1.7}, "typical_portion_g": 180},
    {"id": "oats", "name": "Oats", "category": "carb", "budget_tier": "medium", "macro_per_100g": {"kcal": 379, "p": 13.2, "c": 67.7, "f": 6.5}, "portion": {"typical_g": 60, "min_g": 30, "max_g": 120, "step_g": 5}},
    {"id": "broccoli", "name": "Broccoli", "category": "veg", "budget_tier": "medium", "macro_per_100g": {"kcal": 34, "p": 2.8, "c": 6.6, "f": 0.4}, "typical_portion_g": 120},
    {"id": "spinach", "name": "Spinach", "category": "veg", "budget_tier": "medium", "macro_per_100g": {"kcal": 23, "p": 2.9, "c": 3.6, "f": 0.4}, "typical_portion_g": 100},
    {"id": "bell_pepper", "name": "Bell Pepper", "category": "veg", "budget_tier": "medium", "macro_per_100g": {"kcal": 31, "p": 1.0, "c": 6.0, "f": 0.3}, "typical_portion_g": 120},
    {"id": "olive_oil", "name": "Olive Oil", "category": "fat", "budget_tier": "medium", "macro_per_100g": {"kcal": 884, "p": 0.0, "c": 0.0, "f": 100.0}, "portion": {"typical_g": 10, "min_g": 5, "max_g": 20, "step_g": 5}},
    {"id": "avocado", "name": "Avocado", "category": "fat", "budget_tier": "medium", "macro_per_100g": {"kcal": 160, "p": 2.0, "c": 8.5, "f": 14.7}, "portion": {"typical_g": 70, "min_g": 30, "max_g": 150, "step_g": 10}},
    {"id": "almonds", "name": "Almonds", "category": "fat", "budget_tier": "medium", "macro_per_100g": {"kcal": 579, "p": 21.2, "c": 21.6, "f": 49.9}, "portion": {"typical_g": 25, "min_g": 10, "max_g": 50, "step_g": 5}},
    # High budget
    {"id": "salmon", "name": "Salmon Fillet", "category": "protein", "budget_tier": "high", "macro_per_100g": {"kcal": 208, "p": 20.4, "c": 0.0, "f": 13.4}, "portion": {"typical_g": 150, "min_g": 100, "max_g": 250, "step_g": 10}},
    {"id": "sirloin", "name": "Sirloin Steak", "category": "protein", "budget_tier": "high", "macro_per_100g": {"kcal": 183, "p": 27.0, "c": 0.0, "f": 8.0}, "typical_portion_g": 180},
    {"id": "shrimp", "name": "Shrimp", "category": "protein", "budget_tier": "high", "macro_per_100g": {"kcal": 99, "p": 24.0, "c": 0.2, "f": 0.3}, "typical_portion_g": 150},
    {"id": "whey_isolate", "name": "Whey Isolate", "category": "protein", "budget_tier": "high", "macro_per_100g": {"kcal": 370, "p": 90.0, "c": 2.0, "f": 1.0}, "portion": {"typical_g": 30, "min_g": 20, "max_g": 60, "step_g": 5}},
    {"id": "quinoa", "name": "Quinoa", "category": "carb", "budget_tier": "high", "macro_per_100g": {"kcal": 120, "p": 4.4, "c": 21.3, "f": 1.9}, "typical_portion_g": 180},
    {"id": "sourdough", "name": "Sourdough Bread", "category": "carb", "budget_tier": "high", "macro_per_100g": {"kcal": 274, "p": 10.8, "c": 51.9, "f": 2.4}, "portion": {"unit": "piece", "grams_per_piece": 40, "min_pieces": 1, "max_pieces": 4, "step_pieces": 1}},
    {"id": "basmati_rice", "name": "Basmati Rice", "category": "carb", "budget_tier": "high", "macro_per_100g": {"kcal": 121, "p": 3.5, "c": 25.2, "f": 0.4}, "typical_portion_g": 180},
    {"id": "asparagus", "name": "Asparagus", "category": "veg", "budget_tier": "high", "macro_per_100g": {"kcal": 20, "p": 2.2, "c": 3.9, "f": 0.1}, "typical_portion_g": 120},
    {"id": "kale", "name": "Kale", "category": "veg", "budget_tier": "high", "macro_per_100g": {"kcal": 49, "p": 4.3, "c": 8.8, "f": 0.9}, "typical_portion_g": 80},
    {"id": "green_beans", "name": "Green Beans", "category": "veg", "budget_tier": "high", "macro_per_100g": {"kcal": 31, "p": 1.8, "c": 7.0, "f": 0.2}, "typical_portion_g": 120},
    {"id": "walnuts", "name": "Walnuts", "category": "fat", "budget_tier": "high", "macro_per_100g": {"kcal": 654, "p": 15.2, "c": 13.7, "f": 65.2}, "portion": {"typical_g": 25, "min_g": 10, "max_g": 50, "step_g": 5}},
    {"id": "extra_virgin_olive_oil", "name": "Extra Virgin Olive Oil", "category": "fat", "budget_tier": "high", "macro_per_100g": {"kcal": 884, "p": 0.0, "c": 0.0, "f": 100.0}, "portion": {"typical_g": 10, "min_g": 5, "max_g": 20, "step_g": 5}},
    {"id": "macadamia", "name": "Macadamia Nuts", "category": "fat", "budget_tier": "high", "macro_per_100g": {"kcal": 718, "p": 7.9, "c": 13.8, "f": 75.8}, "portion": {"typical_g": 20, "min_g": 10, "max_g": 40, "step_g": 5}},
]
