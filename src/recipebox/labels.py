from __future__ import annotations

APP_TITLE = "### Recipe book ###"
SAMPLES_LOADED = "Default recipes loaded successfully!"
WELCOME = "Welcome! Choose a user:"
ROLE_MENU = (
    "1. Admin user",
    "2. Home cook user",
    "3. Exit the program",
)
GOODBYE = "Closing the program. Thank you for using Recipe book!"
INVALID_ROLE = "Invalid choice. Please try again."

ADMIN_MENU = (
    "1. Show all recipes",
    "2. Add a new recipe",
    "3. Search recipes by ingredients",
    "4. Search recipes by category",
    "5. Search recipes by dietary info",
    "6. Exit and return to the user menu",
)
ENTER_CHOICE = "Enter your choice: "
INVALID_CHOICE = "Invalid choice, please try again."
RETURNING = "Returning to the main menu."

PROMPT_NAME = "Enter the recipe name: "
PROMPT_CATEGORY = "Enter the category (e.g. main course, dessert): "
PROMPT_INGREDIENTS = "Enter the ingredients (separated by commas): "
PROMPT_INSTRUCTIONS = "Enter the instructions: "
PROMPT_DIETARY_ADD = "Enter dietary info (e.g. gluten-free, dairy-free) or leave empty: "
PROMPT_DIETARY_SEARCH = "Enter dietary info (e.g. gluten-free, dairy-free, vegan): "
RECIPE_ADDED = "Recipe added successfully!"
NOT_FOUND = "No recipes found."
DEFAULT_SEPARATOR = "-" * 23

AVAILABLE_RECIPES = "Available recipes:"
BROWSE_HINTS = (
    "Choose a recipe number to see its details and instructions.",
    "You can also enter 0 to return to the main menu.",
)
PROMPT_RECIPE_NUMBER = "Enter a recipe number or 0: "
INVALID_INPUT = "Invalid input, please try again."
INVALID_RECIPE_NUMBER = "Invalid recipe number, please try again."
SELECTED_RECIPE = "### Selected recipe ###"
INGREDIENTS_FOR = "Ingredients for recipe '{name}':"
STEPS_FOR = "Step-by-step instructions for recipe '{name}':"
PROMPT_ANOTHER = "Would you like to choose another recipe? (y/n): "
NEGATIVE_ANSWER = "n"
