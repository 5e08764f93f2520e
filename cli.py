#!/usr/bin/env python3
"""
Interactive meal planner shell.

Usage:
  python cli.py                 # use the configured database
  python cli.py --db meals.db   # use another database file
"""

import argparse
import logging
import sys

from adapters.console import ConsoleIO, LineIO
from adapters.db import Database, SQLiteMealRepository, SQLitePlanRepository
from adapters.files import ShoppingListWriter
from config import settings
from domain.catalog import Catalog
from domain.entities import MealCategory, WeeklyPlan
from domain.exceptions import (
    MealPlannerError,
    NotPlannedError,
    StorageError,
    ValidationError,
)
from domain.planner import Planner
from domain.shopping import ShoppingListAggregator
from domain.validators import (
    is_valid_category,
    is_valid_ingredient_list,
    is_valid_token,
    normalize,
)

logger = logging.getLogger(__name__)

MENU_PROMPT = "What would you like to do (add, show, plan, list plan, save, exit)?"
WRONG_CATEGORY = "Wrong meal category! Choose from: breakfast, lunch, dinner."
WRONG_FORMAT = "Wrong format. Use letters only!"


class MealPlannerShell:
    """Menu loop dispatching user commands to the catalog and planner."""

    def __init__(
        self,
        catalog: Catalog,
        planner: Planner,
        plan_repo: SQLitePlanRepository,
        aggregator: ShoppingListAggregator,
        writer: ShoppingListWriter,
        io: LineIO,
    ):
        self.catalog = catalog
        self.planner = planner
        self.plan_repo = plan_repo
        self.aggregator = aggregator
        self.writer = writer
        self.io = io
        self.commands = {
            "add": self.add_meal,
            "show": self.show_meals,
            "plan": self.plan_meals,
            "list plan": self.list_plan,
            "save": self.save_shopping_list,
        }

    def run(self) -> None:
        """Serve commands until 'exit' or end of input."""
        while True:
            try:
                choice = normalize(self.io.read_line(MENU_PROMPT))
            except EOFError:
                return
            if choice == "exit":
                self.io.write("Bye!")
                return
            command = self.commands.get(choice)
            if command is None:
                self.io.write("Invalid option. Please try again.")
                continue
            try:
                command()
            except EOFError:
                return
            except MealPlannerError as e:
                logger.error(f"Command {choice!r} failed: {e}")
                self.io.write(f"Error: {e}")

    def _prompt(self, prompt: str, is_valid, error: str) -> str:
        value = normalize(self.io.read_line(prompt))
        while not is_valid(value):
            value = normalize(self.io.read_line(error))
        return value

    def add_meal(self) -> None:
        category = self._prompt(
            "Which meal do you want to add (breakfast, lunch, dinner)?",
            is_valid_category,
            WRONG_CATEGORY,
        )
        name = self._prompt("Input the meal's name:", is_valid_token, WRONG_FORMAT)
        ingredients = self._prompt(
            "Input the ingredients:", is_valid_ingredient_list, WRONG_FORMAT
        )
        try:
            self.catalog.add(category, name, ingredients)
        except ValidationError as e:
            self.io.write(str(e))
            return
        self.io.write("The meal has been added!")

    def show_meals(self) -> None:
        category = self._prompt(
            "Which category do you want to print (breakfast, lunch, dinner)?",
            is_valid_category,
            WRONG_CATEGORY,
        )
        meals = self.catalog.list_by_category(category)
        if not meals:
            self.io.write("No meals found.")
            return
        self.io.write(f"Category: {category}")
        self.io.write()
        for meal in meals:
            for line in meal.describe():
                self.io.write(line)
            self.io.write()

    def plan_meals(self) -> None:
        plan = self.planner.plan_and_commit(self.io)
        self.print_plan(plan)

    def list_plan(self) -> None:
        plan = self.plan_repo.load()
        if plan is None or plan.is_empty():
            self.io.write("Database does not contain any meal plans.")
            return
        self.print_plan(plan)

    def save_shopping_list(self) -> None:
        try:
            shopping_list = self.aggregator.aggregate_current()
        except NotPlannedError:
            self.io.write("Unable to save. Plan your meals first.")
            return
        filename = self.io.read_line("Input a filename:").strip()
        try:
            self.writer.write(filename, self.aggregator.render(shopping_list))
        except StorageError:
            self.io.write("An error occurred while saving the file.")
            return
        self.io.write("Saved!")

    def print_plan(self, plan: WeeklyPlan) -> None:
        for day in plan.days():
            self.io.write(day.value)
            for category in MealCategory:
                meal = plan.get(day, category)
                if meal is not None:
                    self.io.write(f"{category.label}: {meal.name}")
            self.io.write()


def build_shell(db: Database, io: LineIO) -> MealPlannerShell:
    """Wire repositories, catalog and services into a shell."""
    catalog = Catalog(SQLiteMealRepository(db))
    plan_repo = SQLitePlanRepository(db, catalog)
    return MealPlannerShell(
        catalog=catalog,
        planner=Planner(catalog, plan_repo),
        plan_repo=plan_repo,
        aggregator=ShoppingListAggregator(
            plan_repo, per_slot=settings.shopping_list_per_slot
        ),
        writer=ShoppingListWriter(),
        io=io,
    )


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Interactive meal planner")
    parser.add_argument("--db", default=settings.sqlite_db, help="SQLite database file")
    args = parser.parse_args(argv)

    # Logs go to a file so they do not interleave with the prompts
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        filename=None if settings.debug else settings.log_file,
    )

    try:
        db = Database(args.db)
    except Exception as e:
        print(f"Error opening database {args.db}: {e}")
        return 1

    with db:
        build_shell(db, ConsoleIO()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
