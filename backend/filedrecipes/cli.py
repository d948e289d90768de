import argparse
import logging
import sys
from typing import List, Optional

from .core.config import get_settings
from .core.errors import RecipeRepositoryError
from .core.repository import RecipeRepository
from .views.recipe_view import RecipeView

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="filedrecipes", description="Browse a recipe file")
    parser.add_argument("--file", default=settings.recipes_path, help="recipe file to open")
    parser.add_argument("--log-level", default=settings.log_level)

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="list recipe names")
    show = commands.add_parser("show", help="show one recipe, or all of them")
    show.add_argument("index", type=int, nargs="?")
    delete = commands.add_parser("delete", help="delete a recipe and save the file")
    delete.add_argument("index", type=int)
    return parser


def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    repository = RecipeRepository(
        args.file,
        encoding=settings.recipes_encoding,
        save_encoding=settings.save_encoding,
    )
    repository.load()

    if args.command == "list":
        for i, recipe in enumerate(repository.get_all()):
            print(f"{i}: {recipe.name}")
    elif args.command == "show":
        view = RecipeView()
        if args.index is None:
            view.show(repository.get_all())
        else:
            view.show(repository.get_at(args.index))
    elif args.command == "delete":
        name = repository.get_at(args.index).name
        repository.delete(args.index)
        repository.save()
        print(f"Deleted '{name}'")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        run(args)
    except RecipeRepositoryError as e:
        log.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
