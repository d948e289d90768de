import contextlib
import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..models.recipe import Recipe
from ..services.recipe_parser import RecipeParser, RecipeSerializer
from .errors import IndexOutOfRangeError, InvalidPathError, IOFailureError

log = logging.getLogger(__name__)

ChangeListener = Callable[["RecipeRepository"], None]


def _resolve(path: Union[str, os.PathLike]) -> Path:
    if not isinstance(path, (str, os.PathLike)):
        raise InvalidPathError(path, "expected a string or path-like object")
    raw = os.fspath(path)
    if not isinstance(raw, str):
        raise InvalidPathError(path, "expected a text path")
    if not raw.strip():
        raise InvalidPathError(path, "path is empty")
    if "\x00" in raw:
        raise InvalidPathError(path, "path contains a NUL character")
    try:
        return Path(raw).resolve()
    except (OSError, RuntimeError, ValueError) as e:
        raise InvalidPathError(path, str(e)) from e


class RecipeRepository:
    """
    Holds the recipes of one recipe file.

    The repository owns the only mutable copies of its recipes: everything
    handed out is a clone, and deleting by a clone removes the equal original.
    Listeners registered with `subscribe` are called after every load and
    after every delete that removed a recipe.
    """

    def __init__(
        self,
        path: Union[str, os.PathLike],
        *,
        encoding: str = "utf-8-sig",
        save_encoding: str = "utf-8",
    ) -> None:
        self._path = _resolve(path)
        self.encoding = encoding
        self.save_encoding = save_encoding
        self._recipes: List[Recipe] = []
        self._modified = False
        self._listeners: List[ChangeListener] = []
        # Re-entrant: delete(index) delegates to delete(recipe) and listeners
        # may read from the repository while being notified.
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_modified(self) -> bool:
        """True when recipes were deleted since the last load or save."""
        return self._modified

    @property
    def count(self) -> int:
        return len(self._recipes)

    def __len__(self) -> int:
        return self.count

    def subscribe(self, listener: ChangeListener) -> ChangeListener:
        with self._lock:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: ChangeListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self) -> None:
        # Every listener runs even if an earlier one raises
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                log.exception(f"Recipe change listener {listener!r} failed")

    def load(self) -> None:
        """
        Replace the recipes held with the ones read from the file, sorted by
        name. Nothing changes when reading or parsing fails.
        """
        with self._lock:
            log.debug(f"Loading recipes from {self._path}")
            try:
                with open(self._path, "r", encoding=self.encoding) as f:
                    recipes = RecipeParser.parse(f, source=str(self._path))
            except (OSError, UnicodeError) as e:
                raise IOFailureError(str(self._path), "read", str(e)) from e

            self._recipes = recipes
            self._modified = False
            log.info(f"Loaded {len(recipes)} recipes from {self._path}")
            self._notify()

    def save(self) -> None:
        """
        Write all recipes to the file in their current order.

        The text goes to a temporary file next to the target which then
        replaces it, so a failed save leaves the previous file in place.
        """
        with self._lock:
            try:
                self._write_atomic()
            except (OSError, UnicodeError) as e:
                raise IOFailureError(str(self._path), "write", str(e)) from e

            self._modified = False
            log.info(f"Saved {len(self._recipes)} recipes to {self._path}")

    def _write_atomic(self) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            dir=self._path.parent,
        )
        try:
            with open(fd, "w", encoding=self.save_encoding, newline="\n") as f:
                RecipeSerializer.write(self._recipes, f)
            os.chmod(tmp_name, self._target_mode())
            os.replace(tmp_name, self._path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise

    def _target_mode(self) -> int:
        """Mode of the existing file, or what a plain open() would create."""
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def get_all(self) -> List[Recipe]:
        with self._lock:
            return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        with self._lock:
            self._check_index(index)
            return self._recipes[index].clone()

    def delete(self, recipe: Union[Recipe, int, None]) -> None:
        """
        Delete a recipe given by index or by value.

        A value may be a copy from `get_all`/`get_at`; the equal recipe held
        by the repository is removed. `None` or a recipe that is not held is
        ignored.
        """
        with self._lock:
            if isinstance(recipe, bool):
                raise TypeError("delete() takes a Recipe or an int index, not bool")
            if isinstance(recipe, int):
                self._check_index(recipe)
                recipe = self._recipes[recipe]
            elif recipe is not None and not isinstance(recipe, Recipe):
                raise TypeError(
                    f"delete() takes a Recipe or an int index, not {type(recipe).__name__}"
                )

            position = self._find(recipe)
            if position is None:
                log.debug(f"Nothing to delete for {recipe!r}")
                return

            removed = self._recipes.pop(position)
            self._modified = True
            log.info(f"Deleted recipe '{removed.name}'")
            self._notify()

    def _find(self, recipe: Optional[Recipe]) -> Optional[int]:
        if recipe is None:
            return None
        for i, owned in enumerate(self._recipes):
            if owned is recipe:
                return i
        for i, owned in enumerate(self._recipes):
            if owned == recipe:
                return i
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._recipes):
            raise IndexOutOfRangeError(index, len(self._recipes))
