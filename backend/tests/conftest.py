import pytest

PANCAKES = (
    "[Recept]\n"
    "Pannkakor\n"
    "[Ingredienser]\n"
    "2;dl;mjöl\n"
    "3;st;ägg\n"
    "[Instruktioner]\n"
    "Blanda allt.\n"
    "Stek.\n"
    "[Recept]\n"
    "Äppelpaj\n"
    "[Ingredienser]\n"
    "4;st;äpplen\n"
    "[Instruktioner]\n"
    "Skala äpplena.\n"
)


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text(PANCAKES, encoding="utf-8")
    return path


@pytest.fixture
def pancakes_text():
    return PANCAKES
