import io

from backend.filedrecipes.models.recipe import Ingredient, Recipe
from backend.filedrecipes.views.recipe_view import RecipeView


def make_recipe(name="Pannkakor"):
    return Recipe(
        name=name,
        ingredients=[Ingredient(amount="2", measure="dl", name="mjöl")],
        instructions=["Blanda allt.", "", "Stek."],
    )


def test_render():
    lines = RecipeView(width=20).render(make_recipe()).splitlines()

    assert lines[0] == "╔" + "═" * 18 + "╗"
    assert lines[1] == "║ " + "Pannkakor".center(16) + " ║"
    assert lines[3:] == [
        "",
        "Ingredienser",
        "=============",
        "2 dl mjöl",
        "",
        "Instruktioner",
        "==============",
        "Blanda allt.",
        "",
        "Stek.",
    ]


def test_header_grows_with_long_names():
    panel = RecipeView(width=10).header_panel("Kladdkaka med grädde")
    assert panel[1] == "║ Kladdkaka med grädde ║"
    assert len({len(line) for line in panel}) == 1


def test_show_one_and_many():
    out = io.StringIO()
    view = RecipeView(stream=out)

    view.show(make_recipe())
    single = out.getvalue()
    assert single == view.render(make_recipe())

    out.seek(0)
    out.truncate()
    view.show([make_recipe("A"), make_recipe("B")])
    assert out.getvalue() == view.render(make_recipe("A")) + "\n" + view.render(make_recipe("B"))
