"""Tests for selector categories and state."""

from objkit.selector import ORDER, Category, SelectorState


class TestCategory:
    def test_order(self):
        assert [c.label for c in ORDER] == [
            "element",
            "id",
            "class",
            "attribute",
            "pseudo-class",
            "pseudo-element",
        ]

    def test_limited(self):
        limited = {c for c in Category if c.limited}
        assert limited == {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}

    def test_render(self):
        assert Category.ELEMENT.render("a") == "a"
        assert Category.ID.render("main") == "#main"
        assert Category.CLASS.render("x") == ".x"
        assert Category.ATTRIBUTE.render("href") == "[href]"
        assert Category.PSEUDO_CLASS.render("hover") == ":hover"
        assert Category.PSEUDO_ELEMENT.render("after") == "::after"


class TestSelectorState:
    def test_empty(self):
        state = SelectorState()
        assert state.used == []
        assert state.seen_once == set()
        assert state.text == ""
        assert state.highest_rank == -1

    def test_highest_rank(self):
        state = SelectorState(used=[Category.ELEMENT, Category.ATTRIBUTE])
        assert state.highest_rank == 3

    def test_reset(self):
        state = SelectorState(
            used=[Category.ID], seen_once={Category.ID}, text="#main"
        )
        state.reset()
        assert state == SelectorState()
