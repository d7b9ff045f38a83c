"""Category selection and active-category derivation."""

from collections.abc import Iterable, Sequence

from ..categories import CATEGORY_ORDER, TestCategory
from ..schema.models import GenerationResult


class SelectionState:
    """Which categories the user wants generated and shown.

    All categories start selected. Any number, including zero, may be
    selected; generation is blocked by the caller when none are.
    """

    def __init__(self, selected: Iterable[TestCategory] | None = None):
        chosen = set(CATEGORY_ORDER if selected is None else selected)
        self._flags: dict[TestCategory, bool] = {c: c in chosen for c in CATEGORY_ORDER}

    @classmethod
    def none(cls) -> "SelectionState":
        return cls(())

    def __getitem__(self, category: TestCategory) -> bool:
        return self._flags[category]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionState):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        chosen = ", ".join(c.value for c in self.selected())
        return f"SelectionState([{chosen}])"

    def as_dict(self) -> dict[TestCategory, bool]:
        return dict(self._flags)

    def toggle(self, category: TestCategory) -> None:
        """Flip one category."""
        self._flags[category] = not self._flags[category]

    def toggle_all(self) -> None:
        """Deselect everything if all are selected, otherwise select everything."""
        value = not self.all_selected
        for category in CATEGORY_ORDER:
            self._flags[category] = value

    @property
    def all_selected(self) -> bool:
        return all(self._flags.values())

    @property
    def any_selected(self) -> bool:
        return any(self._flags.values())

    def selected(self) -> list[TestCategory]:
        """Selected categories in canonical order."""
        return visible_categories(self)

    def selected_names(self) -> list[str]:
        return [c.value for c in self.selected()]


def visible_categories(selection: SelectionState) -> list[TestCategory]:
    """Categories to show, in canonical order."""
    return [c for c in CATEGORY_ORDER if selection[c]]


def reconcile_active(
    active: TestCategory | None, visible: Sequence[TestCategory]
) -> TestCategory | None:
    """Keep the active category if still visible, else fall back to the first.

    Returns:
        A member of visible, or None when nothing is visible.
    """
    if active is not None and active in visible:
        return active
    return visible[0] if visible else None


def initial_active(
    selection: SelectionState, result: GenerationResult
) -> TestCategory | None:
    """First category that is both selected and present in the result."""
    for category in CATEGORY_ORDER:
        if selection[category] and result.has_section(category):
            return category
    return None
