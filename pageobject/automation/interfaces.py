"""
Abstract interfaces consumed by PageObject.

PageObject is generic over the element type it accepts. Anything that can
turn positional placeholders into a Selenium locator can describe an
element, so page classes are free to model their controls however they like.
"""

from abc import ABC, abstractmethod
from typing import Tuple


Locator = Tuple[str, str]


class PageElement(ABC):
    """
    A logical UI control that can be resolved into a locator.

    Implementations expose two attributes used in diagnostics:

    - ``type``: Selenium locator strategy (``By.ID``, ``By.XPATH`` ...)
    - ``expression``: locator expression, possibly a template with
      positional placeholders such as ``"//tr[{0}]/td[{1}]"``
    """

    type: str
    expression: str

    @abstractmethod
    def get_by(self, *placeholders: str) -> Locator:
        """
        Materialize the locator for this element.

        Args:
            *placeholders: Values substituted into the expression template
                in order

        Returns:
            ``(strategy, expression)`` tuple accepted by ``find_element``

        Raises:
            ValueError: If the template needs more placeholders than given
        """
        pass


class DropDownValue(ABC):
    """A value that can be picked from a select element by its visible text."""

    @property
    @abstractmethod
    def value(self) -> str:
        """Visible text of the option."""
        pass


class PlaceholdersProvider(ABC):
    """Supplies the placeholders for an element lookup."""

    @property
    @abstractmethod
    def placeholders(self) -> Tuple[str, ...]:
        """Placeholders in template order."""
        pass
